"""
Numerical building blocks shared by the analysis modules.

    tolerances: SolverTolerance defaults for interval location
    optimization: Brent bounded minimizer
"""
