from src.solvers.z3_solver import FinderResult, LAlgebraSpectrum, Z3LAlgebraFinder
from src.solvers.parallel import parallel_property_profiles

__all__ = [
    "Z3LAlgebraFinder", "FinderResult", "LAlgebraSpectrum", "parallel_property_profiles",
]
