from src.core.errors import (
    LAlgebraError, InvalidAlgebra, CrossAlgebraMismatch, NotASubset,
    NotAnIdeal, InvalidAction, CatalogLookupFailure,
)
from src.core.validator import check_l_algebra
from src.core.element import (
    Element, product_of_sets, right_multiply_set, left_multiply_set, upset, downset,
)
from src.core.algebra import LAlgebra, elements, logical_unit, random_element

__all__ = [
    "LAlgebraError", "InvalidAlgebra", "CrossAlgebraMismatch", "NotASubset",
    "NotAnIdeal", "InvalidAction", "CatalogLookupFailure",
    "check_l_algebra", "LAlgebra", "Element",
    "elements", "logical_unit", "random_element",
    "product_of_sets", "right_multiply_set", "left_multiply_set", "upset", "downset",
]
