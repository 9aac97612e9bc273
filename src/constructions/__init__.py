from src.constructions.products import (
    direct_product, direct_product_of, is_action, pair_index, semidirect_product,
    split_index, trivial_algebra,
)
from src.constructions.normal_form import normal_form, normal_form_permutation

__all__ = [
    "direct_product", "direct_product_of", "trivial_algebra", "pair_index",
    "split_index", "is_action", "semidirect_product", "normal_form",
    "normal_form_permutation",
]
