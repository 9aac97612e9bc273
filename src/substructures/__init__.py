from src.substructures.membership import (
    IDEAL_VARIANTS, is_ideal, is_invariant, is_prime_ideal, is_subalgebra,
)
from src.substructures.closure import (
    ideal_generated_by, ideal_product, ideals, prime_spectrum, spec,
    subalgebra_generated_by, subalgebras,
)
from src.substructures.morphisms import automorphisms, endomorphisms, is_morphism

__all__ = [
    "IDEAL_VARIANTS", "is_subalgebra", "is_invariant", "is_ideal", "is_prime_ideal",
    "subalgebra_generated_by", "ideal_generated_by", "ideal_product",
    "ideals", "subalgebras", "prime_spectrum", "spec",
    "is_morphism", "endomorphisms", "automorphisms",
]
