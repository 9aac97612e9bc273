from src.properties.oracle import (
    PROPERTIES, is_abelian, is_cl, is_discrete, is_dual_bck, is_hilbert, is_kl,
    is_linear, is_prime, is_prime_element, is_regular, is_semiregular, is_sharp,
    is_symmetric, prime_elements, property_profile,
)

__all__ = [
    "PROPERTIES", "property_profile", "prime_elements", "is_prime_element",
    "is_sharp", "is_symmetric", "is_abelian", "is_linear", "is_discrete",
    "is_semiregular", "is_regular", "is_hilbert", "is_dual_bck", "is_kl",
    "is_cl", "is_prime",
]
