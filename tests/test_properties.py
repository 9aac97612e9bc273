"""Tests for the structural property predicates."""

import pytest

from src.core.algebra import LAlgebra
from src.properties.oracle import (
    PROPERTIES, is_abelian, is_cl, is_discrete, is_dual_bck, is_hilbert, is_kl,
    is_linear, is_prime, is_prime_element, is_regular, is_semiregular, is_sharp,
    is_symmetric, prime_elements, property_profile,
)

A2 = [[2, 2], [1, 2]]
B3 = [[3, 1, 3], [3, 3, 3], [1, 2, 3]]
C3 = [[3, 2, 3], [1, 3, 3], [1, 2, 3]]


@pytest.fixture
def a2():
    return LAlgebra(A2)


@pytest.fixture
def b3():
    return LAlgebra(B3)


@pytest.fixture
def c3():
    return LAlgebra(C3)


class TestTwoElementAlgebra:
    """The two-element algebra is classical implication on {false, true}."""

    def test_profile(self, a2):
        assert property_profile(a2) == {
            "sharp": True,
            "symmetric": True,
            "abelian": False,
            "linear": True,
            "discrete": True,
            "semiregular": True,
            "regular": True,
            "hilbert": True,
            "dualBCK": False,
            "KL": True,
            "CL": True,
            "prime": True,
        }

    def test_prime(self, a2):
        assert is_prime(a2)
        assert [x.value for x in prime_elements(a2)] == [1]


class TestChain:
    def test_prime_fails(self, b3):
        # 1·2 = 1 and 1 is not below 2
        assert not is_prime(b3)
        assert is_prime_element(b3.element(1))
        assert not is_prime_element(b3.element(2))
        assert [x.value for x in prime_elements(b3)] == [1]

    def test_unit_is_not_prime(self, b3):
        assert not is_prime_element(b3.logical_unit())

    def test_linear_not_discrete(self, b3):
        assert is_linear(b3)
        assert not is_discrete(b3)

    def test_not_sharp(self, b3):
        # 1·2 = 1 but 1·(1·2) = 3
        assert not is_sharp(b3)

    def test_not_hilbert(self, b3):
        assert not is_hilbert(b3)

    def test_symmetric_and_kl(self, b3):
        assert is_symmetric(b3)
        assert is_kl(b3)


class TestIncomparablePair:
    def test_discrete_not_linear(self, c3):
        assert is_discrete(c3)
        assert not is_linear(c3)

    def test_sharp_and_symmetric(self, c3):
        assert is_sharp(c3)
        assert is_symmetric(c3)

    def test_prime(self, c3):
        assert is_prime(c3)
        assert [x.value for x in prime_elements(c3)] == [1, 2]


class TestRegistry:
    def test_all_predicates_registered(self):
        assert set(PROPERTIES) == {
            "sharp", "symmetric", "abelian", "linear", "discrete", "semiregular",
            "regular", "hilbert", "dualBCK", "KL", "CL", "prime",
        }

    def test_profile_matches_predicates(self, b3):
        profile = property_profile(b3)
        for name, check in PROPERTIES.items():
            assert profile[name] == check(b3)

    def test_regular_implies_semiregular(self, a2, b3, c3):
        for a in (a2, b3, c3):
            if is_regular(a):
                assert is_semiregular(a)

    def test_trivial_algebra_has_everything(self):
        t = LAlgebra([[1]])
        for check in (is_sharp, is_symmetric, is_abelian, is_linear, is_discrete,
                      is_semiregular, is_regular, is_hilbert, is_dual_bck, is_kl,
                      is_cl, is_prime):
            assert check(t)
