"""Tests for subalgebras, ideals, closures, spectra and morphisms."""

import pytest

from src.core.algebra import LAlgebra
from src.core.errors import CrossAlgebraMismatch, NotAnIdeal, NotASubset
from src.constructions.products import direct_product_of
from src.substructures.closure import (
    ideal_generated_by, ideal_product, ideals, prime_spectrum, spec,
    subalgebra_generated_by, subalgebras,
)
from src.substructures.membership import (
    is_ideal, is_invariant, is_prime_ideal, is_subalgebra,
)
from src.substructures.morphisms import automorphisms, endomorphisms, is_morphism

A2 = [[2, 2], [1, 2]]
# Chain 2 < 1 < 3
B3 = [[3, 1, 3], [3, 3, 3], [1, 2, 3]]
# 1 and 2 incomparable, 1·2 = 2 and 2·1 = 1
C3 = [[3, 2, 3], [1, 3, 3], [1, 2, 3]]
# 1 and 2 incomparable, 1·2 = 2·1 = 1
D3 = [[3, 1, 3], [1, 3, 3], [1, 2, 3]]


def subset(a, *values):
    return frozenset(a.element(v) for v in values)


def values(sets):
    return [sorted(x.value for x in s) for s in sets]


@pytest.fixture
def b3():
    return LAlgebra(B3)


@pytest.fixture
def c3():
    return LAlgebra(C3)


class TestMembership:
    def test_subalgebra(self, b3):
        assert is_subalgebra(subset(b3, 1, 3), b3)
        assert is_subalgebra(subset(b3, 2, 3), b3)
        assert is_subalgebra(subset(b3, 3), b3)

    def test_subalgebra_needs_unit(self, b3):
        assert not is_subalgebra(subset(b3, 1), b3)

    def test_subalgebra_accepts_lists(self, b3):
        assert is_subalgebra([b3.element(1), b3.element(3)], b3)

    def test_foreign_elements(self, b3):
        other = LAlgebra(B3)
        foreign = [other.element(3)]
        with pytest.raises(NotASubset):
            is_subalgebra(foreign, b3)
        with pytest.raises(NotASubset):
            is_invariant(foreign, b3)
        with pytest.raises(NotASubset):
            is_ideal(foreign, b3)

    def test_invariant(self, b3, c3):
        assert is_invariant(subset(b3, 1, 3), b3)
        # 1·2 = 1
        assert not is_invariant(subset(b3, 2, 3), b3)
        assert not is_invariant(subset(b3, 1), b3)
        assert is_invariant(subset(c3, 2, 3), c3)

    def test_ideal(self, b3, c3):
        assert is_ideal(subset(b3, 3), b3)
        assert is_ideal(subset(b3, 1, 2, 3), b3)
        # 1·2 = 1 lies in {1, 3} but 2 does not
        assert not is_ideal(subset(b3, 1, 3), b3)
        assert is_ideal(subset(c3, 1, 3), c3)
        assert is_ideal(subset(c3, 2, 3), c3)

    def test_ideal_needs_unit(self, c3):
        assert not is_ideal(subset(c3, 1), c3)

    def test_ideal_variants_differ(self):
        d3 = LAlgebra(D3)
        s = subset(d3, 2, 3)
        # 1·2 = 1 is outside, 1·(2·1) = 3 is inside
        assert not is_ideal(s, d3, variant="and")
        assert is_ideal(s, d3, variant="or")

    def test_unknown_variant(self, b3):
        with pytest.raises(ValueError):
            is_ideal(subset(b3, 3), b3, variant="xor")


class TestSubalgebraClosure:
    def test_generated_by_one_element(self, b3):
        assert subalgebra_generated_by([b3.element(1)], b3) == subset(b3, 1, 3)

    def test_generated_by_everything(self, c3):
        assert subalgebra_generated_by(subset(c3, 1, 2), c3) == subset(c3, 1, 2, 3)

    def test_empty_seed(self, b3):
        assert subalgebra_generated_by([], b3) == subset(b3, 3)

    def test_result_is_subalgebra(self, b3, c3):
        for a in (b3, c3):
            for x in a:
                assert is_subalgebra(subalgebra_generated_by([x], a), a)

    def test_enumeration(self, c3):
        assert values(subalgebras(c3)) == [[3], [1, 3], [2, 3], [1, 2, 3]]


class TestIdealClosure:
    def test_unit_generates_itself(self, b3, c3):
        for a in (b3, c3, LAlgebra(A2)):
            u = a.logical_unit()
            assert ideal_generated_by({u}, a) == frozenset([u])

    def test_empty_seed(self, c3):
        assert ideal_generated_by([], c3) == subset(c3, 3)

    def test_single_element_argument(self, c3):
        assert ideal_generated_by(c3.element(1), c3) == subset(c3, 1, 3)
        assert ideal_generated_by(c3.element(2), c3) == subset(c3, 2, 3)

    def test_pulls_in_elements(self, b3):
        # 1·2 = 1 forces 2 into the ideal
        assert ideal_generated_by([b3.element(1)], b3) == subset(b3, 1, 2, 3)

    def test_foreign_seed(self, b3):
        with pytest.raises(NotASubset):
            ideal_generated_by([LAlgebra(B3).element(1)], b3)


class TestIdealLattice:
    def test_ideals_chain(self, b3):
        assert values(ideals(b3)) == [[3], [1, 2, 3]]

    def test_ideals_incomparable(self, c3):
        assert values(ideals(c3)) == [[3], [1, 3], [2, 3], [1, 2, 3]]

    def test_ideals_variant(self):
        d3 = LAlgebra(D3)
        assert values(ideals(d3, "and")) == [[3], [1, 2, 3]]
        assert values(ideals(d3, "or")) == [[3], [2, 3], [1, 2, 3]]

    def test_ideal_product(self, c3):
        result = ideal_product(subset(c3, 2, 3), subset(c3, 1, 3))
        assert result == subset(c3, 1, 3)

    def test_ideal_product_with_whole(self, b3):
        whole = subset(b3, 1, 2, 3)
        assert ideal_product(whole, subset(b3, 3)) == subset(b3, 3)

    def test_ideal_product_empty(self, b3):
        with pytest.raises(ValueError):
            ideal_product([], subset(b3, 3))

    def test_ideal_product_not_ideal(self, b3):
        with pytest.raises(NotAnIdeal):
            ideal_product(subset(b3, 1, 3), subset(b3, 3))

    def test_ideal_product_mixed_algebras(self, b3):
        other = LAlgebra(B3)
        with pytest.raises(CrossAlgebraMismatch):
            ideal_product(subset(b3, 3), subset(other, 3))

    def test_prime_ideals(self, b3, c3):
        assert is_prime_ideal(subset(b3, 3), b3)
        assert not is_prime_ideal(subset(b3, 1, 2, 3), b3)
        assert is_prime_ideal(subset(c3, 1, 3), c3)
        # {1, 3}·{3} = {2, 3} is not inside {3}
        assert not is_prime_ideal(subset(c3, 3), c3)

    def test_non_ideal_is_not_prime(self, b3):
        assert not is_prime_ideal(subset(b3, 1, 3), b3)

    def test_spectrum(self, b3, c3):
        assert values(prime_spectrum(b3)) == [[3]]
        assert values(spec(c3)) == [[1, 3], [2, 3]]

    def test_two_element_spectrum(self):
        a = LAlgebra(A2)
        assert values(ideals(a)) == [[2], [1, 2]]
        assert values(spec(a)) == [[2]]


class TestMorphisms:
    def test_identity(self, c3):
        assert is_morphism([1, 2, 3], c3, c3)

    def test_swap(self, c3):
        assert is_morphism([2, 1, 3], c3, c3)

    def test_not_a_morphism(self, c3):
        assert not is_morphism([1, 1, 3], c3, c3)

    def test_bad_shape(self, c3):
        assert not is_morphism([1, 2], c3, c3)
        assert not is_morphism([1, 2, 4], c3, c3)

    def test_between_algebras(self, c3):
        a2 = LAlgebra(A2)
        # collapse onto the unit
        assert is_morphism([2, 2, 2], c3, a2)

    def test_endomorphisms_two_element(self):
        a = LAlgebra(A2)
        assert endomorphisms(a) == [(1, 2), (2, 2)]
        assert automorphisms(a) == [(1, 2)]

    def test_endomorphisms_fix_unit(self, c3):
        ends = endomorphisms(c3)
        assert (1, 2, 3) in ends
        assert (2, 1, 3) in ends
        assert (3, 3, 3) in ends
        assert all(f[2] == 3 for f in ends)
        assert all(is_morphism(f, c3, c3) for f in ends)

    def test_automorphism_counts(self, b3, c3):
        assert automorphisms(b3) == [(1, 2, 3)]
        assert automorphisms(c3) == [(1, 2, 3), (2, 1, 3)]

    def test_automorphisms_of_cube(self):
        # permutations of the three atoms of the eight-element Boolean algebra
        cube = direct_product_of(*[LAlgebra(A2)] * 3)
        autos = automorphisms(cube)
        assert len(autos) == 6
        assert autos[0] == tuple(range(1, 9))

    def test_unit_not_last(self):
        # C3 relabelled with the unit first
        a = LAlgebra([[1, 2, 3], [1, 1, 3], [1, 2, 1]])
        assert automorphisms(a) == [(1, 2, 3), (1, 3, 2)]
