"""
Tests for binary splitting of the Chudnovsky series.

Checked properties:
1. Leaf triples equal the closed form
2. combine() is associative, so any split point gives the same triple
3. Invalid ranges and midpoints raise InvalidRange
4. Q and R grow at least linearly in bit length
5. R / Q equals the exact rational partial sum of the series
"""

from fractions import Fraction
from math import factorial

import pytest

from pi_chudnovsky.constants import DEFAULT_CONSTANTS, ChudnovskyConstants
from pi_chudnovsky.errors import InvalidRange
from pi_chudnovsky.split import (
    IDENTITY,
    Triple,
    binary_split,
    combine,
    floor_midpoint,
    leaf_triple,
)

C1 = 10939058860032000
C2 = 545140134
C3 = 13591409


def p_direct(a):
    return -(6 * a - 5) * (2 * a - 1) * (6 * a - 1)


# =============================================================================
# Leaf triples
# =============================================================================


class TestLeaf:
    def test_first_index(self):
        # P(0) = -(-5)(-1)(-1) = 5, Q(0) = C1 * 0^3 = 0, R(0) = 5 * C3
        assert binary_split(0, 1) == (5, 0, 67957045)

    def test_index_one(self):
        P, Q, R = binary_split(1, 2)
        assert P == -5
        assert Q == C1
        assert R == -5 * (C2 + C3)
        assert R == -2793657715

    @pytest.mark.parametrize("a", [0, 1, 2, 3, 7, 100, 12345, 10**12])
    def test_matches_closed_form(self, a):
        P, Q, R = binary_split(a, a + 1)
        assert P == p_direct(a)
        assert P == a * ((108 - 72 * a) * a - 46) + 5
        assert Q == C1 * a**3
        assert R == p_direct(a) * (C2 * a + C3)

    def test_leaf_triple_is_base_case(self):
        assert leaf_triple(42) == binary_split(42, 43)

    def test_uses_injected_constants(self):
        consts = ChudnovskyConstants(c1=2, c2=3, c3=4)
        P, Q, R = binary_split(2, 3, consts)
        assert P == p_direct(2)
        assert Q == 2 * 8
        assert R == p_direct(2) * (3 * 2 + 4)


# =============================================================================
# Combination
# =============================================================================


class TestCombine:
    @pytest.mark.parametrize(
        "a,m,b",
        [(1, 2, 3), (1, 5, 17), (3, 40, 41), (0, 7, 20), (1, 250, 300)],
    )
    def test_associative(self, a, m, b):
        assert combine(binary_split(a, m), binary_split(m, b)) == binary_split(a, b)

    def test_rule(self):
        left = Triple(2, 3, 5)
        right = Triple(7, 11, 13)
        assert combine(left, right) == (2 * 7, 3 * 11, 11 * 5 + 2 * 13)

    def test_identity_is_neutral(self):
        t = binary_split(1, 9)
        assert combine(IDENTITY, t) == t
        assert combine(t, IDENTITY) == t

    def test_left_fold_matches_recursion(self):
        acc = IDENTITY
        for a in range(1, 30):
            acc = combine(acc, leaf_triple(a))
        assert acc == binary_split(1, 30)


class TestMidpointIndependence:
    @pytest.mark.parametrize(
        "strategy",
        [
            floor_midpoint,
            lambda a, b: (a + b + 1) // 2,
            lambda a, b: a + 1,
            lambda a, b: b - 1,
            lambda a, b: a + max(1, (b - a) // 3),
        ],
        ids=["floor", "ceil", "leftmost", "rightmost", "third"],
    )
    @pytest.mark.parametrize("a,b", [(1, 2), (1, 64), (5, 77), (0, 33)])
    def test_same_triple(self, strategy, a, b):
        assert binary_split(a, b, midpoint=strategy) == binary_split(a, b)

    def test_floor_midpoint(self):
        assert floor_midpoint(1, 2) == 1
        assert floor_midpoint(1, 4) == 2
        assert floor_midpoint(3, 8) == 5


# =============================================================================
# Invalid input
# =============================================================================


class TestInvalidRange:
    @pytest.mark.parametrize("a,b", [(1, 1), (0, 0), (5, 2), (-1, 3)])
    def test_rejected(self, a, b):
        with pytest.raises(InvalidRange) as exc_info:
            binary_split(a, b)
        assert exc_info.value.a == a
        assert exc_info.value.b == b

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            binary_split(10, 3)

    @pytest.mark.parametrize(
        "strategy", [lambda a, b: a, lambda a, b: b, lambda a, b: b + 5]
    )
    def test_bad_midpoint(self, strategy):
        with pytest.raises(InvalidRange, match="midpoint"):
            binary_split(1, 10, midpoint=strategy)


# =============================================================================
# Exactness and growth
# =============================================================================


class TestGrowth:
    @pytest.mark.parametrize("k", [10, 100, 1000])
    def test_q_is_product_of_leaves(self, k):
        # Q(1, k+1) = prod C1 * a^3 = C1^k * (k!)^3
        _P, Q, _R = binary_split(1, k + 1)
        assert Q == C1**k * factorial(k) ** 3

    @pytest.mark.parametrize("k", [10, 100, 1000])
    def test_bit_length_linear(self, k):
        _P, Q, R = binary_split(1, k + 1)
        # C1 > 2^53, so each term adds more than 53 bits to Q
        assert Q.bit_length() > 53 * k
        # |R / Q| is about 2.5e-7, dominated by the first term
        assert Q.bit_length() - 30 <= abs(R).bit_length() <= Q.bit_length()

    def test_bit_length_increases(self):
        lengths = [binary_split(1, 1 + k).q.bit_length() for k in (1, 10, 100, 1000)]
        assert lengths == sorted(lengths)
        assert len(set(lengths)) == len(lengths)

    def test_p_is_product_of_leaves(self):
        expected = 1
        for a in range(1, 11):
            expected *= p_direct(a)
        assert binary_split(1, 11).p == expected

    @pytest.mark.parametrize("n", [2, 3, 8, 25])
    def test_r_over_q_is_partial_sum(self, n):
        # sum_{k=1}^{n-1} (prod_{j<=k} P_j) (C2 k + C3) / (prod_{j<=k} Q_j)
        total = Fraction(0)
        num, den = 1, 1
        for k in range(1, n):
            num *= p_direct(k)
            den *= C1 * k**3
            total += Fraction(num * (C2 * k + C3), den)
        _P, Q, R = binary_split(1, n)
        assert Fraction(int(R), int(Q)) == total


class TestDeterminism:
    def test_repeated_calls_identical(self):
        first = binary_split(1, 500)
        second = binary_split(1, 500)
        assert first == second
        assert all(int(x) == int(y) for x, y in zip(first, second))

    def test_default_constants(self):
        assert binary_split(1, 50) == binary_split(1, 50, DEFAULT_CONSTANTS)
