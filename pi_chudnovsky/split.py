"""
Binary splitting for the Chudnovsky series.

binary_split(a, b) returns the exact integers P(a, b), Q(a, b), R(a, b) for
the terms with index in [a, b). For the full series

  π = (426880 * sqrt(10005) * Q(1, n)) / (13591409 * Q(1, n) + R(1, n))

Everything here is gmpy2.mpz arithmetic; nothing is rounded.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from gmpy2 import mpz

from .constants import DEFAULT_CONSTANTS, ChudnovskyConstants
from .errors import InvalidRange


class Triple(NamedTuple):
    """P, Q, R for one index range."""

    p: mpz
    q: mpz
    r: mpz


# Neutral element of combine(): the empty range.
IDENTITY = Triple(mpz(1), mpz(1), mpz(0))


def floor_midpoint(a: int, b: int) -> int:
    return (a + b) // 2


def leaf_triple(a: int, constants: ChudnovskyConstants = DEFAULT_CONSTANTS) -> Triple:
    """
    Closed form for the single-term range [a, a + 1).

      P = -(6a - 5)(2a - 1)(6a - 1) = a((108 - 72a)a - 46) + 5
      Q = c1 * a^3
      R = P * (c2 * a + c3)

    The sign of P carries the alternating (-1)^a of the series.
    """
    k = mpz(a)
    P = k * ((108 - 72 * k) * k - 46) + 5
    Q = constants.c1 * k**3
    R = P * (constants.c2 * k + constants.c3)
    return Triple(P, Q, R)


def combine(left: Triple, right: Triple) -> Triple:
    """Join the triples of adjacent ranges [a, m) and [m, b) into [a, b)."""
    Pam, Qam, Ram = left
    Pmb, Qmb, Rmb = right

    # P(a, b) = P(a, m) * P(m, b)
    P = Pam * Pmb

    # Q(a, b) = Q(a, m) * Q(m, b)
    Q = Qam * Qmb

    # R(a, b) = Q(m, b) * R(a, m) + P(a, m) * R(m, b)
    R = Qmb * Ram + Pam * Rmb

    return Triple(P, Q, R)


def binary_split(
    a: int,
    b: int,
    constants: ChudnovskyConstants = DEFAULT_CONSTANTS,
    midpoint: Callable[[int, int], int] = floor_midpoint,
) -> Triple:
    """
    Compute P(a, b), Q(a, b), R(a, b) by recursive halving of [a, b).

    Requires 0 <= a < b, otherwise InvalidRange. `midpoint` picks the split
    point of a range with more than one term; it must return m with
    a < m < b. The result does not depend on the strategy, since combine()
    is associative.
    """
    if a < 0 or a >= b:
        raise InvalidRange(a, b)
    return _split(a, b, constants, midpoint)


def _split(
    a: int,
    b: int,
    constants: ChudnovskyConstants,
    midpoint: Callable[[int, int], int],
) -> Triple:
    if b - a == 1:
        return leaf_triple(a, constants)

    m = midpoint(a, b)
    if not a < m < b:
        raise InvalidRange(a, b, f"midpoint {m} leaves an empty half")

    return combine(
        _split(a, m, constants, midpoint),
        _split(m, b, constants, midpoint),
    )
