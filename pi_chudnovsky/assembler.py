"""
Final assembly of π from the binary-split series.

The split itself is exact. The only rounding happens here, in mpfr at the
precision of the current gmpy2 context: one square root, a few products and
one division. The caller sets that precision (see digits.working_precision);
nothing here checks that it is large enough.
"""

from __future__ import annotations

import logging

from gmpy2 import mpfr, sqrt

from .constants import DEFAULT_CONSTANTS, ChudnovskyConstants
from .errors import InvalidTermCount
from .split import IDENTITY, Triple, binary_split

log = logging.getLogger(__name__)


class ChudnovskyAssembler:
    """Evaluates the first n terms of the Chudnovsky series."""

    def __init__(self, constants: ChudnovskyConstants = DEFAULT_CONSTANTS) -> None:
        self.constants = constants

    def series(self, n: int) -> Triple:
        """
        Triple for terms 1 .. n-1.

        Term 0 is not split: its contribution is the c6 * Q part of the
        denominator in compute_pi(). With a single term the range is empty
        and the neutral triple (1, 1, 0) is returned.
        """
        if n <= 0:
            raise InvalidTermCount(n)
        if n == 1:
            return IDENTITY
        return binary_split(1, n, self.constants)

    def compute_pi(self, n: int) -> mpfr:
        """
        Approximate π with n series terms (~14.18 digits per term).

          π = (c4 * sqrt(c5) * Q) / (c6 * Q + R)
        """
        if n <= 0:
            raise InvalidTermCount(n)

        c = self.constants
        log.debug("binary split over %d terms", n)
        _P, Q, R = self.series(n)
        log.debug("Q has %d bits, R has %d bits", Q.bit_length(), abs(R).bit_length())

        Qf = mpfr(Q)
        Rf = mpfr(R)

        numerator = mpfr(c.c4) * sqrt(mpfr(c.c5)) * Qf
        denominator = mpfr(c.c6) * Qf + Rf
        return numerator / denominator


def compute_pi(n: int, constants: ChudnovskyConstants = DEFAULT_CONSTANTS) -> mpfr:
    return ChudnovskyAssembler(constants).compute_pi(n)
