"""Chudnovsky series constants."""

from __future__ import annotations

from dataclasses import dataclass

# Each term of the series adds log10(640320^3 / 1728) decimal digits.
DIGITS_PER_TERM = 14.181647462725477


@dataclass(frozen=True)
class ChudnovskyConstants:
    """
    Immutable constants for one Chudnovsky evaluation.

    c1, c2, c3 are exact integers used by the binary split:
      Q(a, a+1) = c1 * a^3
      R(a, a+1) = P(a, a+1) * (c2 * a + c3)

    c4, c5, c6 are used once, by the final assembly:
      π = (c4 * sqrt(c5) * Q) / (c6 * Q + R)
    """

    # C^3 / 24, where C = 640320
    c1: int = 10939058860032000
    c2: int = 545140134
    c3: int = 13591409
    c4: int = 426880
    c5: int = 10005
    c6: int = 13591409


DEFAULT_CONSTANTS = ChudnovskyConstants()
