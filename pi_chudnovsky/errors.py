"""
Errors raised by the Chudnovsky evaluator and assembler.

All of them are ``ValueError`` subclasses: they signal caller misuse, and the
command line reports every ``ValueError`` the same way.

There is no ``InsufficientPrecision`` exception. A working
precision too small for the requested digits silently degrades the trailing
digits; choosing it (see ``digits.precision_for_digits``) is the caller's job.
"""

from __future__ import annotations


class ChudnovskyError(ValueError):
    """Base class for misuse of the series evaluation."""


class InvalidRange(ChudnovskyError):
    """``binary_split(a, b)`` called with an empty or negative range."""

    def __init__(self, a: int, b: int, reason: str = "need 0 <= a < b") -> None:
        self.a = a
        self.b = b
        super().__init__(f"Invalid term range [{a}, {b}): {reason}")


class InvalidTermCount(ChudnovskyError):
    """``compute_pi(n)`` called with ``n <= 0``."""

    def __init__(self, n: int) -> None:
        self.n = n
        super().__init__(f"Term count must be positive, got {n}")
