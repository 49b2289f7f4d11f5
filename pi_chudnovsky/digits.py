"""Working precision, term counts and fixed-digit rendering."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import gmpy2
from gmpy2 import mpfr, mpz, floor

from .assembler import ChudnovskyAssembler
from .constants import DEFAULT_CONSTANTS, DIGITS_PER_TERM, ChudnovskyConstants

log = logging.getLogger(__name__)

BITS_PER_DIGIT = 3.321928094887362  # log2(10)
DEFAULT_GUARD_BITS = 256


def terms_for_digits(digits: int) -> int:
    # ~14 digits per term, rounded up
    if digits <= 0:
        raise ValueError("digits must be positive")
    return digits // 14 + 1


def precision_for_digits(digits: int, guard_bits: int = DEFAULT_GUARD_BITS) -> int:
    """Precision in bits: bits ≈ digits * log2(10) + safety margin."""
    if digits <= 0:
        raise ValueError("digits must be positive")
    if guard_bits < 0:
        raise ValueError("guard bits must not be negative")
    return int(digits * BITS_PER_DIGIT + guard_bits)


@contextmanager
def working_precision(bits: int) -> Iterator[None]:
    """Set the gmpy2 context precision to `bits`, restoring it afterwards."""
    ctx = gmpy2.get_context()
    saved = ctx.precision
    ctx.precision = bits
    try:
        yield
    finally:
        ctx.precision = saved


def format_fixed(value: mpfr, digits: int) -> str:
    """
    Render a positive mpfr as "<int>.<digits>" with exactly `digits`
    fractional digits.

    The last digit is truncated (floor), not rounded, so every printed digit
    is a digit of `value` itself.
    """
    if digits <= 0:
        raise ValueError("digits must be positive")
    if value <= 0:
        raise ValueError("only positive values can be rendered")

    # Scale by 10^digits and truncate (floor) instead of round.
    scaled = value * mpfr(10) ** digits
    as_int = mpz(floor(scaled))

    # gmpy2.digits avoids Python's int->str limit
    s = gmpy2.digits(as_int, 10)

    # Ensure at least digits + 1 characters (one integer digit)
    if len(s) < digits + 1:
        s = s.rjust(digits + 1, "0")

    int_part = s[:-digits]
    frac_part = s[-digits:]
    return f"{int_part}.{frac_part}"


def pi_digits(
    digits: int,
    terms: int | None = None,
    guard_bits: int = DEFAULT_GUARD_BITS,
    constants: ChudnovskyConstants = DEFAULT_CONSTANTS,
) -> str:
    """
    Compute π to `digits` decimal places as a string "3.<digits>".

    `terms` defaults to enough series terms for `digits`. Passing fewer only
    makes the tail of the result wrong; it is not an error.
    """
    if terms is None:
        terms = terms_for_digits(digits)
    bits = precision_for_digits(digits, guard_bits)
    log.info("%d terms, %d bits of working precision", terms, bits)

    if terms * DIGITS_PER_TERM < digits:
        log.warning(
            "%d terms give only ~%d correct digits of the %d requested",
            terms,
            int(terms * DIGITS_PER_TERM),
            digits,
        )

    with working_precision(bits):
        pi = ChudnovskyAssembler(constants).compute_pi(terms)
        return format_fixed(pi, digits)
