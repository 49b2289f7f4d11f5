"""
Command line driver: compute π and print it as a bare numeral.

Supported forms:
  pi-chudnovsky                  -> default (10000 digits)
  pi-chudnovsky 12345
  pi-chudnovsky --calculate 1K
  pi-chudnovsky --digits 10M
  pi-chudnovsky -d 132876K --terms 1M
  pi-chudnovsky 1e6 --guard-bits 512 -v

Only the digits go to stdout. Progress and timing go to the log (stderr).
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass

from .digits import DEFAULT_GUARD_BITS, pi_digits

log = logging.getLogger(__name__)

DEFAULT_DIGITS = 10_000

_SUFFIXES = {
    "k": 1_000,
    "m": 1_000_000,
    "g": 1_000_000_000,
    "t": 1_000_000_000_000,
}


# =========================
# Digit specification parser
# =========================


def parse_digit_spec(spec: str) -> int:
    """
    Parse a count specification like:
      "123", "1K", "10M", "2g", "132876K", "1e6", "3E7"

    Suffixes (case-insensitive):
      K = 1_000 (10^3)
      M = 1_000_000 (10^6)
      G = 1_000_000_000 (10^9)
      T = 1_000_000_000_000 (10^12)

    Scientific notation:
      "<int>e<int>", e.g. "1e6".

    Returns: the count as Python int (unbounded).
    Raises ValueError on invalid input.
    """
    s = spec.strip()
    if not s:
        raise ValueError("Empty count specification")

    # 1) Scientific notation: "<int>e<int>" or "<int>E<int>"
    mantissa_str, sep, exp_str = s.lower().partition("e")
    if sep:
        if not mantissa_str or not exp_str:
            raise ValueError(f"Invalid scientific notation: {spec!r}")
        mantissa = int(mantissa_str)
        exp = int(exp_str)
        if exp < 0:
            raise ValueError(f"Negative exponent not supported in {spec!r}")
        value = mantissa * (10 ** exp)
        if value <= 0:
            raise ValueError(f"Count must be positive: {spec!r}")
        return value

    # 2) Suffix-based notation: K, M, G, T
    multiplier = _SUFFIXES.get(s[-1].lower(), 1)
    if multiplier != 1:
        s = s[:-1].strip()
        if not s:
            raise ValueError(f"Missing number before suffix in {spec!r}")

    base = int(s)
    if base <= 0:
        raise ValueError(f"Count must be positive: {spec!r}")

    return base * multiplier


# =========================
# Arguments
# =========================


@dataclass
class Options:
    digits: int = DEFAULT_DIGITS
    terms: int | None = None
    guard_bits: int = DEFAULT_GUARD_BITS
    verbose: bool = False


def parse_args(argv: list[str]) -> Options:
    """
    Read options from CLI arguments (argv[0] is the program name).

    Unknown flags are ignored. A flag missing its value raises ValueError.
    """
    opts = Options()
    digit_spec: str | None = None
    args = argv[1:]

    def value_of(i: int) -> str:
        if i + 1 >= len(args):
            raise ValueError(f"Flag {args[i]!r} requires a value")
        return args[i + 1]

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--calculate", "-c", "--digits", "-d"):
            digit_spec = value_of(i)
            i += 2
        elif arg in ("--terms", "-n"):
            opts.terms = parse_digit_spec(value_of(i))
            i += 2
        elif arg == "--guard-bits":
            opts.guard_bits = int(value_of(i))
            i += 2
        elif arg in ("--verbose", "-v"):
            opts.verbose = True
            i += 1
        elif not arg.startswith("-") and digit_spec is None:
            # First bare argument treated as digits spec
            digit_spec = arg
            i += 1
        else:
            i += 1

    if digit_spec is not None:
        opts.digits = parse_digit_spec(digit_spec)
    return opts


def _usage(prog: str) -> str:
    return (
        "Usage examples:\n"
        f"  {prog}\n"
        f"  {prog} 12345\n"
        f"  {prog} --calculate 1K\n"
        f"  {prog} --digits 10M\n"
        f"  {prog} 1e6 --terms 70K\n"
    )


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    prog = argv[0] if argv else "pi-chudnovsky"

    try:
        opts = parse_args(argv)
    except ValueError as e:
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.write(_usage(prog))
        return 1

    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    log.info("Calculating π to %d digits (gmpy2, Chudnovsky)", opts.digits)

    start = time.perf_counter()
    try:
        pi_str = pi_digits(opts.digits, terms=opts.terms, guard_bits=opts.guard_bits)
    except ValueError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    elapsed = time.perf_counter() - start

    log.info("Time: %.6f s", elapsed)
    print(pi_str)
    return 0
