import gmpy2
import pytest

# Trusted prefix: 80 decimals of π, truncated.
PI_80 = "3.14159265358979323846264338327950288419716939937510582097494459230781640628620899"


@pytest.fixture(autouse=True)
def restore_precision():
    """Each test gets the gmpy2 precision back as it found it."""
    ctx = gmpy2.get_context()
    saved = ctx.precision
    yield
    ctx.precision = saved


@pytest.fixture
def precision():
    """Set the working precision in bits for the rest of the test."""

    def _set(bits):
        gmpy2.get_context().precision = bits

    return _set
