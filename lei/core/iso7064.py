"""ISO/IEC 7064 MOD 97-10 pure check character system, over decimal digits.

The check value C for a number N is the value in [0, 96] such that
N * 100 + C = 1 (mod 97), i.e. C = (98 - (N * 100 mod 97)) mod 97.

The engine only understands the decimal digits 0-9. Alphanumeric inputs
must be expanded first (see lei.core.digits).
"""

from __future__ import annotations

from collections.abc import Iterable

MODULUS: int = 97
RADIX: int = 10


def _remainder(digits: Iterable[str]) -> int | None:
    """N mod 97 for the number spelled by digits; None on empty or non-digit input."""
    r = 0
    seen = False
    for d in digits:
        if len(d) != 1 or not "0" <= d <= "9":
            return None
        r = (r * RADIX + ord(d) - 48) % MODULUS
        seen = True
    return r if seen else None


def checksum(digits: Iterable[str]) -> int | None:
    """Check value in [0, 96] for a stream of decimal digit characters.

    Returns None if the stream is empty or contains any symbol other than
    an ASCII decimal digit.
    """
    r = _remainder(digits)
    if r is None:
        return None
    return (98 - (r * 100) % MODULUS) % MODULUS


def is_valid(digits: Iterable[str]) -> bool:
    """True when the digits, check value included, are congruent to 1 mod 97."""
    return _remainder(digits) == 1
