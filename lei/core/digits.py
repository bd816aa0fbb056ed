"""Letter-to-decimal digit expansion for the MOD 97-10 check.

Digits pass through unchanged. Letters map to A=10 ... Z=35 and are emitted
as two decimal characters, tens first:

    b"9A" -> "9", "1", "0"
"""

from __future__ import annotations

from collections.abc import Iterator

_ZERO = ord("0")
_NINE = ord("9")
_A = ord("A")
_Z = ord("Z")


def expand_digits(raw: bytes | str) -> Iterator[str]:
    """Lazily expand uppercase ASCII alphanumerics into decimal digit characters.

    Single pass: the returned iterator cannot be restarted once consumed.
    Callers must pass only 0-9 and A-Z; any other byte raises RuntimeError
    when it is reached, since that indicates a defect in the caller rather
    than bad user input.
    """
    data = raw.encode("ascii", errors="replace") if isinstance(raw, str) else raw
    for b in data:
        if _ZERO <= b <= _NINE:
            yield chr(b)
        elif _A <= b <= _Z:
            tens, units = divmod(b - _A + 10, 10)
            yield chr(_ZERO + tens)
            yield chr(_ZERO + units)
        else:
            raise RuntimeError(
                "expand_digits must only be called on uppercase ASCII "
                f"alphanumeric input, got byte {b:#04x}"
            )
