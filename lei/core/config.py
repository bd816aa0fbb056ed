"""LEI field layout and character classes (ISO 17442-1:2020, section 4).

No environment lookups. Pure configuration data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Field widths
# ---------------------------------------------------------------------------

LEI_LENGTH: int = 20
PAYLOAD_LENGTH: int = 18
LOU_ID_LENGTH: int = 4
ENTITY_ID_LENGTH: int = 14
CHECK_DIGITS_LENGTH: int = 2

# ---------------------------------------------------------------------------
# Character classes (byte values)
# ---------------------------------------------------------------------------

DECIMAL_DIGITS: frozenset[int] = frozenset(b"0123456789")
UPPERCASE_LETTERS: frozenset[int] = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ALPHANUMERIC: frozenset[int] = DECIMAL_DIGITS | UPPERCASE_LETTERS


# ---------------------------------------------------------------------------
# Field spans
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class FieldSpan:
    """Half-open byte range [start, stop) of one LEI field."""

    name: str
    start: int
    stop: int

    @property
    def width(self) -> int:
        return self.stop - self.start

    def slice(self, buf: bytes) -> bytes:
        """Cut this field out of a buffer laid out as an LEI."""
        return buf[self.start:self.stop]


LOU_ID_SPAN: FieldSpan = FieldSpan(name="LOU ID", start=0, stop=LOU_ID_LENGTH)
ENTITY_ID_SPAN: FieldSpan = FieldSpan(
    name="Entity ID", start=LOU_ID_LENGTH, stop=PAYLOAD_LENGTH,
)
PAYLOAD_SPAN: FieldSpan = FieldSpan(name="Payload", start=0, stop=PAYLOAD_LENGTH)
CHECK_DIGITS_SPAN: FieldSpan = FieldSpan(
    name="Check Digits", start=PAYLOAD_LENGTH, stop=LEI_LENGTH,
)

LEI_SPANS: tuple[FieldSpan, ...] = (
    LOU_ID_SPAN,
    ENTITY_ID_SPAN,
    CHECK_DIGITS_SPAN,
)
