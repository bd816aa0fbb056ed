"""The validated LEI value type and the five ways to obtain one.

An LEI (ISO 17442-1:2020) is 20 ASCII characters:

  [0, 4)   LOU ID        uppercase alphanumeric, issuing Local Operating Unit
  [4, 18)  Entity ID     uppercase alphanumeric, assigned by the LOU
  [18, 20) Check Digits  decimal, ISO/IEC 7064 MOD 97-10 over the first 18

LEI values are produced only by parse(), parse_loose(), build_from_payload()
and build_from_parts(). validate() answers yes/no without producing one.
Input is handled as UTF-8 bytes: lengths are byte counts, and a non-ASCII
character always fails the format checks.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import final

from lei.core.checksum import compute_check_digits
from lei.core.config import (
    CHECK_DIGITS_SPAN,
    ENTITY_ID_LENGTH,
    ENTITY_ID_SPAN,
    LEI_LENGTH,
    LOU_ID_LENGTH,
    LOU_ID_SPAN,
    PAYLOAD_LENGTH,
    PAYLOAD_SPAN,
)
from lei.core.errors import (
    IncorrectCheckDigits,
    InvalidEntityIdLength,
    InvalidLength,
    InvalidLouIdLength,
    InvalidPayloadLength,
    LEIError,
)
from lei.core.result import Err, Ok
from lei.core.validators import (
    validate_check_digits_format,
    validate_entity_id_format,
    validate_lou_id_format,
)

_CONSTRUCTION_KEY = object()

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)


@final
@dataclass(frozen=True, slots=True, order=True, repr=False)
class LEI:
    """Legal Entity Identifier in confirmed valid format.

    Cannot be constructed directly; LEI(b"...") raises TypeError.
    """

    _code: bytes
    _key: InitVar[object] = None

    def __post_init__(self, _key: object) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise TypeError(
                "LEI cannot be constructed directly; use parse(), parse_loose(), "
                "build_from_payload() or build_from_parts()"
            )

    @staticmethod
    def from_str(value: str) -> Ok[LEI] | Err[LEIError]:
        """Constructor-style alias for parse_loose()."""
        return parse_loose(value)

    # All accessors decode as ASCII: the invariant guarantees every byte is 0-9A-Z.

    @property
    def value(self) -> str:
        return self._code.decode("ascii")

    @property
    def lou_id(self) -> str:
        """The 4-character LOU ID."""
        return LOU_ID_SPAN.slice(self._code).decode("ascii")

    @property
    def entity_id(self) -> str:
        """The 14-character Entity ID."""
        return ENTITY_ID_SPAN.slice(self._code).decode("ascii")

    @property
    def payload(self) -> str:
        """Everything except the Check Digits."""
        return PAYLOAD_SPAN.slice(self._code).decode("ascii")

    @property
    def check_digits(self) -> str:
        return CHECK_DIGITS_SPAN.slice(self._code).decode("ascii")

    def as_bytes(self) -> bytes:
        return self._code

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LEI({self.value!r})"


# ---------------------------------------------------------------------------
# Construction pipeline
# ---------------------------------------------------------------------------


def _encode(value: str) -> bytes:
    return value.encode("utf-8", errors="surrogatepass")


def _diagnose(b: bytes) -> LEIError | None:
    """First problem with a 20-byte candidate, or None when it is a valid LEI."""
    checks = (
        (validate_lou_id_format, LOU_ID_SPAN),
        (validate_entity_id_format, ENTITY_ID_SPAN),
        (validate_check_digits_format, CHECK_DIGITS_SPAN),
    )
    for check, span in checks:
        result = check(span.slice(b))
        if isinstance(result, Err):
            return result.error

    was = CHECK_DIGITS_SPAN.slice(b)
    expected = compute_check_digits(PAYLOAD_SPAN.slice(b))
    if was != expected:
        return IncorrectCheckDigits(was=was, expected=expected)
    return None


def parse(value: str) -> Ok[LEI] | Err[LEIError]:
    """Parse a string that must already be exactly 20 uppercase alphanumerics.

    No whitespace trimming and no case folding; see parse_loose() for that.
    """
    b = _encode(value)
    if len(b) != LEI_LENGTH:
        return Err(InvalidLength(was=len(b)))

    problem = _diagnose(b)
    if problem is not None:
        return Err(problem)
    return Ok(LEI(b, _CONSTRUCTION_KEY))


def parse_loose(value: str) -> Ok[LEI] | Err[LEIError]:
    """Parse allowing lowercase letters and leading/trailing whitespace.

    Only ASCII letters are case-folded. Internal whitespace and punctuation
    are still rejected.
    """
    return parse(value.translate(_ASCII_UPPER).strip())


def build_from_payload(payload: str) -> Ok[LEI] | Err[LEIError]:
    """Build an LEI from an 18-character Payload, computing the Check Digits."""
    b = _encode(payload)
    if len(b) != PAYLOAD_LENGTH:
        return Err(InvalidPayloadLength(was=len(b)))

    lou = validate_lou_id_format(LOU_ID_SPAN.slice(b))
    if isinstance(lou, Err):
        return lou
    entity = validate_entity_id_format(ENTITY_ID_SPAN.slice(b))
    if isinstance(entity, Err):
        return entity

    return Ok(LEI(b + compute_check_digits(b), _CONSTRUCTION_KEY))


def build_from_parts(lou_id: str, entity_id: str) -> Ok[LEI] | Err[LEIError]:
    """Build an LEI from a LOU ID and an Entity ID, computing the Check Digits."""
    lou_b = _encode(lou_id)
    if len(lou_b) != LOU_ID_LENGTH:
        return Err(InvalidLouIdLength(was=len(lou_b)))
    lou = validate_lou_id_format(lou_b)
    if isinstance(lou, Err):
        return lou

    entity_b = _encode(entity_id)
    if len(entity_b) != ENTITY_ID_LENGTH:
        return Err(InvalidEntityIdLength(was=len(entity_b)))
    entity = validate_entity_id_format(entity_b)
    if isinstance(entity, Err):
        return entity

    payload = lou_b + entity_b
    return Ok(LEI(payload + compute_check_digits(payload), _CONSTRUCTION_KEY))


def validate(value: str) -> bool:
    """True when parse(value) would succeed. Never builds an LEI."""
    b = _encode(value)
    return len(b) == LEI_LENGTH and _diagnose(b) is None
