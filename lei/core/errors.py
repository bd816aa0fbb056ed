"""Error values for LEI parsing and building: no entry point raises for bad input.

Every error is a frozen dataclass value that can be pattern-matched, compared,
hashed and serialized. Base class LEIError, eight @final subclasses.

Two renderings per error:
  repr(err)  debug form, e.g. IncorrectCheckDigits(was='01', expected='02')
  str(err)   user-facing form, e.g. incorrect check digits '01' when expecting '02'
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, final


def _render(raw: bytes) -> str:
    """Quote raw field bytes, flagging anything that is not valid UTF-8."""
    try:
        return repr(raw.decode("utf-8"))
    except UnicodeDecodeError:
        return f"(invalid UTF-8) {raw!r}"


def _lenient(raw: bytes) -> str:
    return raw.decode("utf-8", errors="backslashreplace")


@dataclass(frozen=True, slots=True, repr=False)
class LEIError:
    """Base error value. NOT @final: has subclasses."""

    code: ClassVar[str] = "LEI_ERROR"

    @property
    def message(self) -> str:
        return "invalid LEI"

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        parts = []
        for f in fields(self):
            v = getattr(self, f.name)
            parts.append(f"{f.name}={_render(v) if isinstance(v, bytes) else v!r}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys: code, message, then payload fields."""
        out: dict[str, object] = {"code": self.code, "message": self.message}
        for f in fields(self):
            v = getattr(self, f.name)
            out[f.name] = _lenient(v) if isinstance(v, bytes) else v
        return out


# ---------------------------------------------------------------------------
# Length errors
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidLength(LEIError):
    """The input is not exactly 20 bytes."""

    code: ClassVar[str] = "LEI_INVALID_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid length {self.was} bytes when expecting 20"


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidPayloadLength(LEIError):
    """The Payload is not exactly 18 bytes (checked when building)."""

    code: ClassVar[str] = "LEI_INVALID_PAYLOAD_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid Payload length {self.was} bytes when expecting 18"


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidLouIdLength(LEIError):
    """The LOU ID is not exactly 4 bytes (checked when building)."""

    code: ClassVar[str] = "LEI_INVALID_LOU_ID_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid LOU ID length {self.was} bytes when expecting 4"


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidEntityIdLength(LEIError):
    """The Entity ID is not exactly 14 bytes (checked when building)."""

    code: ClassVar[str] = "LEI_INVALID_ENTITY_ID_LENGTH"

    was: int

    @property
    def message(self) -> str:
        return f"invalid Entity ID length {self.was} bytes when expecting 14"


# ---------------------------------------------------------------------------
# Format errors
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidLouId(LEIError):
    """The LOU ID is not 4 uppercase ASCII alphanumeric characters."""

    code: ClassVar[str] = "LEI_INVALID_LOU_ID"

    was: bytes  # 4 bytes

    @property
    def message(self) -> str:
        return (
            f"prefix {_render(self.was)} is not 4 uppercase ASCII "
            "alphanumeric characters"
        )


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidEntityId(LEIError):
    """The Entity ID is not 14 uppercase ASCII alphanumeric characters."""

    code: ClassVar[str] = "LEI_INVALID_ENTITY_ID"

    was: bytes  # 14 bytes

    @property
    def message(self) -> str:
        return (
            f"basic code {_render(self.was)} is not 14 uppercase ASCII "
            "alphanumeric characters"
        )


@final
@dataclass(frozen=True, slots=True, repr=False)
class InvalidCheckDigits(LEIError):
    """The Check Digits are not two ASCII decimal digits."""

    code: ClassVar[str] = "LEI_INVALID_CHECK_DIGITS"

    was: bytes  # 2 bytes

    @property
    def message(self) -> str:
        return f"check digits {_render(self.was)} is not two ASCII decimal digits"


# ---------------------------------------------------------------------------
# Checksum errors
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True, repr=False)
class IncorrectCheckDigits(LEIError):
    """The Check Digits are well formed but do not match the Payload."""

    code: ClassVar[str] = "LEI_INCORRECT_CHECK_DIGITS"

    was: bytes  # 2 ASCII digits
    expected: bytes  # 2 ASCII digits

    @property
    def message(self) -> str:
        return (
            f"incorrect check digits {_render(self.was)} "
            f"when expecting {_render(self.expected)}"
        )
