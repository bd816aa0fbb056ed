"""Format validators for the three LEI fields.

Each takes a slice already cut to the field width; a width mismatch is a
caller defect and raises RuntimeError. Each scans left to right and fails
on the first non-conforming byte, returning a copy of the whole field.
"""

from __future__ import annotations

from lei.core.config import (
    ALPHANUMERIC,
    CHECK_DIGITS_LENGTH,
    DECIMAL_DIGITS,
    ENTITY_ID_LENGTH,
    LOU_ID_LENGTH,
)
from lei.core.errors import InvalidCheckDigits, InvalidEntityId, InvalidLouId
from lei.core.result import Err, Ok


def _require_width(field: str, raw: bytes, width: int) -> None:
    if len(raw) != width:
        raise RuntimeError(f"Expected {width} bytes for {field}, but got {len(raw)}")


def _conforms(raw: bytes, allowed: frozenset[int]) -> bool:
    return all(b in allowed for b in raw)


def validate_lou_id_format(raw: bytes) -> Ok[None] | Err[InvalidLouId]:
    """LOU ID: 4 ASCII digits or uppercase letters."""
    _require_width("LOU ID", raw, LOU_ID_LENGTH)
    if not _conforms(raw, ALPHANUMERIC):
        return Err(InvalidLouId(was=bytes(raw)))
    return Ok(None)


def validate_entity_id_format(raw: bytes) -> Ok[None] | Err[InvalidEntityId]:
    """Entity ID: 14 ASCII digits or uppercase letters."""
    _require_width("Entity ID", raw, ENTITY_ID_LENGTH)
    if not _conforms(raw, ALPHANUMERIC):
        return Err(InvalidEntityId(was=bytes(raw)))
    return Ok(None)


def validate_check_digits_format(raw: bytes) -> Ok[None] | Err[InvalidCheckDigits]:
    """Check Digits: 2 ASCII decimal digits. Letters are never valid here."""
    _require_width("Check Digits", raw, CHECK_DIGITS_LENGTH)
    if not _conforms(raw, DECIMAL_DIGITS):
        return Err(InvalidCheckDigits(was=bytes(raw)))
    return Ok(None)
