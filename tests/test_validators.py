"""Tests for lei.core.validators: per-field format checks."""

from __future__ import annotations

import pytest
from hypothesis import given

from conftest import entity_ids, lou_ids
from lei.core.errors import InvalidCheckDigits, InvalidEntityId, InvalidLouId
from lei.core.result import Err, Ok
from lei.core.validators import (
    validate_check_digits_format,
    validate_entity_id_format,
    validate_lou_id_format,
)


class TestLouId:
    def test_valid(self) -> None:
        assert validate_lou_id_format(b"YZ83") == Ok(None)

    @pytest.mark.parametrize("raw", [b"yz83", b"YZ8 ", b"YZ-3", b"\xc3\xa9Z8"])
    def test_invalid_carries_whole_field(self, raw: bytes) -> None:
        assert validate_lou_id_format(raw) == Err(InvalidLouId(was=raw))

    def test_wrong_width_is_contract_violation(self) -> None:
        with pytest.raises(RuntimeError, match="Expected 4 bytes for LOU ID"):
            validate_lou_id_format(b"YZ8")

    @given(lou_ids())
    def test_any_uppercase_alnum_accepted(self, raw: str) -> None:
        assert isinstance(validate_lou_id_format(raw.encode()), Ok)


class TestEntityId:
    def test_valid(self) -> None:
        assert validate_entity_id_format(b"GD8L7GG84979J5") == Ok(None)

    def test_lowercase_rejected(self) -> None:
        assert validate_entity_id_format(b"gd8L7GG84979J5") == Err(
            InvalidEntityId(was=b"gd8L7GG84979J5")
        )

    def test_internal_whitespace_rejected(self) -> None:
        assert isinstance(validate_entity_id_format(b"GD8L7GG 4979J5"), Err)

    def test_wrong_width_is_contract_violation(self) -> None:
        with pytest.raises(RuntimeError, match="Expected 14 bytes for Entity ID"):
            validate_entity_id_format(b"GD8L7GG84979J")

    @given(entity_ids())
    def test_any_uppercase_alnum_accepted(self, raw: str) -> None:
        assert isinstance(validate_entity_id_format(raw.encode()), Ok)


class TestCheckDigits:
    @pytest.mark.parametrize("raw", [b"00", b"01", b"16", b"96", b"99"])
    def test_valid(self, raw: bytes) -> None:
        assert validate_check_digits_format(raw) == Ok(None)

    @pytest.mark.parametrize("raw", [b"1A", b"AB", b" 1", b"-1"])
    def test_letters_and_symbols_rejected(self, raw: bytes) -> None:
        assert validate_check_digits_format(raw) == Err(InvalidCheckDigits(was=raw))

    def test_wrong_width_is_contract_violation(self) -> None:
        with pytest.raises(RuntimeError, match="Expected 2 bytes for Check Digits"):
            validate_check_digits_format(b"123")
