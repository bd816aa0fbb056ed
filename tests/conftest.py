"""Hypothesis strategies and pytest fixtures for the lei test suite.

Strategies are composable: whole LEIs are built from LOU IDs and Entity IDs,
and valid LEI strings are produced through build_from_payload so their check
digits are always correct.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from lei.core.identifiers import LEI, build_from_payload
from lei.core.result import unwrap

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

ALNUM = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"


def alnum_text(size: int) -> SearchStrategy[str]:
    """Exactly `size` uppercase ASCII alphanumerics."""
    return st.text(alphabet=ALNUM, min_size=size, max_size=size)


def lou_ids() -> SearchStrategy[str]:
    return alnum_text(4)


def entity_ids() -> SearchStrategy[str]:
    return alnum_text(14)


def payloads() -> SearchStrategy[str]:
    return alnum_text(18)


# ===================================================================
# LEI STRATEGIES
# ===================================================================


@st.composite
def leis(draw: st.DrawFn) -> LEI:
    """Generate valid LEI values via build_from_payload."""
    return unwrap(build_from_payload(draw(payloads())))


@st.composite
def valid_lei_strings(draw: st.DrawFn) -> str:
    """Generate 20-character strings that are valid LEIs."""
    return str(draw(leis()))


# ===================================================================
# FIXTURES
# ===================================================================

# From the ISIN_LEI_20210209.csv file published by GLEIF.
GLEIF_SAMPLE: tuple[str, ...] = (
    "635400B4JJBON4TCHF02",
    "529900ODI3047E2LIV03",
    "5493002F3N6V3Z14SP04",
    "549300IYKILIU506KA05",
    "JJKC32MCHWDI71265Z06",
    "549300RIPPWJB5Z0FK07",
    "Z2VZBHUMB7PWWJ63I008",
    "FRQ78DFDYWMT3XY6UR09",
    "337KMNHEWWWR6B7Q7W10",
    "549300E9PC51EN656011",
    "5493003WHB7TFLYQFS12",
    "549300C04BJ0G297NC13",
    "T68X8LLAQYRNDV034K14",
    "8HWWA59ZS6Z54QLX6S15",
    "54930018SOOHBHRLWC16",
    "95980020140005346817",
    "549300HMMEWVG3PPQU18",
    "5JQ7W3GWO8J5DAE5WR19",
    "AJ6VL0Z1WDC42KKJZO20",
    "YZ83GD8L7GG84979J516",
)

# Same source. ISO 17442-1 section 5.1 says 00, 01 and 99 are never assigned
# as check digit pairs, yet these were issued and are syntactically valid.
GLEIF_RESERVED_CHECK_DIGITS: tuple[str, ...] = (
    "31570010000000045200",
    "3157006B6JVZ5DFMSN00",
    "315700BBRQHDWX6SHZ00",
    "315700G5G24XYL1TXH00",
    "31570010000000048401",
    "31570010000000067801",
    "315700WH3YMKHCVYW201",
)


@pytest.fixture
def standard_example() -> LEI:
    """The worked example from Annex A.1 of ISO 17442-1."""
    return unwrap(build_from_payload("YZ83GD8L7GG84979J5"))
