"""Check digit computation for an LEI Payload.

Drives the Payload through expand_digits into the MOD 97-10 engine and
formats the check value as two ASCII digits, tens first.
"""

from __future__ import annotations

import logging

from lei.core import iso7064
from lei.core.digits import expand_digits

logger = logging.getLogger(__name__)


def compute_check_digits(payload: bytes) -> bytes:
    """Return the two ASCII check digits for an 18-byte Payload (e.g. b"02").

    No attempt is made to check the Payload length or format here. A byte
    outside 0-9A-Z, or the engine refusing the expanded stream, raises
    RuntimeError: both mean the caller skipped format validation.
    """
    value = iso7064.checksum(expand_digits(payload))
    if value is None:
        logger.error("MOD 97-10 engine produced no checksum for payload %r", payload)
        raise RuntimeError(
            "MOD 97-10 checksum failed to produce a value; invalid input characters?"
        )
    tens, units = divmod(value, 10)
    return bytes((48 + tens, 48 + units))
