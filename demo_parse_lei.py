"""
demo_parse_lei.py -- A short walkthrough of the lei package.

An LEI is the 20-character code that identifies a legal entity in a financial
transaction (ISO 17442-1:2020). It has three parts:

  1. A 4-character LOU ID: the Local Operating Unit that issued the code.
  2. A 14-character Entity ID assigned by that LOU.
  3. Two check digits computed with ISO/IEC 7064 MOD 97-10 over the first 18.

We will:
  1. Parse the worked example from Annex A.1 of the standard and read its parts
  2. Build the same LEI from its LOU ID and Entity ID
  3. See what each kind of malformed input reports

Run this:  .venv/bin/python demo_parse_lei.py
"""

from __future__ import annotations

import logging

from lei import build_from_parts, parse, parse_loose
from lei.core.result import Err, Ok

logger = logging.getLogger("demo_parse_lei")

STANDARD_EXAMPLE = "YZ83GD8L7GG84979J516"

MALFORMED = (
    "TOOSHORT",                # wrong length
    "yz83GD8L7GG84979J516",    # lowercase LOU ID (strict parse only)
    "YZ83GD8L7GG8-979J516",    # punctuation inside the Entity ID
    "YZ83GD8L7GG84979J5AB",    # letters in the check digits
    "YZ83GD8L7GG84979J517",    # wrong check digits
)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    # 1. Strict parse and accessors
    match parse(STANDARD_EXAMPLE):
        case Ok(code):
            logger.info("Parsed LEI: %s", code)
            logger.info("  LOU ID: %s", code.lou_id)
            logger.info("  Entity ID: %s", code.entity_id)
            logger.info("  Check digits: %s", code.check_digits)
        case Err(err):
            raise SystemExit(f"Unable to parse LEI {STANDARD_EXAMPLE}: {err}")

    # 2. Building computes the check digits for us
    built = build_from_parts("YZ83", "GD8L7GG84979J5").unwrap()
    logger.info("Built from parts: %s (same value: %s)", built, built == code)

    # 3. Every failure is a value carrying the offending bytes
    for raw in MALFORMED:
        result = parse(raw)
        if isinstance(result, Err):
            logger.info("%-22s -> %r", raw, result.error)
            logger.info("%-22s    %s", "", result.error)
        loose = parse_loose(raw)
        if isinstance(loose, Ok):
            logger.info("%-22s    accepted by parse_loose as %s", "", loose.value)


if __name__ == "__main__":
    main()
