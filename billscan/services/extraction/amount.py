"""
Total amount extraction.

Totals cluster near the end of a bill, so the cascade tries strict labelled
totals in the last quarter of the text first, then currency-prefixed
decimals, then the last few lines one at a time. Nothing is ever fabricated:
a miss yields an empty string.
"""

import re
from typing import Optional

from loguru import logger

from .cascade import first_match, non_empty_lines, pattern_step, tail, within
from .patterns import (
    BARE_DECIMAL_PATTERN,
    CURRENCY,
    CURRENCY_AMOUNT_PATTERNS,
    LABELED_TOTAL_PATTERNS,
    NUMBER,
)

TOTALS_REGION = 0.25
TRAILING_LINES = 5


def normalize_amount(raw: str) -> str:
    """Drop thousands separators: '1,234.50' -> '1234.50'."""
    return raw.replace(",", "").strip()


def _trailing_lines(text: str) -> Optional[str]:
    lines = non_empty_lines(text)[-TRAILING_LINES:]

    # Prefer a line showing a currency marker next to a decimal amount
    currency_step = pattern_step(CURRENCY_AMOUNT_PATTERNS)
    for line in lines:
        found = currency_step(line)
        if found is not None:
            return found

    for line in lines:
        match = BARE_DECIMAL_PATTERN.search(line)
        if match:
            return match.group(1)
    return None


GENERIC_AMOUNT_STEPS = (
    within(tail(TOTALS_REGION), pattern_step(LABELED_TOTAL_PATTERNS)),
    within(tail(TOTALS_REGION), pattern_step(CURRENCY_AMOUNT_PATTERNS)),
    _trailing_lines,
)


def extract_amount(text: str) -> str:
    """
    Extract the bill total as a decimal-looking string.

    Args:
        text: Normalized recognized text

    Returns:
        Amount without currency marker or thousands separators, or "" when
        nothing plausible was found
    """
    found = first_match(GENERIC_AMOUNT_STEPS, text)
    if found is None:
        logger.debug("No amount found")
        return ""
    return normalize_amount(found)


def labeled_amount_step(labels: list[str]):
    """
    Build a step matching vendor-specific total labels anywhere in the text.

    Used by override rules whose bills print the payable total under their own
    wording (for example "Total (Incl. of all taxes)").
    """
    patterns = [
        re.compile(rf"{label}\s*[:\-=]?\s*{CURRENCY}?\s*({NUMBER})", re.IGNORECASE)
        for label in labels
    ]
    return pattern_step(patterns)
