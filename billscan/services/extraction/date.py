"""
Bill date extraction.

Dates are printed in the header, so only the first third of the text and then
the first ten lines are searched. Matches are returned exactly as printed;
day/month order is ambiguous across locales and calendar validity is not
checked. When nothing matches, today's date (from the injected clock) is used.
"""

from datetime import datetime
from typing import Callable

from loguru import logger

from .cascade import first_match, head, non_empty_lines, pattern_step, per_line, within
from .patterns import BARE_DATE_PATTERNS, LABELED_DATE_PATTERNS

Clock = Callable[[], datetime]

FALLBACK_DATE_FORMAT = "%m/%d/%Y"
HEADER_REGION = 1 / 3
HEADER_LINES = 10


def _header_lines(text: str) -> list[str]:
    return non_empty_lines(text)[:HEADER_LINES]


GENERIC_DATE_STEPS = (
    within(head(HEADER_REGION), pattern_step(LABELED_DATE_PATTERNS)),
    within(head(HEADER_REGION), pattern_step(BARE_DATE_PATTERNS)),
    per_line(_header_lines, pattern_step(LABELED_DATE_PATTERNS)),
    per_line(_header_lines, pattern_step(BARE_DATE_PATTERNS)),
)


def extract_date(text: str, clock: Clock = datetime.now) -> str:
    """
    Extract the bill date.

    Args:
        text: Normalized recognized text
        clock: Source of "now" for the fallback

    Returns:
        The date substring as printed, or the current date as MM/DD/YYYY
    """
    found = first_match(GENERIC_DATE_STEPS, text)
    if found is not None:
        return found

    fallback = clock().strftime(FALLBACK_DATE_FORMAT)
    logger.debug("No date found, using current date", fallback=fallback)
    return fallback
