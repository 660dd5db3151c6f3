from loguru import logger

from .cascade import non_empty_lines
from .patterns import CONTACT_INFO, NUMERIC_NOISE, ONLY_DATE

UNKNOWN_VENDOR = "Unknown Vendor"
VENDOR_SCAN_LINES = 5


def is_vendor_candidate(line: str) -> bool:
    """A header line can name the vendor unless it is too short, a bare date, numeric noise or contact details."""
    if len(line) <= 2:
        return False
    if ONLY_DATE.fullmatch(line):
        return False
    if NUMERIC_NOISE.fullmatch(line):
        return False
    if CONTACT_INFO.search(line):
        return False
    return True


def identify_vendor(text: str) -> str:
    """
    Pick the vendor name from the bill header.

    Vendors print their name at the top, so only the first five non-empty
    lines are considered. The first plausible line wins.

    Args:
        text: Normalized recognized text

    Returns:
        Vendor name, or "Unknown Vendor" when no header line qualifies
    """
    for line in non_empty_lines(text)[:VENDOR_SCAN_LINES]:
        if is_vendor_candidate(line):
            return line

    logger.debug("No vendor candidate in header lines")
    return UNKNOWN_VENDOR
