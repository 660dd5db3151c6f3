from loguru import logger

from ...models.bill import DESCRIPTION_MAX_LENGTH
from .patterns import LABELED_DESCRIPTION, NUMERIC_NOISE, SUMMARY_KEYWORDS

ELLIPSIS = "..."


def truncate_description(description: str, limit: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Cut to limit characters, ending in an ellipsis when shortened."""
    if len(description) <= limit:
        return description
    return description[: limit - len(ELLIPSIS)] + ELLIPSIS


def _labeled_description(text: str) -> str | None:
    for match in LABELED_DESCRIPTION.finditer(text):
        value = match.group(1).strip()
        if len(value) > 3:
            return value
    return None


def _is_body_line(line: str) -> bool:
    if len(line) <= 5:
        return False
    if NUMERIC_NOISE.fullmatch(line):
        return False
    lowered = line.lower()
    return not any(keyword in lowered for keyword in SUMMARY_KEYWORDS)


def _body_line(text: str) -> str | None:
    # Middle half of the character span, partial edge lines included
    middle = text[len(text) // 4: (len(text) * 3) // 4]
    for line in middle.split("\n"):
        line = line.strip()
        if _is_body_line(line):
            return line
    return None


def extract_description(text: str, vendor: str) -> str:
    """
    Describe the bill in at most 100 characters.

    Tries a labelled field (Description:, Item:, Memo: ...), then the first
    plausible line from the body of the bill, then "Bill from {vendor}".

    Args:
        text: Normalized recognized text
        vendor: Vendor name already chosen for this bill

    Returns:
        Description no longer than 100 characters
    """
    description = _labeled_description(text) or _body_line(text)
    if description is None:
        logger.debug("No description line found, using placeholder")
        description = f"Bill from {vendor}"
    return truncate_description(description)
