# Regular expressions shared by the bill field extractors.
# OCR output has no guaranteed layout, so every pattern is case-insensitive and
# tolerant of optional separators and currency markers.

import re

# Currency markers: symbols first, then the textual codes printed on Indian/US bills
CURRENCY = r"(?:[$₹€£¥]|\b(?:rs|inr|usd|eur|gbp)\b\.?)"

# Any amount, integers allowed (used only after an explicit label)
NUMBER = r"(?:\d{1,3}(?:,\d{3})+(?:\.\d{1,2})?|\d+(?:\.\d{1,2})?)(?![\d])"

# Decimal amount with exactly two fraction digits
DECIMAL = r"(?:\d{1,3}(?:,\d{3})+\.\d{2}|\d+\.\d{2})(?![\d])"

MONTHS = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

# Y/M/D or D/M/Y (M/D/Y), separators / - . and a 2-4 digit year
NUMERIC_DATE = r"(?:\d{4}[/.\-]\d{1,2}[/.\-]\d{1,2}|\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4})(?![\d])"

# 5 April 2023, 5th Apr, 2023, April 5, 2023
MONTH_DATE = (
    rf"(?:\d{{1,2}}(?:st|nd|rd|th)?[\s\-]+{MONTHS}\.?[\s,\-]+\d{{2,4}}"
    rf"|{MONTHS}\.?\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{2,4}})\b"
)

DATE = rf"(?:{NUMERIC_DATE}|{MONTH_DATE})"

# ── Amount ──────────────────────────────────────────────────────

TOTAL_LABELS = [
    r"\bgrand\s*total\b",
    r"\b(?:amount|balance|total)\s*due\b",
    r"\b(?:net\s*amount|amount\s*payable|total\s*amount)\b",
    r"(?<!sub\s)(?<!sub-)\btotal\b",
    r"\bbalance\b",
    r"\bsum\b",
]

LABELED_TOTAL_PATTERNS = [
    re.compile(rf"{label}\s*[:\-=]?\s*{CURRENCY}?\s*({NUMBER})", re.IGNORECASE)
    for label in TOTAL_LABELS
]

CURRENCY_AMOUNT_PATTERNS = [
    re.compile(rf"{CURRENCY}\s*({DECIMAL})", re.IGNORECASE),
]

BARE_DECIMAL_PATTERN = re.compile(rf"(?<![\d.,])({DECIMAL})")

# ── Date ────────────────────────────────────────────────────────

DATE_LABELS = (
    r"\b(?:invoice\s*date|bill\s*date|receipt\s*date|date\s*of\s*issue|"
    r"issued(?:\s*on)?|date)\b"
)

LABELED_DATE_PATTERNS = [
    re.compile(rf"{DATE_LABELS}\s*[:\-]?\s*({DATE})", re.IGNORECASE),
]

BARE_DATE_PATTERNS = [
    re.compile(rf"(?<![\d/.\-])({DATE})", re.IGNORECASE),
]

# ── Vendor ──────────────────────────────────────────────────────

ONLY_DATE = re.compile(rf"\s*(?:date\s*[:\-]?\s*)?{DATE}\s*", re.IGNORECASE)

NUMERIC_NOISE = re.compile(r"[\d\s$₹€£¥.,:;/\\\-#*()+%=|_~'\"]+")

# Bare abbreviations (ph, mob, web) only count as contact labels when a number
# or separator follows, so names like "Web Print Studio" stay vendor candidates
CONTACT_INFO = re.compile(
    r"\b(?:tel|telephone|phone|fax|e-?mail|website)\b"
    r"|\b(?:ph|mob(?:ile)?|cell)\b\.?\s*(?:no\.?)?\s*[:\-]?\s*\+?\d"
    r"|\bweb\s*[:\-]"
    r"|\bwww\.|https?://|\S+@\S+\.\S+",
    re.IGNORECASE,
)

# ── Description ─────────────────────────────────────────────────

LABELED_DESCRIPTION = re.compile(
    r"\b(?:description|item|memo|note|remarks|details)s?\b\s*[:\-]\s*([^\n]+)",
    re.IGNORECASE,
)

SUMMARY_KEYWORDS = ("total", "subtotal", "tax", "discount")
