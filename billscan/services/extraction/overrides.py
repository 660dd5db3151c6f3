"""
Vendor override rules.

Generic heuristics are weak for bill families with a known, distinct layout
(itemised restaurant receipts, retail receipts whose payable total includes
tax, utility bills with "amount payable" blocks). Each family gets a rule: a
predicate over the lower-cased text plus the extractors that replace the
generic ones for the fields it overrides. Rules are plain data evaluated in
priority order by the pipeline; adding a vendor family means adding an entry.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from ...models.bill import Category
from .amount import extract_amount, labeled_amount_step, normalize_amount
from .cascade import Step
from .description import truncate_description
from .patterns import SUMMARY_KEYWORDS

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class VendorOverrideRule:
    """Predicate-guarded bundle of field extractors for one vendor family"""
    name: str
    predicate: Predicate
    vendor: Optional[Callable[[str], str]] = None
    amount: Optional[Callable[[str], str]] = None
    category: Optional[Callable[[str], Category]] = None
    description: Optional[Callable[[str, str], str]] = None

    def matches(self, lowered_text: str) -> bool:
        return self.predicate(lowered_text)

    @property
    def overridden_fields(self) -> list[str]:
        return [
            field for field in ("vendor", "amount", "category", "description")
            if getattr(self, field) is not None
        ]


def contains_all(*keywords: str) -> Predicate:
    return lambda lowered: all(keyword in lowered for keyword in keywords)


def contains_any(*keywords: str) -> Predicate:
    return lambda lowered: any(keyword in lowered for keyword in keywords)


def constant(value):
    """Extractor ignoring the text and always producing value."""
    return lambda *_: value


def amount_or_generic(step: Step) -> Callable[[str], str]:
    """Vendor-specific total labels first, the generic amount cascade otherwise."""
    def _extract(text: str) -> str:
        found = step(text)
        if found is None:
            return extract_amount(text)
        return normalize_amount(found)
    return _extract


def find_override(lowered_text: str, rules: Iterable[VendorOverrideRule]) -> Optional[VendorOverrideRule]:
    """Return the first rule whose predicate holds, in priority order."""
    for rule in rules:
        if rule.matches(lowered_text):
            return rule
    return None


# ── Sukhdev Vaishno Dhaba: itemised restaurant receipt ──────────

DHABA_VENDOR = "Sukhdev Vaishno Dhaba"

# "Dal Makhani   2   180.00   360.00"
_DISH_LINE = re.compile(
    r"^\s*([A-Za-z][A-Za-z .&'()\-]{2,}?)\s+(\d{1,3})\s+(?:x\s*)?\d+(?:\.\d{1,2})?"
    r"(?:\s+\d[\d,]*(?:\.\d{1,2})?)?\s*$",
    re.MULTILINE,
)


def dish_names(text: str) -> list[str]:
    names = []
    for match in _DISH_LINE.finditer(text):
        name = match.group(1).strip()
        if any(keyword in name.lower() for keyword in SUMMARY_KEYWORDS):
            continue
        names.append(name.title())
    return names


def dhaba_description(text: str, vendor: str) -> str:
    names = dish_names(text)
    if not names:
        return f"Dine-in order at {vendor}"
    return truncate_description("Dine-in order: " + ", ".join(names))


# ── DMart: retail totals printed inclusive of tax ───────────────

_ITEM_COUNT = re.compile(
    r"\b(?:no\.?\s*of\s*items|items|qty)\s*[:\-]?\s*(\d+)\b",
    re.IGNORECASE,
)


def dmart_description(text: str, vendor: str) -> str:
    match = _ITEM_COUNT.search(text)
    if match:
        return f"Retail purchase at {vendor} ({match.group(1)} items)"
    return f"Retail purchase at {vendor}"


# ── BSES: electricity bill ──────────────────────────────────────

_BILL_MONTH = re.compile(
    r"\bbill\s*(?:month|period)\s*[:\-]?\s*([A-Za-z]{3,9}[\s\-',]*\d{2,4})",
    re.IGNORECASE,
)


def electricity_description(text: str, vendor: str) -> str:
    match = _BILL_MONTH.search(text)
    if match:
        return f"Electricity bill for {match.group(1).strip()}"
    return "Electricity bill"


DEFAULT_OVERRIDE_RULES: Sequence[VendorOverrideRule] = (
    VendorOverrideRule(
        name="sukhdev-vaishno-dhaba",
        predicate=contains_all("sukhdev", "vaishno", "dhaba"),
        vendor=constant(DHABA_VENDOR),
        amount=amount_or_generic(labeled_amount_step([
            r"\bgrand\s*total\b",
            r"\bnet\s*amount\b",
            r"\bamount\s*payable\b",
            r"\bbill\s*amount\b",
        ])),
        category=constant(Category.FOOD_AND_DINING),
        description=dhaba_description,
    ),
    VendorOverrideRule(
        name="dmart",
        predicate=contains_any("dmart", "avenue supermarts"),
        vendor=constant("DMart"),
        amount=amount_or_generic(labeled_amount_step([
            r"\bnet\s*payable\b",
            r"\btotal\s*\(?\s*incl(?:\.|usive)?\s*(?:of)?\s*(?:all)?\s*tax(?:es)?\s*\)?",
            r"\byou\s*pay\b",
        ])),
        category=constant(Category.SHOPPING),
        description=dmart_description,
    ),
    VendorOverrideRule(
        name="bses-electricity",
        predicate=contains_any("bses"),
        vendor=constant("BSES"),
        amount=amount_or_generic(labeled_amount_step([
            r"\bnet\s*amount\s*payable\b",
            r"\bamount\s*payable\b",
            r"\bpayable\s*by\s*due\s*date\b",
        ])),
        category=constant(Category.UTILITIES),
        description=electricity_description,
    ),
)
