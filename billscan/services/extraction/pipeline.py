"""
Bill field extraction pipeline.

Turns recognized OCR text into a BillRecord:
1. Normalize whitespace and line endings
2. Look for a vendor override rule (first matching rule wins)
3. Run the rule's extractors for the fields it overrides and the generic
   extractors for everything else
4. Assemble the record

Extraction never fails on odd input; every field degrades to its default.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from loguru import logger

from ...models.bill import BillRecord
from .amount import extract_amount
from .category import CategoryClassifier, default_classifier
from .date import Clock, extract_date
from .description import extract_description, truncate_description
from .overrides import DEFAULT_OVERRIDE_RULES, VendorOverrideRule, find_override
from .vendor import identify_vendor

_HORIZONTAL_SPACE = re.compile(r"[ \t\u00a0\u2007\u202f]+")


def normalize_text(text: str) -> str:
    """Unify line endings and collapse runs of horizontal whitespace."""
    if not text:
        return ""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [_HORIZONTAL_SPACE.sub(" ", line).strip() for line in text.split("\n")]
    return "\n".join(lines)


@dataclass(frozen=True)
class ExtractionResult:
    record: BillRecord
    matched_rule: Optional[str] = None


class BillExtractor:
    """
    Rule-based extractor from recognized text to BillRecord.

    The override registry, category classifier and clock are injected so tests
    (and hosts with their own vendor families) can substitute them. All three
    are read-only after construction, so one instance can serve concurrent
    callers.
    """

    def __init__(
        self,
        override_rules: Sequence[VendorOverrideRule] = DEFAULT_OVERRIDE_RULES,
        classifier: CategoryClassifier = default_classifier,
        clock: Clock = datetime.now,
    ):
        self.override_rules = tuple(override_rules)
        self.classifier = classifier
        self.clock = clock

    def extract(self, text: str) -> BillRecord:
        return self.extract_with_details(text).record

    def extract_with_details(self, text: str) -> ExtractionResult:
        normalized = normalize_text(text)
        rule = find_override(normalized.lower(), self.override_rules)

        if rule is not None:
            logger.info(
                "Vendor override rule matched",
                rule=rule.name,
                fields=rule.overridden_fields,
            )

        vendor = rule.vendor(normalized) if rule and rule.vendor else identify_vendor(normalized)
        amount = rule.amount(normalized) if rule and rule.amount else extract_amount(normalized)
        category = rule.category(normalized) if rule and rule.category else self.classifier.classify(normalized)
        if rule and rule.description:
            description = truncate_description(rule.description(normalized, vendor))
        else:
            description = extract_description(normalized, vendor)
        date = extract_date(normalized, clock=self.clock)

        record = BillRecord(
            vendor=vendor,
            amount=amount,
            date=date,
            category=category,
            description=description,
        )

        logger.info(
            "Extracted bill fields",
            vendor=record.vendor,
            amount=record.amount,
            date=record.date,
            category=record.category.value,
            matched_rule=rule.name if rule else None,
        )
        return ExtractionResult(record=record, matched_rule=rule.name if rule else None)


default_extractor = BillExtractor()


def extract_bill(text: str) -> BillRecord:
    """Convenience function extracting a BillRecord with the default rules and clock."""
    return default_extractor.extract(text)
