"""
Bill field extraction engine: recognized text in, BillRecord out.
"""

from .category import DEFAULT_KEYWORD_TABLE, CategoryClassifier, build_keyword_table, classify_category
from .overrides import DEFAULT_OVERRIDE_RULES, VendorOverrideRule, contains_all, contains_any
from .pipeline import BillExtractor, ExtractionResult, default_extractor, extract_bill, normalize_text

__all__ = [
    "BillExtractor",
    "CategoryClassifier",
    "DEFAULT_KEYWORD_TABLE",
    "DEFAULT_OVERRIDE_RULES",
    "ExtractionResult",
    "VendorOverrideRule",
    "build_keyword_table",
    "classify_category",
    "contains_all",
    "contains_any",
    "default_extractor",
    "extract_bill",
    "normalize_text",
]
