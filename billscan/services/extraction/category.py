"""
Keyword-frequency bill categorization.

Each category owns a set of lowercase trigger substrings. The category with the
most distinct triggers present in the text wins; ties go to the category
declared first in the table; no trigger at all means "Others".
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from loguru import logger

from ...models.bill import Category

CategoryKeywordTable = Mapping[Category, frozenset[str]]


def build_keyword_table(entries: Mapping[Category, Iterable[str]]) -> CategoryKeywordTable:
    """Freeze a category -> keywords mapping, preserving declaration order."""
    return MappingProxyType({
        category: frozenset(keyword.lower() for keyword in keywords)
        for category, keywords in entries.items()
    })


# Keywords are matched as substrings of the lowered text, so short words that
# hide inside common ones ("lease" in "please", "mall" in "small") are written
# as phrases instead.
DEFAULT_KEYWORD_TABLE: CategoryKeywordTable = build_keyword_table({
    Category.UTILITIES: [
        "electricity", "electric", "power supply", "power bill", "water supply", "water bill",
        "sewer", "utility", "internet", "broadband", "wifi", "telephone bill", "mobile bill",
        "postpaid", "recharge", "kwh", "meter reading", "units consumed", "bses", "tata power",
        "gas bill", "lpg",
    ],
    Category.OFFICE_SUPPLIES: [
        "office supplies", "stationery", "a4 paper", "copier paper", "printer", "toner",
        "cartridge", "ball pen", "gel pen", "pencil", "stapler", "notebook", "folder",
        "envelope", "staples", "office depot",
    ],
    Category.TRAVEL: [
        "flight", "airline", "airways", "boarding", "hotel", "taxi", "cab fare", "uber",
        "ola cabs", "train ticket", "railway", "irctc", "bus ticket", "ticket", "fuel",
        "petrol", "diesel", "parking", "toll plaza", "toll fee", "travel",
    ],
    Category.FOOD_AND_DINING: [
        "restaurant", "cafe", "coffee", "food", "dining", "dine", "meal", "pizza",
        "burger", "dhaba", "kitchen", "bakery", "thali", "naan", "paneer",
        "biryani", "beverage", "swiggy", "zomato",
    ],
    Category.SHOPPING: [
        "store", "supermart", "hypermart", "supermarket", "retail", "shopping mall", "shop",
        "apparel", "clothing", "fashion", "electronics", "grocery", "groceries", "amazon",
        "flipkart", "walmart", "dmart",
    ],
    Category.RENT_AND_LEASE: [
        "rent receipt", "monthly rent", "house rent", "lease agreement", "lease rent",
        "tenant", "landlord", "rental", "premises", "property",
        "maintenance charges", "security deposit",
    ],
    Category.INSURANCE: [
        "insurance", "policy no", "policy number", "premium amount", "premium due",
        "insured", "coverage", "claim no", "claim number", "assurance", "sum assured",
    ],
    Category.SERVICES: [
        "service", "services", "consulting", "repair", "cleaning", "courier",
        "delivery", "subscription", "labour", "labor charge", "installation", "salon",
        "laundry", "professional fee",
    ],
})


class CategoryClassifier:
    """Classifies recognized text into one Category using an injected keyword table."""

    def __init__(self, keyword_table: CategoryKeywordTable = DEFAULT_KEYWORD_TABLE):
        self.keyword_table = keyword_table

    def scores(self, text: str) -> dict[Category, int]:
        """Count distinct keywords of each category present in the text."""
        lowered = text.lower()
        return {
            category: sum(1 for keyword in keywords if keyword in lowered)
            for category, keywords in self.keyword_table.items()
        }

    def classify(self, text: str) -> Category:
        best_category = Category.OTHERS
        best_score = 0

        # Strict ">" keeps the first-declared category on ties
        for category, score in self.scores(text).items():
            if score > best_score:
                best_category = category
                best_score = score

        logger.debug(
            "Category keyword scoring",
            category=best_category.value,
            score=best_score,
        )
        return best_category


default_classifier = CategoryClassifier()


def classify_category(text: str) -> Category:
    return default_classifier.classify(text)
