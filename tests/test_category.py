"""
Tests for keyword-frequency categorization.
"""

import pytest

from billscan.models.bill import Category
from billscan.services.extraction import CategoryClassifier, build_keyword_table, classify_category


def test_utilities_keywords():
    assert classify_category("Monthly electricity bill\nUnits consumed: 512 kWh") == Category.UTILITIES


def test_case_insensitive():
    assert classify_category("ELECTRICITY BILL") == Category.UTILITIES


def test_food_keywords():
    assert classify_category("Pizza Palace\nMargherita pizza\nCoke") == Category.FOOD_AND_DINING


def test_distinct_keywords_counted_not_occurrences():
    text = "taxi taxi taxi taxi\nrestaurant dining"
    assert classify_category(text) == Category.FOOD_AND_DINING


def test_tie_goes_to_first_declared_category():
    # "internet" (Utilities) vs "cafe" (Food & Dining)
    assert classify_category("internet cafe") == Category.UTILITIES


def test_no_keywords_is_others():
    assert classify_category("lorem ipsum dolor") == Category.OTHERS
    assert classify_category("") == Category.OTHERS


def test_idempotent():
    text = "Hotel stay and taxi to the airport"
    assert classify_category(text) == classify_category(text)


def test_injected_keyword_table():
    classifier = CategoryClassifier(build_keyword_table({Category.TRAVEL: ["Zeppelin"]}))
    assert classifier.classify("zeppelin ride") == Category.TRAVEL
    assert classifier.classify("electricity") == Category.OTHERS


def test_scores_report_every_category():
    scores = CategoryClassifier().scores("electricity kwh")
    assert scores[Category.UTILITIES] >= 2
    assert Category.OTHERS not in scores


@pytest.mark.parametrize(
    "text",
    [
        "Thank you, please come again",
        "Regd. Office: 12 Small Lane\nHelp Desk toll-free 1800 200 300",
        "Smart choice, smart prices",
        "Business expenses summary",
        "Disclaimer: prices include tax",
    ],
)
def test_keywords_do_not_fire_inside_common_words(text):
    assert classify_category(text) == Category.OTHERS
