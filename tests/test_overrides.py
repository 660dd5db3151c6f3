"""
Tests for vendor override rules.
"""

from billscan.models.bill import Category
from billscan.services.extraction import BillExtractor, VendorOverrideRule, contains_any
from billscan.services.extraction.overrides import (
    DEFAULT_OVERRIDE_RULES,
    amount_or_generic,
    dish_names,
    find_override,
)

DHABA_BILL = (
    "Sukhdev Vaishno Dhaba\n"
    "Murthal\n"
    "Date: 12/03/2023\n"
    "Dal Makhani 2 180.00 360.00\n"
    "Butter Naan 4 40.00 160.00\n"
    "Sub Total 520.00\n"
    "CGST 2.5% 13.00\n"
    "SGST 2.5% 13.00\n"
    "Grand Total 546.00"
)


def test_dhaba_rule(fixed_clock):
    result = BillExtractor(clock=fixed_clock).extract_with_details(DHABA_BILL)
    record = result.record

    assert result.matched_rule == "sukhdev-vaishno-dhaba"
    assert record.vendor == "Sukhdev Vaishno Dhaba"
    assert record.amount == "546.00"
    assert record.category == Category.FOOD_AND_DINING
    assert record.description == "Dine-in order: Dal Makhani, Butter Naan"
    assert record.date == "12/03/2023"


def test_dhaba_without_dish_lines():
    text = "SUKHDEV VAISHNO DHABA\nGT Road\nBill Amount: 300"
    record = BillExtractor().extract(text)
    assert record.description == "Dine-in order at Sukhdev Vaishno Dhaba"
    assert record.amount == "300"


def test_dhaba_predicate_needs_all_keywords():
    assert find_override("vaishno dhaba murthal", DEFAULT_OVERRIDE_RULES) is None


def test_dish_names_skip_summary_lines():
    assert dish_names(DHABA_BILL) == ["Dal Makhani", "Butter Naan"]


def test_dmart_rule():
    text = (
        "Avenue Supermarts Ltd\n"
        "DMart Powai\n"
        "No. of Items: 12\n"
        "Total (Incl. of all taxes): 1,234.00\n"
        "Cash 1,300.00\n"
        "Change 66.00"
    )
    result = BillExtractor().extract_with_details(text)
    assert result.matched_rule == "dmart"
    assert result.record.vendor == "DMart"
    assert result.record.amount == "1234.00"
    assert result.record.category == Category.SHOPPING
    assert result.record.description == "Retail purchase at DMart (12 items)"


def test_bses_rule():
    text = (
        "BSES Rajdhani Power Ltd\n"
        "Bill Month: Mar-2024\n"
        "Units: 320\n"
        "Net Amount Payable: 2,310.00\n"
        "Pay before 15/04/2024"
    )
    result = BillExtractor().extract_with_details(text)
    assert result.matched_rule == "bses-electricity"
    assert result.record.vendor == "BSES"
    assert result.record.amount == "2310.00"
    assert result.record.category == Category.UTILITIES
    assert result.record.description == "Electricity bill for Mar-2024"


def test_first_matching_rule_wins():
    rules = [
        VendorOverrideRule(name="first", predicate=contains_any("acme"), category=lambda text: Category.TRAVEL),
        VendorOverrideRule(name="second", predicate=contains_any("acme"), category=lambda text: Category.INSURANCE),
    ]
    result = BillExtractor(override_rules=rules).extract_with_details("ACME Corp\nTotal: $5.00")
    assert result.matched_rule == "first"
    assert result.record.category == Category.TRAVEL


def test_partial_rule_keeps_generic_fields():
    rules = [VendorOverrideRule(name="acme", predicate=contains_any("acme"), category=lambda text: Category.SERVICES)]
    record = BillExtractor(override_rules=rules).extract("ACME Corp\nTotal: $5.00")
    assert record.vendor == "ACME Corp"
    assert record.amount == "5.00"
    assert record.category == Category.SERVICES


def test_amount_or_generic_falls_back():
    extract = amount_or_generic(lambda text: None)
    assert extract("Corner Cafe\nLatte 120.00\nCroissant 90.50\nThank you for visiting us today") == "120.00"


def test_overridden_fields():
    rule = DEFAULT_OVERRIDE_RULES[0]
    assert rule.overridden_fields == ["vendor", "amount", "category", "description"]
