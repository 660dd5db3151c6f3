"""
Tests for bill date extraction.
"""

from billscan.services.extraction.date import extract_date

BODY = (
    "Item one 10.00\nItem two 20.00\nItem three 30.00\n"
    "Item four 40.00\nItem five 50.00\nTotal 150.00"
)


def test_labeled_date_preferred_over_earlier_bare_date(fixed_clock):
    text = "Order 12/01/2023\nBill Date: 15/01/2023\n" + BODY
    assert extract_date(text, clock=fixed_clock) == "15/01/2023"


def test_iso_date_after_label(fixed_clock):
    text = "Metro Stores\nInvoice Date: 2023-11-05\nItem 1 20.00\nItem 2 30.00\nTotal 50.00"
    assert extract_date(text, clock=fixed_clock) == "2023-11-05"


def test_bare_date_on_early_line_is_returned_verbatim(fixed_clock):
    text = "Electric Company Inc.\n04/05/2023\nAccount 99812\nMonthly electricity bill\nTotal: $142.50"
    assert extract_date(text, clock=fixed_clock) == "04/05/2023"


def test_month_name_date(fixed_clock):
    text = "The Grand Hotel\n5 April 2023\n" + BODY
    assert extract_date(text, clock=fixed_clock) == "5 April 2023"


def test_no_calendar_validation(fixed_clock):
    text = "Metro Stores\nDate: 31/02/2023\n" + BODY
    assert extract_date(text, clock=fixed_clock) == "31/02/2023"


def test_fallback_uses_clock(fixed_clock):
    assert extract_date("Corner Cafe\nThank you", clock=fixed_clock) == "01/07/2024"
    assert extract_date("", clock=fixed_clock) == "01/07/2024"


def test_date_outside_header_is_ignored(fixed_clock):
    items = "\n".join(f"Item {n} 1.00" for n in range(1, 13))
    text = "Shop\n" + items + "\nDate: 01/02/2023"
    assert extract_date(text, clock=fixed_clock) == "01/07/2024"


ADDRESS_HEADER = (
    "Mega Electronics Showroom\nShop 14 Ground Floor\nSector 18 Market\n"
    "Noida Uttar Pradesh\nGSTIN 09ABCDE1234F1Z5\n"
)


def test_labeled_date_within_first_ten_lines_but_past_first_third(fixed_clock):
    text = ADDRESS_HEADER + "Date: 01/02/2023\nTV 1 100.00"
    assert extract_date(text, clock=fixed_clock) == "01/02/2023"


def test_bare_date_within_first_ten_lines_but_past_first_third(fixed_clock):
    text = ADDRESS_HEADER + "Counter 3 01/02/2023\nTV 1 100.00"
    assert extract_date(text, clock=fixed_clock) == "01/02/2023"
