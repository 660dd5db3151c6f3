from enum import Enum

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Closed set of bill categories, in tie-break order."""
    UTILITIES = "Utilities"
    OFFICE_SUPPLIES = "Office Supplies"
    TRAVEL = "Travel"
    FOOD_AND_DINING = "Food & Dining"
    SHOPPING = "Shopping"
    RENT_AND_LEASE = "Rent & Lease"
    INSURANCE = "Insurance"
    SERVICES = "Services"
    OTHERS = "Others"


DESCRIPTION_MAX_LENGTH = 100


class BillRecord(BaseModel):
    vendor: str
    amount: str = ""  # Decimal-looking substring, empty when nothing was found
    date: str
    category: Category = Category.OTHERS
    description: str = Field(max_length=DESCRIPTION_MAX_LENGTH)


class SaveBillRequest(BaseModel):
    """Bill as confirmed (and possibly edited) by the user before saving"""
    vendor: str = ""
    amount: str = ""
    date: str = ""
    category: Category = Category.OTHERS
    description: str = Field("", max_length=DESCRIPTION_MAX_LENGTH)
