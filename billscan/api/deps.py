from pydantic import BaseModel

from ..models.bill import BillRecord


class ExtractRequest(BaseModel):
    text: str = ""


class ExtractResponse(BillRecord):
    matched_rule: str | None = None  # Name of the vendor override rule used, if any


class ScanResponse(ExtractResponse):
    recognized_text: str  # Full OCR text the fields were extracted from
    engine: str
    language: str


class SaveBillResponse(BaseModel):
    bill_id: str
    reason: str
    checks: dict


class SavedBill(BaseModel):
    id: str
    bill: BillRecord
    saved_at: str
