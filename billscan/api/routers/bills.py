from fastapi import APIRouter, UploadFile, File, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from loguru import logger

from ..deps import ExtractRequest, ExtractResponse, ScanResponse, SaveBillResponse, SavedBill
from ...core.config import settings
from ...models.bill import Category, SaveBillRequest
from ...services.extraction import default_extractor
from ...services.ocr_engine import OcrEngineError, get_ocr_engine
from ...services.save_rules import BillSaveRules
from ...services.storage import bill_store

router = APIRouter(prefix="/bills", tags=["bills"])

PROCESSING_FAILED = "Processing failed: There was an error processing your bill. Please try again."

save_rules = BillSaveRules()


@router.get("/categories", response_model=list[str])
def list_categories():
    """Bill categories in declaration order."""
    return [category.value for category in Category]


@router.post("/extract", response_model=ExtractResponse)
def extract(req: ExtractRequest):
    """
    Extract bill fields from already-recognized text.

    Example request:
    {
        "text": "Electric Company Inc.\\n04/05/2023\\nTotal: $142.50"
    }
    """
    result = default_extractor.extract_with_details(req.text)
    return ExtractResponse(**result.record.model_dump(), matched_rule=result.matched_rule)


@router.post("/scan", response_model=ScanResponse)
async def scan(request: Request, file: UploadFile = File(None), language: str | None = None):
    """
    Recognize a bill image and extract its fields.

    Accepts either:
    - multipart/form-data (file upload via form)
    - image/* or application/octet-stream (raw binary body)
    """
    if file:
        content = await file.read()
    else:
        content = await request.body()

    if not content:
        raise HTTPException(status_code=422, detail="No image provided (either multipart or raw body)")
    if len(content) > settings.max_image_bytes:
        raise HTTPException(
            status_code=422,
            detail=f"Image too large: {len(content)} bytes (limit {settings.max_image_bytes})"
        )

    language_code = language or settings.ocr_language
    engine = get_ocr_engine()

    try:
        recognized = await run_in_threadpool(engine.recognize, content, language_code)
    except OcrEngineError as e:
        logger.error(f"Bill scan failed: {str(e)}")
        raise HTTPException(status_code=502, detail=PROCESSING_FAILED)

    result = default_extractor.extract_with_details(recognized.text)
    return ScanResponse(
        **result.record.model_dump(),
        matched_rule=result.matched_rule,
        recognized_text=recognized.text,
        engine=recognized.engine,
        language=recognized.language,
    )


@router.post("", response_model=SaveBillResponse, status_code=status.HTTP_201_CREATED)
def save_bill(req: SaveBillRequest):
    """
    Save a bill the user has reviewed.

    Vendor, amount and date must be filled in; the fields are stored as given.
    """
    decision = save_rules.evaluate(req)
    if not decision.accepted:
        raise HTTPException(
            status_code=422,
            detail={"message": decision.reason, "checks": decision.checks}
        )

    bill_id = bill_store.create_bill(req.model_dump(mode="json"))
    logger.info("Bill saved", bill_id=bill_id, vendor=req.vendor)
    return SaveBillResponse(bill_id=bill_id, reason=decision.reason, checks=decision.checks)


@router.get("", response_model=list[SavedBill])
def list_bills():
    return bill_store.list_all()


@router.get("/{bill_id}", response_model=SavedBill)
def get_bill(bill_id: str):
    saved = bill_store.get_bill(bill_id)
    if saved is None:
        raise HTTPException(status_code=404, detail=f"Bill {bill_id} not found")
    return saved
