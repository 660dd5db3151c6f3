"""
OCR engine boundary.

The extraction engine only ever sees the recognized text. Recognition is
all-or-nothing: an engine either returns usable text or raises OcrEngineError,
in which case no bill record is produced for that scan.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from loguru import logger
from azure.ai.documentintelligence import DocumentIntelligenceClient
from azure.core.credentials import AzureKeyCredential
from pydantic import BaseModel

from ..core.config import settings

ProgressCallback = Callable[[str], None]


class OcrEngineError(Exception):
    """Recognition failed or produced no usable text."""
    pass


class RecognizedText(BaseModel):
    text: str
    engine: str
    language: str


class OcrEngine(ABC):
    """Accepts an image and a language code, returns the recognized text."""

    name = "base"

    @abstractmethod
    def recognize(
        self,
        image_bytes: bytes,
        language_code: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> RecognizedText:
        """
        Recognize the text on a bill image.

        Args:
            image_bytes: Raw image (or PDF) bytes
            language_code: Language hint for the engine, e.g. "en"
            on_progress: Optional callback receiving informational status events

        Returns:
            RecognizedText with the full text as one string

        Raises:
            OcrEngineError: On any engine failure or when no text is recognized
        """
        pass

    @staticmethod
    def _report(on_progress: Optional[ProgressCallback], status: str) -> None:
        logger.debug(f"OCR progress: {status}")
        if on_progress is not None:
            on_progress(status)


class AzureReadOcrEngine(OcrEngine):
    """Azure AI Document Intelligence "read" model."""

    name = "azure-document-intelligence"

    def __init__(self, endpoint: str, api_key: str, model_id: str = "prebuilt-read"):
        self.endpoint = endpoint
        self.model_id = model_id
        self.client = DocumentIntelligenceClient(
            endpoint=endpoint,
            credential=AzureKeyCredential(api_key)
        )

    def recognize(self, image_bytes, language_code, on_progress=None):
        if not image_bytes:
            raise OcrEngineError("No image data provided")

        logger.info(
            "Using Azure Document Intelligence for text recognition",
            endpoint=self.endpoint[:50] + "..." if len(self.endpoint) > 50 else self.endpoint,
            model=self.model_id,
            size_bytes=len(image_bytes),
        )

        try:
            poller = self.client.begin_analyze_document(
                self.model_id,
                body=image_bytes,
                locale=language_code,
                content_type="application/octet-stream"
            )
            self._report(on_progress, "submitted")

            result = poller.result()
            self._report(on_progress, "completed")
        except Exception as e:
            logger.error(f"Azure DI recognition failed: {str(e)}")
            raise OcrEngineError(f"Text recognition failed: {str(e)}") from e

        content = getattr(result, "content", None) or ""
        if not content.strip():
            logger.warning("Azure DI returned no text for the image")
            raise OcrEngineError("No text recognized in image")

        return RecognizedText(text=content, engine=self.name, language=language_code)


MOCK_BILL_TEXT = (
    "Electric Company Inc.\n"
    "Customer Care: 1-800-555-0199\n"
    "Bill Date: 04/05/2023\n"
    "Account No: 7781-2201\n"
    "Description: Monthly electricity bill\n"
    "Units consumed: 512 kWh\n"
    "Energy charges $131.20\n"
    "Fixed charges $11.30\n"
    "Total Amount Due: $142.50\n"
)


class MockOcrEngine(OcrEngine):
    """Stand-in engine for local development when Azure is not configured."""

    name = "mock"

    def recognize(self, image_bytes, language_code, on_progress=None):
        if not image_bytes:
            raise OcrEngineError("No image data provided")

        self._report(on_progress, "completed")
        logger.info("Returning mock recognized text", file_size_bytes=len(image_bytes))
        return RecognizedText(text=MOCK_BILL_TEXT, engine=self.name, language=language_code)


def get_ocr_engine() -> OcrEngine:
    # Check if Azure Document Intelligence is configured
    if settings.az_di_endpoint and settings.az_di_api_key:
        return AzureReadOcrEngine(
            endpoint=settings.az_di_endpoint,
            api_key=settings.az_di_api_key,
            model_id=settings.ocr_model,
        )

    logger.warning(
        "Azure Document Intelligence not configured - using MOCK OCR. "
        "Set AZ_DI_ENDPOINT and AZ_DI_API_KEY to use real recognition."
    )
    return MockOcrEngine()
