"""Turns an uploaded resume into plain text.

PDFs are read from their text layer; images go through OCR. A PDF whose text
layer is shorter than ``MIN_EXTRACTED_TEXT_LENGTH`` is assumed to be a scanned
image and the caller is asked to resubmit it as an image.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from resumi.config.settings import Settings
from resumi.extraction.engines import EngineFactory
from resumi.extraction.exceptions import (
    InsufficientTextError,
    OcrEngineError,
    PdfParseError,
    PdfParseTimeoutError,
    ScannedPdfSuspectedError,
)
from resumi.extraction.isolation import call_with_timeout
from resumi.extraction.models import (
    ExtractionResult,
    ImageUpload,
    PdfUpload,
    ProcessingMethod,
    Upload,
    UploadedDocument,
)
from resumi.extraction.receiver import remove_file
from resumi.logging.logger import Log
from resumi.ocr.base import BaseOcrEngine
from resumi.ocr.exceptions import OcrError
from resumi.pdf.base import BasePdfExtractor
from resumi.pdf.exceptions import PdfExtractionError

MIN_EXTRACTED_TEXT_LENGTH = 50
PDF_PARSE_TIMEOUT_SECONDS = 30.0


class TextExtractor:
    """Extracts plain text from PDF and image uploads."""

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        ocr_engine_factory: Callable[[], BaseOcrEngine],
        min_text_length: int = MIN_EXTRACTED_TEXT_LENGTH,
        pdf_timeout_seconds: float = PDF_PARSE_TIMEOUT_SECONDS,
        pdf_runner: Callable[..., Any] = call_with_timeout,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine_factory = ocr_engine_factory
        self._min_text_length = min_text_length
        self._pdf_timeout_seconds = pdf_timeout_seconds
        self._pdf_runner = pdf_runner

    def extract(self, upload: Upload) -> ExtractionResult:
        """Extract text from an upload and delete its temporary file.

        Raises:
            ExtractionError: a classified subclass describing what went wrong.
        """
        document = upload.document
        Log.info(f"Processing file: {document.filename}")
        try:
            if isinstance(upload, ImageUpload):
                return self._extract_image(document)
            if isinstance(upload, PdfUpload):
                return self._extract_pdf(document)
            raise TypeError(f"Unsupported upload type: {type(upload).__name__}")
        finally:
            remove_file(document.path)

    def _extract_image(self, document: UploadedDocument) -> ExtractionResult:
        Log.info("Starting OCR on image file...")
        try:
            with self._ocr_engine_factory() as engine:
                text = engine.recognize(document.path).strip()
        except OcrError as exc:
            Log.error(f"Image OCR failed: {exc}")
            raise OcrEngineError(str(exc)) from exc

        if len(text) < self._min_text_length:
            raise InsufficientTextError(
                f"OCR produced {len(text)} characters, need {self._min_text_length}"
            )

        Log.info(f"Image OCR successful: extracted {len(text)} characters")
        return self._build_result(document, text, ProcessingMethod.IMAGE_OCR)

    def _extract_pdf(self, document: UploadedDocument) -> ExtractionResult:
        text = self._parse_pdf(document.path).strip()
        if len(text) < self._min_text_length:
            Log.info(f"PDF has minimal text ({len(text)} characters), likely scanned")
            raise ScannedPdfSuspectedError(
                f"PDF text layer has {len(text)} characters, need {self._min_text_length}"
            )

        Log.info(f"Successfully extracted {len(text)} characters from PDF")
        return self._build_result(document, text, ProcessingMethod.PDF_TEXT)

    def _parse_pdf(self, path: Path) -> str:
        try:
            return self._pdf_runner(
                self._pdf_extractor.extract,
                path,
                timeout_seconds=self._pdf_timeout_seconds,
            )
        except TimeoutError as exc:
            Log.error(f"PDF parsing timed out after {self._pdf_timeout_seconds}s")
            raise PdfParseTimeoutError("PDF parsing timeout") from exc
        except (PdfExtractionError, ChildProcessError) as exc:
            Log.error(f"PDF parsing failed: {exc}")
            raise PdfParseError(str(exc)) from exc

    @staticmethod
    def _build_result(
        document: UploadedDocument,
        text: str,
        method: ProcessingMethod,
    ) -> ExtractionResult:
        return ExtractionResult(
            text=text,
            processing_method=method,
            filename=document.filename,
            file_size=document.size_bytes,
            mime_type=document.mime_type,
        )


def build_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor with the configured PDF and OCR engines."""
    return TextExtractor(
        pdf_extractor=EngineFactory.pdf_extractor(settings),
        ocr_engine_factory=EngineFactory.ocr_engine_factory(settings),
        min_text_length=settings.min_extracted_text_length,
        pdf_timeout_seconds=settings.pdf_parse_timeout_seconds,
    )
