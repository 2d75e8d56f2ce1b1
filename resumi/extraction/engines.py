from collections.abc import Callable
from functools import partial

from resumi.config.settings import Settings
from resumi.ocr.base import BaseOcrEngine
from resumi.ocr.tesseract_adapter import TesseractEngine
from resumi.pdf.base import BasePdfExtractor
from resumi.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resumi.pdf.pymupdf_adapter import PyMuPdfAdapter


class EngineFactory:
    """Resolves the PDF and OCR engines named in settings."""

    PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    OCR_ENGINES: dict[str, type[TesseractEngine]] = {
        "tesseract": TesseractEngine,
    }

    @classmethod
    def pdf_extractor(cls, settings: Settings) -> BasePdfExtractor:
        adapter_cls = cls._lookup(cls.PDF_ENGINES, settings.pdf_engine, "PDF")
        return adapter_cls()

    @classmethod
    def ocr_engine_factory(cls, settings: Settings) -> Callable[[], BaseOcrEngine]:
        """Return a callable building a fresh, not yet acquired OCR engine.

        Engines are scoped to a single extraction, so the extractor gets a
        factory rather than an instance.
        """
        engine_cls = cls._lookup(cls.OCR_ENGINES, settings.ocr_engine, "OCR")
        return partial(engine_cls, language=settings.ocr_language)

    @staticmethod
    def _lookup(registry: dict[str, type], name: str, kind: str) -> type:
        key = name.lower()
        if key not in registry:
            raise ValueError(
                f"Unknown {kind} engine '{key}'. Choose from: {sorted(registry)}"
            )
        return registry[key]
