from pathlib import Path

import pytesseract
from PIL import Image

from resumi.logging.logger import Log
from resumi.ocr.base import BaseOcrEngine
from resumi.ocr.exceptions import OcrError


class TesseractEngine(BaseOcrEngine):
    """OCR engine backed by the Tesseract binary through pytesseract."""

    def __init__(self, language: str = "eng") -> None:
        self._language = language
        self._images: list[Image.Image] = []
        self._ready = False

    @property
    def language(self) -> str:
        return self._language

    def acquire(self) -> None:
        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as exc:
            raise OcrError(f"Tesseract is not available: {exc}") from exc
        self._ready = True
        Log.debug(f"Tesseract {version} acquired (lang={self._language})")

    def release(self) -> None:
        for image in self._images:
            image.close()
        self._images.clear()
        self._ready = False

    def recognize(self, path: Path) -> str:
        if not self._ready:
            raise OcrError("OCR engine used outside of its scope")
        try:
            image = Image.open(path)
            self._images.append(image)
            return pytesseract.image_to_string(image, lang=self._language)
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(str(exc)) from exc
