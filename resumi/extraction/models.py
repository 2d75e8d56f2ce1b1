from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ProcessingMethod(str, Enum):
    """How the text of an upload was obtained."""

    PDF_TEXT = "pdf-text"
    IMAGE_OCR = "image-ocr"


PDF_MIME_TYPES = frozenset({"application/pdf"})
IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})
ALLOWED_MIME_TYPES = PDF_MIME_TYPES | IMAGE_MIME_TYPES


@dataclass(frozen=True)
class UploadedDocument:
    """A received file waiting for extraction. Lives only for one request."""

    filename: str
    mime_type: str
    size_bytes: int
    path: Path


@dataclass(frozen=True)
class PdfUpload:
    """An upload whose text is read from its PDF text layer."""

    document: UploadedDocument


@dataclass(frozen=True)
class ImageUpload:
    """An upload whose text is recognized by OCR."""

    document: UploadedDocument


Upload = PdfUpload | ImageUpload


@dataclass(frozen=True)
class ExtractionResult:
    """Plain text extracted from an upload."""

    text: str
    processing_method: ProcessingMethod
    filename: str
    file_size: int
    mime_type: str

    @property
    def text_length(self) -> int:
        return len(self.text)

    def to_dict(self) -> dict[str, object]:
        return {
            "filename": self.filename,
            "fileSize": self.file_size,
            "mimeType": self.mime_type,
            "textLength": self.text_length,
            "extractedText": self.text,
            "processingMethod": self.processing_method.value,
        }
