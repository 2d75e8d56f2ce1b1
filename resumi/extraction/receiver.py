import re
import secrets
import time
from pathlib import Path

from resumi.exceptions import InvalidInputError
from resumi.extraction.models import (
    ALLOWED_MIME_TYPES,
    IMAGE_MIME_TYPES,
    ImageUpload,
    PdfUpload,
    Upload,
    UploadedDocument,
)
from resumi.logging.logger import Log

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def sanitize_filename(filename: str) -> str:
    """Replace every character outside ``[a-zA-Z0-9.-]`` with an underscore."""
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)


def temporary_file_name(filename: str) -> str:
    """Build a unique on-disk name: resume-{millis}-{random}{ext}"""
    suffix = Path(sanitize_filename(filename)).suffix
    return f"resume-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{suffix}"


def remove_file(path: Path) -> None:
    """Delete a temporary file. A file that is already gone is not an error."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        Log.warning(f"Could not remove temporary file {path}: {exc}")


class UploadReceiver:
    """Validates an incoming file and stores it for a single extraction."""

    def __init__(self, upload_dir: Path, max_file_size_bytes: int) -> None:
        self._upload_dir = upload_dir
        self._max_file_size_bytes = max_file_size_bytes

    def receive(self, filename: str, mime_type: str, content: bytes) -> Upload:
        """Check size and media type, then write the bytes to the upload dir.

        Raises:
            InvalidInputError: if the file is empty, too large, or of a type
                other than PDF, JPEG or PNG. Nothing is written in that case.
        """
        if not content:
            raise InvalidInputError("No file uploaded")
        if len(content) > self._max_file_size_bytes:
            raise InvalidInputError(
                f"File too large. Maximum size is {self._max_file_size_bytes} bytes."
            )
        mime_type = mime_type.lower()
        if mime_type not in ALLOWED_MIME_TYPES:
            raise InvalidInputError("Only PDF, JPG, and PNG files are allowed!")

        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / temporary_file_name(filename)
        path.write_bytes(content)
        Log.info(f"Received {filename} ({len(content)} bytes, {mime_type})")

        document = UploadedDocument(
            filename=filename,
            mime_type=mime_type,
            size_bytes=len(content),
            path=path,
        )
        if mime_type in IMAGE_MIME_TYPES:
            return ImageUpload(document)
        return PdfUpload(document)
