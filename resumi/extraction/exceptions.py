from resumi.exceptions import ResumiError


class ExtractionError(ResumiError):
    """Base exception for classified text-extraction failures."""

    user_message = "Text extraction failed."


class InsufficientTextError(ExtractionError):
    """Raised when OCR succeeds but yields too little text."""

    user_message = (
        "OCR completed but could not extract sufficient readable text from the image."
    )


class ScannedPdfSuspectedError(ExtractionError):
    """Raised when a PDF parses but has no usable text layer."""

    user_message = (
        "This appears to be a scanned PDF. Please convert your resume to JPG or PNG "
        "format and upload as an image file for OCR processing."
    )


class OcrEngineError(ExtractionError):
    """Raised when the OCR engine fails."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = f"Image OCR failed: {message or 'unknown error'}"


class PdfParseTimeoutError(ExtractionError):
    """Raised when the PDF parser does not finish in time."""

    user_message = "PDF parsing timed out. Please try a smaller or simpler PDF file."


class PdfParseError(ExtractionError):
    """Raised when the PDF parser reports a data error."""

    user_message = (
        "The PDF file could not be read. Please check that it is a valid PDF "
        "and try again."
    )
