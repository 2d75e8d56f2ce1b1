from abc import ABC, abstractmethod
from pathlib import Path


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Extract the text layer of a PDF file.

        Args:
            path: Location of the PDF on disk.

        Returns:
            Page texts in document order, one newline per page boundary,
            stripped.

        Raises:
            PdfExtractionError: if the parser reports a data error.
        """
