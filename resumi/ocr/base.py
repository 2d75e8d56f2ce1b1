from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType


class BaseOcrEngine(ABC):
    """Contract for OCR engines.

    An engine is scoped to one request: enter the context to acquire it, call
    ``recognize`` and leave the context to release it, whatever the outcome.
    """

    def __enter__(self) -> "BaseOcrEngine":
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    @abstractmethod
    def acquire(self) -> None:
        """Initialize the engine.

        Raises:
            OcrError: if the engine is unavailable.
        """

    @abstractmethod
    def release(self) -> None:
        """Free everything acquired by the engine. Must not raise."""

    @abstractmethod
    def recognize(self, path: Path) -> str:
        """Return the raw text recognized in the image at ``path``.

        Raises:
            OcrError: on any engine failure.
        """
