import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


class Log:
    """Process-wide logger for resumi.

    Output goes to stderr by default so that CLI results printed on stdout
    stay machine-readable.
    """

    _logger: logging.Logger = logging.getLogger("resumi")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler.

        Calling it again only changes the level.
        """
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)
