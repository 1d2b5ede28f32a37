import logging
import sys


class Log:
    """Centralized logging for the naming pipeline.

    Every method accepts an optional ``document_id``; when given, the message is
    prefixed with a short form of it so interleaved queue activity stays readable.
    """

    _logger: logging.Logger = logging.getLogger("pdfnamer")
    _FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(cls._FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, document_id: str | None = None) -> None:
        cls._logger.debug(cls._format(message, document_id))

    @classmethod
    def info(cls, message: str, document_id: str | None = None) -> None:
        cls._logger.info(cls._format(message, document_id))

    @classmethod
    def warning(cls, message: str, document_id: str | None = None) -> None:
        cls._logger.warning(cls._format(message, document_id))

    @classmethod
    def error(cls, message: str, document_id: str | None = None) -> None:
        cls._logger.error(cls._format(message, document_id))

    @staticmethod
    def _format(message: str, document_id: str | None) -> str:
        if document_id is None:
            return message
        return f"[{document_id[:8]}] {message}"
