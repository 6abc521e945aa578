import logging
import sys


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("docsummary")

    # AWS and HTTP clients log every request at INFO/DEBUG.
    QUIET_LOGGERS: tuple[str, ...] = ("boto3", "botocore", "urllib3", "httpx", "openai")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler.

        Third-party client loggers stay at WARNING unless DEBUG is requested.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        # Lambda's runtime handler on the root logger would print every line twice.
        cls._logger.propagate = False

        client_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in cls.QUIET_LOGGERS:
            logging.getLogger(name).setLevel(client_level)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
