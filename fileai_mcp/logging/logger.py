import logging
import sys
from collections.abc import Mapping
from typing import TextIO

LOGGER_NAME = "fileai_mcp"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Process-wide logging facade.

    Keyword arguments are rendered into the message as ``key=value`` pairs so
    that context such as an upload id survives any handler or formatter.
    """

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one handler, stderr unless a stream is given.

        stdout is reserved for the MCP message stream.
        """
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._emit(logging.DEBUG, message, context)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._emit(logging.INFO, message, context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._emit(logging.WARNING, message, context)

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._emit(logging.ERROR, message, context)

    @classmethod
    def exception(cls, message: str, **context: object) -> None:
        """Log at ERROR level with the active exception's traceback."""
        cls._emit(logging.ERROR, message, context, exc_info=True)

    @classmethod
    def _emit(
        cls,
        level: int,
        message: str,
        context: Mapping[str, object],
        exc_info: bool = False,
    ) -> None:
        if not cls._logger.isEnabledFor(level):
            return
        # stacklevel 3 attributes the record to the caller of Log.<level>.
        cls._logger.log(level, render(message, context), exc_info=exc_info, stacklevel=3)


def render(message: str, context: Mapping[str, object]) -> str:
    """Append context to a message: 'Tick done | upload_id=u1 attempt=2'."""
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} | {pairs}"
