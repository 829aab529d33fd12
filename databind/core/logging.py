import sys
import os
from typing import Optional, Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class Log(Protocol):
    """
    Logging capability injected into the binder and components.

    The loguru logger satisfies it, and so does any object exposing
    ``debug``, ``warning`` and ``error``.
    """

    def debug(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class NullLog:
    """Log that discards everything."""

    def debug(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


def component_log(name: str):
    """Loguru logger tagged with the emitting component's name."""
    return logger.bind(component=name)


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = None):
    """
    Configures Loguru logger.

    Console output is always enabled; a rotating file sink is added
    only when ``log_dir`` is given.
    """
    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        logger.add(os.path.join(log_dir, "databind_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.info("Logging initialized.")
