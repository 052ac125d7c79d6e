"""Console and file logging for Berth."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# stdout is reserved for command output such as rendered templates
console = Console(stderr=True)

LOG_FILE = Path.home() / ".berth" / "logs" / "berth.log"

_file_logging_configured = False


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Send ``berth.*`` log records to a file as well as the console.

    Args:
        log_file: Path to log file (defaults to LOG_FILE)
        verbose: Record DEBUG messages, not just INFO
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target = Path(log_file) if log_file else LOG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.FileHandler(target)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root_logger = logging.getLogger("berth")
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _file_logging_configured = True
    root_logger.debug(f"Logging to {target}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger that prints through the shared Rich console.

    Module loggers carry no level of their own; the ``berth`` logger sets it
    (INFO by default, DEBUG after ``setup_file_logging(verbose=True)``).
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    root_logger = logging.getLogger("berth")
    if root_logger.level == logging.NOTSET:
        root_logger.setLevel(logging.INFO)

    return logger
