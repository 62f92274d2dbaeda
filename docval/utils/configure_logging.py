import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Prevent multiple handler installs
_CONFIGURED = False


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Configure the ``docval`` logger.

    Handlers are installed once per process; later calls only change the level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for a rotating log file

    Raises:
        OSError: If the log file cannot be created
    """
    global _CONFIGURED

    root_logger = logging.getLogger("docval")
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if _CONFIGURED:
        return

    # Open the file first so a failure leaves no handler behind
    file_handler = None
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    # Console(stderr=True) looks up sys.stderr on every write
    root_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, show_time=False))
    if file_handler is not None:
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
