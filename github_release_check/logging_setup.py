"""Logging setup using Rich with console + optional file handlers.

Library modules only ask for named loggers; handlers are installed by
`setup_logging`, which the command line entry point calls once.
File logs only WARNING and ERROR messages with full context.
"""
import atexit
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

__all__ = ['console', 'get_logger', 'setup_logging']

# --- Shared Rich console instances ---
console: Console = Console()
error_console: Console = Console(stderr=True)

# --- Handler names for idempotency ---
_CONSOLE_HANDLER = 'rich_console_handler'
_FILE_HANDLER = 'file_handler'

# --- Default levels and rotation ---
DEFAULT_CONSOLE_LEVEL = logging.WARNING
FILE_LEVEL = logging.WARNING
FILE_MAX_BYTES = 10_000_000  # 10 MB
FILE_BACKUP_COUNT = 5

# --- Module-level flag to register atexit only once ---
_atexit_registered = False  # pylint: disable=invalid-name


def setup_logging(console_level: int = DEFAULT_CONSOLE_LEVEL, log_file: Path | str | None = None) -> None:
    """Configure root logging with a Rich console handler and an optional rotating file handler (idempotent).

    Parameters:
        console_level (int): log level for console
        log_file (Path | str | None): path to a WARNING+ log file, `None` disables file logging
    """
    global _atexit_registered  # pylint: disable=global-statement  # noqa: PLW0603

    root = logging.getLogger()

    # --- Console handler (Rich, on stderr so stdout stays machine readable) ---
    console_handler = next((h for h in root.handlers if h.name == _CONSOLE_HANDLER), None)
    if console_handler is None:
        console_handler = RichHandler(
            console=error_console,
            markup=False,
            rich_tracebacks=True,
        )
        console_handler.name = _CONSOLE_HANDLER
        root.addHandler(console_handler)
    console_handler.setLevel(console_level)

    # --- Rotating file handler (WARNING+) ---
    if log_file is not None and not any(h.name == _FILE_HANDLER for h in root.handlers):
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=FILE_MAX_BYTES,
            backupCount=FILE_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.name = _FILE_HANDLER
        file_handler.setLevel(FILE_LEVEL)

        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(levelname)s - %(pathname)s:%(lineno)d - %(name)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M',
            ),
        )
        root.addHandler(file_handler)

    # --- Root logger must be permissive enough for every handler ---
    root.setLevel(min(console_level, FILE_LEVEL))

    # --- Redirect Python warnings to logging ---
    logging.captureWarnings(capture=True)

    # --- Ensure logs flush on exit ---
    if not _atexit_registered:
        atexit.register(logging.shutdown)
        _atexit_registered = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a named logger without touching handler configuration.

    Parameters:
        name (str | None): the logger name (default: root logger)

    Returns:
        logging.Logger: the logger
    """
    return logging.getLogger(name)
