"""File I/O and path utilities."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text_file(path: str | Path) -> str:
    """Read a UTF-8 text file and return its content.

    A leading byte order mark is dropped.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Note file not found: {path}")
    return path.read_text(encoding="utf-8-sig")


def write_text_file(text: str, path: str | Path) -> None:
    """Write text to a UTF-8 file, creating parent directories."""
    path = Path(path)
    ensure_directory(path.parent)
    path.write_text(text, encoding="utf-8")
    logger.debug(f"Wrote {len(text)} characters to {path}")
