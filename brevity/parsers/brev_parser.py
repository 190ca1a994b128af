"""Parser for .brev note files."""

from pathlib import Path

from brevity.schemas.note_schema import ParsedNote
from brevity.utils.file_utils import read_text_file

from .line_parser import parse_note_text


def parse_brev(path: str | Path) -> ParsedNote:
    """Read a note file and split it into title and element lines.

    Any path is accepted regardless of its suffix. FileNotFoundError,
    OSError and UnicodeDecodeError are raised before any parsing when the
    file cannot be read as UTF-8 text.
    """
    return parse_note_text(read_text_file(path))
