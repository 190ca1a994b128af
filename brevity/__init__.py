"""Brevity: converts .brev line-oriented notes into HTML fragments."""

from .html_engine.note_builder import NoteBuilder, brev_to_html
from .schemas.note_schema import Note

__version__ = "1.0.0"

__all__ = ["NoteBuilder", "brev_to_html", "Note", "__version__"]
