from .color import is_color
from .metadata import get_full_metadata, validate_element
from .renderer import render, render_document, render_element
from .note_builder import NoteBuilder, brev_to_html

__all__ = [
    "is_color",
    "get_full_metadata",
    "validate_element",
    "render",
    "render_document",
    "render_element",
    "NoteBuilder",
    "brev_to_html",
]
