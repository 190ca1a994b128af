from .brev_parser import parse_brev
from .line_parser import parse_element_line, parse_note_text

__all__ = ["parse_brev", "parse_note_text", "parse_element_line"]
