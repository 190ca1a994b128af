from .element_schema import (
    COLOR_ATTRIBUTES, ELEMENT_SCHEMAS, AttributeSpec, AttributeType, MetadataValue,
    attributes_for,
)
from .note_schema import Note, ParsedLine, ParsedNote, ResolvedElement
from .settings import ConverterSettings

__all__ = [
    "COLOR_ATTRIBUTES",
    "ELEMENT_SCHEMAS",
    "AttributeSpec",
    "AttributeType",
    "MetadataValue",
    "attributes_for",
    "Note",
    "ParsedLine",
    "ParsedNote",
    "ResolvedElement",
    "ConverterSettings",
]
