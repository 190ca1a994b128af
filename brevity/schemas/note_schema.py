"""Pydantic models for the .brev conversion pipeline.

Flow of data through one conversion:

    source text -> ParsedNote (title + ParsedLine per matched line)
                -> ResolvedElement per line (metadata completed from schema)
                -> Note (title + concatenated HTML fragments)

All models are created and discarded inside a single conversion call.
"""

from typing import Any

from pydantic import BaseModel, Field

from .element_schema import MetadataValue


class ParsedLine(BaseModel):
    """One element line split into its three parts."""

    line_number: int = Field(ge=1, description="1-based physical line in the source text")
    identifier: str
    raw_metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Decoded JSON metadata, not yet validated",
    )
    content: str = Field(description="Quoted content with \\\" already unescaped")


class ParsedNote(BaseModel):
    """Output of the line parser."""

    title: str
    lines: list[ParsedLine] = Field(default_factory=list)
    skipped: list[int] = Field(
        default_factory=list,
        description="Line numbers that did not match the element-line pattern",
    )


class ResolvedElement(BaseModel):
    """An element whose metadata holds every attribute of its schema."""

    identifier: str
    metadata: dict[str, MetadataValue]
    content: str


class Note(BaseModel):
    """Final conversion result."""

    title: str
    html: str = ""

    def to_document(self, lang: str = "en") -> str:
        """Wrap the fragment in a standalone HTML page."""
        from brevity.html_engine.renderer import render_document

        return render_document(self, lang=lang)
