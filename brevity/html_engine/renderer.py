"""HTML rendering of resolved .brev elements.

Each element becomes one ``<div>`` block. Tag choice and the projection of
metadata onto inline styles come from _ELEMENT_TEMPLATES:

    h1/h2/h3 -> <hN style="font-size:..rem;font-weight:..;color:..">content</hN>
    text     -> <span style="...">content</span>
    img      -> <img style="width:..rem;" src="content">

Content is inserted verbatim unless escaping is requested. Metadata values
are safe to insert because validation restricts them to numbers and
well-formed colors.
"""

from html import escape

from brevity.schemas.element_schema import MetadataValue
from brevity.schemas.note_schema import Note, ResolvedElement

_TEXT_STYLE = 'style="font-size:{font-size}rem;font-weight:{weight};color:{color}"'

_ELEMENT_TEMPLATES: dict[str, str] = {
    "h1": "<h1 " + _TEXT_STYLE + ">{content}</h1>",
    "h2": "<h2 " + _TEXT_STYLE + ">{content}</h2>",
    "h3": "<h3 " + _TEXT_STYLE + ">{content}</h3>",
    "text": "<span " + _TEXT_STYLE + ">{content}</span>",
    "img": '<img style="width:{width}rem;" src="{content}">',
}

_BLOCK = "<div>{}</div>"


def format_value(value: MetadataValue) -> str:
    """Format a metadata value the way it appears in CSS.

    Whole floats drop their fraction (``2.0`` -> ``2``) and booleans are
    lowercase, so ``2`` and ``2.0`` in a note render identically.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, int):
        return str(value)
    return value


def render(
    identifier: str,
    metadata: dict[str, MetadataValue],
    content: str,
    escape_content: bool = False,
) -> str:
    """Render one element as an HTML fragment.

    Returns an empty string for an identifier without a template.
    """
    template = _ELEMENT_TEMPLATES.get(identifier)
    if template is None:
        return ""

    values = {name: format_value(value) for name, value in metadata.items()}
    values["content"] = escape(content) if escape_content else content
    return _BLOCK.format(template.format_map(values))


def render_element(element: ResolvedElement, escape_content: bool = False) -> str:
    """Render a ResolvedElement as an HTML fragment."""
    return render(element.identifier, element.metadata, element.content, escape_content)


def render_document(note: Note, lang: str = "en") -> str:
    """Wrap a note's HTML fragment in a minimal standalone HTML5 page."""
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{escape(lang)}">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(note.title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{note.html}\n"
        "</body>\n"
        "</html>\n"
    )
