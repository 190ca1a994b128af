"""Line parser for the .brev note format.

A note is plain UTF-8 text. The first non-empty line is the title; every
following non-empty line is an element line:

    <identifier> [<json-object>] "<content>"

e.g. ``h1 {"color":"#ff0000"} "Hello"`` or ``text "She said \\"hi\\""``.

Lines that do not match this shape are logged and skipped. A metadata span
that is not a JSON object aborts the whole parse.
"""

import json
import logging
import re

from brevity.errors import EmptyNoteError, MalformedMetadataError
from brevity.schemas.note_schema import ParsedLine, ParsedNote

logger = logging.getLogger(__name__)

# identifier, optional {metadata}, "content" where \" does not end the span
ELEMENT_LINE_RE = re.compile(r'^(\w+)(?:\s+(\{.*?\}))?\s+"((?:[^"\\]|\\.)*)"$', re.ASCII)


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_metadata(raw: str, line_number: int) -> dict:
    try:
        metadata = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        # JSONDecodeError is a ValueError subclass
        raise MalformedMetadataError(line_number, raw, str(e)) from e
    if not isinstance(metadata, dict):
        raise MalformedMetadataError(line_number, raw, "not a JSON object")
    return metadata


def parse_element_line(line: str, line_number: int) -> ParsedLine | None:
    """Split one element line into identifier, metadata and content.

    Returns None if the line does not match the element-line pattern.

    Raises:
        MalformedMetadataError: if the metadata span is not valid JSON.
    """
    match = ELEMENT_LINE_RE.fullmatch(line.strip())
    if match is None:
        return None

    identifier, raw_metadata, content = match.groups()
    metadata = _parse_metadata(raw_metadata, line_number) if raw_metadata else {}

    return ParsedLine(
        line_number=line_number,
        identifier=identifier,
        raw_metadata=metadata,
        content=content.replace('\\"', '"'),
    )


def parse_note_text(text: str) -> ParsedNote:
    """Parse the full text of a note into its title and element lines.

    Blank and whitespace-only lines are ignored. Line numbers reported in
    diagnostics and on ParsedLine refer to the physical line in ``text``.

    Raises:
        EmptyNoteError: if the text has no non-empty line.
        MalformedMetadataError: on the first line with malformed metadata.
    """
    numbered = [
        (number, line.strip())
        for number, line in enumerate(text.split("\n"), start=1)
        if line.strip()
    ]
    if not numbered:
        raise EmptyNoteError("Note is empty: expected a title on the first line")

    (_, title), *element_lines = numbered
    parsed = ParsedNote(title=title)

    for number, line in element_lines:
        element = parse_element_line(line, number)
        if element is None:
            logger.error(f'Syntax error at line {number}: "{line}"')
            parsed.skipped.append(number)
            continue
        parsed.lines.append(element)

    return parsed
