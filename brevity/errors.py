"""Errors raised while converting .brev notes.

Every conversion error derives from ValueError, so callers that already
treat bad input as ValueError keep working.
"""


class BrevError(ValueError):
    """Base error for this package."""


class EmptyNoteError(BrevError):
    """Raised when a note has no title line."""


class MalformedMetadataError(BrevError):
    """Raised when an element's metadata span is not a JSON object."""

    def __init__(self, line_number: int, raw: str, reason: str = "invalid JSON"):
        self.line_number = line_number
        self.raw = raw
        super().__init__(f"Malformed metadata at line {line_number} ({reason}): {raw}")


class InvalidElementError(BrevError):
    """Raised when an element fails schema validation.

    Aborts the whole conversion: no partial HTML is produced.
    """

    def __init__(self, line_number: int, identifier: str):
        self.line_number = line_number
        self.identifier = identifier
        super().__init__(f"Error, element invalid. ('{identifier}' at line {line_number})")
