"""Fixed element schema table for the .brev format.

Each element identifier maps to an ordered tuple of AttributeSpec entries.
An attribute without a default is required; every other attribute is
optional and backfilled from its default when a note leaves it out.

The table is built once at import time and is read-only afterwards.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Closed union of values a metadata attribute may hold.
MetadataValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class AttributeType(str, Enum):
    """Primitive type an attribute value must have at runtime."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"

    def matches(self, value: object) -> bool:
        """Return True if ``value`` (a decoded JSON value) has this type.

        bool is a subclass of int in Python, so it is excluded from numbers.
        """
        if self is AttributeType.BOOLEAN:
            return isinstance(value, bool)
        if self is AttributeType.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, str)


class AttributeSpec(BaseModel):
    """A single allowed metadata attribute of an element."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: AttributeType
    default: Optional[MetadataValue] = Field(
        default=None,
        description="Value used when the attribute is omitted. None = required attribute.",
    )

    @property
    def is_required(self) -> bool:
        return self.default is None


# ---------------------------------------------------------------------------
# Schema table
# ---------------------------------------------------------------------------

def _text_attributes(weight: int, font_size: float) -> tuple[AttributeSpec, ...]:
    return (
        AttributeSpec(name="weight", type=AttributeType.NUMBER, default=weight),
        AttributeSpec(name="font-size", type=AttributeType.NUMBER, default=font_size),
        AttributeSpec(name="color", type=AttributeType.STRING, default="#ffffff"),
    )


ELEMENT_SCHEMAS: Mapping[str, tuple[AttributeSpec, ...]] = MappingProxyType({
    "h1": _text_attributes(weight=700, font_size=2),
    "h2": _text_attributes(weight=600, font_size=1.75),
    "h3": _text_attributes(weight=600, font_size=1.5),
    "text": _text_attributes(weight=400, font_size=1),
    "img": (
        AttributeSpec(name="width", type=AttributeType.NUMBER, default=5),
    ),
})

# Attributes whose values are checked against the CSS color grammar.
COLOR_ATTRIBUTES: frozenset[str] = frozenset({"color", "background-color"})


def attributes_for(identifier: str) -> Optional[tuple[AttributeSpec, ...]]:
    """Return the attribute specs of an element, or None for an unknown identifier."""
    return ELEMENT_SCHEMAS.get(identifier)
