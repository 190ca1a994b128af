"""Metadata validation and default resolution for .brev elements.

validate_element() decides whether an element may be rendered at all;
get_full_metadata() then fills in schema defaults. Resolution assumes the
metadata already passed validation and does not check it again.
"""

import logging
from typing import Any

from brevity.schemas.element_schema import COLOR_ATTRIBUTES, MetadataValue, attributes_for

from .color import is_color

logger = logging.getLogger(__name__)


def validate_element(identifier: str, metadata: dict[str, Any]) -> bool:
    """Check an element's identifier and metadata against the schema table.

    An element is valid when:
    - the identifier is known,
    - every metadata key names an attribute of that element and its value
      has the attribute's declared type,
    - every color attribute holds a valid CSS color (color values end up
      unescaped inside a ``style`` attribute),
    - every attribute without a default is present.
    """
    possible_attributes = attributes_for(identifier)
    if possible_attributes is None:
        logger.debug(f"Unknown element identifier '{identifier}'")
        return False

    specs = {attr.name: attr for attr in possible_attributes}

    for key, value in metadata.items():
        spec = specs.get(key)
        if spec is None or not spec.type.matches(value):
            logger.debug(f"Attribute '{key}'={value!r} not allowed on '{identifier}'")
            return False

        if key in COLOR_ATTRIBUTES and not is_color(value):
            logger.debug(f"Attribute '{key}' on '{identifier}' is not a color: {value!r}")
            return False

    for attr in possible_attributes:
        if attr.is_required and attr.name not in metadata:
            logger.debug(f"Missing required attribute '{attr.name}' on '{identifier}'")
            return False

    return True


def get_full_metadata(identifier: str, metadata: dict[str, Any]) -> dict[str, MetadataValue]:
    """Return ``metadata`` merged with the schema defaults of ``identifier``.

    Explicit values are kept as given; the input dict is not modified.

    Raises:
        KeyError: for an unknown identifier. Callers validate first, so this
            only happens on a programming error.
    """
    possible_attributes = attributes_for(identifier)
    if possible_attributes is None:
        raise KeyError(f"Incorrect metadata identifier: {identifier!r}")

    full = dict(metadata)
    for attr in possible_attributes:
        if attr.name not in full and attr.default is not None:
            full[attr.name] = attr.default
    return full
