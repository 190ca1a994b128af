"""CSS color syntax check.

Color attributes are written into inline ``style`` attributes unescaped, so
a value is only accepted if it is a complete color expression. Anything
else (quotes, semicolons, ``javascript:`` URLs) is rejected.

Accepted forms: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``,
``rgb()``/``rgba()`` with integer or percentage channels, ``hsl()``/``hsla()``,
``hwb()``, ``transparent`` and the CSS named colors.
"""

import re

import webcolors

_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE | re.ASCII)

_ALPHA = r"(?:[,/]\s*[+-]?[\d.]+%?\s*)?"

_RGB_RE = re.compile(
    r"^rgba?\(\s*[+-]?\d+(?=[\s,])\s*(?:,\s*)?[+-]?\d+(?=[\s,])\s*(?:,\s*)?[+-]?\d+\s*"
    + _ALPHA + r"\)$",
    re.ASCII,
)
_RGB_PERCENT_RE = re.compile(
    r"^rgba?\(\s*[+-]?[\d.]+%\s*,?\s*[+-]?[\d.]+%\s*,?\s*[+-]?[\d.]+%\s*" + _ALPHA + r"\)$",
    re.ASCII,
)
_HSL_RE = re.compile(
    r"^hsla?\(\s*[+-]?(?:\d{0,3}\.)?\d+(?:deg)?\s*,?\s*[+-]?[\d.]+%\s*,?\s*[+-]?[\d.]+%\s*"
    + _ALPHA + r"\)$",
    re.ASCII,
)
_HWB_RE = re.compile(
    r"^hwb\(\s*[+-]?\d{0,3}(?:\.\d+)?(?:deg)?\s*,\s*[+-]?[\d.]+%\s*,\s*[+-]?[\d.]+%\s*"
    r"(?:,\s*[+-]?[\d.]+\s*)?\)$",
    re.ASCII,
)

_FUNCTIONAL_PATTERNS = (_RGB_RE, _RGB_PERCENT_RE, _HSL_RE, _HWB_RE)


def is_color(value: object) -> bool:
    """Return True if ``value`` is a syntactically valid CSS color string."""
    if not isinstance(value, str):
        return False

    if value.startswith("#"):
        return _HEX_RE.fullmatch(value) is not None

    if "(" in value:
        return any(p.fullmatch(value) for p in _FUNCTIONAL_PATTERNS)

    if value == "transparent":
        return True

    try:
        webcolors.name_to_hex(value)
    except ValueError:
        return False
    return True
