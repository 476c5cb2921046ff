"""
Utility functions for building head markup
"""

import html
import re
from collections.abc import Mapping
from typing import Any

from headmeta.config import DESCRIPTION_ELLIPSIS

# Characters HTML does not allow in an attribute name
ATTRIBUTE_NAME_PATTERN = re.compile(r"^[^\s\"'<>/=\x00-\x1f\x7f]+$")

# Boundary between a lower-case letter or digit and an upper-case letter,
# or inside an acronym before its last capital ("XMLHttp" -> "XML|Http")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

# Trailing partial word, including the whitespace in front of it
_TRAILING_WORD = re.compile(r"\s+\S*$")


def validate_attribute_names(attributes: Mapping[str, Any]) -> None:
    """
    Check that every key of a mapping is a valid HTML attribute name

    Args:
        attributes: Mapping of attribute name to value

    Raises:
        ValueError: If an attribute name is not a valid HTML attribute name
    """
    for name in attributes:
        if not isinstance(name, str) or not ATTRIBUTE_NAME_PATTERN.match(name):
            raise ValueError(f"Invalid attribute name: {name!r}")


def html_attributes(attributes: Mapping[str, Any]) -> str:
    """
    Serialize attributes for use inside an HTML start tag

    Args:
        attributes: Ordered mapping of attribute name to value. True renders a
            boolean attribute, None and False leave the attribute out.

    Returns:
        Attribute string with a leading space per attribute (e.g., ' rel="icon"'),
        in the order of the mapping

    Raises:
        ValueError: If an attribute name is not a valid HTML attribute name
    """
    validate_attribute_names(attributes)

    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def cut_text(text: str, max_length: int, ellipsis: str = DESCRIPTION_ELLIPSIS) -> str:
    """
    Shorten text to at most max_length characters

    Cuts at the last word boundary that fits and appends the ellipsis. A single
    word longer than the limit is cut hard.

    Args:
        text: Text to shorten
        max_length: Maximum length of the result, ellipsis included
        ellipsis: Marker appended when text was cut

    Returns:
        The stripped text if it fits, otherwise the shortened text
    """
    text = text.strip()
    if len(text) <= max_length:
        return text
    if max_length <= len(ellipsis):
        return text[:max_length]

    limit = max_length - len(ellipsis)
    cut = text[:limit]
    if not text[limit].isspace():
        boundary = _TRAILING_WORD.search(cut)
        if boundary and boundary.start() > 0:
            cut = cut[: boundary.start()]
    return cut.rstrip() + ellipsis


def uncamelize(token: str, separator: str = "-") -> str:
    """
    Convert a camel-case or snake_case identifier to lower case words

    Args:
        token: Identifier like "HttpEquiv" or "http_equiv"
        separator: String placed between the words

    Returns:
        Lower-case identifier (e.g., "http-equiv")
    """
    words = _CAMEL_BOUNDARY.sub(separator, token.replace("_", separator))
    return words.lower()
