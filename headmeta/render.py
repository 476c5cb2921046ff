"""Serialization of head meta data into HTML markup."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from headmeta.models import Category
from headmeta.utils import html_attributes

logger = logging.getLogger(__name__)

# Renders the stored entries of one category
CategoryRenderer = Callable[[Category, Any], str]


def render_charset(category: Category, values: list[str]) -> str:
    """Render <meta charset="..."> when a non-empty charset is set."""
    if not values or not values[0]:
        return ""
    return f"<meta{html_attributes({category.value: values[0]})}>"


def render_custom(category: Category, values: list[str]) -> str:
    """Concatenate custom markup verbatim."""
    return "".join(values)


def render_links(category: Category, entries: Mapping[str, Mapping[str, str]]) -> str:
    """Render one <link> per href, with href as first attribute."""
    parts: list[str] = []
    for href, attributes in entries.items():
        merged = {"href": href}
        merged.update((k, v) for k, v in attributes.items() if k != "href")
        parts.append(f"<link{html_attributes(merged)}>")
    return "".join(parts)


def render_keyed(category: Category, entries: Mapping[str, Mapping[str, str]]) -> str:
    """Render <meta category="key" content="..." ...> for each entry.

    The entry key always fills the category attribute.
    """
    parts: list[str] = []
    for key, attributes in entries.items():
        merged = {category.value: key}
        merged.update((k, v) for k, v in attributes.items() if k != category.value)
        parts.append(f"<meta{html_attributes(merged)}>")
    return "".join(parts)


# Categories with their own format; everything else renders as keyed meta
RENDERERS: dict[Category, CategoryRenderer] = {
    Category.CHARSET: render_charset,
    Category.CUSTOM: render_custom,
    Category.LINK: render_links,
}


def render_metas(metas: Mapping[str, Any]) -> str:
    """Render stored head meta data as a single HTML fragment.

    Categories are rendered in the order of the mapping and entries within a
    category in insertion order. The input is not modified.

    Args:
        metas: Category value -> stored entries, as held by a registry

    Returns:
        Concatenated <meta>, <link> and custom markup without separators
    """
    parts: list[str] = []
    for key, entries in metas.items():
        category = Category(key)
        renderer = RENDERERS.get(category, render_keyed)
        parts.append(renderer(category, entries))

    fragment = "".join(parts)
    logger.debug("Rendered head meta fragment (%d chars)", len(fragment))
    return fragment
