"""Data models for head meta registries."""

from enum import Enum


class Category(str, Enum):
    """Kinds of head meta data, in render order."""

    CHARSET = "charset"
    NAME = "name"
    HTTP_EQUIV = "http-equiv"
    ITEMPROP = "itemprop"
    PROPERTY = "property"
    LINK = "link"
    CUSTOM = "custom"

    @property
    def keyed(self) -> bool:
        """Whether entries in this category are stored under a key."""
        return self not in (Category.CHARSET, Category.CUSTOM)


class Verb(str, Enum):
    """Operations understood by the dynamic accessors."""

    SET = "set"
    GET = "get"
    REMOVE = "remove"


# Categories holding key -> attributes mappings
KEYED_CATEGORIES = tuple(category for category in Category if category.keyed)

# Ordered attribute name -> value mapping
Attributes = dict[str, str]
