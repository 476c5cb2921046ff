"""Registry of <meta> and <link> elements for an HTML document head."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from headmeta.config import (
    DEFAULT_CHARSET,
    META_DESCRIPTION_LENGTH,
    validate_description_length,
)
from headmeta.dispatch import (
    UnsupportedHeaderError,
    dispatch,
    parse_operation,
    resolve_category,
)
from headmeta.models import KEYED_CATEGORIES, Attributes, Category, Verb
from headmeta.render import render_metas
from headmeta.utils import cut_text, uncamelize, validate_attribute_names

logger = logging.getLogger(__name__)


class HeadMeta:
    """Manager and generator of HTML head meta data.

    Entries are grouped per category. Keyed categories (name, http-equiv,
    itemprop, property, link) are mutated through the generic set/get/remove
    accessors or through dynamic names built from a verb and a category:

        meta = HeadMeta()
        meta.set_name("viewport", "width=device-width")
        meta.setHttpEquiv("refresh", "5")
        meta.get_property("og:title")
        meta.remove_itemprop("image")

    Charset, link and custom markup have dedicated methods. Rendering
    produces the fragment for the document head:

        html = meta.render()  # same as str(meta) or meta()
    """

    def __init__(
        self,
        charset: str = DEFAULT_CHARSET,
        description_length: int = META_DESCRIPTION_LENGTH,
    ) -> None:
        """Initialize an empty registry.

        Args:
            charset: Initial charset value
            description_length: Maximum length applied by set_description
        """
        validate_description_length(description_length)
        self.description_length = description_length
        self._meta: dict[str, Any] = {}
        for category in Category:
            self._meta[category.value] = {} if category.keyed else []
        self._meta[Category.CHARSET.value].append(charset)

    def __getattr__(self, name: str) -> Any:
        """Resolve dynamic accessors like set_name or getHttpEquiv.

        Raises:
            UnknownOperationError: If name is not a verb followed by a category
            UnsupportedHeaderError: If the category is not supported
        """
        # Camel-case spellings of dedicated methods (setDescription, deleteLink)
        if not name.startswith("_"):
            dedicated = uncamelize(name, "_")
            if dedicated != name and callable(getattr(type(self), dedicated, None)):
                return getattr(self, dedicated)

        verb, category = parse_operation(name)

        # A dedicated method wins over the generic accessor
        specialised = f"{verb.value}_{category.value.replace('-', '_')}"
        if specialised != name and hasattr(type(self), specialised):
            return getattr(self, specialised)

        return partial(self.accessor, verb, category)

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        for category in KEYED_CATEGORIES:
            token = category.value.replace("-", "_")
            names.update(f"{verb.value}_{token}" for verb in Verb)
        return sorted(names)

    def accessor(
        self, verb: Verb | str, category: Category | str, *args: Any, **kwargs: Any
    ) -> Any:
        """Run a generic operation for a category.

        Args:
            verb: "set", "get" or "remove"
            category: Target category
            args: (name, content[, extra]) for set, (name,) for get and remove
            kwargs: The same parameters by name (name, content,
                extra_attributes)

        Returns:
            The registry for set and remove, the stored value for get

        Raises:
            ValueError: If verb is not a known operation
            UnsupportedHeaderError: If category is not supported
            InvalidArityError: If too few arguments are given
        """
        return dispatch(self, Verb(verb), resolve_category(category), args, kwargs)

    # Generic accessors

    def get(self, meta: Category | str, name: str) -> Any:
        """Get an entry by category and name.

        The charset category holds a single value; name is ignored for it.

        Args:
            meta: Category to look in
            name: Entry name (or href for links)

        Returns:
            The stored attributes, or None if absent
            (a copy; changing it does not change the registry)
        """
        entries = self._entries(meta)
        if entries is None:
            return None
        if meta == Category.CHARSET:
            return entries[0] if entries else None
        if isinstance(entries, dict):
            attributes = entries.get(name)
            return dict(attributes) if attributes is not None else None
        return None

    def set(
        self,
        meta: Category | str,
        name: str,
        content: str,
        extra_attributes: Mapping[str, str] | None = None,
    ) -> HeadMeta:
        """Store an entry, replacing any previous one with the same name.

        Args:
            meta: Keyed category to store in
            name: Entry name
            content: Value for the content attribute
            extra_attributes: Additional attributes rendered after content

        Returns:
            The registry

        Raises:
            UnsupportedHeaderError: If meta is not a keyed category
            ValueError: If an extra attribute name is not a valid HTML
                attribute name, or repeats the category attribute
        """
        category = resolve_category(meta)
        if not category.keyed:
            raise UnsupportedHeaderError(category.value, context="set")

        # Attribute that carries the entry key when rendered
        key_attribute = "href" if category is Category.LINK else category.value
        extra_attributes = extra_attributes or {}
        validate_attribute_names(extra_attributes)
        if key_attribute in extra_attributes:
            raise ValueError(
                f"Attributes for {category.value} '{name}' must not contain "
                f"'{key_attribute}'; pass it as the name argument"
            )

        attributes: Attributes = {"content": content}
        for key, value in extra_attributes.items():
            attributes.setdefault(key, value)

        self._meta[category.value][name] = attributes
        logger.debug("Set %s '%s'", category.value, name)
        return self

    def remove(self, meta: Category | str, name: str) -> HeadMeta:
        """Remove an entry if it exists.

        Args:
            meta: Category to remove from
            name: Entry name (or href for links)

        Returns:
            The registry
        """
        entries = self._entries(meta)
        if isinstance(entries, dict) and name in entries:
            del entries[name]
            logger.debug("Removed %s '%s'", Category(meta).value, name)
        return self

    def get_metas(self, meta: Category | str | None = None) -> Any:
        """Return a copy of the stored data.

        Args:
            meta: Category to return; None (or an unknown category) returns
                all categories

        Returns:
            Deep copy of one category's entries or of the whole registry
        """
        entries = self._entries(meta) if meta is not None else None
        if entries is not None:
            return copy.deepcopy(entries)
        return copy.deepcopy(self._meta)

    def _entries(self, meta: Category | str) -> Any:
        """Return the live storage of a category, or None if unknown."""
        try:
            return self._meta[Category(meta).value]
        except ValueError:
            return None

    # Charset

    def set_charset(self, charset: str) -> HeadMeta:
        """Replace the charset; an empty value renders no charset element."""
        self._meta[Category.CHARSET.value] = [charset]
        return self

    # Links

    def set_link(self, href: str, attributes: Mapping[str, str] | None = None) -> HeadMeta:
        """Store a link element under its href.

        Args:
            href: Link target, rendered as the first attribute
            attributes: Other link attributes (e.g., {"rel": "stylesheet"})

        Returns:
            The registry

        Raises:
            ValueError: If attributes contains an href or an invalid name
        """
        attributes = dict(attributes or {})
        validate_attribute_names(attributes)
        if "href" in attributes:
            raise ValueError(
                f"Link attributes for '{href}' must not contain 'href'; "
                "pass it as the href argument"
            )

        self._meta[Category.LINK.value][href] = attributes
        logger.debug("Set link '%s'", href)
        return self

    def get_link(self, href: str) -> Attributes | None:
        """Get a link as {"href": href, **attributes}, or None if absent."""
        attributes = self._meta[Category.LINK.value].get(href)
        if attributes is None:
            return None
        return {"href": href, **attributes}

    def delete_link(self, href: str) -> HeadMeta:
        """Remove a link if it exists."""
        return self.remove(Category.LINK, href)

    # Custom markup

    def add_custom(self, custom: str) -> HeadMeta:
        """Append raw markup, rendered verbatim after all other entries."""
        self._meta[Category.CUSTOM.value].append(custom)
        return self

    def set_custom(self, custom: str) -> HeadMeta:
        """Replace all custom markup with a single fragment."""
        self._meta[Category.CUSTOM.value] = [custom]
        return self

    def get_custom(self) -> list[str]:
        """Return the custom markup fragments in insertion order."""
        return list(self._meta[Category.CUSTOM.value])

    # Description

    def set_description(self, description: str | None = None) -> HeadMeta:
        """Set the name="description" entry, shortened to description_length.

        Args:
            description: Description text; empty or None removes the entry

        Returns:
            The registry
        """
        if description:
            self.set(
                Category.NAME,
                "description",
                cut_text(description, self.description_length),
            )
        else:
            self.remove(Category.NAME, "description")
        return self

    # Rendering

    def render(self) -> str:
        """Render all entries as <meta>, <link> and custom markup.

        Output order follows the categories: charset, name, http-equiv,
        itemprop, property, link, custom.
        """
        return render_metas(self._meta)

    def __str__(self) -> str:
        return self.render()

    def __call__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{category}={len(entries)}" for category, entries in self._meta.items()
        )
        return f"HeadMeta({counts})"
