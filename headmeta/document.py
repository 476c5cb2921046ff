"""
Declarative head meta definitions loaded from YAML.

A document lists the entries of a head per category:

    charset: UTF-8
    description: Rules as code for Dutch legislation
    name:
      viewport: width=device-width, initial-scale=1
      robots:
        content: index, follow
        data-source: cms
    http-equiv:
      refresh: "30"
    property:
      og:title: Regelrecht
    link:
      /static/site.css:
        rel: stylesheet
    custom:
      - <!-- analytics -->
"""

from __future__ import annotations

from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from headmeta.models import Attributes, Category
from headmeta.registry import HeadMeta

# Document field holding each keyed meta category
KEYED_FIELDS = {
    Category.NAME: "names",
    Category.HTTP_EQUIV: "http_equiv",
    Category.ITEMPROP: "itemprops",
    Category.PROPERTY: "properties",
}


class HeadMetaDocument(BaseModel):
    """
    Head meta entries described as data.

    Attributes:
        charset: Charset to render; None keeps the registry's charset
        description: Description text, shortened like HeadMeta.set_description
        names: name="..." entries, key -> attributes including content
        http_equiv: http-equiv="..." entries
        itemprops: itemprop="..." entries
        properties: property="..." (Open Graph) entries
        links: href -> link attributes
        custom: Raw markup fragments, rendered verbatim
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", coerce_numbers_to_str=True)

    charset: str | None = None
    description: str | None = None
    names: dict[str, Attributes] = Field(default_factory=dict, alias="name")
    http_equiv: dict[str, Attributes] = Field(default_factory=dict, alias="http-equiv")
    itemprops: dict[str, Attributes] = Field(default_factory=dict, alias="itemprop")
    properties: dict[str, Attributes] = Field(default_factory=dict, alias="property")
    links: dict[str, Attributes] = Field(default_factory=dict, alias="link")
    custom: list[str] = []

    @field_validator("names", "http_equiv", "itemprops", "properties", mode="before")
    @classmethod
    def _expand_content(cls, value: object) -> object:
        """Accept a plain string as shorthand for {"content": string}."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value

        expanded: dict[object, object] = {}
        for key, entry in value.items():
            if isinstance(entry, dict):
                if "content" not in entry:
                    raise ValueError(f"Entry '{key}' is missing 'content'")
                expanded[key] = entry
            else:
                expanded[key] = {"content": entry}
        return expanded

    @field_validator("links", mode="before")
    @classmethod
    def _check_links(cls, value: object) -> object:
        """Reject href inside link attributes; the key is the href."""
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value

        checked: dict[object, object] = {}
        for href, attributes in value.items():
            if isinstance(attributes, dict) and "href" in attributes:
                raise ValueError(f"Link '{href}' must not repeat 'href' in its attributes")
            checked[href] = {} if attributes is None else attributes
        return checked

    @classmethod
    def from_yaml(cls, yaml_text: str) -> Self:
        """
        Load a document from YAML text.

        Example:
            document = HeadMetaDocument.from_yaml('''
                name:
                  viewport: width=device-width
                link:
                  /favicon.ico:
                    rel: icon
            ''')
        """
        data = yaml.safe_load(yaml_text)
        return cls._from_dict(data)

    @classmethod
    def from_yaml_file(cls, path: str | Path) -> Self:
        """Load a document from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: object) -> Self:
        """Create a document from parsed YAML."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(
                f"Head meta document must be a mapping, got {type(data).__name__}"
            )
        return cls.model_validate(data)

    def apply(self, meta: HeadMeta) -> HeadMeta:
        """
        Write the document's entries into a registry.

        Entries replace existing ones with the same key; custom fragments are
        appended.

        Args:
            meta: Registry to update

        Returns:
            The same registry
        """
        if self.charset is not None:
            meta.set_charset(self.charset)

        for category, field_name in KEYED_FIELDS.items():
            for key, attributes in getattr(self, field_name).items():
                extra = {k: v for k, v in attributes.items() if k != "content"}
                meta.set(category, key, attributes["content"], extra)

        if self.description is not None:
            meta.set_description(self.description)

        for href, attributes in self.links.items():
            meta.set_link(href, attributes)

        for fragment in self.custom:
            meta.add_custom(fragment)

        return meta

    def to_head_meta(self, **kwargs) -> HeadMeta:
        """Build a new registry from this document.

        Args:
            kwargs: Passed to the HeadMeta constructor
        """
        return self.apply(HeadMeta(**kwargs))
