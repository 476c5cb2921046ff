"""
headmeta - Registry and serializer for HTML document head elements.

This library provides:
- HeadMeta, a registry of <meta> and <link> entries grouped per category
- Dynamic accessors (set_name, getHttpEquiv, remove_property, ...)
- Deterministic rendering into a single HTML fragment
- HeadMetaDocument for declaring head entries in YAML

Example usage:

    from headmeta import HeadMeta

    meta = HeadMeta()
    meta.set_name("viewport", "width=device-width, initial-scale=1")
    meta.set_property("og:title", "Zorgtoeslag")
    meta.set_link("/static/site.css", {"rel": "stylesheet"})
    meta.set_description("Calculate your healthcare allowance.")

    head = meta.render()
"""

__version__ = "0.1.0"

from headmeta.dispatch import (
    HeadMetaError,
    InvalidArityError,
    UnknownOperationError,
    UnsupportedHeaderError,
)
from headmeta.document import HeadMetaDocument
from headmeta.models import Category, Verb
from headmeta.registry import HeadMeta

# Primary public API
__all__ = [
    "Category",
    "HeadMeta",
    "HeadMetaDocument",
    "HeadMetaError",
    "InvalidArityError",
    "UnknownOperationError",
    "UnsupportedHeaderError",
    "Verb",
    "__version__",
]
