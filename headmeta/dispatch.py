"""Dynamic accessors that map verb + category calls onto a registry."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from headmeta.models import Category, Verb
from headmeta.utils import uncamelize

if TYPE_CHECKING:
    from headmeta.registry import HeadMeta

# Verb followed by a category token ("setHttpEquiv", "remove_itemprop")
OPERATION_PATTERN = re.compile(r"^(remove|set|get)_?([a-z][a-z_]*)$", re.IGNORECASE)

# Minimum positional arguments per verb
MIN_ARGUMENTS = {
    Verb.SET: 2,
    Verb.GET: 1,
    Verb.REMOVE: 1,
}

# Parameter names per verb, in positional order
PARAMETERS = {
    Verb.SET: ("name", "content", "extra_attributes"),
    Verb.GET: ("name",),
    Verb.REMOVE: ("name",),
}


class HeadMetaError(Exception):
    """Base class for errors raised by head meta registries."""


class UnknownOperationError(HeadMetaError, AttributeError):
    """Raised when a dynamic accessor name is not a verb followed by a category."""

    def __init__(self, operation: str) -> None:
        """Initialize the error.

        Args:
            operation: The accessor name that could not be parsed
        """
        self.operation = operation
        super().__init__(f"Unknown operation '{operation}'")


class UnsupportedHeaderError(HeadMetaError, AttributeError):
    """Raised when a category is not one of the fixed head meta categories."""

    def __init__(self, category: str, context: str = "") -> None:
        """Initialize the error.

        Args:
            category: The unsupported category
            context: Additional context about where the category was used
        """
        self.category = category
        msg = f"Header '{category}' not supported"
        if context:
            msg = f"{msg} in {context}"
        super().__init__(msg)


class InvalidArityError(HeadMetaError, TypeError):
    """Raised when a dynamic accessor receives too few arguments."""

    def __init__(self, verb: Verb, category: Category, expected: int, received: int) -> None:
        """Initialize the error.

        Args:
            verb: The requested operation
            category: The category the operation targets
            expected: Minimum number of positional arguments
            received: Number of positional arguments given
        """
        self.verb = verb
        self.category = category
        self.expected = expected
        self.received = received
        super().__init__(
            f"{verb.value} on '{category.value}' requires at least {expected} "
            f"argument(s), got {received}"
        )


def resolve_category(category: str) -> Category:
    """Look up a category by its value.

    Args:
        category: Category value (e.g., "http-equiv")

    Returns:
        The matching Category

    Raises:
        UnsupportedHeaderError: If the value is not a known category
    """
    try:
        return Category(category)
    except ValueError:
        raise UnsupportedHeaderError(str(category)) from None


def parse_operation(operation: str) -> tuple[Verb, Category]:
    """Split an accessor name into its verb and category.

    Args:
        operation: Accessor name like "setHttpEquiv" or "get_name"

    Returns:
        Tuple of (verb, category)

    Raises:
        UnknownOperationError: If the name is not a verb followed by a token
        UnsupportedHeaderError: If the token does not name a known category
    """
    match = OPERATION_PATTERN.match(operation)
    if match is None:
        raise UnknownOperationError(operation)

    verb = Verb(match.group(1).lower())
    return verb, resolve_category(uncamelize(match.group(2), "-"))


def bind_arguments(
    verb: Verb,
    category: Category,
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> list[Any]:
    """Merge keyword arguments into the positional arguments of a call.

    Args:
        verb: The requested operation
        category: The category the operation targets
        args: Positional arguments of the call
        kwargs: Keyword arguments of the call

    Returns:
        Positional arguments with keywords placed at their parameter position

    Raises:
        InvalidArityError: If a keyword leaves an earlier parameter unfilled
        TypeError: If a keyword is unknown or repeats a positional argument
    """
    parameters = PARAMETERS[verb]
    for keyword in kwargs:
        if keyword not in parameters:
            raise TypeError(
                f"{verb.value} on '{category.value}' got an unexpected keyword argument '{keyword}'"
            )

    bound = list(args)
    for index, parameter in enumerate(parameters):
        if parameter not in kwargs:
            continue
        if index < len(args):
            raise TypeError(
                f"{verb.value} on '{category.value}' got multiple values for '{parameter}'"
            )
        if index != len(bound):
            raise InvalidArityError(verb, category, MIN_ARGUMENTS[verb], len(bound))
        bound.append(kwargs[parameter])
    return bound


def dispatch(
    registry: HeadMeta,
    verb: Verb,
    category: Category,
    args: Sequence[Any],
    kwargs: Mapping[str, Any] | None = None,
) -> Any:
    """Run a generic accessor for a verb + category call.

    Args:
        registry: The registry to operate on
        verb: The requested operation
        category: The category the operation targets
        args: Positional arguments of the call; (name, content[, extra]) for
            set and (name,) for get and remove
        kwargs: Keyword arguments of the call, using the same parameter names

    Returns:
        The registry for set and remove, the stored value for get

    Raises:
        InvalidArityError: If fewer arguments were given than the verb needs
        TypeError: If a keyword is unknown or repeats a positional argument
    """
    args = bind_arguments(verb, category, args, kwargs or {})
    expected = MIN_ARGUMENTS[verb]
    if len(args) < expected:
        raise InvalidArityError(verb, category, expected, len(args))

    if verb is Verb.SET:
        name, content = args[0], args[1]
        extra = args[2] if len(args) > 2 else {}
        return registry.set(category, name, content, extra)

    if verb is Verb.GET:
        return registry.get(category, args[0])

    return registry.remove(category, args[0])
