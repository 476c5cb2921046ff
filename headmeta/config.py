"""Shared configuration for the headmeta package."""

# Charset every new registry starts with
DEFAULT_CHARSET = "UTF-8"

# Practical upper bound for meta descriptions shown by search engines
# (see https://moz.com/blog/how-long-should-your-meta-description-be-2018)
META_DESCRIPTION_LENGTH = 270

# Appended to descriptions that had to be shortened
DESCRIPTION_ELLIPSIS = "..."


def validate_description_length(length: int) -> None:
    """Validate a maximum description length.

    Args:
        length: The maximum number of characters for a description

    Raises:
        ValueError: If length is not a positive integer
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise ValueError(
            f"Invalid description length: {length!r}. Expected a positive integer (e.g., 270)"
        )
