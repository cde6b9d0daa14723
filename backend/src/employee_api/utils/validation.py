"""Input validation utilities for list filters and sorting."""

MAX_SEARCH_LENGTH = 200
MAX_SORT_BY_LENGTH = 50

VALID_SORT_DIRECTIONS = ("asc", "desc")


def sanitize_search(search: str | None, max_length: int = MAX_SEARCH_LENGTH) -> str | None:
    """Sanitize search input.

    Args:
        search: Raw search string
        max_length: Maximum allowed length

    Returns:
        Sanitized search string or None
    """
    if search is None:
        return None

    # Truncate to max length
    search = search[:max_length]

    # SQLAlchemy parameterizes queries, these are stripped as well
    search = search.replace(";", "").replace("--", "")

    return search.strip() or None


def validate_sort_by(sort_by: str | None, allowed_columns: frozenset[str] | set[str], default: str) -> str:
    """Validate sort column against whitelist.

    Args:
        sort_by: Raw sort column name
        allowed_columns: Set of allowed column names
        default: Default column if invalid

    Returns:
        Validated sort column name
    """
    if sort_by:
        sort_by = sort_by[:MAX_SORT_BY_LENGTH].strip()
    if sort_by and sort_by in allowed_columns:
        return sort_by
    return default


def validate_sort_direction(sort_dir: str | None, default: str = "asc") -> str:
    """Validate sort direction, case-insensitively.

    Args:
        sort_dir: Raw sort direction
        default: Direction to use if invalid

    Returns:
        "asc" or "desc"
    """
    if sort_dir:
        normalized = sort_dir.strip().lower()
        if normalized in VALID_SORT_DIRECTIONS:
            return normalized
    return default


def escape_like_wildcards(value: str) -> str:
    """Escape SQL LIKE wildcards so they match literally.

    The % and _ characters have special meaning in SQL LIKE patterns:
    - % matches any sequence of characters
    - _ matches any single character

    Args:
        value: Raw string value to escape

    Returns:
        Escaped string safe for use in LIKE patterns with escape="\\"

    Example:
        >>> escape_like_wildcards("test%value")
        'test\\\\%value'
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
