"""Row cap resolution for searches."""


def parse_positive_int(value: str | None) -> int | None:
    """Parse value as a positive integer, or None if it is not one."""
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        return None
    return number if number > 0 else None


def resolve_limit(requested: str | None, ceiling: int) -> int | None:
    """
    Reconcile a caller's row cap with the configured ceiling.

    A nonpositive ceiling means there is no ceiling. The requested cap is used
    only if it is a positive integer below the ceiling; anything else falls
    back to the ceiling.

    Args:
        requested: Raw "limit" query parameter
        ceiling: Configured SEARCH_LIMIT

    Returns:
        Row cap for the LIMIT clause, or None for no limit
    """
    limit = parse_positive_int(requested)
    if ceiling <= 0:
        return limit
    if limit is not None and limit < ceiling:
        return limit
    return ceiling
