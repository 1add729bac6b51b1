"""Tag sequence editing shared by the task dialogs and the board service."""

from collections.abc import Iterable


def add_tag(tags: Iterable[str], value: str) -> list[str]:
    """
    Append a tag unless it is blank or already present.

    The input is trimmed first; matching is exact and case-sensitive.
    Returns a new list, the input is left untouched.
    """
    result = list(tags)
    tag = value.strip()
    if tag and tag not in result:
        result.append(tag)
    return result


def remove_tag(tags: Iterable[str], tag: str) -> list[str]:
    """Return the tags without the exact match of ``tag``."""
    result = list(tags)
    if tag in result:
        result.remove(tag)
    return result


def dedupe_tags(tags: Iterable[str]) -> list[str]:
    """Build a tag list by adding each tag in turn."""
    result: list[str] = []
    for tag in tags:
        result = add_tag(result, tag)
    return result
