from __future__ import annotations

from typing import Mapping


def from_attributes(key: str, *sources: Mapping[str, str] | None) -> str | None:
    """Return the first present, non-empty value for ``key``.

    Sources are checked left to right. A ``None`` source (e.g. the missing
    parent of a root element) is skipped. Values are returned untouched.
    """
    for attrs in sources:
        if attrs is None:
            continue
        value = attrs.get(key)
        if value:
            return value
    return None
