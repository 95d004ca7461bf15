"""Glob pattern -> compiled, anchored, case-insensitive matcher.

Only ``*`` (any run of characters, ``/`` included) and ``?`` (one
character) are special; everything else is matched literally.  An empty
pattern matches only the empty path.
"""

from __future__ import annotations

import re
from collections.abc import Callable


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    parts = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE)


def compile_pattern(pattern: str) -> Callable[[str], bool]:
    """Return a predicate over ``/``-separated relative paths."""
    regex = glob_to_regex(pattern)

    def matches(rel_path: str) -> bool:
        return regex.fullmatch(rel_path) is not None

    return matches
