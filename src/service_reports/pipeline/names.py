"""Service name normalization and similar-name combination."""

from __future__ import annotations

import re

from service_reports.core.constants import (
    MIN_FUZZY_NAME_LENGTH,
    SERVICE_NAMESPACE_SEPARATOR,
    SERVICE_PATH_SEPARATOR,
)

_INSTANCE_SUFFIX = re.compile(rf"{re.escape(SERVICE_NAMESPACE_SEPARATOR)}\d+$")


def normalize_service_name(raw: str) -> str:
    """Collapse a hierarchical service name into one logical name.

    >>> normalize_service_name("web/frontend")
    'web.frontend'
    """
    return raw.strip().replace(SERVICE_PATH_SEPARATOR, SERVICE_NAMESPACE_SEPARATOR)


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate the Levenshtein (edit) distance between two strings.

    Args:
        s1: First string
        s2: Second string

    Returns:
        The minimum number of single-character edits needed to transform s1 into s2
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def strip_instance_suffix(name: str) -> str:
    """Drop a trailing numeric segment such as ``.03``."""
    return _INSTANCE_SUFFIX.sub("", name)


def are_similar_names(a: str, b: str, max_distance: int = 1) -> bool:
    """Return True if two normalized service names should share a report.

    Names match when they are equal ignoring case, differ only by a numeric
    instance suffix, or (for names longer than four characters) are within
    ``max_distance`` edits of each other.
    """
    a_lower, b_lower = a.lower(), b.lower()
    if a_lower == b_lower:
        return True
    if strip_instance_suffix(a_lower) == strip_instance_suffix(b_lower):
        return True
    if max_distance <= 0 or min(len(a), len(b)) < MIN_FUZZY_NAME_LENGTH:
        return False
    if abs(len(a) - len(b)) > max_distance:
        return False
    return levenshtein_distance(a_lower, b_lower) <= max_distance


class ServiceNameList:
    """Ordered, deduplicated list of service names seen in an input file.

    The first name registered for a group of similar names is its canonical
    name; :meth:`get_name` maps every member of the group onto it.
    """

    def __init__(self, max_distance: int = 1):
        self.max_distance = max_distance
        self._names: list[str] = []
        self._known: set[str] = set()
        self._resolved: dict[str, str] = {}

    def add(self, name: str) -> None:
        trimmed = name.strip()
        if trimmed and trimmed not in self._known:
            self._names.append(trimmed)
            self._known.add(trimmed)
            self._resolved.clear()

    def get_name(self, name: str) -> str:
        """Return the canonical name for ``name`` (``name`` itself if nothing is similar)."""
        trimmed = name.strip()
        if trimmed in self._resolved:
            return self._resolved[trimmed]
        canonical = trimmed
        for candidate in self._names:
            if candidate == trimmed or are_similar_names(candidate, trimmed, self.max_distance):
                canonical = candidate
                break
        self._resolved[trimmed] = canonical
        return canonical

    def all_names(self) -> list[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._known

    def __len__(self) -> int:
        return len(self._names)
