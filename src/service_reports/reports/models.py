"""Report data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OutputRecord:
    """One service's group of consecutive input lines.

    Attributes:
        service: Normalized (and, when combining, canonical) service name
        values: Value payloads in the order they were read
    """

    service: str
    values: list[str] = field(default_factory=list)
