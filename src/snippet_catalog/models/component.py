"""Domain models for the snippet catalog."""

import re
from dataclasses import dataclass, field
from typing import Any

from snippet_catalog.config import COMPLEXITY_LEVELS, FREE_PRICE_LABELS

_SIZE_UNITS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}
_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMG]?B)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class ComponentRecord:
    """A single distributable UI snippet.

    ``component`` is an opaque handle owned by the presentation layer. It is
    excluded from equality and hashing and never inspected by the filter engine.
    """

    id: int | str
    name: str
    category: str
    framework: str
    description: str = ""
    tags: frozenset[str] = frozenset()
    code: str = ""
    complexity: str | None = None
    price: float | int | str | None = None
    is_new: bool = False
    file_size: str | None = None
    last_updated: str | None = None
    language: str | None = None
    preview_bg: str | None = None
    preview_html: str | None = None
    author: str | None = None
    license: str | None = None
    dependencies: tuple[str, ...] = ()
    is_3d: bool = False
    component: Any = field(default=None, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        # Tags are a set and dependencies a tuple, whatever sequence the caller passed.
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    @property
    def is_free(self) -> bool:
        """True when the price is zero or labelled free. Unpriced is not free."""
        if self.price is None:
            return False
        if isinstance(self.price, int | float):
            return self.price == 0
        return self.price.strip().lower() in FREE_PRICE_LABELS

    @property
    def complexity_rank(self) -> int:
        if self.complexity in COMPLEXITY_LEVELS:
            return COMPLEXITY_LEVELS.index(self.complexity)
        return len(COMPLEXITY_LEVELS)

    @property
    def file_size_bytes(self) -> int | None:
        """Parse display sizes like ``"5.7 KB"``; None when absent or unparseable."""
        if not self.file_size:
            return None
        match = _SIZE_RE.match(self.file_size)
        if match is None:
            return None
        value, unit = match.groups()
        return int(float(value) * _SIZE_UNITS[unit.upper()])


@dataclass(frozen=True)
class FacetIndex:
    """Per-dimension record counts, keys in first-seen order."""

    frameworks: dict[str, int]
    categories: dict[str, int]
    tags: dict[str, int]
    total: int = 0
