"""Filter query value object."""

from collections.abc import Iterable
from dataclasses import dataclass

from snippet_catalog.config import ALL_FRAMEWORKS, COMPLEXITY_LEVELS, PRICE_TIERS, SORT_KEYS
from snippet_catalog.errors import InvalidQueryError


@dataclass(frozen=True)
class FilterQuery:
    """Everything the filter engine needs to know about one user interaction.

    Every field defaults to "match everything", so ``FilterQuery()`` returns
    the whole catalog.
    """

    search_text: str = ""
    framework: str = ALL_FRAMEWORKS
    category: str | None = None
    tags: tuple[str, ...] = ()
    complexity: str | None = None
    price: str | None = None
    new_only: bool = False
    is_3d: bool | None = None
    sort: str = "relevance"

    def __post_init__(self) -> None:
        if self.sort not in SORT_KEYS:
            msg = f"Unknown sort key {self.sort!r}; expected one of {SORT_KEYS!r}"
            raise InvalidQueryError(msg)
        if self.price is not None and self.price not in PRICE_TIERS:
            msg = f"Unknown price tier {self.price!r}; expected one of {PRICE_TIERS!r}"
            raise InvalidQueryError(msg)
        if self.complexity is not None and self.complexity not in COMPLEXITY_LEVELS:
            msg = f"Unknown complexity {self.complexity!r}; expected one of {COMPLEXITY_LEVELS!r}"
            raise InvalidQueryError(msg)

    @classmethod
    def from_params(
        cls,
        *,
        search_text: str | None = None,
        framework: str | None = None,
        category: str | None = None,
        tags: Iterable[str] | None = None,
        complexity: str | None = None,
        price: str | None = None,
        new_only: bool = False,
        is_3d: bool | None = None,
        sort: str | None = None,
    ) -> "FilterQuery":
        """Build a query from loose user input.

        Blank strings mean "unset", and a category of "All" clears the
        category filter the same way the sidebar's "All" button does.
        """
        category = (category or "").strip()
        return cls(
            search_text=search_text or "",
            framework=(framework or "").strip() or ALL_FRAMEWORKS,
            category=category if category and category != ALL_FRAMEWORKS else None,
            tags=tuple(t.strip() for t in tags or () if t.strip()),
            complexity=(complexity or "").strip().lower() or None,
            price=(price or "").strip().lower() or None,
            new_only=new_only,
            is_3d=is_3d,
            sort=(sort or "").strip().lower() or "relevance",
        )
