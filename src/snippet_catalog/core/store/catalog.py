"""Immutable in-memory catalog of component records with facet counts."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from loguru import logger

from snippet_catalog.config import ALL_FRAMEWORKS, FACET_DIMENSIONS
from snippet_catalog.core.text import normalize_text
from snippet_catalog.errors import DuplicateIdError, InvalidDimensionError, UnknownComponentError
from snippet_catalog.models.component import ComponentRecord, FacetIndex


def build_facet_index(records: Iterable[ComponentRecord]) -> FacetIndex:
    """Count records per framework, category and tag in a single pass.

    Tags are bucketed the way the tag filter matches them (case- and
    accent-insensitive), labelled with the first spelling seen. A record
    counts once per bucket even if it carries both "UI" and "ui".
    """
    frameworks: dict[str, int] = {}
    categories: dict[str, int] = {}
    tags: dict[str, int] = {}
    tag_labels: dict[str, str] = {}
    total = 0
    for record in records:
        total += 1
        frameworks[record.framework] = frameworks.get(record.framework, 0) + 1
        categories[record.category] = categories.get(record.category, 0) + 1
        seen: set[str] = set()
        # frozenset iteration order is arbitrary; sort so bucket order is reproducible.
        for tag in sorted(record.tags):
            key = normalize_text(tag)
            if key in seen:
                continue
            seen.add(key)
            label = tag_labels.setdefault(key, tag)
            tags[label] = tags.get(label, 0) + 1
    return FacetIndex(frameworks=frameworks, categories=categories, tags=tags, total=total)


class CatalogStore:
    """Read-only snapshot of the catalog.

    Build it with :meth:`load`. Nothing mutates a store after construction, so
    one instance can be searched from many threads without locking. Changes
    go through :meth:`replace`, which publishes a new store.
    """

    def __init__(self, records: tuple[ComponentRecord, ...], index: FacetIndex) -> None:
        self._records = records
        self._index = index
        self._by_id = {r.id: r for r in records}
        self._facets: dict[str, Mapping[str, int]] = {
            "framework": MappingProxyType(index.frameworks),
            "category": MappingProxyType(index.categories),
            "tag": MappingProxyType(index.tags),
        }

    @classmethod
    def load(cls, records: Iterable[ComponentRecord]) -> "CatalogStore":
        """Validate ids and build the store and its facet index.

        Raises:
            DuplicateIdError: Two records share an id. No store is built.
        """
        ordered = tuple(records)
        seen: set[int | str] = set()
        for record in ordered:
            if record.id in seen:
                raise DuplicateIdError(record.id)
            seen.add(record.id)

        index = build_facet_index(ordered)
        logger.debug(
            "Catalog loaded: {} components, {} frameworks, {} categories, {} tags",
            index.total, len(index.frameworks), len(index.categories), len(index.tags),
        )
        return cls(ordered, index)

    def replace(self, records: Iterable[ComponentRecord]) -> "CatalogStore":
        """Return a new store holding ``records``; this store is left untouched."""
        return type(self).load(records)

    def all(self) -> tuple[ComponentRecord, ...]:
        """All records in load order."""
        return self._records

    def get(self, component_id: int | str) -> ComponentRecord:
        try:
            return self._by_id[component_id]
        except KeyError:
            msg = f"No component with id {component_id!r}"
            raise UnknownComponentError(msg) from None

    def facet_counts(self, dimension: str) -> Mapping[str, int]:
        """Return a read-only name -> count mapping for a facet dimension.

        Args:
            dimension: One of "framework", "category" or "tag".

        Raises:
            InvalidDimensionError: For any other dimension name.
        """
        try:
            return self._facets[dimension]
        except KeyError:
            msg = f"Unsupported facet dimension {dimension!r}; expected one of {FACET_DIMENSIONS!r}"
            raise InvalidDimensionError(msg) from None

    def framework_facets(self) -> list[tuple[str, int]]:
        """Framework buttons as displayed: the "All" pseudo-facet, then each framework."""
        return [(ALL_FRAMEWORKS, self._index.total), *self._index.frameworks.items()]

    def categories(self) -> list[str]:
        """Unique category names, sorted for the sidebar."""
        return sorted(self._index.categories)

    def by_category(self, category: str) -> tuple[ComponentRecord, ...]:
        return tuple(r for r in self._records if r.category == category)

    def three_d(self) -> tuple[ComponentRecord, ...]:
        return tuple(r for r in self._records if r.is_3d)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ComponentRecord]:
        return iter(self._records)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._by_id
