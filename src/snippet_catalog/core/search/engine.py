"""In-memory filter engine for the snippet catalog.

Matching is a linear scan over the store. Results are the store's own record
objects, ranked as follows:

- exact (normalized) name match before substring matches
- new components before the rest
- catalog load order

The ``sort`` field of a query swaps that ranking for a plain attribute sort.
"""

from collections.abc import Callable, Sequence

from snippet_catalog.config import ALL_FRAMEWORKS
from snippet_catalog.core.store.catalog import CatalogStore
from snippet_catalog.core.text import normalize_text
from snippet_catalog.models.component import ComponentRecord
from snippet_catalog.models.query import FilterQuery


def _matches_text(record: ComponentRecord, needle: str) -> bool:
    if needle in normalize_text(record.name):
        return True
    if needle in normalize_text(record.description):
        return True
    return any(normalize_text(tag).startswith(needle) for tag in record.tags)


def _build_predicates(query: FilterQuery) -> list[Callable[[ComponentRecord], bool]]:
    predicates: list[Callable[[ComponentRecord], bool]] = []

    if query.framework != ALL_FRAMEWORKS:
        predicates.append(lambda r: r.framework == query.framework)

    if query.category is not None:
        predicates.append(lambda r: r.category == query.category)

    needle = normalize_text(query.search_text.strip())
    if needle:
        predicates.append(lambda r: _matches_text(r, needle))

    if query.tags:
        wanted = {normalize_text(t) for t in query.tags}
        predicates.append(lambda r: wanted <= {normalize_text(t) for t in r.tags})

    if query.complexity is not None:
        predicates.append(lambda r: r.complexity == query.complexity)

    if query.price == "free":
        predicates.append(lambda r: r.is_free)
    elif query.price == "paid":
        predicates.append(lambda r: r.price is not None and not r.is_free)

    if query.new_only:
        predicates.append(lambda r: r.is_new)

    if query.is_3d is not None:
        predicates.append(lambda r: r.is_3d == query.is_3d)

    return predicates


def _relevance_key(needle: str) -> Callable[[ComponentRecord], tuple[int, int]]:
    def key(record: ComponentRecord) -> tuple[int, int]:
        exact = bool(needle) and normalize_text(record.name) == needle
        return (0 if exact else 1, 0 if record.is_new else 1)

    return key


def _newest_key(record: ComponentRecord) -> tuple[int, str]:
    # Sorted in reverse: ISO dates compare lexically, undated records end up last.
    return (1 if record.last_updated else 0, record.last_updated or "")


def _size_key(record: ComponentRecord) -> tuple[int, int]:
    size = record.file_size_bytes
    return (0, size) if size is not None else (1, 0)


def _rank(matched: list[ComponentRecord], query: FilterQuery) -> list[ComponentRecord]:
    # sorted() is stable and ``matched`` is in load order, which settles remaining ties.
    if query.sort == "name":
        return sorted(matched, key=lambda r: normalize_text(r.name))
    if query.sort == "newest":
        return sorted(matched, key=_newest_key, reverse=True)
    if query.sort == "complexity":
        return sorted(matched, key=lambda r: r.complexity_rank)
    if query.sort == "size":
        return sorted(matched, key=_size_key)
    needle = normalize_text(query.search_text.strip())
    return sorted(matched, key=_relevance_key(needle))


def search(store: CatalogStore, query: FilterQuery) -> tuple[ComponentRecord, ...]:
    """Return the records matching ``query``, ranked.

    Never raises for a loaded store: unknown frameworks or categories and
    blank search text simply produce an empty or unfiltered result.
    """
    predicates = _build_predicates(query)
    matched = [r for r in store.all() if all(p(r) for p in predicates)]
    return tuple(_rank(matched, query))


def paginate(
    results: Sequence[ComponentRecord],
    *,
    limit: int,
    offset: int = 0,
) -> tuple[list[ComponentRecord], int]:
    """Slice a result sequence for display.

    Returns:
        Tuple of (page, total_count).
    """
    offset = max(offset, 0)
    limit = max(limit, 0)
    return list(results[offset : offset + limit]), len(results)
