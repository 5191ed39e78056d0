"""Registry and filter engine for a catalog of copy-paste UI snippets."""

from snippet_catalog.core.importer.loader import load_catalog, read_registry
from snippet_catalog.core.search.engine import paginate, search
from snippet_catalog.core.store.catalog import CatalogStore
from snippet_catalog.errors import (
    CatalogError,
    DuplicateIdError,
    InvalidDimensionError,
    InvalidQueryError,
    RegistryFormatError,
    UnknownComponentError,
)
from snippet_catalog.models.component import ComponentRecord, FacetIndex
from snippet_catalog.models.query import FilterQuery

__all__ = [
    "CatalogError",
    "CatalogStore",
    "ComponentRecord",
    "DuplicateIdError",
    "FacetIndex",
    "FilterQuery",
    "InvalidDimensionError",
    "InvalidQueryError",
    "RegistryFormatError",
    "UnknownComponentError",
    "load_catalog",
    "paginate",
    "read_registry",
    "search",
]
