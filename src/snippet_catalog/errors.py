"""Exceptions raised by the snippet catalog."""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class DuplicateIdError(CatalogError, ValueError):
    """Two registry entries share the same component id."""

    def __init__(self, component_id: int | str) -> None:
        self.component_id = component_id
        super().__init__(f"Duplicate component id: {component_id!r}")


class InvalidDimensionError(CatalogError, ValueError):
    """Facet counts were requested for an unsupported dimension."""


class InvalidQueryError(CatalogError, ValueError):
    """A filter query names an unknown sort key, price tier or complexity."""


class RegistryFormatError(CatalogError, ValueError):
    """A registry entry could not be converted into a component record."""


class UnknownComponentError(CatalogError, KeyError):
    """No component with the requested id exists in the catalog."""
