"""Parse raw registry entries into component records."""

from typing import Any

from snippet_catalog.config import ALL_FRAMEWORKS, COMPLEXITY_LEVELS
from snippet_catalog.errors import RegistryFormatError
from snippet_catalog.models.component import ComponentRecord

# Registry files use the site's camelCase keys; snake_case is accepted as well.
_KEY_ALIASES: dict[str, str] = {
    "isNew": "is_new",
    "fileSize": "file_size",
    "lastUpdated": "last_updated",
    "previewBg": "preview_bg",
    "previewHtml": "preview_html",
    "is3D": "is_3d",
}

_REQUIRED_STRINGS = ("name", "category", "framework")
_OPTIONAL_STRINGS = (
    "file_size", "last_updated", "language", "preview_bg", "preview_html", "author", "license",
)


def _canonical_keys(entry: dict[str, Any]) -> dict[str, Any]:
    return {_KEY_ALIASES.get(key, key): value for key, value in entry.items()}


def _string_list(value: Any, *, field: str, where: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"{where}: '{field}' must be a list of strings"
        raise RegistryFormatError(msg)
    return [v.strip() for v in value if v.strip()]


def parse_registry_entry(
    entry: dict[str, Any],
    *,
    source: str,
    position: int,
    fallback_id: str | None = None,
) -> ComponentRecord:
    """Convert one registry entry into a ComponentRecord.

    Args:
        entry: Raw entry as decoded from JSON.
        source: Where the entry came from, used in error messages.
        position: Index of the entry within its source.
        fallback_id: Id to use when the entry has none (the registry slug).

    Raises:
        RegistryFormatError: The entry is missing required fields or has
            values of the wrong type.
    """
    where = f"{source}[{position}]"
    if not isinstance(entry, dict):
        msg = f"{where}: expected an object, got {type(entry).__name__}"
        raise RegistryFormatError(msg)

    data = _canonical_keys(entry)

    component_id = data.get("id", fallback_id)
    if isinstance(component_id, bool) or not isinstance(component_id, int | str):
        msg = f"{where}: 'id' must be an integer or string"
        raise RegistryFormatError(msg)

    for key in _REQUIRED_STRINGS:
        value = data.get(key)
        if not isinstance(value, str) or not value.strip():
            msg = f"{where}: '{key}' must be a non-empty string"
            raise RegistryFormatError(msg)

    if data["framework"].strip() == ALL_FRAMEWORKS:
        msg = f"{where}: framework name {ALL_FRAMEWORKS!r} is reserved for the unfiltered view"
        raise RegistryFormatError(msg)

    for key in ("description", "code", *_OPTIONAL_STRINGS):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            msg = f"{where}: '{key}' must be a string"
            raise RegistryFormatError(msg)

    complexity = data.get("complexity")
    if complexity is not None and complexity not in COMPLEXITY_LEVELS:
        msg = f"{where}: unknown complexity {complexity!r}"
        raise RegistryFormatError(msg)

    for key in ("is_new", "is_3d"):
        if not isinstance(data.get(key, False), bool):
            msg = f"{where}: '{key}' must be true or false"
            raise RegistryFormatError(msg)

    price = data.get("price")
    if isinstance(price, bool) or not (price is None or isinstance(price, int | float | str)):
        msg = f"{where}: 'price' must be a number or string"
        raise RegistryFormatError(msg)

    return ComponentRecord(
        id=component_id,
        name=data["name"].strip(),
        category=data["category"].strip(),
        framework=data["framework"].strip(),
        description=data.get("description") or "",
        tags=frozenset(_string_list(data.get("tags"), field="tags", where=where)),
        code=data.get("code") or "",
        complexity=complexity,
        price=price,
        is_new=data.get("is_new", False),
        file_size=data.get("file_size"),
        last_updated=data.get("last_updated"),
        language=data.get("language"),
        preview_bg=data.get("preview_bg"),
        preview_html=data.get("preview_html"),
        author=data.get("author"),
        license=data.get("license"),
        dependencies=tuple(
            _string_list(data.get("dependencies"), field="dependencies", where=where)
        ),
        is_3d=data.get("is_3d", False),
    )


def parse_registry_data(data: Any, *, source: str) -> list[ComponentRecord]:
    """Parse a decoded registry document.

    Accepts either a list of entries or a mapping of slug -> entry; in the
    latter case the slug stands in for a missing ``id``.
    """
    if isinstance(data, list):
        return [
            parse_registry_entry(entry, source=source, position=i)
            for i, entry in enumerate(data)
        ]
    if isinstance(data, dict):
        return [
            parse_registry_entry(entry, source=source, position=i, fallback_id=slug)
            for i, (slug, entry) in enumerate(data.items())
        ]
    msg = f"{source}: registry must be a list or an object, got {type(data).__name__}"
    raise RegistryFormatError(msg)
