"""Read registry JSON files from disk and build a catalog store."""

import json
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from snippet_catalog.core.importer.registry_reader import parse_registry_data
from snippet_catalog.core.store.catalog import CatalogStore
from snippet_catalog.errors import RegistryFormatError
from snippet_catalog.models.component import ComponentRecord


@dataclass(frozen=True)
class LoadStats:
    """Summary of a registry read."""

    files_read: int
    components_loaded: int


def _registry_files(path: Path) -> list[Path]:
    if path.is_dir():
        return sorted(path.glob("*.json"))
    if path.is_file():
        return [path]
    msg = f"Registry not found: {path}"
    raise FileNotFoundError(msg)


def read_registry(path: Path) -> tuple[list[ComponentRecord], LoadStats]:
    """Read every component entry under ``path``.

    Args:
        path: A registry JSON file, or a directory whose ``*.json`` files are
            read in filename order.

    Returns:
        Tuple of (records in registry order, LoadStats).

    Raises:
        FileNotFoundError: ``path`` does not exist.
        RegistryFormatError: A file is not valid UTF-8 JSON or holds a bad entry.
    """
    records: list[ComponentRecord] = []
    files = _registry_files(path)
    for json_path in files:
        try:
            data = json.loads(json_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            msg = f"{json_path.name}: not a UTF-8 JSON document ({e})"
            raise RegistryFormatError(msg) from e

        parsed = parse_registry_data(data, source=json_path.name)
        logger.debug("Read {} components from {}", len(parsed), json_path.name)
        records.extend(parsed)

    if not files:
        logger.warning("No registry files found in {}", path)

    return records, LoadStats(files_read=len(files), components_loaded=len(records))


def load_catalog(path: Path) -> CatalogStore:
    """Read the registry at ``path`` and build a CatalogStore from it."""
    records, stats = read_registry(path)
    store = CatalogStore.load(records)
    logger.debug(
        "Loaded {} components from {} registry file(s)",
        stats.components_loaded, stats.files_read,
    )
    return store
