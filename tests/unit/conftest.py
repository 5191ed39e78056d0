"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from snippet_catalog.core.importer.loader import load_catalog
from snippet_catalog.core.store.catalog import CatalogStore
from tests.unit.factories import make_record

REGISTRY_ENTRIES = [
    {
        "id": 1,
        "name": "Button",
        "category": "UI",
        "framework": "React",
        "description": "A simple, versatile button with multiple variants",
        "tags": ["ui", "interaction"],
        "code": "<Button />",
        "fileSize": "1.1 KB",
        "price": "Free",
        "complexity": "simple",
    },
    {
        "id": 2,
        "name": "Card",
        "category": "UI",
        "framework": "Vue",
        "description": "Content card with header and footer slots",
        "tags": ["container"],
        "code": "<Card />",
        "fileSize": "0.9 KB",
        "price": "0",
    },
    {
        "id": 3,
        "name": "Button Group",
        "category": "UI",
        "framework": "React",
        "description": "Several buttons joined together",
        "tags": ["ui", "button"],
        "isNew": True,
        "fileSize": "2.4 KB",
        "price": 9.99,
        "complexity": "medium",
        "lastUpdated": "2024-05-01",
    },
    {
        "id": 4,
        "name": "Café Menu",
        "category": "Navigation",
        "framework": "Svelte",
        "description": "Dropdown menu with nested entries",
        "tags": ["menu", "navigation"],
        "price": "19.99",
        "complexity": "complex",
        "lastUpdated": "2023-11-10",
    },
    {
        "id": 5,
        "name": "3D Rotating Cube",
        "category": "3D",
        "framework": "React Three Fiber",
        "description": "A cube that rotates on mouse interaction",
        "tags": ["3D", "Animation"],
        "isNew": True,
        "fileSize": "5.7 KB",
        "is3D": True,
        "lastUpdated": "2025-04-03",
    },
]


@pytest.fixture
def scenario_store() -> CatalogStore:
    """The two-record Button/Card catalog."""
    return CatalogStore.load(
        [
            make_record(1, "Button", framework="React", category="UI", tags=["ui"]),
            make_record(2, "Card", framework="Vue", category="UI", tags=["container"]),
        ]
    )


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """A registry JSON file holding REGISTRY_ENTRIES."""
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(REGISTRY_ENTRIES), encoding="utf-8")
    return path


@pytest.fixture
def store(registry_file: Path) -> CatalogStore:
    """A store loaded from REGISTRY_ENTRIES through the real loader."""
    return load_catalog(registry_file)
