"""Tests for converting raw registry entries into component records."""

import pytest

from snippet_catalog.core.importer.registry_reader import parse_registry_data, parse_registry_entry
from snippet_catalog.errors import RegistryFormatError

ROTATING_CUBE = {
    "id": 101,
    "name": "3D Rotating Cube",
    "category": "3D",
    "framework": "React Three Fiber",
    "description": "A customizable 3D cube that rotates smoothly on mouse interaction.",
    "code": "<RotatingCube />",
    "price": 19.99,
    "language": "tsx",
    "previewBg": "bg-gradient-to-r from-[#1E293B] to-[#334155]",
    "previewHtml": "<img src='cube.gif' />",
    "tags": ["3D", "Animation", "Interactive", "3D"],
    "isNew": True,
    "fileSize": "5.7 KB",
    "is3D": True,
}


def test_parse_entry_maps_camel_case_fields() -> None:
    record = parse_registry_entry(ROTATING_CUBE, source="registry.json", position=0)
    assert record.id == 101
    assert record.framework == "React Three Fiber"
    assert record.is_new is True
    assert record.is_3d is True
    assert record.file_size == "5.7 KB"
    assert record.preview_bg == "bg-gradient-to-r from-[#1E293B] to-[#334155]"
    assert record.preview_html == "<img src='cube.gif' />"
    assert record.language == "tsx"
    assert record.price == 19.99


def test_parse_entry_collapses_duplicate_tags() -> None:
    record = parse_registry_entry(ROTATING_CUBE, source="registry.json", position=0)
    assert record.tags == frozenset({"3D", "Animation", "Interactive"})


def test_parse_entry_accepts_snake_case_and_defaults() -> None:
    entry = {"id": "grid", "name": "Grid", "category": "Layout", "framework": "Vue",
             "is_new": True, "last_updated": "2024-01-01", "dependencies": ["vue"]}
    record = parse_registry_entry(entry, source="x.json", position=3)
    assert record.is_new is True
    assert record.last_updated == "2024-01-01"
    assert record.dependencies == ("vue",)
    assert record.description == ""
    assert record.code == ""
    assert record.tags == frozenset()
    assert record.complexity is None


@pytest.mark.parametrize(
    ("patch", "fragment"),
    [
        ({"name": "  "}, "'name'"),
        ({"framework": None}, "'framework'"),
        ({"id": True}, "'id'"),
        ({"id": 1.5}, "'id'"),
        ({"complexity": "hard"}, "complexity"),
        ({"tags": "ui"}, "'tags'"),
        ({"price": False}, "'price'"),
        ({"code": 42}, "'code'"),
    ],
)
def test_parse_entry_rejects_bad_fields(patch: dict[str, object], fragment: str) -> None:
    entry = {**ROTATING_CUBE, **patch}
    with pytest.raises(RegistryFormatError, match=fragment) as exc_info:
        parse_registry_entry(entry, source="registry.json", position=7)
    assert "registry.json[7]" in str(exc_info.value)


def test_parse_entry_requires_an_id_without_slug() -> None:
    entry = {k: v for k, v in ROTATING_CUBE.items() if k != "id"}
    with pytest.raises(RegistryFormatError, match="'id'"):
        parse_registry_entry(entry, source="registry.json", position=0)


def test_parse_data_accepts_slug_mapping() -> None:
    entry = {k: v for k, v in ROTATING_CUBE.items() if k != "id"}
    records = parse_registry_data(
        {"rotating-cube": entry, "product-viewer": {**ROTATING_CUBE, "id": 102}},
        source="componentMap.json",
    )
    assert [r.id for r in records] == ["rotating-cube", 102]


def test_parse_data_rejects_scalars() -> None:
    with pytest.raises(RegistryFormatError, match="list or an object"):
        parse_registry_data("nope", source="bad.json")


def test_parse_data_rejects_non_object_entries() -> None:
    with pytest.raises(RegistryFormatError, match=r"bad.json\[1\]"):
        parse_registry_data([ROTATING_CUBE, 5], source="bad.json")


@pytest.mark.parametrize(("key", "value"), [("isNew", "false"), ("is3D", 1), ("is_new", None)])
def test_parse_entry_requires_boolean_flags(key: str, value: object) -> None:
    entry = {**ROTATING_CUBE, key: value}
    with pytest.raises(RegistryFormatError, match="true or false"):
        parse_registry_entry(entry, source="registry.json", position=0)


def test_parse_entry_flags_default_to_false() -> None:
    entry = {"id": 9, "name": "Badge", "category": "UI", "framework": "React"}
    record = parse_registry_entry(entry, source="registry.json", position=0)
    assert record.is_new is False
    assert record.is_3d is False


def test_parse_entry_rejects_reserved_framework_name() -> None:
    entry = {**ROTATING_CUBE, "framework": "All"}
    with pytest.raises(RegistryFormatError, match="reserved"):
        parse_registry_entry(entry, source="registry.json", position=0)
