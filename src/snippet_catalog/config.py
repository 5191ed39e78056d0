"""Configuration constants for snippet-catalog."""

import os
from pathlib import Path

# Framework sentinel meaning "no framework filter".
ALL_FRAMEWORKS: str = "All"

# Complexity ordinals, simplest first. Unspecified complexity sorts after these.
COMPLEXITY_LEVELS: tuple[str, ...] = ("simple", "medium", "complex")

# Price labels treated as zero-cost (compared case-insensitively).
FREE_PRICE_LABELS: frozenset[str] = frozenset({"0", "0.0", "0.00", "free"})

PRICE_TIERS: tuple[str, ...] = ("free", "paid")

SORT_KEYS: tuple[str, ...] = ("relevance", "name", "newest", "complexity", "size")

FACET_DIMENSIONS: tuple[str, ...] = ("framework", "category", "tag")

DEFAULT_LIMIT: int = 20

# Environment variable pointing at a registry file or directory.
REGISTRY_ENV_VAR: str = "SNIPPET_CATALOG_REGISTRY"

BUNDLED_REGISTRY: Path = Path(__file__).parent / "data" / "registry.json"

# Registry location. First path found is used; the bundled sample is the fallback.
REGISTRY_LOCATIONS: list[Path] = [
    Path("~/.config/snippet-catalog/registry").expanduser(),
    Path("~/.config/snippet-catalog/registry.json").expanduser(),
    Path("~/.local/share/snippet-catalog/registry").expanduser(),
    BUNDLED_REGISTRY,
]


def resolve_registry_path() -> Path:
    """Return the registry file or directory to load.

    The environment variable wins when set, even if the path does not exist,
    so a typo surfaces as an error instead of silently loading the sample.
    """
    override = os.environ.get(REGISTRY_ENV_VAR)
    if override:
        return Path(override).expanduser()
    for candidate in REGISTRY_LOCATIONS:
        if candidate.exists():
            return candidate
    return BUNDLED_REGISTRY
