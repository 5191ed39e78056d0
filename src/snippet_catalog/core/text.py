"""Text normalization shared by facet counting and search."""

import unicodedata


def normalize_text(text: str) -> str:
    """Casefold and strip accents so "Café" and "cafe" compare equal."""
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))
