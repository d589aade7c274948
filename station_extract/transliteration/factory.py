"""Transliterator factory — selects a transliteration variant by name.

The factory maintains a registry of known variants. New variants are
registered with ``register_transliterator`` without touching the title
builder.

Usage::

    from station_extract.transliteration.factory import get_transliterator

    transliterator = get_transliterator("de")
    transliterator.translate("上海")  # "Schanghai"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from station_extract.core.exceptions import TransliterationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from station_extract.transliteration.base import Transliterator

logger = logging.getLogger(__name__)

ENGLISH = "en"
GERMAN = "de"

# Each entry maps a variant name to a zero-argument callable building the
# instance. pypinyin loads its dictionaries on import, so the import is
# deferred until a built-in variant is requested.

_VARIANT_REGISTRY: dict[str, Callable[[], Transliterator]] = {}


def _register_builtin_variants() -> None:
    """Register the built-in English and German variants."""

    def _english() -> Transliterator:
        from station_extract.transliteration.pinyin import MandarinTransliterator

        return MandarinTransliterator.to_english()

    def _german() -> Transliterator:
        from station_extract.transliteration.pinyin import MandarinTransliterator

        return MandarinTransliterator.to_german()

    _VARIANT_REGISTRY[ENGLISH] = _english
    _VARIANT_REGISTRY[GERMAN] = _german


def _ensure_registry() -> None:
    """Initialise the variant registry once (idempotent)."""
    if not _VARIANT_REGISTRY:
        _register_builtin_variants()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_transliterator(name: str, loader: Callable[[], Transliterator]) -> None:
    """Register a custom transliteration variant.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Transliteration variant name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _VARIANT_REGISTRY[name] = loader
    logger.debug("Registered transliteration variant: %s", name)


def get_transliterator(variant: str) -> Transliterator:
    """Create and return the transliterator for *variant*.

    Raises:
        TransliterationError: If the variant is not registered.
    """
    _ensure_registry()

    loader = _VARIANT_REGISTRY.get(variant)
    if loader is None:
        available = ", ".join(sorted(_VARIANT_REGISTRY))
        msg = f"Unknown transliteration variant: {variant!r}. Available: {available}"
        raise TransliterationError(msg)

    logger.debug("Creating transliterator: %s", variant)
    return loader()


def list_variants() -> list[str]:
    """Return the names of all registered variants."""
    _ensure_registry()
    return sorted(_VARIANT_REGISTRY)
