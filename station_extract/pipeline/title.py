"""Bilingual feature titles.

A title combines the transliterated place name with the repaired Chinese
original, e.g. ``"Beijing West (北京西站)"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from station_extract.core.constants import (
    DEFAULT_SOURCE_ENCODING,
    DEFAULT_TARGET_ENCODING,
    NO_NAME_TITLE,
    ZH_NAME,
)
from station_extract.pipeline.encoding import repair

if TYPE_CHECKING:
    from station_extract.models.feature import Feature, FieldName
    from station_extract.transliteration.base import Transliterator


def build_title(
    transliterator: Transliterator,
    feature: Feature,
    *,
    field: FieldName = ZH_NAME,
    source_encoding: str = DEFAULT_SOURCE_ENCODING,
    target_encoding: str = DEFAULT_TARGET_ENCODING,
) -> str:
    """Return ``"<transliterated> (<name>)"`` or ``"No Name found."``.

    The first attribute of *feature* whose identity equals *field* is
    treated as mis-encoded text and repaired before transliteration.

    Raises:
        EncodingRepairError: If the name cannot be repaired.
    """
    attribute = feature.find(field)
    if attribute is None:
        return NO_NAME_TITLE

    name = repair(
        str(attribute.value),
        source_encoding=source_encoding,
        target_encoding=target_encoding,
    )
    return f"{transliterator.translate(name)} ({name})"
