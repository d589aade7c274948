"""Chinese-to-Latin transliteration.

The title builder depends only on ``Transliterator.translate``; concrete
variants are created through the factory.
"""

from station_extract.transliteration.base import Transliterator
from station_extract.transliteration.factory import (
    ENGLISH,
    GERMAN,
    get_transliterator,
    list_variants,
    register_transliterator,
)

__all__ = [
    "ENGLISH",
    "GERMAN",
    "Transliterator",
    "get_transliterator",
    "list_variants",
    "register_transliterator",
]
