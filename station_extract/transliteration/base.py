"""Transliterator abstract base class.

A transliterator maps Chinese-script text to a Latin-script approximation
for one target-language convention. The title builder only ever calls
``translate``; which convention is used is decided when the instance is
constructed.
"""

from __future__ import annotations

import abc


class Transliterator(abc.ABC):
    """Abstract base class for transliteration variants.

    Example usage::

        transliterator = get_transliterator("en")
        transliterator.translate("北京")  # "Beijing"
    """

    def __init__(self, variant: str) -> None:
        self._variant = variant

    @property
    def variant(self) -> str:
        """Return the variant name (e.g. ``"en"``)."""
        return self._variant

    @abc.abstractmethod
    def translate(self, text: str) -> str:
        """Return the Latin-script rendering of *text*.

        Characters that are not Chinese script pass through unchanged.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variant={self._variant!r})"
