"""Mandarin place-name transliteration backed by pypinyin.

pypinyin supplies the toneless syllables (including its phrase dictionary
for polyphonic characters). This module turns them into place-name
spellings for one target-language convention:

- syllables of one Chinese run form a single capitalised word, with an
  apostrophe before a non-first syllable starting with a, o or e
  (``西安`` -> ``Xi'an``);
- a trailing ``站`` (station) is dropped;
- a trailing compass character after a name of at least two characters
  becomes a separate localised word (``北京西`` -> ``Beijing West``);
- text outside the Chinese script passes through unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from pypinyin import Style, lazy_pinyin

from station_extract.transliteration.base import Transliterator
from station_extract.transliteration.factory import ENGLISH, GERMAN

STATION_SUFFIX = "站"

_HAN_RUN = re.compile(r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]+")
_APOSTROPHE_INITIALS = ("a", "o", "e")
_UMLAUT_INITIALS = ("j", "q", "x", "y")
_MIN_DIRECTION_BASE = 2


@dataclass(frozen=True, slots=True)
class RomanizationRules:
    """Spelling conventions of one transliteration variant.

    Attributes:
        initials: Ordered ``(pinyin, spelling)`` replacements for syllable
            initials; the first matching prefix wins.
        umlaut: Spelling of the pinyin ``ü``.
        restore_umlaut: Write the ``u`` after j, q, x and y as ``ü``.
        directions: Localised words for trailing compass characters.
    """

    initials: tuple[tuple[str, str], ...] = ()
    umlaut: str = "u"
    restore_umlaut: bool = False
    directions: dict[str, str] = field(default_factory=dict)


ENGLISH_RULES = RomanizationRules(
    umlaut="u",
    directions={"东": "East", "西": "West", "南": "South", "北": "North"},
)

GERMAN_RULES = RomanizationRules(
    initials=(
        ("zh", "dsch"),
        ("ch", "tsch"),
        ("sh", "sch"),
        ("j", "dsch"),
        ("q", "tsch"),
        ("x", "hs"),
        ("z", "ds"),
        ("c", "ts"),
        ("y", "j"),
    ),
    umlaut="ü",
    restore_umlaut=True,
    directions={"东": "Ost", "西": "West", "南": "Süd", "北": "Nord"},
)

_RULES_BY_VARIANT: dict[str, RomanizationRules] = {
    ENGLISH: ENGLISH_RULES,
    GERMAN: GERMAN_RULES,
}


class MandarinTransliterator(Transliterator):
    """Transliterates Mandarin place names for English or German readers."""

    def __init__(self, variant: str = ENGLISH, rules: RomanizationRules | None = None) -> None:
        super().__init__(variant)
        if rules is None:
            rules = _RULES_BY_VARIANT[variant]
        self._rules = rules

    @classmethod
    def to_english(cls) -> MandarinTransliterator:
        return cls(ENGLISH)

    @classmethod
    def to_german(cls) -> MandarinTransliterator:
        return cls(GERMAN)

    def translate(self, text: str) -> str:
        name = text
        if len(name) > 1 and name.endswith(STATION_SUFFIX):
            name = name[: -len(STATION_SUFFIX)]

        direction = ""
        if len(name) > _MIN_DIRECTION_BASE and name[-1] in self._rules.directions:
            direction = self._rules.directions[name[-1]]
            name = name[:-1]

        rendered = _HAN_RUN.sub(lambda match: self._render_run(match.group()), name)
        if direction:
            return f"{rendered} {direction}"
        return rendered

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _render_run(self, run: str) -> str:
        """Render one run of Chinese characters as a single word."""
        syllables = lazy_pinyin(run, style=Style.NORMAL, v_to_u=True)
        parts: list[str] = []
        for index, syllable in enumerate(syllables):
            if index and syllable.startswith(_APOSTROPHE_INITIALS):
                parts.append("'")
            parts.append(self._romanize(syllable))
        word = "".join(parts)
        return word[:1].upper() + word[1:]

    def _romanize(self, syllable: str) -> str:
        rules = self._rules
        if rules.restore_umlaut and syllable.startswith(_UMLAUT_INITIALS) and syllable[1:2] == "u":
            syllable = f"{syllable[0]}ü{syllable[2:]}"
        for source, target in rules.initials:
            if syllable.startswith(source):
                syllable = target + syllable[len(source) :]
                break
        return syllable.replace("ü", rules.umlaut)
