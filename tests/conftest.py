"""Shared pytest fixtures for the station extraction test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from shapely.geometry import Point

from station_extract.core.constants import ZH_NAME
from station_extract.models.feature import Attribute, Feature, FieldName
from station_extract.transliteration.base import Transliterator

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


def mis_decode(text: str) -> str:
    """Return *text* as it arrives when its UTF-8 bytes are read as Latin-1."""
    return text.encode("utf-8").decode("latin-1")


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------


class FakeCursor:
    """Feature cursor over a list, counting how often it is closed."""

    def __init__(self, features: list[Feature]) -> None:
        self._features = features
        self.close_count = 0

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features)

    def __enter__(self) -> FakeCursor:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.close_count += 1


class FakeSource:
    """Feature source handing out a fresh ``FakeCursor`` per call."""

    def __init__(self, features: list[Feature]) -> None:
        self._features = features
        self.cursors: list[FakeCursor] = []

    def features(self) -> FakeCursor:
        cursor = FakeCursor(self._features)
        self.cursors.append(cursor)
        return cursor


class StubTransliterator(Transliterator):
    """Transliterator returning canned translations and recording its input."""

    def __init__(self, translations: dict[str, str] | None = None) -> None:
        super().__init__("stub")
        self._translations = translations or {}
        self.calls: list[str] = []

    def translate(self, text: str) -> str:
        self.calls.append(text)
        return self._translations.get(text, f"<{text}>")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_feature() -> Callable[..., Feature]:
    """Factory for point features with an optional mis-decoded Chinese name."""

    def _make(
        feature_id: str = "station.7",
        *,
        name: str | None = None,
        lat: float = 47.15,
        lon: float = 39.76,
        extra: dict[str, object] | None = None,
    ) -> Feature:
        attributes = [Attribute(FieldName(key), value) for key, value in (extra or {}).items()]
        if name is not None:
            attributes.append(Attribute(ZH_NAME, mis_decode(name)))
        return Feature(id=feature_id, attributes=tuple(attributes), geometry=Point(lon, lat))

    return _make


@pytest.fixture()
def stub_transliterator() -> StubTransliterator:
    return StubTransliterator({"北京西站": "Beijing West", "上海": "Shanghai"})


@pytest.fixture()
def fake_source_factory() -> Callable[[list[Feature]], FakeSource]:
    return FakeSource


@pytest.fixture()
def stations_shp(tmp_path: Path) -> Path:
    """A point shapefile with UTF-8 names behind a Latin-1 code page.

    Layer ``stations`` holds three features: two named stations and one
    without a name.
    """
    import fiona
    from fiona.model import Feature as FionaFeature

    path = tmp_path / "stations.shp"
    schema = {"geometry": "Point", "properties": {"NAME_ZH": "str:80", "CODE": "int"}}
    rows = [
        ("北京西站", 1, 116.3, 39.9),
        ("上海", 2, 121.47, 31.23),
        (None, 3, 113.26, 23.13),
    ]

    with fiona.open(
        str(path),
        "w",
        driver="ESRI Shapefile",
        schema=schema,
        crs="EPSG:4326",
        encoding="ISO-8859-1",
    ) as dst:
        for name, code, lon, lat in rows:
            dst.write(
                FionaFeature.from_dict(
                    {
                        "geometry": {"type": "Point", "coordinates": (lon, lat)},
                        "properties": {
                            "NAME_ZH": mis_decode(name) if name is not None else None,
                            "CODE": code,
                        },
                    }
                )
            )

    return path


@pytest.fixture()
def garble() -> Callable[[str], str]:
    """The Latin-1 mis-decoding applied by the dataset reader."""
    return mis_decode
