"""Fiona-based feature source.

Reads vector datasets (ESRI Shapefile, GeoPackage, ...) through fiona
(OGR). The first layer of the dataset is used. Records are converted to
``Feature`` objects with shapely geometries and ``FieldName``-keyed
attributes.

The dataset is always decoded with an explicit encoding (Latin-1 by
default), so names stored as UTF-8 arrive in the one-character-per-byte
form the encoding repair expects, regardless of any ``.cpg`` sidecar.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from shapely.geometry import shape

from station_extract.core.constants import DEFAULT_DATASET_ENCODING, ID_SEPARATOR
from station_extract.core.exceptions import DataAccessError
from station_extract.models.feature import Attribute, Feature, FieldName

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

logger = logging.getLogger("station_extract.sources.fiona_source")

# OGR numbers shapefile records from 0; identifiers are numbered from 1.
_ONE_BASED_DRIVERS = frozenset({"ESRI Shapefile"})


class FionaFeatureSource:
    """Feature source over the first layer of a fiona-readable dataset.

    Attributes:
        path: Dataset path.
        layer: Name of the layer features are read from.
        encoding: Codec attribute text is decoded with.

    Raises:
        DataAccessError: If the dataset does not exist, cannot be opened,
            or has no layers.
    """

    def __init__(self, path: Path | str, *, encoding: str = DEFAULT_DATASET_ENCODING) -> None:
        import fiona
        from fiona.errors import FionaError

        self.path = Path(path)
        self.encoding = encoding

        if not self.path.exists():
            msg = f"Dataset not found: {self.path}"
            raise DataAccessError(msg)

        try:
            layers = fiona.listlayers(str(self.path))
        except (FionaError, OSError) as exc:
            msg = f"Cannot open dataset {self.path}: {exc}"
            raise DataAccessError(msg) from exc

        if not layers:
            msg = f"No layer found in dataset {self.path}"
            raise DataAccessError(msg)

        self.layer: str = layers[0]
        logger.info("Opened dataset %s | layer=%s | layers=%d", self.path, self.layer, len(layers))

    def features(self) -> FionaFeatureCursor:
        """Open a fresh cursor over every feature of the layer."""
        import fiona
        from fiona.errors import FionaError

        try:
            collection = fiona.open(str(self.path), layer=self.layer, encoding=self.encoding)
        except (FionaError, OSError) as exc:
            msg = f"Cannot read layer {self.layer!r} of {self.path}: {exc}"
            raise DataAccessError(msg) from exc

        fid_offset = 1 if getattr(collection, "driver", None) in _ONE_BASED_DRIVERS else 0
        return FionaFeatureCursor(collection, self.layer, fid_offset=fid_offset)


class FionaFeatureCursor:
    """Single-pass iteration over an open fiona collection."""

    def __init__(self, collection: object, layer: str, *, fid_offset: int = 0) -> None:
        self._collection = collection
        self._layer = layer
        self._fid_offset = fid_offset
        self._closed = False

    def __iter__(self) -> Iterator[Feature]:
        for record in self._collection:  # type: ignore[attr-defined]
            yield record_to_feature(record, self._layer, fid_offset=self._fid_offset)

    def __enter__(self) -> FionaFeatureCursor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if not self._closed:
            self._collection.close()  # type: ignore[attr-defined]
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


def record_to_feature(record: object, layer: str, *, fid_offset: int = 0) -> Feature:
    """Convert a fiona record into a ``Feature``.

    The identifier is ``"<layer>.<fid + fid_offset>"``; shapefile sources
    pass an offset of 1 so records are numbered 1, 2, 3 and so on. Null and
    empty-string properties are left out (the DBF format cannot tell them
    apart), so such a name field counts as a missing name: an empty name
    yields "No Name found." instead of a title of the form " ()".
    """
    properties = getattr(record, "properties", None) or {}
    attributes = tuple(
        Attribute(FieldName(str(key)), value)
        for key, value in properties.items()
        if value is not None and value != ""
    )

    geom = getattr(record, "geometry", None)
    geometry = shape(geom) if geom is not None else None

    return Feature(
        id=f"{layer}{ID_SEPARATOR}{int(record.id) + fid_offset}",  # type: ignore[attr-defined]
        attributes=attributes,
        geometry=geometry,
    )
