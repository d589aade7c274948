"""Data model for a feature read from a vector dataset.

A Feature is one record of the dataset: a stable identifier, its
attributes keyed by ``FieldName`` identity, and a single default
geometry. The pipeline only ever reads from a Feature.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True, slots=True)
class FieldName:
    """Identity token for an attribute name.

    Two names are the same attribute only if both namespace and local part
    are equal; there is no prefix or case-insensitive matching.

    Attributes:
        local: Field name as stored in the dataset (e.g. ``"NAME_ZH"``).
        namespace: Optional namespace URI, ``None`` for plain datasets.
    """

    local: str
    namespace: str | None = None

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace}:{self.local}"
        return self.local


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single named attribute value of a feature."""

    name: FieldName
    value: object


class Coordinate(NamedTuple):
    """A point position as ``(lat, lon)``."""

    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class Feature:
    """A single record of a vector dataset.

    Attributes:
        id: Identifier, possibly namespaced (e.g. ``"stations.42"``).
        attributes: Attribute values in dataset field order.
        geometry: Default geometry as a shapely object, ``None`` for a null shape.
    """

    id: str
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)
    geometry: BaseGeometry | None = None

    def find(self, name: FieldName) -> Attribute | None:
        """Return the first attribute whose identity equals *name*."""
        return next((attr for attr in self.attributes if attr.name == name), None)

    @property
    def attribute_names(self) -> tuple[FieldName, ...]:
        """Names of all attributes, in dataset order."""
        return tuple(attr.name for attr in self.attributes)
