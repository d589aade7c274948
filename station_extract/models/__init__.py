"""Data models.

- Feature: identifier, attributes and default geometry of one record
- FieldName: identity token used for attribute lookup
- Coordinate: ``(lat, lon)`` position of a point feature
"""

from station_extract.models.feature import Attribute, Coordinate, Feature, FieldName

__all__ = [
    "Attribute",
    "Coordinate",
    "Feature",
    "FieldName",
]
