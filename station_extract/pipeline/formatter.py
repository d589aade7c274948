"""Record formatting — delimited lines and SQL insert statements.

Both formats share the identifier, title and coordinate rendering and
differ only in layout:

- delimited: ``7;Beijing West (北京西站);39.9,116.3``
- SQL: ``INSERT INTO stations (...) VALUES ('cn', '7', NULL, '...', 39.9, 116.3);``

Neither format escapes quotes or separators inside the title. The
datasets are curated station lists, and the SQL output is meant for a
trusted batch import.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import TYPE_CHECKING

from shapely.geometry import Point

from station_extract.core.constants import (
    DELIMITED_COORD_SEPARATOR,
    DELIMITED_FIELD_SEPARATOR,
    ID_SEPARATOR,
    LINE_TERMINATOR,
    SQL_COLUMNS,
    SQL_COUNTRY_CODE,
    SQL_MODE_TOKEN,
    SQL_TABLE,
)
from station_extract.core.exceptions import GeometryTypeError
from station_extract.models.feature import Coordinate

if TYPE_CHECKING:
    from station_extract.models.feature import Feature


class RecordFormat(enum.Enum):
    """Output record layout, chosen once per run."""

    DELIMITED = "delimited"
    SQL = "sql"


def resolve_format(args: Sequence[str]) -> RecordFormat:
    """Select the record format from the tokens following the dataset path.

    Only a single token equal to ``-sql`` (any case) selects SQL; anything
    else, including extra tokens, falls back to the delimited format.
    """
    if len(args) == 1 and args[0].lower() == SQL_MODE_TOKEN:
        return RecordFormat.SQL
    return RecordFormat.DELIMITED


# ---------------------------------------------------------------------------
# Field rendering
# ---------------------------------------------------------------------------


def strip_namespace(feature_id: str, separator: str = ID_SEPARATOR) -> str:
    """Return the part of *feature_id* after the first *separator*.

    Without a separator the whole identifier is returned.
    """
    return feature_id[feature_id.find(separator) + 1 :]


def point_coordinate(feature: Feature) -> Coordinate:
    """Return the ``(lat, lon)`` of the feature's point geometry.

    Raises:
        GeometryTypeError: If the default geometry is not a single point.
    """
    geometry = feature.geometry
    if not isinstance(geometry, Point):
        kind = "null" if geometry is None else geometry.geom_type
        msg = f"Feature {feature.id!r} has {kind} geometry, expected Point"
        raise GeometryTypeError(msg)
    return Coordinate(lat=geometry.y, lon=geometry.x)


def format_number(value: float) -> str:
    """Shortest text that reads back as the same float (``47.15``)."""
    return repr(float(value))


# ---------------------------------------------------------------------------
# Record layouts
# ---------------------------------------------------------------------------


def format_delimited(
    feature: Feature,
    title: str,
    *,
    id_separator: str = ID_SEPARATOR,
) -> str:
    """Render ``<id>;<title>;<lat>,<lon>`` followed by a line terminator."""
    coordinate = point_coordinate(feature)
    fields = (
        strip_namespace(feature.id, id_separator),
        title,
        format_number(coordinate.lat)
        + DELIMITED_COORD_SEPARATOR
        + format_number(coordinate.lon),
    )
    return DELIMITED_FIELD_SEPARATOR.join(fields) + LINE_TERMINATOR


def format_sql(
    feature: Feature,
    title: str,
    *,
    table: str = SQL_TABLE,
    country_code: str = SQL_COUNTRY_CODE,
    id_separator: str = ID_SEPARATOR,
) -> str:
    """Render a single-row ``INSERT`` statement followed by a newline."""
    coordinate = point_coordinate(feature)
    values = (
        f"'{country_code}'",
        f"'{strip_namespace(feature.id, id_separator)}'",
        "NULL",
        f"'{title}'",
        format_number(coordinate.lat),
        format_number(coordinate.lon),
    )
    return (
        f"INSERT INTO {table} ({', '.join(SQL_COLUMNS)})"
        f" VALUES ({', '.join(values)});\n"
    )


def format_record(
    record_format: RecordFormat,
    feature: Feature,
    title: str,
    *,
    table: str = SQL_TABLE,
    country_code: str = SQL_COUNTRY_CODE,
    id_separator: str = ID_SEPARATOR,
) -> str:
    """Render *feature* in the given *record_format*."""
    if record_format is RecordFormat.SQL:
        return format_sql(
            feature,
            title,
            table=table,
            country_code=country_code,
            id_separator=id_separator,
        )
    return format_delimited(feature, title, id_separator=id_separator)
