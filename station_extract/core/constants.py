"""Shared pipeline constants — single source of truth.

Centralises the field identity, encodings, and the fixed literals of the
two output record formats.
"""

from __future__ import annotations

from station_extract.models.feature import FieldName

# ---------------------------------------------------------------------------
# Attribute identity
# ---------------------------------------------------------------------------

ZH_NAME: FieldName = FieldName("NAME_ZH")
"""Identity of the attribute holding the (mis-encoded) Chinese place name."""

NO_NAME_TITLE: str = "No Name found."
"""Title used for features without a Chinese name attribute."""

# ---------------------------------------------------------------------------
# Encodings
# ---------------------------------------------------------------------------

DEFAULT_SOURCE_ENCODING: str = "latin-1"
"""Single-byte encoding the raw names were wrongly decoded with."""

DEFAULT_TARGET_ENCODING: str = "utf-8"
"""Multi-byte encoding the raw names were originally written in."""

DEFAULT_DATASET_ENCODING: str = "ISO-8859-1"
"""Codec the dataset reader decodes attribute text with (GDAL and Python spelling)."""

DEFAULT_OUTPUT_ENCODING: str = "utf-8"

# ---------------------------------------------------------------------------
# Record formats
# ---------------------------------------------------------------------------

ID_SEPARATOR: str = "."
DELIMITED_FIELD_SEPARATOR: str = ";"
DELIMITED_COORD_SEPARATOR: str = ","
LINE_TERMINATOR: str = "\n"

SQL_TABLE: str = "stations"
SQL_COUNTRY_CODE: str = "cn"
SQL_COLUMNS: tuple[str, ...] = ("countryCode", "id", "uicibnr", "title", "lat", "lon")
SQL_MODE_TOKEN: str = "-sql"

USAGE_MESSAGE: str = "Run with 1 argument with the path to the .shp file."
