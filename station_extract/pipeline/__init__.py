"""Feature-record extraction pipeline.

The pipeline is split into focused stages:
- **encoding**: repair of names decoded with the wrong codec
- **title**: bilingual title from the repaired name
- **formatter**: delimited and SQL record layouts
- **walker**: scoped iteration over a feature source
- **extract**: wires the stages to an output stream
"""

from station_extract.pipeline.encoding import repair
from station_extract.pipeline.extract import extract
from station_extract.pipeline.formatter import (
    RecordFormat,
    format_delimited,
    format_record,
    format_sql,
    point_coordinate,
    resolve_format,
    strip_namespace,
)
from station_extract.pipeline.title import build_title
from station_extract.pipeline.walker import FeatureCursor, FeatureSource, walk

__all__ = [
    "FeatureCursor",
    "FeatureSource",
    "RecordFormat",
    "build_title",
    "extract",
    "format_delimited",
    "format_record",
    "format_sql",
    "point_coordinate",
    "repair",
    "resolve_format",
    "strip_namespace",
    "walk",
]
