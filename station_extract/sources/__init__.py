"""Data-access layer: feature sources backed by fiona/OGR."""

from station_extract.sources.fiona_source import (
    FionaFeatureCursor,
    FionaFeatureSource,
    record_to_feature,
)

__all__ = [
    "FionaFeatureCursor",
    "FionaFeatureSource",
    "record_to_feature",
]
