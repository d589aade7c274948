"""Extraction run — walk a source and write one record per feature.

Each feature is fully processed (title built, record formatted, record
written) before the next one is fetched. Records already written stay in
the stream if a later feature aborts the run.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from station_extract.core.config import ExtractConfig
from station_extract.pipeline.formatter import RecordFormat, format_record
from station_extract.pipeline.title import build_title
from station_extract.pipeline.walker import walk

if TYPE_CHECKING:
    from typing import TextIO

    from station_extract.models.feature import Feature
    from station_extract.pipeline.walker import FeatureSource
    from station_extract.transliteration.base import Transliterator

logger = logging.getLogger("station_extract.pipeline.extract")


def extract(
    source: FeatureSource,
    transliterator: Transliterator,
    stream: TextIO,
    *,
    record_format: RecordFormat = RecordFormat.DELIMITED,
    config: ExtractConfig | None = None,
) -> int:
    """Write one *record_format* record per feature of *source* to *stream*.

    Returns:
        The number of records written.

    Raises:
        EncodingRepairError: If a Chinese name cannot be repaired.
        GeometryTypeError: If a feature is not a single point.
    """
    if config is None:
        config = ExtractConfig()

    def _write_record(feature: Feature) -> None:
        title = build_title(
            transliterator,
            feature,
            source_encoding=config.source_encoding,
            target_encoding=config.target_encoding,
        )
        stream.write(
            format_record(
                record_format,
                feature,
                title,
                table=config.table,
                country_code=config.country_code,
                id_separator=config.id_separator,
            )
        )

    count = walk(source, _write_record)
    logger.info(
        "Wrote %d %s record(s) | transliteration=%s",
        count,
        record_format.value,
        transliterator.variant,
    )
    return count
