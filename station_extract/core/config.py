"""Extraction run configuration.

All values have defaults matching the station datasets this tool was
written for. The command-line surface is fixed (a path and an optional
``-sql`` token), so the configuration is built once at startup and
threaded explicitly through the pipeline.

Fail-fast validation:
    ``validated()`` raises ``ConfigValidationError`` if an encoding is
    unknown, the source encoding is not a one-byte-per-character codec,
    or a required literal is empty.  This catches a bad configuration
    before any record is written.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass

from station_extract.core.constants import (
    DEFAULT_DATASET_ENCODING,
    DEFAULT_OUTPUT_ENCODING,
    DEFAULT_SOURCE_ENCODING,
    DEFAULT_TARGET_ENCODING,
    ID_SEPARATOR,
    SQL_COUNTRY_CODE,
    SQL_TABLE,
)
from station_extract.core.exceptions import ValidationError
from station_extract.transliteration.factory import list_variants

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidationError(ValidationError):
    """Raised when configuration values are invalid.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ExtractConfig:
    """Immutable extraction configuration.

    Attributes:
        source_encoding: Single-byte codec the raw names were wrongly decoded with.
        target_encoding: Multi-byte codec the raw names were actually written in.
        dataset_encoding: Codec fiona is told to decode the dataset with.
            The same codec as ``source_encoding`` in GDAL spelling, so the
            defect is reproduced regardless of sidecar files.
        output_encoding: Encoding of the record stream (stdout).
        transliteration_variant: Transliterator used for titles (``en`` or ``de``).
        country_code: Literal written to the SQL ``countryCode`` column.
        table: SQL table name.
        id_separator: Separator between namespace prefix and local feature id.
        log_level: Root log level for the CLI.
    """

    source_encoding: str = DEFAULT_SOURCE_ENCODING
    target_encoding: str = DEFAULT_TARGET_ENCODING
    dataset_encoding: str = DEFAULT_DATASET_ENCODING
    output_encoding: str = DEFAULT_OUTPUT_ENCODING
    transliteration_variant: str = "en"
    country_code: str = SQL_COUNTRY_CODE
    table: str = SQL_TABLE
    id_separator: str = ID_SEPARATOR
    log_level: str = "WARNING"

    def validated(self) -> ExtractConfig:
        """Return ``self`` after validation.

        Raises:
            ConfigValidationError: If any value is invalid.
        """
        _validate(self)
        return self

    @property
    def log_level_number(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return int(getattr(logging, self.log_level.upper()))


def _validate(config: ExtractConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    for key in ("source_encoding", "target_encoding", "dataset_encoding", "output_encoding"):
        value = getattr(config, key)
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ConfigValidationError(key.upper(), value, "unknown codec") from exc

    if not _is_single_byte_codec(config.source_encoding):
        raise ConfigValidationError(
            "SOURCE_ENCODING",
            config.source_encoding,
            "must map every byte 0-255 to exactly one character",
        )

    for key in ("country_code", "table", "id_separator"):
        if not getattr(config, key):
            raise ConfigValidationError(key.upper(), getattr(config, key), "must not be empty")

    if config.log_level.upper() not in _LOG_LEVELS:
        raise ConfigValidationError(
            "LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(_LOG_LEVELS)}",
        )

    if config.transliteration_variant not in list_variants():
        raise ConfigValidationError(
            "TRANSLITERATION_VARIANT",
            config.transliteration_variant,
            f"must be one of {', '.join(list_variants())}",
        )


def _is_single_byte_codec(encoding: str) -> bool:
    """Whether *encoding* round-trips all 256 byte values one-to-one."""
    every_byte = bytes(range(256))
    try:
        text = every_byte.decode(encoding)
        return len(text) == 256 and text.encode(encoding) == every_byte
    except UnicodeError:
        return False
