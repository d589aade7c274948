"""Feature walking over a data-access layer.

``walk`` visits every feature of a source, unfiltered and in the source's
natural order, and hands each one to a consumer. The cursor obtained from
the source is closed on every exit path, including a failing consumer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from types import TracebackType

    from station_extract.models.feature import Feature

logger = logging.getLogger("station_extract.pipeline.walker")


class FeatureCursor(Protocol):
    """A closable, single-pass sequence of features."""

    def __iter__(self) -> Iterator[Feature]: ...

    def __enter__(self) -> FeatureCursor: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    def close(self) -> None: ...


class FeatureSource(Protocol):
    """Anything that can open a fresh cursor over all of its features."""

    def features(self) -> FeatureCursor: ...


def walk(source: FeatureSource, consumer: Callable[[Feature], None]) -> int:
    """Apply *consumer* to every feature of *source*.

    Each call opens a fresh cursor; iteration is never resumed.

    Returns:
        The number of features visited.
    """
    count = 0
    with source.features() as cursor:
        for feature in cursor:
            logger.debug("Visiting feature %s", feature.id)
            consumer(feature)
            count += 1
    return count
