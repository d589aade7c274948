"""Repair of attribute text decoded one byte-width too narrow.

The dataset stores UTF-8 text, but it is read as Latin-1, so every UTF-8
byte arrives as one character. Re-encoding with Latin-1 restores the
original bytes exactly, which are then decoded as UTF-8.

Apply exactly once per value: repairing already-repaired text is not
supported and fails or corrupts the result.
"""

from __future__ import annotations

from station_extract.core.constants import DEFAULT_SOURCE_ENCODING, DEFAULT_TARGET_ENCODING
from station_extract.core.exceptions import EncodingRepairError


def repair(
    raw: str,
    *,
    source_encoding: str = DEFAULT_SOURCE_ENCODING,
    target_encoding: str = DEFAULT_TARGET_ENCODING,
) -> str:
    """Return *raw* re-decoded with the encoding it was written in.

    Args:
        raw: Text produced by decoding the true bytes with *source_encoding*.
        source_encoding: Single-byte codec the text was wrongly decoded with.
        target_encoding: Codec the underlying bytes were written in.

    Raises:
        EncodingRepairError: If the text cannot be mapped back to bytes or
            the bytes are not valid *target_encoding*.
    """
    try:
        return raw.encode(source_encoding).decode(target_encoding)
    except UnicodeError as exc:
        msg = f"Cannot re-decode {raw!r} from {source_encoding} to {target_encoding}: {exc}"
        raise EncodingRepairError(msg) from exc
