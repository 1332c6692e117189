"""
Encoding-aware file reading.

Files are read as bytes, decoded with the configured encoding (UTF-8 by
default) and returned as text with any leading byte-order mark removed.
"""

from __future__ import annotations

from pathlib import Path

from sitefs.core.errors import EncodingError, ReadError

DEFAULT_ENCODING = "utf-8"
BOM = "\ufeff"


def read_text(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a file and return its text.

    Args:
        path: File to read
        encoding: Encoding of the file's bytes

    Returns:
        Decoded text without a leading byte-order mark

    Raises:
        ReadError: If the file cannot be opened or read
        EncodingError: If the bytes are not valid for the encoding
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ReadError(str(path), repr(e)) from e

    try:
        text = data.decode(encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise EncodingError(str(path), encoding) from e

    if text.startswith(BOM):
        text = text[len(BOM):]
    return text
