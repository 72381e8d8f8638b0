# filemeta/line_ending.py

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional, Union

from .model import LineEnding

_CR = 0x0D
_LF = 0x0A


def scan_line_ending(chunks: Iterable[bytes], limit: Optional[int] = None) -> LineEnding:
    """Find the first line terminator in a byte stream.

    The previous byte is carried across chunk boundaries, so a CRLF split
    between two chunks is still reported as CRLF. A lone CR at the very end
    of the stream has no following byte and yields NONE.

    Args:
        chunks (Iterable[bytes]): Consecutive pieces of the content.
        limit (Optional[int]): Maximum number of bytes to examine.

    Returns:
        LineEnding: CRLF, LF or CR for the first terminator, NONE otherwise.
    """
    prev = 0
    seen = 0
    for chunk in chunks:
        for cur in chunk:
            if limit is not None and seen >= limit:
                return LineEnding.NONE
            seen += 1

            if prev == _CR and cur == _LF:
                return LineEnding.CRLF
            if cur == _LF:
                return LineEnding.LF
            if prev == _CR:
                return LineEnding.CR
            prev = cur
    return LineEnding.NONE


def detect_line_ending(
    path: Union[str, Path],
    limit: Optional[int] = None,
    chunk_size: int = 65536,
) -> LineEnding:
    """Scan a file from the start for its line-ending convention.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "rb") as f:
        return scan_line_ending(iter(lambda: f.read(chunk_size), b""), limit=limit)
