# filemeta/signature.py

from __future__ import annotations
from pathlib import Path
from typing import Tuple, Union

from .model import SignatureRule

UNKNOWN = "unknown"

# --- signature table ------------------------------------------------------------
# Evaluated top to bottom, first full match wins. A new rule whose constrained
# bytes are a subset of an existing rule's must go after it.

SIGNATURES: Tuple[SignatureRule, ...] = (
    SignatureRule.from_mask("Shell script", "2321"),
    SignatureRule.from_mask("SQLite database", "53514C69746520666F726D6174203300"),
    SignatureRule.from_mask("Computer ICO icon file", "00000100"),
    SignatureRule.from_mask("GIF", "47494638??61"),
    SignatureRule.from_mask("JPG", "FFD8FFEE"),
    SignatureRule.from_mask("RAR", "526172211A07"),
    SignatureRule.from_mask("PNG", "89504E470D0A1A0A"),
    SignatureRule.from_mask("Java class file", "CAFEBABE"),
    SignatureRule.from_mask("PDF", "25504446"),
    SignatureRule.from_mask("MP3", "494433"),
    SignatureRule.from_mask("ISO", "4344303031"),
    SignatureRule.from_mask("Chrome extension archive", "43723234"),
    SignatureRule.from_mask("MP4", "00000018"),
)

PREFIX_SIZE = max(rule.span for rule in SIGNATURES)


# --- prefix reading -------------------------------------------------------------


def _pad(head: bytes) -> bytes:
    """Truncate or zero-fill a head buffer to exactly PREFIX_SIZE bytes."""
    head = head[:PREFIX_SIZE]
    return head + b"\x00" * (PREFIX_SIZE - len(head))


def read_prefix(path: Union[str, Path]) -> bytes:
    """Read the first PREFIX_SIZE bytes of a file, zero-padded if shorter.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "rb") as f:
        head = f.read(PREFIX_SIZE)
    return _pad(head)


# --- public API -----------------------------------------------------------------


def identify(prefix: bytes) -> str:
    """Return the label of the first signature matching the prefix.

    Args:
        prefix (bytes): Leading bytes of a file. Shorter buffers are treated
            as zero-padded to PREFIX_SIZE.

    Returns:
        str: Matching label, or "unknown" when no signature matches.
    """
    head = _pad(prefix)
    for rule in SIGNATURES:
        if rule.matches(head):
            return rule.label
    return UNKNOWN


def identify_file(path: Union[str, Path]) -> str:
    """Identify a file's content type from its magic bytes."""
    return identify(read_prefix(path))
