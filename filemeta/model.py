# filemeta/model.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class SignatureRule:
    """A content signature: sparse (offset, byte) constraints and a label."""
    label: str
    pattern: Tuple[Tuple[int, int], ...]

    @classmethod
    def from_mask(cls, label: str, mask: str) -> SignatureRule:
        """Build a rule from a hex mask where `??` leaves a byte unconstrained.

        Args:
            label (str): Human-readable type name.
            mask (str): Hex string, two characters per byte, e.g. "47494638??61".

        Returns:
            SignatureRule: Rule constraining every non-wildcard byte.
        """
        if len(mask) % 2:
            raise ValueError(f"Odd-length signature mask: {mask!r}")
        pattern = []
        for offset in range(len(mask) // 2):
            pair = mask[offset * 2:offset * 2 + 2]
            if pair == "??":
                continue
            pattern.append((offset, int(pair, 16)))
        if not pattern:
            raise ValueError(f"Signature mask constrains no bytes: {mask!r}")
        return cls(label=label, pattern=tuple(pattern))

    @property
    def span(self) -> int:
        """Number of prefix bytes needed to evaluate this rule."""
        return max(offset for offset, _ in self.pattern) + 1

    def matches(self, prefix: bytes) -> bool:
        """Check every constraint; offsets past the buffer compare against 0x00."""
        for offset, expected in self.pattern:
            actual = prefix[offset] if offset < len(prefix) else 0
            if actual != expected:
                return False
        return True


class LineEnding(str, Enum):
    CR = "CR"
    LF = "LF"
    CRLF = "CRLF"
    NONE = "NONE"


@dataclass(frozen=True)
class FileAttributes:
    """Filesystem attributes of a single path."""
    size: int
    creation_time: float      # st_ctime
    modification_time: float  # st_mtime
    file_type: str            # directory | regular file | symlink | unknown
    permissions: str          # e.g. -rwxr-xr--


@dataclass(frozen=True)
class FileReport:
    """Represents the metadata profile of one input path."""
    path: str
    name: str
    extension: str
    extension_type: str
    size_bytes: int
    creation_time: float
    modification_time: float
    file_type: str
    permissions: str
    line_ending: LineEnding
    content_type: str
    warnings: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReportOutcome:
    """Result of processing one input path: a report or an error message."""
    path: str
    report: Optional[FileReport] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.report is not None
