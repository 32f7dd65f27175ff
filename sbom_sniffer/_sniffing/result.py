"""SniffResult dataclass for SBOM format detection output."""

from dataclasses import dataclass
from typing import Literal, Optional

from sbom_sniffer.formats import EMPTY_FORMAT, Format, FormatInfo, parse_format

# Failure kinds reported by the non-raising API
ErrorKind = Literal["unknown_format", "io"]


@dataclass
class SniffResult:
    """
    Result of an SBOM format detection.

    Attributes:
        format: The detected format identifier (EMPTY_FORMAT on failure)
        source: Path or description of the sniffed input, if known
        error_kind: "unknown_format" or "io" when detection failed
        error_message: Error message if detection failed
    """

    format: Format
    source: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate result state."""
        if self.format and self.error_kind:
            raise ValueError("Successful result must not have an error")
        if not self.format and not self.error_kind:
            raise ValueError("Failed result must have error_kind")

    @property
    def success(self) -> bool:
        """Check if a format was identified."""
        return bool(self.format)

    @property
    def info(self) -> Optional[FormatInfo]:
        """Parts of the detected identifier, or None on failure."""
        if not self.format:
            return None
        return parse_format(self.format)

    @classmethod
    def success_result(cls, format: Format, source: Optional[str] = None) -> "SniffResult":
        """Create a successful detection result."""
        return cls(format=format, source=source)

    @classmethod
    def failure_result(
        cls,
        error_kind: ErrorKind,
        error_message: str,
        source: Optional[str] = None,
    ) -> "SniffResult":
        """Create a failed detection result."""
        return cls(
            format=EMPTY_FORMAT,
            source=source,
            error_kind=error_kind,
            error_message=error_message,
        )
