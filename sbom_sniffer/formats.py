"""SBOM format identifiers.

This module is the single source of truth for the format identifiers the
sniffer can return. Identifiers are plain strings of the form
``<type>+<encoding>;version=<version>``, for example
``application/vnd.cyclonedx+json;version=1.4`` or ``text/spdx+text;version=2.3``.
"""

from dataclasses import dataclass
from typing import Literal, Optional

# Format identifier type. The empty string means "unknown".
Format = str

# SBOM family names, matching the rest of the SBOM tooling ecosystem
SBOMFamily = Literal["cyclonedx", "spdx"]

# =============================================================================
# Types and encodings
# =============================================================================

CDX_FORMAT = "application/vnd.cyclonedx"
SPDX_FORMAT = "text/spdx"

JSON = "json"
TEXT = "text"

EMPTY_FORMAT: Format = ""

# =============================================================================
# Supported versions
# =============================================================================

CYCLONEDX_VERSIONS = ("1.3", "1.4", "1.5")
SPDX_VERSIONS = ("2.2", "2.3")


def format_identifier(mime_type: str, encoding: str, version: str) -> Format:
    """
    Compose a format identifier from its parts.

    Returns EMPTY_FORMAT unless all three parts are non-empty.
    """
    if mime_type and encoding and version:
        return f"{mime_type}+{encoding};version={version}"
    return EMPTY_FORMAT


CDX13JSON = format_identifier(CDX_FORMAT, JSON, "1.3")
CDX14JSON = format_identifier(CDX_FORMAT, JSON, "1.4")
CDX15JSON = format_identifier(CDX_FORMAT, JSON, "1.5")
SPDX22JSON = format_identifier(SPDX_FORMAT, JSON, "2.2")
SPDX23JSON = format_identifier(SPDX_FORMAT, JSON, "2.3")
SPDX22TV = format_identifier(SPDX_FORMAT, TEXT, "2.2")
SPDX23TV = format_identifier(SPDX_FORMAT, TEXT, "2.3")

# JSON probe lookup tables
CYCLONEDX_JSON_FORMATS = {
    "1.3": CDX13JSON,
    "1.4": CDX14JSON,
    "1.5": CDX15JSON,
}

SPDX_JSON_FORMATS = {
    "SPDX-2.2": SPDX22JSON,
    "SPDX-2.3": SPDX23JSON,
}

SUPPORTED_FORMATS = (
    CDX13JSON,
    CDX14JSON,
    CDX15JSON,
    SPDX22JSON,
    SPDX23JSON,
    SPDX22TV,
    SPDX23TV,
)

_FAMILIES: dict[str, SBOMFamily] = {
    CDX_FORMAT: "cyclonedx",
    SPDX_FORMAT: "spdx",
}


@dataclass(frozen=True)
class FormatInfo:
    """
    The parts of a format identifier.

    Attributes:
        type: MIME-like type (e.g. "application/vnd.cyclonedx")
        encoding: Encoding ("json" or "text")
        version: Specification version (e.g. "1.4" or "2.3")
    """

    type: str
    encoding: str
    version: str

    @property
    def family(self) -> Optional[SBOMFamily]:
        """SBOM family name, or None for an unrecognized type."""
        return _FAMILIES.get(self.type)

    @property
    def identifier(self) -> Format:
        """The identifier these parts compose to."""
        return format_identifier(self.type, self.encoding, self.version)


def parse_format(identifier: Format) -> FormatInfo:
    """
    Split a format identifier into its parts.

    Args:
        identifier: Identifier such as "text/spdx+json;version=2.3"

    Returns:
        FormatInfo with type, encoding and version

    Raises:
        ValueError: If the identifier is empty or malformed
    """
    if not identifier:
        raise ValueError("Empty format identifier")

    media, sep, params = identifier.partition(";")
    if not sep or not params.startswith("version="):
        raise ValueError(f"Format identifier has no version parameter: {identifier}")

    mime_type, plus, encoding = media.rpartition("+")
    version = params[len("version=") :]
    if not plus or not mime_type or not encoding or not version:
        raise ValueError(f"Malformed format identifier: {identifier}")

    return FormatInfo(type=mime_type, encoding=encoding, version=version)


def is_supported(identifier: Format) -> bool:
    """Check if an identifier is one of the supported catalog entries."""
    return identifier in SUPPORTED_FORMATS
