"""sbom-sniffer package for detecting SBOM formats and spec versions."""

from .exceptions import ConfigurationError, FileProcessingError, SnifferError, UnknownFormatError
from .formats import (
    CDX13JSON,
    CDX14JSON,
    CDX15JSON,
    CDX_FORMAT,
    EMPTY_FORMAT,
    JSON,
    SPDX22JSON,
    SPDX22TV,
    SPDX23JSON,
    SPDX23TV,
    SPDX_FORMAT,
    SUPPORTED_FORMATS,
    TEXT,
    Format,
    FormatInfo,
    format_identifier,
    is_supported,
    parse_format,
)
from .sniffer import Sniffer, SniffResult, get_default_sniffer, sniff_file, sniff_reader


def _get_version() -> str:
    """Get package version with fallback mechanisms."""
    # Method 1: Try importlib.metadata (preferred for installed packages)
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("sbom-sniffer")
    except PackageNotFoundError:
        pass

    # Method 2: Try reading from pyproject.toml directly
    try:
        from pathlib import Path

        import tomllib

        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
            return pyproject_data.get("project", {}).get("version", "unknown")
    except (OSError, ValueError):
        pass

    # Final fallback
    return "unknown"


__version__ = _get_version()

__all__ = [
    # Facade
    "Sniffer",
    "SniffResult",
    "get_default_sniffer",
    "sniff_file",
    "sniff_reader",
    # Formats
    "Format",
    "FormatInfo",
    "format_identifier",
    "parse_format",
    "is_supported",
    "SUPPORTED_FORMATS",
    "EMPTY_FORMAT",
    "CDX_FORMAT",
    "SPDX_FORMAT",
    "JSON",
    "TEXT",
    "CDX13JSON",
    "CDX14JSON",
    "CDX15JSON",
    "SPDX22JSON",
    "SPDX23JSON",
    "SPDX22TV",
    "SPDX23TV",
    # Exceptions
    "SnifferError",
    "UnknownFormatError",
    "FileProcessingError",
    "ConfigurationError",
    "__version__",
]
