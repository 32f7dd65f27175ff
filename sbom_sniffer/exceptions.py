"""Custom exceptions for sbom-sniffer."""


class SnifferError(Exception):
    """Base exception for all sbom-sniffer operations."""


class UnknownFormatError(SnifferError):
    """Raised when readable input matches no known SBOM format, encoding or version."""

    def __init__(self, message: str = "unknown SBOM format") -> None:
        super().__init__(message)


class FileProcessingError(SnifferError):
    """Raised when an SBOM file or stream cannot be opened or read."""


class ConfigurationError(SnifferError):
    """Raised when configuration validation fails."""
