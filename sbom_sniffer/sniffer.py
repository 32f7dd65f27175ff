"""SBOM format sniffing.

Identify the format, encoding and spec version of an SBOM without knowing
it in advance.

Usage:
    from sbom_sniffer import Sniffer

    sniffer = Sniffer()
    identifier = sniffer.sniff_file("sbom.json")
    # "application/vnd.cyclonedx+json;version=1.5"

    with open("sbom.spdx", "rb") as f:
        identifier = sniffer.sniff_reader(f)  # f is rewound to the start afterwards

    # Non-raising variant
    result = sniffer.detect_file("unknown.txt")
    if not result.success:
        print(result.error_kind, result.error_message)
"""

from pathlib import Path
from typing import IO, Optional, Union

from ._sniffing import MatcherRegistry, SniffResult, create_default_registry, probe_json, scan_lines
from .exceptions import FileProcessingError, UnknownFormatError
from .formats import Format
from .logging_config import logger

PathLike = Union[str, Path]


class Sniffer:
    """
    Detects SBOM formats from files and seekable streams.

    A Sniffer keeps no per-call state, so one instance can be shared
    between threads as long as each call gets its own stream.
    """

    def __init__(self, registry: Optional[MatcherRegistry] = None) -> None:
        """
        Initialize the sniffer.

        Args:
            registry: Matchers used for line scanning (default: CycloneDX then SPDX)
        """
        self.registry = registry if registry is not None else create_default_registry()

    def sniff_file(self, path: PathLike) -> Format:
        """
        Detect the format of an SBOM file.

        Args:
            path: Path to the SBOM file

        Returns:
            The format identifier

        Raises:
            FileProcessingError: If the file cannot be opened or read
            UnknownFormatError: If the content matches no known format
        """
        try:
            f = open(path, "rb")
        except OSError as e:
            raise FileProcessingError(f"Opening path {path}: {e}") from e

        with f:
            identifier = self.sniff_reader(f)
        logger.info(f"Detected {identifier} in {path}")
        return identifier

    def sniff_reader(self, stream: IO) -> Format:
        """
        Detect the format of an SBOM stream.

        The stream is rewound to offset 0 on every exit path.

        Args:
            stream: Seekable binary or text stream

        Returns:
            The format identifier

        Raises:
            FileProcessingError: If the stream cannot be read
            UnknownFormatError: If the content matches no known format
        """
        try:
            identifier = probe_json(stream)
            if identifier is not None:
                return identifier

            # Not JSON. Parse line by line with string matching
            identifier = scan_lines(stream, self.registry)
            if not identifier:
                raise UnknownFormatError()
            return identifier
        finally:
            _rewind(stream)

    def detect_file(self, path: PathLike) -> SniffResult:
        """Detect the format of an SBOM file, reporting failures in the result."""
        source = str(path)
        try:
            return SniffResult.success_result(self.sniff_file(path), source=source)
        except UnknownFormatError as e:
            return SniffResult.failure_result("unknown_format", str(e), source=source)
        except FileProcessingError as e:
            return SniffResult.failure_result("io", str(e), source=source)

    def detect_reader(self, stream: IO, source: Optional[str] = None) -> SniffResult:
        """Detect the format of an SBOM stream, reporting failures in the result."""
        try:
            return SniffResult.success_result(self.sniff_reader(stream), source=source)
        except UnknownFormatError as e:
            return SniffResult.failure_result("unknown_format", str(e), source=source)
        except FileProcessingError as e:
            return SniffResult.failure_result("io", str(e), source=source)


def _rewind(stream: IO) -> None:
    """Seek back to the start; failure is logged, not raised."""
    try:
        stream.seek(0)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not seek to beginning of file: {e}")


_default_sniffer: Optional[Sniffer] = None


def get_default_sniffer() -> Sniffer:
    """Get the shared Sniffer with the built-in matchers."""
    global _default_sniffer
    if _default_sniffer is None:
        _default_sniffer = Sniffer()
    return _default_sniffer


def sniff_file(path: PathLike) -> Format:
    """Detect the format of an SBOM file with the default sniffer."""
    return get_default_sniffer().sniff_file(path)


def sniff_reader(stream: IO) -> Format:
    """Detect the format of an SBOM stream with the default sniffer."""
    return get_default_sniffer().sniff_reader(stream)
