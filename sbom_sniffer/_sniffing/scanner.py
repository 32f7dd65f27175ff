"""Line-by-line SBOM format scanning."""

from typing import IO, Iterator

from sbom_sniffer.exceptions import FileProcessingError
from sbom_sniffer.formats import EMPTY_FORMAT, Format
from sbom_sniffer.logging_config import logger

from .evidence import DetectionSession
from .protocol import Line
from .registry import MatcherRegistry


def iter_lines(stream: IO) -> Iterator[Line]:
    """
    Yield the lines of a stream without their terminators.

    Both "\\n" and "\\r\\n" endings are removed. Works for binary and text streams.
    """
    for raw in stream:
        if isinstance(raw, bytes):
            yield raw.rstrip(b"\n").removesuffix(b"\r")
        else:
            yield raw.rstrip("\n").removesuffix("\r")


def scan_lines(stream: IO, registry: MatcherRegistry) -> Format:
    """
    Scan a stream from the beginning until some family resolves.

    A fresh DetectionSession is used for every call, so nothing carries
    over from an earlier scan.

    Args:
        stream: Seekable stream (binary or text)
        registry: Matchers to consult, in order

    Returns:
        The first resolved identifier, or EMPTY_FORMAT if the stream
        ended without one

    Raises:
        FileProcessingError: If the stream cannot be rewound or read
    """
    try:
        stream.seek(0)
    except (OSError, ValueError) as e:
        raise FileProcessingError(f"Seeking to the beginning of SBOM file: {e}") from e

    session = DetectionSession()
    line_number = 0
    try:
        for line in iter_lines(stream):
            line_number += 1
            identifier = registry.sniff_line(line, session)
            if identifier:
                logger.debug(f"Identified {identifier} at line {line_number}")
                return identifier
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(f"Failed to read SBOM stream at line {line_number + 1}: {e}") from e

    logger.debug(f"No SBOM format identified after scanning {line_number} lines")
    return EMPTY_FORMAT
