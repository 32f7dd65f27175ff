"""JSON fast path for SBOM format detection.

A whole-document JSON decode is attempted before any line heuristics. Only
the envelope fields that name the format are looked at:

    {"bomFormat": "CycloneDX", "specVersion": "1.4", ...}
    {"spdxVersion": "SPDX-2.3", ...}
"""

import json
from dataclasses import dataclass
from decimal import Decimal
from typing import IO, Any, Optional

from sbom_sniffer.exceptions import FileProcessingError, UnknownFormatError
from sbom_sniffer.formats import CYCLONEDX_JSON_FORMATS, SPDX_JSON_FORMATS, Format
from sbom_sniffer.logging_config import logger

ENVELOPE_FIELDS = ("bomFormat", "specVersion", "spdxVersion")


@dataclass
class Envelope:
    """The format-naming fields of an SBOM JSON document."""

    bom_format: str = ""
    spec_version: str = ""
    spdx_version: str = ""


def decode_envelope(content: Any) -> Optional[Envelope]:
    """
    Decode raw stream content into an Envelope.

    Args:
        content: Bytes or text read from the stream

    Returns:
        Envelope, or None if the content is not a JSON object whose
        envelope fields are strings
    """
    try:
        # Decimal has no digit limit on long integer literals
        data = json.loads(content, parse_int=Decimal)
    except (ValueError, RecursionError):
        # JSONDecodeError, UnicodeDecodeError and overly deep nesting
        return None

    if data is None:
        return Envelope()
    if not isinstance(data, dict):
        return None

    values = {}
    for key in ENVELOPE_FIELDS:
        value = data.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            return None
        values[key] = value

    return Envelope(
        bom_format=values["bomFormat"],
        spec_version=values["specVersion"],
        spdx_version=values["spdxVersion"],
    )


def resolve_envelope(envelope: Envelope) -> Format:
    """
    Map a decoded envelope to a format identifier.

    Raises:
        UnknownFormatError: If the declared format or version is not supported
    """
    if envelope.bom_format == "CycloneDX":
        identifier = CYCLONEDX_JSON_FORMATS.get(envelope.spec_version)
        if identifier is None:
            logger.debug(f"Unsupported CycloneDX specVersion: {envelope.spec_version!r}")
            raise UnknownFormatError()
        return identifier

    # JSON but not CycloneDX, so it has to be SPDX
    identifier = SPDX_JSON_FORMATS.get(envelope.spdx_version)
    if identifier is None:
        logger.debug(f"Unsupported or missing spdxVersion: {envelope.spdx_version!r}")
        raise UnknownFormatError()
    return identifier


def probe_json(stream: IO) -> Optional[Format]:
    """
    Try to identify the stream as a CycloneDX or SPDX JSON document.

    Reads from the current position to the end of the stream.

    Args:
        stream: Readable stream (binary or text)

    Returns:
        The format identifier, or None if the content is not a JSON
        object and line scanning should be tried instead

    Raises:
        UnknownFormatError: If the content is JSON but declares an unsupported format
        FileProcessingError: If the stream cannot be read
    """
    try:
        content = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(f"Failed to read SBOM stream: {e}") from e

    envelope = decode_envelope(content)
    if envelope is None:
        logger.debug("Input is not a JSON object, falling back to line scanning")
        return None

    return resolve_envelope(envelope)
