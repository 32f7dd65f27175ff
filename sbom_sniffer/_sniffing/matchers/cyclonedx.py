"""CycloneDX line matcher."""

from sbom_sniffer.formats import CDX_FORMAT, JSON, Format

from ..evidence import EvidenceRecord
from ..protocol import Line, line_text


class CycloneDXMatcher:
    """
    Recognise CycloneDX JSON documents from individual lines.

    The bomFormat marker and the specVersion field usually sit on separate
    lines of a pretty-printed document, so evidence accumulates across lines.
    """

    name = "cyclonedx"
    family = CDX_FORMAT

    def sniff(self, line: Line, evidence: EvidenceRecord) -> Format:
        text = line_text(line)

        if '"bomFormat"' in text and '"CycloneDX"' in text:
            evidence.type = CDX_FORMAT
            evidence.encoding = JSON

        if '"specVersion"' in text:
            version = _extract_spec_version(text)
            if version:
                evidence.version = version
                evidence.encoding = JSON

        return evidence.format()


def _extract_spec_version(text: str) -> str:
    """
    Pull the value out of a `"specVersion": "1.4",` line.

    Only lines with exactly one colon are understood; anything else yields "".
    """
    parts = text.split(":")
    if len(parts) != 2:
        return ""
    return parts[1].strip().removesuffix(",").removesuffix('"').removeprefix('"')
