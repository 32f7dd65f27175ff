"""SPDX line matcher."""

from typing import Optional

from sbom_sniffer.formats import JSON, SPDX_FORMAT, SPDX_VERSIONS, TEXT, Format

from ..evidence import EvidenceRecord
from ..protocol import Line, line_text


class SPDXMatcher:
    """
    Recognise SPDX tag/value and JSON documents from individual lines.

    A tag/value ``SPDXVersion:`` line or a quoted ``"SPDX-2.x"`` literal can
    settle the version on the spot. The JSON ``spdxVersion`` key only
    contributes type and encoding, and waits for a version from some line.
    A quoted version found before the type is known stays in the record and
    carries over to later lines.
    """

    name = "spdx"
    family = SPDX_FORMAT

    def __init__(self, versions: tuple[str, ...] = SPDX_VERSIONS) -> None:
        self.versions = versions

    def sniff(self, line: Line, evidence: EvidenceRecord) -> Format:
        text = line_text(line)

        resolved = self._match_tag_value(text, evidence)
        if resolved is not None:
            return resolved

        self._accumulate_json_key(text, evidence)

        resolved = self._match_quoted_version(text, evidence)
        if resolved is not None:
            return resolved

        return evidence.format()

    def _match_tag_value(self, text: str, evidence: EvidenceRecord) -> Optional[Format]:
        """Single-line match for `SPDXVersion: SPDX-2.3`."""
        if "SPDXVersion:" not in text:
            return None

        evidence.type = SPDX_FORMAT
        evidence.encoding = TEXT

        for version in self.versions:
            if f"SPDX-{version}" in text:
                evidence.version = version
                return evidence.format()
        return None

    def _accumulate_json_key(self, text: str, evidence: EvidenceRecord) -> None:
        """Multi-line evidence from a quoted spdxVersion key."""
        if '"spdxVersion"' in text or "'spdxVersion'" in text:
            evidence.type = SPDX_FORMAT
            evidence.encoding = JSON

    def _match_quoted_version(self, text: str, evidence: EvidenceRecord) -> Optional[Format]:
        """Single-line match for a quoted "SPDX-2.x" literal; first version wins."""
        for version in self.versions:
            if f'"SPDX-{version}"' in text or f"'SPDX-{version}'" in text:
                evidence.version = version
                return evidence.format()
        return None
