"""Matcher Protocol for SBOM format sniffing.

This module defines the interface every SBOM family matcher implements.
"""

from typing import Protocol, Union

from sbom_sniffer.formats import Format

from .evidence import EvidenceRecord

# A single line from the input, without its line terminator
Line = Union[bytes, str]


def line_text(line: Line) -> str:
    """Decode a scanned line for substring matching."""
    if isinstance(line, bytes):
        return line.decode("utf-8", errors="replace")
    return line


class FamilyMatcher(Protocol):
    """
    Protocol defining the interface for SBOM family matchers.

    Each matcher recognises the textual signatures of one SBOM family
    (CycloneDX, SPDX) and records what it finds in that family's
    EvidenceRecord. Matchers are consulted in registration order and
    the first one to resolve a complete identifier wins.

    Example:
        class CycloneDXMatcher:
            name = "cyclonedx"
            family = CDX_FORMAT

            def sniff(self, line: Line, evidence: EvidenceRecord) -> Format:
                if '"bomFormat"' in line_text(line):
                    evidence.type = CDX_FORMAT
                return evidence.format()
    """

    @property
    def name(self) -> str:
        """
        Human-readable name of this matcher.

        Used for logging. Examples: "cyclonedx", "spdx"
        """
        ...

    @property
    def family(self) -> str:
        """
        The family type whose evidence record this matcher owns.

        Examples: "application/vnd.cyclonedx", "text/spdx"
        """
        ...

    def sniff(self, line: Line, evidence: EvidenceRecord) -> Format:
        """
        Evaluate one line and update the family evidence.

        Args:
            line: A single line of input without its terminator
            evidence: The evidence record owned by this matcher's family

        Returns:
            The resolved format identifier, or EMPTY_FORMAT if the
            evidence is still incomplete
        """
        ...
