"""Evidence accumulated while scanning an SBOM line by line."""

from dataclasses import dataclass, field
from typing import Dict

from sbom_sniffer.formats import EMPTY_FORMAT, Format, format_identifier


@dataclass
class EvidenceRecord:
    """
    Partial identification signals for one SBOM family.

    Any field may be set on its own; the record only resolves to a format
    identifier once all three are known.

    Attributes:
        type: MIME-like type (e.g. "application/vnd.cyclonedx")
        encoding: Encoding ("json" or "text")
        version: Specification version (e.g. "1.4")
    """

    type: str = ""
    encoding: str = ""
    version: str = ""

    @property
    def is_complete(self) -> bool:
        """Check if type, encoding and version are all known."""
        return bool(self.type and self.encoding and self.version)

    def format(self) -> Format:
        """Render the record as a format identifier, or EMPTY_FORMAT if incomplete."""
        if not self.is_complete:
            return EMPTY_FORMAT
        return format_identifier(self.type, self.encoding, self.version)


@dataclass
class DetectionSession:
    """
    Evidence records for a single detection call, keyed by family type.

    A session is created for each scan pass and never shared, so two
    detections running at the same time cannot see each other's evidence.
    """

    records: Dict[str, EvidenceRecord] = field(default_factory=dict)

    def record_for(self, family: str) -> EvidenceRecord:
        """Get the record for a family, creating an empty one on first use."""
        record = self.records.get(family)
        if record is None:
            record = EvidenceRecord()
            self.records[family] = record
        return record
