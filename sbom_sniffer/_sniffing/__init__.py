"""SBOM format sniffing internals.

Detection runs in two stages:
- A JSON probe that decodes the whole document and reads its envelope
- A line scanner that feeds each line to the family matchers until one resolves

Usage:
    from sbom_sniffer._sniffing import (
        DetectionSession,
        MatcherRegistry,
        create_default_registry,
        probe_json,
        scan_lines,
    )

    registry = create_default_registry()
    with open("sbom.spdx", "rb") as f:
        identifier = probe_json(f) or scan_lines(f, registry)
"""

from .evidence import DetectionSession, EvidenceRecord
from .matchers import CycloneDXMatcher, SPDXMatcher
from .probe import Envelope, decode_envelope, probe_json, resolve_envelope
from .protocol import FamilyMatcher, Line, line_text
from .registry import MatcherRegistry, create_default_registry
from .result import ErrorKind, SniffResult
from .scanner import iter_lines, scan_lines

__all__ = [
    # Evidence
    "EvidenceRecord",
    "DetectionSession",
    # Matchers
    "FamilyMatcher",
    "Line",
    "line_text",
    "CycloneDXMatcher",
    "SPDXMatcher",
    # Registry
    "MatcherRegistry",
    "create_default_registry",
    # Probe and scanner
    "Envelope",
    "decode_envelope",
    "resolve_envelope",
    "probe_json",
    "iter_lines",
    "scan_lines",
    # Result
    "ErrorKind",
    "SniffResult",
]
