"""Built-in SBOM family matchers."""

from .cyclonedx import CycloneDXMatcher
from .spdx import SPDXMatcher

__all__ = [
    "CycloneDXMatcher",
    "SPDXMatcher",
]
