"""Matcher registry for SBOM family matchers."""

from typing import Any, Dict, List

from sbom_sniffer.formats import EMPTY_FORMAT, Format
from sbom_sniffer.logging_config import logger

from .evidence import DetectionSession
from .matchers import CycloneDXMatcher, SPDXMatcher
from .protocol import FamilyMatcher, Line


class MatcherRegistry:
    """
    Registry for SBOM family matchers.

    Matchers are kept in registration order. Every scanned line is offered
    to each matcher in that order and the first one to resolve wins, even
    if a later matcher would also resolve from further lines.

    Example:
        registry = MatcherRegistry()
        registry.register(CycloneDXMatcher())
        registry.register(SPDXMatcher())

        session = DetectionSession()
        for line in lines:
            identifier = registry.sniff_line(line, session)
            if identifier:
                break
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._matchers: List[FamilyMatcher] = []

    def register(self, matcher: FamilyMatcher) -> None:
        """
        Register a matcher at the end of the dispatch order.

        Args:
            matcher: FamilyMatcher implementation to register

        Raises:
            ValueError: If a matcher with the same name is already registered
        """
        if any(m.name == matcher.name for m in self._matchers):
            raise ValueError(f"Matcher already registered: {matcher.name}")
        self._matchers.append(matcher)
        logger.debug(f"Registered matcher: {matcher.name} (family={matcher.family})")

    @property
    def matchers(self) -> List[FamilyMatcher]:
        """Registered matchers in dispatch order."""
        return list(self._matchers)

    def sniff_line(self, line: Line, session: DetectionSession) -> Format:
        """
        Offer one line to every matcher in order.

        Each matcher only sees the evidence record of its own family.

        Args:
            line: A single line of input without its terminator
            session: Evidence for the current detection call

        Returns:
            The first resolved identifier, or EMPTY_FORMAT
        """
        for matcher in self._matchers:
            identifier = matcher.sniff(line, session.record_for(matcher.family))
            if identifier:
                logger.debug(f"Matcher {matcher.name} resolved {identifier}")
                return identifier
        return EMPTY_FORMAT

    def list_matchers(self) -> List[Dict[str, Any]]:
        """
        List all registered matchers.

        Returns:
            List of dicts with matcher info, in dispatch order
        """
        return [{"name": m.name, "family": m.family} for m in self._matchers]

    def clear(self) -> None:
        """Remove all registered matchers."""
        self._matchers.clear()


def create_default_registry() -> MatcherRegistry:
    """
    Create a registry with the built-in matchers.

    CycloneDX is registered before SPDX.

    Returns:
        MatcherRegistry with CycloneDX and SPDX matchers
    """
    registry = MatcherRegistry()
    registry.register(CycloneDXMatcher())
    registry.register(SPDXMatcher())
    return registry
