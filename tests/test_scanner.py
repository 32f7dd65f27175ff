"""Tests for the line scanner and matcher registry."""

import io

import pytest

from sbom_sniffer._sniffing import (
    CycloneDXMatcher,
    DetectionSession,
    EvidenceRecord,
    MatcherRegistry,
    SPDXMatcher,
    create_default_registry,
    iter_lines,
    scan_lines,
)
from sbom_sniffer.exceptions import FileProcessingError
from sbom_sniffer.formats import CDX14JSON, CDX15JSON, EMPTY_FORMAT, SPDX22JSON, SPDX23TV, Format


class RecordingMatcher:
    """Matcher that records the lines it sees and resolves on a marker."""

    def __init__(self, name: str, marker: str, identifier: Format):
        self.name = name
        self.family = f"test/{name}"
        self.marker = marker
        self.identifier = identifier
        self.seen = []

    def sniff(self, line, evidence: EvidenceRecord) -> Format:
        self.seen.append(line)
        if self.marker.encode() in line:
            evidence.type, evidence.encoding, evidence.version = self.family, "json", "1"
            return self.identifier
        return EMPTY_FORMAT


class TestIterLines:
    def test_strips_line_endings(self):
        stream = io.BytesIO(b"one\ntwo\r\nthree")
        assert list(iter_lines(stream)) == [b"one", b"two", b"three"]

    def test_text_stream(self):
        stream = io.StringIO("one\ntwo\n")
        assert list(iter_lines(stream)) == ["one", "two"]

    def test_blank_lines_are_kept(self):
        assert list(iter_lines(io.BytesIO(b"a\n\nb\n"))) == [b"a", b"", b"b"]


class TestMatcherRegistry:
    def test_default_order(self):
        registry = create_default_registry()
        assert [m["name"] for m in registry.list_matchers()] == ["cyclonedx", "spdx"]
        assert isinstance(registry.matchers[0], CycloneDXMatcher)
        assert isinstance(registry.matchers[1], SPDXMatcher)

    def test_duplicate_name_rejected(self):
        registry = MatcherRegistry()
        registry.register(CycloneDXMatcher())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(CycloneDXMatcher())

    def test_clear(self):
        registry = create_default_registry()
        registry.clear()
        assert registry.matchers == []

    def test_first_matcher_to_resolve_wins(self):
        first = RecordingMatcher("first", "both", "first+json;version=1")
        second = RecordingMatcher("second", "both", "second+json;version=1")
        registry = MatcherRegistry()
        registry.register(first)
        registry.register(second)

        assert registry.sniff_line(b"both", DetectionSession()) == "first+json;version=1"
        # Dispatch stops at the first resolution
        assert second.seen == []

    def test_matchers_get_their_own_record(self):
        registry = create_default_registry()
        session = DetectionSession()
        registry.sniff_line(b'"bomFormat": "CycloneDX",', session)
        registry.sniff_line(b'"spdxVersion": "unknown",', session)
        assert session.records["application/vnd.cyclonedx"].type == "application/vnd.cyclonedx"
        assert session.records["text/spdx"].type == "text/spdx"
        assert session.records["text/spdx"].version == ""


class TestScanLines:
    def test_spdx_tag_value_resolves_on_first_line(self):
        first = RecordingMatcher("probe", "never", "x")
        registry = create_default_registry()
        registry.register(first)
        stream = io.BytesIO(b"SPDXVersion: SPDX-2.3\nDataLicense: CC0-1.0\nSPDXID: SPDXRef-DOCUMENT\n")
        assert scan_lines(stream, registry) == SPDX23TV
        # The appended matcher never sees a line: SPDX resolves before it on line 1
        assert first.seen == []

    def test_cyclonedx_accumulates_across_lines(self):
        lines = [
            b"{",
            b'  "bomFormat": "CycloneDX",',
            b'  "serialNumber": "urn:uuid:3e671687-395b-41f5-a30f-a58921a69b79",',
            b'  "specVersion": "1.4",',
            b'  "components": [',
        ]
        tail = RecordingMatcher("tail", "never", "x")
        registry = create_default_registry()
        registry.register(tail)
        assert scan_lines(io.BytesIO(b"\n".join(lines)), registry) == CDX14JSON
        assert len(tail.seen) == 3

    def test_scan_starts_from_beginning(self):
        stream = io.BytesIO(b"SPDXVersion: SPDX-2.3\n")
        stream.read()
        assert scan_lines(stream, create_default_registry()) == SPDX23TV

    def test_unknown_content_scans_to_end(self):
        tail = RecordingMatcher("tail", "never", "x")
        registry = create_default_registry()
        registry.register(tail)
        assert scan_lines(io.BytesIO(b"a\nb\nc\n"), registry) == EMPTY_FORMAT
        assert tail.seen == [b"a", b"b", b"c"]

    def test_fresh_session_per_scan(self):
        registry = create_default_registry()
        assert scan_lines(io.BytesIO(b'"bomFormat": "CycloneDX",\n'), registry) == EMPTY_FORMAT
        # Version alone must not combine with evidence left over from the previous scan
        assert scan_lines(io.BytesIO(b'"specVersion": "1.5",\n'), registry) == EMPTY_FORMAT
        stream = io.BytesIO(b'"bomFormat": "CycloneDX",\n"specVersion": "1.5",\n')
        assert scan_lines(stream, registry) == CDX15JSON

    def test_truncated_spdx_json(self, test_data_dir):
        with open(test_data_dir / "truncated-spdx-2.2.spdx.json", "rb") as f:
            assert scan_lines(f, create_default_registry()) == SPDX22JSON

    def test_cyclonedx_wins_when_registered_first(self):
        lines = b"\n".join(
            [
                b'"bomFormat": "CycloneDX",',
                b'"spdxVersion",',
                b'"specVersion": "SPDX-2.2",',
            ]
        )
        assert scan_lines(io.BytesIO(lines), create_default_registry()).startswith("application/vnd.cyclonedx")

        reversed_registry = MatcherRegistry()
        reversed_registry.register(SPDXMatcher())
        reversed_registry.register(CycloneDXMatcher())
        assert scan_lines(io.BytesIO(lines), reversed_registry) == SPDX22JSON

    def test_undecodable_text_stream(self):
        stream = io.TextIOWrapper(io.BytesIO(b"PackageName: a\nSPDXVersion: \xff\xfe SPDX-2.3\n"), encoding="utf-8")
        with pytest.raises(FileProcessingError, match="Failed to read SBOM stream"):
            scan_lines(stream, create_default_registry())

    def test_unseekable_stream(self):
        class Unseekable(io.BytesIO):
            def seek(self, *args):
                raise OSError("not seekable")

        with pytest.raises(FileProcessingError, match="Seeking to the beginning"):
            scan_lines(Unseekable(b"abc"), create_default_registry())
