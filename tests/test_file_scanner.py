"""Tests for single-file scanning"""

import os
from unittest.mock import patch

import pytest

from phrasesearch.domain.config.pattern import PatternSpec
from phrasesearch.domain.models.match import FileResult, MatchLine
from phrasesearch.domain.models.scan_outcome import OutcomeStatus, ScanDiagnostics
from phrasesearch.infrastructure.file_filter import FileTypeFilter
from phrasesearch.infrastructure.file_scanner import scan_file


class TestScanFile:
    """Tests for scan_file"""

    def test_collects_matching_lines(self, tmp_path):
        """Test that matching lines are returned stripped with 1-based numbers"""
        path = tmp_path / "a.js"
        path.write_text("first\n   needle here  \nmiddle\n\tNEEDLE again\n", encoding="utf-8")

        result = scan_file(str(path), PatternSpec(include="needle"))

        assert result == FileResult(
            path=str(path),
            lines=(
                MatchLine(content="needle here", line_number=2),
                MatchLine(content="NEEDLE again", line_number=4),
            ),
        )

    def test_no_match_returns_none(self, tmp_path):
        """Test that files without matches produce no result"""
        path = tmp_path / "a.js"
        path.write_text("nothing to see\n", encoding="utf-8")

        assert scan_file(str(path), PatternSpec(include="needle")) is None

    def test_windows_line_endings(self, tmp_path):
        """Test that CRLF files report stripped lines"""
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\r\nneedle\r\n")

        result = scan_file(str(path), PatternSpec(include="needle"))

        assert result.lines == (MatchLine(content="needle", line_number=2),)

    def test_lone_carriage_return_does_not_split(self, tmp_path):
        """Test that only \\n separates lines, so a lone \\r keeps text on one line"""
        path = tmp_path / "a.txt"
        path.write_bytes(b"foo\rbar\n")

        spec = PatternSpec(include="foo", exclude=["bar"])

        assert scan_file(str(path), spec) is None

    def test_lone_carriage_return_line_numbers(self, tmp_path):
        """Test that a lone \\r does not shift line numbers"""
        path = tmp_path / "a.txt"
        path.write_bytes(b"one\rtwo\nneedle\n")

        result = scan_file(str(path), PatternSpec(include="needle"))

        assert result.lines == (MatchLine(content="needle", line_number=2),)

    def test_filtered_file_is_not_read(self, tmp_path):
        """Test that files rejected by the filter are never opened"""
        path = tmp_path / "a.txt"
        path.write_text("needle\n", encoding="utf-8")
        diagnostics = ScanDiagnostics()

        with patch("phrasesearch.infrastructure.file_scanner.open", create=True) as mock_open:
            result = scan_file(
                str(path), PatternSpec(include="needle"), FileTypeFilter([".js"]), diagnostics
            )

        assert result is None
        mock_open.assert_not_called()
        assert diagnostics.counts()[OutcomeStatus.FILTERED.value] == 1

    def test_case_insensitive_extension_is_scanned(self, tmp_path):
        """Test that a.JS is scanned under a '.js' filter"""
        path = tmp_path / "a.JS"
        path.write_text("needle\n", encoding="utf-8")

        result = scan_file(str(path), PatternSpec(include="needle"), FileTypeFilter([".js"]))

        assert result is not None

    def test_undecodable_file_recorded(self, tmp_path):
        """Test that binary content is treated as unreadable"""
        path = tmp_path / "blob.bin"
        path.write_bytes(b"\xff\xfe\x00needle\x80")
        diagnostics = ScanDiagnostics()

        result = scan_file(str(path), PatternSpec(include="needle"), diagnostics=diagnostics)

        assert result is None
        assert len(diagnostics.errors) == 1
        assert diagnostics.errors[0].path == str(path)

    def test_missing_file_recorded(self, tmp_path):
        """Test that unreadable files do not raise"""
        diagnostics = ScanDiagnostics()

        result = scan_file(
            str(tmp_path / "gone.js"), PatternSpec(include="x"), diagnostics=diagnostics
        )

        assert result is None
        assert diagnostics.has_errors

    def test_permission_error_without_diagnostics(self, tmp_path):
        """Test that read errors are swallowed even without a collector"""
        path = tmp_path / "a.js"
        path.write_text("needle\n", encoding="utf-8")

        with patch(
            "phrasesearch.infrastructure.file_scanner.open",
            create=True,
            side_effect=PermissionError("denied"),
        ):
            assert scan_file(str(path), PatternSpec(include="needle")) is None

    def test_scanned_outcome_recorded(self, tmp_path):
        """Test that successfully read files are recorded as scanned"""
        path = tmp_path / "a.js"
        path.write_text("x\n", encoding="utf-8")
        diagnostics = ScanDiagnostics()

        scan_file(str(path), PatternSpec(include="needle"), diagnostics=diagnostics)

        assert diagnostics.counts()[OutcomeStatus.SCANNED.value] == 1


class TestModels:
    """Tests for MatchLine and FileResult validation"""

    def test_line_number_must_be_positive(self):
        """Test MatchLine rejects line 0"""
        with pytest.raises(ValueError):
            MatchLine(content="x", line_number=0)

    def test_file_result_requires_lines(self):
        """Test FileResult rejects an empty line list"""
        with pytest.raises(ValueError):
            FileResult(path="a.js", lines=())

    def test_matched_text(self):
        """Test matched_text joins line contents"""
        result = FileResult(
            path="a.js",
            lines=(MatchLine("one", 1), MatchLine("two", 5)),
        )
        assert result.matched_text == "one\ntwo"
