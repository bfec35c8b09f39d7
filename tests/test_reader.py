# tests/test_reader.py
"""Tests for reading files as text and per-file scan outcomes."""

import os

import pytest

from grepcore import reader
from grepcore.errors import FileReadError
from grepcore.models import FileErrorKind, FileMatches, ScanFailure
from grepcore.pattern import compile_pattern

running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


class TestReadText:
    def test_reads_utf8(self, write_file):
        path = write_file("hello.txt", "héllo\nwörld\n")
        assert reader.read_text(str(path)) == "héllo\nwörld\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            reader.read_text(str(tmp_path / "missing.txt"))

        assert exc_info.value.kind == FileErrorKind.NOT_FOUND
        assert exc_info.value.detail == "No such file or directory"

    def test_not_text(self, write_file):
        path = write_file("blob.bin", b"\xff\xfe\x00\x81binary")

        with pytest.raises(FileReadError) as exc_info:
            reader.read_text(str(path))

        assert exc_info.value.kind == FileErrorKind.NOT_TEXT

    def test_directory_is_other(self, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            reader.read_text(str(tmp_path))

        assert exc_info.value.kind in (FileErrorKind.OTHER, FileErrorKind.PERMISSION_DENIED)

    @pytest.mark.skipif(running_as_root, reason="root ignores file permissions")
    def test_permission_denied_on_disk(self, write_file):
        path = write_file("secret.txt", "foo\n")
        path.chmod(0)
        try:
            with pytest.raises(FileReadError) as exc_info:
                reader.read_text(str(path))
        finally:
            path.chmod(0o644)

        assert exc_info.value.kind == FileErrorKind.PERMISSION_DENIED

    def test_permission_denied(self, monkeypatch, tmp_path):
        def deny(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(reader, "open", deny, raising=False)

        with pytest.raises(FileReadError) as exc_info:
            reader.read_text(str(tmp_path / "secret.txt"))

        assert exc_info.value.kind == FileErrorKind.PERMISSION_DENIED


class TestScanFile:
    def test_matches(self, write_file):
        path = write_file("a.txt", "foo\nbar\nfoobar\n")
        outcome = reader.scan_file(str(path), compile_pattern("foo"), show_line_number=True)

        assert isinstance(outcome, FileMatches)
        assert outcome.path == str(path)
        assert [line.rendered_text for line in outcome.lines] == ["1:foo", "3:foobar"]
        assert all(line.source_path == str(path) for line in outcome.lines)

    def test_zero_matches_is_still_success(self, write_file):
        path = write_file("a.txt", "bar\n")
        outcome = reader.scan_file(str(path), compile_pattern("foo"))

        assert outcome == FileMatches(path=str(path), lines=[])

    def test_missing_file_is_failure_not_crash(self, tmp_path):
        path = str(tmp_path / "nope.txt")
        outcome = reader.scan_file(path, compile_pattern("foo"))

        assert isinstance(outcome, ScanFailure)
        assert outcome.kind == FileErrorKind.NOT_FOUND
        assert outcome.path == path
        assert not outcome.is_directory

    def test_not_text_is_failure(self, write_file):
        path = write_file("blob.bin", b"\xc3\x28foo")
        outcome = reader.scan_file(str(path), compile_pattern("foo"))

        assert isinstance(outcome, ScanFailure)
        assert outcome.kind == FileErrorKind.NOT_TEXT

    def test_max_matches_is_passed_through(self, write_file):
        path = write_file("a.txt", "foo\nfoo\nfoo\n")
        matcher = compile_pattern("foo")

        assert len(reader.scan_file(str(path), matcher, max_matches=1).lines) == 2
        assert len(reader.scan_file(str(path), matcher, max_matches=1,
                                    strict_max_matches=True).lines) == 1
