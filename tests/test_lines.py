"""
Unit tests for nsconf.lines.

Tests:
- newline handling for byte and text streams
- lenient and strict handling of undecodable lines
- noise line filtering
- read failures
"""

import logging
from io import BytesIO, StringIO, TextIOWrapper
from typing import Iterator

import pytest

from nsconf.lines import is_noise, logical_lines, read_lines
from nsconf.models import DecodeError, ReadError


def _broken_stream() -> Iterator[bytes]:
    yield b"nameserver 1.1.1.1\n"
    raise OSError("device went away")


class TestReadLines:
    """Tests for read_lines."""

    def test_strips_lf_and_crlf(self) -> None:
        stream = BytesIO(b"one\r\ntwo\nthree")
        assert list(read_lines(stream)) == ["one", "two", "three"]

    def test_accepts_text_streams(self) -> None:
        assert list(read_lines(StringIO("a\nb\n"))) == ["a", "b"]

    def test_undecodable_line_degrades_to_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        stream = BytesIO(b"first\n\xff\xfe\nthird\n")
        with caplog.at_level(logging.WARNING, logger="nsconf.lines"):
            assert list(read_lines(stream)) == ["first", "", "third"]
        assert "line 2" in caplog.text

    def test_strict_rejects_undecodable_line(self) -> None:
        stream = BytesIO(b"first\n\xff\xfe\n")
        with pytest.raises(DecodeError) as info:
            list(read_lines(stream, strict=True))
        assert info.value.line_number == 2

    def test_text_stream_decode_failure_degrades(self, caplog: pytest.LogCaptureFixture) -> None:
        stream = TextIOWrapper(BytesIO(b"nameserver 1.1.1.1\n\xff\n"), encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="nsconf.lines"):
            lines = list(read_lines(stream))
        assert "" in lines
        assert "undecodable" in caplog.text

    def test_text_stream_decode_failure_strict(self) -> None:
        stream = TextIOWrapper(BytesIO(b"nameserver 1.1.1.1\n\xff\n"), encoding="utf-8")
        with pytest.raises(DecodeError):
            list(read_lines(stream, strict=True))

    def test_read_failure(self) -> None:
        with pytest.raises(ReadError):
            list(read_lines(_broken_stream()))


class TestNoise:
    """Tests for noise line detection."""

    @pytest.mark.parametrize("line", ["", "# comment", " indented", "\tindented", "    "])
    def test_noise(self, line: str) -> None:
        assert is_noise(line)

    def test_directive_is_not_noise(self) -> None:
        assert not is_noise("nameserver 1.1.1.1")

    def test_semicolon_is_not_a_comment(self) -> None:
        assert not is_noise("; comment")

    def test_logical_lines(self) -> None:
        stream = BytesIO(b"\n# c\nkeep me\n  skip\nkeep too\n")
        assert list(logical_lines(stream)) == ["keep me", "keep too"]
