# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_graph.loader import MalformedLine, read_lines, tokenize_file, tokenize_line, tokenize_lines
from gedcom_graph.utils import mock_file_path


def test_tokenize_line_tag_only() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.depth == 0
    assert token.tag == "HEAD"
    assert token.data == ""


def test_tokenize_line_identifier_is_the_tag() -> None:
    token = tokenize_line("0 @I1@ INDI")
    assert token.depth == 0
    assert token.tag == "@I1@"
    assert token.data == "INDI"


def test_tokenize_line_data_keeps_inner_spaces() -> None:
    line = "2 DATE 1 JAN 1900"
    token = tokenize_line(line, lineno=7)
    assert token.depth == 2
    assert token.tag == "DATE"
    assert token.data == "1 JAN 1900"
    assert token.raw == line


def test_tokenize_line_data_is_trimmed() -> None:
    token = tokenize_line("1 SEX  M ")
    assert token.tag == "SEX"
    assert token.data == "M"


def test_tokenize_line_multi_digit_depth() -> None:
    assert tokenize_line("12 CONT x").depth == 12


@pytest.mark.parametrize("line", ["X HEAD", "-1 HEAD", "1a NAME John", "² NAME John"])
def test_tokenize_line_invalid_depth_raises(line: str) -> None:
    with pytest.raises(MalformedLine):
        tokenize_line(line, lineno=3)


@pytest.mark.parametrize("line", ["0", "", "0 "])
def test_tokenize_line_missing_tag_raises(line: str) -> None:
    with pytest.raises(MalformedLine):
        tokenize_line(line)


def test_malformed_line_carries_position() -> None:
    with pytest.raises(MalformedLine) as excinfo:
        tokenize_line("oops NAME", lineno=42)
    assert excinfo.value.lineno == 42
    assert excinfo.value.line == "oops NAME"
    assert isinstance(excinfo.value, ValueError)


def test_tokenize_lines_numbers_from_one() -> None:
    tokens = list(tokenize_lines(["0 HEAD", "1 CHAR UTF-8", "0 TRLR"]))
    assert [t.lineno for t in tokens] == [1, 2, 3]
    assert [t.tag for t in tokens] == ["HEAD", "CHAR", "TRLR"]


def test_tokenize_lines_fails_on_first_bad_line() -> None:
    with pytest.raises(MalformedLine) as excinfo:
        list(tokenize_lines(["0 HEAD", "one NAME John", "X bad"]))
    assert excinfo.value.lineno == 2


def test_read_lines_normalizes_crlf_and_trims() -> None:
    lines = read_lines(mock_file_path("dangling.ged"))
    assert lines[0] == "0 HEAD"
    assert lines[-1] == "0 TRLR"
    assert not any(line.endswith("\r") for line in lines)


def test_read_lines_empty_document(tmp_path) -> None:
    path = tmp_path / "empty.ged"
    path.write_text("\n  \n", encoding="utf-8")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.ged")


def test_read_lines_directory_error_propagates(tmp_path) -> None:
    with pytest.raises(IsADirectoryError):
        read_lines(tmp_path)


def test_tokenize_file_reads_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("simple.ged")))
    assert tokens[0].depth == 0
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"
