# src/gedcom_graph/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from gedcom_graph.core.exceptions import MalformedLine


@dataclass(frozen=True)
class Token:
    """
    A single tokenized GEDCOM line.

    Attributes:
        lineno: 1-based line number in the source document (0 if unknown).
        depth: Hierarchical level (0, 1, 2, ...).
        tag: Second token of the line, e.g. "NAME", "HUSB" or "@I1@".
        data: Everything after the tag, space-joined and trimmed (may be empty).
        raw: The line as it was handed to the tokenizer.
    """
    lineno: int
    depth: int
    tag: str
    data: str
    raw: str


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Split one line into a Token.

    The line is split on single spaces:
        <depth> <tag> [data...]

    The remaining parts are re-joined with single spaces and trimmed, so
    "1 SEX  M" yields data "M" while "1 NAME John  Smith" keeps its inner
    double space.

    Examples:
        "0 HEAD"            -> depth=0, tag="HEAD",  data=""
        "0 @I1@ INDI"       -> depth=0, tag="@I1@",  data="INDI"
        "2 DATE 1 JAN 1900" -> depth=2, tag="DATE",  data="1 JAN 1900"
    """
    parts = line.split(" ")
    if len(parts) < 2:
        raise MalformedLine(
            f"Line {lineno}: expected '<depth> <tag> [data]' -> {line!r}",
            lineno=lineno,
            line=line,
        )

    depth_str, tag = parts[0], parts[1]

    # str.isdigit() also accepts superscripts and other unicode digits.
    if not depth_str or not all("0" <= ch <= "9" for ch in depth_str):
        raise MalformedLine(
            f"Line {lineno}: depth is not a non-negative integer -> {depth_str!r} in {line!r}",
            lineno=lineno,
            line=line,
        )

    if not tag:
        raise MalformedLine(
            f"Line {lineno}: missing tag after depth -> {line!r}",
            lineno=lineno,
            line=line,
        )

    return Token(
        lineno=lineno,
        depth=int(depth_str),
        tag=tag,
        data=" ".join(parts[2:]).strip(),
        raw=line,
    )


def tokenize_lines(lines: Iterable[str]) -> Iterator[Token]:
    """
    Yield one Token per line, numbering lines from 1.

    Raises:
        MalformedLine: on the first line that cannot be tokenized.
    """
    for lineno, line in enumerate(lines, start=1):
        yield tokenize_line(line, lineno=lineno)


def read_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a GEDCOM document and return its lines.

    CRLF is normalized to LF and the whole document is trimmed before it is
    split, so leading/trailing blank lines never reach the tokenizer. An
    empty document yields no lines.

    OS errors (missing file, directory, permissions) propagate unchanged.
    """
    text = Path(path).read_text(encoding="utf-8-sig")
    text = text.replace("\r\n", "\n").strip()
    if not text:
        return []
    return text.split("\n")


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """Thin wrapper: read_lines() followed by tokenize_lines()."""
    return tokenize_lines(read_lines(path))
