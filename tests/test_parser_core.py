from __future__ import annotations

import pytest

from gedcom_graph import GEDCOMParser, MalformedLine, build_graph, parse, parse_file
from gedcom_graph import config
from gedcom_graph.config import get_config
from gedcom_graph.utils import mock_file_path


def test_run_builds_graph_from_file() -> None:
    parser = GEDCOMParser()
    graph = parser.run(mock_file_path("simple.ged"))

    assert parser.tree is not None
    assert parser.graph is graph
    assert parser.tokens[0].tag == "HEAD"
    assert len(graph.individuals) == 4
    assert len(graph.families) == 1

    john = graph.get_individual("@I1@")
    assert [c.name for c in john.children] == ["Sam", "Ruth"]


def test_parse_lines_then_build_graph(example_lines) -> None:
    parser = GEDCOMParser()
    tree = parser.parse_lines(example_lines)
    assert len(tree.records) == 4

    graph = parser.build_graph()
    assert graph.get_individual("@I3@").mother.name == "Ann"


def test_build_graph_before_parse_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        GEDCOMParser().build_graph()


def test_parse_lines_propagates_malformed_line() -> None:
    parser = GEDCOMParser()
    with pytest.raises(MalformedLine):
        parser.parse_lines(["0 HEAD", "bad"])
    assert parser.tree is None


def test_strict_config_is_honoured() -> None:
    class StrictConfig:
        paths: dict = {}
        logging: dict = {}
        parser = {"strict_depth": True}
        graph: dict = {}
        debug = False
        strict_depth = True

    parser = GEDCOMParser(config=StrictConfig())
    with pytest.raises(MalformedLine):
        parser.parse_lines(["0 @I1@ INDI", "2 DATE 1 JAN 1900"])


def test_default_config_is_tolerant() -> None:
    assert get_config().strict_depth is False
    tree = GEDCOMParser().parse_lines(["0 @I1@ INDI", "2 DATE 1 JAN 1900"])
    assert len(tree.dropped) == 1


def test_load_file_missing_path(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        GEDCOMParser().load_file(tmp_path / "missing.ged")


def test_load_file_directory_rejected(tmp_path) -> None:
    with pytest.raises(ValueError):
        GEDCOMParser().load_file(tmp_path)


def test_parse_file_handles_crlf() -> None:
    tree = parse_file(mock_file_path("dangling.ged"))
    assert [r.tag for r in tree.records] == ["HEAD", "@I1@", "@I2@", "@F1@", "TRLR"]
    assert tree.records[1].get_attribute("NAME") == "Mary"


def test_parse_file_empty_document(tmp_path) -> None:
    path = tmp_path / "empty.ged"
    path.write_text("", encoding="utf-8")
    assert parse_file(path).records == []


def test_failed_reparse_clears_previous_document() -> None:
    parser = GEDCOMParser()
    parser.parse_lines(["0 @I1@ INDI", "1 NAME Old"])
    parser.build_graph()

    with pytest.raises(MalformedLine):
        parser.parse_lines(["0 @I2@ INDI", "bad"])

    assert parser.tokens == []
    assert parser.tree is None
    assert parser.graph is None
    with pytest.raises(RuntimeError):
        parser.build_graph()


def test_parse_without_config_file_is_tolerant(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "nope.yml"))
    config.reset_config()
    try:
        tree = parse(["0 @I1@ INDI", "2 DATE 1 JAN 1900", "0 @F1@ FAM", "1 HUSB @I1@"])
        graph = build_graph(tree)
    finally:
        monkeypatch.undo()
        config.reset_config()

    assert len(tree.dropped) == 1
    assert graph.get_family("@F1@").father is graph.get_individual("@I1@")


def test_parse_file_directory_error_propagates(tmp_path) -> None:
    with pytest.raises(IsADirectoryError):
        parse_file(tmp_path)
