import json
from types import SimpleNamespace

import pytest

from mdlinkcheck.api.errors import MalformedDocumentError, MissingDependencyError, ParseError
from mdlinkcheck.api.link._parsers import _PandocParser
from mdlinkcheck.api.link._parsers._PandocParser import PandocParser, convert_pandoc_json
from mdlinkcheck.api.link.DocumentNode import NODE_HEADING
from mdlinkcheck.api.link.extract_links import extract_links


def _attr(position: str | None = None, identifier: str = "") -> list:
    pairs = [["data-pos", position]] if position else []
    return [identifier, [], pairs]


def _str(text: str) -> dict:
    return {"t": "Str", "c": text}


PANDOC_DOCUMENT = {
    "pandoc-api-version": [1, 22],
    "meta": {},
    "blocks": [
        {
            "t": "Header",
            "c": [1, _attr("1:1-1:15", "some-heading"), [_str("Some"), {"t": "Space"}, _str("Heading")]],
        },
        {
            "t": "Para",
            "c": [
                {"t": "Link", "c": [_attr("3:1-3:29"), [_str("text")], ["inline-internal-link", ""]]},
                {"t": "SoftBreak"},
                {
                    "t": "Span",
                    "c": [
                        _attr("4:1-4:16"),
                        [{"t": "Link", "c": [_attr(), [_str("ref")], ["https://domain.tld/page", ""]]}],
                    ],
                },
            ],
        },
        {"t": "CodeBlock", "c": [_attr("6:1-8:4"), "[not](a-link)"]},
    ],
}


def test_convert_links_in_document_order():
    records = extract_links(convert_pandoc_json(PANDOC_DOCUMENT))

    assert [record.target for record in records] == ["inline-internal-link", "https://domain.tld/page"]
    assert [str(record.position) for record in records] == ["@3:1-3:29", "@4:1-4:16"]


def test_convert_headings_use_pandoc_identifier():
    tree = convert_pandoc_json(PANDOC_DOCUMENT)
    headings = [node for node in tree.walk() if node.type == NODE_HEADING]

    assert [(node.identifier, node.content) for node in headings] == [("some-heading", "Some Heading")]


def test_convert_link_without_position_is_malformed():
    document = {"blocks": [{"t": "Para", "c": [{"t": "Link", "c": [_attr(), [], ["a.md", ""]]}]}]}

    with pytest.raises(MalformedDocumentError):
        extract_links(convert_pandoc_json(document))


def test_convert_invalid_position_is_malformed():
    document = {"blocks": [{"t": "Para", "c": [{"t": "Link", "c": [_attr("line one"), [], ["a.md", ""]]}]}]}

    with pytest.raises(MalformedDocumentError, match="Invalid source position"):
        convert_pandoc_json(document)


def test_convert_bad_link_shape_is_malformed():
    document = {"blocks": [{"t": "Para", "c": [{"t": "Link", "c": ["only-a-string"]}]}]}

    with pytest.raises(MalformedDocumentError, match="Link"):
        convert_pandoc_json(document)


def test_convert_requires_blocks():
    with pytest.raises(MalformedDocumentError, match="no blocks"):
        convert_pandoc_json({"meta": {}})


class TestPandocParser:
    def test_missing_pandoc(self, monkeypatch):
        monkeypatch.setattr(_PandocParser.shutil, "which", lambda name: None)

        with pytest.raises(MissingDependencyError) as excinfo:
            PandocParser().parse("# Title\n")
        assert excinfo.value.program == "pandoc"

    def test_runs_pandoc_with_sourcepos(self, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return SimpleNamespace(returncode=0, stdout=json.dumps(PANDOC_DOCUMENT), stderr="")

        monkeypatch.setattr(_PandocParser.shutil, "which", lambda name: "/usr/bin/pandoc")
        monkeypatch.setattr(_PandocParser.subprocess, "run", fake_run)

        tree = PandocParser().parse("[text](inline-internal-link)\n")

        [(cmd, kwargs)] = calls
        assert cmd == ["/usr/bin/pandoc", "--from", "gfm+sourcepos", "--to", "json"]
        assert kwargs["input"] == "[text](inline-internal-link)\n"
        assert len(extract_links(tree)) == 2

    def test_pandoc_failure_is_parse_error(self, monkeypatch, tmp_path):
        monkeypatch.setattr(_PandocParser.shutil, "which", lambda name: "/usr/bin/pandoc")
        monkeypatch.setattr(
            _PandocParser.subprocess,
            "run",
            lambda cmd, **kwargs: SimpleNamespace(returncode=64, stdout="", stderr="unknown reader"),
        )
        doc = tmp_path / "doc.md"
        doc.write_text("# Title\n", encoding="utf-8")

        with pytest.raises(ParseError) as excinfo:
            PandocParser().parse_file(doc)
        assert excinfo.value.path == doc
        assert excinfo.value.reason == "unknown reader"

    def test_invalid_json_is_parse_error(self, monkeypatch):
        monkeypatch.setattr(_PandocParser.shutil, "which", lambda name: "/usr/bin/pandoc")
        monkeypatch.setattr(
            _PandocParser.subprocess,
            "run",
            lambda cmd, **kwargs: SimpleNamespace(returncode=0, stdout="not json", stderr=""),
        )

        with pytest.raises(ParseError, match="invalid pandoc JSON"):
            PandocParser().parse("# Title\n")

    def test_os_error_is_parse_error(self, monkeypatch):
        def broken_run(cmd, **kwargs):
            raise PermissionError("not executable")

        monkeypatch.setattr(_PandocParser.shutil, "which", lambda name: "/usr/bin/pandoc")
        monkeypatch.setattr(_PandocParser.subprocess, "run", broken_run)

        with pytest.raises(ParseError, match="not executable"):
            PandocParser().parse("# Title\n")
