"""Run the pandoc backend against the real executable."""

import shutil

import pytest
from typer.testing import CliRunner

from mdlinkcheck.api.link._parsers import MarkdownItParser, PandocParser
from mdlinkcheck.api.link.extract_links import extract_links
from mdlinkcheck.cli._create_app import _create_app

pytestmark = pytest.mark.skipif(shutil.which("pandoc") is None, reason="pandoc not installed")

DOCUMENT = """# Some Heading

[text](inline-internal-link)
[ref link][ref]

## Usage

## Usage

- item with [a link](other.md#usage)

[ref]: https://domain.tld/page
"""


def _headings(tree):
    return [node.identifier for node in tree.walk() if node.type == "heading"]


def test_links_match_builtin_parser():
    pandoc_links = extract_links(PandocParser().parse(DOCUMENT))
    builtin_links = extract_links(MarkdownItParser().parse(DOCUMENT))

    assert [link.target for link in pandoc_links] == [link.target for link in builtin_links]
    assert [str(link.position) for link in pandoc_links] == [str(link.position) for link in builtin_links]


def test_first_link_position():
    links = extract_links(PandocParser().parse(DOCUMENT))

    assert str(links[0].position) == "@3:1-3:29"


def test_heading_identifiers():
    assert _headings(PandocParser().parse(DOCUMENT)) == ["some-heading", "usage", "usage-1"]


def test_cli_with_pandoc(tmp_path):
    (tmp_path / "doc.md").write_text("# Top\n\n[ok](#top) [bad](#bottom)\n", encoding="utf-8")

    result = CliRunner().invoke(
        _create_app(), ["--parser", "pandoc", "--base-path", str(tmp_path), str(tmp_path / "doc.md")]
    )

    assert result.exit_code == 1
    assert "anchor not found in target file (#bottom)" in result.output
    assert "@3:12-3:26" in result.output
