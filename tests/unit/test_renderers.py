"""Unit tests for the built-in file renderers."""

import json

import pytest

from gitlog.generator import ChangeLogGenerator
from gitlog.models import TagInfo
from gitlog.renderers import (
    JsonRenderer,
    MarkdownRenderer,
    PlainTextRenderer,
    create_renderers,
)
from gitlog.renderers.markdown import escape_markdown


@pytest.fixture
def tag():
    return TagInfo(
        hash="f" * 40,
        name="v1.0.0",
        target_hash="a" * 40,
        tagger_name="Test User",
        tagger_email="test@example.com",
        tagged_date=1_700_000_000,
        message="First release\n\nLots of fixes",
    )


def test_plain_text_renderer(tmp_path, tag, commit_factory):
    """Test the plain text layout."""
    renderer = PlainTextRenderer(tmp_path)
    renderer.render_header("My Project")
    renderer.render_tag(tag)
    renderer.render_commit(commit_factory("Fix parser\n\nDetails", committed_date=1_700_000_000))
    renderer.render_footer()
    renderer.close()

    content = (tmp_path / "gitlog.txt").read_text()
    assert content.startswith("My Project\n==========\n\n")
    assert "\nTag: v1.0.0 (First release)\n" in content
    assert "2023-11-14 22:13  " in content
    assert "Fix parser (Test User)\n" in content
    assert "Details" not in content


def test_markdown_renderer(tmp_path, tag, commit_factory):
    """Test the Markdown layout."""
    commit = commit_factory("Handle *args in cli", committed_date=1_700_000_000)
    renderer = MarkdownRenderer(tmp_path)
    renderer.render_header("My Project")
    renderer.render_tag(tag)
    renderer.render_commit(commit)
    renderer.render_footer()
    renderer.close()

    content = (tmp_path / "gitlog.md").read_text()
    assert content.startswith("# My Project\n")
    assert "## v1.0.0" in content
    assert f"* **2023-11-14** Handle \\*args in cli (`{commit.short_hash}`, Test User)" in content


def test_escape_markdown():
    assert escape_markdown("a_b [c] `d`") == "a\\_b \\[c\\] \\`d\\`"


def test_json_renderer(tmp_path, tag, commit_factory):
    """Test the JSON document keeps emission order."""
    commit = commit_factory("Fix parser")
    renderer = JsonRenderer(tmp_path)
    renderer.render_header("My Project")
    renderer.render_tag(tag)
    renderer.render_commit(commit)
    renderer.render_footer()
    renderer.close()

    document = json.loads((tmp_path / "gitlog.json").read_text())
    assert document["title"] == "My Project"
    assert [e["type"] for e in document["entries"]] == ["tag", "commit"]
    assert document["entries"][0]["name"] == "v1.0.0"
    assert document["entries"][1]["hash"] == commit.hash


def test_file_created_on_first_write(tmp_path):
    """Test that an unused renderer writes nothing."""
    renderer = PlainTextRenderer(tmp_path / "out")
    renderer.close()
    assert not (tmp_path / "out").exists()


def test_write_after_close_fails(tmp_path):
    renderer = PlainTextRenderer(tmp_path)
    renderer.render_header("Title")
    renderer.close()
    renderer.close()

    with pytest.raises(ValueError, match="closed"):
        renderer.render_footer()


def test_custom_filename(tmp_path):
    renderer = MarkdownRenderer(tmp_path, filename="CHANGELOG.md")
    assert renderer.path == tmp_path / "CHANGELOG.md"


def test_create_renderers(tmp_path):
    """Test creating renderers from format names."""
    renderers = create_renderers(["plain", "markdown", "json"], tmp_path)
    assert [type(r) for r in renderers] == [PlainTextRenderer, MarkdownRenderer, JsonRenderer]
    assert all(r.path.parent == tmp_path for r in renderers)


def test_create_renderers_unknown_format(tmp_path):
    with pytest.raises(ValueError, match="Unknown report format: html"):
        create_renderers(["html"], tmp_path)


def test_generate_writes_all_formats(three_commit_repo, tmp_path):
    """Test a full run writing every report format."""
    out = tmp_path / "reports"
    generator = ChangeLogGenerator(create_renderers(["plain", "markdown", "json"], out))
    generator.open_repository(three_commit_repo.path)
    generator.generate("Release notes")

    text = (out / "gitlog.txt").read_text()
    assert text.index("Third commit") < text.index("Tag: v1") < text.index("Second commit")

    markdown = (out / "gitlog.md").read_text()
    assert "## v1" in markdown

    document = json.loads((out / "gitlog.json").read_text())
    assert [e.get("message_summary", e.get("name")) for e in document["entries"]] == [
        "Third commit",
        "v1",
        "Second commit",
        "First commit",
    ]
