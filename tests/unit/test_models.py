"""Unit tests for data and configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gitlog.models import GeneratorConfig, Settings, TagIndex, TagInfo


def make_tag(name: str, target: str = "a" * 40) -> TagInfo:
    return TagInfo(hash=f"{name:0>40}"[:40], name=name, target_hash=target)


class TestTagIndex:
    """Test the read-only commit-to-tags mapping."""

    def test_groups_tags_by_commit_in_order(self):
        index = TagIndex(
            [
                ("a" * 40, make_tag("v1")),
                ("b" * 40, make_tag("v2", "b" * 40)),
                ("a" * 40, make_tag("v1.0")),
            ]
        )

        assert [t.name for t in index["a" * 40]] == ["v1", "v1.0"]
        assert [t.name for t in index["b" * 40]] == ["v2"]
        assert list(index) == ["a" * 40, "b" * 40]
        assert len(index) == 2

    def test_tags_for_missing_commit(self):
        assert TagIndex().tags_for("c" * 40) == ()

    def test_is_read_only(self):
        index = TagIndex([("a" * 40, make_tag("v1"))])

        with pytest.raises(TypeError):
            index["b" * 40] = (make_tag("v2"),)
        assert isinstance(index["a" * 40], tuple)


def test_commit_info_is_frozen(commit_factory):
    """Test that commits cannot be modified."""
    commit = commit_factory()
    with pytest.raises(ValidationError):
        commit.message = "changed"


def test_generator_config_defaults():
    config = GeneratorConfig()
    assert config.report_title == "Changelog"
    assert config.include_commits_after is None
    assert config.formats == ["plain"]
    assert config.output_directory == Path(".")


def test_generator_config_rejects_unknown_format():
    with pytest.raises(ValidationError, match="Unsupported report format"):
        GeneratorConfig(formats=["plain", "pdf"])


def test_settings_from_environment(monkeypatch):
    """Test loading settings from GITLOG_ environment variables."""
    monkeypatch.setenv("GITLOG_REPORT_TITLE", "Release notes")
    monkeypatch.setenv("GITLOG_SKIP_TAGS", "true")
    monkeypatch.setenv("GITLOG_LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.report_title == "Release notes"
    assert settings.skip_tags is True
    assert settings.log_level == "DEBUG"
