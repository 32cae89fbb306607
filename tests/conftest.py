"""Shared fixtures: temporary Git repositories and a recording renderer."""

import hashlib
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

import git
import pytest

from gitlog.models import CommitInfo, TagInfo
from gitlog.renderers import ChangeLogRenderer


class RecordingRenderer(ChangeLogRenderer):
    """Renderer that appends every call to a shared event log."""

    def __init__(self, name: str, events: List[Tuple[str, str, Optional[str]]]) -> None:
        self.name = name
        self.events = events

    def render_header(self, title: str) -> None:
        self.events.append((self.name, "header", title))

    def render_tag(self, tag: TagInfo) -> None:
        self.events.append((self.name, "tag", tag.name))

    def render_commit(self, commit: CommitInfo) -> None:
        self.events.append((self.name, "commit", commit.message_summary))

    def render_footer(self) -> None:
        self.events.append((self.name, "footer", None))

    def close(self) -> None:
        self.events.append((self.name, "close", None))


class GitRepoBuilder:
    """Builds commits and tags with fixed timestamps in a temporary repository."""

    def __init__(self, repo_path: Path) -> None:
        self.path = repo_path
        self.repo = git.Repo.init(repo_path)

        # Configure git
        self.repo.config_writer().set_value("user", "name", "Test User").release()
        self.repo.config_writer().set_value("user", "email", "test@example.com").release()

    def commit(
        self,
        message: str,
        timestamp: int,
        author: Optional[git.Actor] = None,
        parents=None,
        head: bool = True,
    ) -> git.Commit:
        """Create a commit whose author and commit dates are ``timestamp``."""
        (self.path / "CHANGES").write_text(f"{message}\n")
        self.repo.index.add(["CHANGES"])
        date = f"{timestamp} +0000"
        return self.repo.index.commit(
            message,
            author=author,
            committer=author,
            author_date=date,
            commit_date=date,
            parent_commits=parents,
            head=head,
        )

    def annotated_tag(self, name: str, commit: git.Commit, message: Optional[str] = None) -> None:
        self.repo.create_tag(name, ref=commit, message=message or f"Release {name}")

    def lightweight_tag(self, name: str, commit: git.Commit) -> None:
        self.repo.create_tag(name, ref=commit)


@pytest.fixture
def repo_builder():
    """Create an empty temporary Git repository."""
    with tempfile.TemporaryDirectory() as tmpdir:
        builder = GitRepoBuilder(Path(tmpdir))
        yield builder
        builder.repo.close()


@pytest.fixture
def three_commit_repo(repo_builder):
    """Repository with commits at t=100, 200, 300 and tag v1 on the second."""
    repo_builder.commit("First commit", 100)
    second = repo_builder.commit("Second commit", 200)
    repo_builder.commit("Third commit", 300)
    repo_builder.annotated_tag("v1", second)
    return repo_builder


@pytest.fixture
def events():
    return []


@pytest.fixture
def make_recorder(events):
    """Factory for recording renderers sharing the ``events`` log."""

    def _make(name: str = "r1") -> RecordingRenderer:
        return RecordingRenderer(name, events)

    return _make


def make_commit(
    message: str = "Fix bug",
    committed_date: int = 1_700_000_000,
    parents: int = 1,
    author_name: str = "Test User",
    author_email: str = "test@example.com",
) -> CommitInfo:
    """Build a CommitInfo without a repository."""
    sha = hashlib.sha1(f"{message}:{committed_date}".encode()).hexdigest()
    return CommitInfo(
        hash=sha,
        short_hash=sha[:7],
        committed_date=committed_date,
        timestamp=datetime.fromtimestamp(committed_date, tz=timezone.utc),
        author_name=author_name,
        author_email=author_email,
        committer_name=author_name,
        committer_email=author_email,
        message=message,
        message_summary=message.split("\n")[0],
        parent_hashes=[f"{i:040x}" for i in range(parents)],
        is_merge=parents > 1,
    )


@pytest.fixture
def commit_factory():
    return make_commit
