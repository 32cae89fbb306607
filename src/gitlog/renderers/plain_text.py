"""Plain text changelog."""

from gitlog.models import CommitInfo, TagInfo
from gitlog.renderers.base import FileRenderer


class PlainTextRenderer(FileRenderer):
    """Writes ``gitlog.txt``: one line per commit, tags as separators."""

    filename = "gitlog.txt"
    date_format = "%Y-%m-%d %H:%M"

    def render_header(self, title: str) -> None:
        self.write(f"{title}\n{'=' * len(title)}\n\n")

    def render_tag(self, tag: TagInfo) -> None:
        line = f"Tag: {tag.name}"
        if tag.message:
            line += f" ({tag.message.splitlines()[0]})"
        self.write(f"\n{line}\n")

    def render_commit(self, commit: CommitInfo) -> None:
        date = commit.timestamp.strftime(self.date_format)
        self.write(f"{date}  {commit.short_hash}  {commit.message_summary} ({commit.author_name})\n")

    def render_footer(self) -> None:
        self.write("\n")
