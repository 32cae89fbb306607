"""Markdown changelog."""

import re

from gitlog.models import CommitInfo, TagInfo
from gitlog.renderers.base import FileRenderer

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]#<>])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters Markdown would treat as formatting."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


class MarkdownRenderer(FileRenderer):
    """Writes ``gitlog.md`` with a heading per tag and a bullet per commit."""

    filename = "gitlog.md"

    def render_header(self, title: str) -> None:
        self.write(f"# {escape_markdown(title)}\n\n")

    def render_tag(self, tag: TagInfo) -> None:
        self.write(f"\n## {escape_markdown(tag.name)}\n\n")
        if tag.message:
            self.write(f"{escape_markdown(tag.message)}\n\n")

    def render_commit(self, commit: CommitInfo) -> None:
        date = commit.timestamp.strftime("%Y-%m-%d")
        summary = escape_markdown(commit.message_summary)
        author = escape_markdown(commit.author_name)
        self.write(f"* **{date}** {summary} (`{commit.short_hash}`, {author})\n")

    def render_footer(self) -> None:
        self.write("\n")
