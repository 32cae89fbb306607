"""Commit filters shipped with gitlog."""

import re
from typing import Iterable, List, Pattern

from gitlog.filters.base import CommitFilter
from gitlog.models import CommitInfo, GeneratorConfig


class MergeCommitFilter(CommitFilter):
    """Leaves out merge commits (commits with more than one parent)."""

    def test(self, commit: CommitInfo) -> bool:
        return not commit.is_merge


class MessagePatternFilter(CommitFilter):
    """Leaves out commits whose message matches any of the given patterns.

    Patterns are regular expressions searched anywhere in the full commit
    message, so anchor them (``^``) to match only the start.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        """Compile the patterns.

        Args:
            patterns: Regular expressions to exclude on

        Raises:
            ValueError: If a pattern is not a valid regular expression
        """
        self.patterns: List[Pattern[str]] = []
        for pattern in patterns:
            try:
                self.patterns.append(re.compile(pattern, re.MULTILINE))
            except re.error as e:
                raise ValueError(f"Invalid message pattern {pattern!r}: {e}") from e

    def test(self, commit: CommitInfo) -> bool:
        return not any(p.search(commit.message) for p in self.patterns)

    def __repr__(self) -> str:
        return f"MessagePatternFilter({[p.pattern for p in self.patterns]!r})"


class AuthorFilter(CommitFilter):
    """Keeps (or, with ``exclude=True``, drops) commits by the given authors.

    Authors are matched case-insensitively against both name and email.
    """

    def __init__(self, authors: Iterable[str], exclude: bool = False) -> None:
        self.authors = {author.strip().lower() for author in authors}
        self.exclude = exclude

    def test(self, commit: CommitInfo) -> bool:
        matched = (
            commit.author_name.lower() in self.authors
            or commit.author_email.lower() in self.authors
        )
        return not matched if self.exclude else matched

    def __repr__(self) -> str:
        return f"AuthorFilter({sorted(self.authors)!r}, exclude={self.exclude})"


def build_filters(config: GeneratorConfig) -> List[CommitFilter]:
    """Create the filters a generator configuration asks for."""
    filters: List[CommitFilter] = []
    if config.exclude_merge_commits:
        filters.append(MergeCommitFilter())
    if config.exclude_message_patterns:
        filters.append(MessagePatternFilter(config.exclude_message_patterns))
    if config.include_authors:
        filters.append(AuthorFilter(config.include_authors))
    if config.exclude_authors:
        filters.append(AuthorFilter(config.exclude_authors, exclude=True))
    return filters
