"""Commit filters."""

from gitlog.filters.base import CommitFilter, FilterChain
from gitlog.filters.builtin import AuthorFilter, MergeCommitFilter, MessagePatternFilter, build_filters

__all__ = [
    "CommitFilter",
    "FilterChain",
    "MergeCommitFilter",
    "MessagePatternFilter",
    "AuthorFilter",
    "build_filters",
]
