"""Commit filter interface and the chain that combines filters."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

import structlog

from gitlog.models import CommitInfo

logger = structlog.get_logger(__name__)


class CommitFilter(ABC):
    """Abstract base class for commit filters."""

    @abstractmethod
    def test(self, commit: CommitInfo) -> bool:
        """Decide whether a commit belongs in the report.

        Args:
            commit: Commit being considered

        Returns:
            True to include the commit, False to leave it out
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FilterChain:
    """All-must-accept combination of commit filters.

    Filters run in registration order and evaluation stops at the first
    one that rejects the commit. An empty chain accepts everything.
    """

    def __init__(self, filters: Optional[Iterable[CommitFilter]] = None) -> None:
        self.filters: List[CommitFilter] = list(filters) if filters is not None else []

    def accepts(self, commit: CommitInfo) -> bool:
        for commit_filter in self.filters:
            if not commit_filter.test(commit):
                logger.debug(
                    "commit_filtered_out",
                    commit=commit.short_hash,
                    filter=type(commit_filter).__name__,
                )
                return False
        return True

    def __len__(self) -> int:
        return len(self.filters)

    def __repr__(self) -> str:
        return f"FilterChain({self.filters!r})"
