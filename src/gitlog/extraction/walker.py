"""Single-pass walk over the commits reachable from HEAD."""

from typing import Generator, Iterator, Optional

import structlog

from gitlog.errors import WalkStateError
from gitlog.extraction.accessor import RepositoryAccessor
from gitlog.models import CommitInfo

logger = structlog.get_logger(__name__)


class CommitWalk:
    """Lazy, single-use sequence of commits in the accessor's traversal order.

    A walk can be iterated once. ``dispose()`` releases the underlying
    traversal; it runs at most once and is called automatically when the
    walk is used as a context manager.
    """

    def __init__(self, accessor: RepositoryAccessor, start: Optional[CommitInfo] = None) -> None:
        """Initialize the walk.

        Args:
            accessor: Open repository accessor
            start: Commit to start from, or None for an empty walk
        """
        self.accessor = accessor
        self.start = start
        self._iterator: Optional[Generator[CommitInfo, None, None]] = None
        self._started = False
        self._disposed = False

    @classmethod
    def from_head(cls, accessor: RepositoryAccessor) -> "CommitWalk":
        """Create a walk starting at the commit HEAD resolves to.

        A repository without commits gives an empty walk.
        """
        head = accessor.resolve_ref("HEAD")
        if head is None:
            logger.debug("head_unresolved", git_dir=str(accessor.git_dir))
            return cls(accessor)
        return cls(accessor, accessor.parse_commit(head))

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __iter__(self) -> Iterator[CommitInfo]:
        if self._disposed:
            raise WalkStateError("Commit walk has already been disposed")
        if self._started:
            raise WalkStateError("Commit walk can only be iterated once")
        self._started = True
        self._iterator = self._walk()
        return self._iterator

    def _walk(self) -> Generator[CommitInfo, None, None]:
        if self.start is None:
            return
        commits = self.accessor.walk_from(self.start.hash)
        seen = set()
        try:
            for commit in commits:
                if commit.hash in seen:
                    continue
                seen.add(commit.hash)
                yield commit
        finally:
            commits.close()

    def dispose(self) -> None:
        """Release the traversal. Further calls do nothing."""
        if self._disposed:
            return
        self._disposed = True
        if self._iterator is not None:
            self._iterator.close()
            self._iterator = None

    def __enter__(self) -> "CommitWalk":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()
