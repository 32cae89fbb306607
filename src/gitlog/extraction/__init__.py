"""Git repository access: commit walks and tag lookup."""

from gitlog.extraction.accessor import RepositoryAccessor
from gitlog.extraction.tags import build_tag_index
from gitlog.extraction.walker import CommitWalk

__all__ = ["RepositoryAccessor", "CommitWalk", "build_tag_index"]
