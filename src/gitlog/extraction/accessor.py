"""Read-only access to a Git repository through GitPython."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

import git
import structlog
from git import Commit, Repo, TagObject

from gitlog.errors import NoRepositoryFoundError, RepositoryIOError, TagTypeMismatchError
from gitlog.models import CommitInfo, TagInfo

logger = structlog.get_logger(__name__)

_READ_ERRORS = (git.exc.GitError, git.exc.ODBError, ValueError, OSError)


class RepositoryAccessor:
    """Resolves refs, lists tags and walks commits of one open repository."""

    def __init__(self, repo: Repo) -> None:
        """Wrap an already opened GitPython repository.

        Args:
            repo: GitPython Repo object
        """
        self.repo = repo
        self._closed = False

    @classmethod
    def open(cls, start_dir: Optional[Union[str, Path]] = None) -> "RepositoryAccessor":
        """Open the repository enclosing a directory.

        The search walks upward from ``start_dir`` (or the current working
        directory) until a repository is found.

        Args:
            start_dir: Directory to start searching from

        Returns:
            RepositoryAccessor for the repository found

        Raises:
            NoRepositoryFoundError: If no repository encloses the directory
            RepositoryIOError: If the repository exists but cannot be read
        """
        path = str(start_dir) if start_dir is not None else None
        try:
            repo = Repo(path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise NoRepositoryFoundError(start_dir) from e
        except _READ_ERRORS as e:
            raise RepositoryIOError(f"Could not open repository: {e}") from e
        return cls(repo)

    @property
    def git_dir(self) -> Path:
        return Path(self.repo.git_dir)

    def resolve_ref(self, name: str) -> Optional[str]:
        """Resolve a ref name such as ``HEAD`` to an object id.

        Returns:
            Hex object id, or None if the ref does not resolve (e.g. HEAD of
            a repository without commits)

        Raises:
            RepositoryIOError: If the ref exists but its object cannot be read
        """
        try:
            return self.repo.rev_parse(name).hexsha
        except (git.exc.ODBError, ValueError) as e:
            if self._ref_missing(name):
                return None
            raise RepositoryIOError(f"Could not resolve {name}: {e}") from e
        except (git.exc.GitError, OSError) as e:
            raise RepositoryIOError(f"Could not resolve {name}: {e}") from e

    def _ref_missing(self, name: str) -> bool:
        # HEAD on an unborn branch points at a ref that was never written.
        path = name
        try:
            path = git.SymbolicReference(self.repo, name).reference.path
        except (TypeError, ValueError):
            pass
        return path != "HEAD" and path not in {ref.path for ref in self.repo.references}

    def list_tag_refs(self) -> List[Tuple[str, str]]:
        """List all tag refs as ``(ref path, object id)`` pairs."""
        try:
            return [(ref.path, ref.object.hexsha) for ref in self.repo.tags]
        except _READ_ERRORS as e:
            raise RepositoryIOError(f"Could not list tags: {e}") from e

    def parse_commit(self, object_id: str) -> CommitInfo:
        """Read a commit object.

        Raises:
            RepositoryIOError: If the object is missing or not a commit
        """
        try:
            return self._to_commit_info(self.repo.commit(object_id))
        except _READ_ERRORS as e:
            raise RepositoryIOError(f"Could not read commit {object_id}: {e}") from e

    def parse_tag_object(self, object_id: str, ref_name: Optional[str] = None) -> TagInfo:
        """Read an annotated tag object.

        Args:
            object_id: Id the tag ref points at
            ref_name: Ref name used in error messages

        Raises:
            TagTypeMismatchError: If the id is not a tag object (lightweight tag)
            RepositoryIOError: If the object cannot be read
        """
        name = ref_name or object_id
        try:
            obj = self.repo.rev_parse(object_id)
        except _READ_ERRORS as e:
            raise RepositoryIOError(f"Could not read tag {name}: {e}") from e

        if obj.type != "tag":
            raise TagTypeMismatchError(name, obj.type)

        try:
            return self._to_tag_info(obj)
        except _READ_ERRORS as e:
            raise RepositoryIOError(f"Could not read tag {name}: {e}") from e

    def walk_from(self, object_id: str) -> Iterator[CommitInfo]:
        """Yield commits reachable from ``object_id``, newest first.

        The order is the one ``git rev-list`` produces; it is not re-sorted.
        """
        try:
            for commit in self.repo.iter_commits(object_id):
                yield self._to_commit_info(commit)
        except _READ_ERRORS as e:
            raise RepositoryIOError(f"Could not walk history from {object_id}: {e}") from e

    def close(self) -> None:
        """Release the repository handle. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.repo.close()
        logger.debug("repository_closed", git_dir=str(self.git_dir))

    def __enter__(self) -> "RepositoryAccessor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"RepositoryAccessor({self.repo.git_dir!r})"

    @staticmethod
    def _to_commit_info(commit: Commit) -> CommitInfo:
        """Convert a GitPython Commit object."""
        message = commit.message.strip()
        message_lines = message.split("\n")

        return CommitInfo(
            hash=commit.hexsha,
            short_hash=commit.hexsha[:7],
            committed_date=commit.committed_date,
            timestamp=datetime.fromtimestamp(commit.committed_date, tz=timezone.utc),
            author_name=commit.author.name or "",
            author_email=commit.author.email or "",
            committer_name=commit.committer.name or "",
            committer_email=commit.committer.email or "",
            message=message,
            message_summary=message_lines[0] if message_lines else "",
            parent_hashes=[p.hexsha for p in commit.parents],
            is_merge=len(commit.parents) > 1,
        )

    @staticmethod
    def _to_tag_info(tag: TagObject) -> TagInfo:
        """Convert a GitPython TagObject."""
        tagger = tag.tagger
        return TagInfo(
            hash=tag.hexsha,
            name=tag.tag,
            target_hash=tag.object.hexsha,
            tagger_name=tagger.name if tagger else None,
            tagger_email=tagger.email if tagger else None,
            tagged_date=tag.tagged_date,
            message=(tag.message or "").strip(),
        )
