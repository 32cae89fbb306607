"""Exceptions raised while generating a changelog."""


class GitLogError(Exception):
    """Base class for changelog generation errors."""


class NoRepositoryFoundError(GitLogError):
    """No Git repository could be located from the starting directory."""

    def __init__(self, start_dir: object = None) -> None:
        self.start_dir = start_dir
        where = start_dir if start_dir is not None else "the current directory"
        super().__init__(f"No Git repository found at or above {where}")


class RepositoryIOError(GitLogError):
    """Reading refs, objects or history from the repository failed."""


class TagTypeMismatchError(GitLogError):
    """A tag reference does not point at an annotated tag object."""

    def __init__(self, ref_name: str, object_type: str) -> None:
        self.ref_name = ref_name
        self.object_type = object_type
        super().__init__(f"{ref_name} points to a {object_type}, not a tag object")


class WalkStateError(GitLogError):
    """A commit walk was used after it was consumed or disposed."""
