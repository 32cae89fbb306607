"""Data models for commits and tags seen during a changelog walk."""

from datetime import datetime
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field


class CommitInfo(BaseModel):
    """Represents a single commit reachable from HEAD."""

    hash: str = Field(..., description="Full commit SHA hash")
    short_hash: str = Field(..., description="Short commit SHA hash (7 chars)")
    committed_date: int = Field(..., description="Commit time in seconds since the epoch")
    timestamp: datetime = Field(..., description="Commit time as an aware UTC datetime")
    author_name: str = Field(..., description="Author name")
    author_email: str = Field(..., description="Author email")
    committer_name: str = Field(..., description="Committer name")
    committer_email: str = Field(..., description="Committer email")
    message: str = Field(..., description="Full commit message")
    message_summary: str = Field("", description="First line of commit message")
    parent_hashes: List[str] = Field(default_factory=list, description="Parent commit hashes")
    is_merge: bool = Field(False, description="Whether this is a merge commit")

    class Config:
        """Pydantic config."""
        frozen = True
        json_schema_extra = {
            "example": {
                "hash": "abc123def456",
                "short_hash": "abc123d",
                "committed_date": 1705314600,
                "timestamp": "2024-01-15T10:30:00Z",
                "author_name": "John Doe",
                "author_email": "john@example.com",
                "committer_name": "John Doe",
                "committer_email": "john@example.com",
                "message": "Fix authentication bug\n\nResolves issue with token validation",
                "message_summary": "Fix authentication bug",
                "parent_hashes": ["parent123"],
                "is_merge": False,
            }
        }


class TagInfo(BaseModel):
    """Represents an annotated tag.

    Lightweight tags have no tag object to read and are never turned into
    a TagInfo.
    """

    hash: str = Field(..., description="SHA of the tag object")
    name: str = Field(..., description="Tag name, e.g. v1.0.0")
    target_hash: str = Field(..., description="SHA of the object the tag points at")
    tagger_name: Optional[str] = Field(None, description="Tagger name")
    tagger_email: Optional[str] = Field(None, description="Tagger email")
    tagged_date: Optional[int] = Field(None, description="Tag time in seconds since the epoch")
    message: str = Field("", description="Tag message")

    class Config:
        """Pydantic config."""
        frozen = True
        json_schema_extra = {
            "example": {
                "hash": "fed321cba654",
                "name": "v1.0.0",
                "target_hash": "abc123def456",
                "tagger_name": "John Doe",
                "tagger_email": "john@example.com",
                "tagged_date": 1705314600,
                "message": "Release 1.0.0",
            }
        }


class TagIndex(Mapping[str, Tuple[TagInfo, ...]]):
    """Read-only mapping of commit hash to the annotated tags pointing at it.

    Tags for a commit keep the order in which they were added.
    """

    def __init__(self, pairs: Sequence[Tuple[str, TagInfo]] = ()) -> None:
        grouped: Dict[str, List[TagInfo]] = {}
        for commit_hash, tag in pairs:
            grouped.setdefault(commit_hash, []).append(tag)
        self._tags: Dict[str, Tuple[TagInfo, ...]] = {
            commit_hash: tuple(tags) for commit_hash, tags in grouped.items()
        }

    def __getitem__(self, commit_hash: str) -> Tuple[TagInfo, ...]:
        return self._tags[commit_hash]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def tags_for(self, commit_hash: str) -> Tuple[TagInfo, ...]:
        """Return the tags for a commit, or an empty tuple."""
        return self._tags.get(commit_hash, ())

    def __repr__(self) -> str:
        names = {h[:7]: [t.name for t in tags] for h, tags in self._tags.items()}
        return f"TagIndex({names})"
