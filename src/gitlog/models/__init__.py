"""Data models for changelog generation."""

from gitlog.models.commit import CommitInfo, TagIndex, TagInfo
from gitlog.models.config import SUPPORTED_FORMATS, GeneratorConfig, Settings

__all__ = [
    "CommitInfo",
    "TagInfo",
    "TagIndex",
    "GeneratorConfig",
    "Settings",
    "SUPPORTED_FORMATS",
]
