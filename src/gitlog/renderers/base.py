"""Renderer interface and the file-backed base used by built-in renderers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO, Union

import structlog

from gitlog.models import CommitInfo, TagInfo

logger = structlog.get_logger(__name__)


class ChangeLogRenderer(ABC):
    """Abstract base class for changelog renderers.

    A generator calls, in order: ``render_header`` once, then any mix of
    ``render_tag`` and ``render_commit`` (the tags of a commit always come
    before the commit itself), then ``render_footer`` and ``close`` once.
    """

    @abstractmethod
    def render_header(self, title: str) -> None:
        """Start the report.

        Args:
            title: Report title
        """
        pass

    @abstractmethod
    def render_tag(self, tag: TagInfo) -> None:
        """Render an annotated tag pointing at the commit that follows."""
        pass

    @abstractmethod
    def render_commit(self, commit: CommitInfo) -> None:
        """Render a commit that passed the cutoff and all filters."""
        pass

    @abstractmethod
    def render_footer(self) -> None:
        """Finish the report."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the renderer."""
        pass


class FileRenderer(ChangeLogRenderer):
    """Renderer writing to a single text file in an output directory.

    The file is created on the first write, so a renderer that is never
    used leaves nothing behind.
    """

    filename = "gitlog.txt"

    def __init__(self, output_directory: Union[str, Path], filename: Optional[str] = None) -> None:
        """Initialize the renderer.

        Args:
            output_directory: Directory to write the report into
            filename: Override for the class default file name
        """
        self.path = Path(output_directory) / (filename or self.filename)
        self._stream: Optional[TextIO] = None
        self._closed = False

    def write(self, text: str) -> None:
        """Append text to the report file."""
        if self._closed:
            raise ValueError(f"Renderer for {self.path} is closed")
        if self._stream is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = open(self.path, "w", encoding="utf-8")
            logger.debug("report_file_opened", path=str(self.path))
        self._stream.write(text)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._stream is not None:
            self._stream.close()
            self._stream = None
