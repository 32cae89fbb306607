"""JSON changelog."""

import json
from typing import Any, Dict, List, Optional

from gitlog.models import CommitInfo, TagInfo
from gitlog.renderers.base import FileRenderer


class JsonRenderer(FileRenderer):
    """Writes ``gitlog.json``.

    Entries keep the order the generator emitted them in; each entry has a
    ``type`` of either ``"tag"`` or ``"commit"``. The document is written
    when the footer is rendered.
    """

    filename = "gitlog.json"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._title: Optional[str] = None
        self._entries: List[Dict[str, Any]] = []

    def render_header(self, title: str) -> None:
        self._title = title
        self._entries = []

    def render_tag(self, tag: TagInfo) -> None:
        self._entries.append({"type": "tag", **tag.model_dump(mode="json")})

    def render_commit(self, commit: CommitInfo) -> None:
        self._entries.append({"type": "commit", **commit.model_dump(mode="json")})

    def render_footer(self) -> None:
        document = {"title": self._title, "entries": self._entries}
        self.write(json.dumps(document, indent=2))
        self.write("\n")
