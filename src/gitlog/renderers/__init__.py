"""Changelog renderers."""

from pathlib import Path
from typing import Dict, Iterable, List, Type, Union

from gitlog.renderers.base import ChangeLogRenderer, FileRenderer
from gitlog.renderers.json_renderer import JsonRenderer
from gitlog.renderers.markdown import MarkdownRenderer
from gitlog.renderers.plain_text import PlainTextRenderer

RENDERERS: Dict[str, Type[FileRenderer]] = {
    "plain": PlainTextRenderer,
    "markdown": MarkdownRenderer,
    "json": JsonRenderer,
}


def create_renderers(formats: Iterable[str], output_directory: Union[str, Path]) -> List[ChangeLogRenderer]:
    """Create one file renderer per requested format.

    Raises:
        ValueError: If a format name is unknown
    """
    renderers: List[ChangeLogRenderer] = []
    for fmt in formats:
        try:
            renderer_cls = RENDERERS[fmt]
        except KeyError:
            raise ValueError(
                f"Unknown report format: {fmt} (expected one of {', '.join(RENDERERS)})"
            ) from None
        renderers.append(renderer_cls(output_directory))
    return renderers


__all__ = [
    "ChangeLogRenderer",
    "FileRenderer",
    "PlainTextRenderer",
    "MarkdownRenderer",
    "JsonRenderer",
    "RENDERERS",
    "create_renderers",
]
