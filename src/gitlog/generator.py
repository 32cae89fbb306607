"""Changelog generation: walk history from HEAD and drive the renderers."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Union

import structlog

from gitlog.errors import WalkStateError
from gitlog.extraction import CommitWalk, RepositoryAccessor, build_tag_index
from gitlog.filters import CommitFilter, FilterChain
from gitlog.models import CommitInfo, TagIndex
from gitlog.renderers import ChangeLogRenderer

logger = structlog.get_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ChangeLogGenerator:
    """Generates a changelog from the history reachable from HEAD.

    Usage is two steps: ``open_repository()`` loads the commit walk and the
    tag index, then ``generate()`` streams the report to every renderer.
    A walk is consumed by one ``generate()`` call; open the repository
    again to generate another report.
    """

    def __init__(
        self,
        renderers: Iterable[ChangeLogRenderer],
        filters: Optional[Iterable[CommitFilter]] = None,
        skip_tags: bool = False,
    ) -> None:
        """Initialize the generator.

        Args:
            renderers: Renderers to drive, in call order
            filters: Commit filters; a commit is rendered only if all accept it
            skip_tags: Do not look up tags at all
        """
        self.renderers: List[ChangeLogRenderer] = list(renderers)
        self.filter_chain = FilterChain(filters)
        self.skip_tags = skip_tags

        self.accessor: Optional[RepositoryAccessor] = None
        self.walk: Optional[CommitWalk] = None
        self.tag_index: TagIndex = TagIndex()

    def open_repository(self, start_dir: Optional[Union[str, Path]] = None) -> RepositoryAccessor:
        """Open the enclosing repository and load commits and tags.

        Args:
            start_dir: Directory to search upward from (default: cwd)

        Returns:
            The opened repository accessor

        Raises:
            NoRepositoryFoundError: If no repository is found
            RepositoryIOError: If the repository cannot be read
        """
        logger.debug("opening_repository", start_dir=str(start_dir) if start_dir else None)
        accessor = RepositoryAccessor.open(start_dir)
        try:
            logger.debug("repository_opened", git_dir=str(accessor.git_dir))
            walk = CommitWalk.from_head(accessor)
            logger.debug("commits_loaded", head=walk.start.short_hash if walk.start else None)
            tag_index = build_tag_index(accessor, skip_tags=self.skip_tags)
            logger.debug("tag_index_loaded", tags=repr(tag_index))
        except BaseException:
            accessor.close()
            raise

        self._release_repository()
        self.accessor = accessor
        self.walk = walk
        self.tag_index = tag_index
        return accessor

    def generate(self, report_title: str, include_commits_after: Optional[datetime] = None) -> None:
        """Render the changelog.

        Args:
            report_title: Title passed to every renderer's header
            include_commits_after: Only commits committed strictly after this
                time are reported. Defaults to the epoch, i.e. everything.

        Raises:
            WalkStateError: If no repository is open or its walk was used
            RepositoryIOError: If reading history fails
        """
        walk = self.walk
        if walk is None or walk.disposed:
            raise WalkStateError("open_repository() must be called before generate()")

        cutoff = int((include_commits_after or EPOCH).timestamp())
        rendered = 0
        try:
            with walk:
                for renderer in self.renderers:
                    renderer.render_header(report_title)

                for commit in walk:
                    if commit.committed_date <= cutoff:
                        continue
                    self._render_tags(commit)
                    if self.filter_chain.accepts(commit):
                        for renderer in self.renderers:
                            renderer.render_commit(commit)
                        rendered += 1
        except BaseException:
            self._release_repository()
            self._close_renderers_after_error(self.renderers)
            raise

        self._release_repository()
        for position, renderer in enumerate(self.renderers):
            try:
                renderer.render_footer()
            except BaseException:
                self._close_renderers_after_error(self.renderers[position:])
                raise
            try:
                renderer.close()
            except BaseException:
                self._close_renderers_after_error(self.renderers[position + 1 :])
                raise
        logger.debug("generation_finished", title=report_title, commits_rendered=rendered)

    def _render_tags(self, commit: CommitInfo) -> None:
        tags = self.tag_index.tags_for(commit.hash)
        if not tags:
            return
        for renderer in self.renderers:
            for tag in tags:
                renderer.render_tag(tag)

    def _release_repository(self) -> None:
        if self.walk is not None:
            self.walk.dispose()
        if self.accessor is not None:
            self.accessor.close()
            self.accessor = None

    def _close_renderers_after_error(self, renderers: List[ChangeLogRenderer]) -> None:
        for renderer in renderers:
            try:
                renderer.close()
            except Exception:
                logger.warning("renderer_close_failed", renderer=type(renderer).__name__, exc_info=True)
