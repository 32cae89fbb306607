"""Index of annotated tags by the commit they point at."""

import structlog

from gitlog.errors import TagTypeMismatchError
from gitlog.extraction.accessor import RepositoryAccessor
from gitlog.models import TagIndex

logger = structlog.get_logger(__name__)


def build_tag_index(accessor: RepositoryAccessor, skip_tags: bool = False) -> TagIndex:
    """Map commit hashes to the annotated tags pointing at them.

    Tag refs are read in the order the accessor lists them. Lightweight
    tags have no tag object and are left out.

    Args:
        accessor: Open repository accessor
        skip_tags: Return an empty index without reading any refs

    Returns:
        Read-only TagIndex

    Raises:
        RepositoryIOError: If a tag ref cannot be read
    """
    if skip_tags:
        return TagIndex()

    pairs = []
    for ref_name, object_id in accessor.list_tag_refs():
        try:
            tag = accessor.parse_tag_object(object_id, ref_name=ref_name)
        except TagTypeMismatchError:
            logger.debug("lightweight_tag_skipped", ref=ref_name)
            continue
        pairs.append((tag.target_hash, tag))

    return TagIndex(pairs)
