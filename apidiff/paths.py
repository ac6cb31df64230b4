"""Top-level comparison of a document's path table."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .exceptions import MalformedDocumentError
from .keyed import KeyedDiff, diff_keyed
from .path_items import PathItemDiff
from .refs import DiffContext

logger = logging.getLogger(__name__)


class PathsDiff(KeyedDiff[str, Any, PathItemDiff]):
    """Paths added, removed or changed between two documents."""

    @classmethod
    def from_paths(
        cls,
        base: Optional[dict],
        head: Optional[dict],
        context: Optional[DiffContext] = None
    ) -> PathsDiff:
        """
        Diff two path tables.

        Args:
            base: Mapping of path string to path item in the base document
            head: Mapping of path string to path item in the head document
            context: Reference resolvers and config; an empty one is used
                when omitted

        Returns:
            The paths diff

        Raises:
            DiffError: from the first shared path whose comparison fails;
                no partial result is returned
        """
        context = context or DiffContext()
        base = _paths_table(base)
        head = _paths_table(head)

        diff = diff_keyed(
            base,
            head,
            lambda b, h: PathItemDiff.from_path_items(b, h, context),
            factory=cls,
        )
        logger.debug(
            "Paths diff: %d added, %d removed, %d changed",
            len(diff.added), len(diff.removed), len(diff.changed)
        )
        return diff

    def to_dict(self, include_items: bool = True, keep_empty: bool = True) -> dict:
        return super().to_dict(include_items=include_items, keep_empty=keep_empty)


def _paths_table(paths: Optional[dict]) -> dict:
    if paths is None:
        return {}
    if not isinstance(paths, dict):
        raise MalformedDocumentError(
            f"paths must be an object, got {type(paths).__name__}"
        )
    return paths
