"""Masking stage: drop ignored document regions before diffing."""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Optional

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class Masker:
    """
    Removes every region of a document matched by a JSONPath expression.

    Usage:
        masker = Masker(["$.paths['/internal']", "$.paths.*.*.description"])
        base, head, removed = masker.mask(base_doc, head_doc)
    """

    # Cache for compiled JSONPath expressions
    _cache: dict = {}

    def __init__(self, ignore_paths: Optional[list[str]] = None):
        self.ignore_paths = list(ignore_paths or [])
        self.expressions = [self.compile(path) for path in self.ignore_paths]

    @classmethod
    def compile(cls, path: str):
        """Compile and cache a JSONPath expression."""
        if path not in cls._cache:
            try:
                cls._cache[path] = jsonpath_parse(path)
            except (JsonPathLexerError, JsonPathParserError) as e:
                raise ValidationError(
                    f"Invalid JSONPath expression '{path}'",
                    {"path": path, "reason": str(e)}
                )
        return cls._cache[path]

    def mask(self, base: Any, head: Any) -> tuple[Any, Any, int]:
        """
        Apply masking to both documents.

        The inputs are left untouched; masking works on deep copies.

        Returns:
            Tuple of (masked_base, masked_head, removed_count)
        """
        if not self.expressions:
            return base, head, 0

        base, base_removed = self._mask_document(deepcopy(base))
        head, head_removed = self._mask_document(deepcopy(head))
        return base, head, base_removed + head_removed

    def _mask_document(self, document: Any) -> tuple[Any, int]:
        removed = 0
        for path, expr in zip(self.ignore_paths, self.expressions):
            matches = expr.find(document)
            if not matches:
                continue
            logger.debug("Ignoring %d region(s) matched by %s", len(matches), path)
            removed += len(matches)
            document = expr.filter(lambda _: True, document)
        return document, removed
