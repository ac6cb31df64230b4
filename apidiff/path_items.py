"""Per-path comparison across HTTP methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .exceptions import MalformedDocumentError
from .keyed import KeyedDiff, diff_keyed
from .operations import OperationDiff
from .refs import DiffContext, RefResolver

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclass
class PathItemDiff:
    """Operations added, removed or changed under one path."""
    operations: KeyedDiff[str, dict, OperationDiff] = field(default_factory=KeyedDiff)

    @classmethod
    def from_path_items(
        cls,
        base: Any,
        head: Any,
        context: Optional[DiffContext] = None
    ) -> PathItemDiff:
        context = context or DiffContext()
        base_operations = _operations_of(base, context.base)
        head_operations = _operations_of(head, context.head)

        operations = diff_keyed(
            base_operations,
            head_operations,
            lambda b, h: OperationDiff.from_operations(b, h, context),
        )
        return cls(operations=operations)

    def has_changes(self) -> bool:
        return self.operations.has_changes()

    def to_dict(self, include_items: bool = True) -> dict:
        return self.operations.to_dict(include_items=include_items)


def _operations_of(path_item: Any, resolver: RefResolver) -> dict[str, dict]:
    """Pick the HTTP method entries of a path item, lower-casing the method."""
    if path_item is None:
        return {}
    resolved = resolver.resolve(path_item)
    if not isinstance(resolved, dict):
        raise MalformedDocumentError(
            f"path item must be an object, got {type(resolved).__name__}"
        )
    operations: dict[str, dict] = {}
    for key, value in resolved.items():
        if not isinstance(key, str) or key.lower() not in HTTP_METHODS:
            continue
        method = key.lower()
        if method in operations:
            raise MalformedDocumentError(
                f"path item defines method '{method}' more than once"
            )
        operations[method] = value
    return operations
