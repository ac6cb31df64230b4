"""Local $ref resolution for API documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .models import EngineConfig
from .exceptions import (
    ExternalRefError,
    CircularRefError,
    UnresolvedRefError,
    MaxDepthExceededError,
)


def is_ref(node: Any) -> bool:
    return isinstance(node, dict) and "$ref" in node


class RefResolver:
    """Resolves local JSON-pointer references ("#/...") within one document."""

    def __init__(self, document: Optional[dict] = None, max_depth: int = 100):
        self.document = document if document is not None else {}
        self.max_depth = max_depth

    def resolve(self, node: Any) -> Any:
        """
        Follow a (possibly chained) reference to its target.

        Args:
            node: Any document node; non-reference nodes are returned as is

        Returns:
            The referenced object
        """
        seen: list[str] = []
        while is_ref(node):
            ref = node["$ref"]
            if ref in seen:
                raise CircularRefError(ref)
            seen.append(ref)
            node = self._lookup(ref)
        return node

    def resolve_deep(self, node: Any) -> Any:
        """
        Return a copy of `node` with every nested reference inlined.

        A reference that is already being inlined further up (a recursive
        schema) is kept as its `$ref` node.

        `max_depth` bounds how many references are followed along one branch.
        """
        return self._resolve_node(node, depth=0, stack=[])

    def _resolve_node(self, node: Any, depth: int, stack: list[str]) -> Any:
        if isinstance(node, dict):
            if "$ref" in node:
                ref = node["$ref"]
                if ref in stack:
                    return dict(node)
                if depth > self.max_depth:
                    raise MaxDepthExceededError(self.max_depth, ref)
                stack.append(ref)
                try:
                    return self._resolve_node(self._lookup(ref), depth + 1, stack)
                finally:
                    stack.pop()

            return {
                key: self._resolve_node(value, depth, stack)
                for key, value in node.items()
            }

        elif isinstance(node, list):
            return [self._resolve_node(item, depth, stack) for item in node]

        return node

    def _lookup(self, ref: str) -> Any:
        if not isinstance(ref, str) or not ref.startswith("#"):
            raise ExternalRefError(str(ref))
        if ref == "#":
            return self.document
        if not ref.startswith("#/"):
            raise UnresolvedRefError(ref, "not a JSON pointer")

        resolved: Any = self.document
        for part in ref[2:].split("/"):
            # JSON pointer escaping
            part = part.replace("~1", "/").replace("~0", "~")
            if isinstance(resolved, dict) and part in resolved:
                resolved = resolved[part]
            elif isinstance(resolved, list) and part.isdigit() and int(part) < len(resolved):
                resolved = resolved[int(part)]
            else:
                raise UnresolvedRefError(ref, f"path component '{part}' not found")
        return resolved


@dataclass
class DiffContext:
    """Reference resolvers for both documents plus the engine configuration."""
    base: RefResolver = field(default_factory=RefResolver)
    head: RefResolver = field(default_factory=RefResolver)
    config: EngineConfig = field(default_factory=EngineConfig)

    @classmethod
    def from_documents(
        cls,
        base_document: dict,
        head_document: dict,
        config: Optional[EngineConfig] = None
    ) -> DiffContext:
        config = config or EngineConfig()
        return cls(
            base=RefResolver(base_document, config.max_depth),
            head=RefResolver(head_document, config.max_depth),
            config=config,
        )
