"""Request body comparison."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .common import OptionalStringDiff, ValueDiff, put_optional
from .exceptions import MalformedDocumentError
from .keyed import KeyedDiff, diff_keyed
from .refs import DiffContext, RefResolver


@dataclass
class MediaTypeDiff:
    """Changes of one media type entry (e.g. application/json)."""
    schema: Optional[ValueDiff] = None

    @classmethod
    def from_media_types(
        cls,
        base: dict,
        head: dict,
        context: DiffContext
    ) -> MediaTypeDiff:
        base_schema = context.base.resolve_deep(_media_type(base).get("schema"))
        head_schema = context.head.resolve_deep(_media_type(head).get("schema"))
        return cls(schema=ValueDiff.from_values(base_schema, head_schema))

    def has_changes(self) -> bool:
        return self.schema is not None

    def to_dict(self, include_items: bool = True) -> dict:
        result = {}
        put_optional(result, "schema", self.schema)
        return result


@dataclass
class RequestBodyDiff:
    """
    Changes of an operation's request body.

    When only one side defines a body, the whole body is reported under
    `added` or `removed` and the field-level diffs stay empty.
    """
    added: Optional[dict] = None
    removed: Optional[dict] = None
    description: Optional[OptionalStringDiff] = None
    required: Optional[ValueDiff] = None
    content: KeyedDiff[str, dict, MediaTypeDiff] = field(default_factory=KeyedDiff)

    @classmethod
    def from_request_bodies(
        cls,
        base: Optional[dict],
        head: Optional[dict],
        context: Optional[DiffContext] = None
    ) -> RequestBodyDiff:
        context = context or DiffContext()
        base_body = _resolve_body(base, context.base)
        head_body = _resolve_body(head, context.head)

        if base_body is None and head_body is None:
            return cls()
        if base_body is None:
            return cls(added=head_body)
        if head_body is None:
            return cls(removed=base_body)

        content = diff_keyed(
            _content_of(base_body),
            _content_of(head_body),
            lambda b, h: MediaTypeDiff.from_media_types(b, h, context),
        )

        return cls(
            description=OptionalStringDiff.from_strings(
                base_body.get("description"), head_body.get("description")
            ),
            required=ValueDiff.from_values(
                bool(base_body.get("required", False)),
                bool(head_body.get("required", False)),
            ),
            content=content,
        )

    def has_changes(self) -> bool:
        return (
            self.added is not None
            or self.removed is not None
            or self.description is not None
            or self.required is not None
            or self.content.has_changes()
        )

    def to_dict(self, include_items: bool = True) -> dict:
        result = {}
        if self.added is not None:
            result["added"] = self.added if include_items else True
        if self.removed is not None:
            result["removed"] = self.removed if include_items else True
        put_optional(result, "description", self.description)
        put_optional(result, "required", self.required)
        if self.content.has_changes():
            result["content"] = self.content.to_dict(include_items=include_items)
        return result


def _resolve_body(body: Optional[dict], resolver: RefResolver) -> Optional[dict]:
    if body is None:
        return None
    resolved = resolver.resolve(body)
    if not isinstance(resolved, dict):
        raise MalformedDocumentError(
            f"requestBody must be an object, got {type(resolved).__name__}"
        )
    return resolved


def _content_of(body: dict) -> dict:
    content = body.get("content") or {}
    if not isinstance(content, dict):
        raise MalformedDocumentError("requestBody content must be an object")
    return content


def _media_type(media_type: Optional[dict]) -> dict:
    if media_type is None:
        return {}
    if not isinstance(media_type, dict):
        raise MalformedDocumentError(
            f"media type must be an object, got {type(media_type).__name__}"
        )
    return media_type
