"""Per-operation comparison."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .common import OptionalStringDiff, TagsDiff, put_optional
from .exceptions import MalformedDocumentError
from .parameters import ParametersDiff
from .refs import DiffContext
from .request_body import RequestBodyDiff


@dataclass
class OperationDiff:
    """
    Changes of one HTTP-method endpoint.

    Scalar sub-diffs and `request_body` are None when unchanged.
    """
    tags: TagsDiff = field(default_factory=TagsDiff)
    summary: Optional[OptionalStringDiff] = None
    description: Optional[OptionalStringDiff] = None
    operation_id: Optional[OptionalStringDiff] = None
    parameters: ParametersDiff = field(default_factory=ParametersDiff)
    request_body: Optional[RequestBodyDiff] = None
    # Tags and scalars only; parameters and request body left out of has_changes()
    legacy_rollup: bool = field(default=False, repr=False, compare=False)

    @classmethod
    def from_operations(
        cls,
        base: dict,
        head: dict,
        context: Optional[DiffContext] = None
    ) -> OperationDiff:
        """
        Diff two operation objects.

        Every field is compared independently. Tag and scalar comparisons
        cannot fail; parameter and request body comparisons raise DiffError
        on unresolvable references or malformed entries.
        """
        context = context or DiffContext()
        for operation in (base, head):
            if not isinstance(operation, dict):
                raise MalformedDocumentError(
                    f"operation must be an object, got {type(operation).__name__}"
                )

        tags = TagsDiff.from_tags(_tags_of(base), _tags_of(head))

        summary = OptionalStringDiff.from_strings(
            base.get("summary"), head.get("summary")
        )
        description = OptionalStringDiff.from_strings(
            base.get("description"), head.get("description")
        )
        operation_id = OptionalStringDiff.from_strings(
            base.get("operationId"), head.get("operationId")
        )

        parameters = ParametersDiff.from_params(
            base.get("parameters"), head.get("parameters"), context
        )

        request_body_diff = RequestBodyDiff.from_request_bodies(
            base.get("requestBody"), head.get("requestBody"), context
        )
        request_body = request_body_diff if request_body_diff.has_changes() else None

        return cls(
            tags=tags,
            summary=summary,
            description=description,
            operation_id=operation_id,
            parameters=parameters,
            request_body=request_body,
            legacy_rollup=context.config.legacy_operation_rollup,
        )

    def has_changes(self) -> bool:
        scalar_changes = (
            self.tags.has_changes()
            or self.summary is not None
            or self.description is not None
            or self.operation_id is not None
        )
        if self.legacy_rollup:
            return scalar_changes
        return (
            scalar_changes
            or self.parameters.has_changes()
            or self.request_body is not None
        )

    def to_dict(self, include_items: bool = True) -> dict:
        result = {}
        if self.tags.has_changes():
            result["tags"] = self.tags.to_dict()
        put_optional(result, "summary", self.summary)
        put_optional(result, "description", self.description)
        put_optional(result, "operationId", self.operation_id)
        if self.parameters.has_changes():
            result["parameters"] = self.parameters.to_dict(include_items=include_items)
        if self.request_body is not None:
            result["requestBody"] = self.request_body.to_dict(include_items=include_items)
        return result


def _tags_of(operation: dict) -> list[str]:
    tags = operation.get("tags")
    if tags is None:
        return []
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise MalformedDocumentError("operation tags must be a list of strings")
    return tags
