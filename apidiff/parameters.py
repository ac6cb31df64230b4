"""Parameter comparison keyed by name and location."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Optional

from .common import OptionalStringDiff, ValueDiff, put_optional
from .exceptions import MalformedDocumentError
from .keyed import KeyedDiff, diff_keyed
from .refs import DiffContext, RefResolver


class ParameterKey(NamedTuple):
    """Identity of a parameter within an operation."""
    name: str
    location: str

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"

    def to_dict(self) -> dict:
        return {"name": self.name, "in": self.location}


@dataclass
class ParameterDiff:
    """Field-level changes of one parameter present in both documents."""
    description: Optional[OptionalStringDiff] = None
    required: Optional[ValueDiff] = None
    deprecated: Optional[ValueDiff] = None
    allow_empty_value: Optional[ValueDiff] = None
    style: Optional[ValueDiff] = None
    explode: Optional[ValueDiff] = None
    schema: Optional[ValueDiff] = None

    @classmethod
    def from_parameters(
        cls,
        base: dict,
        head: dict,
        context: DiffContext
    ) -> ParameterDiff:
        base_schema = context.base.resolve_deep(base.get("schema"))
        head_schema = context.head.resolve_deep(head.get("schema"))

        return cls(
            description=OptionalStringDiff.from_strings(
                base.get("description"), head.get("description")
            ),
            required=ValueDiff.from_values(
                bool(base.get("required", False)), bool(head.get("required", False))
            ),
            deprecated=ValueDiff.from_values(
                bool(base.get("deprecated", False)), bool(head.get("deprecated", False))
            ),
            allow_empty_value=ValueDiff.from_values(
                bool(base.get("allowEmptyValue", False)),
                bool(head.get("allowEmptyValue", False)),
            ),
            style=ValueDiff.from_values(base.get("style"), head.get("style")),
            explode=ValueDiff.from_values(base.get("explode"), head.get("explode")),
            schema=ValueDiff.from_values(base_schema, head_schema),
        )

    def has_changes(self) -> bool:
        return any(
            diff is not None
            for diff in (
                self.description,
                self.required,
                self.deprecated,
                self.allow_empty_value,
                self.style,
                self.explode,
                self.schema,
            )
        )

    def to_dict(self, include_items: bool = True) -> dict:
        result = {}
        put_optional(result, "description", self.description)
        put_optional(result, "required", self.required)
        put_optional(result, "deprecated", self.deprecated)
        put_optional(result, "allowEmptyValue", self.allow_empty_value)
        put_optional(result, "style", self.style)
        put_optional(result, "explode", self.explode)
        put_optional(result, "schema", self.schema)
        return result


class ParametersDiff(KeyedDiff[ParameterKey, dict, ParameterDiff]):
    """Added, removed and changed parameters of one operation."""

    @classmethod
    def from_params(
        cls,
        base: Optional[list],
        head: Optional[list],
        context: Optional[DiffContext] = None
    ) -> ParametersDiff:
        """
        Diff two parameter lists.

        Raises:
            DiffError: when a parameter reference cannot be resolved or an
                entry lacks its name or location
        """
        context = context or DiffContext()
        base_params = _index_parameters(base, context.base)
        head_params = _index_parameters(head, context.head)

        return diff_keyed(
            base_params,
            head_params,
            lambda b, h: ParameterDiff.from_parameters(b, h, context),
            factory=cls,
        )


def _index_parameters(
    parameters: Optional[list],
    resolver: RefResolver
) -> dict[ParameterKey, dict]:
    """Resolve a parameter list into an ordered mapping; later duplicates win."""
    if parameters is None:
        return {}
    if not isinstance(parameters, list):
        raise MalformedDocumentError(
            f"parameters must be a list, got {type(parameters).__name__}"
        )

    indexed: dict[ParameterKey, dict] = {}
    for entry in parameters:
        parameter: Any = resolver.resolve(entry)
        if not isinstance(parameter, dict):
            raise MalformedDocumentError(
                f"parameter must be an object, got {type(parameter).__name__}"
            )
        name = parameter.get("name")
        location = parameter.get("in")
        if not name or not location:
            raise MalformedDocumentError("parameter is missing 'name' or 'in'")
        if not isinstance(name, str) or not isinstance(location, str):
            raise MalformedDocumentError("parameter 'name' and 'in' must be strings")
        indexed[ParameterKey(name, location)] = parameter
    return indexed
