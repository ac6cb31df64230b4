"""Scalar and set comparisons shared by every diff report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class OptionalStringDiff:
    """A change in a single optional textual attribute."""
    from_: Optional[str]
    to: Optional[str]

    @classmethod
    def from_strings(
        cls,
        base: Optional[str],
        head: Optional[str]
    ) -> Optional[OptionalStringDiff]:
        """
        Compare two optional strings.

        Returns:
            None when both sides are equal (including both absent),
            otherwise the from/to pair
        """
        if base == head:
            return None
        return cls(from_=base, to=head)

    def to_dict(self) -> dict:
        return {"from": self.from_, "to": self.to}


@dataclass(frozen=True)
class ValueDiff:
    """A change in a non-textual attribute (flags, whole schema objects)."""
    from_: Any
    to: Any

    @classmethod
    def from_values(cls, base: Any, head: Any) -> Optional[ValueDiff]:
        if base == head:
            return None
        return cls(from_=base, to=head)

    def to_dict(self) -> dict:
        return {"from": self.from_, "to": self.to}


@dataclass(frozen=True)
class TagsDiff:
    """
    Additions and removals between two collections of string labels.

    `added` keeps head order and `removed` keeps base order. Membership is
    tested per element, so duplicates inside one input are not collapsed.
    """
    added: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)

    @classmethod
    def from_tags(cls, base: Sequence[str], head: Sequence[str]) -> TagsDiff:
        base_set = set(base)
        head_set = set(head)
        added = [item for item in head if item not in base_set]
        removed = [item for item in base if item not in head_set]
        return cls(added=added, removed=removed)

    def has_changes(self) -> bool:
        return bool(self.added) or bool(self.removed)

    def to_dict(self) -> dict:
        result = {}
        if self.added:
            result["added"] = list(self.added)
        if self.removed:
            result["removed"] = list(self.removed)
        return result


def put_optional(result: dict, key: str, diff: Any) -> None:
    """Add a sub-diff to a serialized report only when it is present."""
    if diff is not None:
        result[key] = diff.to_dict()
