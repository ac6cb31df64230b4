"""Generic added/removed/changed partitioning over keyed collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from .exceptions import DiffError

K = TypeVar("K")
V = TypeVar("V")
S = TypeVar("S")


@dataclass
class KeyedDiff(Generic[K, V, S]):
    """
    Partition of two keyed collections.

    `added` and `removed` carry the full head/base item; `changed` holds the
    sub-diff for keys present on both sides whose sub-diff reports changes.
    A key appears in at most one partition. Ordering of `added`/`removed`
    (and insertion order of `changed`) follows the source mappings.
    """
    added: list[tuple[K, V]] = field(default_factory=list)
    removed: list[tuple[K, V]] = field(default_factory=list)
    changed: dict[K, S] = field(default_factory=dict)

    def has_changes(self) -> bool:
        return bool(self.added) or bool(self.removed) or bool(self.changed)

    def added_keys(self) -> list[K]:
        return [key for key, _ in self.added]

    def removed_keys(self) -> list[K]:
        return [key for key, _ in self.removed]

    def to_dict(self, include_items: bool = True, keep_empty: bool = False) -> dict:
        result = {}
        if self.added or keep_empty:
            result["added"] = [_entry(k, v, include_items) for k, v in self.added]
        if self.removed or keep_empty:
            result["removed"] = [_entry(k, v, include_items) for k, v in self.removed]
        if self.changed or keep_empty:
            result["changed"] = {
                str(key): _render_diff(diff, include_items)
                for key, diff in self.changed.items()
            }
        return result


def diff_keyed(
    base: Mapping[K, V],
    head: Mapping[K, V],
    sub_diff: Callable[[V, V], S],
    factory: Optional[Callable[..., KeyedDiff]] = None
) -> KeyedDiff:
    """
    Compare two mappings keyed by a stable identifier.

    Args:
        base: The base collection
        head: The head collection
        sub_diff: Compares the base and head item of a shared key; any
            exception it raises propagates and no partial result is built
        factory: KeyedDiff subclass to construct (defaults to KeyedDiff)

    Returns:
        The populated keyed diff
    """
    added = []
    removed = []
    changed = {}

    for key, base_item in base.items():
        if key not in head:
            removed.append((key, base_item))
            continue

        try:
            item_diff = sub_diff(base_item, head[key])
        except DiffError as e:
            e.locate(str(key))
            raise
        if item_diff.has_changes():
            changed[key] = item_diff

    for key, head_item in head.items():
        if key not in base:
            added.append((key, head_item))

    factory = factory or KeyedDiff
    return factory(added=added, removed=removed, changed=changed)


def _render_key(key: Any) -> Any:
    if hasattr(key, "to_dict"):
        return key.to_dict()
    return key


def _entry(key: Any, item: Any, include_items: bool) -> dict:
    entry = {"key": _render_key(key)}
    if include_items:
        entry["item"] = item
    return entry


def _render_diff(diff: Any, include_items: bool) -> dict:
    return diff.to_dict(include_items=include_items)
