# jsonrift/diff/models.py
# DiffItem / DiffResult data classes produced by the comparator.
#
# A DiffResult is built once, from a complete item list, and is frozen from
# then on. has_diff is derived from the items at construction time; callers
# never set it directly except through DiffResult.failure().

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from operator import attrgetter
from typing import Iterable, Optional, Tuple, Union

from jsonrift.core.exceptions import JsonDiffError
from jsonrift.core.value import JsonValue


@unique
class Resolution(str, Enum):
    """Outcome of comparing a single key or array position."""
    EQUAL     = "EQUAL"      # both sides equal; value_a only
    NOT_EQUAL = "NOT_EQUAL"  # scalars or kinds differ; value_a and value_b
    ADDED     = "ADDED"      # only on the right; value_b only
    REMOVED   = "REMOVED"    # only on the left; value_a only
    DIFF      = "DIFF"       # same container kind, contents differ; value_b is a DiffResult


@unique
class ComparisonStatus(str, Enum):
    """Top-level verdict of a comparison."""
    EQUAL     = "EQUAL"
    DIFFERENT = "DIFFERENT"
    ERROR     = "ERROR"


@dataclass(frozen=True)
class DiffItem:
    """
    One row of comparison output.

    key is empty for array positions; position is implicit in item order.
    For DIFF items value_b holds the nested DiffResult, which records
    whether that level is an array or an object.
    """
    key:        str
    resolution: Resolution
    value_a:    Optional[JsonValue] = None
    value_b:    Union[JsonValue, "DiffResult", None] = None

    @classmethod
    def equal(cls, key: str, value: JsonValue) -> "DiffItem":
        return cls(key=key, resolution=Resolution.EQUAL, value_a=value)

    @classmethod
    def not_equal(cls, key: str, value_a: JsonValue, value_b: JsonValue) -> "DiffItem":
        return cls(key=key, resolution=Resolution.NOT_EQUAL, value_a=value_a, value_b=value_b)

    @classmethod
    def added(cls, key: str, value: JsonValue) -> "DiffItem":
        return cls(key=key, resolution=Resolution.ADDED, value_b=value)

    @classmethod
    def removed(cls, key: str, value: JsonValue) -> "DiffItem":
        return cls(key=key, resolution=Resolution.REMOVED, value_a=value)

    @classmethod
    def nested(cls, key: str, sub_diff: "DiffResult") -> "DiffItem":
        return cls(key=key, resolution=Resolution.DIFF, value_b=sub_diff)

    @property
    def sub_diff(self) -> Optional["DiffResult"]:
        """The nested DiffResult of a DIFF item, None for every other resolution."""
        if self.resolution is not Resolution.DIFF:
            return None
        return self.value_b  # type: ignore[return-value]


@dataclass(frozen=True)
class DiffResult:
    """
    Ordered collection of DiffItems for one container level.

    Fields:
      items     -- tuple of DiffItem, in key order (objects) or index order (arrays).
      is_array  -- True iff this level compared two arrays.
      has_diff  -- True iff any item is not EQUAL, or error is set.
      error     -- the JsonDiffError that aborted the comparison, if any.
    """
    items:    Tuple[DiffItem, ...] = ()
    is_array: bool = False
    has_diff: bool = False
    error:    Optional[JsonDiffError] = None

    @classmethod
    def from_items(
        cls,
        items:    Iterable[DiffItem],
        is_array: bool = False,
        sort:     bool = False,
    ) -> "DiffResult":
        """
        Build a result from a finished item list. With sort=True the items
        are ordered by key, ascending.
        """
        items = list(items)
        if sort:
            items.sort(key=attrgetter("key"))
        has_diff = any(item.resolution is not Resolution.EQUAL for item in items)
        return cls(items=tuple(items), is_array=is_array, has_diff=has_diff)

    @classmethod
    def failure(cls, error: JsonDiffError) -> "DiffResult":
        """A comparison that could not run. Always has_diff=True."""
        return cls(items=(), is_array=False, has_diff=True, error=error)

    @property
    def is_equal(self) -> bool:
        return not self.has_diff

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def status(self) -> ComparisonStatus:
        if self.error is not None:
            return ComparisonStatus.ERROR
        if self.has_diff:
            return ComparisonStatus.DIFFERENT
        return ComparisonStatus.EQUAL

    def keys(self) -> Tuple[str, ...]:
        return tuple(item.key for item in self.items)
