# =============================================================================
# jsonrift/diff/comparator.py
# Recursive structural comparison of two JsonValue trees.
# =============================================================================
#
# ALGORITHM
# ---------
# For two values in the same comparison context:
#   1. both objects                 -> map reconciliation
#   2. both arrays                  -> sequence reconciliation
#      a reconciliation with no difference collapses to EQUAL (no sub-items),
#      otherwise the pair is DIFF holding the nested result
#   3. scalars equal by values_equal -> EQUAL
#   4. anything else                -> NOT_EQUAL with both raw values
#
# Map reconciliation walks A's sorted keys (REMOVED or paired), then B's
# sorted keys (ADDED), then sorts the combined list by key.
#
# Sequence reconciliation pairs positions 0..min(len)-1 and marks the tail
# of the longer side REMOVED (A longer) or ADDED (B longer). No shifted
# alignment is attempted: an insertion mid-array cascades from that point.
#
# Top level: object/object and array/array produce a result shaped like the
# inputs. Every other pairing yields an array-shaped result holding one item.
#
# Each nesting level costs one stack frame (_reconcile). Every node is
# visited once. Below the recursion limit it never raises for data. No I/O.
# No logging.
# =============================================================================

from __future__ import annotations

from typing import List, Tuple

from jsonrift.core.value import JsonArray, JsonObject, JsonValue, ValueKind, values_equal
from jsonrift.diff.models import DiffItem, DiffResult

_Pair = Tuple[str, JsonValue, JsonValue]
_Side = Tuple[str, JsonValue]

_CONTAINERS = (ValueKind.OBJECT, ValueKind.ARRAY)


def _align_maps(
    a: JsonObject,
    b: JsonObject,
) -> Tuple[List[_Pair], List[_Side], List[_Side]]:
    pairs:   List[_Pair] = []
    removed: List[_Side] = []
    for key in a.sorted_keys():
        if key in b:
            pairs.append((key, a[key], b[key]))
        else:
            removed.append((key, a[key]))
    added = [(key, b[key]) for key in b.sorted_keys() if key not in a]
    return pairs, removed, added


def _align_sequences(
    a: JsonArray,
    b: JsonArray,
) -> Tuple[List[_Pair], List[_Side], List[_Side]]:
    common = min(len(a), len(b))
    pairs = [("", a[i], b[i]) for i in range(common)]
    removed = [("", value_a) for value_a in a.items[common:]]
    added = [("", value_b) for value_b in b.items[common:]]
    return pairs, removed, added


def _reconcile(a: JsonValue, b: JsonValue) -> DiffResult:
    """
    Reconcile two containers of the same kind into one DiffResult level.

    Nested container pairs recurse directly from the loop below.
    """
    is_array = a.kind is ValueKind.ARRAY
    if is_array:
        pairs, removed, added = _align_sequences(a, b)  # type: ignore[arg-type]
    else:
        pairs, removed, added = _align_maps(a, b)  # type: ignore[arg-type]

    items: List[DiffItem] = []
    for key, value_a, value_b in pairs:
        if value_a.kind is value_b.kind and value_a.kind in _CONTAINERS:
            sub_diff = _reconcile(value_a, value_b)
            if sub_diff.has_diff:
                items.append(DiffItem.nested(key, sub_diff))
            else:
                items.append(DiffItem.equal(key, value_a))
        elif values_equal(value_a, value_b):
            items.append(DiffItem.equal(key, value_a))
        else:
            items.append(DiffItem.not_equal(key, value_a, value_b))

    for key, value_a in removed:
        items.append(DiffItem.removed(key, value_a))
    for key, value_b in added:
        items.append(DiffItem.added(key, value_b))

    return DiffResult.from_items(items, is_array=is_array, sort=not is_array)


def compare(a: JsonValue, b: JsonValue) -> DiffResult:
    """
    Compare two generic values and return the diff tree.

    compare(x, x).has_diff is False for every value x. Detection is
    symmetric: compare(a, b).has_diff == compare(b, a).has_diff.

    Python's recursion limit bounds the nesting depth; documents nested
    deeper than that raise RecursionError.
    """
    if a.kind is b.kind and a.kind in _CONTAINERS:
        return _reconcile(a, b)
    return _reconcile(JsonArray((a,)), JsonArray((b,)))
