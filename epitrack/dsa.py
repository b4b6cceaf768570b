"""
DSA utilities
=============

Small explicit algorithm primitives used by epitrack.

- Merge Sort (stable, O(n log n)): records are sorted by day ordinal and
  countries by total deaths. Stability matters for both: same-day records keep
  their feed order and tied countries keep their first-seen order.
- Prefix sums: O(1) window sums for the rolling average.
"""

from __future__ import annotations
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

def merge_sort(arr: List[T], key: Callable[[T], object] = lambda x: x, reverse: bool = False) -> List[T]:
    """Stable merge sort (returns a new list)."""
    if len(arr) <= 1:
        return arr[:]
    mid = len(arr) // 2
    left = merge_sort(arr[:mid], key=key, reverse=reverse)
    right = merge_sort(arr[mid:], key=key, reverse=reverse)
    return _merge(left, right, key=key, reverse=reverse)

def _merge(left: List[T], right: List[T], key: Callable[[T], object], reverse: bool) -> List[T]:
    out: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = key(left[i]), key(right[j])
        # ties always go left, in both directions
        take_left = (a >= b) if reverse else (a <= b)
        if take_left:
            out.append(left[i]); i += 1
        else:
            out.append(right[j]); j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out

def prefix_sums(values: Sequence[int]) -> List[int]:
    """`out[k]` is the sum of `values[:k]` (so `len(out) == len(values) + 1`)."""
    out = [0]
    for v in values:
        out.append(out[-1] + v)
    return out
