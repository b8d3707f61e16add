"""
DSA utilities
=============

Small, explicit Data Structures & Algorithms primitives used by CLIMA.

Included:
- Merge Sort (stable, O(n log n))
- First-occurrence-by-key scan (one pass, O(n) with a hash set)
"""

from __future__ import annotations
from typing import Callable, Hashable, Iterable, List, TypeVar

T = TypeVar("T")

def merge_sort(arr: List[T], key: Callable[[T], object] = lambda x: x) -> List[T]:
    """Stable merge sort (ascending). Always returns a new list."""
    if len(arr) <= 1:
        return arr[:]
    mid = len(arr) // 2
    left = merge_sort(arr[:mid], key=key)
    right = merge_sort(arr[mid:], key=key)
    return _merge(left, right, key=key)

def _merge(left: List[T], right: List[T], key: Callable[[T], object]) -> List[T]:
    out: List[T] = []
    # i and j are pointers into each sorted list
    i = j = 0
    while i < len(left) and j < len(right):
        # ties go left, which keeps the sort stable
        if not (key(right[j]) < key(left[i])):
            out.append(left[i]); i += 1
        else:
            out.append(right[j]); j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out

def first_by_key(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Keep the first item seen for every distinct key, in scan order."""
    seen = set()
    out: List[T] = []
    for item in items:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        out.append(item)
    return out
