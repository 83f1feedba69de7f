"""Depth-based multikey quicksort used during trie construction.

Elements are sequences of byte values: they support ``len()`` and integer
indexing returning an ``int`` in 0..255 (``bytes`` qualifies).
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence

_INSERTION_SORT_THRESHOLD = 16


def get_label(unit: Sequence[int], depth: int) -> int:
    """Return the byte at ``depth``, or -1 past the end of ``unit``."""
    return unit[depth] if depth < len(unit) else -1


def median(a: Sequence[int], b: Sequence[int], c: Sequence[int], depth: int) -> int:
    """Return the median of the three labels at ``depth``."""
    x = get_label(a, depth)
    y = get_label(b, depth)
    z = get_label(c, depth)
    if x < y:
        if y < z:
            return y
        if x < z:
            return z
        return x
    if x < z:
        return x
    if y < z:
        return z
    return y


def compare(lhs: Sequence[int], rhs: Sequence[int], depth: int) -> int:
    """Compare two elements from ``depth`` on; negative, zero or positive."""
    lhs_len = len(lhs)
    rhs_len = len(rhs)
    for i in range(depth, lhs_len):
        if i == rhs_len:
            return 1
        left, right = lhs[i], rhs[i]
        if left != right:
            return left - right
    if lhs_len == rhs_len:
        return 0
    return -1 if lhs_len < rhs_len else 1


def _insertion_sort(data: MutableSequence[Any], lo: int, hi: int, depth: int) -> int:
    if hi <= lo:
        return 0
    count = 1
    for i in range(lo + 1, hi):
        result = 0
        for j in range(i, lo, -1):
            result = compare(data[j - 1], data[j], depth)
            if result <= 0:
                break
            data[j - 1], data[j] = data[j], data[j - 1]
        if result != 0:
            count += 1
    return count


def insertion_sort(data: MutableSequence[Any], depth: int) -> int:
    """Sort ``data`` in place by insertion; return the number of distinct elements."""
    return _insertion_sort(data, 0, len(data), depth)


def _sort(data: MutableSequence[Any], l: int, r: int, depth: int) -> int:
    count = 0
    while r - l > _INSERTION_SORT_THRESHOLD:
        pl, pr = l, r
        pivot_l, pivot_r = l, r
        pivot = median(data[l], data[l + (r - l) // 2], data[r - 1], depth)

        while True:
            while pl < pr:
                label = get_label(data[pl], depth)
                if label > pivot:
                    break
                if label == pivot:
                    data[pl], data[pivot_l] = data[pivot_l], data[pl]
                    pivot_l += 1
                pl += 1
            while pl < pr:
                pr -= 1
                label = get_label(data[pr], depth)
                if label < pivot:
                    break
                if label == pivot:
                    pivot_r -= 1
                    data[pr], data[pivot_r] = data[pivot_r], data[pr]
            if pl >= pr:
                break
            data[pl], data[pr] = data[pr], data[pl]
            pl += 1

        while pivot_l > l:
            pivot_l -= 1
            pl -= 1
            data[pivot_l], data[pl] = data[pl], data[pivot_l]
        while pivot_r < r:
            data[pivot_r], data[pr] = data[pr], data[pivot_r]
            pivot_r += 1
            pr += 1

        middle = pr - pl
        if (pl - l) > middle or (r - pr) > middle:
            if middle == 1:
                count += 1
            elif middle > 1:
                count += 1 if pivot == -1 else _sort(data, pl, pr, depth + 1)

            if (pl - l) < (r - pr):
                if pl - l == 1:
                    count += 1
                elif pl - l > 1:
                    count += _sort(data, l, pl, depth)
                l = pr
            else:
                if r - pr == 1:
                    count += 1
                elif r - pr > 1:
                    count += _sort(data, pr, r, depth)
                r = pl
        else:
            if pl - l == 1:
                count += 1
            elif pl - l > 1:
                count += _sort(data, l, pl, depth)

            if r - pr == 1:
                count += 1
            elif r - pr > 1:
                count += _sort(data, pr, r, depth)

            l, r = pl, pr
            if middle == 1:
                count += 1
            elif middle > 1:
                if pivot == -1:
                    l = r
                    count += 1
                else:
                    depth += 1

    if r - l > 1:
        count += _insertion_sort(data, l, r, depth)
    elif r - l == 1:
        count += 1
    return count


def sort(data: MutableSequence[Any]) -> int:
    """Sort ``data`` in place; return the number of distinct elements."""
    if len(data) == 1:
        return 1
    return _sort(data, 0, len(data), 0)