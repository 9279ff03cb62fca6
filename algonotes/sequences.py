"""Searching, ordering and windowing over sequences of integers."""

from __future__ import annotations

import functools
from bisect import bisect_left, insort
from collections.abc import Callable, Sequence
from itertools import islice


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in nums."""
    present = set(nums)
    longest = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        longest = max(longest, end - start + 1)
    return longest


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Return the 1-based positions of two entries of a sorted sequence summing to target."""
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            return low + 1, high + 1
    raise ValueError(f"no two entries sum to {target}")


def _concatenation_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange non-negative integers so their concatenation is as large as possible."""
    if not nums:
        return ""
    parts = sorted(
        (str(n) for n in nums), key=functools.cmp_to_key(_concatenation_order)
    )
    if parts[0] == "0":
        return "0"
    return "".join(parts)


def count_smaller(nums: Sequence[int]) -> list[int]:
    """For each entry, count the strictly smaller entries to its right."""
    seen: list[int] = []
    counts: list[int] = []
    for value in reversed(nums):
        counts.append(bisect_left(seen, value))
        insort(seen, value)
    counts.reverse()
    return counts


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last position (greedy, linear)."""
    size = len(nums)
    if size <= 1:
        return 0
    if nums[0] >= size - 1:
        return 1
    furthest_marker = nums[0]
    next_far_mark = -1
    jumps = 1
    for position, reach in enumerate(islice(nums, 1, None), start=1):
        max_jump = position + reach
        if max_jump >= size - 1:
            return jumps + 1
        next_far_mark = max(next_far_mark, max_jump)
        if position == furthest_marker:
            jumps += 1
            furthest_marker = next_far_mark
    return jumps


def min_jumps_dp(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first to the last position (dynamic programming)."""
    size = len(nums)
    if size <= 1:
        return 0
    jumps: list[int | None] = [None] * size
    jumps[0] = 0
    for position, reach in enumerate(nums):
        taken = jumps[position]
        if taken is None:
            continue
        if position + reach >= size - 1:
            return taken + 1
        for target in range(position + 1, position + reach + 1):
            current = jumps[target]
            if current is None or taken + 1 < current:
                jumps[target] = taken + 1
    raise ValueError("the last position cannot be reached")


def _median(window: list[int]) -> float:
    mid = len(window) // 2
    if len(window) % 2:
        return float(window[mid])
    return window[mid - 1] / 2 + window[mid] / 2


def median_sliding_window(nums: Sequence[int], k: int) -> list[float]:
    """Return the median of every window of k consecutive entries."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"window size {k} does not fit a sequence of {len(nums)}")
    if k == 1:
        return [float(n) for n in nums]
    window = sorted(nums[:k])
    medians = [_median(window)]
    for leaving, entering in zip(nums, islice(nums, k, None)):
        del window[bisect_left(window, leaving)]
        insort(window, entering)
        medians.append(_median(window))
    return medians


def dominant_index(nums: Sequence[int]) -> int:
    """Return the index of the largest entry if it is at least twice every other, else -1."""
    if len(nums) < 2:
        return 0
    if nums[0] > nums[1]:
        largest, second = 0, 1
    else:
        largest, second = 1, 0
    for index, value in enumerate(islice(nums, 2, None), start=2):
        if value > nums[second]:
            if value < nums[largest]:
                second = index
            else:
                second, largest = largest, index
    return largest if nums[largest] >= 2 * nums[second] else -1


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    red_end = white_end = 0
    for blue_end in range(len(nums)):
        value = nums[blue_end]
        if value == 0:
            nums[red_end], nums[blue_end] = nums[blue_end], nums[red_end]
            if red_end != white_end:
                nums[white_end], nums[blue_end] = nums[blue_end], nums[white_end]
            white_end += 1
            red_end += 1
        elif value == 1:
            nums[white_end], nums[blue_end] = nums[blue_end], nums[white_end]
            white_end += 1


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """Binary-search versions 1..n for the first one that is_bad reports."""
    low, high = 1, n
    while low < high:
        mid = low + (high - low) // 2
        if is_bad(mid):
            high = mid
        else:
            low = mid + 1
    return low