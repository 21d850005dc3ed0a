"""Puzzles over lists of integers."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import accumulate
from operator import xor
from typing import Iterable, Sequence


def _xor_all(values: Iterable[int]) -> int:
    return reduce(xor, values, 0)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return every index whose value has a partner elsewhere summing to ``target``."""
    counts = Counter(nums)
    return [
        index
        for index, value in enumerate(nums)
        if (target - value) in counts and (target - value != value or counts[value] > 1)
    ]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the decimal digits of the number ``digits`` plus one."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] != 9:
            result[position] += 1
            return result
        result[position] = 0
    if result:
        result.insert(0, 1)
    return result


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value + 1
        while end in values:
            end += 1
        longest = max(longest, end - value)
    return longest


def single_number(nums: Iterable[int]) -> int:
    """Return the value left over when every other value appears twice."""
    return _xor_all(nums)


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return True if two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def _format_range(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}->{end}"


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Describe runs of consecutive values as ``"a->b"`` or ``"a"``."""
    if not nums:
        return []
    ranges = []
    start = end = nums[0]
    for value in nums[1:]:
        if value - 1 == end:
            end = value
        else:
            ranges.append(_format_range(start, end))
            start = end = value
    ranges.append(_format_range(start, end))
    return ranges


def min_operations(boxes: str) -> list[int]:
    """For each box, the moves needed to gather every ball (``'1'``) into it."""
    right_sum = sum(index for index, box in enumerate(boxes) if box == "1")
    right_count = boxes.count("1")
    left_sum = left_count = 0
    answer = []
    for index, box in enumerate(boxes):
        if box == "1":
            right_sum -= index
            right_count -= 1
        answer.append(right_sum - index * right_count + index * left_count - left_sum)
        if box == "1":
            left_sum += index
            left_count += 1
    return answer


def ways_to_split_array(nums: Sequence[int]) -> int:
    """Count split points where the left sum is at least the right sum."""
    total = sum(nums)
    return sum(1 for prefix in accumulate(nums[:-1]) if prefix >= total - prefix)


def xor_all_pairings(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the XOR of ``a ^ b`` over every pair drawn from the two lists."""
    result = 0
    if len(nums1) % 2:
        result ^= _xor_all(nums2)
    if len(nums2) % 2:
        result ^= _xor_all(nums1)
    return result


def prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, count prefix items of ``a`` found in the same prefix of ``b``."""
    seen_in_b: set[int] = set()
    result = []
    for length, (_, item_b) in enumerate(zip(a, b, strict=True), start=1):
        seen_in_b.add(item_b)
        result.append(sum(1 for item in a[:length] if item in seen_in_b))
    return result


def valid_array_exists(derived: Iterable[int]) -> bool:
    """Return True if ``derived`` is the neighbour XOR of some binary circular array."""
    return _xor_all(derived) == 0