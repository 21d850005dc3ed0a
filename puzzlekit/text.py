"""Puzzles over strings and lists of words."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, combinations
from typing import Iterable, Sequence

_OPENERS = {"(": ")", "{": "}", "[": "]"}
_VOWELS = frozenset("aeiou")


def is_valid_parentheses(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closer,
    so text other than brackets makes the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _OPENERS[stack.pop()] != char:
            return False
    return not stack


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def simplify_path(path: str) -> str:
    """Return the canonical form of a Unix-style absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    return "/" + "/".join(parts)


def is_isomorphic(s: str, t: str) -> bool:
    """Return True if the characters of ``s`` map one-to-one onto those of ``t``."""
    if len(s) != len(t):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for source, target in zip(s, t):
        if source in mapping:
            if mapping[source] != target:
                return False
        elif target in used:
            return False
        else:
            mapping[source] = target
            used.add(target)
    return True


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``s`` and ``t`` hold the same characters the same number of times."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def word_pattern(pattern: str, s: str) -> bool:
    """Return True if the space-separated words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for letter, word in zip(pattern, words):
        if letter in mapping:
            if mapping[letter] != word:
                return False
        elif word in used:
            return False
        else:
            mapping[letter] = word
            used.add(word)
    return True


def can_construct_note(ransom_note: str, magazine: str) -> bool:
    """Return True if ``ransom_note`` can be cut out of the letters of ``magazine``."""
    return not (Counter(ransom_note) - Counter(magazine))


def word_subsets(words1: Iterable[str], words2: Iterable[str]) -> list[str]:
    """Return the words of ``words1`` that contain every word of ``words2`` as a multiset."""
    required: Counter[str] = Counter()
    for word in words2:
        required |= Counter(word)
    result = []
    for word in words1:
        counts = Counter(word)
        if all(counts[char] >= needed for char, needed in required.items()):
            result.append(word)
    return result


def can_construct_palindromes(s: str, k: int) -> bool:
    """Return True if all letters of ``s`` can form exactly ``k`` palindromes."""
    if len(s) < k:
        return False
    odd_counts = sum(1 for count in Counter(s).values() if count % 2)
    return odd_counts <= k


def string_matching(words: Sequence[str]) -> list[str]:
    """Return the distinct words that occur inside another word of the list."""
    found = [
        word
        for index, word in enumerate(words)
        if any(word in other for other_index, other in enumerate(words) if other_index != index)
    ]
    return list(dict.fromkeys(found))


def max_split_score(s: str) -> int:
    """Best count of zeros on the left plus ones on the right over non-empty splits."""
    if not s:
        raise ValueError("max_split_score needs a non-empty string")
    if not set(s) <= {"0", "1"}:
        raise ValueError("max_split_score expects a string of binary digits")
    left = int(s[0] == "0")
    right = s[1:].count("1")
    best = left + right
    for char in s[1:-1]:
        if char == "1":
            right -= 1
        else:
            left += 1
        best = max(best, left + right)
    return best


def count_palindromic_subsequences(s: str) -> int:
    """Count the distinct length-3 palindromes that are subsequences of ``s``."""
    total = 0
    for letter in set(s):
        first, last = s.find(letter), s.rfind(letter)
        total += len(set(s[first + 1 : last]))
    return total


def can_be_valid(s: str, locked: str) -> bool:
    """Return True if unlocked positions (``'0'``) can be changed to balance ``s``."""
    if len(s) != len(locked):
        raise ValueError("s and locked must have the same length")
    if len(s) % 2:
        return False

    opening = closing = wild = 0
    for char, lock in zip(s, locked):
        if lock == "0":
            wild += 1
        elif char == "(":
            opening += 1
        else:
            closing += 1
        if wild < closing - opening:
            return False

    opening = closing = wild = 0
    for char, lock in zip(reversed(s[1:]), reversed(locked[1:])):
        if lock == "0":
            wild += 1
        elif char == "(":
            opening += 1
        else:
            closing += 1
        if wild < opening - closing:
            return False
    return True


def prefix_count(words: Iterable[str], pref: str) -> int:
    """Count the words that start with ``pref``."""
    return sum(1 for word in words if word.startswith(pref))


def shift_letters(s: str, shifts: Iterable[Sequence[int]]) -> str:
    """Apply ``[start, end, direction]`` shifts; direction 1 moves forward, else back."""
    diff = [0] * (len(s) + 1)
    for start, end, direction in shifts:
        if not 0 <= start <= end < len(s):
            raise ValueError(f"shift range [{start}, {end}] is outside the string")
        step = 1 if direction == 1 else -1
        diff[start] += step
        diff[end + 1] -= step
    return "".join(
        chr(ord("a") + (ord(char) - ord("a") + offset) % 26)
        for char, offset in zip(s, accumulate(diff))
    )


def _starts_and_ends_with_vowel(word: str) -> bool:
    return word[:1] in _VOWELS and word[-1:] in _VOWELS


def vowel_strings(words: Sequence[str], queries: Iterable[Sequence[int]]) -> list[int]:
    """For each ``[left, right]`` query, count words in that range bounded by vowels."""
    prefix = [0, *accumulate(int(_starts_and_ends_with_vowel(word)) for word in words)]
    return [prefix[right + 1] - prefix[left] for left, right in queries]


def count_prefix_suffix_pairs(words: Sequence[str]) -> int:
    """Count pairs ``i < j`` where ``words[i]`` is both prefix and suffix of ``words[j]``."""
    return sum(
        1
        for first, second in combinations(words, 2)
        if second.startswith(first) and second.endswith(first)
    )


def minimum_length(s: str) -> int:
    """Shortest length reachable by removing matching pairs around a kept character."""
    return sum(2 if count % 2 == 0 else 1 for count in Counter(s).values())