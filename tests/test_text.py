from itertools import combinations

import pytest

from puzzlekit.text import (
    can_be_valid,
    can_construct_note,
    can_construct_palindromes,
    count_palindromic_subsequences,
    count_prefix_suffix_pairs,
    group_anagrams,
    is_anagram,
    is_isomorphic,
    is_valid_parentheses,
    max_split_score,
    minimum_length,
    prefix_count,
    shift_letters,
    simplify_path,
    string_matching,
    vowel_strings,
    word_pattern,
    word_subsets,
)


def test_valid_parentheses_accepts_balanced():
    assert is_valid_parentheses("()[]{}")
    assert is_valid_parentheses("{[()]}")
    assert is_valid_parentheses("")


def test_valid_parentheses_rejects_unbalanced():
    assert not is_valid_parentheses("(]")
    assert not is_valid_parentheses("((")
    assert not is_valid_parentheses(")")
    assert not is_valid_parentheses("a")


def test_group_anagrams_keeps_every_word_once():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(word for group in groups for word in group) == sorted(words)
    assert ["eat", "tea", "ate"] in groups
    assert ["bat"] in groups
    for group in groups:
        assert len({"".join(sorted(word)) for word in group}) == 1


def test_simplify_path_examples():
    assert simplify_path("/home/") == "/home"
    assert simplify_path("/../") == "/"
    assert simplify_path("/home//foo/") == simplify_path("/home/foo")
    assert simplify_path("/a/./b/../../c/") == simplify_path("/c")


@pytest.mark.parametrize("path", ["/a//b/./c/..", "/...", "/x/../../y/", "/"])
def test_simplify_path_is_idempotent(path):
    once = simplify_path(path)
    assert simplify_path(once) == once
    assert once.startswith("/")


def test_isomorphic():
    assert is_isomorphic("egg", "add")
    assert is_isomorphic("paper", "title")
    assert not is_isomorphic("foo", "bar")
    assert not is_isomorphic("badc", "baba")
    assert not is_isomorphic("ab", "abc")


def test_anagram():
    assert is_anagram("anagram", "nagaram")
    assert not is_anagram("rat", "car")
    assert not is_anagram("ab", "abb")
    assert is_anagram("listen", "listen"[::-1])


def test_word_pattern():
    assert word_pattern("abba", "dog cat cat dog")
    assert not word_pattern("abba", "dog cat cat fish")
    assert not word_pattern("aaaa", "dog cat cat dog")
    assert not word_pattern("abba", "dog dog dog dog")
    assert not word_pattern("ab", "dog")
    assert word_pattern("a", "dog")


def test_can_construct_note():
    assert not can_construct_note("a", "b")
    assert not can_construct_note("aa", "ab")
    assert can_construct_note("aa", "aab")
    assert can_construct_note("", "")


def test_word_subsets():
    words1 = ["amazon", "apple", "facebook", "google", "leetcode"]
    assert word_subsets(words1, ["e", "o"]) == ["facebook", "google", "leetcode"]
    assert word_subsets(words1, ["l", "e"]) == ["apple", "google", "leetcode"]
    assert word_subsets(words1, []) == words1
    assert word_subsets(words1, ["oo"]) == ["facebook", "google"]


def test_can_construct_palindromes():
    assert can_construct_palindromes("annabelle", 2)
    assert not can_construct_palindromes("leetcode", 3)
    assert can_construct_palindromes("true", 4)
    assert not can_construct_palindromes("ab", 3)


def test_string_matching():
    assert sorted(string_matching(["mass", "as", "hero", "superhero"])) == ["as", "hero"]
    assert sorted(string_matching(["leetcode", "et", "code"])) == ["code", "et"]
    assert string_matching(["blue", "green", "bu"]) == []
    assert string_matching(["a", "a"]) == ["a"]


def test_max_split_score():
    assert max_split_score("011101") == 5
    assert max_split_score("00111") == len("00111")
    assert max_split_score("1111") == len("1111") - 1


def test_max_split_score_rejects_bad_input():
    with pytest.raises(ValueError):
        max_split_score("")
    with pytest.raises(ValueError):
        max_split_score("0120")


def test_count_palindromic_subsequences_relations():
    assert count_palindromic_subsequences("abc") == count_palindromic_subsequences("")
    assert count_palindromic_subsequences("aaaa") == count_palindromic_subsequences("aaa")
    assert count_palindromic_subsequences("aabca") == count_palindromic_subsequences("acbaa")
    assert count_palindromic_subsequences("abcba") > count_palindromic_subsequences("aaa")


def test_can_be_valid():
    assert can_be_valid("))()))", "010100")
    assert can_be_valid("()()", "0000")
    assert can_be_valid(")(", "00")
    assert not can_be_valid(")", "0")
    assert not can_be_valid("((", "11")


def test_can_be_valid_length_mismatch():
    with pytest.raises(ValueError):
        can_be_valid("()", "1")


def test_prefix_count():
    words = ["pay", "attention", "practice", "attend"]
    assert prefix_count(words, "") == len(words)
    assert prefix_count(words + words, "at") == 2 * prefix_count(words, "at")
    assert prefix_count(["leetcode", "win"], "code") == prefix_count([], "code")


def test_shift_letters_example():
    assert shift_letters("abc", [[0, 1, 0], [1, 2, 1], [0, 2, 1]]) == "ace"


def test_shift_letters_round_trips():
    text = "puzzlez"
    forward = shift_letters(text, [[1, 5, 1], [0, 6, 1]])
    assert shift_letters(forward, [[1, 5, 0], [0, 6, 0]]) == text
    assert shift_letters(text, [[0, len(text) - 1, 1]] * 26) == text
    assert shift_letters(text, []) == text


def test_shift_letters_bad_range():
    with pytest.raises(ValueError):
        shift_letters("abc", [[1, 3, 1]])


def test_vowel_strings_relations():
    words = ["aba", "bcb", "ece", "aa", "e"]
    singles = vowel_strings(words, [[i, i] for i in range(len(words))])
    assert vowel_strings(words, [[0, len(words) - 1]]) == [sum(singles)]
    left, right = vowel_strings(words, [[0, 1], [2, 4]])
    assert vowel_strings(words, [[0, 4]]) == [left + right]
    all_vowel = ["a", "e", "io"]
    assert vowel_strings(all_vowel, [[0, 2]]) == [len(all_vowel)]


def test_count_prefix_suffix_pairs_relations():
    words = ["a", "a", "a"]
    assert count_prefix_suffix_pairs(words) == len(list(combinations(words, 2)))
    assert count_prefix_suffix_pairs(["abab", "ab"]) == count_prefix_suffix_pairs([])
    assert count_prefix_suffix_pairs(["pa", "papa", "ma", "mama"]) == (
        count_prefix_suffix_pairs(["pa", "papa"]) + count_prefix_suffix_pairs(["ma", "mama"])
    )


def test_minimum_length_relations():
    assert minimum_length("aa") == len("aa")
    assert minimum_length("abc") == len("abc")
    assert minimum_length("aaa") == len("a")
    text = "abaacbcbb"
    assert minimum_length(text) <= len(text)
    assert minimum_length(text) == minimum_length(text[::-1])