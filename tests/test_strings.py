import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.strings import (
    check_inclusion,
    find_and_replace_pattern,
    full_justify,
    is_match,
    min_distance,
    min_window,
    num_decodings,
    reorder_log_files,
)

lower = st.text(alphabet="abcde", max_size=12)


@pytest.mark.parametrize(
    "text, pattern, expected",
    [
        ("mississippi", "m??*ss*?i*pi", False),
        ("aa", "a", False),
        ("aa", "a*", True),
        ("cb", "?a", False),
        ("abceb", "*a*b", True),
        ("acdcb", "a*c?b", False),
        ("mississippi", "mis*is*p*?", True),
        ("abc", "bc", False),
        ("abcd", "abcd", True),
        ("ac", "?c", True),
        ("ac", "a?d", False),
        ("abc", "*", True),
        ("abc", "a*", True),
        ("abc", "*d", False),
        ("abc", "?*", True),
        ("abc", ".*.", False),
        ("abc", "*b*", True),
        ("", "ad", False),
        ("as", "", False),
        ("", "", True),
        ("", "****", True),
        ("abc", "***", True),
        ("a", "a*", True),
        ("a", "a***", True),
        ("a", "?*", True),
        ("aa", "aa", True),
        ("aaa", "aa", False),
        ("aa", "*", True),
        ("ab", "?*", True),
        ("aab", "c*a*b", False),
    ],
)
def test_is_match_cases(text, pattern, expected):
    assert is_match(text, pattern) is expected


@given(lower)
def test_is_match_text_matches_itself_and_star(text):
    assert is_match(text, text)
    assert is_match(text, "*")
    assert is_match(text, "?" * len(text))


@given(lower)
def test_is_match_wrong_length_question_marks(text):
    assert not is_match(text, "?" * (len(text) + 1))


@given(lower, lower, lower)
def test_check_inclusion_finds_inserted_permutation(s1, before, after):
    shuffled = list(s1)
    random.Random(len(s1)).shuffle(shuffled)
    assert check_inclusion(s1, before + "".join(shuffled) + after)


@given(lower, lower)
def test_check_inclusion_false_with_foreign_letter(s1, s2):
    assert not check_inclusion(s1 + "z", s2)


def test_check_inclusion_longer_needle_is_false():
    assert not check_inclusion("abc", "ab")


@pytest.mark.parametrize(
    "word1, word2, expected",
    [
        ("sea", "eat", 2),
        ("a", "b", 2),
        ("asdf", "", 4),
        ("", "asdff", 5),
        ("cabage", "aaf", 5),
    ],
)
def test_min_distance_cases(word1, word2, expected):
    assert min_distance(word1, word2) == expected


@given(lower, lower)
def test_min_distance_symmetric_and_bounded(word1, word2):
    distance = min_distance(word1, word2)
    assert distance == min_distance(word2, word1)
    assert abs(len(word1) - len(word2)) <= distance <= len(word1) + len(word2)
    assert (distance + len(word1) + len(word2)) % 2 == 0


@given(lower)
def test_min_distance_to_self_and_disjoint(word):
    assert min_distance(word, word) == 0
    assert min_distance(word, "xyz") == len(word) + 3


@pytest.mark.parametrize(
    "words, width, expected",
    [
        (
            ["This", "is", "an", "example", "of", "text", "justification."],
            16,
            ["This    is    an", "example  of text", "justification.  "],
        ),
        (
            ["What", "must", "be", "acknowledgment", "shall", "be"],
            16,
            ["What   must   be", "acknowledgment  ", "shall be        "],
        ),
        (
            ["Science", "is", "what", "we", "understand", "well", "enough", "to",
             "explain", "to", "a", "computer.", "Art", "is", "everything", "else",
             "we", "do"],
            20,
            [
                "Science  is  what we",
                "understand      well",
                "enough to explain to",
                "a  computer.  Art is",
                "everything  else  we",
                "do                  ",
            ],
        ),
        (["Hello", "I", "am", "happy"], 5, ["Hello", "I  am", "happy"]),
    ],
)
def test_full_justify_cases(words, width, expected):
    assert full_justify(words, width) == expected


@given(st.lists(st.text(alphabet="abc", min_size=1, max_size=6), min_size=1, max_size=20),
       st.integers(min_value=6, max_value=30))
def test_full_justify_invariants(words, width):
    lines = full_justify(words, width)
    assert all(len(line) == width for line in lines)
    assert [word for line in lines for word in line.split()] == words


def test_full_justify_rejects_overlong_word():
    with pytest.raises(ValueError):
        full_justify(["justification."], 5)


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("ADOBECODEBANC", "ABC", "BANC"),
        ("AMANAPLANACANALPANAMA", "MAP", "MANAP"),
        ("AMANAPLANACANALPANAMA", "MAR", ""),
        ("AMANAPLANACANALPACNAMA", "CAP", "PAC"),
        ("a", "a", "a"),
        ("ab", "ba", "ab"),
        ("captain", "captain", "captain"),
        ("bbaa", "aba", "baa"),
    ],
)
def test_min_window_cases(s, t, expected):
    assert min_window(s, t) == expected


@given(lower, st.text(alphabet="abc", min_size=1, max_size=4))
def test_min_window_covers_target(s, t):
    window = min_window(s, t)
    if window:
        assert window in s
        assert not (__import_counter(t) - __import_counter(window))


def __import_counter(text):
    from collections import Counter

    return Counter(text)


def test_find_and_replace_pattern_example():
    words = ["abc", "deq", "mee", "aqq", "dkd", "ccc"]
    assert find_and_replace_pattern(words, "abb") == ["mee", "aqq"]


@given(st.lists(lower, max_size=10), lower)
def test_find_and_replace_pattern_invariants(words, pattern):
    found = find_and_replace_pattern(words, pattern)
    assert all(word in words and len(word) == len(pattern) for word in found)
    assert find_and_replace_pattern([pattern], pattern) == [pattern]


@pytest.mark.parametrize("digits, expected", [("12", 2), ("226", 3), ("10", 1)])
def test_num_decodings_examples(digits, expected):
    assert num_decodings(digits) == expected


@pytest.mark.parametrize("digits", ["0", "100", "1001", "30", "01"])
def test_num_decodings_impossible(digits):
    assert num_decodings(digits) == 0


@given(st.text(alphabet="3456789", min_size=1, max_size=10))
def test_num_decodings_single_reading(digits):
    assert num_decodings(digits) == 1


@pytest.mark.parametrize("bad", ["", "1a", "-12"])
def test_num_decodings_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        num_decodings(bad)


def test_reorder_log_files_orders_letters_then_digits():
    logs = [
        "dig1 8 1 5 1",
        "let1 art can",
        "dig2 3 6",
        "let2 own kit dig",
        "let3 art zero",
        "let0 art can",
    ]
    assert reorder_log_files(logs) == [
        "let0 art can",
        "let1 art can",
        "let3 art zero",
        "let2 own kit dig",
        "dig1 8 1 5 1",
        "dig2 3 6",
    ]


@given(st.lists(st.tuples(st.sampled_from(["a1", "b2", "c3"]), lower.map(lambda s: s + "x")),
                max_size=10))
def test_reorder_log_files_is_permutation_with_sorted_letters(entries):
    logs = [f"{ident} {body}" for ident, body in entries] + ["d9 4 2"]
    result = reorder_log_files(logs)
    assert sorted(result) == sorted(logs)
    assert result[-1] == "d9 4 2"
    letters = [line.partition(" ") for line in result[:-1]]
    assert letters == sorted(letters, key=lambda parts: (parts[2], parts[0]))