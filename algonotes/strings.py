"""Matching, searching and formatting of strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_DIGITS = frozenset("0123456789")


def _advance(states: set[int], pattern: str, index: int) -> None:
    """Enter state index, then skip over any run of '*' that follows it."""
    states.add(index)
    while index < len(pattern) and pattern[index] == "*":
        index += 1
        states.add(index)


def is_match(text: str, pattern: str) -> bool:
    """Return whether pattern matches all of text.

    '?' matches any one character and '*' any run of characters, including none.
    """
    states: set[int] = set()
    _advance(states, pattern, 0)
    for char in text:
        following: set[int] = set()
        for index in states:
            if index == len(pattern):
                continue
            token = pattern[index]
            if token == "?" or token == char:
                _advance(following, pattern, index + 1)
            elif token == "*":
                _advance(following, pattern, index)
        if not following:
            return False
        states = following
    return len(pattern) in states


def _drop(counts: Counter[str], char: str) -> None:
    counts[char] -= 1
    if not counts[char]:
        del counts[char]


def check_inclusion(s1: str, s2: str) -> bool:
    """Return whether some permutation of s1 is a substring of s2."""
    size = len(s1)
    if size > len(s2):
        return False
    wanted = Counter(s1)
    window = Counter(s2[:size])
    if window == wanted:
        return True
    for leaving, entering in zip(s2, s2[size:]):
        window[entering] += 1
        _drop(window, leaving)
        if window == wanted:
            return True
    return False


def min_distance(word1: str, word2: str) -> int:
    """Return the fewest single-character deletions that make both words equal."""
    if not word2:
        return len(word1)
    if not word1:
        return len(word2)
    previous = list(range(len(word2) + 1))
    for row, char1 in enumerate(word1, start=1):
        current = [row]
        for column, char2 in enumerate(word2, start=1):
            if char1 == char2:
                current.append(previous[column - 1])
            else:
                current.append(min(current[column - 1], previous[column]) + 1)
        previous = current
    return previous[-1]


def _spread(line: Sequence[str], max_width: int) -> str:
    if len(line) == 1:
        return line[0].ljust(max_width)
    gaps = len(line) - 1
    spare = max_width - sum(len(word) for word in line)
    narrow, wide_count = divmod(spare, gaps)
    pieces = [line[0]]
    for gap, word in enumerate(line[1:]):
        pieces.append(" " * (narrow + 1 if gap < wide_count else narrow))
        pieces.append(word)
    return "".join(pieces)


def full_justify(words: Iterable[str], max_width: int) -> list[str]:
    """Lay words out in lines of exactly max_width characters.

    Every line but the last is fully justified, extra spaces going to the
    leftmost gaps; a line of one word and the last line are left justified.
    """
    justified: list[str] = []
    line: list[str] = []
    width = 0
    for word in words:
        if len(word) > max_width:
            raise ValueError(f"word {word!r} is longer than {max_width}")
        needed = len(word) + (1 if line else 0)
        if line and width + needed > max_width:
            justified.append(_spread(line, max_width))
            line, width = [], 0
            needed = len(word)
        line.append(word)
        width += needed
    if line:
        justified.append(" ".join(line).ljust(max_width))
    return justified


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of s holding every character of t.

    Among windows of equal length the one that ends first wins; "" if none.
    """
    if not t or len(s) < len(t):
        return ""
    owed = Counter(t)
    missing = len(t)
    start = 0
    best: tuple[int, int] | None = None
    for end, char in enumerate(s, start=1):
        if owed[char] > 0:
            missing -= 1
        owed[char] -= 1
        if missing:
            continue
        while owed[s[start]] < 0:
            owed[s[start]] += 1
            start += 1
        if best is None or end - start < best[1] - best[0]:
            best = (start, end)
        owed[s[start]] += 1
        missing += 1
        start += 1
    return s[best[0]:best[1]] if best is not None else ""


def _canonical(word: str) -> tuple[int, ...]:
    """Number each distinct character by the order of its first appearance."""
    seen: dict[str, int] = {}
    return tuple(seen.setdefault(char, len(seen)) for char in word)


def find_and_replace_pattern(words: Iterable[str], pattern: str) -> list[str]:
    """Return the words that map onto pattern by a one-to-one letter substitution."""
    shape = _canonical(pattern)
    return [word for word in words if _canonical(word) == shape]


def num_decodings(s: str) -> int:
    """Count the ways a digit string decodes with 'A'=1 ... 'Z'=26."""
    if not s or not set(s) <= _DIGITS:
        raise ValueError(f"expected a non-empty string of digits, got {s!r}")
    ways_next, ways_after = 1, 0
    for index in reversed(range(len(s))):
        if s[index] == "0":
            ways = 0
        else:
            ways = ways_next
            if index + 1 < len(s) and int(s[index:index + 2]) <= 26:
                ways += ways_after
        ways_next, ways_after = ways, ways_next
    return ways_next


def _log_key(line: str) -> tuple[int, str, str] | tuple[int]:
    if line[-1] in _DIGITS:
        return (1,)
    identifier, _, contents = line.partition(" ")
    return (0, contents, identifier)


def reorder_log_files(logs: Iterable[str]) -> list[str]:
    """Put letter logs first, sorted by contents then identifier; digit logs keep their order."""
    return sorted(logs, key=_log_key)