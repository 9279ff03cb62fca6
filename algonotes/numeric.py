"""Counting, dynamic programming and bit arithmetic over integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations, compress, product

_SUPER_POW_MODULUS = 1337
_RECORD_MODULUS = 1_000_000_007
_WORD_MASK = 0xFFFFFFFF


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins summing to amount, or -1 if no combination does."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    denominations = sorted({coin for coin in coins if coin > 0})
    fewest: list[int | None] = [0]
    for target in range(1, amount + 1):
        best: int | None = None
        for coin in denominations:
            if coin > target:
                break
            previous = fewest[target - coin]
            if previous is not None and (best is None or previous + 1 < best):
                best = previous + 1
        fewest.append(best)
    result = fewest[amount]
    return -1 if result is None else result


def integer_break(n: int) -> int:
    """Return the largest product of positive integers summing to n, using at least two parts."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    # best[i] is the largest product of parts summing to i, allowing i itself.
    best = [0, 1]
    for total in range(2, n):
        best.append(max([total] + [best[total - part] * part for part in range(1, total)]))
    return max([1] + [best[n - part] * part for part in range(1, n)])


def super_pow(a: int, b: Sequence[int]) -> int:
    """Return a to the power of the decimal digits b, modulo 1337."""
    modulus = _SUPER_POW_MODULUS
    base = a % modulus
    result = 1
    for digit in b:
        if not 0 <= digit <= 9:
            raise ValueError(f"exponent digits must be 0-9, got {digit}")
        result = pow(result, 10, modulus) * pow(base, digit, modulus) % modulus
    return result


def last_remaining(n: int) -> int:
    """Return the survivor of alternately removing every other number from 1..n."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    scale, offset = 1, 0
    # Invariant: answer(original n) == scale * answer(current n) + offset.
    while n > 4:
        if n % 4 in (0, 1):
            offset -= scale << 1
        scale <<= 2
        n >>= 2
    base = 1 if n == 1 else 2
    return scale * base + offset


def check_record(n: int) -> int:
    """Count attendance records of length n with under two absences and no three lates in a row.

    The count is taken modulo 10**9 + 7.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    m = _RECORD_MODULUS
    # Records without an absence, ending in 0, 1 or 2 consecutive lates.
    clean = (1, 0, 0)
    # Records with one absence, ending in 0, 1 or 2 consecutive lates.
    absent = (0, 0, 0)
    for _ in range(n):
        clean_total = sum(clean) % m
        clean, absent = (
            (clean_total, clean[0], clean[1]),
            ((sum(absent) + clean_total) % m, absent[0], absent[1]),
        )
    return (sum(clean) + sum(absent)) % m


def _sorted_digits(n: int) -> str:
    return "".join(sorted(str(n)))


_POWER_OF_TWO_DIGITS = frozenset(_sorted_digits(1 << shift) for shift in range(30))


def reordered_power_of_2(n: int) -> bool:
    """Return whether the digits of n can be rearranged into a power of two."""
    return _sorted_digits(n) in _POWER_OF_TWO_DIGITS


def add(a: int, b: int) -> int:
    """Add two unsigned 32-bit integers with bit operations only, wrapping on overflow."""
    if a < 0 or b < 0:
        raise ValueError("add works on unsigned integers")
    a &= _WORD_MASK
    b &= _WORD_MASK
    while b:
        a, b = a ^ b, ((a & b) << 1) & _WORD_MASK
    return a


def combine(n: int, k: int) -> list[list[int]]:
    """Return every choice of k numbers from 1..n, in lexicographic order."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    return [list(choice) for choice in combinations(range(1, n + 1), k)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of nums; the last entry toggles fastest."""
    return [
        list(compress(nums, chosen))
        for chosen in product((False, True), repeat=len(nums))
    ]