"""Dynamic programming over strings and digit sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import chain

_DECODE_LIMIT = 33
_DIGIT_SUM_MODULUS = 1_000_000_007
_MIRROR_SEPARATOR = "!"
_DIGITS = frozenset("0123456789")


def _require_digits(name: str, text: str) -> None:
    if any(ch not in _DIGITS for ch in text):
        raise ValueError(f"{name} must consist of decimal digits")


def count_bracket_completions(pattern: str) -> int:
    """Count ways to replace each ``?`` by a bracket so the result is balanced.

    Any character other than ``(`` and ``?`` is read as ``)``.
    """
    n = len(pattern)
    counts = [1] + [0] * n  # counts[d]: ways to be at nesting depth d
    for ch in pattern:
        if ch == "?":
            moves: tuple[int, ...] = (-1, 1)
        elif ch == "(":
            moves = (1,)
        else:
            moves = (-1,)
        following = [0] * (n + 1)
        for depth, ways in enumerate(counts[:n]):
            if not ways:
                continue
            for move in moves:
                if depth + move >= 0:
                    following[depth + move] += ways
        counts = following
    return counts[0]


def z_function(seq: Sequence) -> list[int]:
    """Z-array of ``seq``: the longest common prefix of ``seq`` and each suffix.

    The first entry is the length of ``seq``.
    """
    n = len(seq)
    if n == 0:
        return []
    z = [0] * n
    box = 0  # start of the rightmost match found so far
    for i in range(1, n):
        if box + z[box] <= i:
            k = 0
        else:
            k = min(box + z[box] - i, z[i - box])
        while i + k < n and seq[k] == seq[i + k]:
            k += 1
        z[i] = k
        if box + z[box] < i + k:
            box = i
    z[0] = n
    return z


def mirror_prefix_lengths(text: str) -> list[int]:
    """For every prefix of ``text``, how far its reversal agrees with ``text``.

    Entry ``t`` is the length of the longest common prefix of ``text`` and
    the reversed prefix ``text[:t + 1]``.
    """
    n = len(text)
    z = z_function(text + _MIRROR_SEPARATOR + text[::-1])
    return [z[i] for i in range(2 * n, n, -1)]


def count_near_palindromes(text: str, tolerance: int) -> int:
    """Count substrings that become palindromes after at most ``tolerance`` changes."""
    n = len(text)
    centres = chain(((i, i) for i in range(n)), ((i - 1, i) for i in range(1, n)))
    total = 0
    for left, right in centres:
        mismatches = 0
        while left >= 0 and right < n:
            if text[left] != text[right]:
                mismatches += 1
            if mismatches > tolerance:
                break
            total += 1
            left -= 1
            right += 1
    return total


def count_decodings(digits: str) -> int:
    """Count ways to split ``digits`` into letter codes.

    A code is any single digit, or two digits not starting with 0 whose value
    is at most 33.
    """
    _require_digits("digits", digits)
    before, current = 0, 1
    for i in range(len(digits)):
        following = current
        if i > 0 and digits[i - 1] != "0" and int(digits[i - 1 : i + 1]) <= _DECODE_LIMIT:
            following += before
        before, current = current, following
    return current


def balanced_substring_count(text: str) -> int:
    """Count substrings with as many ``a`` characters as other characters."""
    seen = Counter({0: 1})
    balance = 0
    total = 0
    for ch in text:
        balance += 1 if ch == "a" else -1
        total += seen[balance]
        seen[balance] += 1
    return total


def binary_sequence(length: int, table: Iterable) -> str | None:
    """Binary string of ``length`` with the most ones whose fold by ``table`` is 1.

    The fold starts from the first digit ``r`` and for each further digit ``x``
    replaces ``r`` by ``table[2 * r + x]``. Returns ``None`` when no string
    folds to 1.
    """
    op = [int(entry) for entry in table]
    if len(op) != 4 or any(entry not in (0, 1) for entry in op):
        raise ValueError("table must hold four binary digits")
    if length < 2:
        raise ValueError("length must be at least 2")

    # ones[(result, last digit)] = most ones so far; links[i] leads back one digit
    ones: dict[tuple[int, int], int] = {}
    links: dict[int, dict[tuple[int, int], tuple[int, int]]] = {2: {}}
    for first in (0, 1):
        for second in (0, 1):
            state = (op[2 * first + second], second)
            ones[state] = first + second
            links[2][state] = (first, first)

    for i in range(3, length + 1):
        following: dict[tuple[int, int], int] = {}
        link: dict[tuple[int, int], tuple[int, int]] = {}
        for result in (0, 1):
            for digit in (0, 1):
                best: int | None = None
                origin = (0, 0)
                for prev_result in (0, 1):
                    if op[2 * prev_result + digit] != result:
                        continue
                    for prev_digit in (0, 1):
                        value = ones.get((prev_result, prev_digit))
                        if value is not None and (best is None or value > best):
                            best, origin = value, (prev_result, prev_digit)
                if best is not None:
                    following[(result, digit)] = best + digit
                    link[(result, digit)] = origin
        ones = following
        links[i] = link

    end_zero = ones.get((1, 0), -1)
    end_one = ones.get((1, 1), -1)
    if end_zero == -1 and end_one == -1:
        return None
    state = (1, 1 if end_one > end_zero else 0)
    digits: list[str] = []
    for i in range(length, 0, -1):
        digits.append(str(state[1]))
        state = links.get(i, {}).get(state, (0, 0))
    return "".join(reversed(digits))


def min_palindrome_partition(text: str) -> list[str]:
    """Split ``text`` into the fewest palindromes, in order."""
    n = len(text)
    far = n + 1
    pieces = [0] + [far] * n
    parent = [0] * (n + 1)
    for start in range(n):
        for end in range(start + 1, n + 1):
            part = text[start:end]
            if part == part[::-1] and pieces[start] + 1 < pieces[end]:
                pieces[end] = pieces[start] + 1
                parent[end] = start
    result: list[str] = []
    end = n
    while end > 0:
        start = parent[end]
        result.append(text[start:end])
        end = start
    result.reverse()
    return result


def longest_prefix_chain(words: Iterable[str]) -> int:
    """Length of the longest chain of distinct words, each a proper prefix of the next."""
    unique = sorted(set(words), key=len)
    if not unique:
        raise ValueError("at least one word is required")
    chain_length: dict[str, int] = {}
    for word in unique:
        chain_length[word] = 1 + max(
            (chain_length[word[:k]] for k in range(len(word)) if word[:k] in chain_length),
            default=0,
        )
    return max(chain_length.values())


def count_distinct_digit_sums(number: str) -> int:
    """Count ordered pairs of numbers as long as ``number`` that add up to it.

    Neither number may start with 0 or have two equal neighbouring digits.
    The result is taken modulo 1000000007.
    """
    if not number:
        raise ValueError("number must not be empty")
    _require_digits("number", number)
    digits = [int(ch) for ch in reversed(number)]
    # states[(digit of a, digit of b, carry out)]
    states: Counter[tuple[int, int, int]] = Counter(
        {
            (a, b, int(a + b > 9)): 1
            for a in range(10)
            for b in range(10)
            if (a + b) % 10 == digits[0]
        }
    )
    for digit in digits[1:]:
        following: Counter[tuple[int, int, int]] = Counter()
        for (prev_a, prev_b, carry), ways in states.items():
            if not ways:
                continue
            for a in range(10):
                if a == prev_a:
                    continue
                b = digit - a - carry
                carry_out = 0
                if b < 0:
                    b += 10
                    carry_out = 1
                if b == prev_b:
                    continue
                key = (a, b, carry_out)
                following[key] = (following[key] + ways) % _DIGIT_SUM_MODULUS
        states = following
    return (
        sum(ways for (a, b, carry), ways in states.items() if a and b and not carry)
        % _DIGIT_SUM_MODULUS
    )


def count_abc_subsequences(text: str) -> int:
    """Count subsequences of ``text`` that read ``abc``."""
    a_count = ab_count = total = 0
    for ch in text:
        if ch == "a":
            a_count += 1
        elif ch == "b":
            ab_count += a_count
        elif ch == "c":
            total += ab_count
    return total