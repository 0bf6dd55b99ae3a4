"""Bigram string similarity (Dice coefficient).

Whitespace is ignored, and bigrams are counted with multiplicity, so
"aaaa" vs "aa" shares one "aa" pair, not three.
"""

import re
from collections import Counter

_WHITESPACE = re.compile(r"\s+")


def _bigrams(value: str) -> Counter:
    return Counter(value[i:i + 2] for i in range(len(value) - 1))


def compare_two_strings(first: str, second: str) -> float:
    """Return the similarity of two strings in [0.0, 1.0].

    Callers lower-case their input; comparison here is case-sensitive.

    Degenerate inputs:
        - strings equal after whitespace removal (including two empty
          strings) score 1.0
        - otherwise, a string with fewer than 2 characters has no bigrams
          and scores 0.0 against anything

    Examples:
        >>> compare_two_strings("night", "nacht")
        0.25
        >>> compare_two_strings("", "")
        1.0
        >>> compare_two_strings("a", "ab")
        0.0
    """
    first = _WHITESPACE.sub("", first or "")
    second = _WHITESPACE.sub("", second or "")

    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    intersection = sum((_bigrams(first) & _bigrams(second)).values())
    return (2.0 * intersection) / (len(first) + len(second) - 2)
