"""
Duplicate-aware combination and permutation generators.

Both are lazy and single-use: build a fresh generator to start over.
Repeated letters never produce repeated output, and no duplicate is
generated and then thrown away.
"""

from typing import Iterable, Iterator, List, Tuple


def combinations(letters: Iterable[str], k: int) -> Iterator[Tuple[str, ...]]:
    """
    Yield every distinct k-letter sub-multiset of letters exactly once.

    Letters are sorted first, and at each depth a starting position is
    skipped when it holds the same letter as the previous sibling, so
    "aab" with k=2 yields ('a', 'a') and ('a', 'b') but never a second
    ('a', 'b'). Each combination comes out in non-decreasing letter order.
    k == 0 yields a single empty tuple; k larger than the pool yields nothing.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    pool = sorted(letters)
    n = len(pool)
    if k > n:
        return

    chosen: List[str] = []

    def backtrack(start: int) -> Iterator[Tuple[str, ...]]:
        if len(chosen) == k:
            yield tuple(chosen)
            return
        # Leave enough letters behind to fill the remaining slots.
        last = n - (k - len(chosen))
        for i in range(start, last + 1):
            if i > start and pool[i] == pool[i - 1]:
                continue
            chosen.append(pool[i])
            yield from backtrack(i + 1)
            chosen.pop()

    yield from backtrack(0)


def permutations(letters: Iterable[str]) -> Iterator[Tuple[str, ...]]:
    """
    Yield every distinct ordering of letters exactly once, in lexicographic order.

    Starts from the sorted arrangement and steps with next-permutation, which
    treats equal letters as interchangeable: "aab" yields 3 orderings, not 6.
    """
    items = sorted(letters)
    n = len(items)

    while True:
        yield tuple(items)

        # Rightmost position that is smaller than its successor.
        i = n - 2
        while i >= 0 and items[i] >= items[i + 1]:
            i -= 1
        if i < 0:
            return

        # Rightmost position with a letter strictly greater than items[i].
        j = n - 1
        while items[j] <= items[i]:
            j -= 1

        items[i], items[j] = items[j], items[i]
        items[i + 1:] = reversed(items[i + 1:])
