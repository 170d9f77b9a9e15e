# --- Search Algorithms Under Benchmark ---

from typing import NamedTuple

NOT_FOUND = -1


class SearchResult(NamedTuple):
    """Index of the target (or -1) and the number of comparisons made."""
    found_index: int
    comparisons: int


def search_linear(target: int, data: list[int]) -> SearchResult:
    """
    Scans the array front to back and stops at the first match.
    Every element examined counts as one comparison, the match included.
    """
    comparisons = 0
    for i, val in enumerate(data):
        comparisons += 1
        if val == target:
            return SearchResult(i, comparisons)
    return SearchResult(NOT_FOUND, comparisons)


def search_binary(target: int, sorted_data: list[int]) -> SearchResult:
    """
    Binary search over an ascending array.
    Each halving step counts as one comparison, the terminal match included.
    The array is not checked for sortedness.
    """
    low, high = 0, len(sorted_data) - 1
    comparisons = 0
    while low <= high:
        comparisons += 1
        mid = (low + high) // 2
        mid_item = sorted_data[mid]
        if target == mid_item:
            return SearchResult(mid, comparisons)
        elif target < mid_item:
            high = mid - 1
        else:
            low = mid + 1
    return SearchResult(NOT_FOUND, comparisons)


def max_binary_comparisons(n: int) -> int:
    """Upper bound ceil(log2(n + 1)) on binary search comparisons for n elements."""
    return n.bit_length()
