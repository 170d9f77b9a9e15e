import random
from enum import Enum
from typing import Optional

from search_timer.searches import search_linear, search_binary


class SearchKind(Enum):
    LINEAR = "Linear"
    BINARY = "Binary"

    @classmethod
    def parse(cls, value) -> "SearchKind":
        """
        Accepts a SearchKind or a member name in any letter case ("linear", "BINARY").
        Surrounding whitespace is ignored. Unknown names are rejected rather
        than treated as binary search.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            choices = ", ".join(kind.name.lower() for kind in cls)
            raise ValueError(f"Unknown search type {value!r}; expected one of: {choices}") from None


def sim_search(kind, num_range: int, data: list[int], rng: Optional[random.Random] = None) -> int:
    """
    Picks a random target from [1, num_range] and searches `data` for it.
    The target may not be in the array at all.

    Returns:
        The number of comparisons the search made.
    """
    kind = SearchKind.parse(kind)
    rng = rng or random.Random()
    target = rng.randint(1, num_range)

    if kind is SearchKind.LINEAR:
        _, comparisons = search_linear(target, data)
    else:
        _, comparisons = search_binary(target, data)
    return comparisons
