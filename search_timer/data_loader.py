import random
from typing import Optional


class InvalidRangeError(ValueError):
    """Raised when the value range cannot supply enough distinct integers."""

    def __init__(self, size: int, num_range: int):
        self.size = size
        self.num_range = num_range
        super().__init__(
            f"Cannot draw {size} distinct values from the range [1, {num_range}]"
        )


def generate_num_array(size: int, num_range: int, rng: Optional[random.Random] = None) -> list[int]:
    """
    Generates `size` distinct random integers from [1, num_range] by rejection sampling:
    draw a value, throw it away if it was already used, and draw again.

    Returns:
        The values in the order they were drawn (unsorted).
    """
    if size < 0 or num_range < size:
        raise InvalidRangeError(size, num_range)

    rng = rng or random.Random()
    num_array = []
    used = set()

    while len(num_array) < size:
        num = rng.randint(1, num_range)
        if num in used:
            continue
        used.add(num)
        num_array.append(num)

    return num_array


def sorted_copy(num_array: list[int]) -> list[int]:
    """Ascending copy of the same values, for binary search."""
    return sorted(num_array)
