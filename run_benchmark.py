import sys

from search_timer.runner import run_benchmarks, format_report

# Number of elements in the array, the value range [1, ARRAY_SIZE],
# and the number of searches run per algorithm.
ARRAY_SIZE = 1000


def main() -> int:
    """
    Benchmarks linear against binary search on a random array of ARRAY_SIZE
    distinct integers and prints the averaged results. Command-line arguments are ignored.
    """
    results = run_benchmarks(ARRAY_SIZE)
    print(format_report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
