"""
OPTICS Cluster Ordering: From-Scratch Implementation
=====================================================
Orders the points of clustering_data.csv (or a built-in sample when the file
is absent) by density reachability and saves the reachability plot.

Usage:
    uv run python main.py
"""

from pipeline import (
    DATA_PATH,
    DEFAULT_EPS,
    DEFAULT_MIN_SAMPLES,
    load_and_explore_data,
    run_optics,
    summarize,
)


def main():
    print("=" * 70)
    print("  OPTICS CLUSTER ORDERING: FROM-SCRATCH IMPLEMENTATION")
    print("=" * 70)

    data, _ = load_and_explore_data(DATA_PATH)
    optics = run_optics(data, eps=DEFAULT_EPS, min_samples=DEFAULT_MIN_SAMPLES)
    summarize(optics.ordering)

    print("\nAll figures saved to figures/ directory.\nDone!")


if __name__ == "__main__":
    main()
