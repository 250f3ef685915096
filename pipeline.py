import os
import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")  # non-interactive backend, figures go to disk
import matplotlib.pyplot as plt
import seaborn as sns

from optics import OPTICS
from point import points_from_array
from metrics import ordering_table, reachability_summary
from visualization import plot_ordering, plot_reachability, plot_region_sizes

DATA_PATH = "clustering_data.csv"
FIGURES_DIR = "figures"
DEFAULT_EPS = 3.0
DEFAULT_MIN_SAMPLES = 2

SAMPLE_DATA = np.array([
    [1.0, 2.0],
    [2.0, 2.0],
    [2.5, 2.1],
    [8.0, 8.0],
    [8.5, 8.2],
    [9.0, 8.0],
])

sns.set_style("whitegrid")


def _save(fig, name, figures_dir):
    os.makedirs(figures_dir, exist_ok=True)
    plt.tight_layout()
    fig.savefig(os.path.join(figures_dir, name), dpi=150, bbox_inches="tight")
    plt.close(fig)


def load_and_explore_data(path=DATA_PATH, figures_dir=FIGURES_DIR):
    print("\n[1/3] Loading data...")
    if os.path.exists(path):
        df = pd.read_csv(path)
    else:
        print(f"  {path} not found, using built-in sample data.")
        df = pd.DataFrame(SAMPLE_DATA, columns=["x", "y"])
    data = df[["x", "y"]].values
    print(f"  Shape: {df.shape} | X range: [{data[:, 0].min():.2f}, {data[:, 0].max():.2f}] | Y range: [{data[:, 1].min():.2f}, {data[:, 1].max():.2f}]")

    fig, ax = plt.subplots(figsize=(10, 7))
    ax.scatter(df["x"], df["y"], s=12, alpha=0.6, c="steelblue", edgecolors="none")
    ax.set_title("Raw Data Scatter Plot", fontsize=14, fontweight="bold")
    ax.set_xlabel("x"); ax.set_ylabel("y")
    _save(fig, "01_raw_data.png", figures_dir)

    return data, df


def run_optics(data, eps=DEFAULT_EPS, min_samples=DEFAULT_MIN_SAMPLES, figures_dir=FIGURES_DIR):
    print(f"\n[2/3] Running OPTICS (eps={eps}, min_samples={min_samples})...")
    optics = OPTICS(points_from_array(data), eps=eps, min_samples=min_samples)
    ordering = optics.execute()

    print("\n  OPTICS Ordering and Reachability Distances:")
    for point in ordering:
        print(f"    Point {point.index}: Reachability = {point.reachability:.2f}")

    fig, ax = plt.subplots(figsize=(12, 6))
    plot_reachability(ax, ordering, f"Reachability Plot (eps={eps}, min_samples={min_samples})", eps=eps)
    _save(fig, "02_reachability.png", figures_dir)

    fig, ax = plt.subplots(figsize=(12, 8))
    plot_ordering(ax, data, ordering, "Cluster Order by Density Region")
    _save(fig, "03_ordering.png", figures_dir)

    return optics


def summarize(ordering, figures_dir=FIGURES_DIR):
    print("\n[3/3] Summarizing reachability...")
    summary = reachability_summary(ordering)
    print("\n" + "=" * 70 + "\n  REACHABILITY SUMMARY\n" + "=" * 70)
    print(f"  Points: {summary['n_points']} | Density regions: {summary['n_regions']} | Finite reachabilities: {summary['n_finite']}")
    print(f"  Finite reachability range: [{summary['min']:.2f}, {summary['max']:.2f}], mean {summary['mean']:.2f}")
    print()
    print(ordering_table(ordering).to_string(index=False))

    if ordering:
        fig, ax = plt.subplots(figsize=(10, 5))
        plot_region_sizes(ax, ordering, "Density Region Sizes", "#457B9D")
        _save(fig, "04_region_sizes.png", figures_dir)

    return summary
