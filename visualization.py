import numpy as np

from metrics import density_regions

CLUSTER_COLORS = [
    "#E63946", "#457B9D", "#2A9D8F", "#E9C46A", "#F4A261",
    "#264653", "#6A0572", "#AB83A1", "#1D3557", "#A8DADC",
]


def plot_reachability(ax, ordering, title, eps=None):
    """Reachability plot: one bar per point in cluster order.

    Infinite reachabilities (region starts) are drawn in grey at the plot
    ceiling so the valleys between them stay readable.
    """
    reach = np.array([p.reachability for p in ordering], dtype=float)
    finite = reach[np.isfinite(reach)]
    ceiling = finite.max() * 1.15 if len(finite) and finite.max() > 0 else 1.0
    if eps is not None and np.isfinite(eps):
        ceiling = max(ceiling, eps * 1.05)

    colors = []
    for ri, region in enumerate(density_regions(ordering)):
        color = CLUSTER_COLORS[ri % len(CLUSTER_COLORS)]
        colors.extend(["lightgray"] + [color] * (len(region) - 1))

    heights = np.where(np.isfinite(reach), reach, ceiling)
    ax.bar(np.arange(len(reach)), heights, width=1.0, color=colors, edgecolor="none")

    if eps is not None and np.isfinite(eps):
        ax.axhline(y=eps, color="red", linestyle="--", linewidth=1.5, label=f"eps = {eps:.2f}")
        ax.legend(fontsize=10)

    ax.set_ylim(0, ceiling)
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Cluster order", fontsize=12)
    ax.set_ylabel("Reachability distance", fontsize=12)
    ax.grid(True, alpha=0.15, linestyle="--")


def plot_ordering(ax, data, ordering, title):
    """2-D scatter coloured by density region, with the traversal path inside each region."""
    for ri, region in enumerate(density_regions(ordering)):
        color = CLUSTER_COLORS[ri % len(CLUSTER_COLORS)]
        pts = data[[p.index for p in region]]
        ax.plot(pts[:, 0], pts[:, 1], color=color, linewidth=0.8, alpha=0.5, zorder=1)
        ax.scatter(
            pts[:, 0], pts[:, 1],
            s=18, alpha=0.8, color=color, edgecolors="none",
            label=f"R{ri} ({len(region)} pts)", zorder=2,
        )
        # region seed
        ax.scatter(
            pts[0, 0], pts[0, 1],
            s=120, color=color, marker="D",
            edgecolors="white", linewidths=1.5, zorder=3,
        )

    ax.set_title(title, fontsize=14, fontweight="bold", pad=12)
    ax.set_xlabel("x", fontsize=12)
    ax.set_ylabel("y", fontsize=12)
    if ordering:
        ax.legend(fontsize=7, markerscale=1.5, loc="best", framealpha=0.9)
    ax.grid(True, alpha=0.15, linestyle="--")


def plot_region_sizes(ax, ordering, title, color):
    """Bar chart of density region sizes."""
    sizes = [len(region) for region in density_regions(ordering)]
    names = [f"R{i}" for i in range(len(sizes))]
    bars = ax.bar(names, sizes, color=color, edgecolor="white", linewidth=1.5)
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_ylabel("Number of Points")
    for bar, val in zip(bars, sizes):
        ax.text(
            bar.get_x() + bar.get_width() / 2,
            bar.get_height() + max(sizes) * 0.02,
            str(val), ha="center", fontsize=10,
        )
