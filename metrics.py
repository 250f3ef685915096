import numpy as np
import pandas as pd


def density_regions(ordering):
    """Split a cluster ordering into runs that each start at an infinite reachability."""
    regions = []
    for point in ordering:
        if point.reachability == np.inf or not regions:
            regions.append([])
        regions[-1].append(point)
    return regions


def reachability_summary(ordering):
    """Point/region counts and finite reachability statistics."""
    reach = np.array([p.reachability for p in ordering], dtype=float)
    finite = reach[np.isfinite(reach)]
    return {
        "n_points": len(reach),
        "n_regions": len(density_regions(ordering)),
        "n_finite": len(finite),
        "min": float(finite.min()) if len(finite) else np.nan,
        "max": float(finite.max()) if len(finite) else np.nan,
        "mean": float(finite.mean()) if len(finite) else np.nan,
    }


def ordering_table(ordering):
    """One row per ordered point: position, index, reachability, coordinates."""
    dims = len(ordering[0].coordinates) if ordering else 0
    rows = [
        [pos, p.index, p.reachability, *p.coordinates]
        for pos, p in enumerate(ordering)
    ]
    columns = ["order", "index", "reachability"] + [f"x{d}" for d in range(dims)]
    return pd.DataFrame(rows, columns=columns)
