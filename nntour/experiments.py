from __future__ import annotations
import csv, os, random, statistics
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import asdict

import pandas as pd

from .config import GraphConfig
from .distances import compute_distance_matrix
from .greedy import build_tour
from .points import PointSet

def start_city_table(dist_matrix: List[List[float]]) -> pd.DataFrame:
    """Greedy tour cost from every possible start city."""
    rows = []
    for s in range(len(dist_matrix)):
        res = build_tour(dist_matrix, s)
        rows.append({"start": s, "total_cost": res.total_cost,
                     "path": "-".join(str(c) for c in res.final_path)})
    return pd.DataFrame.from_records(rows, columns=["start", "total_cost", "path"])

def run_repeated_graphs(cfg: GraphConfig, n_runs: int = 10, base_seed: int = 42,
                        csv_path: Optional[str] = None) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
    if n_runs < 1:
        raise ValueError("n_runs must be >= 1.")
    rows = []
    for r in range(n_runs):
        cfg_r = GraphConfig(**{**asdict(cfg), "seed": base_seed + r})
        points = PointSet.random_planar(cfg_r, rng=random.Random(cfg_r.seed))
        D = compute_distance_matrix(points, cfg_r.scale_factor, cfg_r.distance_cap)
        table = start_city_table(D)
        best = table.loc[table["total_cost"].idxmin()]
        rows.append({
            "seed": cfg_r.seed,
            "n_nodes": len(points),
            "intended": points.intended,
            "truncated": points.truncated,
            "best_start": int(best["start"]),
            "best_cost": float(best["total_cost"]),
            "worst_cost": float(table["total_cost"].max()),
            "mean_cost": float(table["total_cost"].mean()),
        })
        if csv_path is not None:
            write_header = not os.path.exists(csv_path)
            with open(csv_path, "a", newline="") as f:
                w = csv.DictWriter(f, fieldnames=rows[-1].keys())
                if write_header:
                    w.writeheader()
                w.writerow(rows[-1])

    costs = [row["mean_cost"] for row in rows]
    stats = {
        "mean_cost": statistics.mean(costs),
        "std_cost": statistics.stdev(costs) if len(costs) > 1 else 0.0,
        "min_cost": min(row["best_cost"] for row in rows),
        "max_cost": max(row["worst_cost"] for row in rows),
        "median_cost": statistics.median(costs),
        "mean_nodes": statistics.mean(row["n_nodes"] for row in rows),
        "truncated_runs": sum(1 for row in rows if row["truncated"]),
        "n_runs": n_runs,
    }
    return stats, rows
