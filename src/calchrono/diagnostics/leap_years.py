#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import calchrono


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calchrono[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calchrono[diagnostics]"') from e


def build_grid(np, name: str, first_cycle: int, n_cycles: int) -> "np.ndarray":
    """Rows are year positions 1..cycle_years, columns are cycles; 1 marks a leap year."""
    chrono = calchrono.get_chronology(name)
    cycle = chrono.p.cycle_years
    grid = np.zeros((cycle, n_cycles), dtype=int)
    for j in range(n_cycles):
        for k in range(1, cycle + 1):
            y = (first_cycle + j) * cycle + k
            grid[k - 1, j] = 1 if chrono.is_leap_year(y) else 0
    return grid


def leap_points(np, grid) -> Tuple["np.ndarray", "np.ndarray"]:
    ys, xs = np.nonzero(grid)
    return xs, ys + 1


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode of the Hijrah leap cycle.")
    p.add_argument("--first-cycle", type=int, default=-2, help="Zero-based first cycle (negative allowed).")
    p.add_argument("--cycles", type=int, default=6)
    p.add_argument("--out", default="hijrah_leap_years.png")
    p.add_argument("--title", default="Hijrah leap years by cycle position")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    args = p.parse_args(argv)

    if args.cycles < 1:
        raise SystemExit("--cycles must be >= 1")

    np = _need_numpy()
    plt = _need_matplotlib()

    grid = build_grid(np, "hijrah", args.first_cycle, args.cycles)
    cycle = calchrono.HIJRAH.p.cycle_years
    per_cycle = grid.sum(axis=0)
    if not np.all(per_cycle == len(calchrono.HIJRAH.p.leap_residues)):
        print(f"WARNING: uneven leap counts per cycle: {per_cycle.tolist()}")

    fig, ax = plt.subplots(figsize=(2 + 1.2 * args.cycles, 6))
    x_edges = np.arange(args.first_cycle - 0.5, args.first_cycle + args.cycles + 0.5, 1.0)
    y_edges = np.arange(0.5, cycle + 1.5, 1.0)
    ax.pcolormesh(
        x_edges,
        y_edges,
        np.zeros_like(grid, dtype=float),
        shading="flat",
        cmap="Greys",
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=0.6,
    )

    xs, ks = leap_points(np, grid)
    ax.scatter(xs + args.first_cycle, ks, s=60, marker="s", c="0.15", linewidths=0.0, zorder=5)

    ax.set_xlim(args.first_cycle - 0.5, args.first_cycle + args.cycles - 0.5)
    ax.set_ylim(cycle + 0.5, 0.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xticks(list(range(args.first_cycle, args.first_cycle + args.cycles)))
    ax.set_yticks([1] + list(range(5, cycle + 1, 5)))
    ax.set_xlabel("Cycle (zero-based)")
    ax.set_ylabel("Year position in cycle")
    ax.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
