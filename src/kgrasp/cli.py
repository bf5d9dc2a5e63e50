"""
Command-line entry point: run GRASP clustering on a dataset file.

    kgrasp data.txt --clusters 3 --seed 7 --threshold 0.3 --restarts 25
"""

from typing import List, Optional
import argparse
import sys

from .algorithms.grasp import optimize
from .base.exceptions import InvalidConfiguration, DataFormatError
from .io.loader import load_points
from .io.report import print_report


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kgrasp",
        description="Partitional clustering with GRASP (greedy randomized construction + local search)."
    )
    ap.add_argument("file", type=str, help="Delimited text file with one point per line.")
    ap.add_argument("-k", "--clusters", type=int, required=True, help="Number of clusters K.")
    ap.add_argument("--seed", type=int, default=0, help="Seed of the random source.")
    ap.add_argument("--threshold", type=float, default=0.3,
                    help="Restricted candidate list width (0..1).")
    ap.add_argument("--restarts", type=int, default=25, help="Number of GRASP restarts.")
    ap.add_argument("--max-iterations", type=int, default=10000,
                    help="Local search cap on move evaluations per restart.")
    ap.add_argument("--delimiter", type=str, default=None,
                    help="Column separator (default: whitespace, or comma if present).")
    ap.add_argument("--usecols", type=int, nargs="+", default=None,
                    help="Columns to read (e.g. to skip a label column).")
    ap.add_argument("--no-members", action="store_true",
                    help="Do not list the point indices of each cluster.")
    ap.add_argument("--plot", type=str, default=None,
                    help="Save a 2D scatter plot of the best solution to this path.")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        points = load_points(args.file, delimiter=args.delimiter, usecols=args.usecols)
        result = optimize(points, args.seed, args.clusters, args.threshold,
                          restarts=args.restarts, max_iterations=args.max_iterations,
                          verbose=args.verbose)
    except (InvalidConfiguration, DataFormatError) as exc:
        print(f"kgrasp: error: {exc}", file=sys.stderr)
        return 2

    print_report(args.file, points, result.clusters, result.centroids, result.seed,
                 result.initial_cost, result.best_cost, result.elapsed,
                 show_members=not args.no_members)

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        from .visualization import plot_solution_2d

        ax = plot_solution_2d(points, result.clusters, result.centroids,
                              title=f"GRASP K={args.clusters} cost={result.best_cost:.4f}")
        ax.figure.savefig(args.plot, dpi=120, bbox_inches="tight")
        plt.close(ax.figure)

    return 0


if __name__ == "__main__":
    sys.exit(main())
