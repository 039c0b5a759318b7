# simulations/report.py

from __future__ import annotations

import argparse
import logging
import os
import sys

import matplotlib.pyplot as plt

from .charts import build_report_figure, build_spread_figure
from .common import format_narrative, format_spread_line, format_summary_line, format_table
from .run import DEFAULT_SEED, SAMPLE_SIZES, run_convergence, run_report


logger = logging.getLogger(__name__)


# Independent seeds per sample size for the spread study (0 disables it).
DEFAULT_SPREAD_SEEDS = 50


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Roll a fair die at growing sample sizes and report convergence."
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"RNG seed (default: {DEFAULT_SEED})")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=list(SAMPLE_SIZES),
        help="sample sizes to roll (default: 10 100 1000 10000 100000)",
    )
    parser.add_argument(
        "--spread-seeds", type=int, default=DEFAULT_SPREAD_SEEDS,
        help="seeds per sample size for the spread study, 0 to skip",
    )
    parser.add_argument("--output-dir", help="save charts as PNG files here instead of showing them")
    parser.add_argument("--no-show", action="store_true", help="do not open chart windows")
    parser.add_argument("--verbose", "-v", action="store_true", help="log progress")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.spread_seeds < 0:
        parser.error("--spread-seeds must be >= 0")

    try:
        results = run_report(args.sizes, seed=args.seed)
        spreads = []
        if args.spread_seeds > 0:
            seeds = range(args.seed, args.seed + args.spread_seeds)
            spreads = run_convergence(args.sizes, seeds)
    except ValueError as e:
        parser.error(str(e))

    # Print tables and stats
    for r in results:
        print(format_table(r))
        print(format_summary_line(r))
        print()
    print(format_narrative(results))

    if spreads:
        print()
        for s in spreads:
            print(format_spread_line(s))

    figures = {"report.png": build_report_figure(results)}
    if spreads:
        figures["spread.png"] = build_spread_figure(spreads)

    if args.output_dir:
        os.makedirs(args.output_dir, exist_ok=True)
        for name, fig in figures.items():
            path = os.path.join(args.output_dir, name)
            fig.savefig(path, dpi=150)
            logger.info("wrote %s", path)
    elif not args.no_show:
        plt.show()

    for fig in figures.values():
        plt.close(fig)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
