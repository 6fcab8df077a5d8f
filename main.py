#!/usr/bin/env python3
"""
Demo script: label a grid of subplots with one shared title and axis labels.
"""

# 1) Build an ROWS x COLS grid of subplots with sample curves.
# 2) Add a shared title, x-label and y-label around the whole grid.
# 3) Save the figure as PNG, PDF and SVG next to each other.

import argparse
import logging
import os
import sys

import matplotlib

matplotlib.use("Agg")

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from suplabel import bounding_box, suplabel
from suplabel.style import new_figure, save_figure


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the demo."""
    parser = argparse.ArgumentParser(
        description="Render a subplot grid with shared title and axis labels."
    )
    parser.add_argument("--rows", type=int, default=2, help="Number of subplot rows.")
    parser.add_argument("--cols", type=int, default=2, help="Number of subplot columns.")
    parser.add_argument("--title", default="Shared title", help="Shared title text.")
    parser.add_argument("--xlabel", default="Time / s", help="Shared x-label text.")
    parser.add_argument("--ylabel", default="Signal / V", help="Shared y-label text.")
    parser.add_argument("--buffert", type=float, default=0.02)
    parser.add_argument("--bufferx", type=float, default=0.05)
    parser.add_argument("--buffery", type=float, default=0.05)
    parser.add_argument(
        "--outdir",
        default="output",
        help="Output directory (default: output).",
    )
    parser.add_argument("--name", default="suplabel demo", help="Output file stem.")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional log file written in addition to stdout.",
    )
    return parser


def main(argv=None):
    """Render the demo figure and return a process exit code."""
    args = _build_arg_parser().parse_args(argv)

    handlers = [logging.StreamHandler(sys.stdout)]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, mode="w"))
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )

    if args.rows < 1 or args.cols < 1:
        logging.error("Grid must have at least one row and one column.")
        return 1

    fig, axes = new_figure(args.rows, args.cols)
    x = np.linspace(0.0, 2.0 * np.pi, 200)
    for idx, ax in enumerate(axes.flat):
        ax.plot(x, np.sin(x + idx * np.pi / 4.0))
    fig.subplots_adjust(left=0.14, right=0.97, bottom=0.14, top=0.90)
    logging.info("Created %d x %d subplot grid", args.rows, args.cols)

    box = bounding_box(list(axes.flat))
    logging.info(
        "Bounding box: left=%.3f bottom=%.3f right=%.3f top=%.3f",
        box.left,
        box.bottom,
        box.right,
        box.top,
    )

    labels = {"title": args.title, "xlabel": args.xlabel, "ylabel": args.ylabel}
    used = [kind for kind, text in labels.items() if text]
    handles = suplabel(
        fig,
        buffert=args.buffert,
        bufferx=args.bufferx,
        buffery=args.buffery,
        nout=len(used) + 1,
        **labels,
    )
    for kind, handle in zip(used, handles):
        logging.info("%s anchored at (%.3f, %.3f)", kind, *handle.get_position())
    logging.info("Overlay axes z-order: %s", handles[-1].get_zorder())

    written = save_figure(fig, os.path.join(args.outdir, args.name.replace(" ", "_")))
    for path in written:
        logging.info("Saved figure: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
