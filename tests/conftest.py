"""Pytest configuration for repository-relative imports."""

import os
import sys

import matplotlib

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def grid_figure():
    """Figure with a 2x2 grid of axes at known, uneven positions."""
    fig = plt.figure()
    rects = [
        (0.10, 0.15, 0.30, 0.30),
        (0.50, 0.12, 0.40, 0.30),
        (0.12, 0.50, 0.30, 0.35),
        (0.50, 0.50, 0.38, 0.40),
    ]
    axes = [fig.add_axes(rect) for rect in rects]
    return fig, axes
