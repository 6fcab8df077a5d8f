"""Compute the shared bounding box of a group of axes and label anchor points.

All coordinates are normalized figure coordinates: (0, 0) is the lower-left
corner of the parent figure and (1, 1) the upper-right corner. This module
does not create artists; it only reads positions and does arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
from matplotlib.axes import Axes


@dataclass(frozen=True)
class LabelBuffers:
    """Distances between the bounding box and each shared label.

    Attributes:
        buffert: Gap between the top of the box and the title baseline.
        bufferx: Gap between the bottom of the box and the x-label top.
        buffery: Gap between the left of the box and the y-label.
    """

    buffert: float = 0.02
    bufferx: float = 0.05
    buffery: float = 0.05


DEFAULT_BUFFERS = LabelBuffers()


@dataclass(frozen=True)
class AxesBox:
    """Axis-aligned rectangle stored as (left, bottom, right, top)."""

    left: float
    bottom: float
    right: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2.0

    @property
    def center_y(self) -> float:
        return (self.bottom + self.top) / 2.0

    def as_bounds(self) -> tuple[float, float, float, float]:
        """Return the box as Matplotlib bounds (left, bottom, width, height)."""
        return (self.left, self.bottom, self.width, self.height)


@dataclass(frozen=True)
class LabelAnchors:
    """Anchor points (in figure fractions) for the three shared labels."""

    title: tuple[float, float]
    xlabel: tuple[float, float]
    ylabel: tuple[float, float]


def axes_box(ax: Axes) -> AxesBox:
    """Return the normalized figure rectangle occupied by one axes.

    ``Axes.get_position`` always reports figure-relative fractions, so the
    caller's axes keep whatever position and locator they had.
    """
    bbox = ax.get_position()
    return AxesBox(
        left=float(bbox.x0),
        bottom=float(bbox.y0),
        right=float(bbox.x1),
        top=float(bbox.y1),
    )


def union_box(boxes: Iterable[AxesBox]) -> AxesBox:
    """Return the smallest box that contains every box in ``boxes``.

    Args:
        boxes (Iterable[AxesBox]): Rectangles in normalized figure units.

    Returns:
        AxesBox: ``(min left, min bottom, max right, max top)``.

    Raises:
        ValueError: If ``boxes`` is empty.
    """
    rows = [(b.left, b.bottom, b.right, b.top) for b in boxes]
    if not rows:
        raise ValueError("At least one axes box is required to compute a union.")
    arr = np.asarray(rows, dtype=float)
    return AxesBox(
        left=float(np.min(arr[:, 0])),
        bottom=float(np.min(arr[:, 1])),
        right=float(np.max(arr[:, 2])),
        top=float(np.max(arr[:, 3])),
    )


def bounding_box(axes: Sequence[Axes]) -> AxesBox:
    """Return the union bounding box of a group of axes."""
    return union_box(axes_box(ax) for ax in axes)


def label_anchors(box: AxesBox, buffers: LabelBuffers = DEFAULT_BUFFERS) -> LabelAnchors:
    """Compute where the title, x-label and y-label are anchored.

    Args:
        box (AxesBox): Union bounding box of the labelled axes.
        buffers (LabelBuffers): Offsets from the box edges. Zero and negative
            values are allowed; negative values move a label inside the box.

    Returns:
        LabelAnchors: Title above the top edge, x-label below the bottom edge,
        y-label left of the left edge. Title and x-label share the horizontal
        center; the y-label sits on the vertical center.

    Raises:
        ValueError: If any buffer is not finite.
    """
    values = (buffers.buffert, buffers.bufferx, buffers.buffery)
    if not np.all(np.isfinite(np.asarray(values, dtype=float))):
        raise ValueError(f"Label buffers must be finite, got {values}")
    return LabelAnchors(
        title=(box.center_x, box.top + float(buffers.buffert)),
        xlabel=(box.center_x, box.bottom - float(buffers.bufferx)),
        ylabel=(box.left - float(buffers.buffery), box.center_y),
    )
