"""Add a shared title, x-label and y-label to a group of axes.

The labels are placed around the union bounding box of the selected axes and
are drawn on an invisible overlay axes that spans the whole figure. The
overlay stays behind the real axes and is excluded from interactive
navigation, so zooming and panning keep targeting the data axes.
"""

from __future__ import annotations

import logging
import operator
from typing import Iterable, Mapping, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import FigureBase
from matplotlib.text import Text

from .errors import MixedFigureError, TooManyOutputsError
from .geometry import (
    AxesBox,
    LabelBuffers,
    bounding_box,
    label_anchors,
)
from .style import LABEL_STYLE, label_text_defaults

logger = logging.getLogger(__name__)

LABEL_KINDS: tuple[str, ...] = ("title", "xlabel", "ylabel")
OVERLAY_LABEL = "_suplabel_overlay"
OVERLAY_RECT: tuple[float, float, float, float] = (0.0, 0.0, 1.0, 1.0)
FULL_FIGURE_BOX = AxesBox(0.0, 0.0, 1.0, 1.0)

_ALIGNMENT = {
    "title": {"ha": "center", "va": "bottom"},
    "xlabel": {"ha": "center", "va": "top"},
    "ylabel": {
        "ha": "center",
        "va": "bottom",
        "rotation": 90,
        "rotation_mode": "anchor",
    },
}


def is_overlay_axes(ax: Axes) -> bool:
    """Return whether ``ax`` is an overlay created by :func:`suplabel`."""
    return ax.get_label() == OVERLAY_LABEL


def _as_axes_list(axes: Axes | Iterable[Axes] | None) -> list[Axes]:
    if axes is None:
        return []
    if isinstance(axes, Axes):
        return [axes]
    return list(axes)


def resolve_axes(
    figure: FigureBase | None = None,
    axes: Axes | Iterable[Axes] | None = None,
) -> tuple[FigureBase, list[Axes]]:
    """Resolve the target figure and the axes to be labelled.

    Args:
        figure (matplotlib.figure.FigureBase | None): Figure to label. Ignored
            when ``axes`` is given. Defaults to the current figure.
        axes (Axes | Iterable[Axes] | None): Explicit axes. When omitted or
            empty, every visible axes of ``figure`` is used, except overlays
            left behind by earlier calls.

    Returns:
        tuple[FigureBase, list[Axes]]: Target figure and selected axes.

    Raises:
        MixedFigureError: If explicit axes belong to more than one figure.
    """
    axes_list = _as_axes_list(axes)
    if not axes_list:
        fig = figure if figure is not None else plt.gcf()
        selected = [
            ax for ax in fig.get_axes() if ax.get_visible() and not is_overlay_axes(ax)
        ]
        return fig, selected

    parents: list[FigureBase] = []
    for ax in axes_list:
        parent = ax.get_figure()
        if not any(parent is seen for seen in parents):
            parents.append(parent)
    if len(parents) > 1:
        raise MixedFigureError(
            f"All specified axes must be on the same figure; got {len(parents)} figures."
        )
    return parents[0], axes_list


def create_overlay_axes(figure: FigureBase) -> Axes:
    """Create the invisible full-figure axes that carries the shared labels.

    The figure's current axes is restored afterwards, so ``plt.gca()`` keeps
    returning the user's data axes.
    """
    previous = figure.gca() if figure.get_axes() else None
    overlay = figure.add_axes(OVERLAY_RECT, label=OVERLAY_LABEL)
    if previous is not None:
        figure.sca(previous)
    overlay.set_axis_off()
    overlay.set_xlim(0.0, 1.0)
    overlay.set_ylim(0.0, 1.0)
    overlay.set_navigate(False)
    return overlay


def send_to_back(figure: FigureBase, ax: Axes) -> None:
    """Lower ``ax`` below every other axes of ``figure`` in drawing order."""
    others = [other for other in figure.get_axes() if other is not ax]
    floor = min((other.get_zorder() for other in others), default=ax.get_zorder())
    ax.set_zorder(min(floor, ax.get_zorder()) - 1)


def order_handles(
    order: Sequence[str],
    handles: Mapping[str, Text],
    overlay: Axes | None = None,
) -> list:
    """Arrange label handles in call order, overlay axes last when given."""
    ordered: list = [handles[kind] for kind in order]
    if overlay is not None:
        ordered.append(overlay)
    return ordered


def _requested_labels(labels: Mapping[str, object]) -> list[str]:
    for key in labels:
        if key not in LABEL_KINDS:
            raise TypeError(f"suplabel() got an unexpected keyword argument '{key}'")
    return [
        key
        for key, value in labels.items()
        if value is not None and str(value) != ""
    ]


def suplabel(
    figure: FigureBase | None = None,
    axes: Axes | Iterable[Axes] | None = None,
    *,
    buffert: float = LABEL_STYLE.buffers.buffert,
    bufferx: float = LABEL_STYLE.buffers.bufferx,
    buffery: float = LABEL_STYLE.buffers.buffery,
    nout: int | None = None,
    text_kwargs: Mapping | None = None,
    **labels: str,
) -> list:
    """Add a title, x-label and/or y-label shared by a group of axes.

    Labels are passed as keywords (``title``, ``xlabel``, ``ylabel``). The
    returned handles follow the order the keywords were written at the call
    site, so ``suplabel(ylabel="pH", title="Runs")`` returns
    ``[ylabel_text, title_text]``.

    Args:
        figure (FigureBase | None): Figure whose visible axes are labelled when
            ``axes`` is not given. Defaults to the current figure.
        axes (Axes | Iterable[Axes] | None): Axes to label. All must share one
            parent figure.
        buffert (float): Normalized gap between the box top and the title.
        bufferx (float): Normalized gap between the box bottom and the x-label.
        buffery (float): Normalized gap between the box left and the y-label.
        nout (int | None): Number of handles to return. Defaults to one per
            non-empty label. One extra handle returns the overlay axes last.
        text_kwargs (Mapping | None): Extra ``Text`` properties applied to
            every created label.
        **labels (str): ``title``, ``xlabel`` and/or ``ylabel`` strings. Empty
            strings and ``None`` create no label.

    Returns:
        list: ``Text`` handles in call order, optionally followed by the
        overlay ``Axes``.

    Raises:
        MixedFigureError: If ``axes`` span more than one figure.
        TooManyOutputsError: If ``nout`` exceeds the number of labels plus one.
        TypeError: If an unknown label keyword is given or ``nout`` is not an
            integer.
        ValueError: If ``nout`` is negative or a buffer is not finite.

    Note:
        Positions are read with ``Axes.get_position``, which always reports
        normalized figure coordinates, so the labelled axes are left
        untouched. Axes added or moved afterwards are not tracked.
        A figure without visible axes is labelled around the whole figure.
    """
    order = _requested_labels(labels)
    n_labels = len(order)
    n_out = n_labels if nout is None else operator.index(nout)
    if n_out < 0:
        raise ValueError(f"nout must be >= 0, got {nout}")
    if n_out > n_labels + 1:
        raise TooManyOutputsError(
            f"Requested {n_out} outputs but at most {n_labels + 1} are available "
            f"({n_labels} labels + overlay axes)."
        )
    include_overlay = n_out == n_labels + 1

    fig, selected = resolve_axes(figure, axes)
    box = bounding_box(selected) if selected else FULL_FIGURE_BOX
    anchors = label_anchors(
        box, LabelBuffers(buffert=buffert, bufferx=bufferx, buffery=buffery)
    )
    logger.debug(
        "Labelling %d axes inside box (%.3f, %.3f, %.3f, %.3f)",
        len(selected),
        box.left,
        box.bottom,
        box.right,
        box.top,
    )

    overlay = create_overlay_axes(fig)
    created: dict[str, Text] = {}
    for kind in LABEL_KINDS:
        if kind not in order:
            continue
        x, y = getattr(anchors, kind)
        props = dict(label_text_defaults(kind))
        props.update(_ALIGNMENT[kind])
        props["transform"] = overlay.transAxes
        if text_kwargs:
            props.update(text_kwargs)
        created[kind] = overlay.text(
            x, y, str(labels[kind]), **props
        )

    send_to_back(fig, overlay)

    handles = order_handles(order, created, overlay if include_overlay else None)
    return handles[:n_out]
