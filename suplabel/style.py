"""Typography for shared labels, grid figure creation and figure export."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from .geometry import DEFAULT_BUFFERS, LabelBuffers

EXPORT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
RASTER_DPI = 300
PANEL_SIZE: tuple[float, float] = (3.2, 2.6)


@dataclass(frozen=True)
class LabelStyle:
    """Default appearance and spacing of figure-level shared labels.

    Attributes:
        title_fontsize: Font size of the shared title.
        label_fontsize: Font size of the shared x- and y-labels.
        title_weight: Font weight of the shared title.
        buffers: Default distances between the labels and the axes group.
    """

    title_fontsize: float = 14.0
    label_fontsize: float = 12.0
    title_weight: str = "bold"
    buffers: LabelBuffers = field(default_factory=lambda: DEFAULT_BUFFERS)


LABEL_STYLE = LabelStyle()


def label_text_defaults(kind: str, style: LabelStyle = LABEL_STYLE) -> dict:
    """Return default ``Text`` properties for one shared label kind."""
    if kind == "title":
        return {"fontsize": style.title_fontsize, "fontweight": style.title_weight}
    return {"fontsize": style.label_fontsize}


def new_figure(nrows: int = 1, ncols: int = 1, **kwargs):
    """Create a subplot grid sized from the number of panels."""
    width, height = PANEL_SIZE
    kwargs.setdefault("figsize", (width * ncols + 1.0, height * nrows + 1.0))
    kwargs.setdefault("squeeze", False)
    return plt.subplots(nrows, ncols, **kwargs)


def save_figure(
    fig: Figure,
    path: str | Path,
    formats: Sequence[str] = EXPORT_FORMATS,
    *,
    dpi: int = RASTER_DPI,
) -> list[Path]:
    """Write ``fig`` once per format next to ``path`` and return the files.

    The suffix of ``path`` is ignored; each format supplies its own. Raster
    output uses ``dpi``; vector output keeps Matplotlib's default. The bounding
    box is tight so shared labels outside the axes group are never cropped.

    Raises:
        ValueError: If a format is not one of ``EXPORT_FORMATS``.
    """
    unknown = [ext for ext in formats if ext not in EXPORT_FORMATS]
    if unknown:
        raise ValueError(f"Unsupported export format(s) {unknown}; use {EXPORT_FORMATS}.")
    stem = Path(path).with_suffix("")
    stem.parent.mkdir(parents=True, exist_ok=True)
    written = []
    for ext in formats:
        target = stem.with_suffix(f".{ext}")
        fig.savefig(
            target,
            dpi=dpi if ext == "png" else None,
            bbox_inches="tight",
            pad_inches=0.1,
        )
        written.append(target)
    return written
