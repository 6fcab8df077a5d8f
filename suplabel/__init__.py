"""
Shared figure-level labels for groups of Matplotlib axes.

Adds a common title, x-label and y-label around the union bounding box of a
set of subplots, drawn on an invisible overlay axes.

Modules:
    - labels: Resolves the axes to label and creates the shared labels.
    - geometry: Bounding-box union and label anchor arithmetic.
    - style: Global plotting style, label typography and save helpers.
    - errors: Input-validation exceptions.
"""

__version__ = "1.0.0"

from .errors import MixedFigureError, SuplabelError, TooManyOutputsError
from .geometry import (
    DEFAULT_BUFFERS,
    AxesBox,
    LabelAnchors,
    LabelBuffers,
    bounding_box,
    label_anchors,
    union_box,
)
from .labels import is_overlay_axes, resolve_axes, suplabel

__all__ = [
    # Labels
    "suplabel",
    "resolve_axes",
    "is_overlay_axes",
    # Geometry
    "AxesBox",
    "LabelAnchors",
    "LabelBuffers",
    "DEFAULT_BUFFERS",
    "bounding_box",
    "label_anchors",
    "union_box",
    # Errors
    "SuplabelError",
    "MixedFigureError",
    "TooManyOutputsError",
]
