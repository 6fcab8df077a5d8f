"""Label typography, grid creation and multi-format figure export."""

from pathlib import Path

import matplotlib.pyplot as plt
import pytest

from suplabel.geometry import DEFAULT_BUFFERS
from suplabel.style import (
    LABEL_STYLE,
    LabelStyle,
    label_text_defaults,
    new_figure,
    save_figure,
)


def test_save_figure_exports_every_format(monkeypatch, tmp_path):
    """Ensure each format is written with tight bounds and raster-only dpi."""
    fig, _ = plt.subplots()
    calls = []

    def _fake_savefig(path, **kwargs):
        calls.append((Path(path).suffix, kwargs))

    monkeypatch.setattr(fig, "savefig", _fake_savefig)

    written = save_figure(fig, tmp_path / "labelled_grid.png")

    assert written == [
        tmp_path / "labelled_grid.png",
        tmp_path / "labelled_grid.pdf",
        tmp_path / "labelled_grid.svg",
    ]
    assert [ext for ext, _ in calls] == [".png", ".pdf", ".svg"]
    for ext, kwargs in calls:
        assert kwargs.get("bbox_inches") == "tight"
        if ext == ".png":
            assert kwargs.get("dpi") == 300
        else:
            assert kwargs.get("dpi") is None


def test_save_figure_rejects_unknown_format(tmp_path):
    fig, _ = plt.subplots()
    with pytest.raises(ValueError, match="Unsupported export format"):
        save_figure(fig, tmp_path / "out", formats=("png", "bmp"))
    assert not list(tmp_path.iterdir())


def test_save_figure_writes_files(tmp_path):
    fig, _ = plt.subplots()
    (written,) = save_figure(fig, tmp_path / "nested" / "plot", formats=("png",))
    assert written.exists()


class TestLabelStyle:
    """Default shared-label appearance."""

    def test_title_defaults(self):
        assert label_text_defaults("title") == {
            "fontsize": LABEL_STYLE.title_fontsize,
            "fontweight": "bold",
        }

    def test_axis_label_defaults(self):
        assert label_text_defaults("ylabel") == {
            "fontsize": LABEL_STYLE.label_fontsize
        }

    def test_custom_style(self):
        style = LabelStyle(title_fontsize=20.0, title_weight="normal")
        assert label_text_defaults("title", style) == {
            "fontsize": 20.0,
            "fontweight": "normal",
        }

    def test_default_buffers(self):
        assert LABEL_STYLE.buffers == DEFAULT_BUFFERS


def test_new_figure_sizes_from_panels():
    fig, axes = new_figure(2, 3)
    assert axes.shape == (2, 3)
    width, height = fig.get_size_inches()
    assert width > height
