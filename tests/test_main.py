"""End-to-end run of the demo script."""

import logging

import main


def test_main_writes_figure_bundle(tmp_path):
    code = main.main(["--outdir", str(tmp_path), "--name", "demo grid"])
    assert code == 0
    for ext in ("png", "pdf", "svg"):
        assert (tmp_path / f"demo_grid.{ext}").exists()


def test_main_with_empty_title(tmp_path):
    code = main.main(["--outdir", str(tmp_path), "--title", "", "--rows", "1"])
    assert code == 0


def test_main_rejects_empty_grid(tmp_path):
    assert main.main(["--outdir", str(tmp_path), "--rows", "0"]) == 1


def test_repeated_runs_replace_log_file_handler(tmp_path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    assert main.main(["--outdir", str(tmp_path), "--log-file", str(first)]) == 0
    assert main.main(["--outdir", str(tmp_path), "--log-file", str(second)]) == 0

    targets = [
        getattr(handler, "baseFilename", None)
        for handler in logging.getLogger().handlers
    ]
    assert str(first) not in targets
    assert str(second) in targets
    assert "Saved figure" in first.read_text()
