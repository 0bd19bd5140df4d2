"""
Integration tests for the command-line tools.

Each tool's main() is driven through sys.argv, the same way the console
scripts call it.
"""

import argparse
import json
import sys

import pytest
from PIL import Image

from quilt.tools import analyze, generate, options, render


def run_tool(monkeypatch, module, *argv):
    monkeypatch.setattr(sys, "argv", [module.__name__, *argv])
    module.main()


class TestGenerateTool:
    """Tests for the granny-generate tool."""

    def test_writes_png_and_json(self, tmp_path, monkeypatch, capsys):
        png = tmp_path / "granny.png"
        saved = tmp_path / "granny.json"

        run_tool(
            monkeypatch, generate,
            "5", "4", str(png),
            "--seed", "7", "--max-passes", "100000", "--json", str(saved),
        )

        out = capsys.readouterr().out
        assert "quilt has 120 combinations..." in out
        assert "generated 120 squares" in out
        assert f"Saved: {png}" in out

        with Image.open(png) as img:
            assert img.size == (200, 160)

        data = json.loads(saved.read_text())
        assert data["width"] == 5
        assert data["height"] == 4
        assert data["metadata"]["seed"] == 7
        assert data["metadata"]["settled"] is True

    def test_writes_animation(self, tmp_path, monkeypatch):
        png = tmp_path / "granny.png"
        gif = tmp_path / "granny.gif"

        run_tool(
            monkeypatch, generate,
            "3", "3", str(png),
            "--seed", "1", "--max-passes", "100000",
            "--animate", str(gif), "--frame-step", "5", "--square-size", "20",
        )

        with Image.open(gif) as img:
            assert img.format == "GIF"
            assert img.size == (60, 60)

    def test_bad_palette_exits(self, tmp_path, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_tool(
                monkeypatch, generate,
                "3", "3", str(tmp_path / "out.png"), "-p", str(tmp_path / "missing.json"),
            )
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out

    def test_budget_exceeded_saves_every_output(self, tmp_path, monkeypatch, capsys):
        palette = tmp_path / "three.json"
        palette.write_text(json.dumps(["#FF0000", "#FFFFFF", "#0000FF"]))
        png = tmp_path / "partial.png"
        gif = tmp_path / "partial.gif"
        saved = tmp_path / "partial.json"

        with pytest.raises(SystemExit) as exc_info:
            run_tool(
                monkeypatch, generate,
                "3", "3", str(png),
                "-p", str(palette), "-r", "shared-colours", "--max-passes", "20",
                "--animate", str(gif), "--json", str(saved),
            )
        assert exc_info.value.code == 1
        assert "Saving the partial quilt" in capsys.readouterr().out
        assert png.exists()
        assert gif.exists()

        data = json.loads(saved.read_text())
        assert data["metadata"]["settled"] is False
        assert data["metadata"]["passes"] == 20

    @pytest.mark.parametrize("size", ["4", "0"])
    def test_square_size_too_small_exits(self, tmp_path, monkeypatch, capsys, size):
        png = tmp_path / "out.png"
        with pytest.raises(SystemExit) as exc_info:
            run_tool(monkeypatch, generate, "3", "3", str(png), "--square-size", size)
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out
        assert not png.exists()


class TestRenderTool:
    """Tests for the granny-render tool."""

    def test_renders_saved_quilt(self, tmp_path, monkeypatch):
        saved = tmp_path / "granny.json"
        run_tool(
            monkeypatch, generate,
            "4", "2", str(tmp_path / "granny.png"),
            "--seed", "3", "--max-passes", "100000", "--json", str(saved),
        )

        out = tmp_path / "rerendered.png"
        run_tool(monkeypatch, render, str(saved), str(out), "--square-size", "20", "--ring-inset", "3")

        with Image.open(out) as img:
            assert img.size == (80, 40)

    def test_missing_input_exits(self, tmp_path, monkeypatch):
        with pytest.raises(SystemExit):
            run_tool(monkeypatch, render, str(tmp_path / "nope.json"))


class TestAnalyzeTool:
    """Tests for the granny-analyze tool."""

    def test_reports_statistics(self, monkeypatch, capsys):
        run_tool(monkeypatch, analyze, "4", "4", "--runs", "3", "--max-passes", "100000")

        out = capsys.readouterr().out
        assert "Completed: 3/3" in out
        assert "Passes" in out
        assert "Average mutations" in out

    def test_percentile_stats(self):
        stats = analyze.percentile_stats([1, 2, 3, 4, 5])
        assert stats["min"] == 1.0
        assert stats["50th"] == 3.0
        assert stats["max"] == 5.0
        assert stats["count"] == 5

    def test_percentile_stats_empty(self):
        with pytest.raises(ValueError):
            analyze.percentile_stats([])


class TestOptions:
    """Tests for the shared quilt arguments."""

    def parse(self, *argv):
        parser = argparse.ArgumentParser()
        options.add_quilt_arguments(parser)
        return parser.parse_args(list(argv))

    def test_build_quilt_from_positionals(self):
        args = self.parse("6", "3", "--usage-cap", "2", "--max-passes", "99")
        quilt = options.build_quilt(args)
        assert (quilt.width, quilt.height) == (6, 3)
        assert quilt.config.usage_cap == 2
        assert quilt.config.max_passes == 99
        assert len(quilt.rules) == 2

    def test_seed_override_is_reproducible(self):
        args = self.parse("4", "4", "--seed", "1")
        first = options.build_quilt(args, seed=5)
        second = options.build_quilt(args, seed=5)
        assert list(first.squares) == list(second.squares)

    def test_empty_rules_flag(self):
        args = self.parse("4", "4", "--rules")
        assert options.build_quilt(args).rules == []

    def test_bad_usage_cap_exits(self, capsys):
        args = self.parse("4", "4", "--usage-cap", "0")
        with pytest.raises(SystemExit):
            options.build_quilt(args)
        assert "Error:" in capsys.readouterr().out

    def test_ring_inset_default_size(self):
        assert options.ring_inset_for(40) == 5

    def test_ring_inset_scales_down(self):
        assert options.ring_inset_for(20) == 2
        assert options.ring_inset_for(10) == 1

    def test_ring_inset_too_small_exits(self, capsys):
        with pytest.raises(SystemExit):
            options.ring_inset_for(4)
        assert "Error:" in capsys.readouterr().out
