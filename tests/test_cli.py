from __future__ import annotations

import pytest

from hexlattice import __main__ as cli
from hexlattice import config_store
from hexlattice.config import GridConfig


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config_store, "CONFIG_PATH", tmp_path / "grid.json")


def test_svg_export(tmp_path, capsys):
    out = tmp_path / "grid.svg"
    assert cli.main(["--radius", "1", "--svg", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert text.count("<polygon") == 7
    assert "wrote 7 hexagons" in capsys.readouterr().out


def test_table_output(capsys):
    assert cli.main(["--table", "--radius", "0"]) == 0
    out = capsys.readouterr().out
    assert "0,0,0" in out


def test_empty_triangle_warns(tmp_path, capsys):
    out = tmp_path / "empty.svg"
    status = cli.main(["--shape", "triangle", "--orientation", "pointy", "--svg", str(out)])
    assert status == 0
    assert "is empty" in capsys.readouterr().out
    assert "<polygon" not in out.read_text(encoding="utf-8")


def test_invalid_options_return_error(capsys):
    assert cli.main(["--table", "--radius", "-2"]) == 2
    assert "invalid options" in capsys.readouterr().out


def test_config_from_args_overlays_base():
    args = cli.build_parser().parse_args(["--size", "12", "--orientation", "flat"])
    base = GridConfig(radius=4)
    cfg = cli.config_from_args(args, base)
    assert cfg.radius == 4
    assert cfg.orientation.value == "flat"
    assert (cfg.size_x, cfg.size_y) == (12.0, 12.0)
