import json
import logging
from pathlib import Path

import pytest

from lazyspf import cli


def test_no_args_prints_help_and_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: lazyspf" in capsys.readouterr().out


def test_path_cycle_human_readable(capsys) -> None:
    cli.main(["path", "5", "8"])
    out = capsys.readouterr().out
    assert "Path: 5 -> 6 -> 7 -> 8" in out
    assert "Hops: 3" in out
    assert "Cost: 3" in out


def test_path_tree_json(capsys) -> None:
    cli.main(["--quiet", "path", "--graph", "tree", "1", "1000", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["vertices"] == [1, 3, 7, 15, 31, 62, 125, 250, 500, 1000]
    assert len(payload["edges"]) == 9
    assert payload["cost"] == 9
    assert payload["stats"]["extracted"] >= 10


def test_path_lattice_json(capsys) -> None:
    cli.main(["path", "-g", "lattice", "3", "12", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["vertices"][0] == 3
    assert payload["vertices"][-1] == 12
    assert payload["cost"] == pytest.approx(2.5)


def test_path_grid(capsys) -> None:
    cli.main(["path", "--graph", "grid", "--size", "5", "0,0", "4,4", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["vertices"][0] == [0, 0]
    assert payload["vertices"][-1] == [4, 4]
    assert payload["cost"] == 8


def test_path_open_chain_has_no_path(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="lazyspf"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", "--open", "5", "3"])
    assert exc_info.value.code == 1
    assert "No path found" in caplog.text


def test_path_invalid_vertex_exits_one(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="lazyspf"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", "--size", "5", "7", "0"])
    assert exc_info.value.code == 1
    assert "outside" in caplog.text


def test_path_bad_grid_cell(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="lazyspf"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", "--graph", "grid", "0", "4,4"])
    assert exc_info.value.code == 1
    assert "x,y" in caplog.text


def test_path_edgelist(tmp_path: Path, capsys) -> None:
    edgelist = tmp_path / "g.txt"
    edgelist.write_text("A B 1\nB C 1\nA C 5\nC D 0.5\n")
    cli.main(["path", "--edgelist", str(edgelist), "A", "D", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["vertices"] == ["A", "B", "C", "D"]
    assert payload["cost"] == pytest.approx(2.5)


def test_path_edgelist_negative_weight(tmp_path: Path, caplog) -> None:
    edgelist = tmp_path / "g.txt"
    edgelist.write_text("A B -1\nB C 1\n")
    with caplog.at_level(logging.ERROR, logger="lazyspf"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["path", "-e", str(edgelist), "A", "C"])
    assert exc_info.value.code == 1
    assert "invalid weight" in caplog.text


def test_path_edgelist_zero_weight_strict(tmp_path: Path) -> None:
    edgelist = tmp_path / "g.txt"
    edgelist.write_text("A B 0\n")
    cli.main(["path", "-e", str(edgelist), "A", "B"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["path", "-e", str(edgelist), "A", "B", "--strict-positive"])
    assert exc_info.value.code == 1


def test_path_edgelist_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["path", "-e", str(tmp_path / "missing.txt"), "A", "B"])
    assert exc_info.value.code == 1


def test_graph_and_edgelist_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["path", "-g", "tree", "-e", str(tmp_path / "x"), "1", "2"])
    assert exc_info.value.code == 2


def test_verbose_enables_debug(capsys) -> None:
    cli.main(["--verbose", "path", "--debug-checks", "5", "8"])
    assert logging.getLogger("lazyspf").getEffectiveLevel() == logging.DEBUG
    cli.main(["path", "5", "6"])
    assert logging.getLogger("lazyspf").getEffectiveLevel() == logging.INFO


def test_quiet_raises_level_to_warning() -> None:
    cli.main(["--quiet", "path", "5", "6"])
    assert logging.getLogger("lazyspf").getEffectiveLevel() == logging.WARNING
    cli.main(["--quiet", "--verbose", "path", "5", "6"])
    assert logging.getLogger("lazyspf").getEffectiveLevel() == logging.DEBUG
    cli.main(["path", "5", "6"])


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, "3"),
        (1234.0, "1,234"),
        (1234.5, "1,234.5"),
        (1234567, "1,234,567"),
        (0.125, "0.125"),
        ("n/a", "n/a"),
    ],
)
def test_format_cost_groups_thousands(value, expected) -> None:
    assert cli._format_cost(value) == expected


def test_path_cost_printed_with_separators(capsys) -> None:
    cli.main(["path", "--size", "2000", "0", "1500"])
    out = capsys.readouterr().out
    assert "   Hops: 1500" in out
    assert "   Cost: 1,500" in out
