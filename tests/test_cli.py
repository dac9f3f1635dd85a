# tests/test_cli.py
import json
from argparse import Namespace

from apps.cli import demo_cli
from sudoku_trainer.config import SolverConfig

from conftest import EASY, EASY_SOLUTION, SEARCH


def args(**kw):
    base = dict(puzzle=None, file=None, mode="hints", backward=False, config=None, verbose=False)
    base.update(kw)
    return Namespace(**base)


def flat(rows):
    return "".join(str(v) for row in rows for v in row)


def test_explain_lists_moves():
    payload = demo_cli.run(EASY, "explain", SolverConfig())
    assert payload["state"] == "solved"
    assert len(payload["moves"]) == 51
    assert payload["moves"][0]["index"] == 1


def test_hints_fall_back_to_brute_force():
    payload = demo_cli.run(SEARCH, "hints", SolverConfig(techniques=["naked_single"]))
    assert payload["solved"] is True
    assert "stats" in payload


def test_hints_without_fallback_report_the_stall():
    payload = demo_cli.run(SEARCH, "hints", SolverConfig(techniques=["naked_single"], brute_force=False))
    assert payload["state"] == "stalled"
    assert payload["solved"] is False


def test_main_prints_json(capsys):
    assert demo_cli.main(args(puzzle=EASY, mode="brute_force", backward=True)) == 0
    payload = json.loads(capsys.readouterr().out)
    assert flat(payload["current"]) == EASY_SOLUTION


def test_main_reads_a_file(tmp_path, capsys):
    path = tmp_path / "puzzle.txt"
    path.write_text(EASY, encoding="utf-8")
    assert demo_cli.main(args(file=str(path))) == 0
    assert flat(json.loads(capsys.readouterr().out)["current"]) == EASY_SOLUTION


def test_main_rejects_bad_input(tmp_path):
    assert demo_cli.main(args(puzzle="123")) == 2
    bad = tmp_path / "bad.yaml"
    bad.write_text("techniques: [guessing]\n", encoding="utf-8")
    assert demo_cli.main(args(puzzle=EASY, config=str(bad))) == 2
