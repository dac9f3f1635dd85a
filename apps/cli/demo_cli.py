"""Command-line demo: load a puzzle, explain or solve it, print a JSON report."""

# demo_cli.py
# - Takes a puzzle string (--puzzle) or a text file (--file)
# - 'explain':      every hint the hint solver applies, as moves
# - 'hints':        hint solver, then backtracking if it stalls (config: brute_force)
# - 'brute_force':  backtracking only
#
# Usage:
#   python apps/cli/demo_cli.py --puzzle 000000010400000000020000000... --mode hints
#   python apps/cli/demo_cli.py --file puzzle.txt --mode explain --config solver.yaml --verbose

import argparse
import json
import logging
import sys
from pathlib import Path

from sudoku_trainer.brute_force import BruteForceSolver
from sudoku_trainer.config import load_config
from sudoku_trainer.errors import SudokuError
from sudoku_trainer.hint_solver import HintSolver
from sudoku_trainer.sudoku_io import format_grid, grid_to_rows, load_grid
from sudoku_trainer.techniques.registry import default_registry

logger = logging.getLogger("demo_cli")


def run(puzzle: str, mode: str, config) -> dict:
    grid = load_grid(puzzle)
    payload = {"mode": mode, "original": grid_to_rows(grid)}
    solver = HintSolver(default_registry().finders(config.techniques))

    if mode == "explain":
        moves = []
        for i, hint in enumerate(solver.find_all_hints(grid), start=1):
            move = hint.as_move()
            move["index"] = i
            moves.append(move)
        payload["moves"] = moves
        payload["state"] = solver.state.value
        return payload

    if mode == "hints":
        result = solver.solve(grid)
        payload["rounds"] = solver.rounds
        payload["state"] = solver.state.value
        if not result.is_solved and config.brute_force:
            logger.info("hint solver %s after %d rounds, falling back to backtracking", solver.state.value, solver.rounds)
            grid = result
            mode = "brute_force"
        else:
            payload.update(solved=result.is_solved, valid=result.is_valid, current=grid_to_rows(result))
            return payload

    bf = BruteForceSolver()
    result = bf.solve(grid, forward=config.forward)
    payload.update(
        solved=result.is_solved,
        valid=result.is_valid,
        current=grid_to_rows(result),
        stats=bf.stats.to_dict(),
    )
    logger.debug("result:\n%s", format_grid(result, "pretty"))
    return payload


def main(args) -> int:
    try:
        config = load_config(
            args.config,
            forward=False if args.backward else None,
            log_level="DEBUG" if args.verbose else None,
        )
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    puzzle = args.puzzle if args.puzzle is not None else Path(args.file).read_text(encoding="utf-8")
    try:
        payload = run(puzzle, args.mode, config)
    except (SudokuError, ValueError) as exc:
        logger.error("bad puzzle input: %s", exc)
        return 2
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str, help="one character per cell, 0 . - for blanks")
    src.add_argument("--file", type=str)
    ap.add_argument("--mode", type=str, default="hints", choices=["hints", "brute_force", "explain"])
    ap.add_argument("--backward", action="store_true", help="try candidates in descending order")
    ap.add_argument("--config", type=str, default=None, help="YAML solver settings")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    sys.exit(main(args))
