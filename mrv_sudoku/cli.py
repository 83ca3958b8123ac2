"""
Command line front end.

Usage::

    mrv-sudoku < puzzle.txt         # solve a puzzle
    mrv-sudoku -c < puzzle.txt      # check a puzzle for errors
    mrv-sudoku -s < puzzle.txt      # print a puzzle in canonical form
    mrv-sudoku -g 30                # generate a puzzle with 30 clues
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from .grid import SIZE, Uniqueness
from .sudoku import (
    format_is_correct,
    generate,
    has_unique_solution,
    is_correct,
    solve,
)
from .text import print_errors, print_grid, read_grid

log = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _clue_count(text: str) -> int:
    n = int(text)
    if not 0 <= n <= SIZE * SIZE:
        raise argparse.ArgumentTypeError(f"must be between 0 and {SIZE * SIZE}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mrv-sudoku",
        description="Solve, check and generate 9x9 sudoku puzzles. "
        "Puzzles are read from stdin.",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-c", "--check", action="store_true",
        help="Read a puzzle and check its correctness",
    )
    mode.add_argument(
        "-s", "--show", action="store_true",
        help="Read a puzzle and print it to stdout",
    )
    mode.add_argument(
        "-g", "--generate", type=_clue_count, metavar="NELTS",
        help="Generate a puzzle with NELTS completed cells",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the random generator (random if omitted)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Be verbose",
    )
    return parser


def _solve(rng: random.Random, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    puzzle = read_grid(stdin)
    if not format_is_correct(puzzle):
        stderr.write("Puzzle has incorrect format.\n")
        return EXIT_FAILURE
    stderr.write("Input puzzle:\n")
    print_grid(puzzle, stdout)
    if not is_correct(puzzle, rules_only=True):
        stderr.write("Puzzle violates rules:\n")
        print_errors(puzzle, rules_only=True, stream=stderr)
        return EXIT_FAILURE

    solved = solve(puzzle, rng)
    if not is_correct(solved, rules_only=False):
        stderr.write("Puzzle has no solutions\n")
        return EXIT_FAILURE
    if has_unique_solution(solved) is Uniqueness.YES:
        stderr.write("Puzzle has one (unique choice) solution:\n")
    else:
        stderr.write("Puzzle has a solution (multiple solutions may exist):\n")
    print_grid(solved, stdout)
    return EXIT_SUCCESS


def _check(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    puzzle = read_grid(stdin)
    if not format_is_correct(puzzle):
        stderr.write("Puzzle has incorrect format.\n")
        return EXIT_FAILURE
    print_grid(puzzle, stdout)
    if is_correct(puzzle, rules_only=False):
        stderr.write("No issues found\n")
        return EXIT_SUCCESS
    stderr.write("Issues found:\n")
    print_errors(puzzle, rules_only=False, stream=stderr)
    return EXIT_FAILURE


def _show(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    puzzle = read_grid(stdin)
    if not format_is_correct(puzzle):
        stderr.write("Puzzle has incorrect format.\n")
        return EXIT_FAILURE
    print_grid(puzzle, stdout)
    return EXIT_SUCCESS


def _generate(nelts: int, rng: random.Random, stdout: TextIO, stderr: TextIO) -> int:
    puzzle = generate(nelts, rng)
    if has_unique_solution(puzzle) is Uniqueness.YES:
        stderr.write("New (unique choice) solvable puzzle:\n")
    else:
        stderr.write("New solvable puzzle (multiple solutions may exist):\n")
    print_grid(puzzle, stdout)
    return EXIT_SUCCESS


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    main_only_quicksetup_rootlogger(
        level=logging.DEBUG if args.verbose else logging.INFO
    )
    rng = random.Random(args.seed)
    log.debug("Arguments: %s", args)

    if args.generate is not None:
        return _generate(args.generate, rng, stdout, stderr)
    if args.check:
        return _check(stdin, stdout, stderr)
    if args.show:
        return _show(stdin, stdout, stderr)
    return _solve(rng, stdin, stdout, stderr)
