# -*- coding: utf-8 -*-
"""main

Resolución de un Sudoku leído desde fichero:
  1) Lectura y validación del tablero (board_io)
  2) Búsqueda de todas las soluciones (SudokuSolver)
  3) Impresión de cada solución según aparece

Códigos de salida: 1 si el fichero no se puede leer o tiene mal formato,
0 en cualquier otro caso (haya o no solución).
"""

import argparse
import sys
from typing import List, Optional
from rich.console import Console

from board_io import BoardError, NO_SOLUTION_MESSAGE, format_solution, load_board
from sudoku_solver import SolverConfig, SudokuSolver

VERBOSE = False

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-solver",
        description="Print every solution of a 9x9 Sudoku puzzle.",
    )
    parser.add_argument(
        "puzzle",
        help="Puzzle file: 9 lines of 9 comma-separated digits (0 = blank).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    console = Console(stderr=True)

    try:
        grid = load_board(args.puzzle)
    except BoardError as exc:
        console.print(str(exc), style="bold red", markup=False, emoji=False, highlight=False, soft_wrap=True)
        return EXIT_FAILURE

    solver = SudokuSolver(grid, SolverConfig(verbose=VERBOSE))
    found = 0
    for solution in solver.iter_solutions():
        print(format_solution(solution), flush=True)
        found += 1

    if not found:
        print(NO_SOLUTION_MESSAGE)
    return EXIT_SUCCESS


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
