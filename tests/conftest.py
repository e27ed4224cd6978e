# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so the flat modules import without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def to_text(grid) -> str:
    return "\n".join(",".join(str(v) for v in row) for row in grid) + "\n"


@pytest.fixture
def puzzle():
    return [row[:] for row in PUZZLE]


@pytest.fixture
def solution():
    return [row[:] for row in SOLUTION]


@pytest.fixture
def blank():
    return [[0] * 9 for _ in range(9)]


@pytest.fixture
def write_puzzle(tmp_path):
    """Escribe un tablero (o texto libre) en un fichero temporal y devuelve su ruta."""
    def _write(content, name="puzzle.txt") -> str:
        text = content if isinstance(content, str) else to_text(content)
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def dead_end_puzzle():
    """Pistas coherentes y sin celdas forzadas, pero toda rama acaba sin salida.

    Las tres primeras celdas de la fila 0 solo admiten {1, 2}.
    """
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 0, 0, 3, 4, 5, 6, 7, 8]
    grid[1][0] = 9
    return grid


@pytest.fixture
def two_blank_rows(solution):
    grid = [row[:] for row in solution]
    grid[0] = [0] * 9
    grid[1] = [0] * 9
    return grid
