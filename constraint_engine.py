# -*- coding: utf-8 -*-
"""constraint_engine

Motor de restricciones del Sudoku 9x9:
  1) Legalidad de colocar un dígito en una celda (fila, columna y caja)
  2) Conjunto de candidatos de cada celda vacía
  3) Propagación de celdas forzadas hasta alcanzar un punto fijo

Los tableros son listas de listas de enteros, con 0 en las casillas vacías.
"""

from typing import Dict, Iterator, List, Tuple
import numpy as np

Cell = Tuple[int, int]
Grid = List[List[int]]
CandidateMap = Dict[Cell, List[int]]

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def copy_grid(grid: Grid) -> Grid:
    """Copia independiente del tablero (cada rama de la búsqueda tiene la suya)."""
    return [row[:] for row in grid]


def box_origin(cell: Cell) -> Cell:
    r, c = cell
    return BOX * (r // BOX), BOX * (c // BOX)


def empty_cells(grid: Grid) -> Iterator[Cell]:
    """Recorre las celdas vacías en orden fila-columna."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                yield r, c


def is_legal(grid: Grid, cell: Cell, value: int) -> bool:
    """``True`` si ``value`` no se repite en la fila, columna o caja de ``cell``.

    Solo se compara contra las casillas ya rellenas; no modifica el tablero.
    """
    r, c = cell
    # fila / columna
    for k in range(SIZE):
        if grid[r][k] == value or grid[k][c] == value:
            return False
    # subcuadro
    br, bc = box_origin(cell)
    for i in range(br, br + BOX):
        for j in range(bc, bc + BOX):
            if grid[i][j] == value:
                return False
    return True


def candidates(grid: Grid, cell: Cell) -> List[int]:
    return [v for v in DIGITS if is_legal(grid, cell, v)]


def propagate(grid: Grid) -> CandidateMap:
    """Calcula los candidatos de cada celda vacía fijando antes las forzadas.

    Cada pasada recorre las celdas vacías en orden; la primera con un único
    candidato se rellena en ``grid`` (in situ) y el mapa se recalcula desde
    cero. Termina cuando una pasada completa no encuentra celdas forzadas.

    Devuelve ``{(fila, col): candidatos}`` en orden fila-columna. Una lista
    vacía indica que la rama no tiene solución.
    """
    while True:
        candidate_map: CandidateMap = {}
        forced = None
        for cell in empty_cells(grid):
            cands = candidates(grid, cell)
            if len(cands) == 1:
                forced = (cell, cands[0])
                break
            candidate_map[cell] = cands
        if forced is None:
            return candidate_map
        (r, c), value = forced
        grid[r][c] = value


# --------------------------
# Comprobaciones de tablero completo
# --------------------------
def grid_units(grid: Grid) -> np.ndarray:
    """Apila filas, columnas y cajas en una matriz (27, 9)."""
    arr = np.asarray(grid, dtype=np.int8)
    boxes = arr.reshape(BOX, BOX, BOX, BOX).swapaxes(1, 2).reshape(SIZE, SIZE)
    return np.concatenate([arr, arr.T, boxes], axis=0)


def is_complete(grid: Grid) -> bool:
    arr = np.asarray(grid)
    return bool(np.all((arr >= 1) & (arr <= SIZE)))


def is_consistent(grid: Grid) -> bool:
    """``True`` si ningún dígito rellenado se repite en una fila, columna o caja."""
    units = grid_units(grid)
    counts = (units[:, :, None] == np.arange(1, SIZE + 1)).sum(axis=1)  # (27, 9)
    return bool(counts.max() <= 1)


def is_solution(grid: Grid) -> bool:
    """Tablero lleno en el que cada unidad es una permutación de 1..9."""
    return is_complete(grid) and is_consistent(grid)
