# sudoku_solver.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, List, Optional
from rich.console import Console
from tqdm import tqdm

from constraint_engine import (
    SIZE,
    CandidateMap,
    Cell,
    Grid,
    copy_grid,
    is_consistent,
    is_solution,
    propagate,
)


class SearchState(Enum):
    INITIAL = "initial"
    EXPLORING = "exploring"
    DONE = "done"


@dataclass
class SolverConfig:
    """Configuración de la búsqueda."""
    verbose: bool = False                # mensajes con rich + barra tqdm
    max_solutions: Optional[int] = None  # None: búsqueda exhaustiva


@dataclass
class SearchResult:
    """Resumen de una búsqueda completa."""
    solutions: List[Grid] = field(default_factory=list)
    explored: int = 0    # tableros propagados
    abandoned: int = 0   # ramas sin solución
    state: SearchState = SearchState.INITIAL

    @property
    def solved(self) -> bool:
        return bool(self.solutions)


@dataclass
class SudokuSolver:
    """Enumera las soluciones de un Sudoku por búsqueda en profundidad con pila.

    Cada tablero de la frontera se propaga con el motor de restricciones; si
    quedan celdas vacías se ramifica sobre la de menos candidatos.

    Parámetros
    ----------
    grid: List[List[int]]
        Tablero 9x9 con ceros en las casillas vacías. No se modifica.
    config: SolverConfig, opcional
        Verbosidad y límite de soluciones.
    """
    grid: Grid
    config: SolverConfig = field(default_factory=SolverConfig)

    def __post_init__(self) -> None:
        if len(self.grid) != SIZE or any(len(row) != SIZE for row in self.grid):
            raise ValueError("El tablero debe ser 9x9.")
        if any(not 0 <= v <= SIZE for row in self.grid for v in row):
            raise ValueError("Las casillas deben contener dígitos entre 0 y 9.")
        self.console = Console(stderr=True)
        self.state = SearchState.INITIAL
        self.explored = 0
        self.abandoned = 0

    # --------------------------
    # API pública
    # --------------------------
    def iter_solutions(self) -> Iterator[Grid]:
        """Genera cada solución en cuanto se encuentra."""
        self.state = SearchState.INITIAL
        self.explored = 0
        self.abandoned = 0
        board = copy_grid(self.grid)

        if not is_consistent(board):
            self._log("Las pistas iniciales se contradicen.")
            self.state = SearchState.DONE
            return

        self._log("Propagando tablero inicial…")
        candidate_map = propagate(board)
        self.explored += 1
        if not candidate_map:
            self.state = SearchState.DONE
            if is_solution(board):
                self._log("✅ Resuelto solo con propagación.")
                yield board
            return

        self.state = SearchState.EXPLORING
        frontier: List[Grid] = []
        self._expand(board, candidate_map, frontier)

        found = 0
        progress = tqdm(desc="Explorando", unit="tablero", ncols=80, colour="blue") if self.config.verbose else None
        try:
            while frontier:
                board = frontier.pop()
                candidate_map = propagate(board)
                self.explored += 1
                if progress is not None:
                    progress.update(1)
                    progress.set_postfix(frontera=len(frontier), soluciones=found)

                if candidate_map:
                    self._expand(board, candidate_map, frontier)
                    continue
                if not is_solution(board):
                    self.abandoned += 1
                    continue

                found += 1
                yield board
                if self.config.max_solutions is not None and found >= self.config.max_solutions:
                    self._log(f"Límite de {found} soluciones alcanzado.")
                    break
        finally:
            if progress is not None:
                progress.close()
            self.state = SearchState.DONE
        self._log(f"Búsqueda terminada: {self.explored} tableros, {self.abandoned} ramas descartadas.")

    def solve(self, on_solution: Optional[Callable[[Grid], None]] = None) -> SearchResult:
        """Agota la búsqueda y devuelve un ``SearchResult``.

        ``on_solution`` se invoca con cada solución según aparece.
        """
        result = SearchResult()
        for solution in self.iter_solutions():
            if on_solution is not None:
                on_solution(solution)
            result.solutions.append(solution)
        result.explored = self.explored
        result.abandoned = self.abandoned
        result.state = self.state
        return result

    # --------------------------
    # Métodos internos
    # --------------------------
    def _select_cell(self, candidate_map: CandidateMap) -> Optional[Cell]:
        """Celda con menos candidatos (MRV); ``None`` si alguna se quedó sin opciones."""
        if any(not cands for cands in candidate_map.values()):
            return None
        # min() conserva la primera en orden fila-columna ante empates
        return min(candidate_map, key=lambda cell: len(candidate_map[cell]))

    def _expand(self, board: Grid, candidate_map: CandidateMap, frontier: List[Grid]) -> None:
        cell = self._select_cell(candidate_map)
        if cell is None:
            self.abandoned += 1
            return
        r, c = cell
        # en orden inverso para que el dígito menor salga primero de la pila
        for value in reversed(candidate_map[cell]):
            child = copy_grid(board)
            child[r][c] = value
            frontier.append(child)

    def _log(self, msg: str) -> None:
        if self.config.verbose:
            self.console.print(msg, style="bold cyan", emoji=False)
