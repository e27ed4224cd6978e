# -*- coding: utf-8 -*-
"""board_io

Lectura y validación de tableros en texto y formato de las soluciones.

Formato de entrada: exactamente 9 líneas, cada una con 9 enteros entre 0 y 9
separados por comas (0 = casilla vacía).
"""

import re
from typing import Optional
from constraint_engine import SIZE, Grid

SOLUTION_LABEL = "solution:"
NO_SOLUTION_MESSAGE = "No solution possible!"

_NUMBER = re.compile(r"[0-9]+")


class BoardError(Exception):
    """Error al obtener un tablero desde un fichero."""

    def __init__(self, path: str, message: str, hint: str = "") -> None:
        self.path = path
        self.message = message
        self.hint = hint
        super().__init__(f"{message}\n({hint})" if hint else message)


class BoardReadError(BoardError):
    """El fichero no se puede abrir o decodificar."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Cannot open {path}!")


class BoardFormatError(BoardError, ValueError):
    """El contenido no respeta el formato de 9x9 dígitos separados por comas."""

    def __init__(self, path: str, message: str, hint: str,
                 line: Optional[int] = None, token: Optional[str] = None) -> None:
        super().__init__(path, message, hint)
        self.line = line
        self.token = token


def parse_board(text: str, source: str = "<input>") -> Grid:
    """Convierte el texto en un tablero o lanza ``BoardFormatError``.

    ``source`` solo se usa en los mensajes de error. Las líneas se numeran
    desde 1.
    """
    lines = text.splitlines()
    if len(lines) != SIZE:
        raise BoardFormatError(
            source,
            f"File {source} is in bad format!",
            "Correct format should have 9 lines",
        )

    board: Grid = []
    for lineno, line in enumerate(lines, 1):
        fields = line.split(",")
        if len(fields) != SIZE:
            raise BoardFormatError(
                source,
                f"File {source} is in bad format at line {lineno}!",
                "Correct format should have 9 digits separated by comma",
                line=lineno,
            )
        row = []
        for field in fields:
            token = field.strip()
            if not _NUMBER.fullmatch(token):
                raise BoardFormatError(
                    source,
                    f"File {source} is in bad format at line {lineno}!",
                    f"Illegal digit {token} found in line",
                    line=lineno, token=token,
                )
            # se decide el rango antes de convertir: int() limita la longitud
            significant = token.lstrip("0")
            if len(significant) > 1 or int(significant or "0") > SIZE:
                raise BoardFormatError(
                    source,
                    f"Illegal digit {token} found in file {source} at line {lineno}!",
                    "Legitimate digit should be ranged from 0 to 9, inclusive",
                    line=lineno, token=token,
                )
            row.append(int(token))
        board.append(row)
    return board


def load_board(path: str) -> Grid:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise BoardReadError(path) from exc
    return parse_board(text, source=path)


def format_board(grid: Grid) -> str:
    """Una línea por fila con la forma ``[ d, d, d, d, d, d, d, d, d ]``."""
    return "\n".join("[" + ",".join(f" {v}" for v in row) + " ]" for row in grid)


def format_solution(grid: Grid) -> str:
    return f"{SOLUTION_LABEL}\n{format_board(grid)}"
