# rubik_engine/logic/notation.py
from __future__ import annotations

from typing import Iterable, List

from rubik_engine.core.types import ALL_MOVES, Move, MoveSequence

# Vocabulario de texto: cara (U R F D L B) + sufijo opcional "'" o "2"
ALL_TOKENS: List[str] = [m.token for m in ALL_MOVES]


def parse_notation(text: str) -> MoveSequence:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    La entrada separa movimientos por espacios (cualquier cantidad). Por ejemplo:
        "R U R' U'" -> [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME]

    La comparación es exacta y sensible a mayúsculas: "r" o "R3" no son válidos.

    Args:
        text: Secuencia de movimientos escrita como string. Vacío o solo espacios
            produce una lista vacía.

    Returns:
        Lista de movimientos, en el mismo orden.

    Raises:
        InvalidMoveNotation: Con el primer token inválido; no se devuelve
            ningún resultado parcial.
    """
    return [Move.from_token(tok) for tok in text.split()]


def format_sequence(moves: Iterable[Move]) -> str:
    """Convierte movimientos a texto separado por espacios, por ejemplo "R U R' U'"."""
    return " ".join(m.token for m in moves)
