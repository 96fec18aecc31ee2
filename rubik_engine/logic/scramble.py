# rubik_engine/logic/scramble.py
from __future__ import annotations

import logging
import random
from typing import Optional

from rubik_engine.core.types import ALL_MOVES, MoveSequence
from rubik_engine.logic.notation import format_sequence

logger = logging.getLogger(__name__)


def random_sequence(length: int, rng: Optional[random.Random] = None) -> MoveSequence:
    """Genera una secuencia de mezcla (scramble) aleatoria.

    Cada movimiento se elige de forma independiente y uniforme entre los 18;
    se permiten repeticiones, incluso de la misma cara en movimientos seguidos.

    Args:
        length: Cantidad de movimientos a generar (0 produce una lista vacía).
        rng: Generador opcional, útil para obtener resultados reproducibles. Si es
            None se usa el generador global de `random`.

    Returns:
        Lista con exactamente `length` movimientos.

    Raises:
        ValueError: Si `length` es negativo.
    """
    if length < 0:
        raise ValueError("length debe ser mayor o igual a 0.")

    choose = (rng or random).choice
    seq = [choose(ALL_MOVES) for _ in range(length)]
    logger.debug("Scramble de %d movimientos: %s", length, format_sequence(seq))
    return seq


def generate_scramble(n: int, rng: Optional[random.Random] = None) -> str:
    """Igual que `random_sequence`, pero devuelve el texto, por ejemplo "R U' F2 L D2"."""
    return format_sequence(random_sequence(n, rng))
