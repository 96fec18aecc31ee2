# rubik_engine/app/cube_controller.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from rubik_engine import config
from rubik_engine.core.cube_state import CubeState
from rubik_engine.core.types import Move, MoveSequence
from rubik_engine.logic.move_engine import apply_move
from rubik_engine.logic.notation import parse_notation
from rubik_engine.logic.scramble import random_sequence

logger = logging.getLogger(__name__)


class CubeController(QObject):
    """Punto de entrada único para las capas de entrada y de render.

    Guarda el último `CubeState` y lo reemplaza por uno nuevo en cada movimiento.
    Quien dibuja el cubo se conecta a las señales; nunca recibe nada que pueda
    modificar en el lugar.

    Signals:
        move_applied(object, object, object): (estado anterior, estado nuevo, Move)
            una vez por cada movimiento, en orden.
        state_changed(object): El estado actual cambió (movimiento, reset o carga).
        solved(): El cubo quedó resuelto tras un movimiento.
    """

    move_applied = Signal(object, object, object)
    state_changed = Signal(object)
    solved = Signal()

    def __init__(self, state: Optional[CubeState] = None, parent: Optional[QObject] = None) -> None:
        """Crea el controlador, por defecto en estado resuelto.

        Args:
            state: Estado inicial opcional.
            parent: Padre Qt opcional.
        """
        super().__init__(parent)
        self._state: CubeState = state if state is not None else CubeState.solved()

    @property
    def state(self) -> CubeState:
        return self._state

    def is_solved(self) -> bool:
        return self._state.is_solved()

    def apply_move(self, move: Move) -> CubeState:
        """Aplica un movimiento al estado actual y notifica a los observadores.

        Args:
            move: Movimiento a aplicar.

        Returns:
            El nuevo estado.
        """
        old = self._state
        new = apply_move(old, move)
        self._state = new
        logger.debug("Movimiento %s aplicado. Resuelto: %s", move, new.is_solved())

        self.move_applied.emit(old, new, move)
        self.state_changed.emit(new)
        if new.is_solved():
            self.solved.emit()
        return new

    def apply_sequence(self, moves: Iterable[Move]) -> CubeState:
        for move in moves:
            self.apply_move(move)
        return self._state

    def apply_notation(self, text: str) -> MoveSequence:
        """Parsea `text` y aplica los movimientos.

        El parseo termina antes de tocar el estado: si hay un token inválido no se
        aplica ningún movimiento.

        Raises:
            InvalidMoveNotation: Si algún token no es válido.
        """
        moves = parse_notation(text)
        self.apply_sequence(moves)
        return moves

    def scramble(self, length: int = config.DEFAULT_SCRAMBLE_LENGTH) -> MoveSequence:
        """Mezcla el cubo con `length` movimientos aleatorios y los devuelve."""
        logger.info("Mezclando con %d movimientos", length)
        moves = random_sequence(length)
        self.apply_sequence(moves)
        return moves

    def reset(self) -> None:
        """Vuelve al estado resuelto."""
        self.load(CubeState.solved())
        logger.info("Cubo reiniciado a estado resuelto")

    def load(self, state: CubeState) -> None:
        """Reemplaza el estado actual (por ejemplo, uno deserializado)."""
        self._state = state
        self.state_changed.emit(state)
