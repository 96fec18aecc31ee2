# rubik_engine/logic/move_engine.py
from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Literal, Mapping, Sequence, Tuple

from rubik_engine import config
from rubik_engine.core.cube_state import CubeState
from rubik_engine.core.types import Face, Move, MoveSequence

logger = logging.getLogger(__name__)

Vec3i = Tuple[int, int, int]
Axis = Literal["x", "y", "z"]
Permutation = Tuple[int, ...]

# Normal exterior de cada cara (x a la derecha, y arriba, z hacia el frente)
_FACE_NORMAL: Mapping[Face, Vec3i] = MappingProxyType({
    Face.U: (0, 1, 0),
    Face.R: (1, 0, 0),
    Face.F: (0, 0, 1),
    Face.D: (0, -1, 0),
    Face.L: (-1, 0, 0),
    Face.B: (0, 0, -1),
})

# Giro horario (visto desde afuera de la cara) = -90° alrededor de su normal.
# (eje, capa, cuartos de vuelta según la regla de la mano derecha)
_CW_LAYER: Mapping[Face, Tuple[Axis, int, int]] = MappingProxyType({
    Face.U: ("y", 1, -1),
    Face.D: ("y", -1, +1),
    Face.R: ("x", 1, -1),
    Face.L: ("x", -1, +1),
    Face.F: ("z", 1, -1),
    Face.B: ("z", -1, +1),
})


def _facelet_position(face: Face, i: int) -> Vec3i:
    """Posición (x, y, z) del sticker `i` de `face` en el cubo de lado 3 centrado en 0.

    Cada cara se lee fila-columna mirándola desde afuera:
    - U: x=c-1, y=+1, z=r-1   (fila 0 junto a B)
    - R: x=+1, y=1-r, z=1-c
    - F: x=c-1, y=1-r, z=+1
    - D: x=c-1, y=-1, z=1-r   (fila 0 junto a F)
    - L: x=-1, y=1-r, z=c-1
    - B: x=1-c, y=1-r, z=-1
    """
    r, c = divmod(i, 3)
    if face == Face.U:
        return (c - 1, 1, r - 1)
    if face == Face.R:
        return (1, 1 - r, 1 - c)
    if face == Face.F:
        return (c - 1, 1 - r, 1)
    if face == Face.D:
        return (c - 1, -1, 1 - r)
    if face == Face.L:
        return (-1, 1 - r, c - 1)
    if face == Face.B:
        return (1 - c, 1 - r, -1)
    raise RuntimeError("Cara inválida")


def _rotate(v: Vec3i, axis: Axis, turns: int) -> Vec3i:
    """Rota un vector 90°*turns alrededor de `axis` (regla de la mano derecha)."""
    x, y, z = v
    for _ in range(turns % 4):
        if axis == "x":
            x, y, z = x, -z, y
        elif axis == "y":
            x, y, z = z, y, -x
        else:
            x, y, z = -y, x, z
    return (x, y, z)


class _FaceletGeometry:
    """Mapa bidireccional entre índice global 0..53 y (posición, normal)."""

    def __init__(self) -> None:
        self.index_to_pn: List[Tuple[Vec3i, Vec3i]] = []
        self.pn_to_index: Dict[Tuple[Vec3i, Vec3i], int] = {}
        for face in Face:
            n = _FACE_NORMAL[face]
            for i in range(config.FACELETS_PER_FACE):
                pn = (_facelet_position(face, i), n)
                self.pn_to_index[pn] = len(self.index_to_pn)
                self.index_to_pn.append(pn)

    def layer_permutation(self, axis: Axis, layer_value: int, turns: int) -> Permutation:
        """Permutación que produce rotar una capa del cubo.

        Convención: `perm[destino] = origen`, es decir `nuevo[i] = viejo[perm[i]]`.

        Args:
            axis: Eje de rotación ('x', 'y' o 'z').
            layer_value: Capa a rotar (-1, 0 o 1).
            turns: Cantidad de cuartos de vuelta (mod 4).
        """
        axis_idx = "xyz".index(axis)
        perm = list(range(config.FACELET_COUNT))
        for src, (pos, n) in enumerate(self.index_to_pn):
            if pos[axis_idx] != layer_value:
                continue
            dest = self.pn_to_index[(_rotate(pos, axis, turns), _rotate(n, axis, turns))]
            perm[dest] = src
        return tuple(perm)


def invert_permutation(perm: Sequence[int]) -> Permutation:
    """Inversa posicional: `q[p[i]] = i`."""
    result = [0] * len(perm)
    for i, p in enumerate(perm):
        result[p] = i
    return tuple(result)


def compose_permutations(first: Sequence[int], second: Sequence[int]) -> Permutation:
    """Permutación equivalente a aplicar `first` y luego `second`."""
    return tuple(first[j] for j in second)


def is_permutation(perm: Sequence[int]) -> bool:
    """True si `perm` es una biyección sobre los 54 índices."""
    return len(perm) == config.FACELET_COUNT and sorted(perm) == list(range(config.FACELET_COUNT))


class MoveTable:
    """Tabla de solo lectura con la permutación de cada uno de los 18 movimientos.

    Para cada cara se genera el giro horario a partir de la geometría; el
    antihorario es su inversa posicional y el de 180° es el horario compuesto
    consigo mismo.
    """

    def __init__(self) -> None:
        geometry = _FaceletGeometry()
        table: Dict[Move, Permutation] = {}
        for face in Face:
            axis, layer, turns = _CW_LAYER[face]
            cw = geometry.layer_permutation(axis, layer, turns)
            table[Move.for_face(face, 1)] = cw
            table[Move.for_face(face, 2)] = compose_permutations(cw, cw)
            table[Move.for_face(face, 3)] = invert_permutation(cw)

        for move, perm in table.items():
            if not is_permutation(perm):
                raise RuntimeError(f"La permutación de {move} no es una biyección")

        self._table: Mapping[Move, Permutation] = MappingProxyType(table)

    def __getitem__(self, move: Move) -> Permutation:
        return self._table[move]

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self):
        return iter(self._table)

    def items(self) -> Iterable[Tuple[Move, Permutation]]:
        return self._table.items()


@lru_cache(maxsize=None)
def move_table() -> MoveTable:
    """Devuelve la tabla de movimientos del proceso (se construye una sola vez)."""
    table = MoveTable()
    logger.debug("Tabla de movimientos construida (%d entradas)", len(table))
    return table


def permutation(move: Move) -> Permutation:
    return move_table()[move]


def apply_permutation(state: CubeState, perm: Sequence[int]) -> CubeState:
    """Reubica los stickers de `state` según `perm` (`nuevo[i] = viejo[perm[i]]`).

    El resultado pasa por la validación de `CubeState`, así que una permutación
    que no sea biyección nunca produce un estado inválido silenciosamente.
    """
    stickers = state.stickers
    return CubeState.from_colors(stickers[p] for p in perm)


def apply_move(state: CubeState, move: Move) -> CubeState:
    """Aplica un movimiento y devuelve un estado nuevo.

    Args:
        state: Estado de entrada (no se modifica).
        move: Uno de los 18 movimientos.

    Returns:
        El estado resultante.
    """
    return apply_permutation(state, permutation(move))


def apply_sequence(state: CubeState, moves: Iterable[Move]) -> CubeState:
    """Aplica una secuencia de movimientos de izquierda a derecha.

    Con una secuencia vacía devuelve una copia igual a `state`.
    """
    current = state.clone()
    for move in moves:
        current = apply_move(current, move)
    return current


def inverse(move: Move) -> Move:
    """Inverso de un movimiento.

    Ejemplos:
        - R  -> R'
        - R' -> R
        - R2 -> R2
    """
    return Move.for_face(move.face, -move.turns)


def inverse_sequence(moves: Iterable[Move]) -> MoveSequence:
    """Secuencia que deshace `moves`: inversos elemento a elemento, en orden inverso."""
    return [inverse(m) for m in reversed(list(moves))]


def compose(moves: Iterable[Move]) -> Permutation:
    """Permutación única equivalente a aplicar toda la secuencia."""
    result: Permutation = tuple(range(config.FACELET_COUNT))
    for move in moves:
        result = compose_permutations(result, permutation(move))
    return result


def order(moves: Sequence[Move], limit: int = 1260) -> int:
    """Orden de una secuencia: menor k >= 1 tal que repetirla k veces es la identidad.

    1260 es el orden máximo de un elemento del grupo del cubo.

    Raises:
        ValueError: Si no se alcanza la identidad antes de `limit` repeticiones.
    """
    perm = compose(moves)
    identity = tuple(range(config.FACELET_COUNT))
    current = perm
    for k in range(1, limit + 1):
        if current == identity:
            return k
        current = compose_permutations(current, perm)
    raise ValueError(f"La secuencia no vuelve a la identidad en {limit} repeticiones")
