# rubik_engine/core/cube_state.py
from __future__ import annotations

import json
from collections import Counter
from typing import Any, Dict, Iterable, Iterator, Sequence, Tuple

from rubik_engine import config
from rubik_engine.core.errors import (
    InvalidColor,
    InvalidDistribution,
    InvalidLength,
    InvalidSerialization,
    InvalidStateError,
)
from rubik_engine.core.types import Color, Face

CubeHash = Tuple[Tuple[Color, ...], ...]


class CubeState:
    """Estado canónico e inmutable del cubo 3x3 (54 stickers).

    Representación:
        - `stickers` es una tupla de 54 `Color`.
        - Caras contiguas de 9 stickers en orden U, R, F, D, L, B.
        - Dentro de cada cara los índices 0..8 recorren la grilla 3x3 por filas:

              0 1 2
              3 4 5
              6 7 8

        - El índice 4 de cada cara es el centro y ningún movimiento lo mueve.

    Invariantes (se verifican al construir, nunca existe un estado que las viole):
        1. Largo exacto 54.
        2. Cada valor es uno de los 6 colores.
        3. Cada color aparece exactamente 9 veces.

    Cada transformación devuelve un `CubeState` nuevo; no hay API de mutación.
    """

    __slots__ = ("_stickers",)

    _stickers: Tuple[Color, ...]

    def __init__(self, stickers: Iterable[Any]) -> None:
        """Crea un estado validando la secuencia de stickers.

        Equivale a `CubeState.from_colors`.

        Raises:
            InvalidLength: Si el largo no es 54.
            InvalidColor: Si algún valor está fuera de 0..5.
            InvalidDistribution: Si algún color no aparece 9 veces.
        """
        object.__setattr__(self, "_stickers", _validated(stickers))

    # --------------------------
    # Constructores
    # --------------------------
    @classmethod
    def solved(cls) -> "CubeState":
        """Estado resuelto: cada cara llena con su color canónico."""
        return cls._trusted(
            tuple(face.solved_color for face in Face for _ in range(config.FACELETS_PER_FACE))
        )

    @classmethod
    def from_colors(cls, stickers: Iterable[Any]) -> "CubeState":
        """Construye un estado a partir de 54 colores (`Color` o enteros 0..5).

        La validación sigue el orden largo -> rango de color -> distribución, de modo
        que la excepción identifica el primer invariante violado.

        Args:
            stickers: Secuencia de 54 colores. Se copia; el llamador puede seguir
                modificando su lista sin afectar al estado.

        Returns:
            Un `CubeState` válido.

        Raises:
            InvalidLength: Si el largo no es 54.
            InvalidColor: Si algún valor está fuera de 0..5.
            InvalidDistribution: Si algún color no aparece 9 veces.
        """
        return cls(stickers)

    @classmethod
    def deserialize(cls, text: str) -> "CubeState":
        """Reconstruye un estado desde `serialize()` (arreglo JSON de 54 enteros).

        Raises:
            InvalidSerialization: Si el texto no es un arreglo JSON.
            InvalidLength, InvalidColor, InvalidDistribution: Propagadas desde
                `from_colors`.
        """
        try:
            data = json.loads(text)
        except (TypeError, ValueError, RecursionError):
            raise InvalidSerialization(str(text)) from None
        if not isinstance(data, list):
            raise InvalidSerialization(text)
        return cls.from_colors(data)

    @classmethod
    def from_facelet_string(cls, text: str) -> "CubeState":
        """Construye un estado desde 54 letras de color, por ejemplo "WWWWWWWWWRRR...".

        Se ignoran espacios en blanco, así que se aceptan las caras separadas.

        Raises:
            InvalidLength: Si no hay exactamente 54 letras.
            InvalidColor: Si alguna letra no es W, R, G, Y, O o B.
            InvalidDistribution: Si algún color no aparece 9 veces.
        """
        letters = "".join(text.split())
        if len(letters) != config.FACELET_COUNT:
            raise InvalidLength(len(letters))
        colors = []
        for i, ch in enumerate(letters):
            try:
                colors.append(Color.from_letter(ch))
            except KeyError:
                raise InvalidColor(ch, i) from None
        return cls.from_colors(colors)

    @classmethod
    def _trusted(cls, stickers: Tuple[Color, ...]) -> "CubeState":
        # Solo para tuplas que ya cumplen las invariantes
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_stickers", stickers)
        return obj

    # --------------------------
    # Consultas
    # --------------------------
    @property
    def stickers(self) -> Tuple[Color, ...]:
        return self._stickers

    def color_at(self, index: int) -> Color:
        return self._stickers[index]

    def face(self, face: Face) -> Tuple[Color, ...]:
        """Devuelve los 9 stickers de una cara en orden fila-columna."""
        start = Face(face).start
        return self._stickers[start : start + config.FACELETS_PER_FACE]

    def is_solved(self) -> bool:
        """Indica si cada cara es uniforme (todos sus stickers igual a su centro).

        No compara contra los colores canónicos: un estado con caras uniformes pero
        permutadas también se reporta como resuelto.
        """
        for face in Face:
            stickers = self.face(face)
            center = stickers[4]
            if any(s != center for s in stickers):
                return False
        return True

    def validate(self) -> bool:
        """Re-verifica las tres invariantes sin lanzar excepciones."""
        try:
            _validated(self._stickers)
        except InvalidStateError:
            return False
        return True

    def color_counts(self) -> Dict[Color, int]:
        counts = Counter(self._stickers)
        return {c: counts.get(c, 0) for c in Color}

    def clone(self) -> "CubeState":
        """Copia independiente (no comparte almacenamiento mutable con el original)."""
        return type(self)._trusted(tuple(self._stickers))

    def equals(self, other: "CubeState") -> bool:
        if not isinstance(other, CubeState):
            return False
        return self._stickers == other._stickers

    def to_hashable(self) -> CubeHash:
        """Tupla de tuplas con los 9 stickers por cara, en el orden de `Face`."""
        return tuple(self.face(f) for f in Face)

    # --------------------------
    # Serialización
    # --------------------------
    def serialize(self) -> str:
        """Codifica el estado como arreglo JSON de 54 enteros en [0, 5]."""
        return json.dumps([int(c) for c in self._stickers])

    def to_facelet_string(self) -> str:
        return "".join(c.letter for c in self._stickers)

    # --------------------------
    # Protocolo de valor
    # --------------------------
    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} es inmutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} es inmutable")

    def __reduce__(self):
        # copy, deepcopy y pickle reconstruyen validando, sin pasar por __setattr__
        return (type(self), (self._stickers,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._stickers)

    def __len__(self) -> int:
        return len(self._stickers)

    def __getitem__(self, index: int) -> Color:
        return self._stickers[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._stickers)

    def __repr__(self) -> str:
        faces = " ".join(
            f"{f.name}:{''.join(c.letter for c in self.face(f))}" for f in Face
        )
        return f"CubeState({faces})"


def _validated(stickers: Iterable[Any]) -> Tuple[Color, ...]:
    """Valida una secuencia candidata y la devuelve como tupla de `Color`."""
    values: Sequence[Any] = list(stickers)
    if len(values) != config.FACELET_COUNT:
        raise InvalidLength(len(values))

    colors = []
    for i, value in enumerate(values):
        colors.append(_to_color(value, i))

    counts = Counter(colors)
    if any(counts.get(c, 0) != config.FACELETS_PER_FACE for c in Color):
        raise InvalidDistribution({int(c): counts.get(c, 0) for c in Color})

    return tuple(colors)


def _to_color(value: Any, index: int) -> Color:
    # bool es subclase de int, pero no es un color
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidColor(value, index)
    try:
        return Color(value)
    except ValueError:
        raise InvalidColor(value, index) from None
