# rubik_engine/core/types.py
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, List

from rubik_engine.core.errors import InvalidMoveNotation


class Color(IntEnum):
    """Colores de los stickers. El valor entero es el del formato serializado.

    Pares opuestos por convención: blanco-amarillo, rojo-naranja, verde-azul
    (el modelo de estado no lo exige).
    """

    WHITE = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    ORANGE = 4
    BLUE = 5

    @property
    def letter(self) -> str:
        return _COLOR_LETTERS[self]

    @classmethod
    def from_letter(cls, letter: str) -> "Color":
        """Convierte una letra ("W", "R", "G", "Y", "O", "B") a `Color`.

        Raises:
            KeyError: Si la letra no corresponde a ningún color.
        """
        return _LETTER_COLORS[letter]


_COLOR_LETTERS: Dict[Color, str] = {
    Color.WHITE: "W",
    Color.RED: "R",
    Color.GREEN: "G",
    Color.YELLOW: "Y",
    Color.ORANGE: "O",
    Color.BLUE: "B",
}
_LETTER_COLORS: Dict[str, Color] = {v: k for k, v in _COLOR_LETTERS.items()}


class Face(IntEnum):
    """Caras en el orden de almacenamiento: U, R, F, D, L, B (9 stickers cada una)."""

    U = 0
    R = 1
    F = 2
    D = 3
    L = 4
    B = 5

    @property
    def start(self) -> int:
        """Índice global del sticker 0 de la cara."""
        return int(self) * 9

    @property
    def center(self) -> int:
        return self.start + 4

    @property
    def solved_color(self) -> Color:
        # En el estado resuelto cada cara tiene el color de igual índice
        return Color(int(self))


class Move(Enum):
    """Los 18 movimientos: 6 caras x (horario, antihorario, 180°).

    El valor de cada miembro es su token en notación Singmaster, que es
    también el contrato de texto con el parser y el scramble.
    """

    U = "U"
    U_PRIME = "U'"
    U2 = "U2"
    R = "R"
    R_PRIME = "R'"
    R2 = "R2"
    F = "F"
    F_PRIME = "F'"
    F2 = "F2"
    D = "D"
    D_PRIME = "D'"
    D2 = "D2"
    L = "L"
    L_PRIME = "L'"
    L2 = "L2"
    B = "B"
    B_PRIME = "B'"
    B2 = "B2"

    @property
    def token(self) -> str:
        return self.value

    @property
    def face(self) -> Face:
        return Face[self.value[0]]

    @property
    def turns(self) -> int:
        """Cantidad de cuartos de vuelta horarios equivalentes (1, 2 o 3)."""
        return _SUFFIX_TURNS[self.value[1:]]

    @property
    def is_half_turn(self) -> bool:
        return self.turns == 2

    @property
    def is_quarter_turn(self) -> bool:
        return self.turns != 2

    @classmethod
    def from_token(cls, token: str) -> "Move":
        """Busca el movimiento cuyo token coincide exactamente (sensible a mayúsculas).

        Args:
            token: Token de texto, por ejemplo "R", "U'" o "F2".

        Returns:
            El `Move` correspondiente.

        Raises:
            InvalidMoveNotation: Si el token no es uno de los 18 legales.
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidMoveNotation(token) from None

    @classmethod
    def for_face(cls, face: Face, turns: int = 1) -> "Move":
        """Construye el movimiento de `face` con `turns` cuartos horarios (mod 4, != 0)."""
        t = turns % 4
        if t == 0:
            raise ValueError(f"Un giro de {turns} cuartos no es un movimiento")
        return cls(face.name + _TURNS_SUFFIX[t])

    def __str__(self) -> str:
        return self.value


_SUFFIX_TURNS: Dict[str, int] = {"": 1, "2": 2, "'": 3}
_TURNS_SUFFIX: Dict[int, str] = {v: k for k, v in _SUFFIX_TURNS.items()}

MoveSequence = List[Move]

ALL_MOVES: List[Move] = list(Move)
