"""Motor de estado y movimientos para el cubo Rubik 3x3."""
from rubik_engine.core import Color, CubeState, Face, Move, MoveSequence
from rubik_engine.core.errors import (
    CubeError,
    InvalidColor,
    InvalidDistribution,
    InvalidLength,
    InvalidMoveNotation,
    InvalidSerialization,
    InvalidStateError,
)
from rubik_engine.logic import (
    apply_move,
    apply_sequence,
    format_sequence,
    inverse,
    inverse_sequence,
    parse_notation,
    random_sequence,
)

__all__ = [
    "Color",
    "CubeState",
    "Face",
    "Move",
    "MoveSequence",
    "CubeError",
    "InvalidColor",
    "InvalidDistribution",
    "InvalidLength",
    "InvalidMoveNotation",
    "InvalidSerialization",
    "InvalidStateError",
    "apply_move",
    "apply_sequence",
    "format_sequence",
    "inverse",
    "inverse_sequence",
    "parse_notation",
    "random_sequence",
]
