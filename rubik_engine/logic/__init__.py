from rubik_engine.logic.move_engine import (
    apply_move,
    apply_permutation,
    apply_sequence,
    compose,
    inverse,
    inverse_sequence,
    move_table,
    order,
    permutation,
)
from rubik_engine.logic.notation import ALL_TOKENS, format_sequence, parse_notation
from rubik_engine.logic.scramble import generate_scramble, random_sequence

__all__ = [
    "ALL_TOKENS",
    "apply_move",
    "apply_permutation",
    "apply_sequence",
    "compose",
    "format_sequence",
    "generate_scramble",
    "inverse",
    "inverse_sequence",
    "move_table",
    "order",
    "parse_notation",
    "permutation",
    "random_sequence",
]
