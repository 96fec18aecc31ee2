from rubik_engine.core.cube_state import CubeState
from rubik_engine.core.types import ALL_MOVES, Color, Face, Move, MoveSequence

__all__ = ["ALL_MOVES", "Color", "CubeState", "Face", "Move", "MoveSequence"]
