# rubik_engine/core/errors.py
from __future__ import annotations

from typing import Any, Dict


class CubeError(ValueError):
    """Error base del motor: toda entrada mal formada termina aquí."""


class InvalidStateError(CubeError):
    """Una secuencia candidata de stickers viola algún invariante del estado."""


class InvalidLength(InvalidStateError):
    def __init__(self, length: int) -> None:
        super().__init__(f"Estado inválido: se esperaban 54 stickers, llegaron {length}")
        self.length = length


class InvalidColor(InvalidStateError):
    def __init__(self, value: Any, index: int) -> None:
        super().__init__(f"Color inválido en índice {index}: {value!r} (debe ser 0-5)")
        self.value = value
        self.index = index


class InvalidDistribution(InvalidStateError):
    """Los colores son legales pero alguno no aparece exactamente 9 veces."""

    def __init__(self, counts: Dict[int, int]) -> None:
        bad = ", ".join(f"{c}={n}" for c, n in sorted(counts.items()) if n != 9)
        super().__init__(f"Distribución de colores inválida (se esperan 9 por color): {bad}")
        self.counts = dict(counts)


class InvalidSerialization(InvalidStateError):
    def __init__(self, text: str) -> None:
        super().__init__(f"No se pudo decodificar el estado: {text[:40]!r}")
        self.text = text


class InvalidMoveNotation(CubeError):
    """Un token de texto no pertenece al vocabulario de 18 movimientos."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Movimiento inválido: {token}")
        self.token = token
