# rubik_engine/__main__.py
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from rubik_engine import config
from rubik_engine.app.cube_controller import CubeController
from rubik_engine.core.cube_state import CubeState
from rubik_engine.core.types import Face
from rubik_engine.logic.notation import format_sequence, parse_notation


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rubik-engine",
        description="Aplica movimientos al cubo Rubik 3x3 y muestra el estado resultante.",
    )
    p.add_argument("algorithm", nargs="?", default="", help="Secuencia, ej: \"R U R' U'\"")
    p.add_argument("--scramble", type=int, metavar="N", help="Mezclar con N movimientos antes")
    p.add_argument("--from-state", metavar="JSON", help="Estado inicial (arreglo JSON de 54 enteros)")
    p.add_argument("--repeat", type=int, default=1, metavar="K", help="Repetir el algoritmo K veces")
    p.add_argument("--json", action="store_true", help="Imprimir el estado como JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Mostrar cada movimiento")
    return p


def _configure_logging(verbose: bool) -> None:
    """Configura logging desde `-v` o la variable de entorno.

    Raises:
        ValueError: Si el nivel de la variable de entorno no existe.
    """
    level = "DEBUG" if verbose else os.environ.get(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL)
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"{config.LOG_LEVEL_ENV}: nivel de logging desconocido {level!r}")
    logging.basicConfig(level=level.upper(), format=config.LOG_FORMAT)


def _print_net(state: CubeState) -> None:
    for face in Face:
        letters = [c.letter for c in state.face(face)]
        rows = [" ".join(letters[r * 3 : r * 3 + 3]) for r in range(3)]
        print(f"{face.name}: " + " | ".join(rows))


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada de la línea de comandos.

    Construye un `CubeController`, aplica el scramble y el algoritmo pedidos e
    imprime el estado final.

    Returns:
        0 si todo salió bien; 2 si la entrada (notación o estado) es inválida.
    """
    args = _build_parser().parse_args(argv)

    try:
        _configure_logging(args.verbose)
        if args.repeat < 0:
            raise ValueError("--repeat debe ser mayor o igual a 0")
        state = CubeState.deserialize(args.from_state) if args.from_state else CubeState.solved()
        moves = parse_notation(args.algorithm)
        controller = CubeController(state)

        if args.verbose:
            controller.move_applied.connect(lambda old, new, mv: print("Move:", mv))

        if args.scramble:
            if not 0 < args.scramble <= config.MAX_SCRAMBLE_LENGTH:
                raise ValueError(f"--scramble debe estar entre 1 y {config.MAX_SCRAMBLE_LENGTH}")
            scramble = controller.scramble(args.scramble)
            print("Scramble:", format_sequence(scramble))

        for _ in range(args.repeat):
            controller.apply_sequence(moves)
    except ValueError as e:  # CubeError incluida
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(controller.state.serialize())
    else:
        _print_net(controller.state)
    print("Estado: resuelto" if controller.is_solved() else "Estado: mezclado")
    return 0


if __name__ == "__main__":
    sys.exit(main())
