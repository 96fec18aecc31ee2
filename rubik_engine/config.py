# rubik_engine/config.py
"""Configuración del motor: constantes del cubo, scramble y logging."""
from __future__ import annotations

# Geometría del cubo 3x3
FACE_COUNT = 6
FACELETS_PER_FACE = 9
FACELET_COUNT = FACE_COUNT * FACELETS_PER_FACE  # 54

# Scramble
DEFAULT_SCRAMBLE_LENGTH = 20
MAX_SCRAMBLE_LENGTH = 1000

# Logging (lo usa main.py al arrancar)
LOG_LEVEL_ENV = "RUBIK_ENGINE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
