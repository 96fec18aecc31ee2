from rubik_engine.app.cube_controller import CubeController

__all__ = ["CubeController"]
