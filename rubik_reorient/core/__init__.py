# rubik_reorient/core/__init__.py
from rubik_reorient.core.cube_model import CubeModel

__all__ = ["CubeModel"]
