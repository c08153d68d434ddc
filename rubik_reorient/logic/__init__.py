# rubik_reorient/logic/__init__.py
from rubik_reorient.logic.reorient import Reorient

__all__ = ["Reorient"]
