# rubik_reorient/config.py
"""Configuración de la búsqueda de reorientaciones.

Los valores se fijan una sola vez al iniciar (CLI o ventana) y se pasan
explícitamente al solver y al formateo de soluciones.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from rubik_reorient.logic.reorient import Reorient

# ---------------- Defaults ----------------

# Profundidad de la tabla de poda. Menos de 2 no distingue "a un giro" de "lejos".
DEFAULT_PRUNING_DEPTH: int = 2
MIN_PRUNING_DEPTH: int = 2

# Cantidad máxima de reorientaciones a probar.
DEFAULT_MAX_DEPTH: int = 3


@dataclass(frozen=True)
class SearchConfig:
    """Parámetros inmutables de una sesión de búsqueda.

    Attributes:
        pruning_depth: Profundidad de la tabla de poda (se usa al construirla).
        sticker_notation: True para mostrar reorientaciones como ``23I:...``.
        show_all: True para reportar todas las soluciones STM-óptimas, no solo las
            de menor costo ETM.
        cheap_moves: Reorientaciones que cuentan como 1 ETM.
        max_depth: Máximo de reorientaciones que la búsqueda intentará insertar.
    """

    pruning_depth: int = DEFAULT_PRUNING_DEPTH
    sticker_notation: bool = False
    show_all: bool = False
    cheap_moves: FrozenSet[Reorient] = field(default_factory=frozenset)
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.pruning_depth < MIN_PRUNING_DEPTH:
            raise ValueError(
                f"pruning_depth debe ser al menos {MIN_PRUNING_DEPTH} (recibido {self.pruning_depth})"
            )
        if self.max_depth < 0:
            raise ValueError(f"max_depth no puede ser negativo (recibido {self.max_depth})")
        object.__setattr__(self, "cheap_moves", frozenset(self.cheap_moves))

    @classmethod
    def from_names(
        cls,
        cheap_names: Iterable[str] = (),
        **kwargs,
    ) -> "SearchConfig":
        """Construye la configuración a partir de nombres de reorientaciones baratas.

        Args:
            cheap_names: Nombres en notación XYZ o de stickers (ver `Reorient.from_name`).
            **kwargs: Resto de los campos de `SearchConfig`.

        Raises:
            ValueError: Si algún nombre no existe o algún parámetro es inválido.
        """
        cheap = frozenset(Reorient.from_name(n) for n in cheap_names if n.strip())
        return cls(cheap_moves=cheap, **kwargs)

    def cost(self, r: Reorient) -> int:
        """Costo efectivo de una reorientación bajo esta configuración."""
        return r.cost(self.cheap_moves)
