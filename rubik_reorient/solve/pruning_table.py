# rubik_reorient/solve/pruning_table.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from rubik_reorient.core.cube_model import CubeHash, CubeModel
from rubik_reorient.logic.reorient import Reorient

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

OnLayerCallback = Callable[[int, int], None]

FACE_MOVES: List[str] = [
    "R", "R2", "R'",
    "L", "L2", "L'",
    "U", "U2", "U'",
    "D", "D2", "D'",
    "B", "B2", "B'",
    "F", "F2", "F'",
]


def reoriented_solved_states() -> List[CubeModel]:
    """Las 24 orientaciones del cubo resuelto, una por reorientación del catálogo."""
    return [CubeModel().apply_moves(r.equivalent_moves()) for r in Reorient.ALL]


class PruningTable:
    """Cota inferior admisible de la distancia a resuelto (en giros de cara).

    Se construye una vez con BFS desde las 24 orientaciones del cubo resuelto.
    Los estados alcanzados guardan su distancia exacta; cualquier otro estado
    está al menos a ``depth + 1`` giros.

    Como los estados iniciales incluyen todas las orientaciones y el conjunto de
    giros es cerrado bajo rotaciones, la cota no cambia al reorientar el cubo.
    """

    def __init__(
        self,
        depth: int,
        move_set: Iterable[str] = FACE_MOVES,
        initial_states: Optional[Iterable[CubeModel]] = None,
        on_layer: Optional[OnLayerCallback] = None,
    ) -> None:
        """Construye la tabla.

        Args:
            depth: Profundidad máxima del BFS.
            move_set: Movimientos usados para expandir estados.
            initial_states: Estados a distancia 0. Por defecto las 24 orientaciones
                del cubo resuelto.
            on_layer: Callback opcional ``(profundidad, estados_en_la_capa)``.

        Raises:
            ValueError: Si `depth` es negativa.
        """
        if depth < 0:
            raise ValueError(f"depth no puede ser negativa: {depth}")

        self.depth: int = depth
        self.move_set: List[str] = list(move_set)
        self._table: Dict[CubeHash, int] = {}

        if initial_states is None:
            initial_states = reoriented_solved_states()

        frontier: List[CubeModel] = []
        for s in initial_states:
            h = s.to_hashable()
            if h not in self._table:
                self._table[h] = 0
                frontier.append(s)

        self._report(0, len(frontier), on_layer)

        for d in range(1, depth + 1):
            next_frontier: List[CubeModel] = []
            for state in frontier:
                for mv in self.move_set:
                    child = state.copy()
                    child.apply_move(mv)
                    h = child.to_hashable()
                    if h in self._table:
                        continue
                    self._table[h] = d
                    next_frontier.append(child)
            frontier = next_frontier
            self._report(d, len(frontier), on_layer)

        logger.info("Tabla de poda lista: profundidad %d, %d estados", depth, len(self._table))

    @staticmethod
    def _report(d: int, count: int, on_layer: Optional[OnLayerCallback]) -> None:
        logger.debug("Capa %d: %d estados nuevos", d, count)
        if on_layer is not None:
            on_layer(d, count)

    def __len__(self) -> int:
        return len(self._table)

    def lower_bound(self, state: CubeModel) -> int:
        """Cota inferior de giros necesarios para resolver `state` (en cualquier orientación)."""
        return self._table.get(state.to_hashable(), self.depth + 1)
