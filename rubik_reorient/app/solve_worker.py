# rubik_reorient/app/solve_worker.py
from __future__ import annotations

import logging
import traceback
from typing import Dict, List

from PySide6.QtCore import QThread, Signal

from rubik_reorient.config import SearchConfig
from rubik_reorient.solve.pruning_table import PruningTable
from rubik_reorient.solve.reorient_search import iddfs

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Las tablas se reutilizan entre búsquedas: construirlas es lo más costoso.
_TABLES: Dict[int, PruningTable] = {}


def get_pruning_table(depth: int) -> PruningTable:
    """Devuelve la tabla de poda de esa profundidad, construyéndola la primera vez."""
    table = _TABLES.get(depth)
    if table is None:
        table = PruningTable(depth)
        _TABLES[depth] = table
    return table


class SolveWorker(QThread):
    """Hilo de trabajo para buscar reorientaciones sin bloquear la UI.

    Construye (o reutiliza) la tabla de poda y ejecuta la búsqueda IDDFS de
    reorientaciones sobre el algoritmo recibido, emitiendo señales para informar
    progreso y resultado.

    Signals:
        table_ready(int): Se emite cuando la tabla de poda está lista (cantidad de estados).
        depth_update(int): Se emite con cada cantidad de reorientaciones probada.
        finished_solution(object): Se emite al terminar con ``(reorients, [(costo, texto)])``.
        error(str): Se emite si ocurre una excepción durante la búsqueda.
    """

    table_ready = Signal(int)
    depth_update = Signal(int)
    finished_solution = Signal(object)
    error = Signal(str)

    def __init__(self, moves: List[str], config: SearchConfig) -> None:
        """Crea el worker.

        Args:
            moves: Algoritmo ya parseado (tokens normalizados).
            config: Configuración inmutable de la búsqueda.
        """
        super().__init__()
        self.moves: List[str] = list(moves)
        self.config: SearchConfig = config

    def run(self) -> None:
        """Punto de entrada del hilo."""
        try:
            table = get_pruning_table(self.config.pruning_depth)
            self.table_ready.emit(len(table))

            result = iddfs(
                self.moves,
                self.config,
                table,
                on_depth=self.depth_update.emit,
                should_cancel=self.isInterruptionRequested,
            )
            self.finished_solution.emit(result)
        except Exception:
            msg = traceback.format_exc()
            logger.error("Error en la búsqueda:\n%s", msg)
            self.error.emit(msg)
