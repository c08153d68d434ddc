# rubik_reorient/solve/reorient_search.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from rubik_reorient.config import SearchConfig
from rubik_reorient.core.cube_model import CubeModel
from rubik_reorient.logic.moves import display_move
from rubik_reorient.logic.reorient import Reorient

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Una reorientación por cada hueco entre movimientos consecutivos, en orden.
Solution = List[Reorient]
ScoredSolution = Tuple[int, str]
OnDepthCallback = Callable[[int], None]
ShouldCancelCallback = Callable[[], bool]


class LowerBoundOracle(Protocol):
    def lower_bound(self, state: CubeModel) -> int: ...


def dfs(
    state: CubeModel,
    moves: Sequence[str],
    budget: int,
    oracle: LowerBoundOracle,
    should_cancel: Optional[ShouldCancelCallback] = None,
) -> List[Solution]:
    """DFS acotado que decide qué reorientación insertar en cada hueco.

    Aplica `moves` a partir de `state`, probando en cada hueco las 24 reorientaciones
    del catálogo (la identidad no consume presupuesto). Una rama es válida si el
    estado final queda a lo sumo a 1 giro de resuelto según `oracle`.

    Args:
        state: Estado antes de aplicar `moves[0]`. No se modifica.
        moves: Movimientos restantes del algoritmo.
        budget: Reorientaciones no triviales que todavía se pueden insertar.
        oracle: Cota inferior admisible de la distancia a resuelto.
        should_cancel: Callback opcional de cancelación; se revisa en cada nodo.

    Returns:
        Todas las soluciones encontradas, cada una con ``len(moves) - 1`` entradas
        (0 si quedan menos de dos movimientos), en el orden de los huecos. Lista
        vacía si la rama no tiene solución o si se canceló la búsqueda.
    """
    if should_cancel is not None and should_cancel():
        return []

    if len(moves) <= 1 or budget == 0:
        # Sin reorientaciones disponibles: ¿llegamos?
        end_state = state.copy().apply_moves(moves)
        if oracle.lower_bound(end_state) <= 1:
            return [[Reorient.NONE] * max(len(moves) - 1, 0)]
        return []

    # Poda: reorientar no cambia la distancia y cada giro la baja a lo sumo en 1.
    if oracle.lower_bound(state) > len(moves) + 1:
        return []

    after_move = state.copy()
    after_move.apply_move(moves[0])

    ret: List[Solution] = []
    for reorient in Reorient.ALL:
        child = after_move.copy().apply_moves(reorient.equivalent_moves())
        remaining = budget if reorient.is_none() else budget - 1
        for sub in dfs(child, moves[1:], remaining, oracle, should_cancel):
            ret.append([reorient] + sub)

    return ret


def iddfs(
    moves: Sequence[str],
    config: SearchConfig,
    oracle: LowerBoundOracle,
    on_depth: Optional[OnDepthCallback] = None,
    should_cancel: Optional[ShouldCancelCallback] = None,
) -> Tuple[int, List[ScoredSolution]]:
    """Busca la mínima cantidad de reorientaciones con profundización iterativa.

    Prueba presupuestos 0, 1, 2, ... hasta ``min(len(moves), max_depth + 1) - 1``
    y se detiene en el primero que produce al menos una solución. Como una solución
    con presupuesto k sigue siendo válida con k+1, el primer presupuesto con
    resultados es óptimo en cantidad de reorientaciones.

    Args:
        moves: Algoritmo sin rotaciones (tokens normalizados).
        config: Configuración de la sesión (profundidad máxima, notación, costos).
        oracle: Cota inferior admisible de la distancia a resuelto.
        on_depth: Callback opcional que se llama con cada presupuesto probado.
        should_cancel: Callback opcional; si retorna True se abandona la búsqueda.

    Returns:
        ``(reorientaciones, [(costo, texto), ...])``. ``(0, [])`` si no hay solución
        dentro de `max_depth` o si la búsqueda fue cancelada.

    Raises:
        UnsupportedMoveError: Si algún movimiento no se puede mostrar.
    """
    if len(moves) <= 1:
        text = display_move(moves[0]) if moves else ""
        return 0, [(0, text)]

    start = CubeModel()
    for budget in range(min(len(moves), config.max_depth + 1)):
        if should_cancel is not None and should_cancel():
            logger.info("Búsqueda cancelada antes del presupuesto %d", budget)
            return 0, []

        if on_depth is not None:
            on_depth(budget)

        logger.info("Buscando soluciones con %d reorientaciones", budget)
        found = dfs(start, moves, budget, oracle, should_cancel)
        if should_cancel is not None and should_cancel():
            logger.info("Búsqueda cancelada durante el presupuesto %d", budget)
            return 0, []
        if found:
            scored = [
                (solution_cost(s, config), format_solution(moves, s, config))
                for s in found
            ]
            return budget, scored

    return 0, []


def solution_cost(solution: Sequence[Reorient], config: SearchConfig) -> int:
    """Suma del costo efectivo (ETM) de cada reorientación insertada."""
    return sum(config.cost(r) for r in solution)


def format_solution(
    moves: Sequence[str],
    solution: Sequence[Reorient],
    config: SearchConfig,
) -> str:
    """Intercala movimientos y reorientaciones en un solo texto.

    ``m1 + r1 + m2 + r2 + m3 ...`` donde cada reorientación ya incluye sus espacios.

    Raises:
        UnsupportedMoveError: Si algún movimiento no se puede mostrar.
    """
    if not moves:
        return ""
    out = display_move(moves[0])
    for reorient, mv in zip(solution, moves[1:]):
        out += reorient.display(config.sticker_notation)
        out += display_move(mv)
    return out


def filter_etm_optimal(solutions: Sequence[ScoredSolution]) -> List[ScoredSolution]:
    """Conserva solo las soluciones de menor costo ETM."""
    if not solutions:
        return []
    min_cost = min(cost for cost, _ in solutions)
    return [(cost, text) for cost, text in solutions if cost == min_cost]


def report(
    moves: Sequence[str],
    reorient_count: int,
    solutions: Sequence[ScoredSolution],
    config: SearchConfig,
) -> List[str]:
    """Líneas de texto para informar el resultado de una búsqueda.

    Con ``config.show_all`` se listan todas las soluciones STM-óptimas; si no,
    solo las de menor costo ETM.
    """
    if not solutions:
        return ["No solutions?"]

    stm = len(moves) + reorient_count
    lines = [f"Found {len(solutions)} solutions with {reorient_count} reorients ({stm} STM)."]

    shown: Sequence[ScoredSolution] = solutions
    if not config.show_all:
        shown = filter_etm_optimal(solutions)
        lines.append(f"{len(shown)} of them add only {shown[0][0]} ETM.")

    lines.extend(text for _cost, text in shown)
    return lines
