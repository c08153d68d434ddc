# rubik_reorient/cli.py
"""
Interfaz de línea de comandos del optimizador de reorientaciones.

Construye la tabla de poda una sola vez y luego lee algoritmos sin rotaciones
desde la entrada estándar, uno por línea, reportando dónde conviene insertar
rotaciones del cubo completo.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from rubik_reorient.config import DEFAULT_MAX_DEPTH, DEFAULT_PRUNING_DEPTH, SearchConfig
from rubik_reorient.logic.moves import parse_sequence
from rubik_reorient.solve.pruning_table import PruningTable
from rubik_reorient.solve.reorient_search import iddfs, report

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PROMPT = "Enter rotationless algorithm: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rubik-reorient",
        description="Encuentra dónde insertar rotaciones del cubo en un algoritmo sin rotaciones.",
    )
    parser.add_argument(
        "--depth",
        "-d",
        type=int,
        default=DEFAULT_PRUNING_DEPTH,
        help="Profundidad de la tabla de poda (al menos 2)",
    )
    parser.add_argument(
        "--stickers",
        "-s",
        action="store_true",
        help="Usar notación de stickers (23I:...) en lugar de XYZ para las reorientaciones",
    )
    parser.add_argument(
        "--all",
        "-a",
        dest="show_all",
        action="store_true",
        help="Mostrar todas las soluciones STM-óptimas, no solo el subconjunto ETM-óptimo",
    )
    parser.add_argument(
        "--cheap-moves",
        "-c",
        action="extend",
        nargs="+",
        default=[],
        metavar="NAME",
        help="Reorientaciones que cuentan como 1 ETM (ej: xy z2). Las de 90° no hace falta incluirlas",
    )
    parser.add_argument(
        "--max-depth",
        "-m",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="Máxima cantidad de reorientaciones a buscar",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="loglevel",
        action="store_const",
        const=logging.INFO,
        default=logging.WARNING,
        help="Mostrar el progreso de la búsqueda",
    )
    return parser


def run_loop(
    config: SearchConfig,
    table: PruningTable,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Lee algoritmos hasta fin de entrada y reporta las soluciones de cada uno.

    Returns:
        Código de salida (0 al llegar al fin de la entrada).
    """
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0

        try:
            alg = parse_sequence(line)
        except ValueError as exc:
            print(exc, file=stderr)
            print(file=stdout)
            continue

        try:
            reorient_count, solutions = iddfs(alg, config, table)
            lines = report(alg, reorient_count, solutions, config)
        except ValueError as exc:
            print(exc, file=stderr)
            print(file=stdout)
            continue

        for out in lines:
            print(out, file=stdout)
        print(file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.loglevel, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = SearchConfig.from_names(
            args.cheap_moves,
            pruning_depth=args.depth,
            sticker_notation=args.stickers,
            show_all=args.show_all,
            max_depth=args.max_depth,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Initializing pruning table to depth {config.pruning_depth} ...")
    table = PruningTable(config.pruning_depth)
    print("Ready!")
    print()

    return run_loop(config, table, sys.stdin, sys.stdout, sys.stderr)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
