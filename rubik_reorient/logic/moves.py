# rubik_reorient/logic/moves.py
from __future__ import annotations

from typing import Dict, List, Set, Tuple

from rubik_reorient.core.cube_model import MOVE_SPECS

VALID_FACES: Set[str] = {"U", "D", "L", "R", "F", "B"}
VALID_SUFFIX: Set[str] = {"", "'", "2"}

# Movimientos que se pueden mostrar en una solución. Los slices (M E S) se
# aceptan al parsear pero no tienen representación en la salida.
DISPLAYABLE_BASES: Set[str] = VALID_FACES | {f + "w" for f in VALID_FACES} | {"x", "y", "z"}

# Notación corta: "r" == "Rw", "X" == "x"
SHORTHAND: Dict[str, str] = {f.lower(): f + "w" for f in VALID_FACES}
SHORTHAND.update({"X": "x", "Y": "y", "Z": "z"})


class UnsupportedMoveError(ValueError):
    """Movimiento válido para el modelo pero sin representación en la salida."""


def normalize_token(tok: str) -> str:
    """Normaliza un token de movimiento a un formato estándar.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta caras, wide (``Rw``), slices (``M``) y rotaciones (``x``), con sufijo
      opcional ``""``, ``"'"`` o ``"2"``.
    - Expande la notación corta: ``r`` -> ``Rw``, ``X`` -> ``x``.
    - Corrige el caso típico "D2'" -> "D2" (ya que el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "r2", "D2'").

    Returns:
        Token normalizado (por ejemplo: "D2'" -> "D2", "r'" -> "Rw'").

    Raises:
        ValueError: Si la base no es válida o si el sufijo no es válido.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return ""

    base = tok[:2] if tok[1:2] == "w" else tok[:1]
    suf = tok[len(base):]
    base = SHORTHAND.get(base, base)

    if base not in MOVE_SPECS:
        raise ValueError(f"Movimiento inválido: {tok}")

    # Corrección: "D2'" -> "D2"
    if suf == "2'":
        suf = "2"

    if suf not in VALID_SUFFIX:
        raise ValueError(f"Sufijo inválido en: {tok}")

    return base + suf


def _split(m: str) -> Tuple[str, str]:
    base = m[:2] if m[1:2] == "w" else m[:1]
    return base, m[len(base):]


def inverse_move(m: str) -> str:
    """Devuelve el movimiento inverso de un token.

    Ejemplos:
        - "R"   -> "R'"
        - "Rw'" -> "Rw"
        - "x2"  -> "x2"

    Raises:
        ValueError: Si `m` no es un token válido.
    """
    m = normalize_token(m)
    if not m:
        return m

    base, suf = _split(m)
    if suf == "":
        return base + "'"
    if suf == "'":
        return base
    return base + "2"


def parse_sequence(text: str) -> List[str]:
    """Convierte una secuencia escrita como texto en una lista de movimientos normalizados.

    La entrada debe separar movimientos por espacios. Por ejemplo:
        "R U R' U'" -> ["R", "U", "R'", "U'"]

    Args:
        text: Secuencia de movimientos escrita como string.

    Returns:
        Lista de tokens normalizados, en el mismo orden. Vacía si el texto está vacío.

    Raises:
        ValueError: Si algún token es inválido.
    """
    return [normalize_token(t) for t in text.split() if t.strip()]


def display_move(m: str) -> str:
    """Representación de salida de un movimiento ya normalizado.

    Raises:
        UnsupportedMoveError: Si el movimiento no tiene notación de salida
            (slices, token vacío o token desconocido).
    """
    base, suf = _split(m)
    if base not in DISPLAYABLE_BASES or suf not in VALID_SUFFIX:
        raise UnsupportedMoveError(f"Movimiento no soportado en la salida: {m!r}")
    return base + suf
