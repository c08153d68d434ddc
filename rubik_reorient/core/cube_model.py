# rubik_reorient/core/cube_model.py
from __future__ import annotations

import logging
from typing import ClassVar, Dict, Iterable, List, Literal, Tuple

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Face = Literal["U", "D", "L", "R", "F", "B"]
Axis = Literal["x", "y", "z"]
Color = str  # Letras: "W", "Y", "O", "R", "G", "B"
Vec3i = Tuple[int, int, int]
CubeHash = Tuple[Tuple[Color, ...], ...]
Facelet = Tuple[Face, int]
Permutation = Tuple[Tuple[Facelet, Facelet], ...]

# base -> (eje, capas afectadas, cuartos de vuelta con la regla de la mano derecha
# equivalentes a un giro horario visto desde la cara correspondiente)
MOVE_SPECS: Dict[str, Tuple[Axis, Tuple[int, ...], int]] = {
    "R": ("x", (1,), -1),
    "L": ("x", (-1,), +1),
    "U": ("y", (1,), -1),
    "D": ("y", (-1,), +1),
    "F": ("z", (1,), -1),
    "B": ("z", (-1,), +1),
    # Slices
    "M": ("x", (0,), +1),
    "E": ("y", (0,), +1),
    "S": ("z", (0,), -1),
    # Giros dobles (wide)
    "Rw": ("x", (1, 0), -1),
    "Lw": ("x", (-1, 0), +1),
    "Uw": ("y", (1, 0), -1),
    "Dw": ("y", (-1, 0), +1),
    "Fw": ("z", (1, 0), -1),
    "Bw": ("z", (-1, 0), +1),
    # Rotaciones del cubo completo
    "x": ("x", (-1, 0, 1), -1),
    "y": ("y", (-1, 0, 1), -1),
    "z": ("z", (-1, 0, 1), -1),
}

SUFFIX_TURNS: Dict[str, int] = {"": 1, "2": 2, "'": 3}


def split_token(move: str) -> Tuple[str, str]:
    """Separa un token en (base, sufijo).

    Ejemplos: "Rw'" -> ("Rw", "'"), "x2" -> ("x", "2"), "U" -> ("U", "").

    Raises:
        ValueError: Si la base no está en `MOVE_SPECS` o el sufijo no es válido.
    """
    base = move[:2] if move[1:2] == "w" else move[:1]
    suffix = move[len(base):]
    if base not in MOVE_SPECS:
        raise ValueError(f"Movimiento no soportado: {move}")
    if suffix not in SUFFIX_TURNS:
        raise ValueError(f"Sufijo no soportado: {move}")
    return base, suffix


class CubeModel:
    """Modelo lógico del cubo Rubik 3x3 basado en rotaciones geométricas.

    Representación:
        - `state[face]` es una lista de 9 stickers (3x3) para cada cara.
        - El orden de stickers por cara corresponde a índices 0..8, en layout fila-columna.

    Rotaciones:
        - Se modela cada sticker como un "facelet" con una posición (x,y,z) y una normal.
        - Cada movimiento se traduce una sola vez a una permutación de facelets
          (cacheada a nivel de clase) y luego se aplica copiando colores.

    Notación de movimientos:
        - Caras: U D L R F B (giro horario visto desde la cara)
        - Wide: Uw Dw Lw Rw Fw Bw
        - Slices: M E S
        - Rotaciones del cubo: x (como R), y (como U), z (como F)
        - Sufijos: "" (90°), "'" (inverso), "2" (180°)
    """

    FACES: ClassVar[List[Face]] = ["U", "D", "L", "R", "F", "B"]
    COLORS_SOLVED: ClassVar[Dict[Face, Color]] = {
        "U": "W",
        "D": "Y",
        "L": "O",
        "R": "R",
        "F": "G",
        "B": "B",
    }

    # Normales por cara (x, y, z)
    FACE_NORMAL: ClassVar[Dict[Face, Vec3i]] = {
        "F": (0, 0, 1),
        "B": (0, 0, -1),
        "R": (1, 0, 0),
        "L": (-1, 0, 0),
        "U": (0, 1, 0),
        "D": (0, -1, 0),
    }

    _facelet_to_pn: ClassVar[Dict[Facelet, Tuple[Vec3i, Vec3i]]] = {}
    _pn_to_facelet: ClassVar[Dict[Tuple[Vec3i, Vec3i], Facelet]] = {}
    _perm_cache: ClassVar[Dict[Tuple[str, int], Permutation]] = {}

    def __init__(self) -> None:
        """Inicializa el cubo en estado resuelto."""
        self.state: Dict[Face, List[Color]] = {
            f: [self.COLORS_SOLVED[f]] * 9 for f in self.FACES
        }
        if not self._facelet_to_pn:
            self._build_facelet_maps()

    # --------------------------
    # Public API
    # --------------------------
    def copy(self) -> "CubeModel":
        """Devuelve una copia independiente del cubo."""
        c = CubeModel()
        c.state = {f: list(self.state[f]) for f in self.FACES}
        return c

    def is_solved(self) -> bool:
        """Indica si el cubo está resuelto en la orientación canónica.

        Returns:
            True si cada cara tiene su color de `COLORS_SOLVED`; False en caso contrario.
        """
        for f in self.FACES:
            if any(x != self.COLORS_SOLVED[f] for x in self.state[f]):
                return False
        return True

    def is_solved_any_orientation(self) -> bool:
        """Indica si cada cara es de un solo color, sin importar la orientación."""
        return all(len(set(self.state[f])) == 1 for f in self.FACES)

    def to_hashable(self) -> CubeHash:
        """Convierte el estado del cubo a una estructura inmutable y hasheable.

        Returns:
            Tupla de tuplas con los 9 stickers por cara, en el orden de `FACES`.
        """
        return tuple(tuple(self.state[f]) for f in self.FACES)

    def apply_sequence(self, seq: str) -> None:
        """Aplica una secuencia de movimientos separada por espacios.

        Args:
            seq: String con movimientos, por ejemplo: "R U R' U'".
        """
        self.apply_moves(seq.split())

    def apply_moves(self, moves: Iterable[str]) -> "CubeModel":
        """Aplica varios movimientos en orden y retorna el propio cubo."""
        for mv in moves:
            self.apply_move(mv)
        return self

    def apply_move(self, move: str) -> None:
        """Aplica un movimiento individual al cubo.

        Args:
            move: Movimiento en notación (por ejemplo: "R", "Uw'", "x2").

        Raises:
            ValueError: Si el movimiento base o sufijo no está soportado.
        """
        move = move.strip()
        if not move:
            return

        base, suffix = split_token(move)
        perm = self._permutation(base, SUFFIX_TURNS[suffix])

        old = self.state
        new: Dict[Face, List[Color]] = {f: old[f][:] for f in self.FACES}
        for (src_face, src_i), (dst_face, dst_i) in perm:
            new[dst_face][dst_i] = old[src_face][src_i]
        self.state = new

    # --------------------------
    # Core rotation logic (geométrica)
    # --------------------------
    @classmethod
    def _build_facelet_maps(cls) -> None:
        """Construye el mapeo entre stickers (facelets) y su representación geométrica.

        - F: x=c-1, y=1-r, z=+1
        - B: x=1-c, y=1-r, z=-1   (flip X)
        - R: x=+1, y=1-r, z=c-1
        - L: x=-1, y=1-r, z=1-c   (flip Z)
        - U: x=c-1, y=+1, z=r-1
        - D: x=c-1, y=-1, z=1-r   (flip Z)
        """
        for face in cls.FACES:
            n = cls.FACE_NORMAL[face]
            for i in range(9):
                r, c = divmod(i, 3)

                if face == "F":
                    pos: Vec3i = (c - 1, 1 - r, 1)
                elif face == "B":
                    pos = (1 - c, 1 - r, -1)
                elif face == "R":
                    pos = (1, 1 - r, c - 1)
                elif face == "L":
                    pos = (-1, 1 - r, 1 - c)
                elif face == "U":
                    pos = (c - 1, 1, r - 1)
                else:
                    pos = (c - 1, -1, 1 - r)

                cls._facelet_to_pn[(face, i)] = (pos, n)
                cls._pn_to_facelet[(pos, n)] = (face, i)

    @staticmethod
    def _rot(v: Vec3i, axis: Axis, turns: int) -> Vec3i:
        """Rota un vector 90°*turns alrededor de un eje (regla de la mano derecha)."""
        x, y, z = v
        for _ in range(turns % 4):
            if axis == "x":
                x, y, z = x, -z, y
            elif axis == "y":
                x, y, z = z, y, -x
            else:
                x, y, z = -y, x, z
        return (x, y, z)

    @classmethod
    def _permutation(cls, base: str, quarter_turns: int) -> Permutation:
        """Devuelve (y cachea) la permutación de facelets de un movimiento.

        Args:
            base: Movimiento base (clave de `MOVE_SPECS`).
            quarter_turns: Cantidad de giros horarios (1, 2 o 3).

        Returns:
            Pares (origen, destino) solo para los facelets que se mueven.
        """
        key = (base, quarter_turns)
        cached = cls._perm_cache.get(key)
        if cached is not None:
            return cached

        axis, layers, sign = MOVE_SPECS[base]
        axis_idx = "xyz".index(axis)
        t = sign * quarter_turns

        pairs: List[Tuple[Facelet, Facelet]] = []
        for facelet, (pos, n) in cls._facelet_to_pn.items():
            if pos[axis_idx] not in layers:
                continue
            dest = cls._pn_to_facelet[(cls._rot(pos, axis, t), cls._rot(n, axis, t))]
            if dest != facelet:
                pairs.append((facelet, dest))

        perm = tuple(pairs)
        cls._perm_cache[key] = perm
        logger.debug("Permutación %s x%d: %d facelets", base, quarter_turns, len(perm))
        return perm
