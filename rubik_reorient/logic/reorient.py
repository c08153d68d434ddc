# rubik_reorient/logic/reorient.py
from __future__ import annotations

from enum import Enum
from typing import AbstractSet, ClassVar, Dict, List, Tuple

# nombre -> (costo base, rotaciones equivalentes, notación XYZ, notación de stickers)
#
# La notación de stickers indica dónde termina la cara/esquina; la XYZ indica qué
# rotación se ejecuta. Por eso R (x) se escribe "23I:L".
_CATALOG: Dict[str, Tuple[int, Tuple[str, ...], str, str]] = {
    "NONE": (0, (), "", ""),
    # Eje de cara, 90°
    "R": (1, ("x",), "Ox", "23I:L"),
    "L": (1, ("x'",), "Ox'", "23I:R"),
    "U": (1, ("y",), "Oy", "23I:D"),
    "D": (1, ("y'",), "Oy'", "23I:U"),
    "F": (1, ("z",), "Oz", "23I:B"),
    "B": (1, ("z'",), "Oz'", "23I:F"),
    # Eje de cara, 180°
    "R2": (2, ("x2",), "Ox2", "23I:R2"),
    "U2": (2, ("y2",), "Oy2", "23I:U2"),
    "F2": (2, ("z2",), "Oz2", "23I:F2"),
    # Eje de arista, 180°
    "UF": (3, ("x", "y2"), "Oxy2", "23I:UF"),
    "UR": (3, ("z", "x2"), "Ozx2", "23I:UR"),
    "FR": (3, ("y", "z2"), "Oyz2", "23I:FR"),
    "DF": (3, ("x", "z2"), "Oxz2", "23I:DF"),
    "UL": (3, ("z", "y2"), "Ozy2", "23I:UL"),
    "BR": (3, ("y", "x2"), "Oyx2", "23I:BR"),
    # Eje de esquina, 120°/240°
    "UFR": (2, ("x", "y"), "Oxy", "23I:DBL"),
    "DBL": (2, ("y'", "x'"), "Oy'x'", "23I:UFR"),
    "UFL": (2, ("z", "y"), "Ozy", "23I:DBR"),
    "DBR": (2, ("x", "y'"), "Oxy'", "23I:UFL"),
    "DFR": (2, ("x", "z"), "Oxz", "23I:UBL"),
    "UBL": (2, ("y", "z'"), "Oyz'", "23I:DFR"),
    "UBR": (2, ("y", "x"), "Oyx", "23I:DFL"),
    "DFL": (2, ("z", "x'"), "Ozx'", "23I:UBR"),
}


class Reorient(Enum):
    """Rotación del cubo completo que se puede insertar entre dos movimientos.

    Son las 24 simetrías de orientación del cubo (identidad incluida). Cada miembro
    conoce su costo base en ETM, la secuencia de rotaciones ``x``/``y``/``z`` que
    produce el mismo estado y sus dos notaciones de salida.
    """

    NONE = "NONE"
    R = "R"
    L = "L"
    U = "U"
    D = "D"
    F = "F"
    B = "B"
    R2 = "R2"
    U2 = "U2"
    F2 = "F2"
    UF = "UF"
    UR = "UR"
    FR = "FR"
    DF = "DF"
    UL = "UL"
    BR = "BR"
    UFR = "UFR"
    DBL = "DBL"
    UFL = "UFL"
    DBR = "DBR"
    DFR = "DFR"
    UBL = "UBL"
    UBR = "UBR"
    DFL = "DFL"

    ALL: ClassVar[List["Reorient"]]

    @property
    def base_cost(self) -> int:
        return _CATALOG[self.value][0]

    @property
    def xyz_token(self) -> str:
        return _CATALOG[self.value][2]

    @property
    def sticker_token(self) -> str:
        return _CATALOG[self.value][3]

    def is_none(self) -> bool:
        return self is Reorient.NONE

    def equivalent_moves(self) -> Tuple[str, ...]:
        """Rotaciones (0, 1 o 2) que llevan el estado igual que la reorientación."""
        return _CATALOG[self.value][1]

    def token(self, sticker_notation: bool = False) -> str:
        return self.sticker_token if sticker_notation else self.xyz_token

    def display(self, sticker_notation: bool = False) -> str:
        """Texto a intercalar entre dos movimientos.

        La identidad se muestra como un solo espacio; el resto como ``" <token> "``.
        """
        if self.is_none():
            return " "
        return f" {self.token(sticker_notation)} "

    def cost(self, cheap: AbstractSet["Reorient"] = frozenset()) -> int:
        """Costo efectivo: 1 si la reorientación fue marcada como barata.

        Args:
            cheap: Reorientaciones que cuentan como un solo giro. La identidad
                siempre cuesta 0 aunque esté incluida.
        """
        if self in cheap and not self.is_none():
            return 1
        return self.base_cost

    @classmethod
    def from_name(cls, name: str) -> "Reorient":
        """Resuelve un nombre de usuario en cualquiera de las dos notaciones.

        Acepta el token con o sin prefijo: ``"xy"``, ``"Oxy"``, ``"23I:DBL"``, ``"DBL"``
        (este último se interpreta en notación de stickers).

        Raises:
            ValueError: Si el nombre no corresponde a ninguna reorientación.
        """
        key = name.strip().replace("’", "'")
        for r in cls.ALL:
            if r.is_none():
                continue
            if key in (r.xyz_token, r.xyz_token[1:], r.sticker_token, r.sticker_token[4:]):
                return r
        raise ValueError(f"Reorientación desconocida: {name}")


Reorient.ALL = list(Reorient)
