# main.py
from __future__ import annotations

import logging
import sys
from typing import NoReturn

from PySide6.QtWidgets import QApplication

from rubik_reorient.app.main_window import MainWindow


def main() -> NoReturn:
    """Punto de entrada de la aplicación de escritorio.

    Configura el logging, crea la instancia de `QApplication`, construye la
    ventana principal (`MainWindow`) y ejecuta el loop de eventos de Qt.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    w = MainWindow()
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
