# rubik_reorient/app/main_window.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from rubik_reorient.app.solve_worker import SolveWorker
from rubik_reorient.config import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_PRUNING_DEPTH,
    MIN_PRUNING_DEPTH,
    SearchConfig,
)
from rubik_reorient.logic.moves import parse_sequence
from rubik_reorient.solve.reorient_search import ScoredSolution, report

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class MainWindow(QMainWindow):
    """Ventana principal del optimizador de reorientaciones.

    Esta clase coordina:
    - La lectura del algoritmo y de las opciones de búsqueda (`SearchConfig`)
    - La búsqueda en segundo plano (`SolveWorker`)
    - La presentación de las soluciones encontradas
    """

    def __init__(self) -> None:
        """Inicializa la ventana principal, crea la UI y conecta señales."""
        super().__init__()
        self.setWindowTitle("Rubik Reorient - PySide6")

        # --- Estado solver ---
        self._solve_worker: Optional[SolveWorker] = None
        self._config: Optional[SearchConfig] = None
        self._moves: List[str] = []

        # --- UI ---
        root = QWidget()
        panel_layout = QVBoxLayout(root)

        # Algoritmo
        panel_layout.addWidget(QLabel("Algoritmo sin rotaciones (ej: R U R' U')"))
        self.txt_alg = QLineEdit()
        self.txt_alg.setPlaceholderText("Ej: R U R' U'")
        panel_layout.addWidget(self.txt_alg)

        # Opciones
        row_depth = QHBoxLayout()
        self.spin_pruning_depth = QSpinBox()
        self.spin_pruning_depth.setRange(MIN_PRUNING_DEPTH, 4)
        self.spin_pruning_depth.setValue(DEFAULT_PRUNING_DEPTH)
        self.spin_max_depth = QSpinBox()
        self.spin_max_depth.setRange(0, 10)
        self.spin_max_depth.setValue(DEFAULT_MAX_DEPTH)
        row_depth.addWidget(QLabel("Tabla"), 0)
        row_depth.addWidget(self.spin_pruning_depth, 1)
        row_depth.addWidget(QLabel("Max reorients"), 0)
        row_depth.addWidget(self.spin_max_depth, 1)
        panel_layout.addLayout(row_depth)

        row_flags = QHBoxLayout()
        self.chk_stickers = QCheckBox("Notación de stickers")
        self.chk_all = QCheckBox("Todas (STM)")
        row_flags.addWidget(self.chk_stickers)
        row_flags.addWidget(self.chk_all)
        panel_layout.addLayout(row_flags)

        panel_layout.addWidget(QLabel("Reorientaciones baratas (1 ETM, separadas por espacio)"))
        self.txt_cheap = QLineEdit()
        self.txt_cheap.setPlaceholderText("Ej: xy z2")
        panel_layout.addWidget(self.txt_cheap)

        # Búsqueda
        row_solve_btns = QHBoxLayout()
        self.btn_search = QPushButton("Buscar")
        self.btn_cancel_solve = QPushButton("Cancelar búsqueda")
        self.btn_cancel_solve.setEnabled(False)
        row_solve_btns.addWidget(self.btn_search)
        row_solve_btns.addWidget(self.btn_cancel_solve)
        panel_layout.addLayout(row_solve_btns)

        self.solve_status = QLabel("Listo.")
        panel_layout.addWidget(self.solve_status)

        self.solve_bar = QProgressBar()
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)
        panel_layout.addWidget(self.solve_bar)

        panel_layout.addWidget(QLabel("Soluciones"))
        self.list_solution = QListWidget()
        panel_layout.addWidget(self.list_solution, 1)

        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_search.clicked.connect(self.on_search)
        self.txt_alg.returnPressed.connect(self.on_search)
        self.btn_cancel_solve.clicked.connect(self.cancel_solve_search)

    # -------------------
    # Helpers UI
    # -------------------
    def _set_controls_enabled(self, enabled: bool) -> None:
        """Habilita o deshabilita las entradas mientras corre una búsqueda."""
        self.txt_alg.setEnabled(enabled)
        self.txt_cheap.setEnabled(enabled)
        self.spin_pruning_depth.setEnabled(enabled)
        self.spin_max_depth.setEnabled(enabled)
        self.chk_stickers.setEnabled(enabled)
        self.chk_all.setEnabled(enabled)
        self.btn_search.setEnabled(enabled)
        self.btn_cancel_solve.setEnabled(not enabled)

    def _read_config(self) -> SearchConfig:
        """Construye la configuración a partir de los controles.

        Raises:
            ValueError: Si algún nombre de reorientación barata no existe.
        """
        return SearchConfig.from_names(
            self.txt_cheap.text().split(),
            pruning_depth=int(self.spin_pruning_depth.value()),
            sticker_notation=self.chk_stickers.isChecked(),
            show_all=self.chk_all.isChecked(),
            max_depth=int(self.spin_max_depth.value()),
        )

    # -------------------
    # Solver (thread)
    # -------------------
    def on_search(self) -> None:
        """Lanza un hilo de búsqueda de reorientaciones para el algoritmo ingresado."""
        if self._solve_worker is not None and self._solve_worker.isRunning():
            return

        try:
            moves = parse_sequence(self.txt_alg.text())
            config = self._read_config()
        except ValueError as exc:
            QMessageBox.warning(self, "Entrada inválida", str(exc))
            return

        self._moves = moves
        self._config = config
        self.list_solution.clear()

        self.solve_status.setText(
            f"Preparando tabla de poda (profundidad {config.pruning_depth})..."
        )
        self.solve_bar.setRange(0, 0)  # indeterminado
        self._set_controls_enabled(False)

        self._solve_worker = SolveWorker(moves, config)
        self._solve_worker.table_ready.connect(self._on_table_ready)
        self._solve_worker.depth_update.connect(self._on_solve_depth_update)
        self._solve_worker.finished_solution.connect(self._on_solve_finished)
        self._solve_worker.error.connect(self._on_solve_error)
        self._solve_worker.finished.connect(self._on_solve_thread_finished)
        self._solve_worker.start()

    def _on_table_ready(self, n_states: int) -> None:
        self.solve_status.setText(f"Tabla lista ({n_states} estados). Buscando...")

    def _on_solve_depth_update(self, d: int) -> None:
        """Actualiza el texto de estado durante la búsqueda incremental.

        Args:
            d: Cantidad de reorientaciones que se está probando.
        """
        self.solve_status.setText(f"Buscando soluciones con {d} reorients...")

    def _on_solve_finished(self, result: Tuple[int, List[ScoredSolution]]) -> None:
        """Recibe el resultado final del solver y lo muestra en la lista.

        Args:
            result: ``(reorients, [(costo, texto), ...])`` devuelto por `iddfs`.
        """
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(1)
        self._set_controls_enabled(True)

        if self._solve_worker is not None and self._solve_worker.isInterruptionRequested():
            return

        config = self._config
        if config is None:
            return

        reorient_count, solutions = result
        try:
            lines = report(self._moves, reorient_count, solutions, config)
        except ValueError as exc:
            QMessageBox.warning(self, "Movimiento no soportado", str(exc))
            return

        if not solutions:
            self.solve_status.setText(lines[0])
            return

        # Las líneas de resumen van al estado; las soluciones a la lista.
        n_summary = 1 if config.show_all else 2
        self.solve_status.setText("\n".join(lines[:n_summary]))
        self.list_solution.clear()
        for text in lines[n_summary:]:
            self.list_solution.addItem(text)

    def _on_solve_error(self, msg: str) -> None:
        """Maneja errores emitidos por el hilo del solver.

        Args:
            msg: Mensaje/trace del error.
        """
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)
        self.solve_status.setText("Error en la búsqueda (revisa el log).")
        self._set_controls_enabled(True)
        logger.error("Error en el hilo del solver:\n%s", msg)

    def _on_solve_thread_finished(self) -> None:
        """Limpia el worker cuando el hilo finaliza y re-habilita los controles."""
        if self._solve_worker is not None:
            if self._solve_worker.isInterruptionRequested():
                self.solve_status.setText("Búsqueda cancelada.")
            self._solve_worker.deleteLater()
            self._solve_worker = None
        self._set_controls_enabled(True)

    def cancel_solve_search(self) -> None:
        """Cancela la búsqueda si está corriendo.

        La búsqueda revisa la cancelación en cada nodo. Si el hilo sigue vivo (por
        ejemplo, construyendo la tabla de poda) los controles quedan deshabilitados
        hasta que `_on_solve_thread_finished` los re-habilite.
        """
        self.list_solution.clear()
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)

        if self._solve_worker is not None and self._solve_worker.isRunning():
            self._solve_worker.requestInterruption()
            if not self._solve_worker.wait(300):
                self.solve_status.setText("Cancelando...")
                self.btn_cancel_solve.setEnabled(False)
                return

        self.solve_status.setText("Búsqueda cancelada.")
        self._set_controls_enabled(True)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Evento de cierre de ventana: detiene el hilo del solver si está activo.

        Args:
            event: Evento de cierre de Qt.
        """
        if self._solve_worker is not None and self._solve_worker.isRunning():
            self._solve_worker.requestInterruption()
            # La tabla de poda no se interrumpe; hay que esperar a que termine.
            self._solve_worker.wait()
        event.accept()
