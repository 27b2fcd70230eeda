"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the Share/Import buttons
and the shelf grid.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (Share, Import, New) and grid clicks
   to the state and the exchange manager.
"""
import logging
import os

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFileDialog, QMessageBox, QScrollArea
)
from PySide6.QtCore import QUrl
from PySide6.QtGui import QAction, QDesktopServices

from shopmap.app.application import APP_VERSION, VISIBLE_APP_NAME
from shopmap.config import GRID_SIZE, JSON_FILE_FILTER, SHARE_FILENAME, get_last_directory, set_last_directory
from shopmap.model.errors import ShopMapError
from shopmap.model.io import ExchangeManager
from shopmap.model.state import ShopMapState, Slots
from shopmap.view.dialogs.shelf_dialog import ShelfDialog
from shopmap.view.widgets.shelf_grid import ShelfGridWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: ShopMapState) -> None:
        super().__init__()
        self.state: ShopMapState = state

        self.setWindowTitle(f"{VISIBLE_APP_NAME} {APP_VERSION}")
        self.resize(720, 960)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. BUTTON ROW ---
        button_row = QHBoxLayout()
        button_row.setContentsMargins(8, 8, 8, 8)

        self.btn_share = QPushButton("Share map")
        self.btn_share.setMinimumHeight(40)
        self.btn_share.clicked.connect(self.on_share)
        button_row.addWidget(self.btn_share)

        self.btn_import = QPushButton("Import map")
        self.btn_import.setMinimumHeight(40)
        self.btn_import.clicked.connect(self.on_import)
        button_row.addWidget(self.btn_import)

        main_layout.addLayout(button_row)

        # --- 2. GRID ---
        self.grid = ShelfGridWidget(self.state)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid)
        main_layout.addWidget(scroll)

        # --- SIGNAL CONNECTIONS ---
        self.grid.empty_slot_clicked.connect(self.on_empty_slot_clicked)
        self.grid.shelf_clicked.connect(self.open_shelf_dialog)
        self.state.slots_changed.connect(self.update_status)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.update_status(self.state.observe())

    def _create_actions(self) -> None:
        self.act_new = QAction("New Layout", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.on_file_new)

        self.act_import = QAction("Import...", self)
        self.act_import.setShortcut("Ctrl+O")
        self.act_import.triggered.connect(self.on_import)

        self.act_share = QAction("Share...", self)
        self.act_share.setShortcut("Ctrl+S")
        self.act_share.triggered.connect(self.on_share)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_new)
        file_menu.addSeparator()
        file_menu.addAction(self.act_import)
        file_menu.addAction(self.act_share)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---

    def update_status(self, snapshot: Slots) -> None:
        self.statusBar().showMessage(f"Shelves: {self.state.occupied_count()} / {GRID_SIZE}")

    # --- GRID SLOTS ---

    def on_empty_slot_clicked(self, index: int) -> None:
        try:
            self.state.occupy_slot(index)
        except ShopMapError as e:
            QMessageBox.critical(self, "Error", str(e))

    def open_shelf_dialog(self, index: int) -> None:
        dialog = ShelfDialog(self.state, index, self)
        dialog.exec()

    # --- FILE SLOTS ---

    def on_file_new(self) -> None:
        if self.state.occupied_count():
            reply = QMessageBox.question(
                self,
                "New layout",
                "Discard the current layout?",
                QMessageBox.Yes | QMessageBox.No
            )
            if reply != QMessageBox.Yes:
                return
        self.state.reset()

    def on_import(self) -> None:
        fname, _ = QFileDialog.getOpenFileName(
            self, "Import Map", get_last_directory(), JSON_FILE_FILTER
        )
        if not fname:
            return

        try:
            ExchangeManager.import_from_file(self.state, fname)
            set_last_directory(fname)
        except (ShopMapError, OSError) as e:
            QMessageBox.critical(self, "Error", f"Could not import the map:\n{e}")

    def on_share(self) -> None:
        try:
            staged_path = ExchangeManager.stage_for_share(self.state)
        except (ShopMapError, OSError) as e:
            QMessageBox.critical(self, "Error", f"Could not prepare the map for sharing:\n{e}")
            return

        default_path = os.path.join(get_last_directory(), SHARE_FILENAME)
        fname, _ = QFileDialog.getSaveFileName(
            self, "Share Map", default_path, JSON_FILE_FILTER
        )
        if not fname:
            return

        # Ensure extension
        if not fname.endswith(".json"):
            fname += ".json"

        try:
            ExchangeManager.share_to(staged_path, fname)
            set_last_directory(fname)
        except OSError as e:
            QMessageBox.critical(self, "Error", f"Could not share the map:\n{e}")
            return

        # Show the shared file in the platform file manager
        folder = os.path.dirname(os.path.abspath(fname))
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(folder)):
            logger.warning(f"Could not open '{folder}' in the file manager.")

    def closeEvent(self, event, /) -> None:
        """Remove staged share files before the window closes."""
        ExchangeManager.cleanup_temp_files()
        event.accept()
