"""
Modal Dialog for Shelf Items
"""
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QLineEdit, QDialogButtonBox, QPushButton, QListWidget, QMessageBox
)

from shopmap.model.errors import ShopMapError
from shopmap.model.state import ShopMapState, Slots


class ShelfDialog(QDialog):
    def __init__(self, state: ShopMapState, index: int, parent=None):
        super().__init__(parent)
        self.state = state
        self.index = index
        self.resize(360, 420)

        layout = QVBoxLayout(self)

        self.items_list = QListWidget()
        layout.addWidget(self.items_list)

        self.lbl_empty = QLabel("No items yet.")
        self.lbl_empty.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_empty)

        layout.addWidget(QLabel("Add item"))
        self.item_edit = QLineEdit()
        self.item_edit.setPlaceholderText("e.g. Milk")
        self.item_edit.textChanged.connect(self.on_text_changed)
        self.item_edit.returnPressed.connect(self.on_add_clicked)
        layout.addWidget(self.item_edit)

        # Buttons: Add (stays open) + Close
        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        self.btn_add = QPushButton("Add")
        self.btn_add.setEnabled(False)
        self.btn_add.setAutoDefault(False)
        buttons.addButton(self.btn_add, QDialogButtonBox.ActionRole)
        self.btn_add.clicked.connect(self.on_add_clicked)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.state.slots_changed.connect(self.load_from_state)
        self._listening = True
        self.load_from_state(self.state.observe())

    def load_from_state(self, snapshot: Slots) -> None:
        shelf = snapshot[self.index]
        if shelf is None:
            # Layout was replaced while the dialog was open
            self.reject()
            return

        self.setWindowTitle(shelf.name)
        self.items_list.clear()
        for item in shelf.items:
            self.items_list.addItem(f"• {item}")
        self.lbl_empty.setVisible(not shelf.items)

    # --- SLOTS ---

    def on_text_changed(self, text: str) -> None:
        self.btn_add.setEnabled(bool(text.strip()))

    def on_add_clicked(self) -> None:
        text = self.item_edit.text()
        if not text.strip():
            return
        try:
            self.state.add_item(self.index, text)
        except ShopMapError as e:
            QMessageBox.critical(self, "Error", str(e))
            return
        self.item_edit.clear()

    def done(self, result: int) -> None:
        # Stop listening before the dialog goes away
        if self._listening:
            self.state.slots_changed.disconnect(self.load_from_state)
            self._listening = False
        super().done(result)
