import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from shopmap.model.io import ExchangeManager
from shopmap.model.state import ShopMapState


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def state():
    return ShopMapState()


@pytest.fixture()
def recorded(state):
    """List of snapshots emitted by the state's change signal."""
    emitted = []

    def on_changed(snapshot):
        emitted.append(snapshot)

    state.slots_changed.connect(on_changed)
    return emitted


@pytest.fixture(autouse=True)
def _clean_staged_files():
    yield
    ExchangeManager.cleanup_temp_files()
