"""
Application Initialization
==========================
This module constructs the Model-View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (ShopMapState).
2. Instantiates the Main Window (View).
3. Passes the Model into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
import os
import sys

from shopmap.app.application import create_app
from shopmap.logging_config import setup_logging, level_from_name
from shopmap.model.state import ShopMapState
from shopmap.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (e.g. SHOPMAP_LOG_LEVEL=DEBUG while developing)
    setup_logging(level=level_from_name(os.environ.get("SHOPMAP_LOG_LEVEL")))

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = ShopMapState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
