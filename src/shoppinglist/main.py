"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging and the Qt application identity (which decides where
   QSettings keeps the list).
2. Instantiates the persisted store (Model).
3. Instantiates the Main Window (View), which builds the Controller and loads
   the stored list before it is shown.
"""
import logging

from shoppinglist.app.application import create_app
from shoppinglist.logging_config import setup_logging
from shoppinglist.model.io import PersistenceStore
from shoppinglist.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to see every transition during development
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Open the persisted list (QSettings needs the identity set above)
    store = PersistenceStore()
    logger.info(f"Using storage at: {store.backend.fileName()}")

    # 4. Initialize the Main Window; it loads the list before input is accepted
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    return app.exec()
