"""Entry point for the Spinlist desktop app."""

import logging
import os
import sys
from pathlib import Path
from PySide6.QtWidgets import QApplication

import storage
from engine import UpdateEngine
from window import MainWindow, QtConfirmGate


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Spinlist")
    app.setStyle("Fusion")

    path = Path(os.environ.get("SPINLIST_FILE", storage.DEFAULT_PATH))
    engine = UpdateEngine(storage.SnapshotStore(path), QtConfirmGate())

    window = MainWindow(engine)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
