"""Stipple Studio - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import StippleWindow


def main():
    """Launch the Stipple Studio application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Stipple Studio")
    app.setApplicationName("StippleStudio")

    window = StippleWindow()
    window.show()

    # Optional image path on the command line
    if len(sys.argv) > 1:
        window.open_image(sys.argv[1])

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
