"""Console output panel for pipeline status and errors."""

import html
import time

from PyQt6.QtWidgets import QGroupBox, QPushButton, QTextEdit, QVBoxLayout

from ui.styles import FONTS, SIZES, StatusColors


class ConsolePanel(QGroupBox):
    """Timestamped log of processing, export and error messages."""

    def __init__(self, parent=None):
        super().__init__(None, parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout()

        self.console = QTextEdit()
        self.console.setReadOnly(True)
        self.console.setMinimumHeight(SIZES.CONSOLE_MIN_HEIGHT)
        self.console.setFont(FONTS.CONSOLE)
        layout.addWidget(self.console)

        clear_console_btn = QPushButton("Clear Console")
        clear_console_btn.clicked.connect(self.clear)
        layout.addWidget(clear_console_btn)

        self.setLayout(layout)

    def log(self, message: str):
        """Add a status message."""
        self._append(message, StatusColors.IDLE)

    def log_error(self, error: Exception):
        """Add an error message, prefixed with the error kind."""
        self._append(f"{type(error).__name__}: {error}", StatusColors.ERROR)

    def _append(self, message: str, color: str):
        stamp = time.strftime("%H:%M:%S")
        self.console.append(
            f'<span style="color: {color};">[{stamp}]</span> {html.escape(message)}'
        )
        scrollbar = self.console.verticalScrollBar()
        if scrollbar:
            scrollbar.setValue(scrollbar.maximum())

    def clear(self):
        """Clear all console output."""
        self.console.clear()
