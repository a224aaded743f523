"""
Interactive prompts shown before one-shot maintenance tasks.
"""

from __future__ import annotations

from PySide6.QtWidgets import QApplication, QMessageBox

_TITLE = "Info"
_MESSAGE = "Convert legacy AdvantageScope assets?"
_DETAIL = (
    'Legacy "FRC Data" assets found. Click "Continue" to convert to a format '
    "compatible with this version of AdvantageScope."
)


def confirm_legacy_conversion() -> bool:
    """Ask the user whether legacy assets should be converted."""
    app = QApplication.instance() or QApplication([])
    box = QMessageBox()
    box.setIcon(QMessageBox.Icon.Information)
    box.setWindowTitle(_TITLE)
    box.setText(_MESSAGE)
    box.setInformativeText(_DETAIL)
    continue_button = box.addButton("Continue", QMessageBox.ButtonRole.AcceptRole)
    box.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
    box.setDefaultButton(continue_button)
    box.exec()
    app.processEvents()
    return box.clickedButton() is continue_button
