"""Editor for the focused item: one line edit per field."""

from PySide6.QtWidgets import QWidget, QFormLayout, QLineEdit, QSizePolicy
from PySide6.QtCore import Signal

import style
from data import Item, ITEM_FIELDS


_PLACEHOLDERS = {
    "name": "Name",
    "image": "Image URL or path",
    "link": "Link",
    "comment": "Comment",
}


class FieldEdit(QLineEdit):
    """Line edit that reports user edits only, never programmatic ones."""
    field_edited = Signal(str, str)   # field, new text

    def __init__(self, field_name: str, parent=None):
        super().__init__(parent)
        self.field_name = field_name
        self.setPlaceholderText(_PLACEHOLDERS[field_name])
        self.setStyleSheet(
            f"QLineEdit:focus {{ background: {style.ITEM_EDIT_FOCUS_BG};"
            f" border: 1px solid {style.ITEM_EDIT_FOCUS_BORDER}; border-radius: 2px; }}"
        )
        self.textEdited.connect(lambda text: self.field_edited.emit(self.field_name, text))

    def set_value(self, value: str | None) -> None:
        if self.text() != (value or ""):
            self.blockSignals(True)
            self.setText(value or "")
            self.blockSignals(False)


class ItemEditor(QWidget):
    """Name / image / link / comment form. Disabled when no item is focused."""
    field_edited = Signal(str, str)   # field, new text

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QFormLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.edits: dict[str, FieldEdit] = {}
        for field_name in ITEM_FIELDS:
            edit = FieldEdit(field_name, self)
            edit.field_edited.connect(self.field_edited)
            layout.addRow(field_name.capitalize(), edit)
            self.edits[field_name] = edit

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Minimum)
        self.set_item(None)

    def set_item(self, item: Item | None) -> None:
        self.setEnabled(item is not None)
        for field_name, edit in self.edits.items():
            edit.set_value(getattr(item, field_name) if item is not None else None)
