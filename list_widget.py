"""List widget whose rows carry a label plus small per-row action buttons."""

from dataclasses import dataclass

from PySide6.QtWidgets import (
    QListWidget, QListWidgetItem, QAbstractItemView, QSizePolicy,
    QWidget, QHBoxLayout, QLabel, QPushButton
)
from PySide6.QtCore import Qt, Signal

import style


_KEY_ROLE = Qt.ItemDataRole.UserRole


@dataclass
class Row:
    key: object                              # emitted on click and with actions
    label: str
    actions: tuple[tuple[str, str], ...] = ()  # (action id, button text)
    color: str | None = None
    tooltip: str = ""


class RowWidget(QWidget):
    """A single row: [action buttons | label]."""
    action_clicked = Signal(str)

    def __init__(self, row: Row, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(4)

        self.buttons: dict[str, QPushButton] = {}
        for action, text in row.actions:
            btn = QPushButton(text, self)
            btn.setFixedWidth(max(style.ROW_BUTTON_WIDTH, btn.fontMetrics().horizontalAdvance(text) + 12))
            btn.clicked.connect(lambda _=False, a=action: self.action_clicked.emit(a))
            layout.addWidget(btn)
            self.buttons[action] = btn

        self.label = QLabel(self)
        self.label.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)
        layout.addWidget(self.label, 1)
        self.set_row(row)

    def set_row(self, row: Row) -> None:
        self.label.setText(row.label)
        self.label.setToolTip(row.tooltip)
        self.label.setStyleSheet(f"color: {row.color};" if row.color else "")


class RowListWidget(QListWidget):
    """
    Displays a sequence of Rows. The owner replaces the whole sequence with
    set_rows(); clicks and button presses are reported by key.
    """
    row_clicked = Signal(object)          # key
    action_triggered = Signal(str, object)  # action id, key

    def __init__(self, parent=None):
        super().__init__(parent)
        self._shape: list[tuple[object, tuple]] = []

        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setSpacing(2)
        self.setMinimumWidth(style.PANE_MIN_WIDTH)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setStyleSheet(
            f"QListWidget {{ border: none; background: {style.LIST_BG}; }}"
            f"QListWidget::item {{ background: {style.ROW_BG}; border: 1px solid {style.ROW_BORDER};"
            "  border-radius: 4px; margin: 1px; }"
            f"QListWidget::item:selected {{ background: {style.ROW_SELECTED_BG};"
            f"  border-color: {style.ROW_SELECTED_BORDER}; }}"
        )
        self.itemClicked.connect(lambda item: self.row_clicked.emit(item.data(_KEY_ROLE)))

    # ------------------------------------------------------------------ #
    # Public helpers                                                       #
    # ------------------------------------------------------------------ #

    def set_rows(self, rows: list[Row], current: object = None) -> None:
        """Show rows, selecting the one whose key equals current."""
        self.blockSignals(True)
        shape = [(row.key, row.actions) for row in rows]
        if shape == self._shape:
            # Same rows, same buttons: relabel in place
            for i, row in enumerate(rows):
                self.itemWidget(self.item(i)).set_row(row)
        else:
            self.clear()
            for row in rows:
                self._append_row(row)
            self._shape = shape

        self.setCurrentRow(-1)
        if current is not None:
            for i, row in enumerate(rows):
                if row.key == current:
                    self.setCurrentRow(i)
                    break
        self.blockSignals(False)

    def keys(self) -> list[object]:
        return [self.item(i).data(_KEY_ROLE) for i in range(self.count())]

    def labels(self) -> list[str]:
        return [self.itemWidget(self.item(i)).label.text() for i in range(self.count())]

    def trigger(self, index: int, action: str) -> None:
        """Press a row's action button programmatically."""
        self.itemWidget(self.item(index)).buttons[action].click()

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _append_row(self, row: Row) -> QListWidgetItem:
        item = QListWidgetItem()
        item.setData(_KEY_ROLE, row.key)
        self.addItem(item)
        w = RowWidget(row, self)
        w.action_clicked.connect(lambda action, key=row.key: self.action_triggered.emit(action, key))
        self.setItemWidget(item, w)
        item.setSizeHint(w.sizeHint())
        return item
