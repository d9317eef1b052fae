"""Main application window: groups, their spins, lists and the item editor."""

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QLineEdit, QMessageBox
)
from PySide6.QtCore import QTimer
from PySide6.QtGui import QKeySequence, QShortcut

import messages as m
import style
from data import Item
from engine import UpdateEngine
from item_widget import ItemEditor
from list_widget import Row, RowListWidget


class QtConfirmGate:
    """Blocking yes/no question box, parented to the main window."""

    def __init__(self, parent=None):
        self._parent = parent

    def confirm(self, message: str) -> bool:
        reply = QMessageBox.question(
            self._parent,
            "Spinlist",
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes


def _item_label(item: Item) -> str:
    if item.is_empty():
        return style.EMPTY_ITEM_LABEL
    return item.name or item.link or item.image or item.comment


def _item_tooltip(item: Item) -> str:
    return "\n".join(v for v in (item.link, item.image, item.comment) if v)


class MainWindow(QMainWindow):
    def __init__(self, engine: UpdateEngine):
        super().__init__()
        self.setWindowTitle("Spinlist")
        self.resize(1000, 560)

        self._engine = engine

        QShortcut(QKeySequence.StandardKey.Cancel, self,
                  lambda: self.dispatch(m.BlurItem()))

        self._build_ui()
        self._refresh()

        self._timer = QTimer(self)
        self._timer.setInterval(style.TICK_INTERVAL_MS)
        self._timer.timeout.connect(self.tick)
        self._timer.start()

    # ------------------------------------------------------------------ #
    # UI construction                                                      #
    # ------------------------------------------------------------------ #

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(6)

        columns = QHBoxLayout()
        columns.addLayout(self._build_groups_pane(), 1)
        columns.addLayout(self._build_group_pane(), 2)
        columns.addLayout(self._build_lists_pane(), 1)
        columns.addLayout(self._build_list_pane(), 2)
        root.addLayout(columns)

        self.purge_button = QPushButton("Purge everything")
        self.purge_button.setFixedHeight(style.BUTTON_HEIGHT)
        self.purge_button.setStyleSheet(style.PURGE_BUTTON_STYLE)
        self.purge_button.clicked.connect(lambda: self.dispatch(m.Purge()))
        bottom = QHBoxLayout()
        bottom.addStretch()
        bottom.addWidget(self.purge_button)
        root.addLayout(bottom)

    def _build_groups_pane(self) -> QVBoxLayout:
        pane = QVBoxLayout()
        pane.addWidget(self._title("Groups"))

        self.groups_view = RowListWidget()
        self.groups_view.row_clicked.connect(lambda name: self.dispatch(m.FocusGroup(name)))
        self.groups_view.action_triggered.connect(
            lambda action, name: self.dispatch(m.RemoveGroup(name))
        )
        pane.addWidget(self.groups_view)

        self.new_group_edit = QLineEdit()
        self.new_group_edit.setPlaceholderText("New group")
        self.new_group_edit.textEdited.connect(
            lambda text: self.dispatch(m.SetNewGroupName(text.strip()))
        )
        self.new_group_edit.returnPressed.connect(self._on_create_group)
        pane.addWidget(self.new_group_edit)
        return pane

    def _build_group_pane(self) -> QVBoxLayout:
        pane = QVBoxLayout()
        self.group_title = self._title("")
        pane.addWidget(self.group_title)

        buttons = QHBoxLayout()
        self.spin_button = QPushButton("Spin")
        self.spin_button.clicked.connect(lambda: self.dispatch(m.SpinGroup()))
        self.thaw_all_button = QPushButton("Thaw all")
        self.thaw_all_button.clicked.connect(lambda: self.dispatch(m.ThawAllLists()))
        self.delete_group_button = QPushButton("Delete group")
        self.delete_group_button.setStyleSheet(style.DELETE_BUTTON_STYLE)
        self.delete_group_button.clicked.connect(self._on_delete_group)
        for btn in (self.spin_button, self.thaw_all_button, self.delete_group_button):
            btn.setFixedHeight(style.BUTTON_HEIGHT)
            buttons.addWidget(btn)
        buttons.addStretch()
        pane.addLayout(buttons)

        self.picks_view = RowListWidget()
        self.picks_view.row_clicked.connect(lambda name: self.dispatch(m.FocusList(name)))
        self.picks_view.action_triggered.connect(self._on_pick_action)
        pane.addWidget(self.picks_view)
        return pane

    def _build_lists_pane(self) -> QVBoxLayout:
        pane = QVBoxLayout()
        pane.addWidget(self._title("Lists"))

        self.lists_view = RowListWidget()
        self.lists_view.row_clicked.connect(lambda name: self.dispatch(m.FocusList(name)))
        self.lists_view.action_triggered.connect(self._on_list_action)
        pane.addWidget(self.lists_view)

        self.new_list_edit = QLineEdit()
        self.new_list_edit.setPlaceholderText("New list")
        self.new_list_edit.textEdited.connect(
            lambda text: self.dispatch(m.SetNewListName(text.strip()))
        )
        self.new_list_edit.returnPressed.connect(self._on_create_list)
        pane.addWidget(self.new_list_edit)
        return pane

    def _build_list_pane(self) -> QVBoxLayout:
        pane = QVBoxLayout()
        self.list_title = self._title("")
        pane.addWidget(self.list_title)

        buttons = QHBoxLayout()
        self.new_item_button = QPushButton("+ New item")
        self.new_item_button.clicked.connect(lambda: self.dispatch(m.CreateItem()))
        self.delete_list_button = QPushButton("Delete list")
        self.delete_list_button.setStyleSheet(style.DELETE_BUTTON_STYLE)
        self.delete_list_button.clicked.connect(self._on_delete_list)
        for btn in (self.new_item_button, self.delete_list_button):
            btn.setFixedHeight(style.BUTTON_HEIGHT)
            buttons.addWidget(btn)
        buttons.addStretch()
        pane.addLayout(buttons)

        self.items_view = RowListWidget()
        self.items_view.row_clicked.connect(lambda index: self.dispatch(m.FocusItem(index)))
        self.items_view.action_triggered.connect(
            lambda action, index: self.dispatch(m.RemoveListItem(index))
        )
        pane.addWidget(self.items_view)

        self.item_editor = ItemEditor()
        self.item_editor.field_edited.connect(
            lambda field, text: self.dispatch(m.EDIT_MESSAGES[field](text))
        )
        pane.addWidget(self.item_editor)
        return pane

    @staticmethod
    def _title(text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(style.PANE_TITLE_STYLE)
        return label

    # ------------------------------------------------------------------ #
    # Dispatch                                                             #
    # ------------------------------------------------------------------ #

    def dispatch(self, msg: m.Message) -> None:
        self._engine.update(msg)
        self._refresh()

    def tick(self) -> None:
        self._engine.update(m.Tick())
        self._render_picks()

    # ------------------------------------------------------------------ #
    # Signal handlers                                                      #
    # ------------------------------------------------------------------ #

    def _on_create_group(self):
        if self._engine.focus.new_group_name:
            self.dispatch(m.CreateGroup())

    def _on_create_list(self):
        if self._engine.focus.new_list_name:
            self.dispatch(m.CreateList())

    def _on_delete_group(self):
        name = self._engine.focus.current_group
        if name is not None:
            self.dispatch(m.RemoveGroup(name))

    def _on_delete_list(self):
        name = self._engine.focus.current_list
        if name is not None:
            self.dispatch(m.RemoveList(name))

    def _on_pick_action(self, action: str, name: str) -> None:
        if action == "freeze":
            self.dispatch(m.FreezeList(name))
        else:
            self.dispatch(m.ThawList(name))

    def _on_list_action(self, action: str, name: str) -> None:
        if action == "add":
            self.dispatch(m.AddToGroup(name))
        else:
            self.dispatch(m.RemoveGroupItem(name))

    # ------------------------------------------------------------------ #
    # Rendering                                                            #
    # ------------------------------------------------------------------ #

    def _refresh(self) -> None:
        engine = self._engine
        focus = engine.focus
        data = engine.data

        self.groups_view.set_rows(
            [Row(name, name, (("delete", "✕"),)) for name in data.group_names()],
            current=focus.current_group,
        )
        self._sync_buffer(self.new_group_edit, focus.new_group_name)

        members = engine.current_members()
        self.group_title.setText(focus.current_group if members is not None else "")
        self.spin_button.setEnabled(members is not None)
        self.thaw_all_button.setEnabled(members is not None)
        self.delete_group_button.setEnabled(members is not None)
        self._render_picks()

        list_actions = (("add", "+"), ("remove", "-")) if members is not None else ()
        self.lists_view.set_rows(
            [Row(name, name, list_actions) for name in data.list_names()],
            current=focus.current_list,
        )
        self._sync_buffer(self.new_list_edit, focus.new_list_name)

        items = engine.current_items()
        self.list_title.setText(focus.current_list if items is not None else "")
        self.new_item_button.setEnabled(items is not None)
        self.delete_list_button.setEnabled(items is not None)
        self.items_view.set_rows(
            [Row(i, _item_label(item), (("remove", "-"),), tooltip=_item_tooltip(item))
             for i, item in enumerate(items or [])],
            current=focus.current_item,
        )
        self.item_editor.set_item(engine.current_item())

    def _render_picks(self) -> None:
        rows = []
        for pick in self._engine.picks():
            text = f"{pick.list_name}: {_item_label(pick.item)}"
            if pick.frozen:
                rows.append(Row(pick.list_name, text, (("thaw", "Thaw"),),
                                color=style.FROZEN_PICK_COLOR, tooltip=_item_tooltip(pick.item)))
            else:
                rows.append(Row(pick.list_name, text, (("freeze", "Freeze"),),
                                color=style.SPINNING_PICK_COLOR, tooltip=_item_tooltip(pick.item)))
        self.picks_view.set_rows(rows)

    @staticmethod
    def _sync_buffer(edit: QLineEdit, buffer: str) -> None:
        if edit.text().strip() != buffer:
            edit.setText(buffer)
