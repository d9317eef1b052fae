"""The update engine: applies one message at a time, then saves a snapshot."""

import logging
from dataclasses import dataclass
from typing import Protocol

import messages as m
from data import AppData, Item
from selection import Pick, RandomSource, SeededRandom, SelectionCache, draw, group_picks

logger = logging.getLogger(__name__)


class ConfirmGate(Protocol):
    def confirm(self, message: str) -> bool:
        ...


class SnapshotStore(Protocol):
    def load(self) -> AppData | None:
        ...

    def save(self, app: AppData) -> None:
        ...


@dataclass
class Focus:
    """Transient UI state. Never persisted."""
    current_list: str | None = None
    current_item: int | None = None
    current_group: str | None = None
    new_list_name: str = ""
    new_group_name: str = ""


class UpdateEngine:
    """
    Owns the durable model, the selection cache and the focus state.
    Each update() runs to completion, then writes the whole snapshot,
    whether or not anything changed.
    """

    def __init__(self, store: SnapshotStore, confirm: ConfirmGate,
                 rng: RandomSource | None = None):
        self._store = store
        self._confirm = confirm
        self.rng = rng or SeededRandom()

        loaded = store.load()
        self.data = loaded if loaded is not None else AppData()
        self.cache = SelectionCache()

        lists = self.data.list_names()
        groups = self.data.group_names()
        self.focus = Focus(
            current_list=lists[0] if lists else None,
            current_group=groups[0] if groups else None,
        )

        self._handlers = {
            m.SetNewListName: self._on_set_new_list_name,
            m.SetNewGroupName: self._on_set_new_group_name,
            m.CreateList: self._on_create_list,
            m.CreateGroup: self._on_create_group,
            m.FocusList: self._on_focus_list,
            m.BlurList: self._on_blur_list,
            m.FocusGroup: self._on_focus_group,
            m.BlurGroup: self._on_blur_group,
            m.CreateItem: self._on_create_item,
            m.FocusItem: self._on_focus_item,
            m.BlurItem: self._on_blur_item,
            m.EditName: self._on_edit_field,
            m.EditImage: self._on_edit_field,
            m.EditLink: self._on_edit_field,
            m.EditComment: self._on_edit_field,
            m.AddToGroup: self._on_add_to_group,
            m.RemoveList: self._on_remove_list,
            m.RemoveGroup: self._on_remove_group,
            m.RemoveListItem: self._on_remove_list_item,
            m.RemoveGroupItem: self._on_remove_group_item,
            m.FreezeList: self._on_freeze_list,
            m.ThawList: self._on_thaw_list,
            m.ThawAllLists: self._on_thaw_all_lists,
            m.SpinGroup: self._on_spin_group,
            m.Purge: self._on_purge,
            m.Tick: self._on_nothing,
            m.Nothing: self._on_nothing,
        }

    # ------------------------------------------------------------------ #
    # Reads                                                                #
    # ------------------------------------------------------------------ #

    def current_items(self) -> list[Item] | None:
        if self.focus.current_list is None:
            return None
        return self.data.get_list(self.focus.current_list)

    def current_members(self) -> list[str] | None:
        if self.focus.current_group is None:
            return None
        return self.data.get_group(self.focus.current_group)

    def current_item(self) -> Item | None:
        """The focused item, bounds-checked on every call."""
        if self.focus.current_list is None or self.focus.current_item is None:
            return None
        return self.data.get_item(self.focus.current_list, self.focus.current_item)

    def picks(self) -> list[Pick]:
        """Spin the focused group: one pick per member list."""
        members = self.current_members()
        if not members:
            return []
        return group_picks(members, self.data.lists, self.cache, self.rng)

    # ------------------------------------------------------------------ #
    # Dispatch                                                             #
    # ------------------------------------------------------------------ #

    def update(self, msg: m.Message) -> None:
        handler = self._handlers.get(type(msg))
        if handler is None:
            raise TypeError(f"unhandled message: {msg!r}")
        logger.debug("update: %r", msg)
        try:
            handler(msg)
        finally:
            self._store.save(self.data)

    # ── Name buffers ──────────────────────────────────────────────────────────

    def _on_set_new_list_name(self, msg: m.SetNewListName) -> None:
        self.focus.new_list_name = msg.text

    def _on_set_new_group_name(self, msg: m.SetNewGroupName) -> None:
        self.focus.new_group_name = msg.text

    # ── Lists ─────────────────────────────────────────────────────────────────

    def _on_create_list(self, msg: m.CreateList) -> None:
        name, self.focus.new_list_name = self.focus.new_list_name, ""
        self.data.create_list(name)
        self._focus_list(name)

    def _on_focus_list(self, msg: m.FocusList) -> None:
        self._focus_list(msg.name)

    def _on_blur_list(self, msg: m.BlurList) -> None:
        self.focus.current_list = None
        self.focus.current_item = None

    def _on_remove_list(self, msg: m.RemoveList) -> None:
        if not self._confirm.confirm(f"Really delete list {msg.name}?"):
            return
        if self.data.remove_list(msg.name):
            logger.info("Deleted list %r", msg.name)
            self.cache.thaw(msg.name)
        if self.focus.current_list == msg.name:
            self.focus.current_list = None
            self.focus.current_item = None

    # ── Items ─────────────────────────────────────────────────────────────────

    def _on_create_item(self, msg: m.CreateItem) -> None:
        if self.focus.current_list is None:
            return
        index = self.data.add_item(self.focus.current_list)
        if index is not None:
            self.focus.current_item = index

    def _on_focus_item(self, msg: m.FocusItem) -> None:
        items = self.current_items()
        if items is not None and 0 <= msg.index < len(items):
            self.focus.current_item = msg.index
        else:
            self.focus.current_item = None

    def _on_blur_item(self, msg: m.BlurItem) -> None:
        self.focus.current_item = None

    def _on_edit_field(self, msg: m.EditField) -> None:
        if self.focus.current_list is None or self.focus.current_item is None:
            return
        self.data.edit_item(self.focus.current_list, self.focus.current_item,
                            msg.field, msg.text or None)

    def _on_remove_list_item(self, msg: m.RemoveListItem) -> None:
        items = self.current_items()
        if items is None or not 0 <= msg.index < len(items):
            return
        self.data.remove_item(self.focus.current_list, msg.index)

        # Later items shifted down by one; follow the focused one or drop it
        current = self.focus.current_item
        if current is None:
            return
        if current == msg.index:
            self.focus.current_item = None
        elif current > msg.index:
            self.focus.current_item = current - 1
        if self.focus.current_item is not None and self.focus.current_item >= len(items):
            self.focus.current_item = None

    # ── Groups ────────────────────────────────────────────────────────────────

    def _on_create_group(self, msg: m.CreateGroup) -> None:
        name, self.focus.new_group_name = self.focus.new_group_name, ""
        self.data.create_group(name)
        self.focus.current_group = name

    def _on_focus_group(self, msg: m.FocusGroup) -> None:
        self.focus.current_group = msg.name

    def _on_blur_group(self, msg: m.BlurGroup) -> None:
        self.focus.current_group = None

    def _on_add_to_group(self, msg: m.AddToGroup) -> None:
        if self.focus.current_group is not None:
            self.data.add_group_member(self.focus.current_group, msg.list_name)

    def _on_remove_group_item(self, msg: m.RemoveGroupItem) -> None:
        if self.focus.current_group is not None:
            self.data.remove_group_member(self.focus.current_group, msg.list_name)

    def _on_remove_group(self, msg: m.RemoveGroup) -> None:
        if not self._confirm.confirm(f"Really delete group {msg.name}?"):
            return
        self.data.remove_group(msg.name)
        logger.info("Deleted group %r", msg.name)
        if self.focus.current_group == msg.name:
            self.focus.current_group = None

    # ── Selection cache ───────────────────────────────────────────────────────

    def _on_freeze_list(self, msg: m.FreezeList) -> None:
        items = self.data.get_list(msg.name)
        if items is None:
            # No list to draw from
            return
        self.cache.freeze(msg.name, draw(items, self.rng))

    def _on_spin_group(self, msg: m.SpinGroup) -> None:
        """Redraw every live member of the focused group and pin the results."""
        for name in dict.fromkeys(self.current_members() or []):
            items = self.data.get_list(name)
            if items is not None:
                self.cache.freeze(name, draw(items, self.rng))

    def _on_thaw_list(self, msg: m.ThawList) -> None:
        self.cache.thaw(msg.name)

    def _on_thaw_all_lists(self, msg: m.ThawAllLists) -> None:
        self.cache.thaw_all()

    # ── Misc ──────────────────────────────────────────────────────────────────

    def _on_purge(self, msg: m.Purge) -> None:
        if not self._confirm.confirm("Really delete all saved lists and groups?"):
            return
        self.data.purge()
        self.cache.thaw_all()
        self.focus = Focus()
        logger.info("Purged all lists and groups")

    def _on_nothing(self, msg: m.Message) -> None:
        pass

    def _focus_list(self, name: str) -> None:
        if name != self.focus.current_list:
            self.focus.current_item = None
        self.focus.current_list = name
