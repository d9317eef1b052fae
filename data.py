"""In-memory data model: named lists of items, and groups of list names."""

from dataclasses import dataclass, field

ITEM_FIELDS = ("name", "image", "link", "comment")


@dataclass
class Item:
    name: str | None = None
    image: str | None = None
    link: str | None = None
    comment: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f) is None for f in ITEM_FIELDS)


@dataclass
class AppData:
    lists: dict[str, list[Item]] = field(default_factory=dict)
    groups: dict[str, list[str]] = field(default_factory=dict)

    def list_names(self) -> list[str]:
        return sorted(self.lists)

    def group_names(self) -> list[str]:
        return sorted(self.groups)

    def get_list(self, name: str) -> list[Item] | None:
        return self.lists.get(name)

    def get_group(self, name: str) -> list[str] | None:
        return self.groups.get(name)

    def get_item(self, list_name: str, index: int) -> Item | None:
        items = self.lists.get(list_name)
        if items is None or not 0 <= index < len(items):
            return None
        return items[index]

    # ── Lists ─────────────────────────────────────────────────────────────────

    def create_list(self, name: str) -> None:
        self.lists.setdefault(name, [])

    def add_item(self, list_name: str) -> int | None:
        """Append an empty item; return its index, or None if there is no such list."""
        items = self.lists.get(list_name)
        if items is None:
            return None
        items.append(Item())
        return len(items) - 1

    def edit_item(self, list_name: str, index: int, field_name: str, value: str | None) -> None:
        if field_name not in ITEM_FIELDS:
            raise ValueError(f"unknown item field: {field_name!r}")
        item = self.get_item(list_name, index)
        if item is None:
            return
        setattr(item, field_name, value or None)

    def remove_item(self, list_name: str, index: int) -> None:
        items = self.lists.get(list_name)
        if items is None or not 0 <= index < len(items):
            return
        del items[index]

    def remove_list(self, name: str) -> bool:
        """Remove a list and scrub it from every group. Returns True if it existed."""
        if self.lists.pop(name, None) is None:
            return False
        for group_name in self.groups:
            self.remove_group_member(group_name, name)
        return True

    # ── Groups ────────────────────────────────────────────────────────────────

    def create_group(self, name: str) -> None:
        self.groups.setdefault(name, [])

    def remove_group(self, name: str) -> None:
        self.groups.pop(name, None)

    def add_group_member(self, group_name: str, list_name: str) -> None:
        members = self.groups.get(group_name)
        if members is not None:
            members.append(list_name)

    def remove_group_member(self, group_name: str, list_name: str) -> None:
        members = self.groups.get(group_name)
        if members is not None:
            # All occurrences, in place
            members[:] = [m for m in members if m != list_name]

    def purge(self) -> None:
        self.lists.clear()
        self.groups.clear()
