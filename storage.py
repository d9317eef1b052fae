"""Load and save the lists/groups snapshot as a TOML file."""

import logging
import tomllib
import tomli_w
from pathlib import Path
from data import AppData, Item, ITEM_FIELDS

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".spinlist.toml"


def _item_from_raw(raw) -> Item:
    # Older snapshots stored lists as plain strings
    if isinstance(raw, str):
        return Item(name=raw or None)
    if not isinstance(raw, dict):
        raise ValueError(f"bad item entry: {raw!r}")
    return Item(**{f: str(raw[f]) or None for f in ITEM_FIELDS if f in raw})


def _item_to_raw(item: Item) -> dict:
    return {f: getattr(item, f) for f in ITEM_FIELDS if getattr(item, f) is not None}


def from_raw(raw: dict) -> AppData:
    lists = raw.get("lists", {})
    groups = raw.get("groups", {})
    if not isinstance(lists, dict) or not isinstance(groups, dict):
        raise ValueError("'lists' and 'groups' must be tables")
    app = AppData()
    for name, items in lists.items():
        if not isinstance(items, list):
            raise ValueError(f"list {name!r} is not an array")
        app.lists[name] = [_item_from_raw(entry) for entry in items]
    for name, members in groups.items():
        if not isinstance(members, list):
            raise ValueError(f"group {name!r} is not an array")
        app.groups[name] = [str(m) for m in members]
    return app


def to_raw(app: AppData) -> dict:
    return {
        "lists": {
            name: [_item_to_raw(item) for item in items]
            for name, items in app.lists.items()
        },
        "groups": {name: list(members) for name, members in app.groups.items()},
    }


def load(path: Path = DEFAULT_PATH) -> AppData | None:
    """Read a snapshot; None when the file is missing or cannot be understood."""
    if not path.exists():
        return None
    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
        return from_raw(raw)
    except (OSError, tomllib.TOMLDecodeError, ValueError, TypeError) as e:
        logger.warning("Ignoring unreadable snapshot %s: %s", path, e)
        return None


def save(app: AppData, path: Path = DEFAULT_PATH) -> None:
    with path.open("wb") as f:
        tomli_w.dump(to_raw(app), f)


class SnapshotStore:
    """The engine's persistence capability: one snapshot at one path."""

    def __init__(self, path: Path = DEFAULT_PATH):
        self.path = path

    def load(self) -> AppData | None:
        return load(self.path)

    def save(self, app: AppData) -> None:
        save(app, self.path)
