"""Messages accepted by the update engine, one per user intent."""

from dataclasses import dataclass
from typing import ClassVar


class Message:
    pass


# ── Name buffers ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SetNewListName(Message):
    text: str


@dataclass(frozen=True)
class SetNewGroupName(Message):
    text: str


# ── Lists ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateList(Message):
    pass


@dataclass(frozen=True)
class FocusList(Message):
    name: str


@dataclass(frozen=True)
class BlurList(Message):
    pass


@dataclass(frozen=True)
class RemoveList(Message):
    name: str


# ── Items ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateItem(Message):
    pass


@dataclass(frozen=True)
class FocusItem(Message):
    index: int


@dataclass(frozen=True)
class BlurItem(Message):
    pass


@dataclass(frozen=True)
class RemoveListItem(Message):
    index: int


@dataclass(frozen=True)
class EditField(Message):
    """Set one field of the focused item; empty text clears it."""
    field: ClassVar[str]
    text: str


@dataclass(frozen=True)
class EditName(EditField):
    field: ClassVar[str] = "name"


@dataclass(frozen=True)
class EditImage(EditField):
    field: ClassVar[str] = "image"


@dataclass(frozen=True)
class EditLink(EditField):
    field: ClassVar[str] = "link"


@dataclass(frozen=True)
class EditComment(EditField):
    field: ClassVar[str] = "comment"


EDIT_MESSAGES: dict[str, type[EditField]] = {
    cls.field: cls for cls in (EditName, EditImage, EditLink, EditComment)
}


# ── Groups ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateGroup(Message):
    pass


@dataclass(frozen=True)
class FocusGroup(Message):
    name: str


@dataclass(frozen=True)
class BlurGroup(Message):
    pass


@dataclass(frozen=True)
class AddToGroup(Message):
    list_name: str


@dataclass(frozen=True)
class RemoveGroupItem(Message):
    list_name: str


@dataclass(frozen=True)
class RemoveGroup(Message):
    name: str


# ── Selection cache ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class FreezeList(Message):
    name: str


@dataclass(frozen=True)
class ThawList(Message):
    name: str


@dataclass(frozen=True)
class ThawAllLists(Message):
    pass


@dataclass(frozen=True)
class SpinGroup(Message):
    """Reroll every member of the focused group once, then hold the picks."""


# ── Misc ──────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Purge(Message):
    pass


@dataclass(frozen=True)
class Tick(Message):
    pass


@dataclass(frozen=True)
class Nothing(Message):
    pass
