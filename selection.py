"""Random picks from lists, and the freeze/thaw cache that pins them."""

import random
from dataclasses import dataclass, field, replace
from typing import Protocol

from data import Item


class RandomSource(Protocol):
    def choose(self, n: int) -> int:
        """Return an index in [0, n)."""
        ...


class SeededRandom:
    """RandomSource backed by random.Random; pass a seed for repeatable draws."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def choose(self, n: int) -> int:
        return self._rng.randrange(n)


def draw(items: list[Item] | None, rng: RandomSource) -> Item:
    """Pick one item uniformly. Missing or empty lists yield an empty Item."""
    if not items:
        return Item()
    return items[rng.choose(len(items))]


@dataclass
class Pick:
    list_name: str
    item: Item
    frozen: bool = False


@dataclass
class SelectionCache:
    _frozen: dict[str, Item] = field(default_factory=dict)

    def freeze(self, list_name: str, item: Item) -> None:
        self._frozen[list_name] = replace(item)

    def thaw(self, list_name: str) -> None:
        self._frozen.pop(list_name, None)

    def thaw_all(self) -> None:
        self._frozen.clear()

    def peek(self, list_name: str) -> Item | None:
        return self._frozen.get(list_name)

    def lookup(self, list_name: str, lists: dict[str, list[Item]]) -> Item | None:
        """Like peek, but an entry whose list is gone counts as absent."""
        if list_name not in lists:
            return None
        return self.peek(list_name)

    def __len__(self) -> int:
        return len(self._frozen)


def group_picks(
    members: list[str],
    lists: dict[str, list[Item]],
    cache: SelectionCache,
    rng: RandomSource,
) -> list[Pick]:
    """One pick per group member. Frozen entries are stable; the rest redraw on every call."""
    picks = []
    for name in members:
        frozen = cache.lookup(name, lists)
        if frozen is not None:
            picks.append(Pick(name, frozen, frozen=True))
        else:
            picks.append(Pick(name, draw(lists.get(name), rng)))
    return picks
