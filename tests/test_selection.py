"""Tests for selection.py: uniform draws and the freeze/thaw cache."""

from collections import Counter

from conftest import ScriptedRandom
from data import Item
from selection import SeededRandom, SelectionCache, draw, group_picks


def _items(*names):
    return [Item(name=n) for n in names]


class TestDraw:
    def test_empty_list_gives_sentinel(self):
        assert draw([], SeededRandom(1)) == Item()

    def test_missing_list_gives_sentinel(self):
        assert draw(None, SeededRandom(1)) == Item()

    def test_uses_random_source_index(self):
        items = _items("a", "b", "c")
        assert draw(items, ScriptedRandom(2)) is items[2]

    def test_roughly_uniform(self):
        items = _items("a", "b", "c", "d")
        rng = SeededRandom(1234)
        trials = 20000
        counts = Counter(draw(items, rng).name for _ in range(trials))
        assert set(counts) == {"a", "b", "c", "d"}
        for count in counts.values():
            assert abs(count / trials - 0.25) < 0.02

    def test_seed_repeats(self):
        items = _items(*"abcdefgh")
        first = [draw(items, SeededRandom(7)).name for _ in range(5)]
        second = [draw(items, SeededRandom(7)).name for _ in range(5)]
        assert first == second


class TestSelectionCache:
    def test_freeze_then_peek(self):
        cache = SelectionCache()
        cache.freeze("movies", Item(name="Dune"))
        assert cache.peek("movies") == Item(name="Dune")

    def test_freeze_stores_a_copy(self):
        cache = SelectionCache()
        item = Item(name="Dune")
        cache.freeze("movies", item)
        item.name = "Arrival"
        assert cache.peek("movies").name == "Dune"

    def test_freeze_overwrites(self):
        cache = SelectionCache()
        cache.freeze("movies", Item(name="Dune"))
        cache.freeze("movies", Item(name="Arrival"))
        assert cache.peek("movies") == Item(name="Arrival")
        assert len(cache) == 1

    def test_thaw(self):
        cache = SelectionCache()
        cache.freeze("movies", Item(name="Dune"))
        cache.thaw("movies")
        cache.thaw("movies")
        assert cache.peek("movies") is None

    def test_thaw_all(self):
        cache = SelectionCache()
        cache.freeze("movies", Item(name="Dune"))
        cache.freeze("books", Item(name="Emma"))
        cache.thaw_all()
        assert len(cache) == 0

    def test_lookup_ignores_orphans(self):
        cache = SelectionCache()
        cache.freeze("movies", Item(name="Dune"))
        assert cache.lookup("movies", {}) is None
        assert cache.lookup("movies", {"movies": []}) == Item(name="Dune")


class TestGroupPicks:
    def test_frozen_members_are_stable(self):
        lists = {"movies": _items("Dune", "Arrival"), "books": _items("Emma", "Ulysses")}
        cache = SelectionCache()
        cache.freeze("movies", Item(name="Arrival"))
        rng = ScriptedRandom(0, 1)

        first = group_picks(["movies", "books"], lists, cache, rng)
        second = group_picks(["movies", "books"], lists, cache, rng)

        assert [(p.list_name, p.item.name, p.frozen) for p in first] == [
            ("movies", "Arrival", True), ("books", "Emma", False),
        ]
        assert [(p.item.name, p.frozen) for p in second] == [
            ("Arrival", True), ("Ulysses", False),
        ]

    def test_missing_and_empty_members(self):
        cache = SelectionCache()
        cache.freeze("ghost", Item(name="Boo"))
        picks = group_picks(["ghost", "empty"], {"empty": []}, cache, SeededRandom(0))
        assert [(p.item, p.frozen) for p in picks] == [(Item(), False), (Item(), False)]

    def test_duplicate_members_each_get_a_pick(self):
        lists = {"movies": _items("Dune", "Arrival")}
        picks = group_picks(["movies", "movies"], lists, SelectionCache(), ScriptedRandom(0, 1))
        assert [p.item.name for p in picks] == ["Dune", "Arrival"]
