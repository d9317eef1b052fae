"""Tests for storage.py: the TOML snapshot."""

import tomllib

import messages as m
from conftest import FakeConfirm
from data import AppData, Item
from engine import UpdateEngine
import storage


def _sample() -> AppData:
    app = AppData()
    app.lists["movies"] = [
        Item(name="Dune", link="https://example.org/dune"),
        Item(),
        Item(comment="ask Sam", image="poster.jpg"),
    ]
    app.lists["board games"] = []
    app.groups["weekend"] = ["movies", "board games", "movies"]
    app.groups["empty"] = []
    return app


def test_round_trip(file_store):
    file_store.save(_sample())
    assert file_store.load() == _sample()


def test_absent_fields_are_not_written(file_store):
    file_store.save(_sample())
    with file_store.path.open("rb") as f:
        raw = tomllib.load(f)
    assert raw["lists"]["movies"][0] == {"name": "Dune", "link": "https://example.org/dune"}
    assert raw["lists"]["movies"][1] == {}
    assert raw["groups"]["weekend"] == ["movies", "board games", "movies"]


def test_missing_file(file_store):
    assert file_store.load() is None


def test_unparseable_file(file_store):
    file_store.path.write_text("lists = [[[ not toml")
    assert file_store.load() is None


def test_wrong_shape(file_store):
    file_store.path.write_text('lists = "movies"\n')
    assert file_store.load() is None
    file_store.path.write_text('[lists]\nmovies = 3\n')
    assert file_store.load() is None
    file_store.path.write_text('[lists]\nmovies = [1, 2]\n')
    assert file_store.load() is None


def test_plain_string_lists(file_store):
    file_store.path.write_text(
        '[lists]\nmovies = ["Dune", "Arrival"]\n'
        '[groups]\nweekend = ["movies"]\n'
    )
    app = file_store.load()
    assert app.lists == {"movies": [Item(name="Dune"), Item(name="Arrival")]}
    assert app.groups == {"weekend": ["movies"]}


def test_missing_tables_default_to_empty(file_store):
    file_store.path.write_text("")
    assert file_store.load() == AppData()


def test_empty_strings_load_as_absent(file_store):
    file_store.path.write_text('[[lists.movies]]\nname = ""\ncomment = "x"\n')
    assert file_store.load().lists["movies"] == [Item(comment="x")]


def test_engine_recovers_from_corrupt_snapshot(file_store):
    file_store.path.write_text("{{{")
    engine = UpdateEngine(file_store, FakeConfirm())
    assert engine.data == AppData()

    engine.update(m.Nothing())
    assert storage.load(file_store.path) == AppData()


def test_engine_session_survives_restart(file_store):
    engine = UpdateEngine(file_store, FakeConfirm())
    engine.update(m.SetNewListName("movies"))
    engine.update(m.CreateList())
    engine.update(m.CreateItem())
    engine.update(m.EditName("Dune"))
    engine.update(m.SetNewGroupName("weekend"))
    engine.update(m.CreateGroup())
    engine.update(m.AddToGroup("movies"))

    restarted = UpdateEngine(file_store, FakeConfirm())
    assert restarted.data.lists == {"movies": [Item(name="Dune")]}
    assert restarted.data.groups == {"weekend": ["movies"]}
    assert restarted.focus.current_list == "movies"
    assert restarted.focus.current_group == "weekend"


def test_purge_writes_empty_snapshot(file_store):
    file_store.save(_sample())
    engine = UpdateEngine(file_store, FakeConfirm())
    engine.update(m.Purge())
    with file_store.path.open("rb") as f:
        assert tomllib.load(f) == {"lists": {}, "groups": {}}
