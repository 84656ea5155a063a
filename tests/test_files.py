"""Tests for the map file store."""
from __future__ import annotations

import random

import pytest

from map4x.config import MAP_FILE_EXTENSION, MAPS_FOLDER
from map4x.maps.files import MapFileStore, default_maps_folder


@pytest.fixture
def store(tmp_path) -> MapFileStore:
    return MapFileStore(tmp_path / "maps")


def _touch(store: MapFileStore, name: str) -> None:
    store.folder.mkdir(parents=True, exist_ok=True)
    store.map_path(name).write_text("1 1\nplains\n", encoding="utf-8")


class TestNaming:
    def test_default_folder(self) -> None:
        assert default_maps_folder().name == MAPS_FOLDER
        assert MapFileStore().folder == default_maps_folder()

    def test_map_path_adds_extension(self, store) -> None:
        assert store.map_path("world").name == "world" + MAP_FILE_EXTENSION

    def test_illegal_characters_replaced(self, store) -> None:
        assert store.validate_file_name("my map?") == "my_map_"
        assert store.validate_file_name("a/b\\c:d") == "a_b_c_d"
        assert store.validate_file_name("ok-name_1") == "ok-name_1"

    def test_duplicate_gets_version(self, store) -> None:
        _touch(store, "world")
        assert store.dup_name_protection("world") == "world_1"
        _touch(store, "world_1")
        assert store.dup_name_protection("world") == "world_2"

    def test_unused_name_kept(self, store) -> None:
        assert store.dup_name_protection("fresh") == "fresh"


class TestBrowsing:
    def test_missing_folder_lists_nothing(self, store) -> None:
        assert store.list_map_names() == []

    def test_list_sorted_and_filtered(self, store) -> None:
        for name in ["zeta", "alpha", "mid"]:
            _touch(store, name)
        (store.folder / "notes.txt").write_text("x", encoding="utf-8")
        assert store.list_map_names() == ["alpha", "mid", "zeta"]

    def test_rename(self, store) -> None:
        _touch(store, "old")
        path = store.rename_map_file("old", "new")
        assert path == store.map_path("new")
        assert store.list_map_names() == ["new"]

    def test_rename_missing_raises(self, store) -> None:
        with pytest.raises(FileNotFoundError):
            store.rename_map_file("ghost", "new")

    def test_rename_onto_existing_raises(self, store) -> None:
        _touch(store, "a")
        _touch(store, "b")
        with pytest.raises(FileExistsError):
            store.rename_map_file("a", "b")

    def test_delete(self, store) -> None:
        _touch(store, "gone")
        store.delete_map_file("gone")
        assert not store.exists("gone")

    def test_delete_missing_raises(self, store) -> None:
        with pytest.raises(FileNotFoundError):
            store.delete_map_file("ghost")


class TestGenerate:
    def test_generate_new_map_file(self, store, terrains, resources) -> None:
        name = store.generate_new_map_file("new world", 6, 8, terrains, resources, rng=random.Random(3))
        assert name == "new_world"
        lines = store.map_path(name).read_text(encoding="utf-8").splitlines()
        assert lines[0] == "6 8"
        assert len(lines) == 6 * 8 + 1

    def test_generate_never_overwrites(self, store, terrains, resources) -> None:
        first = store.generate_new_map_file("world", 4, 4, terrains, resources, rng=random.Random(1))
        second = store.generate_new_map_file("world", 4, 4, terrains, resources, rng=random.Random(2))
        assert (first, second) == ("world", "world_1")
        assert store.list_map_names() == ["world", "world_1"]

    def test_generate_random_method(self, store, terrains, resources) -> None:
        name = store.generate_new_map_file("flat", 2, 2, terrains, resources,
                                           rng=random.Random(4), use_pcg=False)
        assert store.exists(name)
