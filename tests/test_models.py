"""Tests for registry models and the upsert collection."""

from prop_registry.registry.collection import KeyedCollection
from prop_registry.registry.models import (
    SIZE_NAMES,
    MeshHandle,
    PropRecord,
    PropSize,
)


class TestPropSize:
    """Test the size name table."""

    def test_known_names(self) -> None:
        """Test canonical names map to their enum values."""
        assert PropSize.from_name("Tiny") is PropSize.TINY
        assert PropSize.from_name("Small") is PropSize.SMALL
        assert PropSize.from_name("Medium") is PropSize.MEDIUM
        assert PropSize.from_name("Big") is PropSize.BIG
        assert PropSize.from_name("Huge") is PropSize.HUGE

    def test_lookup_is_case_insensitive(self) -> None:
        """Test lookup ignores case and surrounding whitespace."""
        assert PropSize.from_name("big") is PropSize.BIG
        assert PropSize.from_name(" HUGE ") is PropSize.HUGE

    def test_unknown_maps_to_invalid(self) -> None:
        """Test unknown or non-string sizes map to INVALID."""
        assert PropSize.from_name("Colossal") is PropSize.INVALID
        assert PropSize.from_name("") is PropSize.INVALID
        assert PropSize.from_name(None) is PropSize.INVALID
        assert PropSize.from_name(3) is PropSize.INVALID

    def test_table_round_trips(self) -> None:
        """Test every size survives name -> enum -> name."""
        assert set(SIZE_NAMES) == set(PropSize)
        for size in PropSize:
            assert PropSize.from_name(size.canonical_name) is size


class TestPropRecord:
    """Test record serialization helpers."""

    def test_to_json(self) -> None:
        record = PropRecord("Bench", "/Game/SM_Bench.SM_Bench", PropSize.SMALL)
        assert record.to_json() == {
            "name": "Bench",
            "path": "/Game/SM_Bench.SM_Bench",
            "size": "Small",
        }

    def test_mesh_handle_wins_over_path(self) -> None:
        """Test the handle's path is persisted when a mesh is attached."""
        record = PropRecord(
            "Bench", "stale/path", PropSize.BIG, mesh=MeshHandle("/Game/SM_New.SM_New")
        )
        assert record.path_name == "/Game/SM_New.SM_New"
        assert record.to_json()["path"] == "/Game/SM_New.SM_New"

    def test_apply_to_keeps_extra_keys(self) -> None:
        obj = {"name": "Bench", "path": "old", "size": "Tiny", "note": "keep"}
        PropRecord("Bench", "new", PropSize.HUGE).apply_to(obj)
        assert obj == {"name": "Bench", "path": "new", "size": "Huge", "note": "keep"}


class TestKeyedCollection:
    """Test upsert-by-key semantics."""

    def test_append_and_replace(self) -> None:
        items: KeyedCollection[tuple[str, int]] = KeyedCollection(lambda t: t[0])
        assert items.upsert(("a", 1)) is False
        assert items.upsert(("b", 2)) is False
        assert items.upsert(("a", 3)) is True
        assert items.to_list() == [("a", 3), ("b", 2)]
        assert len(items) == 2
        assert "a" in items
        assert items.get("b") == ("b", 2)
        assert items.get("c") is None

    def test_initial_items_first_seen_wins(self) -> None:
        """Test duplicate keys in initial items index the first position."""
        items = KeyedCollection(lambda t: t[0], [("a", 1), ("b", 2), ("a", 3)])
        items.upsert(("a", 9))
        assert items.to_list() == [("a", 9), ("b", 2), ("a", 3)]

    def test_unkeyed_items_are_kept_but_never_matched(self) -> None:
        items = KeyedCollection(lambda t: t[0], [(None, 1)])
        items.upsert((None, 2))
        assert items.to_list() == [(None, 1), (None, 2)]

    def test_update_or_append(self) -> None:
        items = KeyedCollection(lambda d: d["k"], [{"k": "a", "v": 1, "x": True}])
        assert items.update_or_append("a", lambda d: d.update(v=2), lambda: {}) is True
        assert items.update_or_append("b", lambda d: None, lambda: {"k": "b"}) is False
        assert items.to_list() == [{"k": "a", "v": 2, "x": True}, {"k": "b"}]
        # the appended item is indexed
        assert items.update_or_append("b", lambda d: d.update(v=5), lambda: {}) is True
        assert items.get("b") == {"k": "b", "v": 5}
