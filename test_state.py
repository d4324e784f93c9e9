#!/usr/bin/env python3
"""
Test script for collection state management.
"""
import json
import tempfile
from pathlib import Path

from game_shelf.core.collection_manager import CollectionManager
from game_shelf.core.storage import JsonFileStore
from game_shelf.models.forms import GameForm
from game_shelf.models.game import GameRecord


class FailingStore(JsonFileStore):
    """Store whose writes always fail."""

    def set_item(self, key, value):
        raise OSError("disk full")


def _manager(temp_dir) -> CollectionManager:
    manager = CollectionManager(JsonFileStore(Path(temp_dir) / "storage"))
    manager.load()
    return manager


def _stored(manager: CollectionManager) -> list:
    return json.loads(manager.store.get_item(manager.storage_key))


def test_add_and_delete_scenario():
    """Test adding one game to an empty collection and deleting it again."""
    print("=== Testing Add/Delete Scenario ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        assert manager.games == []

        game = manager.add({"title": "Chrono Trigger", "platform": "Super Nintendo"})
        print(f"✅ Added: {game} (id {game.id})")

        assert len(manager) == 1
        assert game.id
        assert game.has_manual is False
        assert game.has_box is False
        assert _stored(manager) == [game.to_json_dict()]

        assert manager.delete(game.id) is True
        assert manager.games == []
        assert _stored(manager) == []
        print("✅ Collection empty again after delete")
    print()


def test_unique_ids():
    """Test that rapid adds all get distinct ids."""
    print("=== Testing Unique Ids ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        for i in range(50):
            manager.add({"title": f"Game {i}", "platform": "PC"})

        ids = [g.id for g in manager.games]
        assert len(manager) == 50
        assert len(set(ids)) == 50
        assert [g.title for g in manager.games] == [f"Game {i}" for i in range(50)]
        print("✅ 50 adds, 50 distinct ids, insertion order kept")

        # a caller-supplied id never overrides the generated one
        game = manager.add({"id": ids[0], "title": "Dupe", "platform": "PC"})
        assert game.id not in ids
    print()


def test_add_from_form():
    """Test adding straight from a validated form."""
    print("=== Testing Add From Form ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        form = GameForm(title="Halo", platform="Xbox", notes="CIB", has_box=True, has_manual=True)
        game = manager.add(form)
        assert game.title == "Halo"
        assert game.notes == "CIB"
        assert game.includes_str() == "Manual & Box"
        print(f"✅ Added from form: {game}")
    print()


def test_edit():
    """Test in-place edits and unknown ids."""
    print("=== Testing Edit ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        first = manager.add({"title": "A", "platform": "PC"})
        second = manager.add({"title": "B", "platform": "PC"})
        third = manager.add({"title": "C", "platform": "PC"})

        updated = second.model_copy(update={"title": "B (Greatest Hits)", "has_box": True})
        assert manager.edit(updated) is True
        assert [g.id for g in manager.games] == [first.id, second.id, third.id]
        assert manager.games[1].title == "B (Greatest Hits)"
        assert manager.games[0] == first and manager.games[2] == third
        assert _stored(manager)[1]["hasBox"] is True
        print("✅ Edited record kept its position")

        before = manager.games
        ghost = GameRecord(id="does-not-exist", title="Ghost", platform="PC")
        assert manager.edit(ghost) is False
        assert manager.games == before
        print("✅ Unknown id left collection unchanged")
    print()


def test_delete_missing():
    """Test deleting ids that are not present."""
    print("=== Testing Delete Missing ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        manager.add({"title": "A", "platform": "PC"})
        manager.add({"title": "B", "platform": "PC"})

        assert manager.delete("nope") is False
        assert len(manager) == 2

        manager.replace([
            GameRecord(id="x", title="One", platform="PC"),
            GameRecord(id="x", title="Two", platform="PC"),
        ])
        assert manager.delete("x") is True
        assert [g.title for g in manager.games] == ["Two"]
        print("✅ Delete removes exactly one record")
    print()


def test_replace():
    """Test wholesale replacement."""
    print("=== Testing Replace ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        for i in range(5):
            manager.add({"title": f"Old {i}", "platform": "PC"})

        incoming = [
            GameRecord(id="n1", title="New 1", platform="Wii"),
            {"id": "n2", "title": "New 2", "platform": "Wii U", "hasBox": True},
        ]
        manager.replace(incoming)
        assert [g.id for g in manager.games] == ["n1", "n2"]
        assert manager.games[1].has_box is True
        assert len(_stored(manager)) == 2

        manager.replace([])
        assert manager.games == []
        print("✅ Replace discards previous contents")
    print()


def test_loose_records():
    """Test that replace and add take incomplete records as they are."""
    print("=== Testing Incomplete Records ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        manager.add({"title": "Keep", "platform": "PC"})

        manager.replace([{"id": "1", "platform": "PC"}])
        assert len(manager) == 1
        game = manager.games[0]
        assert (game.id, game.title, game.platform) == ("1", "", "PC")
        assert game.has_box is False
        assert _stored(manager)[0]["title"] == ""
        print("✅ Replace kept a record without a title")

        game = manager.add({"platform": "PC"})
        assert game.title == ""
        assert len(manager) == 2
        print("✅ Add kept a record without a title")
    print()


def test_games_is_a_copy():
    """Test that readers cannot mutate the managed list."""
    print("=== Testing Read-only View ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = _manager(temp_dir)
        manager.add({"title": "A", "platform": "PC"})
        view = manager.games
        view.clear()
        assert len(manager) == 1
        print("✅ Clearing a view does not touch the collection")
    print()


def test_persistence():
    """Test that a second manager loads what the first wrote."""
    print("=== Testing Persistence ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager1 = _manager(temp_dir)
        assert manager1.has_snapshot() is False
        manager1.add({"title": "Chrono Trigger", "platform": "Super Nintendo", "hasManual": True})
        manager1.add({"title": "Earthbound", "platform": "Super Nintendo", "notes": "Big box"})
        assert manager1.has_snapshot() is True

        manager2 = _manager(temp_dir)
        assert manager2.games == manager1.games
        print(f"✅ Loaded {len(manager2)} games: {[g.title for g in manager2.games]}")
    print()


def test_corrupt_snapshot():
    """Test that unreadable data degrades to an empty collection."""
    print("=== Testing Corrupt Snapshot ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        store = JsonFileStore(Path(temp_dir) / "storage")
        for bad in ["{not json", '{"title": "not an array"}', '[{"title": "no id"}]']:
            store.set_item("games", bad)
            manager = CollectionManager(store)
            assert manager.load() == []
            assert manager.games == []
        print("✅ Corrupt snapshots load as empty")
    print()


def test_write_failure():
    """Test that failed writes are logged, not raised."""
    print("=== Testing Write Failure ===")

    with tempfile.TemporaryDirectory() as temp_dir:
        manager = CollectionManager(FailingStore(Path(temp_dir)))
        manager.load()
        game = manager.add({"title": "Doom", "platform": "PC"})
        assert manager.games == [game]
        assert manager.persist() is False
        print("✅ In-memory collection kept after failed write")
    print()


def main():
    """Run all state management tests."""
    print("Game Shelf - State Management Testing")
    print("=" * 45)

    try:
        test_add_and_delete_scenario()
        test_unique_ids()
        test_add_from_form()
        test_edit()
        test_delete_missing()
        test_replace()
        test_loose_records()
        test_games_is_a_copy()
        test_persistence()
        test_corrupt_snapshot()
        test_write_failure()

        print("✅ All state management tests completed successfully!")

    except Exception as e:
        print(f"❌ State management test failed: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
