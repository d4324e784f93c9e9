#!/usr/bin/env python3
"""
Test script for the terminal UI screens.
"""
import asyncio
import tempfile
from pathlib import Path

from rich.text import Text
from textual.widgets import DataTable

from game_shelf.config.settings import Config
from game_shelf.core.collection_manager import CollectionManager
from game_shelf.core.storage import JsonFileStore
from game_shelf.tui import (
    CollectionScreen, GameShelfApp, PlatformGamesScreen, StatsScreen, _platform_row
)


def _app(temp_dir) -> GameShelfApp:
    manager = CollectionManager(JsonFileStore(Path(temp_dir) / "storage"))
    manager.load()
    manager.add({"title": "Ico [/]", "platform": "Xbox"})
    manager.add({"title": "Halo [remastered]", "platform": "Xbox"})
    manager.add({"title": "Wipeout", "platform": "PS [X]"})
    return GameShelfApp(manager, Config())


def test_bracketed_titles_in_tables():
    """Test that titles and platforms with brackets show as plain text."""
    print("=== Testing Bracketed Titles ===")

    async def run(app: GameShelfApp):
        async with app.run_test() as pilot:
            await app.push_screen(PlatformGamesScreen("Xbox"))
            await pilot.pause()
            table = app.screen.query_one("#games-table", DataTable)
            titles = [table.get_row_at(i)[0].plain for i in range(table.row_count)]

            await app.push_screen(CollectionScreen())
            await pilot.pause()
            table = app.screen.query_one("#platform-table", DataTable)
            platforms = [table.get_row_at(i)[0].plain for i in range(table.row_count)]

            await app.push_screen(StatsScreen())
            await pilot.pause()
            return titles, platforms

    with tempfile.TemporaryDirectory() as temp_dir:
        titles, platforms = asyncio.run(run(_app(temp_dir)))

    assert titles == ["Halo [remastered]", "Ico [/]"]
    assert platforms == ["PS [X]", "Xbox"]
    print(f"✅ Games table: {titles}")
    print(f"✅ Platform table: {platforms}")
    print()


def test_stats_rows_align():
    """Test that stats bars start in the same column for every platform."""
    print("=== Testing Stats Alignment ===")

    width = len("PS [X]")
    rows = [
        Text.from_markup(_platform_row("PS [X]", 1, 33.3, width)).plain,
        Text.from_markup(_platform_row("Xbox", 2, 66.7, width)).plain,
    ]
    assert rows[0].startswith("PS [X]  █")
    assert rows[0].index("█") == rows[1].index("█") == width + 2
    print("✅ Bars line up")
    print()


def main():
    """Run all UI tests."""
    print("Game Shelf - UI Testing")
    print("=" * 40)

    try:
        test_bracketed_titles_in_tables()
        test_stats_rows_align()

        print("✅ All UI tests completed successfully!")

    except Exception as e:
        print(f"❌ UI test failed: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
