"""
Game Shelf - Terminal Application
Catalog, search and summarize a personal video game collection.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.markup import escape
from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen, Screen
from textual.widgets import (
    Button, Checkbox, DataTable, Footer, Header, Input, Label,
    Markdown, OptionList, Select, Static, TextArea
)
from textual.widgets.option_list import Option

from . import __version__
from .config.settings import Config, config_manager
from .core.collection_manager import CollectionManager
from .core.data_manager import (
    CollectionExportError, CollectionImportError,
    export_collection, import_collection, seed_if_empty
)
from .core.queries import collection_stats, count_by_platform, games_for_platform, search_by_title
from .integrations.image_search import ImageSearchClient, ImageSearchError
from .logging_setup import setup_logging
from .models.forms import GameForm, MISSING_INFO_MESSAGE, MISSING_INFO_TITLE
from .models.game import GameRecord
from .models.platform import PLATFORMS, platform_color

logger = logging.getLogger(__name__)

BAR_WIDTH = 30


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def _platform_row(platform: str, count: int, share: float, name_width: int) -> str:
    """Markup for one stats line; pads by the rendered name, not the escaped one."""
    padding = " " * (name_width - len(platform))
    bar = "█" * max(1, round(share / 100 * BAR_WIDTH))
    return f"{escape(platform)}{padding}  [{platform_color(platform)}]{bar}[/] {count} ({share:.0f}%)"


# === MODALS ===

class MessageModal(ModalScreen):
    """Blocking message with a single OK button."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    CSS = """
    MessageModal {
        align: center middle;
    }

    .message-modal-container {
        width: 60;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }

    .message-modal-text {
        margin: 1 0;
    }
    """

    def __init__(self, title: str, message: str, **kwargs):
        super().__init__(**kwargs)
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(classes="message-modal-container"):
            yield Label(self.title_text, classes="section-title")
            yield Static(self.message, classes="message-modal-text")
            yield Button("OK", id="ok-btn", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


class ConfirmationModal(ModalScreen):
    """Modal dialog for confirmations."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    ConfirmationModal {
        align: center middle;
    }

    .confirmation-modal-container {
        width: 60;
        height: 14;
        border: thick $primary;
        background: $surface;
        padding: 2;
    }

    .confirmation-modal-message {
        height: 4;
        content-align: center middle;
        margin-bottom: 1;
    }

    .confirmation-modal-buttons {
        height: 3;
        content-align: center middle;
    }
    """

    def __init__(self, message: str, confirm_label: str = "Yes", **kwargs):
        super().__init__(**kwargs)
        self.message = message
        self.confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Container(classes="confirmation-modal-container"):
            yield Static(self.message, classes="confirmation-modal-message")
            with Horizontal(classes="confirmation-modal-buttons"):
                yield Button(self.confirm_label, id="confirm-yes", variant="error")
                yield Button("Cancel", id="confirm-no", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")

    def action_cancel(self) -> None:
        """Cancel and close modal."""
        self.dismiss(False)


class ImagePickerModal(ModalScreen):
    """Pick one cover image URL from search results."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    ImagePickerModal {
        align: center middle;
    }

    #picker-dialog {
        width: 100;
        height: 24;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #picker-list {
        height: 1fr;
        margin: 1 0;
    }
    """

    def __init__(self, urls: List[str], **kwargs):
        super().__init__(**kwargs)
        self.urls = urls

    def compose(self) -> ComposeResult:
        with Vertical(id="picker-dialog"):
            yield Label(f"Select a Cover ({_plural(len(self.urls), 'result')})", classes="section-title")
            yield OptionList(
                *[Option(escape(url), id=str(index)) for index, url in enumerate(self.urls)],
                id="picker-list"
            )
            yield Button("Cancel", id="cancel-btn", variant="default")

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(self.urls[int(event.option.id)])

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ImportModal(ModalScreen):
    """Ask for the path of a collection file to import."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    ImportModal {
        align: center middle;
    }

    #import-dialog {
        width: 80;
        height: 16;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    .import-warning {
        color: $warning;
        margin: 1 0;
    }

    .modal-buttons {
        height: 3;
        margin-top: 1;
    }
    """

    def __init__(self, default_path: Path, **kwargs):
        super().__init__(**kwargs)
        self.default_path = default_path

    def compose(self) -> ComposeResult:
        with Vertical(id="import-dialog"):
            yield Label("Import Data", classes="section-title")
            yield Input(value=str(self.default_path), placeholder="Path to a .json export", id="import-path-input")
            yield Static("Importing replaces your whole collection.", classes="import-warning")
            with Horizontal(classes="modal-buttons"):
                yield Button("Import", id="import-btn", variant="warning")
                yield Button("Cancel", id="cancel-btn", variant="default")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "import-btn":
            self._submit()
        else:
            self.action_cancel()

    def _submit(self) -> None:
        value = self.query_one("#import-path-input", Input).value.strip()
        self.dismiss(Path(value).expanduser() if value else None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class GameFormModal(ModalScreen):
    """Add or edit form for one game."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    GameFormModal {
        align: center middle;
    }

    #form-dialog {
        width: 90;
        height: 90%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    .form-row {
        height: 3;
        margin: 0 0 1 0;
    }

    .form-label {
        width: 14;
        content-align: right middle;
    }

    .form-input {
        width: 1fr;
        margin-left: 1;
    }

    #notes-textarea {
        height: 6;
        margin: 0 0 1 0;
    }

    .modal-buttons {
        height: 3;
        margin-top: 1;
    }
    """

    def __init__(self, game: Optional[GameRecord] = None, **kwargs):
        super().__init__(**kwargs)
        self.game = game
        self.is_editing = game is not None

    def compose(self) -> ComposeResult:
        form = GameForm.from_record(self.game) if self.game else GameForm.model_construct()
        platforms = list(PLATFORMS)
        if form.platform and form.platform not in platforms:
            platforms.append(form.platform)
        select_kwargs = {"value": form.platform} if form.platform else {}

        with VerticalScroll(id="form-dialog"):
            yield Label("Edit Game" if self.is_editing else "Add a New Game", classes="section-title")

            with Horizontal(classes="form-row"):
                yield Label("Title:", classes="form-label")
                yield Input(value=form.title, placeholder="Game Title", id="title-input", classes="form-input")

            with Horizontal(classes="form-row"):
                yield Label("Platform:", classes="form-label")
                yield Select(
                    [(p, p) for p in platforms],
                    prompt="Select a Platform...",
                    id="platform-select",
                    classes="form-input",
                    **select_kwargs
                )

            with Horizontal(classes="form-row"):
                yield Label("Cover URL:", classes="form-label")
                yield Input(value=form.image_url, placeholder="Cover Image URL", id="cover-input", classes="form-input")
                yield Button("Find Cover", id="find-cover-btn", variant="primary")

            yield Label("Notes:")
            yield TextArea(form.notes, id="notes-textarea")

            with Horizontal(classes="form-row"):
                yield Checkbox("Manual", value=form.has_manual, id="manual-checkbox")
                yield Checkbox("Box", value=form.has_box, id="box-checkbox")

            with Horizontal(classes="modal-buttons"):
                if self.is_editing:
                    yield Button("Update Game", id="update-btn", variant="success")
                else:
                    yield Button("Add Game", id="add-btn", variant="success")
                    yield Button("Add Another", id="add-another-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn", variant="default")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "add-btn":
            self._add_game(keep_open=False)
        elif button_id == "add-another-btn":
            self._add_game(keep_open=True)
        elif button_id == "update-btn":
            self._update_game()
        elif button_id == "find-cover-btn":
            self._find_cover()
        elif button_id == "cancel-btn":
            self.action_cancel()

    def _read_form(self) -> dict:
        """Current form values."""
        platform = self.query_one("#platform-select", Select).value
        return {
            "title": self.query_one("#title-input", Input).value,
            "platform": platform if isinstance(platform, str) else "",
            "notes": self.query_one("#notes-textarea", TextArea).text,
            "image_url": self.query_one("#cover-input", Input).value.strip(),
            "has_manual": self.query_one("#manual-checkbox", Checkbox).value,
            "has_box": self.query_one("#box-checkbox", Checkbox).value,
        }

    def _validated_form(self) -> Optional[GameForm]:
        try:
            return GameForm(**self._read_form())
        except ValidationError:
            self.app.push_screen(MessageModal(MISSING_INFO_TITLE, MISSING_INFO_MESSAGE))
            return None

    def _add_game(self, keep_open: bool) -> None:
        form = self._validated_form()
        if form is None:
            return

        game = self.app.manager.add(form)
        logger.info("Added game %s (%s)", game.id, game.platform)

        if not keep_open:
            self.dismiss(game)
            return

        self.app.notify("You can now add another game.", title="Game Added")
        self.query_one("#title-input", Input).value = ""
        self.query_one("#cover-input", Input).value = ""
        self.query_one("#notes-textarea", TextArea).text = ""
        self.query_one("#title-input", Input).focus()

    def _update_game(self) -> None:
        form = self._validated_form()
        if form is None:
            return

        updated = form.apply_to(self.game)
        if not self.app.manager.edit(updated):
            self.app.notify("This game no longer exists.", title="Update Failed", severity="warning")
            self.dismiss(None)
            return
        self.dismiss(updated)

    def _find_cover(self) -> None:
        values = self._read_form()
        if not self.app.config.image_search.enabled:
            self.app.notify("Image search is disabled in settings.", severity="warning")
            return
        if not values["title"].strip():
            self.app.notify("Enter a title before searching for a cover.", severity="warning")
            return

        self.app.notify("Searching for cover art...")
        self._search_covers(self.app, self.app.image_client, values["title"], values["platform"])

    @work(thread=True, exclusive=True, group="cover-search")
    def _search_covers(self, app: App, client: ImageSearchClient, title: str, platform: str) -> None:
        # Runs off the UI thread; results go back through call_from_thread
        try:
            urls = client.search_box_art(title, platform)
        except ImageSearchError as e:
            app.call_from_thread(app.notify, str(e), title="Image Search Error", severity="warning")
            return
        app.call_from_thread(self._show_cover_choices, urls)

    def _show_cover_choices(self, urls: List[str]) -> None:
        if not urls:
            self.app.notify("No images found.", title="Image Search", severity="warning")
            return

        def handle_choice(url: Optional[str]) -> None:
            if url:
                self.query_one("#cover-input", Input).value = url

        self.app.push_screen(ImagePickerModal(urls), handle_choice)

    def action_cancel(self) -> None:
        """Cancel and close modal."""
        self.dismiss(None)


class HelpModal(ModalScreen):
    """Key binding reference."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
    }

    #help-dialog {
        width: 70;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-dialog"):
            yield Markdown(self.app.HELP_TEXT)
            yield Button("Close", id="close-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


# === SCREENS ===

class HomeScreen(Screen):
    """Welcome screen with title search."""

    CSS = """
    #welcome {
        content-align: center middle;
        height: 5;
        text-style: bold;
    }

    #search-results {
        height: 1fr;
        border: solid $secondary;
    }

    #no-results {
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._results: List[GameRecord] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(f"Welcome to\n{self.app.TITLE}", id="welcome")
        yield Input(placeholder="Search Games", id="search-input")
        yield Static("", id="no-results")
        yield OptionList(id="search-results")
        yield Footer()

    def on_screen_resume(self) -> None:
        self.refresh_view()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        term = self.query_one("#search-input", Input).value
        results = search_by_title(self.app.manager.games, term)
        self._results = results

        option_list = self.query_one("#search-results", OptionList)
        option_list.clear_options()
        option_list.add_options([Option(escape(str(game)), id=str(index)) for index, game in enumerate(results)])

        message = "No games found." if term.strip() and not results else ""
        self.query_one("#no-results", Static).update(message)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        game = self._results[int(event.option.id)]
        if self.app.manager.get(game.id):
            self.app.push_screen(PlatformGamesScreen(game.platform, selected_id=game.id))


class CollectionScreen(Screen):
    """Platforms in the collection with game counts."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
    ]

    CSS = """
    #platform-table {
        height: 1fr;
        border: solid $primary;
    }

    .toolbar {
        height: 3;
    }

    #empty-collection {
        color: $text-muted;
        padding: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label("My Collection", classes="section-title")
        with Horizontal(classes="toolbar"):
            yield Button("Export Data", id="export-btn", variant="primary")
            yield Button("Import Data", id="import-btn", variant="warning")
            yield Button("Add Game", id="add-btn", variant="success")
        yield Static("", id="empty-collection")
        yield DataTable(id="platform-table")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#platform-table", DataTable)
        table.add_columns("Platform", "Games")
        table.cursor_type = "row"
        self.refresh_view()

    def on_screen_resume(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        counts = count_by_platform(self.app.manager.games)
        table = self.query_one("#platform-table", DataTable)
        table.clear()
        for platform, count in counts.items():
            table.add_row(Text(platform), _plural(count, "game"), key=platform)

        empty = "" if counts else "No games available. Add some games!"
        self.query_one("#empty-collection", Static).update(empty)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        self.app.push_screen(PlatformGamesScreen(event.row_key.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "export-btn":
            self.app.action_export()
        elif event.button.id == "import-btn":
            self.app.action_import()
        elif event.button.id == "add-btn":
            self.app.action_add_game()


class PlatformGamesScreen(Screen):
    """Games on one platform, sorted by title."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
        Binding("e", "edit_game", "Edit"),
        Binding("d", "delete_game", "Delete"),
    ]

    CSS = """
    #games-table {
        height: 1fr;
        border: solid $primary;
    }

    #game-details {
        height: 8;
        border: solid $secondary;
        padding: 0 1;
    }
    """

    def __init__(self, platform: str, selected_id: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.platform = platform
        self.selected_id = selected_id
        self._rows: List[GameRecord] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label(escape(self.platform), classes="section-title")
        yield DataTable(id="games-table")
        yield Static("", id="game-details")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#games-table", DataTable)
        table.add_columns("Title", "Includes", "Cover")
        table.cursor_type = "row"
        self.refresh_view()

    def on_screen_resume(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        table = self.query_one("#games-table", DataTable)
        table.clear()
        self._rows = games_for_platform(self.app.manager.games, self.platform)

        for game in self._rows:
            table.add_row(
                Text(game.title),
                game.includes_str() or "-",
                "yes" if game.has_cover() else "-"
            )

        if not self._rows:
            self.query_one("#game-details", Static).update("No games found for this platform.")
            return

        if self.selected_id:
            for index, game in enumerate(self._rows):
                if game.id == self.selected_id:
                    table.move_cursor(row=index)
                    break
        self._show_details(self._current_game())

    def _current_game(self) -> Optional[GameRecord]:
        table = self.query_one("#games-table", DataTable)
        if not self._rows or table.cursor_row is None:
            return None
        if 0 <= table.cursor_row < len(self._rows):
            return self._rows[table.cursor_row]
        return None

    def _show_details(self, game: Optional[GameRecord]) -> None:
        if game is None:
            return
        details = (
            f"[b]{escape(game.title)}[/b]\n"
            f"Notes: {escape(game.notes) if game.notes else 'No notes available.'}\n"
            f"Includes: {game.includes_str() or 'Game only'}\n"
            f"Cover: {escape(game.image_url) if game.has_cover() else 'None'}"
        )
        self.query_one("#game-details", Static).update(details)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        game = self._current_game()
        if game:
            self.selected_id = game.id
            self._show_details(game)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        self.action_edit_game()

    def action_edit_game(self) -> None:
        game = self._current_game()
        if game is None:
            return

        def handle_result(updated: Optional[GameRecord]) -> None:
            if updated:
                self.selected_id = updated.id
                self.app.notify(f"Updated \"{escape(updated.title)}\"")

        self.app.push_screen(GameFormModal(game), handle_result)

    def action_delete_game(self) -> None:
        game = self._current_game()
        if game is None:
            return

        def handle_confirmation(confirmed: bool) -> None:
            if confirmed and self.app.manager.delete(game.id):
                self.selected_id = None
                self.app.notify(f"Deleted \"{escape(game.title)}\"")
                self.refresh_view()

        modal = ConfirmationModal(
            f"Are you sure you want to delete \"{escape(game.title)}\"?",
            confirm_label="Delete"
        )
        self.app.push_screen(modal, handle_confirmation)


class StatsScreen(Screen):
    """Collection statistics."""

    BINDINGS = [
        Binding("escape", "app.pop_screen", "Back"),
    ]

    CSS = """
    #stats-body {
        padding: 1 2;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label("Collection Stats", classes="section-title")
        with VerticalScroll():
            yield Static(self._format_stats(), id="stats-body")
        yield Footer()

    def on_screen_resume(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one("#stats-body", Static).update(self._format_stats())

    def _format_stats(self) -> str:
        stats = collection_stats(self.app.manager.games)
        if stats.total_games == 0:
            return "Total Games: 0\n\nNo games available. Add some games!"

        lines = [
            f"[b]Total Games:[/b] {stats.total_games}",
            "",
            f"Boxed: {stats.boxed} ({stats.boxed_rate():.1f}%)",
            f"With Manual: {stats.with_manual} ({stats.manual_rate():.1f}%)",
            "",
            "[b]By Platform[/b]",
        ]

        name_width = max(len(p) for p in stats.by_platform)
        for platform, count in sorted(stats.by_platform.items(), key=lambda item: (-item[1], item[0])):
            lines.append(_platform_row(platform, count, stats.platform_share(platform), name_width))
        return "\n".join(lines)


# === MAIN APPLICATION ===

class GameShelfApp(App):
    """Main Game Shelf application."""

    CSS = """
    .section-title {
        background: $primary;
        color: $text;
        padding: 0 1;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("a", "add_game", "Add Game"),
        Binding("h", "home", "Home"),
        Binding("c", "collection", "Collection"),
        Binding("s", "stats", "Stats"),
        Binding("x", "export", "Export"),
        Binding("i", "import", "Import"),
        Binding("f1", "show_help", "Help"),
    ]

    TITLE = "Game Shelf"

    HELP_TEXT = """
# Game Shelf

## Keybindings

| Key | Action |
|-----|--------|
| A | Add a game |
| H | Home / search |
| C | Collection by platform |
| S | Statistics |
| X | Export collection to JSON |
| I | Import collection from JSON |
| E | Edit selected game (platform view) |
| D | Delete selected game (platform view) |
| Esc | Back / close dialog |
| F1 | Show this help |
| Ctrl+Q | Quit |

## Files

* Config file: `~/.config/game-shelf/config.json`
* Collection: `<data dir>/storage/games.json`
* Exports: `<data dir>/exports/games_export.json`

Importing replaces the whole collection.
    """

    def __init__(self, manager: CollectionManager, config: Config,
                 image_client: Optional[ImageSearchClient] = None):
        super().__init__()
        self.manager = manager
        self.config = config
        self.image_client = image_client or ImageSearchClient.from_config(config.image_search)

    def on_mount(self) -> None:
        self.theme = "textual-light" if self.config.ui.theme == "light" else "textual-dark"
        self.push_screen(HomeScreen())

    _NAVIGATION_ACTIONS = {"add_game", "home", "collection", "stats", "export", "import"}

    def check_action(self, action: str, parameters) -> Optional[bool]:
        """Navigation keys are inactive while a dialog is open."""
        if action in self._NAVIGATION_ACTIONS and isinstance(self.screen, ModalScreen):
            return False
        return True

    def _pop_to_home(self) -> None:
        while len(self.screen_stack) > 2:
            self.pop_screen()

    def action_home(self) -> None:
        self._pop_to_home()

    def action_collection(self) -> None:
        if isinstance(self.screen, CollectionScreen):
            return
        self._pop_to_home()
        self.push_screen(CollectionScreen())

    def action_stats(self) -> None:
        if isinstance(self.screen, StatsScreen):
            return
        self._pop_to_home()
        self.push_screen(StatsScreen())

    def action_add_game(self) -> None:
        def handle_result(game: Optional[GameRecord]) -> None:
            if game:
                self.notify(f"Added \"{escape(game.title)}\" ({escape(game.platform)})")

        self.push_screen(GameFormModal(), handle_result)

    def action_export(self) -> None:
        """Export the collection to the configured export file."""
        try:
            path = export_collection(self.manager.games, self.config.get_export_file())
        except CollectionExportError as e:
            logger.error("Export failed: %s", e)
            self.notify("There was an error exporting data.", title="Export Error", severity="error")
            return
        self.notify(f"File saved at: {escape(str(path))}", title="Export Successful")

    def action_import(self) -> None:
        """Ask for a file and replace the collection with its contents."""
        def handle_path(path: Optional[Path]) -> None:
            if path is None:
                self.notify("No file was selected.", title="Import Canceled", severity="warning")
                return
            try:
                games = import_collection(path)
            except CollectionImportError as e:
                logger.error("Import failed: %s", e)
                self.notify("Failed to import game data.", title="Import Error", severity="error")
                return

            self.manager.replace(games)
            self.notify(
                f"Game data has been imported ({_plural(len(games), 'game')}).",
                title="Import Successful"
            )
            self._refresh_current_screen()

        self.push_screen(ImportModal(self.config.get_export_file()), handle_path)

    def _refresh_current_screen(self) -> None:
        refresh_view = getattr(self.screen, "refresh_view", None)
        if refresh_view is not None:
            refresh_view()

    def action_show_help(self) -> None:
        self.push_screen(HelpModal())


# === COMMAND LINE ===

def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Game Shelf - video game collection catalog',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Configuration:
  Settings can be configured via:
  1. Command line options (highest priority)
  2. Config file (~/.config/game-shelf/config.json)
  3. Environment variables (GAME_SHELF_CONFIG_DIR, GAME_SHELF_IMAGE_API_KEY)
  4. Defaults (lowest priority)

Examples:
  %(prog)s                              # Run the catalog
  %(prog)s --export ~/games.json        # Export without opening the UI
  %(prog)s --import ~/games.json        # Replace the collection from a file
  %(prog)s --theme light                # Use light theme'''
    )

    parser.add_argument(
        '--config-dir',
        help='Custom configuration directory'
    )
    parser.add_argument(
        '--data-dir',
        help='Directory holding the collection, exports and logs'
    )
    parser.add_argument(
        '--theme', '-t',
        choices=['dark', 'light'],
        help='UI theme'
    )
    parser.add_argument(
        '--no-seed',
        action='store_true',
        help='Start with an empty collection instead of the bundled games'
    )
    parser.add_argument(
        '--export',
        metavar='PATH',
        help='Export the collection to PATH and exit'
    )
    parser.add_argument(
        '--import',
        dest='import_file',
        metavar='PATH',
        help='Replace the collection with the games in PATH and exit'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'Game Shelf v{__version__}'
    )

    return parser.parse_args(argv)


def apply_cli_config(args, config: Config) -> Config:
    """Apply command line arguments to configuration."""
    if args.data_dir:
        config.directories.data_dir = str(Path(args.data_dir).expanduser())
    if args.theme:
        config.ui.theme = args.theme
    if args.no_seed:
        config.storage.seed_on_first_run = False

    return config


def _run_headless(args, manager: CollectionManager) -> int:
    if args.import_file:
        try:
            games = import_collection(Path(args.import_file).expanduser())
        except CollectionImportError as e:
            print(f"Import Error: {e}")
            return 1
        manager.replace(games)
        print(f"Imported {_plural(len(games), 'game')} from {args.import_file}")

    if args.export:
        try:
            path = export_collection(manager.games, Path(args.export).expanduser())
        except CollectionExportError as e:
            print(f"Export Error: {e}")
            return 1
        print(f"Exported {_plural(len(manager), 'game')} to {path}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the main application."""
    args = parse_arguments(argv)

    if args.config_dir:
        config_manager.set_config_dir(args.config_dir)

    config = apply_cli_config(args, config_manager.config)
    config.ensure_directories()

    setup_logging(
        logging.DEBUG if args.debug else logging.INFO,
        log_file=config.get_logs_dir() / "game_shelf.log"
    )

    manager = CollectionManager.from_config(config)
    manager.load()
    if config.storage.seed_on_first_run:
        seed_if_empty(manager)

    if args.export or args.import_file:
        return _run_headless(args, manager)

    try:
        GameShelfApp(manager, config).run()
    except KeyboardInterrupt:
        print("\nExiting...")
    return 0
