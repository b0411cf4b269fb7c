"""Title menu and world selection screen."""

from __future__ import annotations

import logging
import time as _clock
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from craftorio.saves import SaveManager, WorldExistsError, WorldNotFoundError

log = logging.getLogger(__name__)

MAX_WORLD_NAME = 20


@dataclass
class MenuButton:
    """A clickable labelled rectangle given as ``(x, y, width, height)``."""

    bounds: tuple[float, float, float, float]
    text: str
    on_click: Callable[[], None] | None = None

    def click(self) -> None:
        """Run the button's action, if it has one."""
        if self.on_click is not None:
            self.on_click()


class MainMenu:
    """Title screen with buttons to play or quit."""

    def __init__(self) -> None:
        self.start_game = False
        self.should_close = False
        self.buttons: list[MenuButton] = []

    def init(self) -> None:
        """Reset the start request and lay out the buttons."""
        self.start_game = False
        self.buttons = [
            MenuButton((100, 160, 220, 40), "Singleplayer", self._request_start),
            MenuButton((100, 220, 220, 40), "Multiplayer", lambda: None),
            MenuButton((100, 280, 220, 40), "Quit Game", self._request_close),
        ]

    def _request_start(self) -> None:
        self.start_game = True

    def _request_close(self) -> None:
        self.should_close = True

    def update(self, enter_pressed: bool = False, clicked_button: str | None = None) -> None:
        """Handle the Enter key and a click on the button labelled ``clicked_button``."""
        if enter_pressed:
            self.start_game = True
        for button in self.buttons:
            if button.text == clicked_button:
                button.click()


@dataclass(frozen=True)
class WorldEntry:
    """A world directory found on disk."""

    name: str
    path: Path


class WorldSelect:
    """Lists saved worlds and lets the player pick, create or delete one."""

    def __init__(self, saves: SaveManager | None = None) -> None:
        self.saves = saves if saves is not None else SaveManager()
        self.worlds: list[WorldEntry] = []
        self.selected_index = 0
        self.start_game = False
        self.creating_new_world = False
        self.new_world_name = ""

    def init(self) -> None:
        """Load the worlds and leave any creation or start request."""
        self._load_worlds()
        self.start_game = False
        self.creating_new_world = False
        self.new_world_name = ""

    def _scan(self) -> list[WorldEntry]:
        self.saves.root.mkdir(parents=True, exist_ok=True)
        return sorted(
            (WorldEntry(entry.name, entry) for entry in self.saves.root.iterdir() if entry.is_dir()),
            key=lambda w: w.name,
        )

    def _load_worlds(self) -> None:
        self.worlds = self._scan()
        self.selected_index = 0

    def select_next(self) -> None:
        """Move the selection down, wrapping around."""
        if self.creating_new_world or not self.worlds:
            return
        self.selected_index = (self.selected_index + 1) % len(self.worlds)

    def select_previous(self) -> None:
        """Move the selection up, wrapping around."""
        if self.creating_new_world or not self.worlds:
            return
        self.selected_index = (self.selected_index - 1) % len(self.worlds)

    def confirm(self) -> bool:
        """Enter: create the typed world, or start the selected one.

        Returns whether the action took effect.
        """
        if self.creating_new_world:
            if not self._create_new_world(self.new_world_name):
                return False
            self.creating_new_world = False
            self.new_world_name = ""
            self.selected_index = len(self.worlds) - 1
            return True
        if self.worlds:
            self.start_game = True
            return True
        return False

    def _create_new_world(self, name: str) -> bool:
        if not name:
            return False
        try:
            self.saves.create_world(name, int(_clock.time()))
        except WorldExistsError:
            log.info("A world named %s already exists", name)
            return False
        self._load_worlds()
        return True

    def delete_selected(self) -> bool:
        """Delete the selected world from disk and from the list."""
        if self.creating_new_world or not self.worlds:
            return False
        name = self.worlds[self.selected_index].name
        if not name:
            return False
        self.worlds = self._scan()
        try:
            self.saves.delete_world(name)
        except WorldNotFoundError:
            log.info("World %s does not exist", name)
            return False
        self.worlds = [w for w in self.worlds if w.name != name]
        self.selected_index = min(self.selected_index, max(len(self.worlds) - 1, 0))
        return True

    def begin_new_world(self) -> None:
        """Switch to typing the name of a new world."""
        if self.creating_new_world:
            return
        self.creating_new_world = True
        self.new_world_name = ""

    def type_text(self, text: str) -> None:
        """Append printable ASCII characters to the new world's name."""
        if not self.creating_new_world:
            return
        for char in text:
            if 32 <= ord(char) <= 126 and len(self.new_world_name) < MAX_WORLD_NAME:
                self.new_world_name += char

    def backspace(self) -> None:
        """Erase the last typed character, or delete the selected world when not typing."""
        if self.creating_new_world:
            self.new_world_name = self.new_world_name[:-1]
        else:
            self.delete_selected()

    def cancel(self) -> None:
        """Leave world creation without creating anything."""
        if self.creating_new_world:
            self.creating_new_world = False
            self.new_world_name = ""

    def should_start_game(self) -> bool:
        """Whether a world was chosen to play."""
        return self.start_game and bool(self.worlds)

    def selected_world(self) -> str:
        """Name of the selected world, or an empty string when there is none."""
        if not self.worlds:
            return ""
        log.debug("World path: %s", self.worlds[self.selected_index].path)
        return self.worlds[self.selected_index].name