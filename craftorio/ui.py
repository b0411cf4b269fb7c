"""Heads-up display state: health bar, hotbar selection and inventory panel."""

from __future__ import annotations

from craftorio.controls import Controls
from craftorio.entities import Player
from craftorio.items import Item

HOTBAR_SLOTS = 8
HOTBAR_HAND_SLOTS = 6
HUD_STEP = 10.0


class Hud:
    """Health display bound to a player; debug keys damage or heal it."""

    def __init__(self, player: Player) -> None:
        self.player = player

    def update(self, damage_pressed: bool = False, heal_pressed: bool = False) -> None:
        """Apply the damage and heal debug keys for this frame."""
        if damage_pressed:
            self.player.take_damage(HUD_STEP)
        if heal_pressed:
            self.player.heal(HUD_STEP)

    def health_text(self) -> str:
        """Label drawn on the health bar."""
        return f"HP {int(self.player.health)}/{int(self.player.max_health)}"

    def health_fraction(self) -> float:
        """Share of the health bar that is filled."""
        return self.player.health / self.player.max_health


class Hotbar:
    """Item slots with one selected slot for each hand."""

    def __init__(self) -> None:
        self.slots: list[Item | None] = [None] * HOTBAR_SLOTS
        self.selected_slot = 0

    def update(self, controls: Controls) -> None:
        """Select the slot whose number key is held."""
        key = controls.hotbar_key()
        if key is not None:
            self.selected_slot = key

    def highlighted_slots(self) -> dict[int, str]:
        """Drawn slot indices that are highlighted, with their labels.

        The left-hand row holds slots 0-5 and the right-hand row 6-11; the
        selected position is highlighted in both.
        """
        left = self.selected_slot
        right = self.selected_slot + HOTBAR_HAND_SLOTS
        return {left: f"L{left + 1}", right: f"R{right - HOTBAR_HAND_SLOTS + 1}"}


class Inventory:
    """Inventory panel that opens and closes on its toggle key."""

    def __init__(self) -> None:
        self.is_open = False

    def update(self, controls: Controls) -> None:
        """Flip the panel when the toggle key was pressed."""
        if controls.inventory_toggle:
            self.is_open = not self.is_open