"""Items that can be carried in the hotbar and inventory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """Something the player can hold."""

    stackable: bool = False
    item_id: int = 0
    name: str = ""
    frames_held: int = 0
    uses: int = 0

    def update(self) -> int:
        """Advance the item by one frame; return how many frames it was held."""
        self.frames_held += 1
        return self.frames_held

    def interact(self) -> int:
        """Use the item; return how many times it has been used."""
        self.uses += 1
        return self.uses


@dataclass
class Shovel(Item):
    """A digging tool; it does not stack."""

    stackable: bool = False
    item_id: int = 1
    name: str = "Shovel"