"""Snapshot of the player's input for a single frame."""

from __future__ import annotations

from dataclasses import dataclass, field

HOTBAR_KEYS = 6


@dataclass(frozen=True)
class Controls:
    """Which actions are held or pressed in the current frame.

    ``digits_down`` holds the number keys (1-9) currently held.
    """

    move_forward: bool = False
    move_backward: bool = False
    move_left: bool = False
    move_right: bool = False
    jump: bool = False
    run: bool = False
    interact: bool = False
    use_left_hand: bool = False
    use_right_hand: bool = False
    inventory_toggle: bool = False
    pause_menu: bool = False
    map_toggle: bool = False
    camera_toggle: bool = False
    digits_down: frozenset[int] = field(default_factory=frozenset)

    def hotbar_key(self) -> int | None:
        """Index of the first held hotbar key (keys 1 to 6), or None."""
        return next(
            (i for i in range(HOTBAR_KEYS) if i + 1 in self.digits_down),
            None,
        )