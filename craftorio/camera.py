"""First- and third-person camera that orbits or follows the player."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from craftorio.geometry import Vec3

EYE_HEIGHT = 1.8
SENSITIVITY = 5.0
MOUSE_SCALE = 0.003
PITCH_LIMIT = math.pi / 2.2
DEFAULT_FOVY = 70.0
DEFAULT_DISTANCE = 10.0
UP = Vec3(0.0, 1.0, 0.0)

_COMPASS = (
    (22.5, 67.5, "Noroeste"),
    (67.5, 112.5, "Oeste"),
    (112.5, 157.5, "Sudoeste"),
    (157.5, 202.5, "Sul"),
    (202.5, 247.5, "Sudeste"),
    (247.5, 292.5, "Leste"),
    (292.5, 337.5, "Nordeste"),
)


def compass_direction(yaw: float) -> str:
    """Compass heading for a yaw angle in radians, as shown on screen."""
    deg = math.degrees(yaw)
    if deg >= 337.5 or deg < 22.5:
        return "Norte"
    for low, high, name in _COMPASS:
        if low <= deg < high:
            return name
    return "Desconhecido"


@dataclass
class Camera3D:
    """Perspective camera description."""

    position: Vec3 = field(default_factory=Vec3)
    target: Vec3 = field(default_factory=Vec3)
    up: Vec3 = UP
    fovy: float = DEFAULT_FOVY
    perspective: bool = True


class CameraManager:
    """Turns mouse movement into a camera looking from or at the player."""

    def __init__(self) -> None:
        self.camera = Camera3D()
        self.is_first_person = True
        self.yaw = 0.0
        self.pitch = 0.0
        self.distance_to_player = DEFAULT_DISTANCE

    def _direction(self) -> Vec3:
        return Vec3(
            math.cos(self.pitch) * math.sin(self.yaw),
            math.sin(self.pitch),
            math.cos(self.pitch) * math.cos(self.yaw),
        )

    def update(
        self,
        player_position: Vec3,
        mouse_delta: tuple[float, float] = (0.0, 0.0),
        toggle_pressed: bool = False,
    ) -> None:
        """Apply a frame's mouse movement and view toggle, then place the camera."""
        if toggle_pressed:
            self.is_first_person = not self.is_first_person

        dx, dy = mouse_delta
        self.yaw -= dx * MOUSE_SCALE * SENSITIVITY
        self.pitch -= dy * MOUSE_SCALE * SENSITIVITY

        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
        self.yaw = math.fmod(self.yaw, 2.0 * math.pi)
        if self.yaw < 0.0:
            self.yaw += 2.0 * math.pi

        if self.is_first_person:
            self._update_first_person(player_position)
        else:
            self._update_third_person(player_position)

    def _update_first_person(self, player_position: Vec3) -> None:
        eye = player_position + Vec3(0.0, EYE_HEIGHT, 0.0)
        self.camera.position = eye
        self.camera.target = eye + self._direction()
        self.camera.up = UP

    def _update_third_person(self, player_position: Vec3) -> None:
        self.camera.position = player_position + self._direction() * self.distance_to_player
        self.camera.target = player_position
        self.camera.up = UP

    @property
    def heading(self) -> str:
        """Compass heading of the current yaw."""
        return compass_direction(self.yaw)

    def forward(self) -> Vec3:
        """Unit vector the camera looks along."""
        return self._direction().normalized()