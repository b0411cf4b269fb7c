"""User settings persisted as JSON: audio, controls, language and video."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

SETTINGS_FILE = Path("assets/config/settings.json")


def _default_key_bindings() -> dict[str, str]:
    return {
        "inventory": "I",
        "moveDown": "S",
        "moveLeft": "A",
        "moveRight": "D",
        "moveUp": "W",
    }


@dataclass
class AudioSettings:
    """Volume levels in percent and the mute switch."""

    effects: int = 100
    master: int = 100
    music: int = 100
    mute: bool = False


@dataclass
class ControlsSettings:
    """Key bindings by action name and mouse sensitivity."""

    key_bindings: dict[str, str] = field(default_factory=_default_key_bindings)
    mouse_sensitivity: float = 1.0


@dataclass
class VideoSettings:
    """Display, resolution and rendering options."""

    display: int = 0
    width: int = 1280
    height: int = 720
    fps_limit: int = 144
    fps_unlimited: bool = False
    fullscreen: bool = False
    v_sync: bool = False
    graphics: int = 0
    render_distance: int = 48
    shadows: bool = False
    anti_aliasing: bool = False


@dataclass
class SettingsData:
    """All user settings."""

    audio: AudioSettings = field(default_factory=AudioSettings)
    controls: ControlsSettings = field(default_factory=ControlsSettings)
    language: str = "en"
    video: VideoSettings = field(default_factory=VideoSettings)


def load_settings(path: str | Path = SETTINGS_FILE) -> SettingsData:
    """Read settings from ``path``; a missing file yields the defaults.

    Within a section that is present, every missing value takes its default.
    Key bindings found in the file are merged over the default bindings.
    """
    settings = SettingsData()
    try:
        with open(path, encoding="utf-8") as handle:
            raw: dict[str, Any] = json.load(handle)
    except FileNotFoundError:
        return settings

    if "audio" in raw:
        audio = raw["audio"]
        settings.audio = AudioSettings(
            effects=audio.get("effects", 100),
            master=audio.get("master", 100),
            music=audio.get("music", 100),
            mute=audio.get("mute", False),
        )

    if "controls" in raw:
        controls = raw["controls"]
        settings.controls.mouse_sensitivity = float(controls.get("mouseSensitivity", 1.0))
        settings.controls.key_bindings.update(controls.get("keyBindings", {}))

    settings.language = raw.get("language", "en")

    if "video" in raw:
        video = raw["video"]
        settings.video = VideoSettings(
            display=video.get("display", 0),
            fps_limit=video.get("fpsLimit", 144),
            width=video.get("width", 1280),
            height=video.get("height", 720),
            fullscreen=video.get("fullscreen", False),
            v_sync=video.get("vSync", False),
            graphics=video.get("graphics", 0),
            render_distance=video.get("renderDistance", 48),
            shadows=video.get("shadows", False),
            anti_aliasing=video.get("antiAliasing", False),
        )

    return settings


def save_settings(settings: SettingsData, path: str | Path = SETTINGS_FILE) -> None:
    """Write ``settings`` to ``path`` as indented JSON."""
    audio, controls, video = settings.audio, settings.controls, settings.video
    document = {
        "audio": {
            "effects": audio.effects,
            "master": audio.master,
            "music": audio.music,
            "mute": audio.mute,
        },
        "controls": {
            "keyBindings": dict(controls.key_bindings),
            "mouseSensitivity": controls.mouse_sensitivity,
        },
        "language": settings.language,
        "video": {
            "antiAliasing": video.anti_aliasing,
            "display": video.display,
            "fpsLimit": video.fps_limit,
            "fullscreen": video.fullscreen,
            "graphics": video.graphics,
            "height": video.height,
            "renderDistance": video.render_distance,
            "shadows": video.shadows,
            "vSync": video.v_sync,
            "width": video.width,
        },
    }
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(json.dumps(document, indent=4))