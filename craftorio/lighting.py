"""Ambient light level over the day/night cycle."""

from __future__ import annotations

from craftorio.enums import LunarPhase, Season
from craftorio.gametime import GameCalendar, GameTime

_MOON_FACTORS: dict[LunarPhase, float] = {
    LunarPhase.NEW_MOON: 0.00,
    LunarPhase.WAXING_CRESCENT: 0.05,
    LunarPhase.FIRST_QUARTER: 0.10,
    LunarPhase.WAXING_GIBBOUS: 0.30,
    LunarPhase.FULL_MOON: 1.00,
    LunarPhase.WANING_GIBBOUS: 0.30,
    LunarPhase.LAST_QUARTER: 0.10,
    LunarPhase.WANING_CRESCENT: 0.05,
}

MOONLIGHT_SHARE = 0.2
MAX_OVERLAY_ALPHA = 250


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def light_intensity_for(calendar: GameCalendar) -> float:
    """Light level between 0 (dark) and 1 (full daylight) for a calendar reading."""
    hour = calendar.date.hour + calendar.date.minute / 60.0
    season = calendar.environment.season

    day = 6.0
    night = 18.0
    if season is Season.SUMMER:
        day -= 1.0
        night += 1.0
        transition = 1.5
    elif season is Season.WINTER:
        day += 1.5
        night -= 1.5
        transition = 0.5
    else:
        transition = 0.5

    dawn = day - transition
    dusk = night + transition

    if night <= hour <= dusk:
        intensity = 1.0 - (hour - night) / transition
    elif dawn <= hour < day:
        intensity = (hour - dawn) / transition
    elif day <= hour < night:
        intensity = 1.0
    else:
        intensity = 0.0

    if hour < day or hour >= night:
        intensity += _MOON_FACTORS[calendar.environment.phase] * MOONLIGHT_SHARE

    return _clamp(intensity, 0.0, 1.0)


class DayNightCycle:
    """Tracks the light level of a game clock."""

    def __init__(self, game_time: GameTime) -> None:
        self.game_time = game_time
        self.light_intensity = light_intensity_for(game_time.calendar())

    def update(self) -> None:
        """Recompute the light level from the clock."""
        self.light_intensity = light_intensity_for(self.game_time.calendar())

    def overlay_alpha(self) -> int:
        """Alpha of the black overlay that darkens the screen."""
        return int((1.0 - self.light_intensity) * MAX_OVERLAY_ALPHA)