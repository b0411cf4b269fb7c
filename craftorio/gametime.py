"""In-game clock and calendar.

One real second is one in-game minute. A day has 24 hours, a lunar
month 12 days, a season 3 lunar months and a solar year 4 seasons.
"""

from __future__ import annotations

from dataclasses import dataclass

from craftorio.enums import LunarPhase, Season

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
TIME_PER_DAY = 86400
TIME_PER_LUNAR = TIME_PER_DAY * 12
TIME_PER_SEASON = TIME_PER_LUNAR * 3
TIME_PER_SOLAR = TIME_PER_SEASON * 4
START_HOUR_OFFSET = 6 * SECONDS_PER_HOUR
GAME_SECONDS_PER_REAL_SECOND = 60


@dataclass(frozen=True)
class GameDate:
    """Date and time of day; solar, lunar and day count from 1."""

    solar: int
    lunar: int
    day: int
    hour: int
    minute: int


@dataclass(frozen=True)
class GameSeasonalState:
    """Season and moon phase."""

    season: Season
    phase: LunarPhase


@dataclass(frozen=True)
class GameCalendar:
    """Full calendar reading at one instant."""

    date: GameDate
    environment: GameSeasonalState


@dataclass
class GameTime:
    """Clock driven by real elapsed seconds."""

    real_time: float = 0.0

    def update(self, delta: float) -> None:
        """Advance by ``delta`` real seconds."""
        self.real_time += delta

    @property
    def game_time(self) -> int:
        """Elapsed in-game seconds."""
        return int(self.real_time * GAME_SECONDS_PER_REAL_SECOND)

    @game_time.setter
    def game_time(self, value: int) -> None:
        self.real_time = value / GAME_SECONDS_PER_REAL_SECOND

    def calendar(self) -> GameCalendar:
        """Calendar reading for the current time; the clock starts at 06:00."""
        elapsed = self.game_time
        time = elapsed + START_HOUR_OFFSET

        date = GameDate(
            solar=time // TIME_PER_SOLAR + 1,
            lunar=(time // TIME_PER_LUNAR) % 12 + 1,
            day=(time // TIME_PER_DAY) % 12 + 1,
            hour=(time // SECONDS_PER_HOUR) % 24,
            minute=(time // SECONDS_PER_MINUTE) % 60,
        )
        environment = GameSeasonalState(
            season=Season((time // TIME_PER_SEASON) % 4),
            phase=LunarPhase((elapsed // TIME_PER_DAY) % 8),
        )
        return GameCalendar(date, environment)

    def format_date(self) -> str:
        """Date as ``Solar S, Lunar L, Day DD - HH:MM``."""
        d = self.calendar().date
        return (
            f"Solar {d.solar}, Lunar {d.lunar}, "
            f"Day {d.day:02d} - {d.hour:02d}:{d.minute:02d}"
        )

    def format_season(self) -> str:
        """Name of the current season."""
        return str(self.calendar().environment.season)

    def format_phase(self) -> str:
        """Name of the current moon phase."""
        return str(self.calendar().environment.phase)