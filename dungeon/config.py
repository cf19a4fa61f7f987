"""Game configuration with defaults taken from the classic tutorial layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game run."""

    # World
    seed: int = 42

    # Screen
    screen_width: int = 80
    screen_height: int = 50

    # Map
    map_width: int = 80
    map_height: int = 43

    # Rooms
    room_min_size: int = 10
    room_max_size: int = 10
    max_rooms: int = 10

    # Monsters
    max_room_monsters: int = 3
    troll_chance: float = 0.2

    # Field of view
    torch_radius: int = 10
    fov_light_walls: bool = True

    # AI
    engage_distance: float = 2.0

    # GUI panel
    bar_width: int = 20
    panel_height: int = 7

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        problems: list[str] = []
        if not 2 <= self.room_min_size <= self.room_max_size:
            problems.append(
                f"room sizes must satisfy 2 <= min <= max (got {self.room_min_size}..{self.room_max_size})"
            )
        if self.room_max_size > min(self.map_width, self.map_height) - 1:
            problems.append(
                f"rooms up to {self.room_max_size} tiles do not fit a "
                f"{self.map_width}x{self.map_height} map"
            )
        if self.max_rooms < 0 or self.max_room_monsters < 0 or self.torch_radius < 0:
            problems.append("max_rooms, max_room_monsters and torch_radius must not be negative")
        if not 0.0 <= self.troll_chance <= 1.0:
            problems.append(f"troll_chance must be within [0, 1] (got {self.troll_chance})")
        if self.panel_height < 2 or self.bar_width + 2 > self.screen_width:
            problems.append("panel needs at least 2 rows and a bar narrower than the screen")
        if problems:
            raise ValueError("Invalid GameConfig: " + "; ".join(problems))

    @property
    def message_capacity(self) -> int:
        """Number of log lines that fit in the panel (one row is the HP bar)."""
        return self.panel_height - 1
