"""
Game settings.

Settings are built from a nested dictionary so the same shape can later come
from a file or command line arguments::

    {
        "window": {"width": 800, "height": 600, "title": "...", "fps": 60},
        "player": {"width": 30, "height": 10, "speed": 5, "color": "green"},
        "bullet": {"width": 3, "height": 10, "dy": -7, "color": "white"},
        "enemy": {"width": 20, "height": 20, "dx": 2, "color": "red"},
        "formation": {"columns": 5, "rows": 3, "spacing": 20, ...},
        "logging": {"level": "INFO"},
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from block_invaders import constants


@dataclass(frozen=True)
class WindowSettings:
    width: int = constants.WINDOW_SIZE[0]
    height: int = constants.WINDOW_SIZE[1]
    title: str = constants.WINDOW_TITLE
    fps: int = constants.FPS
    background_color: str = constants.BACKGROUND_COLOR

    def __post_init__(self):
        _require_positive("window.width", self.width)
        _require_positive("window.height", self.height)
        _require_positive("window.fps", self.fps)


@dataclass(frozen=True)
class PlayerSettings:
    width: int = constants.PLAYER_SIZE[0]
    height: int = constants.PLAYER_SIZE[1]
    speed: int = constants.PLAYER_SPEED
    color: str = constants.PLAYER_COLOR
    bottom_offset: int = constants.PLAYER_BOTTOM_OFFSET

    def __post_init__(self):
        _require_positive("player.width", self.width)
        _require_positive("player.height", self.height)
        _require_positive("player.speed", self.speed)
        _require_positive("player.bottom_offset", self.bottom_offset)
        # the whole ship must sit above the bottom edge
        if self.bottom_offset < self.height:
            raise ValueError(
                f"player.bottom_offset must be at least player.height "
                f"({self.height}), got {self.bottom_offset}"
            )


@dataclass(frozen=True)
class BulletSettings:
    width: int = constants.BULLET_SIZE[0]
    height: int = constants.BULLET_SIZE[1]
    dy: int = constants.BULLET_DY
    color: str = constants.BULLET_COLOR

    def __post_init__(self):
        _require_positive("bullet.width", self.width)
        _require_positive("bullet.height", self.height)
        # bullets only travel upward, toward y < 0 where they are culled
        if self.dy >= 0:
            raise ValueError(f"bullet.dy must be negative, got {self.dy}")


@dataclass(frozen=True)
class EnemySettings:
    width: int = constants.ENEMY_SIZE[0]
    height: int = constants.ENEMY_SIZE[1]
    dx: int = constants.ENEMY_DX
    color: str = constants.ENEMY_COLOR

    def __post_init__(self):
        _require_positive("enemy.width", self.width)
        _require_positive("enemy.height", self.height)
        # a still formation never touches an edge and never bounces
        if self.dx == 0:
            raise ValueError("enemy.dx must not be zero")


@dataclass(frozen=True)
class FormationSettings:
    columns: int = constants.FORMATION_COLUMNS
    rows: int = constants.FORMATION_ROWS
    spacing: int = constants.FORMATION_SPACING
    offset_x: int = constants.FORMATION_OFFSET[0]
    offset_y: int = constants.FORMATION_OFFSET[1]
    descend_step: int = constants.FORMATION_DESCEND_STEP

    def __post_init__(self):
        _require_positive("formation.columns", self.columns)
        _require_positive("formation.rows", self.rows)
        _require_positive("formation.descend_step", self.descend_step)


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"


_SECTIONS = {
    "window": WindowSettings,
    "player": PlayerSettings,
    "bullet": BulletSettings,
    "enemy": EnemySettings,
    "formation": FormationSettings,
    "logging": LoggingSettings,
}


@dataclass(frozen=True)
class GameSettings:
    """
    Every tunable of a game session and of the window that hosts it.
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    player: PlayerSettings = field(default_factory=PlayerSettings)
    bullet: BulletSettings = field(default_factory=BulletSettings)
    enemy: EnemySettings = field(default_factory=EnemySettings)
    formation: FormationSettings = field(default_factory=FormationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def __post_init__(self):
        if self.player.bottom_offset > self.window.height:
            raise ValueError(
                f"player.bottom_offset ({self.player.bottom_offset}) must not "
                f"exceed window.height ({self.window.height})"
            )

    @property
    def surface_size(self) -> tuple[int, int]:
        return self.window.width, self.window.height

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None = None) -> GameSettings:
        """
        Build settings from a nested dictionary, missing values keep their
        defaults.

        :param data: Nested settings dictionary
        :type data: dict[str, Any] | None

        :return: Validated settings
        :rtype: GameSettings

        :raises ValueError: On unknown sections or keys, or invalid values
        """
        data = data or {}

        unknown = set(data) - set(_SECTIONS)
        if unknown:
            raise ValueError(f"Unknown settings sections: {sorted(unknown)}")

        sections = {}
        for name, section_cls in _SECTIONS.items():
            values = data.get(name) or {}
            allowed = {f.name for f in fields(section_cls)}
            bad_keys = set(values) - allowed
            if bad_keys:
                raise ValueError(
                    f"Unknown keys in settings section '{name}': {sorted(bad_keys)}"
                )
            sections[name] = section_cls(**values)

        return cls(**sections)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """
        :return: The nested dictionary ``from_dict`` accepts
        :rtype: dict[str, dict[str, Any]]
        """
        return {
            name: {
                f.name: getattr(getattr(self, name), f.name)
                for f in fields(section_cls)
            }
            for name, section_cls in _SECTIONS.items()
        }


def _require_positive(name: str, value: float):
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
