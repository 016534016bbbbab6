"""Core components shared by the client and the server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass(slots=True)
class Transform:
    """Position, rotation and scale in three dimensions."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    pos_z: float = 0.0
    rot_x: float = 0.0
    rot_y: float = 0.0
    rot_z: float = 0.0
    scale_x: float = 0.0
    scale_y: float = 0.0
    scale_z: float = 0.0

    def __str__(self) -> str:
        return (
            f"pos: {{ {_num(self.pos_x)}, {_num(self.pos_y)}, {_num(self.pos_z)} }}\n"
            f"rot: {{ {_num(self.rot_x)}, {_num(self.rot_y)}, {_num(self.rot_z)} }}\n"
            f"scale: {{ {_num(self.scale_x)}, {_num(self.scale_y)}, {_num(self.scale_z)} }}\n"
        )


@dataclass(slots=True)
class Velocity:
    """Speed along each axis, in units per second."""

    vel_x: float = 0.0
    vel_y: float = 0.0
    vel_z: float = 0.0

    def __str__(self) -> str:
        return f"vel: {{ {_num(self.vel_x)}, {_num(self.vel_y)}, {_num(self.vel_z)} }}\n"


@dataclass(slots=True)
class Drawable:
    is_drawable: bool = False


@dataclass(slots=True)
class Controllable:
    is_controllable: bool = False


@dataclass(slots=True)
class CollisionBox:
    """Axis-aligned collision extent."""

    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    def __str__(self) -> str:
        return f"colision box: {{ {_num(self.width)}, {_num(self.height)}, {_num(self.depth)} }}\n"


@dataclass(slots=True)
class Unmovable:
    is_unmovable: bool = False


@dataclass(slots=True)
class ToDelete:
    """Marks an entity for removal by the garbage collector system."""

    to_delete: bool = True


class EnemyKind(IntEnum):
    SIMPLE = 0
    OTHER = 1
    MECHA = 2
    MISSILE = 3
    BOSS = 4


@dataclass(slots=True)
class EnemyType:
    kind: EnemyKind = EnemyKind.SIMPLE