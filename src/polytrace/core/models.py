"""
Structures de base pour le rendu et la reconnaissance de formes.

Contient les types partagés (points, directions, bounding boxes) utilisés par
la grille de pixels, les formes, les rasteriseurs et les traceurs de contour.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Direction(Enum):
    """Pas unitaires en coordonnées écran (y croît vers le bas)."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP_RIGHT = (1, -1)
    UP_LEFT = (-1, -1)
    DOWN_RIGHT = (1, 1)
    DOWN_LEFT = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def downward(cls) -> list["Direction"]:
        """Ordre de préférence du traceur de triangle : bas-gauche, bas, bas-droite."""
        return [cls.DOWN_LEFT, cls.DOWN, cls.DOWN_RIGHT]


@dataclass(frozen=True)
class Point:
    """Point 2D en coordonnées de grille."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def shifted(self, direction: Direction, steps: int = 1) -> "Point":
        """Retourne le point déplacé de `steps` pas dans `direction`."""
        return Point(self.x + direction.dx * steps, self.y + direction.dy * steps)

    def to_tuple(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class BoundingBox:
    """Boîte englobante axis-alignée (bornes incluses)."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def around(cls, points: Iterable[Point]) -> "BoundingBox":
        """Plus petite boîte contenant tous les points."""
        points = list(points)
        if not points:
            raise ValueError("Cannot compute the bounding box of no points")

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        """Vérifie si un point est dans la boîte."""
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def corners(self) -> list[Point]:
        """Retourne les quatre coins dans l'ordre horaire à partir du coin haut-gauche."""
        return [
            Point(self.min_x, self.min_y),
            Point(self.max_x, self.min_y),
            Point(self.max_x, self.max_y),
            Point(self.min_x, self.max_y),
        ]

    def points(self) -> Iterator[Point]:
        """Parcourt tous les points de la boîte, ligne par ligne."""
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield Point(x, y)


__all__ = [
    "Direction",
    "Point",
    "BoundingBox",
]
