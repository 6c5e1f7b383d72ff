"""
Modèle de formes : polygones convexes (rectangles, triangles) et cercles.

Les formes sont immuables. Recolorer une forme crée une nouvelle instance
(`with_color`), ce que l'extraction utilise pour effacer une forme déjà
reconnue.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Sequence, Tuple

from polytrace.core.errors import InvalidGeometry
from polytrace.core.image import BACKGROUND, MAX_INTENSITY, Image
from polytrace.core.models import BoundingBox, Point
from polytrace.render.rasterizer import fill_circle, fill_polygon, is_point_in_polygon, signed_area2

UNDRAWABLE_RADIUS = -1


def _check_color(color: int) -> int:
    if not 0 <= int(color) <= MAX_INTENSITY:
        raise InvalidGeometry(f"Color {color} is outside [0, {MAX_INTENSITY}]")
    return int(color)


def _clockwise(vertices: Sequence[Point]) -> Tuple[Point, ...]:
    """Inverse l'ordre (en gardant le premier sommet) si le polygone est anti-horaire."""
    if signed_area2(vertices) < 0:
        return (vertices[0],) + tuple(reversed(vertices[1:]))
    return tuple(vertices)


def _rotations(vertices: Tuple[Point, ...]) -> Iterable[Tuple[Point, ...]]:
    for i in range(len(vertices)):
        yield vertices[i:] + vertices[:i]


class Shape(ABC):
    """Forme 2D d'une couleur unie (niveau de gris sur 1 octet)."""

    __slots__ = ("_color",)

    def __init__(self, color: int):
        self._color = _check_color(color)

    @property
    def color(self) -> int:
        return self._color

    @property
    def kind(self) -> str:
        return type(self).__name__.lower()

    @abstractmethod
    def draw(self, image: Image) -> None:
        """Dessine la forme dans l'image."""

    @abstractmethod
    def with_color(self, color: int) -> "Shape":
        """Copie de la forme avec une autre couleur."""

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        ...

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        ...


class Polygon(Shape):
    """
    Polygone convexe défini par ses sommets dans l'ordre horaire.

    Un ordre anti-horaire est corrigé à la construction. Les polygones
    d'aire nulle (un pixel, une ligne) sont acceptés tels quels.
    """

    __slots__ = ("_vertices",)

    def __init__(self, vertices: Sequence[Point], color: int):
        super().__init__(color)
        vertices = [Point(int(v.x), int(v.y)) for v in vertices]
        if len(vertices) < 3:
            raise InvalidGeometry(f"A polygon needs at least 3 vertices, got {len(vertices)}")
        self._vertices = _clockwise(vertices)

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    def contains(self, point: Point) -> bool:
        return is_point_in_polygon(point, self._vertices)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.around(self._vertices)

    def draw(self, image: Image) -> None:
        fill_polygon(image, self._vertices, self._color)

    def with_color(self, color: int) -> "Polygon":
        return Polygon(self._vertices, color)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "color": self._color,
            "vertices": [v.to_tuple() for v in self._vertices],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        if type(self) is not type(other) or self._color != other._color:
            return False
        # Même cycle horaire, quel que soit le sommet de départ.
        return other._vertices in set(_rotations(self._vertices))

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._color, frozenset(self._vertices)))

    def __repr__(self) -> str:
        points = ", ".join(f"({v.x}, {v.y})" for v in self._vertices)
        return f"{type(self).__name__}([{points}], color={self._color})"


class Triangle(Polygon):
    """Triangle avec une arête horizontale (en haut ou en bas)."""

    __slots__ = ()

    def __init__(self, a: Point, b: Point, c: Point, color: int):
        super().__init__([a, b, c], color)

    def with_color(self, color: int) -> "Triangle":
        return Triangle(*self._vertices, color=color)


class Rectangle(Polygon):
    """Rectangle parallèle aux axes, sommets (haut-gauche, haut-droit, bas-droit, bas-gauche)."""

    __slots__ = ()

    def __init__(self, top_left: Point, bottom_right: Point, color: int):
        if top_left.x > bottom_right.x or top_left.y > bottom_right.y:
            raise InvalidGeometry(
                f"Top-left corner ({top_left.x}, {top_left.y}) is not above-left of "
                f"bottom-right corner ({bottom_right.x}, {bottom_right.y})"
            )
        corners = BoundingBox(top_left.x, top_left.y, bottom_right.x, bottom_right.y).corners()
        super().__init__(corners, color)

    @property
    def top_left(self) -> Point:
        return self._vertices[0]

    @property
    def bottom_right(self) -> Point:
        return self._vertices[2]

    def with_color(self, color: int) -> "Rectangle":
        return Rectangle(self.top_left, self.bottom_right, color)

    def __repr__(self) -> str:
        return (
            f"Rectangle(top_left=({self.top_left.x}, {self.top_left.y}), "
            f"bottom_right=({self.bottom_right.x}, {self.bottom_right.y}), color={self._color})"
        )


class Circle(Shape):
    """
    Disque plein.

    `Circle()` donne le cercle sentinelle de rayon -1, qui ne dessine rien.
    """

    __slots__ = ("_center", "_radius")

    def __init__(self, center: Point = Point(0, 0), radius: int = UNDRAWABLE_RADIUS, color: int = BACKGROUND):
        super().__init__(color)
        if radius < UNDRAWABLE_RADIUS:
            raise InvalidGeometry(f"Circle radius must be >= 0 (or {UNDRAWABLE_RADIUS}), got {radius}")
        self._center = Point(int(center.x), int(center.y))
        self._radius = int(radius)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def is_drawable(self) -> bool:
        return self._radius != UNDRAWABLE_RADIUS

    def bounding_box(self) -> BoundingBox:
        r = max(self._radius, 0)
        return BoundingBox(self._center.x - r, self._center.y - r, self._center.x + r, self._center.y + r)

    def draw(self, image: Image) -> None:
        if not self.is_drawable:
            return
        fill_circle(image, self._center, self._radius, self._color)

    def with_color(self, color: int) -> "Circle":
        return Circle(self._center, self._radius, color)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "color": self._color,
            "center": self._center.to_tuple(),
            "radius": self._radius,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return (self._center, self._radius, self._color) == (other._center, other._radius, other._color)

    def __hash__(self) -> int:
        return hash(("Circle", self._center, self._radius, self._color))

    def __repr__(self) -> str:
        return f"Circle(center=({self._center.x}, {self._center.y}), radius={self._radius}, color={self._color})"


def draw_shapes(image: Image, shapes: Iterable[Shape]) -> None:
    """Dessine les formes dans l'ordre donné."""
    for shape in shapes:
        shape.draw(image)


__all__ = [
    "UNDRAWABLE_RADIUS",
    "Shape",
    "Polygon",
    "Triangle",
    "Rectangle",
    "Circle",
    "draw_shapes",
]
