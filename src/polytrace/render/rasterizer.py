"""
Rasterisation des polygones convexes et des disques pleins.
"""

from __future__ import annotations

from typing import Sequence

from polytrace.core.image import Image
from polytrace.core.models import BoundingBox, Point


def is_point_in_half_space(a: Point, b: Point, point: Point) -> bool:
    """Vrai si `point` est du côté intérieur (ou sur) l'arête orientée a -> b."""
    return (point.x - a.x) * (b.y - a.y) - (point.y - a.y) * (b.x - a.x) <= 0


def is_point_in_polygon(point: Point, vertices: Sequence[Point]) -> bool:
    """
    Test d'appartenance à un polygone convexe.

    Les sommets doivent être dans l'ordre horaire à l'écran. Le point doit
    être dans le demi-plan de chaque arête, y compris l'arête de fermeture.
    """
    for i in range(len(vertices)):
        if not is_point_in_half_space(vertices[i - 1], vertices[i], point):
            return False
    return True


def signed_area2(vertices: Sequence[Point]) -> int:
    """Double de l'aire signée (positive pour l'ordre horaire à l'écran)."""
    total = 0
    for i in range(len(vertices)):
        a = vertices[i - 1]
        b = vertices[i]
        total += a.x * b.y - b.x * a.y
    return total


def fill_polygon(image: Image, vertices: Sequence[Point], color: int) -> None:
    """
    Remplit le polygone en testant chaque point de sa boîte englobante.

    Un point hors de l'image lève `BoundsError` immédiatement ; les pixels déjà
    écrits le restent.
    """
    for point in BoundingBox.around(vertices).points():
        if is_point_in_polygon(point, vertices):
            image.set_at(point, color)


def _draw_circle_part(image: Image, center: Point, dx: int, dy: int, color: int) -> None:
    # Les 8 octants deux à deux, reliés par des segments horizontaux.
    image.draw_horizontal_line(Point(center.x - dx, center.y + dy), center.x + dx, color)
    image.draw_horizontal_line(Point(center.x - dx, center.y - dy), center.x + dx, color)
    image.draw_horizontal_line(Point(center.x - dy, center.y + dx), center.x + dy, color)
    image.draw_horizontal_line(Point(center.x - dy, center.y - dx), center.x + dy, color)


def fill_circle(image: Image, center: Point, radius: int, color: int) -> None:
    """Disque plein par l'algorithme du point milieu (Bresenham)."""
    dx = 0
    dy = radius
    decision = 3 - 2 * radius

    while True:
        _draw_circle_part(image, center, dx, dy, color)
        dx += 1
        if decision > 0:
            dy -= 1
            decision += 4 * (dx - dy) + 10
        else:
            decision += 4 * dx + 6
        if dy < dx:
            break


__all__ = [
    "is_point_in_half_space",
    "is_point_in_polygon",
    "signed_area2",
    "fill_polygon",
    "fill_circle",
]
