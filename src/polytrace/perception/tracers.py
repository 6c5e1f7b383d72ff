"""
Traceurs de contour : retrouvent les sommets exacts d'un rectangle ou d'un
triangle à partir de son pixel haut-gauche.

Hypothèses : formes pleines, de couleur unie, sans chevauchement, fond à 0.
Une image bruitée donne une géométrie non spécifiée, pas une erreur.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from polytrace.core.image import BACKGROUND, Image
from polytrace.core.models import Direction, Point
from polytrace.core.shapes import Rectangle, Triangle


@dataclass(frozen=True)
class RectangleMatch:
    """Rectangle reconnu et, éventuellement, le triangle qu'il contient."""

    rectangle: Rectangle
    triangle: Optional[Triangle] = None

    @property
    def has_triangle(self) -> bool:
        return self.triangle is not None


class RectangleTracer:
    """Traceur de rectangles parallèles aux axes."""

    def __init__(self, background_color: int = BACKGROUND):
        self.background_color = background_color

    def _is_foreground(self, image: Image, x: int, y: int) -> bool:
        return image.is_valid(x, y) and image.get(x, y) != self.background_color

    def find_bottom_right(self, image: Image, top_left: Point) -> Point:
        """
        Coin bas-droit du rectangle dont `top_left` est le pixel haut-gauche.

        Toute couleur hors fond compte : un triangle intérieur n'arrête pas
        la diagonale, seul le bord du rectangle l'arrête.
        """
        x = top_left.x + 1
        y = top_left.y + 1

        while self._is_foreground(image, x, y):
            x += 1
            y += 1

        if self._is_foreground(image, x - 1, y):
            # Encore du rectangle sous la diagonale : on descend.
            x -= 1
            while self._is_foreground(image, x, y + 1):
                y += 1
        elif self._is_foreground(image, x, y - 1):
            # Encore du rectangle à droite : on avance.
            y -= 1
            while self._is_foreground(image, x + 1, y):
                x += 1
        else:
            x -= 1
            y -= 1

        return Point(x, y)

    def recognize(self, image: Image, top_left: Point) -> Rectangle:
        color = image.get_at(top_left)
        bottom_right = self.find_bottom_right(image, top_left)
        return Rectangle(top_left, bottom_right, color)

    def recognize_with_triangle(self, image: Image, top_left: Point) -> RectangleMatch:
        """
        Reconnaît le rectangle puis cherche, ligne par ligne dans sa boîte,
        le premier pixel d'une autre couleur. Ce pixel est le haut-gauche du
        triangle intérieur (au plus un par rectangle).
        """
        rectangle = self.recognize(image, top_left)

        for point in rectangle.bounding_box().points():
            if image.get_at(point) != rectangle.color:
                return RectangleMatch(rectangle, TriangleTracer().recognize(image, point))

        return RectangleMatch(rectangle)


class TriangleTracer:
    """
    Traceur de triangles ayant une arête horizontale.

    La descente le long du bord gauche avance d'au plus une colonne par
    ligne. Un triangle à base haute dont le bord gauche recule plus vite
    s'arrête sur sa première ligne et revient comme un triangle plat.
    """

    @staticmethod
    def _same_color(image: Image, point: Point, color: int) -> bool:
        return image.is_valid(point.x, point.y) and image.get_at(point) == color

    @classmethod
    def find_bottom_left(cls, image: Image, top_left: Point, color: int) -> Point:
        """Descend le long du bord gauche jusqu'à la dernière ligne, puis va au plus à gauche."""
        current = top_left
        while True:
            for direction in Direction.downward():
                candidate = current.shifted(direction)
                if cls._same_color(image, candidate, color):
                    current = candidate
                    break
            else:
                break

        # Sommet large de plusieurs pixels (arrondi) : on rejoint son bord gauche.
        while cls._same_color(image, current.shifted(Direction.LEFT), color):
            current = current.shifted(Direction.LEFT)

        return current

    @classmethod
    def horizontal_length(cls, image: Image, left: Point, color: int) -> int:
        """Nombre de pixels de même couleur à droite de `left` sur sa ligne."""
        current = left
        while cls._same_color(image, current.shifted(Direction.RIGHT), color):
            current = current.shifted(Direction.RIGHT)
        return current.x - left.x

    @classmethod
    def recognize(cls, image: Image, top_left: Point) -> Triangle:
        color = image.get_at(top_left)
        bottom_left = cls.find_bottom_left(image, top_left, color)
        top_length = cls.horizontal_length(image, top_left, color)
        bottom_length = cls.horizontal_length(image, bottom_left, color)

        if top_length > bottom_length:
            # Base en haut, sommet au milieu de la ligne du bas.
            apex = Point(bottom_left.x + bottom_length // 2, bottom_left.y)
            return Triangle(top_left, Point(top_left.x + top_length, top_left.y), apex, color)

        # Base en bas, sommet au milieu de la ligne du haut.
        apex = Point(top_left.x + top_length // 2, top_left.y)
        return Triangle(apex, Point(bottom_left.x + bottom_length, bottom_left.y), bottom_left, color)


__all__ = ["RectangleMatch", "RectangleTracer", "TriangleTracer"]
