"""
polytrace : rendu de formes à couleur unie sur une grille en niveaux de gris,
et reconnaissance inverse des rectangles et triangles par tracé de contour.
"""

from polytrace.core.errors import BoundsError, InvalidGeometry, PolytraceError
from polytrace.core.image import BACKGROUND, Image
from polytrace.core.models import BoundingBox, Direction, Point
from polytrace.core.shapes import Circle, Polygon, Rectangle, Shape, Triangle, draw_shapes
from polytrace.perception.engine import (
    ShapeExtractionEngine,
    extract_rectangles,
    extract_rectangles_and_triangles,
)
from polytrace.perception.tracers import RectangleMatch, RectangleTracer, TriangleTracer

__version__ = "0.1.0"

__all__ = [
    "BACKGROUND",
    "BoundingBox",
    "BoundsError",
    "Circle",
    "Direction",
    "Image",
    "InvalidGeometry",
    "Point",
    "Polygon",
    "PolytraceError",
    "Rectangle",
    "RectangleMatch",
    "RectangleTracer",
    "Shape",
    "ShapeExtractionEngine",
    "Triangle",
    "TriangleTracer",
    "draw_shapes",
    "extract_rectangles",
    "extract_rectangles_and_triangles",
]
