"""
Moteur d'extraction : énumère chaque forme d'une image exactement une fois.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from polytrace.core.image import BACKGROUND, Image
from polytrace.core.models import Point
from polytrace.core.shapes import Rectangle, Shape, Triangle
from polytrace.logger import LogLevel, TraceLogger, get_logger
from polytrace.perception.tracers import RectangleTracer


class ShapeExtractionEngine:
    """
    Parcourt l'image ligne par ligne sur une copie de travail.

    Le premier pixel hors fond rencontré est le coin haut-gauche d'un
    rectangle pas encore reconnu. Après reconnaissance, la boîte du
    rectangle est effacée de la copie pour ne pas le traiter deux fois.
    """

    def __init__(self, background_color: int = BACKGROUND, logger: Optional[TraceLogger] = None):
        self.background_color = background_color
        self.logger = logger or get_logger()
        self.rectangle_tracer = RectangleTracer(background_color)

    def _extract(self, image: Image, detect_triangles: bool) -> List[Shape]:
        shapes: List[Shape] = []
        working = image.copy()

        with self.logger.timed_step(LogLevel.EXTRACTION, "Scanning image", size=f"{image.width}x{image.height}"):
            for y in range(working.height):
                for x in range(working.width):
                    if working.get(x, y) == self.background_color:
                        continue

                    seed = Point(x, y)
                    with self.logger.timed_step(LogLevel.TRACE, f"Tracing from {seed.to_tuple()}"):
                        if detect_triangles:
                            match = self.rectangle_tracer.recognize_with_triangle(working, seed)
                            rectangle = match.rectangle
                            found = [rectangle] if match.triangle is None else [rectangle, match.triangle]
                        else:
                            rectangle = self.rectangle_tracer.recognize(working, seed)
                            found = [rectangle]

                    for shape in found:
                        self.logger.step(LogLevel.TRACE, f"Found {shape!r}")
                    shapes.extend(found)

                    rectangle.with_color(self.background_color).draw(working)

        self.logger.count_shapes(len(shapes))
        self.logger.success(LogLevel.EXTRACTION, f"Extracted {len(shapes)} shape(s)")
        return shapes

    def extract_rectangles(self, image: Image) -> List[Shape]:
        """Tous les rectangles parallèles aux axes, dans l'ordre de découverte."""
        return self._extract(image, detect_triangles=False)

    def extract_rectangles_and_triangles(self, image: Image) -> List[Shape]:
        """
        Rectangles et triangles intérieurs (au plus un par rectangle).

        Chaque triangle suit directement son rectangle : redessiner la liste
        dans l'ordre reproduit l'image.
        """
        return self._extract(image, detect_triangles=True)

    def analyze(self, image: Image, detect_triangles: bool = True) -> Dict:
        """Extraction plus statistiques par type de forme."""
        shapes = self._extract(image, detect_triangles)

        return {
            "image_shape": image.shape,
            "shapes": shapes,
            "statistics": {
                "total_shapes": len(shapes),
                "rectangles": sum(isinstance(s, Rectangle) for s in shapes),
                "triangles": sum(isinstance(s, Triangle) for s in shapes),
            },
        }


def extract_rectangles(image: Image, background_color: int = BACKGROUND) -> List[Shape]:
    return ShapeExtractionEngine(background_color).extract_rectangles(image)


def extract_rectangles_and_triangles(image: Image, background_color: int = BACKGROUND) -> List[Shape]:
    return ShapeExtractionEngine(background_color).extract_rectangles_and_triangles(image)


__all__ = ["ShapeExtractionEngine", "extract_rectangles", "extract_rectangles_and_triangles"]
