"""
Exceptions levées par la grille de pixels et le modèle de formes.
"""

from __future__ import annotations

from typing import Optional


class PolytraceError(Exception):
    """Erreur de base du projet."""


class BoundsError(PolytraceError, IndexError):
    """Accès à la grille hors de [0, width) x [0, height)."""

    def __init__(self, x: int, y: int, width: Optional[int] = None, height: Optional[int] = None, message: str = ""):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        if not message:
            message = f"Location ({x}, {y}) is outside the image"
            if width is not None and height is not None:
                message += f" of size {width}x{height}"
        super().__init__(message)


class InvalidGeometry(PolytraceError, ValueError):
    """Données de forme dégénérées (rayon, nombre de sommets, couleur...)."""


__all__ = ["PolytraceError", "BoundsError", "InvalidGeometry"]
