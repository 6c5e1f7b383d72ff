"""
Grille de pixels en niveaux de gris.

Stockage dans un seul buffer numpy `uint8` indexé par `y * width + x`.
Tous les accès sont vérifiés et lèvent `BoundsError` hors de la grille.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from polytrace.core.errors import BoundsError
from polytrace.core.models import Point

BACKGROUND = 0
MAX_INTENSITY = 255


def _check_intensity(value: int) -> int:
    if not 0 <= int(value) <= MAX_INTENSITY:
        raise ValueError(f"Intensity {value} is outside [0, {MAX_INTENSITY}]")
    return int(value)


class Image:
    """Image 2D de `height` lignes et `width` colonnes."""

    def __init__(self, height: int, width: int, fill: int = BACKGROUND):
        if height <= 0 or width <= 0:
            raise ValueError(f"Image dimensions must be positive, got {height}x{width}")

        self._height = int(height)
        self._width = int(width)
        self._data = np.full(self._height * self._width, _check_intensity(fill), dtype=np.uint8)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Image":
        """Construit une image à partir d'un tableau 2D (lignes = y)."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        if array.size and (array.min() < 0 or array.max() > MAX_INTENSITY):
            raise ValueError(f"Array values must be in [0, {MAX_INTENSITY}]")

        image = cls(array.shape[0], array.shape[1])
        image._data[:] = array.astype(np.uint8).ravel()
        return image

    @classmethod
    def from_text(cls, text: str) -> "Image":
        """Parse le format texte produit par `str(image)`."""
        rows = [line.split() for line in text.strip().splitlines() if line.strip()]
        if not rows:
            raise ValueError("No pixel rows found")

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} values, expected {width}")

        return cls.from_array(np.array([[int(v) for v in row] for row in rows]))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), comme un tableau numpy."""
        return self._height, self._width

    def is_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        if not self.is_valid(x, y):
            raise BoundsError(x, y, self._width, self._height)
        return y * self._width + x

    def get(self, x: int, y: int) -> int:
        return int(self._data[self._index(x, y)])

    def set(self, x: int, y: int, intensity: int) -> None:
        index = self._index(x, y)
        self._data[index] = _check_intensity(intensity)

    def get_at(self, point: Point) -> int:
        return self.get(point.x, point.y)

    def set_at(self, point: Point, intensity: int) -> None:
        self.set(point.x, point.y, intensity)

    def draw_horizontal_line(self, start: Point, x_end: int, color: int) -> None:
        """
        Remplit la ligne `start.y` de `start.x` à `x_end` inclus.

        Raises:
            BoundsError: si le segment sort de l'image ou si start.x > x_end.
        """
        if start.x < 0 or not 0 <= start.y < self._height:
            raise BoundsError(start.x, start.y, self._width, self._height)
        if x_end >= self._width:
            raise BoundsError(x_end, start.y, self._width, self._height)
        if start.x > x_end:
            raise BoundsError(
                start.x,
                start.y,
                self._width,
                self._height,
                message=f"Line start x={start.x} is past its end x={x_end}",
            )

        offset = start.y * self._width
        self._data[offset + start.x : offset + x_end + 1] = _check_intensity(color)

    def copy(self) -> "Image":
        clone = Image(self._height, self._width)
        clone._data[:] = self._data
        return clone

    def to_array(self) -> np.ndarray:
        """Copie 2D (height, width) des pixels."""
        return self._data.reshape(self._height, self._width).copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Image(height={self._height}, width={self._width})"

    def __str__(self) -> str:
        rows = self._data.reshape(self._height, self._width)
        return "\n".join(" ".join(str(int(v)) for v in row) for row in rows)


__all__ = ["BACKGROUND", "MAX_INTENSITY", "Image"]
