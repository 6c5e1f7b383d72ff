"""Shared test fixtures."""

from __future__ import annotations

from typing import List

import matplotlib

matplotlib.use("Agg")

import pytest

from polytrace.core.image import Image
from polytrace.core.models import Point
from polytrace.core.shapes import Rectangle, Shape, Triangle

# Two rectangles in a 6x6 image, a triangle drawn over the first one.
DEMO_GRID = """
0 0 0 0 0 0
0 70 210 70 0 0
0 210 210 210 0 0
0 0 0 0 0 0
0 0 0 140 140 0
0 0 0 140 140 0
"""


@pytest.fixture
def demo_shapes() -> List[Shape]:
    return [
        Rectangle(Point(1, 1), Point(3, 2), 70),
        Rectangle(Point(3, 4), Point(4, 5), 140),
        Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210),
    ]


@pytest.fixture
def demo_grid() -> str:
    return DEMO_GRID


@pytest.fixture
def demo_image(demo_shapes: List[Shape]) -> Image:
    image = Image(6, 6)
    for shape in demo_shapes:
        shape.draw(image)
    return image


@pytest.fixture
def blank_image() -> Image:
    return Image(6, 6)
