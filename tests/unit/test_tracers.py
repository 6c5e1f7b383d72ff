import numpy as np

from polytrace.core.image import Image
from polytrace.core.models import Point
from polytrace.core.shapes import Rectangle, Triangle
from polytrace.perception.tracers import RectangleTracer, TriangleTracer


def test_rectangle_recovery_from_seed(blank_image: Image) -> None:
    Rectangle(Point(1, 1), Point(3, 2), 70).draw(blank_image)

    rect = RectangleTracer().recognize(blank_image, Point(1, 1))

    assert rect == Rectangle(Point(1, 1), Point(3, 2), 70)
    assert rect.top_left == Point(1, 1)
    assert rect.bottom_right == Point(3, 2)
    assert rect.color == 70


def test_bottom_right_of_wide_and_tall_rectangles() -> None:
    tracer = RectangleTracer()

    wide = Image(8, 8)
    Rectangle(Point(1, 1), Point(6, 2), 5).draw(wide)
    assert tracer.find_bottom_right(wide, Point(1, 1)) == Point(6, 2)

    tall = Image(8, 8)
    Rectangle(Point(2, 1), Point(3, 6), 5).draw(tall)
    assert tracer.find_bottom_right(tall, Point(2, 1)) == Point(3, 6)

    square = Image(8, 8)
    Rectangle(Point(2, 2), Point(5, 5), 5).draw(square)
    assert tracer.find_bottom_right(square, Point(2, 2)) == Point(5, 5)


def test_bottom_right_of_thin_rectangles() -> None:
    tracer = RectangleTracer()

    image = Image.from_array(
        np.array(
            [
                [0, 0, 0, 0, 0],
                [0, 4, 0, 0, 0],
                [0, 0, 0, 0, 0],
                [0, 7, 7, 7, 0],
                [0, 0, 0, 0, 0],
            ]
        )
    )

    assert tracer.find_bottom_right(image, Point(1, 1)) == Point(1, 1)
    assert tracer.find_bottom_right(image, Point(1, 3)) == Point(3, 3)


def test_rectangle_touching_image_corner() -> None:
    image = Image(4, 5)
    Rectangle(Point(2, 1), Point(4, 3), 9).draw(image)

    assert RectangleTracer().recognize(image, Point(2, 1)) == Rectangle(Point(2, 1), Point(4, 3), 9)


def test_inner_triangle_does_not_stop_the_diagonal(demo_image: Image) -> None:
    assert RectangleTracer().find_bottom_right(demo_image, Point(1, 1)) == Point(3, 2)


def test_custom_background_color() -> None:
    image = Image(5, 5, fill=9)
    Rectangle(Point(1, 1), Point(2, 3), 3).draw(image)

    rect = RectangleTracer(background_color=9).recognize(image, Point(1, 1))

    assert rect == Rectangle(Point(1, 1), Point(2, 3), 3)


def test_recognize_with_triangle(demo_image: Image) -> None:
    match = RectangleTracer().recognize_with_triangle(demo_image, Point(1, 1))

    assert match.has_triangle
    assert match.rectangle == Rectangle(Point(1, 1), Point(3, 2), 70)
    assert match.triangle == Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210)


def test_recognize_without_triangle(demo_image: Image) -> None:
    match = RectangleTracer().recognize_with_triangle(demo_image, Point(3, 4))

    assert not match.has_triangle
    assert match.triangle is None
    assert match.rectangle == Rectangle(Point(3, 4), Point(4, 5), 140)


def test_triangle_with_top_base() -> None:
    image = Image(5, 7)
    Triangle(Point(1, 1), Point(5, 1), Point(3, 3), 9).draw(image)

    tri = TriangleTracer.recognize(image, Point(1, 1))

    assert tri.vertices == (Point(1, 1), Point(5, 1), Point(3, 3))
    assert tri.color == 9


def test_triangle_with_bottom_base() -> None:
    image = Image(6, 12)
    Triangle(Point(5, 0), Point(10, 4), Point(0, 4), 42).draw(image)

    tri = TriangleTracer.recognize(image, Point(5, 0))

    assert tri.vertices == (Point(5, 0), Point(10, 4), Point(0, 4))


def test_bottom_left_walks_left_along_the_base() -> None:
    image = Image.from_array(
        np.array(
            [
                [0, 0, 0, 3, 0, 0, 0],
                [3, 3, 3, 3, 3, 3, 3],
            ]
        )
    )

    assert TriangleTracer.find_bottom_left(image, Point(3, 0), 3) == Point(0, 1)
    assert TriangleTracer.horizontal_length(image, Point(0, 1), 3) == 6
    assert TriangleTracer.recognize(image, Point(3, 0)).vertices == (Point(3, 0), Point(6, 1), Point(0, 1))


def test_triangle_tracer_compares_exact_color() -> None:
    image = Image.from_array(
        np.array(
            [
                [5, 5, 5, 5, 5],
                [5, 8, 8, 8, 5],
                [5, 5, 8, 5, 5],
                [5, 5, 5, 5, 5],
            ]
        )
    )

    tri = TriangleTracer.recognize(image, Point(1, 1))

    assert tri == Triangle(Point(1, 1), Point(3, 1), Point(2, 2), 8)


def test_top_base_with_shallow_sides_collapses_to_one_row() -> None:
    # Le bord gauche recule de trois colonnes en une ligne : la descente s'arrête.
    image = Image.from_array(
        np.array(
            [
                [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
                [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
                [0, 0, 0, 4, 4, 4, 4, 4, 4, 4, 0],
                [0, 0, 0, 0, 0, 0, 4, 0, 0, 0, 0],
                [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            ]
        )
    )

    assert TriangleTracer.find_bottom_left(image, Point(3, 2), 4) == Point(3, 2)

    tri = TriangleTracer.recognize(image, Point(3, 2))

    assert tri.vertices == (Point(6, 2), Point(9, 2), Point(3, 2))
    assert {v.y for v in tri.vertices} == {2}
