import pytest

from polytrace.core.errors import BoundsError, InvalidGeometry
from polytrace.core.image import Image
from polytrace.core.models import BoundingBox, Point
from polytrace.core.shapes import Circle, Polygon, Rectangle, Triangle, draw_shapes


def _set_pixels(image: Image) -> set:
    return {(x, y) for y in range(image.height) for x in range(image.width) if image.get(x, y) != 0}


def test_rectangle_containment_boundary() -> None:
    rect = Rectangle(Point(1, 1), Point(3, 2), 70)

    assert rect.contains(Point(2, 1))
    assert rect.contains(Point(1, 1))
    assert rect.contains(Point(3, 2))
    assert not rect.contains(Point(4, 1))
    assert not rect.contains(Point(2, 3))


def test_rectangle_vertices_are_clockwise_from_top_left() -> None:
    rect = Rectangle(Point(1, 1), Point(3, 2), 70)

    assert rect.vertices == (Point(1, 1), Point(3, 1), Point(3, 2), Point(1, 2))
    assert rect.top_left == Point(1, 1)
    assert rect.bottom_right == Point(3, 2)
    assert rect.bounding_box() == BoundingBox(1, 1, 3, 2)


def test_rectangle_with_inverted_corners_is_invalid() -> None:
    with pytest.raises(InvalidGeometry):
        Rectangle(Point(3, 1), Point(1, 2), 5)
    with pytest.raises(InvalidGeometry):
        Rectangle(Point(1, 2), Point(3, 1), 5)


def test_polygon_needs_three_vertices() -> None:
    with pytest.raises(InvalidGeometry):
        Polygon([Point(0, 0), Point(1, 1)], 3)


def test_color_out_of_range_is_invalid() -> None:
    with pytest.raises(InvalidGeometry):
        Rectangle(Point(0, 0), Point(1, 1), 256)
    with pytest.raises(InvalidGeometry):
        Circle(Point(0, 0), 1, -3)


def test_counter_clockwise_triangle_is_normalized() -> None:
    ccw = Triangle(Point(2, 1), Point(1, 2), Point(3, 2), 210)

    assert ccw.vertices == (Point(2, 1), Point(3, 2), Point(1, 2))
    assert ccw == Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210)


def test_triangle_equality_ignores_starting_vertex() -> None:
    a, b, c = Point(2, 1), Point(3, 2), Point(1, 2)

    assert Triangle(a, b, c, 9) == Triangle(b, c, a, 9)
    assert hash(Triangle(a, b, c, 9)) == hash(Triangle(c, a, b, 9))
    assert Triangle(a, b, c, 9) != Triangle(a, b, c, 8)


def test_rectangle_is_not_equal_to_polygon_with_same_vertices() -> None:
    rect = Rectangle(Point(0, 0), Point(1, 1), 4)

    assert Polygon(rect.vertices, 4) != rect


def test_draw_rectangle(blank_image: Image) -> None:
    Rectangle(Point(1, 1), Point(3, 2), 70).draw(blank_image)

    assert blank_image.to_array().tolist() == [
        [0, 0, 0, 0, 0, 0],
        [0, 70, 70, 70, 0, 0],
        [0, 70, 70, 70, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0],
    ]


def test_draw_triangle_with_bottom_base(blank_image: Image) -> None:
    Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210).draw(blank_image)

    assert _set_pixels(blank_image) == {(2, 1), (1, 2), (2, 2), (3, 2)}


def test_draw_triangle_with_top_base() -> None:
    image = Image(5, 7)
    Triangle(Point(1, 1), Point(5, 1), Point(3, 3), 9).draw(image)

    assert image.to_array().tolist() == [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 9, 9, 9, 9, 9, 0],
        [0, 0, 9, 9, 9, 0, 0],
        [0, 0, 0, 9, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]


def test_single_pixel_rectangle() -> None:
    image = Image(3, 3)
    Rectangle(Point(1, 1), Point(1, 1), 12).draw(image)

    assert _set_pixels(image) == {(1, 1)}


def test_polygon_draw_is_not_atomic() -> None:
    image = Image(1, 5)

    with pytest.raises(BoundsError):
        Rectangle(Point(3, 0), Point(5, 0), 9).draw(image)

    assert image.to_array().tolist() == [[0, 0, 0, 9, 9]]


def test_with_color_returns_new_shape() -> None:
    rect = Rectangle(Point(1, 1), Point(3, 2), 70)
    erased = rect.with_color(0)

    assert isinstance(erased, Rectangle)
    assert erased.color == 0
    assert erased.vertices == rect.vertices
    assert rect.color == 70

    tri = Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210).with_color(5)
    assert isinstance(tri, Triangle)
    assert tri.color == 5


def test_draw_shapes_in_order(demo_shapes, demo_grid: str) -> None:
    image = Image(6, 6)
    draw_shapes(image, demo_shapes)

    assert image == Image.from_text(demo_grid)


def test_to_dict() -> None:
    tri = Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210)
    circle = Circle(Point(4, 4), 2, 30)

    assert tri.to_dict() == {"type": "triangle", "color": 210, "vertices": [(2, 1), (3, 2), (1, 2)]}
    assert circle.to_dict() == {"type": "circle", "color": 30, "center": (4, 4), "radius": 2}


def test_circle_symmetry() -> None:
    image = Image(15, 15)
    cx, cy = 7, 7
    Circle(Point(cx, cy), 5, 100).draw(image)

    pixels = _set_pixels(image)
    assert pixels
    for x, y in pixels:
        dx, dy = x - cx, y - cy
        assert (cx - dx, cy + dy) in pixels
        assert (cx + dx, cy - dy) in pixels
        assert (cx - dx, cy - dy) in pixels


def test_circle_radius_three_is_filled() -> None:
    image = Image(7, 7)
    Circle(Point(3, 3), 3, 1).draw(image)

    assert image.to_array().tolist() == [
        [0, 0, 1, 1, 1, 0, 0],
        [0, 1, 1, 1, 1, 1, 0],
        [1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1],
        [1, 1, 1, 1, 1, 1, 1],
        [0, 1, 1, 1, 1, 1, 0],
        [0, 0, 1, 1, 1, 0, 0],
    ]


def test_small_circles() -> None:
    image = Image(5, 5)
    Circle(Point(2, 2), 0, 6).draw(image)
    assert _set_pixels(image) == {(2, 2)}

    image = Image(5, 5)
    Circle(Point(2, 2), 1, 6).draw(image)
    assert _set_pixels(image) == {(2, 1), (1, 2), (2, 2), (3, 2), (2, 3)}


def test_default_circle_is_not_drawable(blank_image: Image) -> None:
    circle = Circle()

    assert circle.radius == -1
    assert not circle.is_drawable
    circle.draw(blank_image)
    assert _set_pixels(blank_image) == set()


def test_negative_radius_is_invalid() -> None:
    with pytest.raises(InvalidGeometry):
        Circle(Point(2, 2), -2, 5)


def test_circle_outside_image_raises() -> None:
    with pytest.raises(BoundsError):
        Circle(Point(0, 0), 2, 5).draw(Image(5, 5))
