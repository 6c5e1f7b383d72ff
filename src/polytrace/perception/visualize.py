"""
Outils de visualisation pour le debug du rendu et de l'extraction.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle as MPLCircle
from matplotlib.patches import Polygon as MPLPolygon

from polytrace.core.image import MAX_INTENSITY, Image
from polytrace.core.shapes import Circle, Polygon, Shape


class ShapeVisualizer:
    """Visualisation des images et des formes reconnues."""

    @staticmethod
    def _show_image(ax: plt.Axes, image: Image, title: str) -> None:
        ax.imshow(image.to_array(), cmap="gray", vmin=0, vmax=MAX_INTENSITY, interpolation="nearest")
        ax.set_title(title)
        ax.set_xticks(np.arange(-0.5, image.width, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, image.height, 1), minor=True)
        ax.grid(True, which="minor", color="gray", linewidth=0.5, alpha=0.3)

    @staticmethod
    def plot_image(image: Image, title: str = "Image", figsize: Tuple[int, int] = (8, 8)):
        fig, ax = plt.subplots(figsize=figsize)
        ShapeVisualizer._show_image(ax, image, title)
        plt.tight_layout()
        return fig, ax

    @staticmethod
    def plot_shapes(image: Image, shapes: Sequence[Shape], title: str = "Recognized Shapes", figsize: Tuple[int, int] = (10, 10)):
        fig, ax = ShapeVisualizer.plot_image(image, title, figsize)

        for i, shape in enumerate(shapes):
            ShapeVisualizer._add_shape_overlay(ax, shape, i)

        return fig, ax

    @staticmethod
    def _add_shape_overlay(ax: plt.Axes, shape: Shape, index: int) -> None:
        """Contour des sommets (ou du cercle) et étiquette de la forme."""
        if isinstance(shape, Polygon):
            patch = MPLPolygon(
                [v.to_tuple() for v in shape.vertices],
                closed=True,
                linewidth=2,
                edgecolor="red",
                facecolor="none",
                linestyle="--",
            )
        elif isinstance(shape, Circle):
            patch = MPLCircle(
                shape.center.to_tuple(),
                max(shape.radius, 0),
                linewidth=2,
                edgecolor="red",
                facecolor="none",
                linestyle="--",
            )
        else:
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
        ax.add_patch(patch)

        bbox = shape.bounding_box()
        ax.text(
            bbox.min_x,
            bbox.min_y - 0.7,
            f"{shape.kind} #{index + 1}",
            color="red",
            fontsize=10,
            fontweight="bold",
            bbox=dict(boxstyle="round", facecolor="white", alpha=0.7),
        )

    @staticmethod
    def plot_round_trip(
        original: Image,
        reconstructed: Image,
        shapes: Sequence[Shape],
        title: str = "Round Trip",
        figsize: Tuple[int, int] = (18, 6),
    ):
        """Image d'origine, image redessinée et vue de perception côte à côte."""
        fig, axs = plt.subplots(1, 3, figsize=figsize)
        fig.suptitle(title, fontsize=16)

        ShapeVisualizer._show_image(axs[0], original, "Original")
        ShapeVisualizer._show_image(axs[1], reconstructed, "Reconstructed")
        ShapeVisualizer._show_image(axs[2], original, "Perception View")

        for i, shape in enumerate(shapes):
            ShapeVisualizer._add_shape_overlay(axs[2], shape, i)

        plt.tight_layout()
        return fig, axs

    @staticmethod
    def print_shape_info(shape: Shape) -> None:
        """Affiche des infos détaillées pour une forme."""
        bbox = shape.bounding_box()
        print(f"\n{'='*60}")
        print(f"Shape Type: {shape.kind.upper()}")
        print(f"{'='*60}")
        print(f"Color: {shape.color}")
        print(f"Bounding box: ({bbox.min_x}, {bbox.min_y}) to ({bbox.max_x}, {bbox.max_y})")
        print(f"Dimensions: {bbox.width} x {bbox.height}")

        if isinstance(shape, Polygon):
            print(f"Vertices: {', '.join(f'({v.x}, {v.y})' for v in shape.vertices)}")
        elif isinstance(shape, Circle):
            print(f"Center: ({shape.center.x}, {shape.center.y})")
            print(f"Radius: {shape.radius}")


__all__ = ["ShapeVisualizer"]
