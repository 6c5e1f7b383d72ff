"""
CLI principale de polytrace.

Commandes :
    polytrace demo                 # dessine, extrait et redessine les formes d'exemple
    polytrace extract grid.txt     # reconnaît les formes d'une grille texte
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from polytrace.config import PolytraceConfig
from polytrace.core.errors import PolytraceError
from polytrace.core.image import Image
from polytrace.core.models import Point
from polytrace.core.shapes import Rectangle, Shape, Triangle, draw_shapes
from polytrace.logger import LogLevel, TraceLogger, set_logger
from polytrace.perception.engine import ShapeExtractionEngine

DEMO_SIZE = 6


def demo_shapes() -> List[Shape]:
    """Deux rectangles, puis un triangle posé sur le premier."""
    return [
        Rectangle(Point(1, 1), Point(3, 2), 70),
        Rectangle(Point(3, 4), Point(4, 5), 140),
        Triangle(Point(2, 1), Point(3, 2), Point(1, 2), 210),
    ]


def _redraw(shapes: Sequence[Shape], height: int, width: int) -> Image:
    image = Image(height, width)
    draw_shapes(image, shapes)
    return image


def _save_plot(config: PolytraceConfig, logger: TraceLogger, original: Image, shapes: Sequence[Shape]) -> None:
    # Import tardif : matplotlib n'est chargé que si une figure est demandée.
    from polytrace.perception.visualize import ShapeVisualizer

    reconstructed = _redraw(shapes, original.height, original.width)
    with logger.timed_step(LogLevel.VISUALIZATION, "Saving figure", path=config.plot_path):
        fig, _ = ShapeVisualizer.plot_round_trip(original, reconstructed, shapes)
        fig.savefig(config.plot_path)


def cmd_demo(config: PolytraceConfig, logger: TraceLogger) -> int:
    """Rendu puis extraction des formes d'exemple, images affichées avant/après."""
    shapes = demo_shapes()
    engine = ShapeExtractionEngine(config.background_color, logger)

    with logger.timed_step(LogLevel.RENDER, "Drawing sample shapes"):
        rectangles_only = _redraw(shapes[:2], DEMO_SIZE, DEMO_SIZE)
        with_triangle = _redraw(shapes, DEMO_SIZE, DEMO_SIZE)

    print("Original images:\n")
    print(rectangles_only, end="\n\n")
    print(with_triangle, end="\n\n")

    found_rectangles = engine.extract_rectangles(rectangles_only)
    found_all = engine.extract_rectangles_and_triangles(with_triangle)

    print("New images:\n")
    print(_redraw(found_rectangles, DEMO_SIZE, DEMO_SIZE), end="\n\n")
    print(_redraw(found_all, DEMO_SIZE, DEMO_SIZE), end="\n\n")

    if config.plot_path:
        _save_plot(config, logger, with_triangle, found_all)

    return 0


def cmd_extract(config: PolytraceConfig, logger: TraceLogger, task: str, as_json: bool) -> int:
    """Reconnaît les formes d'une grille texte (lignes d'entiers séparés par des espaces)."""
    path = Path(task)
    image = Image.from_text(path.read_text(encoding="utf-8"))
    logger.step(LogLevel.PIPELINE, f"Loaded {path}", size=f"{image.width}x{image.height}")

    engine = ShapeExtractionEngine(config.background_color, logger)
    analysis = engine.analyze(image, detect_triangles=config.detect_triangles)
    shapes = analysis["shapes"]

    if as_json:
        print(json.dumps(
            {"shapes": [s.to_dict() for s in shapes], "statistics": analysis["statistics"]},
            indent=2,
        ))
    else:
        for shape in shapes:
            print(repr(shape))

    if config.plot_path:
        _save_plot(config, logger, image, shapes)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polytrace", description="Render and recognize flat-colored shapes")
    parser.add_argument("--verbose", action="store_true", help="Affiche les étapes de rendu et d'extraction.")
    parser.add_argument("--no-color", action="store_true", help="Désactive les couleurs ANSI.")
    parser.add_argument("--json-log", action="store_true", help="Journal au format JSON lines.")
    parser.add_argument("--log-file", type=str, default=None, help="Écrit aussi le journal dans ce fichier.")
    parser.add_argument("--plot", type=str, default=None, help="Enregistre une figure matplotlib ici.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Dessine les formes d'exemple, les extrait et les redessine.")

    extract_parser = subparsers.add_parser("extract", help="Reconnaît les formes d'une grille texte.")
    extract_parser.add_argument("task", type=str, help="Fichier texte : une ligne de pixels par ligne.")
    extract_parser.add_argument("--rectangles-only", action="store_true", help="Ne cherche pas de triangles.")
    extract_parser.add_argument("--json", action="store_true", help="Sortie JSON.")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = PolytraceConfig(
        detect_triangles=not getattr(args, "rectangles_only", False),
        verbose=args.verbose,
        json_log=args.json_log,
        use_colors=not args.no_color,
        log_file=args.log_file,
        plot_path=args.plot,
    )
    logger = config.make_logger()
    set_logger(logger)

    try:
        if args.command == "demo":
            return cmd_demo(config, logger)
        return cmd_extract(config, logger, args.task, args.json)
    except (PolytraceError, ValueError, OSError) as exc:
        logger.error(LogLevel.PIPELINE, f"{args.command} failed", exception=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        logger.print_metrics_summary()


if __name__ == "__main__":
    sys.exit(main())
