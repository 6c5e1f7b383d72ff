"""Run configuration shared by the CLI and the extraction engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from polytrace.core.image import BACKGROUND
from polytrace.logger import TraceLogger


@dataclass
class PolytraceConfig:
    """Controls extraction and logging output."""

    # Reserved "no shape" intensity
    background_color: int = BACKGROUND

    # Look for one embedded triangle inside each rectangle
    detect_triangles: bool = True

    # Logging
    verbose: bool = False
    json_log: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None

    # Save a matplotlib figure of the extraction here
    plot_path: Optional[str] = None

    def make_logger(self) -> TraceLogger:
        return TraceLogger(
            verbose=self.verbose,
            log_file=self.log_file,
            json_log=self.json_log,
            use_colors=self.use_colors,
        )


__all__ = ["PolytraceConfig"]
