"""
logger.py - Structured Logging for polytrace
=============================================
Provides consistent, structured logging across rendering, tracing and
extraction.

Features:
    - Step logging with timing
    - Structured data attachment
    - Console (stderr), file and JSON-lines output
    - Performance metrics collection
"""

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class LogLevel(Enum):
    """Component identifiers for structured logging."""
    PIPELINE = "PIPELINE"
    RENDER = "RENDER"
    TRACE = "TRACE"
    EXTRACTION = "EXTRACTION"
    VISUALIZATION = "VISUALIZATION"
    ERROR = "ERROR"


@dataclass
class LogEntry:
    """Structured log entry with metadata."""
    timestamp: str
    level: str
    component: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    duration_ms: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


@dataclass
class PerformanceMetrics:
    """Collected performance metrics for a run."""
    step_durations: Dict[str, float] = field(default_factory=dict)
    render_time_ms: float = 0.0
    trace_time_ms: float = 0.0
    extraction_time_ms: float = 0.0
    shapes_found: int = 0
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class TraceLogger:
    """
    Centralized logger for polytrace.

    Usage:
        logger = TraceLogger(verbose=True)
        logger.step(LogLevel.EXTRACTION, "Found rectangle", top_left=(1, 1))

        with logger.timed_step(LogLevel.EXTRACTION, "Scanning image"):
            ...
    """

    # ANSI color codes for terminal output
    COLORS = {
        LogLevel.PIPELINE: "\033[1;36m",      # Bold Cyan
        LogLevel.RENDER: "\033[0;34m",        # Blue
        LogLevel.TRACE: "\033[0;35m",         # Magenta
        LogLevel.EXTRACTION: "\033[0;32m",    # Green
        LogLevel.VISUALIZATION: "\033[0;37m", # White
        LogLevel.ERROR: "\033[1;31m",         # Bold Red
    }
    RESET = "\033[0m"

    def __init__(
        self,
        verbose: bool = True,
        log_file: Optional[str] = None,
        json_log: bool = False,
        use_colors: bool = True,
        collect_metrics: bool = True
    ):
        """
        Args:
            verbose: Print to console
            log_file: Path to log file (optional)
            json_log: Output logs as JSON lines
            use_colors: Use ANSI colors in console output
            collect_metrics: Collect performance metrics
        """
        self.verbose = verbose
        self.log_file = Path(log_file) if log_file else None
        self.json_log = json_log
        self.use_colors = use_colors
        self.collect_metrics = collect_metrics

        self.entries: List[LogEntry] = []
        self.metrics = PerformanceMetrics()

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _record(self, entry: LogEntry, component: LogLevel, **print_options) -> None:
        self.entries.append(entry)

        if self.verbose:
            self._print_entry(entry, component, **print_options)

        if self.log_file:
            self._write_to_file(entry)

    def step(self, component: LogLevel, message: str, **data) -> None:
        """
        Log a step.

        Args:
            component: The component logging this message
            message: Human-readable message
            **data: Additional structured data to attach
        """
        entry = LogEntry(
            timestamp=datetime.now().isoformat(),
            level="INFO",
            component=component.value,
            message=message,
            data=data
        )
        self._record(entry, component)

    def success(self, component: LogLevel, message: str, **data) -> None:
        """Log a success message with checkmark."""
        self.step(component, f"✓ {message}", **data)

    def warning(self, component: LogLevel, message: str, **data) -> None:
        entry = LogEntry(
            timestamp=datetime.now().isoformat(),
            level="WARNING",
            component=component.value,
            message=f"⚠ {message}",
            data=data
        )
        self.metrics.warnings.append(message)
        self._record(entry, component)

    def error(self, component: LogLevel, message: str, exception: Optional[Exception] = None, **data) -> None:
        if exception:
            data["exception_type"] = type(exception).__name__
            data["exception_message"] = str(exception)

        entry = LogEntry(
            timestamp=datetime.now().isoformat(),
            level="ERROR",
            component=component.value,
            message=f"✗ {message}",
            data=data
        )
        self.metrics.errors.append(message)
        self._record(entry, LogLevel.ERROR)

    @contextmanager
    def timed_step(self, component: LogLevel, message: str, **data):
        """
        Context manager for timing a step.

        Usage:
            with logger.timed_step(LogLevel.RENDER, "Drawing shapes"):
                draw_shapes(image, shapes)
        """
        start_time = time.perf_counter()

        self.step(component, f"{message}...")

        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000

            entry = LogEntry(
                timestamp=datetime.now().isoformat(),
                level="INFO",
                component=component.value,
                message=f"  ↳ Completed in {duration_ms:.1f}ms",
                data=data,
                duration_ms=duration_ms
            )

            if self.collect_metrics:
                key = component.value.lower()
                self.metrics.step_durations[key] = self.metrics.step_durations.get(key, 0.0) + duration_ms

                if component == LogLevel.RENDER:
                    self.metrics.render_time_ms += duration_ms
                elif component == LogLevel.TRACE:
                    self.metrics.trace_time_ms += duration_ms
                elif component == LogLevel.EXTRACTION:
                    self.metrics.extraction_time_ms += duration_ms

            self._record(entry, component, indent=True)

    def count_shapes(self, count: int) -> None:
        if self.collect_metrics:
            self.metrics.shapes_found += count

    def section(self, title: str, width: int = 50) -> None:
        """Print a section header."""
        if self.verbose:
            print("=" * width, file=sys.stderr)
            print(f"  {title}", file=sys.stderr)
            print("=" * width, file=sys.stderr)

    def _print_entry(self, entry: LogEntry, component: LogLevel, indent: bool = False) -> None:
        prefix = "  " if indent else ""

        if self.use_colors:
            color = self.COLORS.get(component, "")
            reset = self.RESET
        else:
            color = ""
            reset = ""

        if self.json_log:
            print(entry.to_json(), file=sys.stderr)
            return

        component_tag = f"[{component.value}]"
        print(f"{prefix}{color}{component_tag:15} {entry.message}{reset}", file=sys.stderr)

        if entry.data and not indent:
            for key, value in entry.data.items():
                if not key.startswith("_"):  # Skip private keys
                    print(f"{prefix}  └─ {key}: {value}", file=sys.stderr)

    def _write_to_file(self, entry: LogEntry) -> None:
        with open(self.log_file, "a", encoding="utf-8") as f:
            if self.json_log:
                f.write(entry.to_json() + "\n")
            else:
                f.write(f"[{entry.timestamp}] [{entry.level}] [{entry.component}] {entry.message}\n")
                if entry.data:
                    f.write(f"  Data: {json.dumps(entry.data, default=str)}\n")

    def get_metrics_summary(self) -> Dict[str, Any]:
        return {
            "total_entries": len(self.entries),
            "shapes_found": self.metrics.shapes_found,
            "render_time_ms": self.metrics.render_time_ms,
            "trace_time_ms": self.metrics.trace_time_ms,
            "extraction_time_ms": self.metrics.extraction_time_ms,
            "step_durations": self.metrics.step_durations,
            "error_count": len(self.metrics.errors),
            "warning_count": len(self.metrics.warnings),
        }

    def print_metrics_summary(self) -> None:
        if not self.verbose:
            return

        summary = self.get_metrics_summary()
        self.section("PERFORMANCE METRICS")
        print(f"   • Total log entries: {summary['total_entries']}", file=sys.stderr)
        print(f"   • Shapes found: {summary['shapes_found']}", file=sys.stderr)
        print(f"   • Render time: {summary['render_time_ms']:.1f}ms", file=sys.stderr)
        print(f"   • Trace time: {summary['trace_time_ms']:.1f}ms", file=sys.stderr)
        print(f"   • Extraction time: {summary['extraction_time_ms']:.1f}ms", file=sys.stderr)

        if summary["error_count"] > 0:
            print(f"\n❌ Errors: {summary['error_count']}", file=sys.stderr)
            for err in self.metrics.errors[:5]:  # Show first 5
                print(f"   • {err}", file=sys.stderr)

        if summary["warning_count"] > 0:
            print(f"\n⚠ Warnings: {summary['warning_count']}", file=sys.stderr)
            for warn in self.metrics.warnings[:5]:
                print(f"   • {warn}", file=sys.stderr)

        print(file=sys.stderr)

    def clear(self) -> None:
        """Clear all log entries and reset metrics."""
        self.entries.clear()
        self.metrics = PerformanceMetrics()


# Global logger instance, silent until a caller installs a verbose one.
_global_logger: Optional[TraceLogger] = None


def get_logger() -> TraceLogger:
    """Get or create the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = TraceLogger(verbose=False)
    return _global_logger


def set_logger(logger: TraceLogger) -> None:
    """Set the global logger instance."""
    global _global_logger
    _global_logger = logger


__all__ = ["LogLevel", "LogEntry", "PerformanceMetrics", "TraceLogger", "get_logger", "set_logger"]
