"""Line-oriented text report."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, TextIO

if TYPE_CHECKING:  # pragma: no cover
    from ..core.stopwatch import Stopwatch


def running_summary(running: Sequence[str]) -> Optional[str]:
    """Describe events that were started but never stopped."""

    if not running:
        return None
    if len(running) == 1:
        return f"(1 event is still running: {running[0]})"
    return f"({len(running)} events are still running)"


def report_lines(stopwatch: "Stopwatch") -> List[str]:
    """One line per recorded path in path order, then the running summary.

    Open events are only mentioned, never closed.
    """

    lines = [record.render(stopwatch.name_width) for record in stopwatch.events()]
    summary = running_summary(stopwatch.running())
    if summary is not None:
        lines.append(summary)
    return lines


def write_report(stopwatch: "Stopwatch", sink: TextIO) -> None:
    for line in report_lines(stopwatch):
        sink.write(line + "\n")


def format_report(stopwatch: "Stopwatch") -> str:
    return "".join(line + "\n" for line in report_lines(stopwatch))


__all__ = ["format_report", "report_lines", "running_summary", "write_report"]
