"""Pie-chart geometry for the status histogram."""

from __future__ import annotations

import math

from cts_dashboard.models.dashboard import Histogram, PieSegment
from cts_dashboard.models.status import TestStatus


def compute_segments(histogram: Histogram) -> list[PieSegment]:
    """Turn a histogram into contiguous pie slices in status declaration order.

    Zero-count statuses produce no slice. An empty histogram produces no
    slices at all.
    """
    total = histogram.total
    if total == 0:
        return []

    segments: list[PieSegment] = []
    cumulative = 0.0
    for status in TestStatus:
        fraction = histogram.counts.get(status, 0) / total
        if fraction > 0:
            segments.append(PieSegment(
                status=status,
                fraction_start=cumulative,
                fraction_end=cumulative + fraction,
                color=status.color,
            ))
            cumulative += fraction
    return segments


def _point(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def arc_path(
    segment: PieSegment,
    cx: float = 100.0,
    cy: float = 100.0,
    radius: float = 80.0,
) -> str:
    """SVG path data for one slice, swept clockwise from its start angle."""
    start_angle = segment.fraction_start * 2 * math.pi
    end_angle = segment.fraction_end * 2 * math.pi
    span = end_angle - start_angle
    x1, y1 = _point(cx, cy, radius, start_angle)
    x2, y2 = _point(cx, cy, radius, end_angle)

    if span >= 2 * math.pi - 1e-9:
        # A single arc whose endpoints coincide draws nothing; split in two.
        xm, ym = _point(cx, cy, radius, start_angle + math.pi)
        return (
            f"M {x1:.3f} {y1:.3f} "
            f"A {radius} {radius} 0 1 1 {xm:.3f} {ym:.3f} "
            f"A {radius} {radius} 0 1 1 {x1:.3f} {y1:.3f} Z"
        )

    large_arc_flag = 1 if span > math.pi else 0
    return (
        f"M {cx} {cy} L {x1:.3f} {y1:.3f} "
        f"A {radius} {radius} 0 {large_arc_flag} 1 {x2:.3f} {y2:.3f} Z"
    )
