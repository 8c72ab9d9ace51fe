"""
Conversion of tablet ink into recognition strokes.

The tablet records position, pressure and speed for each dot, but no
time index. The recognizer expects timed points, so timestamps are
reconstructed from the recorded pen speed: slow movement spreads points
further apart in time.

Only handwriting is converted. Eraser and highlighter strokes are
dropped.
"""

from __future__ import annotations

import logging
import math

from inkscript.models import BrushType, Drawing, InkStroke, Layer
from inkscript.recognition.request import PointerType, Stroke, StrokeGroup

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

SPEED_FACTOR = 200  # ms per unit of speed
MIN_SPEED = 0.01  # lower bound so a resting pen does not stall the clock
STROKE_GAP = 500  # ms between strokes
MAX_COORD = 2**63 - 1  # coordinates are sent and hashed as 64-bit integers


# =============================================================================
# CONVERSION
# =============================================================================


def convert_layer(layer: Layer, start: int = 0) -> tuple[StrokeGroup, int]:
    """
    Convert one drawing layer into a stroke group.

    Args:
        layer: The layer to convert.
        start: Timestamp (ms) at which the first stroke begins.

    Returns:
        Tuple of (stroke group, timestamp where the next layer should begin).
    """
    t = start
    strokes: list[Stroke] = []
    skipped = 0

    for ink in layer.strokes:
        if not ink.brush_type.is_text:
            skipped += 1
            continue

        stroke, t_end = convert_stroke(ink, t)
        if not stroke:
            # nothing usable in this stroke, keep the clock where it was
            continue

        strokes.append(stroke)
        t = t_end + STROKE_GAP

    if skipped:
        logger.debug("Dropped %d non-text strokes", skipped)

    return StrokeGroup(strokes=strokes), t


def convert_drawing(drawing: Drawing, start: int = 0) -> list[StrokeGroup]:
    """Convert all layers of a page, chaining timestamps across layers."""
    groups = []
    t = start
    for layer in drawing.layers:
        group, t = convert_layer(layer, t)
        groups.append(group)
    return groups


def convert_stroke(ink: InkStroke, start: int) -> tuple[Stroke, int]:
    """
    Convert the dots of one stroke into timed points.

    Consecutive dots at the same integer position are emitted once.

    Returns:
        Tuple of (stroke, timestamp of the last emitted point).
    """
    stroke = Stroke(pointer_type=pointer_type(ink.brush_type))
    t = start
    last: tuple[int, int] | None = None

    for dot in ink.dots:
        if not (math.isfinite(dot.x) and math.isfinite(dot.y)):
            continue

        position = (round_half_away(dot.x), round_half_away(dot.y))
        if abs(position[0]) > MAX_COORD or abs(position[1]) > MAX_COORD:
            continue
        if position == last:
            continue
        last = position

        t += round_half_away(SPEED_FACTOR / _speed(dot.speed))
        stroke.add_point(position[0], position[1], t, clamp_pressure(dot.pressure))

    return stroke, t


def clamp_pressure(p: float) -> float:
    """Clamp pressure to [0, 1]; NaN becomes 0."""
    if math.isnan(p):
        return 0.0
    return max(0.0, min(1.0, p))


def pointer_type(brush: BrushType) -> PointerType:
    if brush.is_eraser:
        return PointerType.ERASER
    return PointerType.PEN


def _speed(speed: float) -> float:
    if not math.isfinite(speed):
        return MIN_SPEED
    return max(MIN_SPEED, speed)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
