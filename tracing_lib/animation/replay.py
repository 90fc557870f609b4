"""Stroke-order replay as an explicit state machine.

Replaying a glyph draws its reference strokes one after another, each
growing over its duration_ms. Timing belongs to the renderer: it calls
advance() with the current time on every frame and draws the commands it
gets back. The state is an immutable value handed back with each frame,
so nothing here schedules frames or keeps counters between calls.

Example usage:
    Driving a replay from a frame loop::

        from tracing_lib.animation import advance, start_replay

        state = start_replay(glyph, now=clock())
        while True:
            frame = advance(state, clock())
            for cmd in frame.draw_commands:
                canvas.polyline(cmd.points, cmd.color, cmd.line_width)
            label = f"Strokes in order: {frame.stroke_index} of {glyph.stroke_count}"
            if frame.done:
                break
            state = frame.state
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Tuple

from ..config import REPLAY_DISPLAY_SIZE
from ..domain.geometry import Point
from ..domain.glyph import ReferenceGlyph, ReferenceStroke


@dataclass(frozen=True)
class DrawCommand:
    """A polyline to draw, in display coordinates."""
    points: Tuple[Point, ...]
    color: str
    line_width: float


@dataclass(frozen=True)
class ReplayState:
    """Where a replay is: which stroke is growing and since when.

    Attributes:
        glyph: Glyph being replayed; its strokes are already in order.
        stroke_index: 0-based index of the stroke being drawn.
        stroke_start: Time (ms) the current stroke started.
        display_size: Side of the square display surface.
    """
    glyph: ReferenceGlyph
    stroke_index: int = 0
    stroke_start: float = 0.0
    display_size: float = REPLAY_DISPLAY_SIZE

    @property
    def done(self) -> bool:
        return self.stroke_index >= self.glyph.stroke_count


@dataclass(frozen=True)
class ReplayFrame:
    """Output of one advance() step.

    Attributes:
        draw_commands: Polylines to draw after clearing the display.
        stroke_index: 1-based number of the stroke on screen, or the
            stroke count once the replay is done.
        done: True when every stroke has been drawn in full.
        state: State to pass to the next advance() call.
    """
    draw_commands: List[DrawCommand]
    stroke_index: int
    done: bool
    state: ReplayState


def start_replay(glyph: ReferenceGlyph, now: float,
                 display_size: float = REPLAY_DISPLAY_SIZE) -> ReplayState:
    """Initial state of a replay starting at time now (ms)."""
    return ReplayState(glyph=glyph, stroke_index=0, stroke_start=now,
                       display_size=display_size)


def display_transform(glyph: ReferenceGlyph, display_size: float) -> Tuple[float, float, float]:
    """Uniform scale and centring offsets from glyph canvas to display."""
    scale = min(display_size / glyph.canvas_width, display_size / glyph.canvas_height)
    offset_x = (display_size - glyph.canvas_width * scale) / 2
    offset_y = (display_size - glyph.canvas_height * scale) / 2
    return scale, offset_x, offset_y


def stroke_command(stroke: ReferenceStroke, progress: float, scale: float,
                   offset_x: float, offset_y: float) -> DrawCommand:
    """Draw command for the first `progress` fraction of a stroke's points."""
    end_index = min(len(stroke.path), math.ceil(progress * len(stroke.path)))
    points = tuple(
        Point(offset_x + p.x * scale, offset_y + p.y * scale)
        for p in stroke.path[:end_index]
    )
    return DrawCommand(points=points, color=stroke.color,
                       line_width=max(1.0, stroke.brush_size * scale))


def advance(state: ReplayState, now: float) -> ReplayFrame:
    """Compute the frame at time now and the state that follows it.

    Strokes before the current one are drawn in full; the current one is
    drawn up to ceil(progress * point_count) points, where progress is
    the elapsed fraction of its duration_ms. When it completes, the next
    stroke starts at now.
    """
    glyph = state.glyph
    scale, offset_x, offset_y = display_transform(glyph, state.display_size)

    if state.done:
        commands = [stroke_command(s, 1.0, scale, offset_x, offset_y) for s in glyph.strokes]
        return ReplayFrame(commands, glyph.stroke_count, True, state)

    stroke = glyph.strokes[state.stroke_index]
    elapsed = now - state.stroke_start
    progress = 1.0 if stroke.duration_ms <= 0 else min(1.0, max(0.0, elapsed / stroke.duration_ms))

    commands = [
        stroke_command(s, 1.0, scale, offset_x, offset_y)
        for s in glyph.strokes[:state.stroke_index]
    ]
    commands.append(stroke_command(stroke, progress, scale, offset_x, offset_y))

    if progress < 1.0:
        return ReplayFrame(commands, state.stroke_index + 1, False, state)

    next_state = replace(state, stroke_index=state.stroke_index + 1, stroke_start=now)
    if next_state.done:
        return ReplayFrame(commands, glyph.stroke_count, True, next_state)
    return ReplayFrame(commands, state.stroke_index + 1, False, next_state)
