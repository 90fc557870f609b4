"""Raster adapters for pixel-overlap similarity.

The overlap scorer only needs an ink/no-ink grid of a fixed size for the
reference and for the user's drawing. This module provides the interface
for producing those grids and a Pillow-backed implementation of it.

Both inputs are brought to the same comparison area before they are
classified: the reference path's bounding box, or the user's ink bounding
box, is scaled uniformly (letterboxed, not stretched) into the inner area
of the raster and centred. Position and size of the original drawing
therefore do not affect the score.

The module provides the following:
    InkRasterizer: Abstract interface producing ink masks.
    PillowRasterizer: Default implementation using PIL.ImageDraw.
    fit_and_center: Uniform scale and offset into the inner area.
    canvas_to_image: Coerce a PIL image or numpy array to RGBA.
    drawing_ink_mask: Ink classification of an RGBA array.
    get_ink_bbox: Bounding box of True pixels in a mask.
    render_reference_image: Draw reference paths onto a white raster.
    render_drawing_image: Crop, scale and centre a user drawing.

Example usage:
    Producing both masks::

        from tracing_lib.utils.rendering import PillowRasterizer

        rasterizer = PillowRasterizer()
        ref_mask = rasterizer.reference_mask([[(0.5, 0.2), (0.8, 0.5)]])
        user_mask = rasterizer.drawing_mask(canvas_rgba_array)
        print(ref_mask.shape)  # (128, 128)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from ..config import (
    ALPHA_THRESHOLD,
    INK_THRESHOLD,
    RASTER_PAD,
    RASTER_SIZE,
    RASTER_STROKE_WIDTH,
)
from ..domain.geometry import BBox, Stroke, as_points
from .geometry import axis_ranges, bounding_box


class InkRasterizer(ABC):
    """Produces fixed-size ink masks for the reference and the drawing.

    Both masks must have the same shape. True marks ink pixels.
    """

    @abstractmethod
    def reference_mask(self, ref_strokes: Sequence[Stroke]) -> np.ndarray:
        """Ink mask of the reference stroke paths."""

    @abstractmethod
    def drawing_mask(self, canvas) -> np.ndarray:
        """Ink mask of the user's drawing surface."""


def fit_and_center(width: float, height: float, size: int = RASTER_SIZE,
                   pad: int = RASTER_PAD) -> Tuple[float, float, float, float, float]:
    """Uniform scale and offset that fit a box into the inner raster area.

    Args:
        width: Width of the content to fit.
        height: Height of the content to fit.
        size: Side of the square raster.
        pad: Margin on every side of the inner area.

    Returns:
        Tuple (scale, dx, dy, dw, dh): the scale factor, the top-left
        offset of the fitted content and its fitted size.
    """
    inner = size - pad * 2
    scale = min(inner / width, inner / height)
    dw = width * scale
    dh = height * scale
    dx = pad + (inner - dw) / 2
    dy = pad + (inner - dh) / 2
    return scale, dx, dy, dw, dh


def canvas_to_image(canvas) -> Optional[Image.Image]:
    """Coerce a drawing surface to an RGBA PIL image.

    Accepts a PIL image in any mode or a numpy array shaped HxW
    (greyscale), HxWx3 (RGB) or HxWx4 (RGBA). Arrays are uint8 in 0-255
    or floating point in 0-1; floats are scaled to 0-255 and clipped.

    Returns:
        RGBA image, or None if the canvas is None, has a zero dimension,
        an unsupported shape or an unsupported dtype.
    """
    if canvas is None:
        return None
    if isinstance(canvas, Image.Image):
        if canvas.width == 0 or canvas.height == 0:
            return None
        return canvas.convert('RGBA')

    arr = np.asarray(canvas)
    if arr.ndim not in (2, 3) or arr.shape[0] == 0 or arr.shape[1] == 0:
        return None
    if np.issubdtype(arr.dtype, np.floating):
        arr = np.clip(np.rint(arr * 255.0), 0, 255).astype(np.uint8)
    elif arr.dtype != np.uint8:
        return None
    if arr.ndim == 2:
        return Image.fromarray(arr).convert('RGBA')
    if arr.shape[2] == 3:
        return Image.fromarray(arr).convert('RGBA')
    if arr.shape[2] == 4:
        return Image.fromarray(arr)
    return None


def drawing_ink_mask(rgba: np.ndarray) -> np.ndarray:
    """Ink pixels of an RGBA array: visible and not near-white.

    Practice canvases have a transparent background, so a pixel is ink
    when its alpha is above ALPHA_THRESHOLD and at least one colour
    channel is below INK_THRESHOLD.
    """
    rgb = rgba[..., :3]
    alpha = rgba[..., 3]
    return (alpha > ALPHA_THRESHOLD) & np.any(rgb < INK_THRESHOLD, axis=-1)


def get_ink_bbox(mask: np.ndarray) -> Optional[BBox]:
    """Get bounding box of True pixels in mask.

    Returns:
        BBox of pixel indices (inclusive), or None if the mask has no
        True pixels.

    Example:
        >>> mask = np.zeros((100, 100), dtype=bool)
        >>> mask[20:80, 30:70] = True
        >>> get_ink_bbox(mask).to_tuple()
        (30.0, 20.0, 69.0, 79.0)
    """
    rows, cols = np.where(mask)
    if len(rows) == 0:
        return None

    return BBox(
        x_min=float(cols.min()),
        y_min=float(rows.min()),
        x_max=float(cols.max()),
        y_max=float(rows.max())
    )


def render_reference_image(ref_strokes: Sequence[Stroke],
                           size: int = RASTER_SIZE,
                           pad: int = RASTER_PAD,
                           stroke_width: int = RASTER_STROKE_WIDTH) -> Image.Image:
    """Draw reference stroke paths black on a white greyscale raster.

    The bounding box of all paths is fitted into the inner area with
    fit_and_center. Paths with fewer than 2 points are skipped. Lines use
    round caps and joins.
    """
    paths = [as_points(stroke) for stroke in ref_strokes]
    box = bounding_box([p for path in paths for p in path])
    range_x, range_y = axis_ranges(box)
    scale, dx, dy, _, _ = fit_and_center(range_x, range_y, size, pad)

    img = Image.new('L', (size, size), 255)
    draw = ImageDraw.Draw(img)
    radius = stroke_width / 2

    for path in paths:
        if len(path) < 2:
            continue
        xy = [
            (dx + (p.x - box.x_min) * scale, dy + (p.y - box.y_min) * scale)
            for p in path
        ]
        draw.line(xy, fill=0, width=stroke_width, joint='curve')
        # Round caps
        for cx, cy in (xy[0], xy[-1]):
            draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=0)

    return img


def render_drawing_image(canvas, size: int = RASTER_SIZE,
                         pad: int = RASTER_PAD) -> Image.Image:
    """Crop a drawing to its ink, then scale and centre it on white.

    Returns an opaque white RGBA raster; it stays blank when the canvas is
    unusable or holds no ink.
    """
    out = Image.new('RGBA', (size, size), (255, 255, 255, 255))
    src = canvas_to_image(canvas)
    if src is None:
        return out

    box = get_ink_bbox(drawing_ink_mask(np.asarray(src)))
    if box is None:
        return out

    crop_w = box.width + 1
    crop_h = box.height + 1
    _, dx, dy, dw, dh = fit_and_center(crop_w, crop_h, size, pad)

    crop = src.crop((int(box.x_min), int(box.y_min), int(box.x_max) + 1, int(box.y_max) + 1))
    fitted = crop.resize((max(1, round(dw)), max(1, round(dh))), Image.Resampling.BILINEAR)
    out.alpha_composite(fitted, dest=(int(round(dx)), int(round(dy))))
    return out


class PillowRasterizer(InkRasterizer):
    """InkRasterizer drawing with PIL.ImageDraw on RASTER_SIZE rasters."""

    def __init__(self, size: int = RASTER_SIZE, pad: int = RASTER_PAD,
                 stroke_width: int = RASTER_STROKE_WIDTH):
        self.size = size
        self.pad = pad
        self.stroke_width = stroke_width

    def reference_mask(self, ref_strokes: Sequence[Stroke]) -> np.ndarray:
        img = render_reference_image(ref_strokes, self.size, self.pad, self.stroke_width)
        return np.asarray(img) < INK_THRESHOLD

    def drawing_mask(self, canvas) -> np.ndarray:
        img = render_drawing_image(canvas, self.size, self.pad)
        return drawing_ink_mask(np.asarray(img))
