import logging
from typing import Tuple

import numpy as np

from grade_calculator.config import BRAND_ICON_SIZE, THEME

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


# ------------------------
# Colour helpers
# ------------------------
def hex_to_rgb(colour: str) -> RGB:
    colour = colour.lstrip("#")
    if len(colour) != 6:
        raise ValueError(f"Expected a #RRGGBB colour (got {colour!r}).")
    return int(colour[0:2], 16), int(colour[2:4], 16), int(colour[4:6], 16)


def _blend(base: np.ndarray, colour: RGB, alpha: float, mask: np.ndarray) -> None:
    overlay = np.array(colour, dtype=float)
    base[mask] = base[mask] * (1.0 - alpha) + overlay * alpha


def _distance_to_segment(xs: np.ndarray, ys: np.ndarray, p1, p2) -> np.ndarray:
    (x1, y1), (x2, y2) = p1, p2
    dx, dy = x2 - x1, y2 - y1
    t = ((xs - x1) * dx + (ys - y1) * dy) / float(dx * dx + dy * dy)
    t = np.clip(t, 0.0, 1.0)
    return np.hypot(xs - (x1 + t * dx), ys - (y1 + t * dy))


# ------------------------
# Brand icon
# ------------------------
def brand_icon_pixels(
    size: int = BRAND_ICON_SIZE,
    start: str = THEME["accent"],
    end: str = THEME["accent_dark"],
    background: str = THEME["background"],
) -> np.ndarray:
    """
    Gradient disc with a faint inner ring and a checkmark, as a
    (s, s, 3) uint8 RGB array. Sizes below 32 are raised to 32.
    """
    s = max(32, int(size))
    ys, xs = np.mgrid[0:s, 0:s].astype(float)
    xs += 0.5
    ys += 0.5

    # Diagonal gradient from top-left to bottom-right
    t = np.clip((xs + ys) / (2.0 * s), 0.0, 1.0)[..., None]
    c1 = np.array(hex_to_rgb(start), dtype=float)
    c2 = np.array(hex_to_rgb(end), dtype=float)
    img = c1 * (1.0 - t) + c2 * t

    centre = s / 2.0
    radius = np.hypot(xs - centre, ys - centre)
    outside = radius > centre
    img[outside] = np.array(hex_to_rgb(background), dtype=float)

    ring_radius = centre - s / 12.0
    ring_width = max(2.0, s / 28.0)
    ring = np.abs(radius - ring_radius) <= ring_width / 2.0
    _blend(img, (255, 255, 255), 40 / 255.0, ring & ~outside)

    stroke = max(3.0, s / 18.0)
    p1, p2, p3 = (s / 4, s / 2), (s / 2, s - s / 3), (s - s / 6, s / 3)
    check = np.minimum(
        _distance_to_segment(xs, ys, p1, p2),
        _distance_to_segment(xs, ys, p2, p3),
    ) <= stroke / 2.0
    _blend(img, (255, 255, 255), 180 / 255.0, check & ~outside)

    return np.clip(np.rint(img), 0, 255).astype(np.uint8)


def pixels_to_photo_rows(pixels: np.ndarray) -> str:
    """Tk `PhotoImage.put` data: one {#rrggbb ...} group per row."""
    rows = []
    for row in pixels:
        rows.append("{" + " ".join("#%02x%02x%02x" % tuple(int(c) for c in px) for px in row) + "}")
    return " ".join(rows)


def make_brand_icon(master, size: int = BRAND_ICON_SIZE):
    import tkinter as tk

    pixels = brand_icon_pixels(size)
    height, width = pixels.shape[:2]
    image = tk.PhotoImage(master=master, width=width, height=height)
    image.put(pixels_to_photo_rows(pixels), to=(0, 0))
    logger.debug("Rendered %dx%d brand icon", width, height)
    return image
