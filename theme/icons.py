"""
Icons for the TicTacToe window.
Drawn with Pillow so no image files need to ship with the game.
"""

import math
from PIL import Image, ImageColor, ImageDraw

# Draw large then shrink, for smooth edges
SUPERSAMPLE = 4
GEAR_TEETH = 8


def draw_settings_icon(size: int = 24, color: str = "#000000") -> Image.Image:
    """
    Draw a gear icon.

    Args:
        size: Width and height in pixels.
        color: Any colour Pillow understands (e.g. "#ffffff").

    Returns:
        RGBA image with a transparent background.
    """
    if size <= 0:
        raise ValueError(f"Icon size must be positive, got {size}")

    rgba = ImageColor.getrgb(color)
    if len(rgba) == 3:
        rgba = rgba + (255,)

    big = size * SUPERSAMPLE
    image = Image.new("RGBA", (big, big), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    center = big / 2
    outer = big * 0.46     # Tip of the teeth
    body = big * 0.34      # Gear body radius
    hole = big * 0.14      # Centre hole
    tooth_half = math.pi / GEAR_TEETH / 2

    # Teeth
    for i in range(GEAR_TEETH):
        angle = 2 * math.pi * i / GEAR_TEETH
        points = []
        for radius, offset in ((body, -tooth_half * 1.4), (outer, -tooth_half),
                               (outer, tooth_half), (body, tooth_half * 1.4)):
            points.append((
                center + radius * math.cos(angle + offset),
                center + radius * math.sin(angle + offset),
            ))
        draw.polygon(points, fill=rgba)

    # Body, then punch out the centre
    draw.ellipse(
        (center - body, center - body, center + body, center + body),
        fill=rgba,
    )
    draw.ellipse(
        (center - hole, center - hole, center + hole, center + hole),
        fill=(0, 0, 0, 0),
    )

    return image.resize((size, size), Image.Resampling.LANCZOS)
