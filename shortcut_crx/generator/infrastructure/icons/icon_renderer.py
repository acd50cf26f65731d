"""
IconRenderer - draws the generated icons with Pillow.

Two kinds of icons are produced: the letter placeholder used when a site
declares no favicon, and the neutral default shipped in the extension
template.
"""

import os
import tempfile
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from shortcut_crx.core.constants import (
    DEFAULT_ICON_BACKGROUND,
    DEFAULT_ICON_SIZE,
    ICON_FOREGROUND,
    PLACEHOLDER_GLYPH_RATIO,
    PLACEHOLDER_ICON_BACKGROUND,
)

Color = Tuple[int, int, int]

_BOLD_FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")


def _opaque(color: Color) -> Tuple[int, int, int, int]:
    return color + (255,)


class IconRenderer:
    """Renders square PNG icons of a fixed size."""

    def __init__(self, size: int = DEFAULT_ICON_SIZE):
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size

    def render_letter(
        self,
        letter: str,
        destination: Path,
        background: Color = PLACEHOLDER_ICON_BACKGROUND,
    ) -> Path:
        """Draw ``letter`` centered on a rounded square."""
        if len(letter) != 1:
            raise ValueError(f"Expected a single character, got {letter!r}")

        image = self._canvas(background)
        draw = ImageDraw.Draw(image)
        font = self._load_font(int(self.size * PLACEHOLDER_GLYPH_RATIO))
        center = (self.size / 2, self.size / 2)
        draw.text(
            center, letter, fill=_opaque(ICON_FOREGROUND), font=font, anchor="mm"
        )
        return self._save(image, destination)

    def render_default(
        self, destination: Path, background: Color = DEFAULT_ICON_BACKGROUND
    ) -> Path:
        """Draw a plain globe-like mark used when nothing better is known."""
        image = self._canvas(background)
        draw = ImageDraw.Draw(image)
        margin = self.size // 4
        width = max(2, self.size // 24)
        box = (margin, margin, self.size - margin, self.size - margin)
        draw.ellipse(box, outline=_opaque(ICON_FOREGROUND), width=width)
        draw.line(
            (self.size / 2, margin, self.size / 2, self.size - margin),
            fill=_opaque(ICON_FOREGROUND),
            width=width,
        )
        draw.line(
            (margin, self.size / 2, self.size - margin, self.size / 2),
            fill=_opaque(ICON_FOREGROUND),
            width=width,
        )
        return self._save(image, destination)

    def _canvas(self, background: Color) -> Image.Image:
        image = Image.new("RGBA", (self.size, self.size), (0, 0, 0, 0))
        radius = self.size // 6
        ImageDraw.Draw(image).rounded_rectangle(
            (0, 0, self.size - 1, self.size - 1), radius=radius, fill=_opaque(background)
        )
        return image

    @staticmethod
    def _load_font(pixel_size: int) -> ImageFont.ImageFont:
        for name in _BOLD_FONT_CANDIDATES:
            try:
                return ImageFont.truetype(name, pixel_size)
            except OSError:
                continue
        return ImageFont.load_default(size=pixel_size)

    @staticmethod
    def _save(image: Image.Image, destination: Path) -> Path:
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        # Render next to the target and move it in place, concurrent
        # requests may ask for the same letter.
        fd, tmp_name = tempfile.mkstemp(
            dir=destination.parent, prefix=destination.stem, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as handle:
                image.save(handle, format="PNG")
            os.replace(tmp_name, destination)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return destination
