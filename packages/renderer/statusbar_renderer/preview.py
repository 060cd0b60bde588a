"""Raster preview of a status line, for screenshots and `statusbar preview`."""

from __future__ import annotations

import base64
from io import BytesIO
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from .glyphs import GlyphRegistry
from .models import Color, DisplayDescriptor, Glyph
from .themes import ColorScheme, get_scheme

_PAD = 8
_GAP = 18
_SPACER = 3


class BarPreviewRenderer:
    """Draws segments left to right on a bar-colored strip."""

    def __init__(
        self,
        scheme: ColorScheme | None = None,
        glyphs: GlyphRegistry | None = None,
        height: int = 24,
        icon_font_path: Path | None = None,
    ) -> None:
        self.scheme = scheme or get_scheme(None)
        self.glyphs = glyphs or GlyphRegistry()
        self.height = height
        self._text_font = self._font(height * 2 // 3)
        self._icon_font = self._load_icon_font(icon_font_path, height * 2 // 3)

    def render_image(self, segments: Sequence[tuple[str, DisplayDescriptor]]) -> Image.Image:
        probe = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        width = _PAD * 2 + sum(self._segment_width(probe, d) for _name, d in segments)
        width += _GAP * max(len(segments) - 1, 0)

        bg = self.scheme.resolve_rgb(None, self.scheme.background)
        image = Image.new("RGB", (max(width, 1), self.height), bg)
        draw = ImageDraw.Draw(image)
        x = _PAD
        for _name, d in segments:
            x = self._draw_segment(draw, x, d) + _GAP
        return image

    def render_png(self, segments: Sequence[tuple[str, DisplayDescriptor]]) -> bytes:
        buf = BytesIO()
        self.render_image(segments).save(buf, format="PNG")
        return buf.getvalue()

    def preview_data_url(self, segments: Sequence[tuple[str, DisplayDescriptor]]) -> str:
        b64 = base64.b64encode(self.render_png(segments)).decode("ascii")
        return f"data:image/png;base64,{b64}"

    def _font(self, size: int):
        try:
            return ImageFont.truetype("DejaVuSans.ttf", size)
        except Exception:
            try:
                return ImageFont.truetype("Arial.ttf", size)
            except Exception:
                return ImageFont.load_default()

    @staticmethod
    def _load_icon_font(path: Path | None, size: int):
        if path is None:
            return None
        try:
            return ImageFont.truetype(str(path), size)
        except Exception:
            return None

    def _texts(self, d: DisplayDescriptor) -> list[str]:
        return [t for t in (d.secondary_text, d.primary_text) if t]

    def _icon_width(self, draw: ImageDraw.ImageDraw, glyph: Glyph) -> int:
        resolved = self.glyphs.resolve(glyph.icon_id)
        if resolved is not None and self._icon_font is not None:
            return int(draw.textlength(resolved.char, font=self._icon_font))
        return self.height // 2

    def _segment_width(self, draw: ImageDraw.ImageDraw, d: DisplayDescriptor) -> int:
        glyphs = (d.icon,) + d.extra_icons
        total = sum(self._icon_width(draw, g) + _SPACER for g in glyphs)
        for text in self._texts(d):
            total += int(draw.textlength(text, font=self._text_font)) + _SPACER
        return total

    def _draw_icon(self, draw: ImageDraw.ImageDraw, x: int, glyph: Glyph, color: Color | None) -> int:
        rgb = self.scheme.resolve_rgb(glyph.color or color, self.scheme.text)
        resolved = self.glyphs.resolve(glyph.icon_id)
        w = self._icon_width(draw, glyph)
        if resolved is not None and self._icon_font is not None:
            draw.text((x, self.height // 6), resolved.char, font=self._icon_font, fill=rgb)
        else:
            # No icon font: a swatch in the icon's color stands in for the glyph.
            top = self.height // 4
            draw.rounded_rectangle((x, top, x + w, self.height - top), radius=3, fill=rgb)
        return x + w + _SPACER

    def _draw_segment(self, draw: ImageDraw.ImageDraw, x: int, d: DisplayDescriptor) -> int:
        fill = self.scheme.resolve_rgb(d.color, self.scheme.text)
        if d.urgent:
            bad = self.scheme.resolve_rgb(None, self.scheme.bad)
            draw.rectangle((x - 2, 0, x + self._segment_width(draw, d), self.height), fill=bad)

        x = self._draw_icon(draw, x, d.icon, d.color)
        texts = self._texts(d)
        if d.secondary_text:
            x = self._draw_text(draw, x, texts.pop(0), fill)
        for extra in d.extra_icons:
            x = self._draw_icon(draw, x, extra, d.color)
        for text in texts:
            x = self._draw_text(draw, x, text, fill)
        return x

    def _draw_text(self, draw: ImageDraw.ImageDraw, x: int, text: str, fill: tuple[int, int, int]) -> int:
        draw.text((x, self.height // 6), text, font=self._text_font, fill=fill)
        return x + int(draw.textlength(text, font=self._text_font)) + _SPACER
