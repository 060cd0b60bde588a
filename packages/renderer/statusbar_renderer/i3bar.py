"""i3bar protocol encoding of segment descriptors with pango markup."""

from __future__ import annotations

import json
from html import escape
from typing import IO, Any, Sequence

from .glyphs import GlyphRegistry
from .models import DisplayDescriptor, Glyph
from .themes import ColorScheme, get_scheme

SPACER = "<span size='xx-small'> </span>"

PROTOCOL_HEADER = {"version": 1, "click_events": True}


class I3barEncoder:
    """Lays out icon, spacer and text for each segment as one i3bar block."""

    def __init__(self, scheme: ColorScheme | None = None, glyphs: GlyphRegistry | None = None) -> None:
        self.scheme = scheme or get_scheme(None)
        self.glyphs = glyphs or GlyphRegistry()

    def icon_markup(self, glyph: Glyph) -> str:
        resolved = self.glyphs.resolve(glyph.icon_id)
        if resolved is None:
            return ""
        attrs = f"font_family='{escape(resolved.font)}'"
        color = self.scheme.resolve(glyph.color)
        if color:
            attrs += f" color='{color}'"
        return f"<span {attrs}>{escape(resolved.char, quote=False)}</span>"

    def full_text(self, d: DisplayDescriptor) -> str:
        parts: list[str] = []
        icon = self.icon_markup(d.icon)
        if icon:
            parts.append(icon)
        if d.secondary_text:
            parts.append(escape(d.secondary_text, quote=False))
        for extra in d.extra_icons:
            markup = self.icon_markup(extra)
            if markup:
                parts.append(markup)
        if d.primary_text:
            parts.append(escape(d.primary_text, quote=False))
        return SPACER.join(parts)

    def block(self, name: str, d: DisplayDescriptor) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": name,
            "full_text": self.full_text(d),
            "markup": "pango",
        }
        color = self.scheme.resolve(d.color)
        if color:
            out["color"] = color
        if d.urgent:
            out["urgent"] = True
        return out

    def status_line(self, segments: Sequence[tuple[str, DisplayDescriptor]]) -> list[dict[str, Any]]:
        return [self.block(name, d) for name, d in segments]


class I3barStream:
    """Writes the protocol header and the endless array of status lines."""

    def __init__(self, out: IO[str], encoder: I3barEncoder) -> None:
        self.out = out
        self.encoder = encoder
        self._lines = 0

    def start(self) -> None:
        self.out.write(json.dumps(PROTOCOL_HEADER) + "\n[\n")
        self.out.flush()

    def write(self, segments: Sequence[tuple[str, DisplayDescriptor]]) -> None:
        prefix = "," if self._lines else ""
        line = json.dumps(self.encoder.status_line(segments), ensure_ascii=False)
        self.out.write(prefix + line + "\n")
        self.out.flush()
        self._lines += 1
