"""Icon id to font glyph resolution for icon webfonts."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

_log = logging.getLogger("statusbar.glyphs")

_SCSS_ENTRY = re.compile(r'"([a-z0-9-]+)"\s*:\s*([0-9A-Fa-f]{4,6})\s*,?')

MDI_FONT = "Material Design Icons"
FA_FONT = "Font Awesome 5 Free"

# Enough of Font Awesome for the media segment without shipping the font metadata.
_FA_BUILTIN = {
    "music": 0xF001,
    "play": 0xF04B,
    "pause": 0xF04C,
    "stop": 0xF04D,
}


@dataclass(frozen=True)
class ResolvedGlyph:
    font: str
    char: str


class GlyphRegistry:
    def __init__(self) -> None:
        self._fonts: dict[str, tuple[str, dict[str, int]]] = {"fa": (FA_FONT, dict(_FA_BUILTIN))}

    def register(self, prefix: str, font: str, codepoints: dict[str, int]) -> None:
        merged = dict(self._fonts[prefix][1]) if prefix in self._fonts else {}
        merged.update(codepoints)
        self._fonts[prefix] = (font, merged)

    def load_mdi(self, webfont_dir: Path) -> int:
        """Load Material Design Icons code points from the webfont checkout.

        Returns the number of icons loaded; a missing directory loads none.
        """
        variables = Path(webfont_dir).expanduser() / "scss" / "_variables.scss"
        try:
            source = variables.read_text(encoding="utf-8")
        except OSError as exc:
            _log.warning(
                f"mdi variables unavailable: {exc}",
                extra={"event": "glyphs_mdi_missing"},
            )
            return 0
        codepoints = parse_scss_codepoints(source)
        self.register("mdi", MDI_FONT, codepoints)
        return len(codepoints)

    def resolve(self, icon_id: str) -> ResolvedGlyph | None:
        prefix, sep, name = icon_id.partition("-")
        if not sep or prefix not in self._fonts:
            return None
        font, codepoints = self._fonts[prefix]
        cp = codepoints.get(name)
        if cp is None:
            return None
        return ResolvedGlyph(font=font, char=chr(cp))


def parse_scss_codepoints(source: str) -> dict[str, int]:
    return {name: int(value, 16) for name, value in _SCSS_ENTRY.findall(source)}
