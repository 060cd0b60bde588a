"""Named color schemes resolving symbolic segment colors."""

from __future__ import annotations

from dataclasses import dataclass

from .models import Color, RawColor

DEFAULT_SCHEME_NAME = "Default"


@dataclass(frozen=True)
class ColorScheme:
    name: str
    good: str
    degraded: str
    bad: str
    dim_icon: str
    text: str = "#dddddd"
    background: str = "#222222"

    def lookup(self, name: str) -> str | None:
        return {
            "good": self.good,
            "degraded": self.degraded,
            "bad": self.bad,
            "dim-icon": self.dim_icon,
        }.get(name)

    def resolve(self, color: Color | None) -> str | None:
        if color is None:
            return None
        if isinstance(color, RawColor):
            return color.to_hex()
        return self.lookup(color.name)

    def resolve_rgb(self, color: Color | None, fallback: str) -> tuple[int, int, int]:
        value = self.resolve(color) or fallback
        c = RawColor.hex(value)
        return (c.red, c.green, c.blue)


SCHEMES: dict[str, ColorScheme] = {
    "Default": ColorScheme(
        name="Default",
        good="#6d6",
        degraded="#dd6",
        bad="#d66",
        dim_icon="#777",
    ),
    "Solarized": ColorScheme(
        name="Solarized",
        good="#859900",
        degraded="#b58900",
        bad="#dc322f",
        dim_icon="#586e75",
        text="#eee8d5",
        background="#002b36",
    ),
}


def list_schemes() -> list[str]:
    return sorted(SCHEMES.keys())


def get_scheme(name: str | None) -> ColorScheme:
    if not name:
        return SCHEMES[DEFAULT_SCHEME_NAME]
    return SCHEMES.get(name, SCHEMES[DEFAULT_SCHEME_NAME])


def scheme_from_map(colors: dict[str, str], base: str | None = None) -> ColorScheme:
    """Build a scheme from a ``{"good": "#6d6", "dim-icon": ...}`` mapping."""
    scheme = get_scheme(base)
    return ColorScheme(
        name=scheme.name,
        good=colors.get("good", scheme.good),
        degraded=colors.get("degraded", scheme.degraded),
        bad=colors.get("bad", scheme.bad),
        dim_icon=colors.get("dim-icon", colors.get("dim_icon", scheme.dim_icon)),
        text=colors.get("text", scheme.text),
        background=colors.get("background", scheme.background),
    )
