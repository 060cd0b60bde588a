"""Typed segment descriptor models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .tiers import Tier


@dataclass(frozen=True)
class NamedColor:
    """Symbolic color resolved by the renderer's color scheme."""

    name: str


@dataclass(frozen=True)
class RawColor:
    """Computed color passed through to the renderer untouched."""

    red: int
    green: int
    blue: int

    @classmethod
    def grey(cls, intensity: int) -> "RawColor":
        n = max(0, min(255, int(intensity)))
        return cls(n, n, n)

    @classmethod
    def hex(cls, value: str) -> "RawColor":
        digits = value.lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hex color: {value}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


Color = Union[NamedColor, RawColor]

DIM_ICON = NamedColor("dim-icon")

_SEVERITY_COLORS: dict[Tier, NamedColor] = {
    Tier.GOOD: NamedColor("good"),
    Tier.DEGRADED: NamedColor("degraded"),
    Tier.BAD: NamedColor("bad"),
}


@dataclass(frozen=True)
class ClickAction:
    """Command to launch when the segment is clicked. Never executed here."""

    command: tuple[str, ...]
    button: str = "left"


@dataclass(frozen=True)
class Glyph:
    icon_id: str
    color: Color | None = None


@dataclass(frozen=True)
class DisplayDescriptor:
    icon: Glyph
    primary_text: str
    secondary_text: str | None = None
    severity: Tier | None = None
    click_action: ClickAction | None = None
    extra_icons: tuple[Glyph, ...] = field(default_factory=tuple)

    @property
    def icon_id(self) -> str:
        return self.icon.icon_id

    @property
    def urgent(self) -> bool:
        return self.severity is Tier.URGENT

    @property
    def color(self) -> NamedColor | None:
        if self.severity is None:
            return None
        return _SEVERITY_COLORS.get(self.severity)
