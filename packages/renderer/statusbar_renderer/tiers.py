"""Ordered threshold tables mapping metric values to severity tiers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum


class Tier(str, Enum):
    NORMAL = "normal"
    GOOD = "good"
    DEGRADED = "degraded"
    BAD = "bad"
    URGENT = "urgent"


class Comparison(str, Enum):
    ABOVE = ">"
    AT_LEAST = ">="
    BELOW = "<"
    AT_MOST = "<="

    @property
    def upward(self) -> bool:
        return self in (Comparison.ABOVE, Comparison.AT_LEAST)

    def matches(self, value: float, boundary: float) -> bool:
        if self is Comparison.ABOVE:
            return value > boundary
        if self is Comparison.AT_LEAST:
            return value >= boundary
        if self is Comparison.BELOW:
            return value < boundary
        return value <= boundary


@dataclass(frozen=True)
class TierRule:
    boundary: float
    comparison: Comparison
    tier: Tier


@dataclass(frozen=True)
class ThresholdTiers:
    """Rules listed from most to least severe; the first matching rule wins.

    Upward rules (``>``/``>=``) must have descending boundaries and downward
    rules (``<``/``<=``) ascending ones, so that a value crossing a severe
    boundary is never shadowed by a milder rule listed earlier.
    """

    rules: tuple[TierRule, ...]

    def __post_init__(self) -> None:
        up = [r.boundary for r in self.rules if r.comparison.upward]
        down = [r.boundary for r in self.rules if not r.comparison.upward]
        if up != sorted(up, reverse=True):
            raise ValueError("upward tier boundaries must be listed in descending order")
        if down != sorted(down):
            raise ValueError("downward tier boundaries must be listed in ascending order")

    @classmethod
    def of(cls, *rules: tuple[str, float, Tier]) -> "ThresholdTiers":
        return cls(tuple(TierRule(boundary=float(b), comparison=Comparison(op), tier=t) for op, b, t in rules))

    def classify(self, value: float) -> Tier:
        if value is None or math.isnan(value):
            return Tier.NORMAL
        for rule in self.rules:
            if rule.comparison.matches(value, rule.boundary):
                return rule.tier
        return Tier.NORMAL


BATTERY_TIERS = ThresholdTiers.of(
    ("<=", 5, Tier.URGENT),
    ("<=", 15, Tier.BAD),
    ("<=", 25, Tier.DEGRADED),
)

LOAD_TIERS = ThresholdTiers.of(
    (">", 8, Tier.URGENT),
    (">", 4, Tier.BAD),
    (">", 1, Tier.DEGRADED),
)

MEMORY_TIERS = ThresholdTiers.of(
    ("<", 0.5, Tier.URGENT),
    ("<", 1, Tier.BAD),
    ("<", 2, Tier.DEGRADED),
    (">", 12, Tier.GOOD),
)

TEMPERATURE_TIERS = ThresholdTiers.of(
    (">", 90, Tier.URGENT),
    (">", 70, Tier.BAD),
    (">", 60, Tier.DEGRADED),
)

LOAD_WARMUP = timedelta(minutes=10)


def classify(value: float, tiers: ThresholdTiers) -> Tier:
    return tiers.classify(value)


def classify_load(
    load5: float,
    uptime: timedelta,
    tiers: ThresholdTiers = LOAD_TIERS,
    warmup: timedelta = LOAD_WARMUP,
) -> Tier:
    # Load averages run high for a few minutes after boot.
    if uptime < warmup:
        return Tier.NORMAL
    return tiers.classify(load5)
