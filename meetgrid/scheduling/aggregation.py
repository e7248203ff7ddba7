"""Availability aggregation.

Turns the multiset of scores participants gave one slot into a consensus
ratio and a display tier. The tier, not its color, is the contract; the
frontend maps tiers to swatches.
"""
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from fractions import Fraction
from typing import Dict, Iterable, Optional


class Availability(IntEnum):
    """A participant's answer for one slot, valued by its score."""

    UNAVAILABLE = 0
    MAYBE = 1
    AVAILABLE = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_label(cls, label: str) -> "Availability":
        try:
            return _BY_LABEL[label.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown availability {label!r}, expected OK, MAYBE or NG") from None


_LABELS = {
    Availability.AVAILABLE: "OK",
    Availability.MAYBE: "MAYBE",
    Availability.UNAVAILABLE: "NG",
}
_BY_LABEL = {label: availability for availability, label in _LABELS.items()}
_SYMBOLS = {
    Availability.AVAILABLE: "◯",
    Availability.MAYBE: "△",
    Availability.UNAVAILABLE: "✕",
}

MAX_SCORE = int(Availability.AVAILABLE)
HIGH_THRESHOLD = Fraction(7, 10)
MODERATE_THRESHOLD = Fraction(2, 5)


class Tier(str, Enum):
    FULL = "full"
    NO_CONFLICTS = "no_conflicts"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Consensus:
    contributors: int
    total: int
    tier: Tier
    counts: Dict[Availability, int] = field(default_factory=dict)

    @property
    def ratio(self) -> Optional[float]:
        """Share of the maximum possible score; None when nobody answered."""
        if not self.contributors:
            return None
        return self.total / (MAX_SCORE * self.contributors)


def classify(total: int, contributors: int, has_unavailable: bool) -> Tier:
    """Map an aggregate to its tier. First matching rule wins."""
    if contributors == 0:
        return Tier.NEUTRAL

    ratio = Fraction(total, MAX_SCORE * contributors)
    if ratio == 1:
        return Tier.FULL
    if not has_unavailable:
        return Tier.NO_CONFLICTS
    if ratio > HIGH_THRESHOLD:
        return Tier.HIGH
    if ratio >= MODERATE_THRESHOLD:
        return Tier.MODERATE
    return Tier.LOW


def aggregate(scores: Iterable[int]) -> Consensus:
    """Aggregate one slot's scores, one per contributing participant.

    Raises:
        ValueError: if a score is not 0, 1 or 3
    """
    counts: Counter = Counter()
    for score in scores:
        try:
            counts[Availability(score)] += 1
        except ValueError:
            raise ValueError(f"Invalid availability score {score!r}") from None

    contributors = sum(counts.values())
    total = sum(int(availability) * n for availability, n in counts.items())
    tier = classify(total, contributors, counts[Availability.UNAVAILABLE] > 0)

    return Consensus(
        contributors=contributors,
        total=total,
        tier=tier,
        counts={availability: counts[availability] for availability in Availability},
    )
