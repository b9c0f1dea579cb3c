"""
Data Models for Aggregation Input

These dataclasses define the records the activity pipeline consumes:
- ClusteredEvent: a deduplicated story cluster from the clustering stage
- TechHubLocation: static descriptor of a tracked tech hub
- HubMatch: result of matching one title against the hub index

All of them are read-only inputs to the processor.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, List, Union

from constants import HubTier


@dataclass(frozen=True)
class ClusterVelocity:
    """How fast a story cluster is spreading."""
    sources_per_hour: Optional[float] = None


@dataclass(frozen=True)
class ClusteredEvent:
    """
    A deduplicated news story cluster.

    Produced by the upstream clustering pipeline. Only the fields the
    activity aggregation reads are modelled here.
    """
    # Content
    primary_title: str
    primary_link: str = ""

    # Signals
    velocity: Optional[ClusterVelocity] = None
    is_alert: bool = False

    # Identity (optional, upstream cluster id)
    id: Optional[str] = None

    @property
    def sources_per_hour(self) -> float:
        """Velocity contribution, 0 when missing or not a finite number."""
        if self.velocity is None:
            return 0.0
        value = self.velocity.sources_per_hour
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
            return 0.0
        return float(value)


@dataclass(frozen=True)
class TechHubLocation:
    """
    Static descriptor of a tech hub.

    Examples:
        - sf-bay-area: "Bay Area", San Francisco, USA, tier=mega
        - shenzhen: "Shenzhen", Shenzhen, China, tier=mega
    """
    # Identity
    id: str
    name: str

    # Location
    city: str = ""
    country: str = ""
    lat: float = 0.0
    lon: float = 0.0

    # Classification; unknown tiers are kept as the raw string
    tier: Optional[Union[HubTier, str]] = None

    # Extra title keywords used by the static matcher
    keywords: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Convert string tier to enum if it is a known tier."""
        if isinstance(self.tier, str) and not isinstance(self.tier, HubTier):
            try:
                object.__setattr__(self, "tier", HubTier(self.tier))
            except ValueError:
                pass

    @property
    def tier_value(self) -> Optional[str]:
        """Tier as a plain string (None when missing)."""
        if isinstance(self.tier, HubTier):
            return self.tier.value
        return self.tier


@dataclass(frozen=True)
class HubMatch:
    """One hub matched against an event title."""
    hub_id: str
    hub: TechHubLocation
    confidence: float               # 0..1
    matched_keyword: str            # keyword that produced the match
