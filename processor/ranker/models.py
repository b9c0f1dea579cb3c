"""
Data models for the Ranker module.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from constants import ActivityLevel, Trend


@dataclass(frozen=True)
class TopStory:
    """A representative story for a hub."""
    title: str
    link: str

    def to_dict(self) -> dict:
        return {"title": self.title, "link": self.link}


@dataclass
class TechHubActivity:
    """Activity at one tech hub, as shown on the dashboard."""
    hub_id: str
    name: str
    city: str
    country: str
    lat: float
    lon: float
    tier: Optional[str]
    activity_level: ActivityLevel
    score: float
    news_count: int
    has_breaking: bool
    trend: Trend
    top_stories: List[TopStory] = field(default_factory=list)
    matched_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hub_id": self.hub_id,
            "name": self.name,
            "city": self.city,
            "country": self.country,
            "lat": self.lat,
            "lon": self.lon,
            "tier": self.tier,
            "activity_level": self.activity_level.value,
            "score": self.score,
            "news_count": self.news_count,
            "has_breaking": self.has_breaking,
            "trend": self.trend.value,
            "top_stories": [s.to_dict() for s in self.top_stories],
            "matched_keywords": list(self.matched_keywords),
        }
