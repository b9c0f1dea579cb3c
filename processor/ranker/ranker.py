"""
Ranker - Step 4 of hub activity aggregation

Selects representative stories, assembles TechHubActivity records
and orders them for display.
"""
from typing import List

from constants import ActivityLevel, Trend
from ..config import ActivityConfig
from ..accumulator import HubAccumulator
from .models import TechHubActivity, TopStory


class Ranker:
    """
    Step 4: Presentation and ranking

    Records are ordered by score descending. Equal scores are ordered by
    hub_id ascending so the result never depends on matcher order.
    """

    def __init__(self, config: ActivityConfig = None):
        self.config = config or ActivityConfig()

    def select_top_stories(self, acc: HubAccumulator) -> List[TopStory]:
        """First stories in arrival order, not re-sorted."""
        return [
            TopStory(title=c.primary_title, link=c.primary_link)
            for c in acc.clusters[:self.config.max_top_stories]
        ]

    def build_activity(
        self,
        hub_id: str,
        acc: HubAccumulator,
        score: float,
        activity_level: ActivityLevel,
        trend: Trend
    ) -> TechHubActivity:
        """Assemble the output record for one hub."""
        hub = acc.hub
        return TechHubActivity(
            hub_id=hub_id,
            name=hub.name,
            city=hub.city,
            country=hub.country,
            lat=hub.lat,
            lon=hub.lon,
            tier=hub.tier_value,
            activity_level=activity_level,
            score=score,
            news_count=acc.news_count,
            has_breaking=acc.has_breaking,
            trend=trend,
            top_stories=self.select_top_stories(acc),
            matched_keywords=acc.matched_keywords,
        )

    def rank(self, activities: List[TechHubActivity]) -> List[TechHubActivity]:
        return sorted(activities, key=lambda a: (-a.score, a.hub_id))

    def top(self, ranked: List[TechHubActivity], limit: int) -> List[TechHubActivity]:
        """Leading min(limit, total) records of an already ranked list."""
        return ranked[:max(0, limit)]
