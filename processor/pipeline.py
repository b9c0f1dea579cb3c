"""
Hub Activity Pipeline - Orchestrator for tech-hub activity aggregation.

Pipeline Flow (single pass, no I/O):
1. Accumulate: match each cluster title to hubs, fold into per-hub records
2. Score: weighted, clamped activity score per hub
3. Classify: activity level and trend
4. Rank: select top stories, build records, sort by score

Each call builds its own per-hub mapping and discards it on return, so
calls share no state and are safe to run concurrently.
"""
from typing import Iterable, List, Optional

from loguru import logger

from data_transformers.models import ClusteredEvent
from matching import HubMatcher
from .config import ActivityConfig
from .accumulator import Accumulator
from .scorer import Scorer
from .classifier import Classifier
from .ranker import Ranker, TechHubActivity


class TechActivityPipeline:
    """
    Main aggregation orchestrator.

    Usage:
        pipeline = TechActivityPipeline(StaticHubMatcher.from_catalog())
        activities = pipeline.aggregate(clusters)
    """

    def __init__(self, matcher: HubMatcher, config: ActivityConfig = None):
        """
        Args:
            matcher: Title-to-hub matcher
            config: Aggregation config (defaults to built-in constants)
        """
        self.config = config or ActivityConfig()
        self.accumulator = Accumulator(matcher, self.config)
        self.scorer = Scorer(self.config)
        self.classifier = Classifier(self.config)
        self.ranker = Ranker(self.config)

    def aggregate(self, clusters: Iterable[ClusteredEvent]) -> List[TechHubActivity]:
        """
        Run the full aggregation.

        Args:
            clusters: Clustered events in arrival order

        Returns:
            One TechHubActivity per hub with at least one match, sorted by
            score descending
        """
        clusters = list(clusters)
        accumulators = self.accumulator.accumulate(clusters)

        activities = []
        for hub_id, acc in accumulators.items():
            score = self.scorer.score(acc)
            activities.append(self.ranker.build_activity(
                hub_id=hub_id,
                acc=acc,
                score=score,
                activity_level=self.classifier.classify_activity_level(score, acc.has_breaking),
                trend=self.classifier.classify_trend(acc.total_velocity, acc.news_count),
            ))

        ranked = self.ranker.rank(activities)
        logger.info(f"Aggregated {len(clusters)} clusters into {len(ranked)} active hubs")
        return ranked

    def top_active_hubs(
        self,
        clusters: Iterable[ClusteredEvent],
        limit: int = None
    ) -> List[TechHubActivity]:
        """Leading min(limit, total) hubs of the ranked aggregation."""
        if limit is None:
            limit = self.config.default_top_hubs_limit
        return self.ranker.top(self.aggregate(clusters), limit)

    def hub_activity(
        self,
        hub_id: str,
        clusters: Iterable[ClusteredEvent]
    ) -> Optional[TechHubActivity]:
        """Activity for one hub, or None if it had no qualifying matches."""
        for activity in self.aggregate(clusters):
            if activity.hub_id == hub_id:
                return activity
        return None


def aggregate_tech_activity(
    clusters: Iterable[ClusteredEvent],
    matcher: HubMatcher,
    config: ActivityConfig = None
) -> List[TechHubActivity]:
    """Ranked activity for every hub matched by the clusters."""
    return TechActivityPipeline(matcher, config).aggregate(clusters)


def get_top_active_hubs(
    clusters: Iterable[ClusteredEvent],
    matcher: HubMatcher,
    limit: int = None,
    config: ActivityConfig = None
) -> List[TechHubActivity]:
    """The most active hubs, at most `limit` of them."""
    return TechActivityPipeline(matcher, config).top_active_hubs(clusters, limit)


def get_hub_activity(
    hub_id: str,
    clusters: Iterable[ClusteredEvent],
    matcher: HubMatcher,
    config: ActivityConfig = None
) -> Optional[TechHubActivity]:
    """Activity for a single hub, or None."""
    return TechActivityPipeline(matcher, config).hub_activity(hub_id, clusters)
