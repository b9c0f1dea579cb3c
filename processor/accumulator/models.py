"""
Data models for the Accumulator module.
"""
from dataclasses import dataclass, field
from typing import Dict, List

from data_transformers.models import ClusteredEvent, TechHubLocation


@dataclass
class HubAccumulator:
    """Running record for one hub during a single aggregation call."""
    hub: TechHubLocation
    clusters: List[ClusteredEvent] = field(default_factory=list)
    # dict keys as an insertion-ordered set
    keywords: Dict[str, None] = field(default_factory=dict)
    total_velocity: float = 0.0
    has_breaking: bool = False

    @property
    def news_count(self) -> int:
        return len(self.clusters)

    @property
    def matched_keywords(self) -> List[str]:
        return list(self.keywords)

    def add(self, cluster: ClusteredEvent, keyword: str):
        """Fold one matched cluster into the record."""
        self.clusters.append(cluster)
        self.keywords[keyword] = None
        self.total_velocity += cluster.sources_per_hour
        if cluster.is_alert:
            self.has_breaking = True
