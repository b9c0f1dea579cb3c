"""
Shared test helpers: a stub matcher and a cluster factory.
"""
from typing import Dict, List, Tuple

from data_transformers.models import (
    ClusteredEvent,
    ClusterVelocity,
    HubMatch,
    TechHubLocation,
)
from matching import HubMatcher


class StubMatcher(HubMatcher):
    """Returns fixed matches per title: {title: [(hub, confidence, keyword), ...]}."""

    def __init__(
        self,
        table: Dict[str, List[Tuple[TechHubLocation, float, str]]] = None,
        hubs: List[TechHubLocation] = None,
    ):
        self.table = table or {}
        self.calls: List[str] = []
        self._hubs = list(hubs or [])

    @property
    def hubs(self) -> List[TechHubLocation]:
        return list(self._hubs)

    def match(self, title: str) -> List[HubMatch]:
        self.calls.append(title)
        return [
            HubMatch(hub_id=hub.id, hub=hub, confidence=confidence, matched_keyword=keyword)
            for hub, confidence, keyword in self.table.get(title, [])
        ]


def make_cluster(title, link=None, velocity=None, is_alert=False) -> ClusteredEvent:
    """Build a cluster; velocity is sources per hour or None."""
    return ClusteredEvent(
        primary_title=title,
        primary_link=link if link is not None else f"https://news.example/{title.replace(' ', '-').lower()}",
        velocity=ClusterVelocity(sources_per_hour=velocity) if velocity is not None else None,
        is_alert=is_alert,
    )
