"""
Accumulator - Step 1 of hub activity aggregation

Folds matched clusters into one running record per hub.
"""
from typing import Dict, Iterable

from loguru import logger

from data_transformers.models import ClusteredEvent
from matching import HubMatcher
from ..config import ActivityConfig
from .models import HubAccumulator


class Accumulator:
    """
    Step 1: Accumulation

    Matches every cluster title against the hub index and folds the
    cluster into each hub it matches with enough confidence.
    """

    def __init__(self, matcher: HubMatcher, config: ActivityConfig = None):
        """
        Initialize accumulator.

        Args:
            matcher: Title-to-hub matcher
            config: Aggregation config (defaults to built-in constants)
        """
        self.matcher = matcher
        self.config = config or ActivityConfig()

    def accumulate(self, clusters: Iterable[ClusteredEvent]) -> Dict[str, HubAccumulator]:
        """
        Build per-hub records for one aggregation call.

        Args:
            clusters: Clustered events in arrival order

        Returns:
            Dict of hub_id -> HubAccumulator, in first-match order
        """
        accumulators: Dict[str, HubAccumulator] = {}
        skipped = 0

        for cluster in clusters:
            for match in self.matcher.match(cluster.primary_title):
                if match.confidence < self.config.min_confidence:
                    skipped += 1
                    continue

                acc = accumulators.get(match.hub_id)
                if acc is None:
                    acc = HubAccumulator(hub=match.hub)
                    accumulators[match.hub_id] = acc

                acc.add(cluster, match.matched_keyword)

        if skipped:
            logger.debug(f"Skipped {skipped} low-confidence hub matches")

        return accumulators
