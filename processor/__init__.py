"""
Processor package for the Tech-Hub Activity Dashboard.

4-Step Aggregation:
- Step 1: Accumulator - Fold matched clusters into per-hub records
- Step 2: Scorer - Weighted, clamped activity score
- Step 3: Classifier - Activity level and trend
- Step 4: Ranker - Top stories, output records, ordering

Main entry point: TechActivityPipeline class
"""

from .config import ActivityConfig
from .accumulator import Accumulator, HubAccumulator
from .scorer import Scorer
from .classifier import Classifier
from .ranker import Ranker, TechHubActivity, TopStory
from .pipeline import (
    TechActivityPipeline,
    aggregate_tech_activity,
    get_top_active_hubs,
    get_hub_activity,
)

__all__ = [
    # Pipeline
    "TechActivityPipeline",
    "aggregate_tech_activity",
    "get_top_active_hubs",
    "get_hub_activity",
    # Config
    "ActivityConfig",
    # Step 1: Accumulator
    "Accumulator",
    "HubAccumulator",
    # Step 2: Scorer
    "Scorer",
    # Step 3: Classifier
    "Classifier",
    # Step 4: Ranker
    "Ranker",
    "TechHubActivity",
    "TopStory",
]
