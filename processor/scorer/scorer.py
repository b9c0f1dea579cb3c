"""
Scorer - Step 2 of hub activity aggregation

Turns a hub's running record into a bounded activity score.
"""
from ..config import ActivityConfig
from ..accumulator import HubAccumulator


class Scorer:
    """
    Step 2: Scoring

    score = news_count * story_points
          + breaking_bonus (if any alert)
          + total_velocity * velocity_weight
          + tier bonus
    clamped to [0, max_score].
    """

    def __init__(self, config: ActivityConfig = None):
        self.config = config or ActivityConfig()

    def tier_bonus(self, acc: HubAccumulator) -> float:
        return self.config.get_tier_bonus(acc.hub.tier_value)

    def raw_score(self, acc: HubAccumulator) -> float:
        """Unclamped score."""
        return (
            acc.news_count * self.config.story_points
            + (self.config.breaking_bonus if acc.has_breaking else 0)
            + acc.total_velocity * self.config.velocity_weight
            + self.tier_bonus(acc)
        )

    def score(self, acc: HubAccumulator) -> float:
        return max(0, min(self.config.max_score, self.raw_score(acc)))
