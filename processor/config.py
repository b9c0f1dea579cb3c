"""
Configuration for hub activity aggregation.

Contains:
- Match confidence threshold
- Scoring weights and tier bonuses
- Activity level and trend thresholds
- ActivityConfig, the overridable bundle of all of the above
"""
from dataclasses import dataclass, field
from typing import Dict, Optional


# ============================================
# MATCHING
# ============================================

MIN_MATCH_CONFIDENCE = 0.5   # matches below this are not hub evidence


# ============================================
# SCORING
# ============================================

STORY_POINTS = 15            # per matched story
BREAKING_BONUS = 30          # flat bonus when any story is an alert
VELOCITY_WEIGHT = 5          # per source/hour, summed over stories
MAX_SCORE = 100

TIER_BONUS = {
    "mega": 15,
    "major": 8,
    "emerging": 0,
}


# ============================================
# CLASSIFICATION THRESHOLDS
# ============================================

THRESHOLD_HIGH = 50          # score >= 50 OR breaking
THRESHOLD_ELEVATED = 20      # score >= 20

TREND_RISING_VELOCITY = 2.0      # total velocity > 2
TREND_FALLING_VELOCITY = 0.5     # total velocity < 0.5 ...
TREND_FALLING_MIN_STORIES = 1    # ... AND news count > 1


# ============================================
# PRESENTATION
# ============================================

MAX_TOP_STORIES = 3
DEFAULT_TOP_HUBS_LIMIT = 10


@dataclass(frozen=True)
class ActivityConfig:
    """Tuning knobs for one aggregation. Defaults are the constants above."""
    min_confidence: float = MIN_MATCH_CONFIDENCE
    story_points: float = STORY_POINTS
    breaking_bonus: float = BREAKING_BONUS
    velocity_weight: float = VELOCITY_WEIGHT
    max_score: float = MAX_SCORE
    tier_bonus: Dict[str, float] = field(default_factory=lambda: dict(TIER_BONUS))
    threshold_high: float = THRESHOLD_HIGH
    threshold_elevated: float = THRESHOLD_ELEVATED
    trend_rising_velocity: float = TREND_RISING_VELOCITY
    trend_falling_velocity: float = TREND_FALLING_VELOCITY
    trend_falling_min_stories: int = TREND_FALLING_MIN_STORIES
    max_top_stories: int = MAX_TOP_STORIES
    default_top_hubs_limit: int = DEFAULT_TOP_HUBS_LIMIT

    @classmethod
    def from_settings(cls, app_settings=None) -> "ActivityConfig":
        """
        Build a config from application Settings (env / .env overrides).

        Args:
            app_settings: Settings instance (defaults to the global settings)
        """
        if app_settings is None:
            from config import settings as app_settings

        return cls(
            min_confidence=app_settings.MIN_MATCH_CONFIDENCE,
            story_points=app_settings.STORY_POINTS,
            breaking_bonus=app_settings.BREAKING_BONUS,
            velocity_weight=app_settings.VELOCITY_WEIGHT,
            max_score=app_settings.MAX_SCORE,
            tier_bonus=dict(app_settings.TIER_BONUS),
            threshold_high=app_settings.THRESHOLD_HIGH,
            threshold_elevated=app_settings.THRESHOLD_ELEVATED,
            trend_rising_velocity=app_settings.TREND_RISING_VELOCITY,
            trend_falling_velocity=app_settings.TREND_FALLING_VELOCITY,
            trend_falling_min_stories=app_settings.TREND_FALLING_MIN_STORIES,
            max_top_stories=app_settings.MAX_TOP_STORIES,
            default_top_hubs_limit=app_settings.DEFAULT_TOP_HUBS_LIMIT,
        )

    def get_tier_bonus(self, tier: Optional[str]) -> float:
        """Bonus for a tier name; missing or unknown tiers earn 0."""
        if not tier:
            return 0
        return self.tier_bonus.get(tier, 0)
