"""
Classifier - Step 3 of hub activity aggregation

Rule-based, no LLM needed. Derives a discrete activity level from the
score and a trend label from velocity and story count.
"""
from constants import ActivityLevel, Trend
from ..config import ActivityConfig


class Classifier:
    """
    Step 3: Classification

    Activity level (first match wins):
    - high: score >= threshold_high, or any breaking story
    - elevated: score >= threshold_elevated
    - low: otherwise

    Trend (independent of score):
    - rising: total velocity > trend_rising_velocity
    - falling: total velocity < trend_falling_velocity and more than
      trend_falling_min_stories stories
    - stable: otherwise
    """

    def __init__(self, config: ActivityConfig = None):
        self.config = config or ActivityConfig()

    def classify_activity_level(self, score: float, has_breaking: bool) -> ActivityLevel:
        if score >= self.config.threshold_high or has_breaking:
            return ActivityLevel.HIGH
        if score >= self.config.threshold_elevated:
            return ActivityLevel.ELEVATED
        return ActivityLevel.LOW

    def classify_trend(self, total_velocity: float, news_count: int) -> Trend:
        if total_velocity > self.config.trend_rising_velocity:
            return Trend.RISING
        # A single story can't establish a downward trend
        if (total_velocity < self.config.trend_falling_velocity
                and news_count > self.config.trend_falling_min_stories):
            return Trend.FALLING
        return Trend.STABLE
