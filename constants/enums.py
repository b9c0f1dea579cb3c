"""
Shared Enums

Application-wide enums used by the matcher, the processor and the API.
"""
from enum import Enum


class HubTier(str, Enum):
    """Static importance classification of a tech hub."""
    MEGA = "mega"
    MAJOR = "major"
    EMERGING = "emerging"


class ActivityLevel(str, Enum):
    """Discrete activity level shown on the dashboard."""
    HIGH = "high"
    ELEVATED = "elevated"
    LOW = "low"


class Trend(str, Enum):
    """Direction of hub activity derived from story velocity."""
    RISING = "rising"
    STABLE = "stable"
    FALLING = "falling"
