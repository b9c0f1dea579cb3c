"""
Constants package for the Tech-Hub Activity Dashboard.
"""

from .enums import HubTier, ActivityLevel, Trend

__all__ = [
    "HubTier",
    "ActivityLevel",
    "Trend",
]
