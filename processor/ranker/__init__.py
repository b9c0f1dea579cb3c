"""
Ranker Module - Step 4 of hub activity aggregation

Components:
- Ranker: story selection, record assembly and ordering
- TechHubActivity, TopStory: output records
"""

from .models import TechHubActivity, TopStory
from .ranker import Ranker


__all__ = [
    "Ranker",
    "TechHubActivity",
    "TopStory",
]
