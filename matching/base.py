"""
Hub Matcher Interface

The activity pipeline never looks hubs up itself. It is handed a
HubMatcher, which maps an event title to candidate hubs.
"""
from abc import ABC, abstractmethod
from typing import List

from data_transformers.models import HubMatch, TechHubLocation


class HubMatcher(ABC):
    """Maps an event title to zero or more hub matches."""

    @property
    def hubs(self) -> List[TechHubLocation]:
        """Hubs this matcher can report, empty when it has no fixed catalog."""
        return []

    @abstractmethod
    def match(self, title: str) -> List[HubMatch]:
        """
        Match a title against the hub index.

        Args:
            title: Primary title of a clustered event

        Returns:
            List of HubMatch (possibly empty), each with a confidence in [0, 1]
        """
        pass
