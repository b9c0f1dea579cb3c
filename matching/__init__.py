"""
Matching Module

Title-to-hub matching used by the activity pipeline.

Components:
- HubMatcher: interface injected into the pipeline
- StaticHubMatcher: default keyword matcher over the hub catalog
- load_hub_catalog: catalog file loader
"""

from .base import HubMatcher
from .static_matcher import StaticHubMatcher, load_hub_catalog


__all__ = [
    "HubMatcher",
    "StaticHubMatcher",
    "load_hub_catalog",
]
