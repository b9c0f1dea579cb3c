"""
Data Transformers

Convert raw JSON payloads into the typed records the processor consumes.

Components:
- ClusterTransformer: clustered-event payloads -> ClusteredEvent
- HubCatalogTransformer: hub catalog entries -> TechHubLocation
"""

from .models import ClusterVelocity, ClusteredEvent, TechHubLocation, HubMatch
from .base import BaseTransformer, TransformError
from .clusters import ClusterTransformer
from .hubs import HubCatalogTransformer


__all__ = [
    # Models
    "ClusterVelocity",
    "ClusteredEvent",
    "TechHubLocation",
    "HubMatch",
    # Transformers
    "BaseTransformer",
    "TransformError",
    "ClusterTransformer",
    "HubCatalogTransformer",
]
