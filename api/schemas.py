"""
Request bodies for the activity endpoints.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ClustersRequest(BaseModel):
    """Clustered events as produced by the clustering stage."""
    clusters: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Cluster objects with primaryTitle, primaryLink, velocity.sourcesPerHour, isAlert"
    )
