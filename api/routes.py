"""
API Routes - Endpoint definitions for the Tech-Hub Activity Dashboard

Endpoints organized by:
- Health Check
- Hubs (catalog known to the matcher)
- Tech Activity (ranked hub activity from posted clusters)

Activity endpoints are POST because the clusters come in the request
body; nothing is stored between calls.
"""
from datetime import datetime
from functools import lru_cache
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger

from config import settings
from data_transformers import ClusterTransformer, TransformError
from data_transformers.models import ClusteredEvent
from matching import HubMatcher, StaticHubMatcher
from processor import ActivityConfig, TechActivityPipeline
from .schemas import ClustersRequest

router = APIRouter()


# ============================================================
# Dependencies
# ============================================================
@lru_cache(maxsize=1)
def get_hub_matcher() -> HubMatcher:
    """Default matcher over the hub catalog file (loaded once)."""
    return StaticHubMatcher.from_catalog(settings.HUB_CATALOG_PATH)


@lru_cache(maxsize=1)
def get_activity_config() -> ActivityConfig:
    return ActivityConfig.from_settings(settings)


def get_pipeline(
    matcher: HubMatcher = Depends(get_hub_matcher),
    config: ActivityConfig = Depends(get_activity_config),
) -> TechActivityPipeline:
    return TechActivityPipeline(matcher, config)


def parse_clusters(body: ClustersRequest) -> List[ClusteredEvent]:
    """Convert posted cluster payloads, 422 on malformed items."""
    try:
        return ClusterTransformer().transform(body.clusters)
    except TransformError as e:
        logger.warning(f"Rejected cluster payload: {e}")
        raise HTTPException(status_code=422, detail=str(e))


# ============================================================
# Health Check
# ============================================================
@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    }


# ============================================================
# Hubs
# ============================================================
@router.get("/hubs")
async def list_hubs(
    tier: Optional[str] = Query(default=None, description="Filter by tier (mega, major, emerging)"),
    matcher: HubMatcher = Depends(get_hub_matcher),
):
    """List hubs known to the matcher."""
    hubs = matcher.hubs
    if tier:
        hubs = [h for h in hubs if h.tier_value == tier]

    return {
        "hubs": [
            {
                "id": h.id,
                "name": h.name,
                "city": h.city,
                "country": h.country,
                "lat": h.lat,
                "lon": h.lon,
                "tier": h.tier_value,
            }
            for h in hubs
        ],
        "total": len(hubs),
    }


# ============================================================
# Tech Activity
# ============================================================
@router.post("/tech-activity")
async def tech_activity(
    body: ClustersRequest,
    pipeline: TechActivityPipeline = Depends(get_pipeline),
):
    """
    Ranked activity for every hub matched by the posted clusters.

    ## UI Usage:
    - Map overlay and hub list widget
    """
    clusters = parse_clusters(body)
    activities = pipeline.aggregate(clusters)
    return {
        "hubs": [a.to_dict() for a in activities],
        "total": len(activities),
    }


@router.post("/tech-activity/top")
async def top_active_hubs(
    body: ClustersRequest,
    limit: int = Query(default=settings.DEFAULT_TOP_HUBS_LIMIT, ge=1, le=100),
    pipeline: TechActivityPipeline = Depends(get_pipeline),
):
    """The `limit` most active hubs."""
    clusters = parse_clusters(body)
    activities = pipeline.top_active_hubs(clusters, limit=limit)
    return {
        "hubs": [a.to_dict() for a in activities],
        "total": len(activities),
    }


@router.post("/tech-activity/hubs/{hub_id}")
async def hub_activity(
    hub_id: str,
    body: ClustersRequest,
    pipeline: TechActivityPipeline = Depends(get_pipeline),
):
    """Activity for a single hub, 404 if no cluster matched it."""
    clusters = parse_clusters(body)
    activity = pipeline.hub_activity(hub_id, clusters)
    if activity is None:
        raise HTTPException(status_code=404, detail="No activity for hub")
    return activity.to_dict()
