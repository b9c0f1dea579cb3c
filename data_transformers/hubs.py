"""
Hub Catalog Transformer

Converts hub catalog entries (data/tech_hubs.json) into TechHubLocation
records.
"""
from typing import Any, Dict

from .base import BaseTransformer, TransformError
from .models import TechHubLocation


class HubCatalogTransformer(BaseTransformer):
    """Transform raw hub dicts into TechHubLocation records."""

    @property
    def source_name(self) -> str:
        return "hub_catalog"

    def transform_item(self, item: Dict[str, Any]) -> TechHubLocation:
        hub_id = item.get("id")
        if not hub_id:
            raise TransformError("missing hub id")

        try:
            lat = float(item.get("lat", 0.0))
            lon = float(item.get("lon", 0.0))
        except (TypeError, ValueError) as e:
            raise TransformError(f"invalid coordinates for hub {hub_id}") from e

        keywords = item.get("keywords") or []
        if not isinstance(keywords, list):
            raise TransformError(f"keywords for hub {hub_id} must be a list")

        return TechHubLocation(
            id=str(hub_id),
            name=item.get("name") or str(hub_id),
            city=item.get("city", ""),
            country=item.get("country", ""),
            lat=lat,
            lon=lon,
            tier=item.get("tier"),
            keywords=[str(k) for k in keywords],
        )
