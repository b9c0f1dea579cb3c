"""
Cluster Transformer

Converts clustered-event payloads from the clustering stage into
ClusteredEvent records. Accepts the upstream camelCase keys
(primaryTitle, primaryLink, velocity.sourcesPerHour, isAlert) as well
as snake_case.

Only the title is required. Malformed optional fields (velocity, alert
flag) fall back to their zero-contribution defaults with a warning.
"""
import math
from typing import Any, Dict, Optional

from loguru import logger

from .base import BaseTransformer, TransformError
from .models import ClusteredEvent, ClusterVelocity


def _is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class ClusterTransformer(BaseTransformer):
    """Transform raw cluster dicts into ClusteredEvent records."""

    @property
    def source_name(self) -> str:
        return "clusters"

    def transform_item(self, item: Dict[str, Any]) -> ClusteredEvent:
        title = self.pick(item, "primary_title", "primaryTitle")
        if not isinstance(title, str) or not title.strip():
            raise TransformError("missing primary title")

        link = self.pick(item, "primary_link", "primaryLink", default="")

        return ClusteredEvent(
            primary_title=title,
            primary_link=str(link),
            velocity=self._parse_velocity(title, item.get("velocity")),
            is_alert=self._parse_alert(title, self.pick(item, "is_alert", "isAlert", default=False)),
            id=self.pick(item, "id"),
        )

    def _parse_alert(self, title: str, raw: Any) -> bool:
        if isinstance(raw, bool):
            return raw
        logger.warning(f"Ignoring non-boolean alert flag {raw!r} for '{title}'")
        return False

    def _parse_velocity(self, title: str, raw: Any) -> Optional[ClusterVelocity]:
        if raw is None:
            return None

        if isinstance(raw, dict):
            value = self.pick(raw, "sources_per_hour", "sourcesPerHour")
            if value is None:
                return ClusterVelocity()
        else:
            value = raw

        if not _is_finite_number(value):
            logger.warning(f"Ignoring invalid sourcesPerHour {value!r} for '{title}'")
            return ClusterVelocity()

        return ClusterVelocity(sources_per_hour=float(value))
