"""
Tests for ClusterTransformer and HubCatalogTransformer.
"""

import pytest

from constants import HubTier
from data_transformers import (
    ClusteredEvent,
    ClusterTransformer,
    ClusterVelocity,
    HubCatalogTransformer,
    TransformError,
)


class TestClusterTransformer:
    """Tests for ClusterTransformer."""

    def test_camel_case_payload(self):
        [cluster] = ClusterTransformer().transform([{
            "id": "c1",
            "primaryTitle": "Shenzhen chipmaker expands",
            "primaryLink": "https://news.example/1",
            "velocity": {"sourcesPerHour": 2.5},
            "isAlert": True,
        }])
        assert cluster.primary_title == "Shenzhen chipmaker expands"
        assert cluster.primary_link == "https://news.example/1"
        assert cluster.velocity == ClusterVelocity(sources_per_hour=2.5)
        assert cluster.sources_per_hour == 2.5
        assert cluster.is_alert is True
        assert cluster.id == "c1"

    def test_snake_case_payload(self):
        [cluster] = ClusterTransformer().transform([{
            "primary_title": "Title",
            "primary_link": "https://x",
            "velocity": {"sources_per_hour": 1},
            "is_alert": False,
        }])
        assert cluster.sources_per_hour == 1.0
        assert cluster.is_alert is False

    def test_missing_optional_fields(self):
        [cluster] = ClusterTransformer().transform([{"primaryTitle": "Title"}])
        assert cluster.primary_link == ""
        assert cluster.velocity is None
        assert cluster.sources_per_hour == 0.0
        assert cluster.is_alert is False

    def test_velocity_without_rate(self):
        [cluster] = ClusterTransformer().transform([{"primaryTitle": "T", "velocity": {"trend": "up"}}])
        assert cluster.sources_per_hour == 0.0

    def test_missing_title_rejected(self):
        with pytest.raises(TransformError, match=r"clusters\[1\]"):
            ClusterTransformer().transform([{"primaryTitle": "ok"}, {"primaryLink": "x"}])

    @pytest.mark.parametrize("rate", ["fast", True, float("nan"), float("inf"), float("-inf"), [1]])
    def test_invalid_velocity_counts_zero(self, rate):
        [cluster] = ClusterTransformer().transform([{"primaryTitle": "T", "velocity": {"sourcesPerHour": rate}}])
        assert cluster.sources_per_hour == 0.0

    def test_non_object_velocity_counts_zero(self):
        [cluster] = ClusterTransformer().transform([{"primaryTitle": "T", "velocity": "quick"}])
        assert cluster.sources_per_hour == 0.0

    @pytest.mark.parametrize("flag", ["false", "true", 1, None])
    def test_alert_flag_must_be_boolean(self, flag):
        [cluster] = ClusterTransformer().transform([{"primaryTitle": "T", "isAlert": flag}])
        assert cluster.is_alert is False

    def test_model_ignores_non_finite_velocity(self):
        cluster = ClusteredEvent(primary_title="T", velocity=ClusterVelocity(sources_per_hour=float("nan")))
        assert cluster.sources_per_hour == 0.0

    def test_skip_invalid_keeps_valid_items(self):
        clusters = ClusterTransformer().transform(
            [{"primaryTitle": "ok"}, {"primaryLink": "x"}, "junk", {"primaryTitle": "also ok"}],
            skip_invalid=True,
        )
        assert [c.primary_title for c in clusters] == ["ok", "also ok"]

    def test_non_list_rejected(self):
        with pytest.raises(TransformError):
            ClusterTransformer().transform({"primaryTitle": "T"})

    def test_empty_list(self):
        assert ClusterTransformer().transform([]) == []


class TestHubCatalogTransformer:
    """Tests for HubCatalogTransformer."""

    def test_full_entry(self):
        [hub] = HubCatalogTransformer().transform([{
            "id": "shenzhen", "name": "Shenzhen", "city": "Shenzhen", "country": "China",
            "lat": 22.5, "lon": 114.0, "tier": "mega", "keywords": ["Huawei"],
        }])
        assert hub.tier == HubTier.MEGA
        assert hub.tier_value == "mega"
        assert hub.keywords == ["Huawei"]

    def test_unknown_tier_kept(self):
        [hub] = HubCatalogTransformer().transform([{"id": "x", "tier": "frontier"}])
        assert hub.tier == "frontier"
        assert hub.name == "x"

    def test_bad_coordinates_rejected(self):
        with pytest.raises(TransformError):
            HubCatalogTransformer().transform([{"id": "x", "lat": "north"}])
