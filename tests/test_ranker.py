"""
Tests for story selection, record assembly and ranking.
"""

from constants import ActivityLevel, Trend
from helpers import make_cluster
from processor import HubAccumulator, Ranker, TechHubActivity, TopStory


def activity(hub_id, score):
    return TechHubActivity(
        hub_id=hub_id, name=hub_id, city="", country="", lat=0, lon=0, tier=None,
        activity_level=ActivityLevel.LOW, score=score, news_count=1,
        has_breaking=False, trend=Trend.STABLE,
    )


class TestTopStories:
    """Tests for Ranker.select_top_stories."""

    def test_first_three_in_arrival_order(self, bay_area):
        acc = HubAccumulator(hub=bay_area)
        for title in ["D", "B", "A", "C"]:
            acc.add(make_cluster(title, link=f"https://x/{title}"), "kw")
        stories = Ranker().select_top_stories(acc)
        assert stories == [
            TopStory("D", "https://x/D"),
            TopStory("B", "https://x/B"),
            TopStory("A", "https://x/A"),
        ]

    def test_fewer_than_three(self, bay_area):
        acc = HubAccumulator(hub=bay_area)
        acc.add(make_cluster("Only"), "kw")
        assert len(Ranker().select_top_stories(acc)) == 1


class TestBuildActivity:
    """Tests for Ranker.build_activity."""

    def test_copies_hub_fields(self, bay_area):
        acc = HubAccumulator(hub=bay_area)
        acc.add(make_cluster("A", velocity=1, is_alert=True), "Bay Area")
        result = Ranker().build_activity("sf-bay-area", acc, 61, ActivityLevel.HIGH, Trend.STABLE)
        assert result.to_dict() == {
            "hub_id": "sf-bay-area",
            "name": "Bay Area",
            "city": "San Francisco",
            "country": "USA",
            "lat": 37.7749,
            "lon": -122.4194,
            "tier": "mega",
            "activity_level": "high",
            "score": 61,
            "news_count": 1,
            "has_breaking": True,
            "trend": "stable",
            "top_stories": [{"title": "A", "link": "https://news.example/a"}],
            "matched_keywords": ["Bay Area"],
        }


class TestRank:
    """Tests for Ranker.rank and Ranker.top."""

    def test_sorted_by_score_descending(self):
        ranked = Ranker().rank([activity("a", 10), activity("b", 90), activity("c", 50)])
        assert [a.hub_id for a in ranked] == ["b", "c", "a"]

    def test_ties_broken_by_hub_id(self):
        ranked = Ranker().rank([activity("zeta", 40), activity("alpha", 40), activity("mid", 70)])
        assert [a.hub_id for a in ranked] == ["mid", "alpha", "zeta"]

    def test_top_bounded_by_total(self):
        ranked = Ranker().rank([activity("a", 10), activity("b", 20)])
        assert len(Ranker().top(ranked, 5)) == 2
        assert [a.hub_id for a in Ranker().top(ranked, 1)] == ["b"]

    def test_top_non_positive_limit(self):
        ranked = [activity("a", 10)]
        assert Ranker().top(ranked, 0) == []
        assert Ranker().top(ranked, -3) == []
