"""
Pytest configuration for hub activity tests.

Sample hubs, one per tier plus one with an unknown tier.
"""
import pytest

from data_transformers.models import TechHubLocation


@pytest.fixture
def bay_area():
    return TechHubLocation(
        id="sf-bay-area", name="Bay Area", city="San Francisco", country="USA",
        lat=37.7749, lon=-122.4194, tier="mega", keywords=["Silicon Valley"],
    )


@pytest.fixture
def seattle():
    return TechHubLocation(
        id="seattle", name="Seattle", city="Seattle", country="USA",
        lat=47.6062, lon=-122.3321, tier="major",
    )


@pytest.fixture
def lagos():
    return TechHubLocation(
        id="lagos", name="Lagos", city="Lagos", country="Nigeria",
        lat=6.5244, lon=3.3792, tier="emerging",
    )


@pytest.fixture
def untiered():
    return TechHubLocation(id="somewhere", name="Somewhere", tier="unknown-tier")
