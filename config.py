"""
Tech-Hub Activity Dashboard - Configuration
"""
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data")
    LOG_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "logs")
    HUB_CATALOG_PATH: Path = Field(default_factory=lambda: Path(__file__).parent / "data" / "tech_hubs.json")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False, description="Write log files as JSON lines")
    LOG_RETENTION: str = Field(default="30 days")

    # API
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)

    # Matching
    MIN_MATCH_CONFIDENCE: float = Field(default=0.5, description="Matches below this confidence are ignored")

    # Scoring
    STORY_POINTS: float = Field(default=15)
    BREAKING_BONUS: float = Field(default=30)
    VELOCITY_WEIGHT: float = Field(default=5)
    MAX_SCORE: float = Field(default=100)
    TIER_BONUS: dict[str, float] = Field(
        default_factory=lambda: {"mega": 15, "major": 8, "emerging": 0}
    )

    # Classification
    THRESHOLD_HIGH: float = Field(default=50)
    THRESHOLD_ELEVATED: float = Field(default=20)
    TREND_RISING_VELOCITY: float = Field(default=2)
    TREND_FALLING_VELOCITY: float = Field(default=0.5)
    TREND_FALLING_MIN_STORIES: int = Field(default=1, description="Falling needs more stories than this")

    # Presentation
    MAX_TOP_STORIES: int = Field(default=3)
    DEFAULT_TOP_HUBS_LIMIT: int = Field(default=10)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    dirs = [
        settings.DATA_DIR,
        settings.LOG_DIR,
    ]
    for dir_path in dirs:
        dir_path.mkdir(parents=True, exist_ok=True)
