from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# app/core/config.py -> app/core -> app -> root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_NAME: str = "Bookshelf"
    APP_ENV: Literal["development", "production"] = "production"
    # Directory holding books_*.json and ratings_*.json shards
    DATA_DIR: Path = PROJECT_ROOT / "data"

    # Ratings at or above this count towards a user's taste profile
    HIGH_RATING_THRESHOLD: int = 4
    # Ratings at or above this make a book worth recommending
    RECOMMEND_RATING_THRESHOLD: int = 7
    TOP_SIMILAR_USERS: int = 5
    MAX_RECOMMENDATIONS: int = 10

    QUERY_DELIMITER: str = ";"
    PRIVACY_POLICY_MESSAGE: str = "This is the privacy policy, we store no data"


settings = Settings()
