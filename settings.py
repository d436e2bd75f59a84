# 📦 settings.py

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path(__file__).resolve().parent / "config"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Campus Grove"
    version: str = "1.2.0"
    host: str = "0.0.0.0"
    port: int = 8000
    prometheus_port: int = 0

    # Blogger v3 API
    blogger_api_key: Optional[str] = None
    blogger_blog_id: str = "4965945072048572230"
    blogger_max_results: int = 50
    blogger_base_url: str = "https://www.googleapis.com/blogger/v3"
    blogger_timeout: float = 10.0
    blogger_retries: int = 3
    blogger_retry_delay: float = 1.0

    seed_path: Path = CONFIG_DIR / "trees.yml"
    categories_path: Path = CONFIG_DIR / "categories.yml"


@lru_cache
def get_settings() -> Settings:
    return Settings()
