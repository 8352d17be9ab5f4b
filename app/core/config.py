from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "course-catalog-backend"
    app_env: str = "development"
    app_port: int = 5000
    log_level: str = "INFO"

    # Content tree: <content_root>/<course>/<chapter>/<file>
    content_root: str = "courses"
    content_url_prefix: str = "courses"
    metadata_filename: str = "course.json"
    default_course_category: str = "Marketing"
    catalog_scan_timeout_seconds: float = 30.0  # <= 0 disables the deadline

    admin_api_key: str = ""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
