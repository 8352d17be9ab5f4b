from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends

from app.core.config import Settings, get_settings


def get_content_root(settings: Settings = Depends(get_settings)) -> Path:
    return Path(settings.content_root)


def catalog_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments shared by every catalog_service builder call."""
    return {
        "url_prefix": settings.content_url_prefix,
        "metadata_filename": settings.metadata_filename,
        "default_category": settings.default_course_category,
    }


AppSettings = Annotated[Settings, Depends(get_settings)]
ContentRoot = Annotated[Path, Depends(get_content_root)]
