from pydantic import BaseModel, ConfigDict, Field

from app.schemas.catalog import CatalogStats, CourseItem


class ScannerStatusResponse(BaseModel):
    success: bool = True
    content_root: str
    exists: bool
    stats: CatalogStats
    scanned_at: str


class ScanRequest(BaseModel):
    # The browser client posts camelCase.
    model_config = ConfigDict(populate_by_name=True)

    directory_path: str = Field(default="", alias="directoryPath")


class ScanResponse(BaseModel):
    success: bool = True
    directory: str
    stats: CatalogStats
    courses: list[CourseItem]
