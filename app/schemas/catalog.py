from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FileType = Literal["video", "pdf", "audio", "other"]


class LectureItem(BaseModel):
    name: str
    type: FileType
    size: int
    url: str


class ChapterItem(BaseModel):
    name: str
    lectures: list[LectureItem] = Field(default_factory=list)


class CourseMetadata(BaseModel):
    """Contents of the optional per-course metadata record."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    instructor: str | None = None
    category: str | None = None
    level: str | None = None
    duration: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CourseItem(BaseModel):
    id: str
    name: str
    title: str
    description: str = ""
    instructor: str = ""
    category: str = ""
    level: str = ""
    duration: str = ""
    created_at: str | None = None
    updated_at: str | None = None
    chapters: list[ChapterItem] = Field(default_factory=list)


class CatalogStats(BaseModel):
    course_count: int = 0
    chapter_count: int = 0
    file_count: int = 0
    total_size_bytes: int = 0
    files_by_type: dict[str, int] = Field(default_factory=dict)
