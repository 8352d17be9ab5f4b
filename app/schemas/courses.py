from pydantic import BaseModel, Field


class CourseCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    title: str = ""
    description: str = ""
    instructor: str = ""
    category: str = ""
    level: str = ""
    duration: str = ""


class CourseUpdateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    instructor: str | None = None
    category: str | None = None
    level: str | None = None
    duration: str | None = None


class ChapterCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
