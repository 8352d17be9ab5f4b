from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from app.core.error_codes import ErrorCode
from app.core.errors import ApiError
from app.schemas.catalog import ChapterItem, CourseMetadata
from app.schemas.courses import CourseCreateRequest, CourseUpdateRequest
from app.services.catalog_service import default_course_metadata, read_course_metadata
from app.services.content_paths import resolve_within_root, validate_segment

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _write_metadata(course_dir: Path, metadata_filename: str, metadata: CourseMetadata) -> None:
    path = course_dir / metadata_filename
    payload = metadata.model_dump(exclude_none=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def get_course_dir_or_404(root: Path, course_name: str) -> Path:
    # Symlinked courses are not part of the catalog; never write through them.
    if (Path(root) / validate_segment(course_name, label="course name")).is_symlink():
        raise ApiError(status_code=404, code=ErrorCode.COURSE_NOT_FOUND, message="Course not found")
    course_dir = resolve_within_root(root, course_name)
    if not course_dir.is_dir():
        raise ApiError(status_code=404, code=ErrorCode.COURSE_NOT_FOUND, message="Course not found")
    return course_dir


def create_course(
    root: Path,
    payload: CourseCreateRequest,
    *,
    metadata_filename: str,
    default_category: str,
) -> Path:
    name = validate_segment(payload.name.strip(), label="course name")
    Path(root).mkdir(parents=True, exist_ok=True)
    course_dir = resolve_within_root(root, name)
    try:
        course_dir.mkdir()
    except FileExistsError as exc:
        raise ApiError(status_code=409, code=ErrorCode.COURSE_ALREADY_EXISTS, message="Course already exists") from exc

    now = _now_iso()
    defaults = default_course_metadata(name, default_category)
    metadata = CourseMetadata(
        title=payload.title.strip() or defaults.title,
        description=payload.description.strip() or defaults.description,
        instructor=payload.instructor.strip(),
        category=payload.category.strip() or defaults.category,
        level=payload.level.strip(),
        duration=payload.duration.strip(),
        created_at=now,
        updated_at=now,
    )
    _write_metadata(course_dir, metadata_filename, metadata)
    logger.info("Created course %s", name)
    return course_dir


def update_course_metadata(
    root: Path,
    course_name: str,
    payload: CourseUpdateRequest,
    *,
    metadata_filename: str,
    default_category: str,
) -> Path:
    course_dir = get_course_dir_or_404(root, course_name)
    metadata = default_course_metadata(course_name, default_category)
    stored = read_course_metadata(course_dir, metadata_filename)
    if stored is not None:
        metadata = metadata.model_copy(update=stored.model_dump(exclude_none=True))

    changes = {field: value.strip() for field, value in payload.model_dump(exclude_none=True).items()}
    metadata = metadata.model_copy(update={**changes, "updated_at": _now_iso()})
    _write_metadata(course_dir, metadata_filename, metadata)
    logger.info("Updated metadata for course %s (%s)", course_name, ", ".join(sorted(changes)) or "no fields")
    return course_dir


def create_chapter(root: Path, course_name: str, chapter_name: str, *, metadata_filename: str) -> ChapterItem:
    course_dir = get_course_dir_or_404(root, course_name)
    name = validate_segment(chapter_name.strip(), label="chapter name")
    if name == metadata_filename:
        raise ApiError(status_code=400, code=ErrorCode.INVALID_PATH_SEGMENT, message="Chapter name is reserved")

    chapter_dir = resolve_within_root(course_dir, name)
    try:
        chapter_dir.mkdir()
    except FileExistsError as exc:
        raise ApiError(status_code=409, code=ErrorCode.CHAPTER_ALREADY_EXISTS, message="Chapter already exists") from exc

    logger.info("Created chapter %s/%s", course_name, name)
    return ChapterItem(name=name, lectures=[])
