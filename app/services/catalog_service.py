"""
Directory-to-catalog builder.

The content tree is the only source of truth::

    <root>/<course>/<chapter>/<file>
    <root>/<course>/course.json      (optional metadata record)

The catalog is rebuilt from disk on every call. Listing order is whatever the
filesystem returns; nothing is sorted here. Symlinks are not followed, so only
real directories count as courses / chapters and only regular files as
lectures.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from urllib.parse import quote

from pydantic import ValidationError

from app.core.error_codes import ErrorCode
from app.core.errors import ApiError
from app.schemas.catalog import CatalogStats, ChapterItem, CourseItem, CourseMetadata, FileType, LectureItem
from app.services.content_paths import is_valid_segment

logger = logging.getLogger(__name__)

DEFAULT_METADATA_FILENAME = "course.json"
DEFAULT_URL_PREFIX = "courses"
DEFAULT_CATEGORY = "Marketing"

VIDEO_EXTENSIONS = frozenset({"mp4", "webm", "ogg", "mov", "avi", "wmv", "flv", "mkv"})
PDF_EXTENSIONS = frozenset({"pdf"})
AUDIO_EXTENSIONS = frozenset({"mp3", "wav"})


def classify_extension(filename: str) -> FileType:
    ext = os.path.splitext(filename)[1].lstrip(".").lower()
    if ext in VIDEO_EXTENSIONS:
        return "video"
    if ext in PDF_EXTENSIONS:
        return "pdf"
    if ext in AUDIO_EXTENSIONS:
        return "audio"
    return "other"


def build_file_url(url_prefix: str, course_name: str, chapter_name: str, filename: str) -> str:
    # The prefix may span several path segments; each is encoded on its own.
    segments = [part for part in url_prefix.split("/") if part]
    segments += [course_name, chapter_name, filename]
    return "/" + "/".join(quote(segment, safe="") for segment in segments)


def default_course_metadata(course_name: str, default_category: str = DEFAULT_CATEGORY) -> CourseMetadata:
    return CourseMetadata(
        title=course_name,
        description=f"Complete course on {course_name}",
        instructor="",
        category=default_category,
        level="",
        duration="",
    )


def read_course_metadata(course_dir: Path, metadata_filename: str = DEFAULT_METADATA_FILENAME) -> CourseMetadata | None:
    """Return the parsed metadata record, or None when it is missing or invalid."""
    path = Path(course_dir) / metadata_filename
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.warning("Cannot read metadata record %s: %s", path, exc)
        return None

    try:
        return CourseMetadata.model_validate_json(raw)
    except ValidationError:
        logger.warning("Ignoring invalid metadata record %s", path)
        return None


def _list_dirs(path: Path) -> list[str]:
    with os.scandir(path) as entries:
        return [
            entry.name
            for entry in entries
            if entry.is_dir(follow_symlinks=False) and _servable_name(entry.name, entry.path)
        ]


def _servable_name(name: str, path: str) -> bool:
    # Names the file endpoint would reject (e.g. with a backslash) stay out of the catalog.
    if is_valid_segment(name):
        return True
    logger.debug("Skipping entry with unservable name: %s", path)
    return False


def _build_chapter(course_dir: Path, course_name: str, chapter_name: str, url_prefix: str) -> ChapterItem:
    lectures: list[LectureItem] = []
    with os.scandir(course_dir / chapter_name) as entries:
        for entry in entries:
            if not entry.is_file(follow_symlinks=False) or not _servable_name(entry.name, entry.path):
                continue
            try:
                size = entry.stat(follow_symlinks=False).st_size
            except FileNotFoundError:
                # Removed between listing and stat.
                logger.debug("File vanished during scan: %s", entry.path)
                continue
            lectures.append(
                LectureItem(
                    name=entry.name,
                    type=classify_extension(entry.name),
                    size=size,
                    url=build_file_url(url_prefix, course_name, chapter_name, entry.name),
                )
            )
    return ChapterItem(name=chapter_name, lectures=lectures)


def _build_course(
    root: Path,
    course_name: str,
    *,
    url_prefix: str,
    metadata_filename: str,
    default_category: str,
) -> CourseItem:
    course_dir = root / course_name
    chapters: list[ChapterItem] = []
    for chapter_name in _list_dirs(course_dir):
        if chapter_name == metadata_filename:
            continue
        try:
            chapters.append(_build_chapter(course_dir, course_name, chapter_name, url_prefix))
        except OSError as exc:
            logger.warning("Skipping unreadable chapter %s/%s: %s", course_name, chapter_name, exc)

    meta = default_course_metadata(course_name, default_category)
    stored = read_course_metadata(course_dir, metadata_filename)
    if stored is not None:
        meta = meta.model_copy(update=stored.model_dump(exclude_none=True))

    return CourseItem(id=course_name, name=course_name, chapters=chapters, **meta.model_dump())


def build_catalog(
    root: Path | str,
    *,
    url_prefix: str = DEFAULT_URL_PREFIX,
    metadata_filename: str = DEFAULT_METADATA_FILENAME,
    default_category: str = DEFAULT_CATEGORY,
) -> list[CourseItem]:
    """Walk ``root`` and return one CourseItem per course directory.

    A missing root is an empty catalog. Unreadable course or chapter
    directories are logged and skipped; the rest of the catalog is kept.
    """
    root_path = Path(root)
    try:
        course_names = _list_dirs(root_path)
    except (FileNotFoundError, NotADirectoryError):
        return []
    except OSError as exc:
        logger.error("Cannot list content root %s: %s", root_path, exc)
        return []

    courses: list[CourseItem] = []
    for course_name in course_names:
        try:
            courses.append(
                _build_course(
                    root_path,
                    course_name,
                    url_prefix=url_prefix,
                    metadata_filename=metadata_filename,
                    default_category=default_category,
                )
            )
        except OSError as exc:
            logger.warning("Skipping unreadable course %s: %s", course_name, exc)
    return courses


def build_course(
    root: Path | str,
    course_name: str,
    *,
    url_prefix: str = DEFAULT_URL_PREFIX,
    metadata_filename: str = DEFAULT_METADATA_FILENAME,
    default_category: str = DEFAULT_CATEGORY,
) -> CourseItem | None:
    """Build a single course, or None when its directory is missing or unreadable."""
    root_path = Path(root)
    course_dir = root_path / course_name
    if course_dir.is_symlink() or not course_dir.is_dir():
        return None
    try:
        return _build_course(
            root_path,
            course_name,
            url_prefix=url_prefix,
            metadata_filename=metadata_filename,
            default_category=default_category,
        )
    except OSError as exc:
        logger.warning("Cannot read course %s: %s", course_name, exc)
        return None


def catalog_stats(courses: list[CourseItem]) -> CatalogStats:
    stats = CatalogStats(course_count=len(courses))
    for course in courses:
        stats.chapter_count += len(course.chapters)
        for chapter in course.chapters:
            for lecture in chapter.lectures:
                stats.file_count += 1
                stats.total_size_bytes += lecture.size
                stats.files_by_type[lecture.type] = stats.files_by_type.get(lecture.type, 0) + 1
    return stats


async def scan_catalog(root: Path | str, *, timeout_seconds: float = 0, **options) -> list[CourseItem]:
    """Run ``build_catalog`` in a worker thread, optionally bounded by a deadline.

    On timeout the worker thread is abandoned, not interrupted; it finishes its
    walk in the background.
    """
    job = asyncio.to_thread(build_catalog, root, **options)
    if timeout_seconds <= 0:
        return await job
    try:
        return await asyncio.wait_for(job, timeout=timeout_seconds)
    except asyncio.TimeoutError as exc:
        logger.error("Catalog scan of %s exceeded %.1fs", root, timeout_seconds)
        raise ApiError(status_code=504, code=ErrorCode.CATALOG_TIMEOUT, message="Catalog scan timed out") from exc
