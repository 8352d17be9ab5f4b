from fastapi import APIRouter, Depends

from app.api.admin_auth import require_admin_key
from app.api.deps import AppSettings, ContentRoot, catalog_options
from app.core.config import Settings
from app.core.error_codes import ErrorCode
from app.core.errors import ApiError
from app.schemas.catalog import ChapterItem, CourseItem
from app.schemas.courses import ChapterCreateRequest, CourseCreateRequest, CourseUpdateRequest
from app.services.catalog_service import build_course, scan_catalog
from app.services.content_paths import validate_segment
from app.services.course_admin_service import create_chapter, create_course, update_course_metadata

router = APIRouter(prefix="/api/courses", tags=["courses"])


def _course_or_404(root, course_name: str, settings: Settings) -> CourseItem:
    course = build_course(root, course_name, **catalog_options(settings))
    if course is None:
        raise ApiError(status_code=404, code=ErrorCode.COURSE_NOT_FOUND, message="Course not found")
    return course


@router.get("", response_model=list[CourseItem])
async def list_courses(settings: AppSettings, root: ContentRoot) -> list[CourseItem]:
    return await scan_catalog(
        root,
        timeout_seconds=settings.catalog_scan_timeout_seconds,
        **catalog_options(settings),
    )


@router.get("/{course_name}", response_model=CourseItem)
def get_course(course_name: str, settings: AppSettings, root: ContentRoot) -> CourseItem:
    validate_segment(course_name, label="course name")
    return _course_or_404(root, course_name, settings)


@router.post("", response_model=CourseItem, status_code=201, dependencies=[Depends(require_admin_key)])
def create_course_endpoint(payload: CourseCreateRequest, settings: AppSettings, root: ContentRoot) -> CourseItem:
    course_dir = create_course(
        root,
        payload,
        metadata_filename=settings.metadata_filename,
        default_category=settings.default_course_category,
    )
    return _course_or_404(root, course_dir.name, settings)


@router.put("/{course_name}", response_model=CourseItem, dependencies=[Depends(require_admin_key)])
def update_course_endpoint(
    course_name: str,
    payload: CourseUpdateRequest,
    settings: AppSettings,
    root: ContentRoot,
) -> CourseItem:
    update_course_metadata(
        root,
        course_name,
        payload,
        metadata_filename=settings.metadata_filename,
        default_category=settings.default_course_category,
    )
    return _course_or_404(root, course_name, settings)


@router.post(
    "/{course_name}/chapters",
    response_model=ChapterItem,
    status_code=201,
    dependencies=[Depends(require_admin_key)],
)
def create_chapter_endpoint(
    course_name: str,
    payload: ChapterCreateRequest,
    settings: AppSettings,
    root: ContentRoot,
) -> ChapterItem:
    return create_chapter(root, course_name, payload.name, metadata_filename=settings.metadata_filename)
