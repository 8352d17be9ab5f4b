from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.api.deps import AppSettings, ContentRoot
from app.core.error_codes import ErrorCode
from app.core.errors import ApiError
from app.services.content_paths import resolve_within_root

# Catch-all: must be included after every other router.
router = APIRouter(tags=["media"])


def _not_found() -> ApiError:
    return ApiError(status_code=404, code=ErrorCode.FILE_NOT_FOUND, message="File not found")


@router.get("/{file_path:path}")
def get_lecture_file(file_path: str, settings: AppSettings, root: ContentRoot) -> FileResponse:
    # file_path arrives percent-decoded; catalog URLs never contain an encoded "/".
    segments = file_path.split("/")
    prefix = [part for part in settings.content_url_prefix.split("/") if part]
    if segments[: len(prefix)] != prefix:
        raise _not_found()

    # <course>/<chapter>/<file>, optionally below a scanned subdirectory.
    relative = segments[len(prefix) :]
    if len(relative) < 3:
        raise _not_found()

    path = resolve_within_root(root, *relative)
    if not path.is_file():
        raise _not_found()
    return FileResponse(path, filename=relative[-1], content_disposition_type="inline")
