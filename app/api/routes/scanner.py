from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter

from app.api.deps import AppSettings, ContentRoot, catalog_options
from app.core.error_codes import ErrorCode
from app.core.errors import ApiError
from app.schemas.scanner import ScanRequest, ScannerStatusResponse, ScanResponse
from app.services.catalog_service import catalog_stats, scan_catalog
from app.services.content_paths import resolve_scan_directory

router = APIRouter(prefix="/api/scanner", tags=["scanner"])


@router.get("/status", response_model=ScannerStatusResponse)
async def scanner_status(settings: AppSettings, root: ContentRoot) -> ScannerStatusResponse:
    courses = await scan_catalog(
        root,
        timeout_seconds=settings.catalog_scan_timeout_seconds,
        **catalog_options(settings),
    )
    return ScannerStatusResponse(
        content_root=str(Path(root).resolve()),
        exists=Path(root).is_dir(),
        stats=catalog_stats(courses),
        scanned_at=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/scan", response_model=ScanResponse)
async def scan_directory(payload: ScanRequest, settings: AppSettings, root: ContentRoot) -> ScanResponse:
    directory = resolve_scan_directory(root, payload.directory_path)
    if not directory.is_dir():
        raise ApiError(status_code=404, code=ErrorCode.DIRECTORY_NOT_FOUND, message="Directory not found")

    options = catalog_options(settings)
    relative = directory.relative_to(Path(root).resolve())
    options["url_prefix"] = "/".join([settings.content_url_prefix.strip("/"), *relative.parts])

    courses = await scan_catalog(directory, timeout_seconds=settings.catalog_scan_timeout_seconds, **options)
    return ScanResponse(directory=str(directory), stats=catalog_stats(courses), courses=courses)
