import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.deps import catalog_options
from app.api.routes import courses, media, scanner
from app.core.config import get_settings
from app.core.errors import ApiError
from app.core.logging import configure_logging
from app.services.catalog_service import build_catalog

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def handle_api_error(_, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.on_event("startup")
def on_startup() -> None:
    root = Path(settings.content_root)
    if not root.is_dir():
        logger.warning("Content root %s does not exist yet; catalog is empty", root.resolve())
        return
    found = build_catalog(root, **catalog_options(settings))
    logger.info("Content root %s: found %d courses %s", root.resolve(), len(found), [c.name for c in found])


app.include_router(courses.router)
app.include_router(scanner.router)
app.include_router(media.router)
