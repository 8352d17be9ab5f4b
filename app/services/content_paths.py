"""
Path handling for anything built from request input.

Every course / chapter / file name that arrives over HTTP goes through
``validate_segment`` and the joined path through ``resolve_within_root``.
"""

from __future__ import annotations

from pathlib import Path

from app.core.error_codes import ErrorCode
from app.core.errors import ApiError

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def is_valid_segment(name: str) -> bool:
    if not name.strip() or name in (".", ".."):
        return False
    return not any(ch in name for ch in _FORBIDDEN_CHARS)


def validate_segment(value: str, *, label: str = "path segment") -> str:
    name = str(value or "")
    if not is_valid_segment(name):
        raise ApiError(status_code=400, code=ErrorCode.INVALID_PATH_SEGMENT, message=f"Invalid {label}")
    return name


def resolve_within_root(root: Path, *segments: str) -> Path:
    """Join validated segments onto ``root`` and require the result to stay inside it.

    Symlinks are resolved before the containment check, so a link pointing
    out of the content tree is rejected too.
    """
    root_path = Path(root).resolve()
    candidate = root_path.joinpath(*(validate_segment(segment) for segment in segments)).resolve()
    if not candidate.is_relative_to(root_path):
        raise ApiError(
            status_code=400,
            code=ErrorCode.PATH_OUTSIDE_CONTENT_ROOT,
            message="Path escapes the content root",
        )
    return candidate


def resolve_scan_directory(root: Path, directory_path: str) -> Path:
    """Resolve a user supplied directory (relative to ``root`` or absolute) inside ``root``."""
    root_path = Path(root).resolve()
    raw = str(directory_path or "").strip()
    if not raw:
        return root_path

    candidate = Path(raw)
    if not candidate.is_absolute():
        candidate = root_path / candidate
    candidate = candidate.resolve()
    if not candidate.is_relative_to(root_path):
        raise ApiError(
            status_code=400,
            code=ErrorCode.PATH_OUTSIDE_CONTENT_ROOT,
            message="Directory must be inside the content root",
        )
    return candidate
