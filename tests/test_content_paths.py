import os
from pathlib import Path

import pytest

from app.core.errors import ApiError
from app.services.content_paths import resolve_scan_directory, resolve_within_root, validate_segment


@pytest.mark.parametrize("value", ["", "   ", ".", "..", "a/b", "..\\etc", "nul\x00byte", "/abs"])
def test_validate_segment_rejects(value: str) -> None:
    with pytest.raises(ApiError) as exc_info:
        validate_segment(value)
    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "INVALID_PATH_SEGMENT"


@pytest.mark.parametrize("value", ["Intro to Marketing", "...", "a..b", "Café & Co", ".hidden"])
def test_validate_segment_accepts(value: str) -> None:
    assert validate_segment(value) == value


def test_resolve_within_root_joins_segments(tmp_path: Path) -> None:
    path = resolve_within_root(tmp_path, "Course", "Chapter", "file.mp4")
    assert path == (tmp_path / "Course" / "Chapter" / "file.mp4").resolve()


def test_resolve_within_root_rejects_traversal(tmp_path: Path) -> None:
    with pytest.raises(ApiError) as exc_info:
        resolve_within_root(tmp_path, "..", "secret")
    assert exc_info.value.code == "INVALID_PATH_SEGMENT"


def test_resolve_within_root_rejects_symlink_escape(tmp_path: Path) -> None:
    root = tmp_path / "courses"
    (root / "Course").mkdir(parents=True)
    secret = tmp_path / "secret.txt"
    secret.write_text("nope")
    os.symlink(secret, root / "Course" / "leak.txt")

    with pytest.raises(ApiError) as exc_info:
        resolve_within_root(root, "Course", "leak.txt")
    assert exc_info.value.code == "PATH_OUTSIDE_CONTENT_ROOT"


def test_resolve_scan_directory(tmp_path: Path) -> None:
    root = tmp_path / "courses"
    (root / "Group A").mkdir(parents=True)

    assert resolve_scan_directory(root, "") == root.resolve()
    assert resolve_scan_directory(root, "Group A") == (root / "Group A").resolve()
    assert resolve_scan_directory(root, str(root / "Group A")) == (root / "Group A").resolve()


@pytest.mark.parametrize("value", ["..", "../other", "/etc"])
def test_resolve_scan_directory_rejects_outside(tmp_path: Path, value: str) -> None:
    root = tmp_path / "courses"
    root.mkdir()
    with pytest.raises(ApiError) as exc_info:
        resolve_scan_directory(root, value)
    assert exc_info.value.code == "PATH_OUTSIDE_CONTENT_ROOT"
