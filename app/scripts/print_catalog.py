#!/usr/bin/env python3
"""
Print the course catalog, either built from a local content directory or
fetched from a running backend.

Usage:
    # Build from disk (same traversal the API uses):
    uv run python app/scripts/print_catalog.py --content-root ./courses

    # Ask a running server:
    uv run python app/scripts/print_catalog.py --server http://localhost:5000

    # Full JSON instead of the summary:
    uv run python app/scripts/print_catalog.py --content-root ./courses --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import httpx

from app.core.config import get_settings
from app.services.catalog_service import build_catalog


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the course catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--content-root", type=Path, help="Content directory (default: CONTENT_ROOT setting)")
    source.add_argument("--server", help="Backend URL, e.g. http://localhost:5000")
    parser.add_argument("--json", action="store_true", help="Print the full catalog as JSON")
    return parser.parse_args(argv)


def load_local(content_root: Path) -> list[dict[str, Any]]:
    settings = get_settings()
    courses = build_catalog(
        content_root,
        url_prefix=settings.content_url_prefix,
        metadata_filename=settings.metadata_filename,
        default_category=settings.default_course_category,
    )
    return [course.model_dump() for course in courses]


def load_remote(server: str) -> list[dict[str, Any]]:
    with httpx.Client(timeout=30.0) as client:
        resp = client.get(f"{server.rstrip('/')}/api/courses")
        resp.raise_for_status()
        return resp.json()


def print_summary(courses: list[dict[str, Any]]) -> None:
    print(f"Found {len(courses)} courses")
    for course in courses:
        chapters = course.get("chapters", [])
        print(f"  {course['name']}  [{course.get('category', '')}]  chapters={len(chapters)}")
        for chapter in chapters:
            lectures = chapter.get("lectures", [])
            kinds: dict[str, int] = {}
            for lecture in lectures:
                kinds[lecture["type"]] = kinds.get(lecture["type"], 0) + 1
            detail = ", ".join(f"{kind}={count}" for kind, count in sorted(kinds.items())) or "empty"
            print(f"    - {chapter['name']} ({detail})")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    if args.server:
        try:
            courses = load_remote(args.server)
        except httpx.HTTPError as exc:
            print(f"Error fetching catalog: {exc}", file=sys.stderr)
            return 1
    else:
        root = args.content_root or Path(get_settings().content_root)
        courses = load_local(root)

    if args.json:
        print(json.dumps(courses, ensure_ascii=False, indent=2))
    else:
        print_summary(courses)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
