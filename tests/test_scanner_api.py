from pathlib import Path


def test_status_reports_stats(client, content_root: Path, make_file) -> None:
    make_file(content_root / "A" / "1" / "a.mp4", 10)
    make_file(content_root / "A" / "1" / "b.pdf", 5)
    make_file(content_root / "B" / "1" / "c.wav", 1)

    resp = client.get("/api/scanner/status")

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert body["exists"] is True
    assert body["content_root"] == str(content_root.resolve())
    assert body["stats"] == {
        "course_count": 2,
        "chapter_count": 2,
        "file_count": 3,
        "total_size_bytes": 16,
        "files_by_type": {"video": 1, "pdf": 1, "audio": 1},
    }
    assert body["scanned_at"]


def test_scan_whole_root_with_camel_case_body(client, content_root: Path, make_file) -> None:
    make_file(content_root / "A" / "1" / "a.mp4", 10)

    resp = client.post("/api/scanner/scan", json={"directoryPath": ""})

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert body["stats"]["course_count"] == 1
    assert body["courses"][0]["chapters"][0]["lectures"][0]["url"] == "/courses/A/1/a.mp4"


def test_scan_subdirectory_urls_include_its_location(client, content_root: Path, make_file) -> None:
    make_file(content_root / "Group A" / "Course" / "Chapter" / "a.mp4", 3)

    resp = client.post("/api/scanner/scan", json={"directory_path": "Group A"})

    assert resp.status_code == 200, resp.text
    course = resp.json()["courses"][0]
    assert course["name"] == "Course"
    assert course["chapters"][0]["lectures"][0]["url"] == "/courses/Group%20A/Course/Chapter/a.mp4"


def test_scan_subdirectory_urls_are_fetchable(client, content_root: Path, make_file) -> None:
    make_file(content_root / "Group A" / "Course" / "Chapter" / "a.mp4").write_bytes(b"grouped")

    scan = client.post("/api/scanner/scan", json={"directoryPath": "Group A"})
    url = scan.json()["courses"][0]["chapters"][0]["lectures"][0]["url"]
    resp = client.get(url)

    assert resp.status_code == 200, resp.text
    assert resp.content == b"grouped"


def test_scan_outside_root_is_rejected(client) -> None:
    resp = client.post("/api/scanner/scan", json={"directoryPath": "../"})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "PATH_OUTSIDE_CONTENT_ROOT"


def test_scan_missing_directory(client) -> None:
    resp = client.post("/api/scanner/scan", json={"directoryPath": "nowhere"})

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "DIRECTORY_NOT_FOUND"
