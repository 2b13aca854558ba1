from __future__ import annotations

import os

from property_site.core.config import settings
from property_site.services.uploads import generate_upload_filename, upload_url


def test_health(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_public_files_are_served(client):
    with open(os.path.join(settings.PUBLIC_DIR, "admin.html"), "w", encoding="utf-8") as fh:
        fh.write("<h1>Admin</h1>")

    res = client.get("/admin.html")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    assert "Admin" in res.text


def test_missing_static_file_is_not_found(client):
    assert client.get("/nope.css").status_code == 404
    assert client.get("/uploads/nope.jpg").status_code == 404


def test_cors_preflight(client):
    res = client.options(
        "/contact",
        headers={
            "Origin": "http://localhost:5500",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:5500"
    assert res.headers["access-control-allow-headers"] == "content-type"


def test_cors_headers_on_responses(client):
    res = client.get("/messages")

    assert res.headers["access-control-allow-origin"] == "*"


def test_cors_restricted_origins(client, monkeypatch):
    monkeypatch.setattr(settings, "CORS_ORIGINS", ["https://emlak.example"])

    allowed = client.get("/health", headers={"Origin": "https://emlak.example"})
    other = client.get("/health", headers={"Origin": "https://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "https://emlak.example"
    assert "access-control-allow-origin" not in other.headers


def test_generated_filename_keeps_extension():
    name = generate_upload_filename("living-room.PNG")

    stamp, rand = name[: -len(".PNG")].split("-")
    assert name.endswith(".PNG")
    assert stamp.isdigit() and rand.isdigit()
    assert 0 <= int(rand) <= 10**9


def test_generated_filenames_differ():
    assert len({generate_upload_filename("a.jpg") for _ in range(50)}) == 50


def test_upload_url():
    assert upload_url("1-2.jpg") == "/uploads/1-2.jpg"
