"""目录视图接口的集成测试。"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from assetview.services.view_service import view_service


def _auth_headers(client: TestClient) -> dict[str, str]:
    resp = client.post("/api/v1/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['data']['access_token']}"}


def test_login_rejects_wrong_password(client: TestClient):
    resp = client.post("/api/v1/auth/login", json={"username": "admin", "password": "wrong-password"})
    assert resp.status_code == 401
    assert resp.json()["code"] == 401


def test_view_requires_authentication(client: TestClient):
    resp = client.get("/api/v1/view/folder/unique-paths")
    assert resp.status_code == 401
    assert resp.json()["msg"] == "缺少认证信息"


def test_unique_paths(client: TestClient, admin_user, make_asset):
    make_asset(admin_user.id, "a/b/x.jpg")
    make_asset(admin_user.id, "a/c/y.jpg")
    make_asset(admin_user.id, "a/c/z.jpg")

    resp = client.get("/api/v1/view/folder/unique-paths", headers=_auth_headers(client))
    assert resp.status_code == 200
    body = resp.json()
    assert body["code"] == 200
    assert set(body["data"]) == {"a/b", "a/c"}
    assert len(body["data"]) == 2


def test_folder_lists_direct_children_only(client: TestClient, admin_user, make_asset):
    make_asset(admin_user.id, "a/z.jpg", size=5)
    make_asset(admin_user.id, "a/b/y.jpg")
    make_asset(admin_user.id, "a/x.jpg")
    make_asset(admin_user.id, "a")

    resp = client.get("/api/v1/view/folder", params={"path": "a/"}, headers=_auth_headers(client))
    assert resp.status_code == 200
    items = resp.json()["data"]
    assert [item["originalPath"] for item in items] == ["a/x.jpg", "a/z.jpg"]
    assert items[1]["fileSizeInByte"] == 5


def test_folder_stats_scenario(client: TestClient, admin_user, make_asset):
    latest = datetime(2024, 3, 1, tzinfo=timezone.utc)
    make_asset(admin_user.id, "photos/2021/a.jpg", size=100)
    make_asset(admin_user.id, "photos/2021/b.jpg", size=200, modified=latest)
    make_asset(admin_user.id, "photos/2022/c.jpg", size=50)
    make_asset(admin_user.id, "Photos/2023/d.jpg", size=999)

    resp = client.get("/api/v1/view/folder/stats", params={"path": "photos"}, headers=_auth_headers(client))
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert [(r["path"], r["name"], r["assetCount"], r["totalSize"]) for r in rows] == [
        ("photos", "photos", 3, 350),
        ("photos/2021", "2021", 2, 300),
        ("photos/2022", "2022", 1, 50),
    ]
    assert rows[0]["lastModified"].startswith("2024-03-01")
    # SQLite 读回的时间不带时区，输出统一补为 UTC
    assert rows[0]["lastModified"].endswith(("Z", "+00:00"))
    assert rows[2]["lastModified"].endswith(("Z", "+00:00"))


def test_folder_stats_empty_directory(client: TestClient, admin_user, make_asset):
    make_asset(admin_user.id, "photos/2021/a.jpg", size=100)

    resp = client.get("/api/v1/view/folder/stats", params={"path": "empty/dir"}, headers=_auth_headers(client))
    assert resp.status_code == 200
    assert resp.json()["data"] == []


def test_service_folder_stats_at_root(db_session_fixture, admin_user, make_asset):
    make_asset(admin_user.id, "photos/a.jpg", size=1)
    make_asset(admin_user.id, "videos/b.mp4", size=2)

    stats = view_service.get_folder_stats(db_session_fixture, admin_user.id, None)
    assert [(s.path, s.asset_count, s.total_size) for s in stats] == [
        ("", 2, 3),
        ("photos", 1, 1),
        ("videos", 1, 2),
    ]
