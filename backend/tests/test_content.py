from app.models.content import Content, ContentRevision
from tests.conftest import auth_headers


def test_content_save_revert_and_remove(client, db, seed_staff):
    headers = auth_headers(client)
    created = client.post(
        "/api/content/save",
        json={"title": "About", "uri": "about", "content": "v1", "html": "<p>v1</p>", "active": True},
        headers=headers,
    )
    assert created.status_code == 200, created.text
    first = created.json()
    assert first["message"] == "Content Entry created"
    content_id = first["record"]["id"]

    updated = client.post(
        "/api/content/save",
        json={"id": content_id, "title": "About us", "content": "v2", "html": "<p>v2</p>", "active": True},
        headers=headers,
    ).json()
    assert updated["message"] == "Content Entry saved"
    assert updated["is_new_revision"] is True
    assert updated["record"]["uri"] == "about"

    public = client.get("/api/public/content/about")
    assert public.status_code == 200
    assert public.json()["html"] == "<p>v2</p>"

    reverted = client.post(
        "/api/content/revert",
        json={"id": content_id, "revision_id": first["revision_id"]},
        headers=headers,
    )
    assert reverted.status_code == 200
    assert reverted.json()["message"] == "Content Reverted"
    assert client.get("/api/public/content/about").json()["content"] == "v1"
    assert db.query(ContentRevision).filter(ContentRevision.content_id == content_id).count() == 2

    removed = client.delete("/api/content", params={"id": str(content_id)}, headers=headers)
    assert removed.status_code == 200
    assert removed.json()["removed"] == 1
    assert db.query(Content).count() == 0
    assert db.query(ContentRevision).count() == 0


def test_content_revert_missing_parent(client, seed_staff):
    headers = auth_headers(client)
    first = client.post(
        "/api/content/save",
        json={"title": "Terms", "uri": "terms", "content": "t"},
        headers=headers,
    ).json()

    resp = client.post(
        "/api/content/revert",
        json={"id": first["record"]["id"] + 100, "revision_id": first["revision_id"]},
        headers=headers,
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Content Not Found"


def test_content_and_blog_are_independent(client, db, seed_staff):
    headers = auth_headers(client)
    client.post("/api/content/save", json={"title": "Same", "uri": "same", "active": True}, headers=headers)

    assert client.get("/api/public/blog/same").status_code == 404
    assert client.get("/api/public/content/same").status_code == 200
    page = client.get("/api/blog", headers=headers).json()
    assert page["total"] == 0
