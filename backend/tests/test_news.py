"""News API tests: admin CRUD and the published-only public listing."""

from voipfit.models.news_article import NewsArticle


def _article(**overrides) -> dict:
    payload = {
        "title": "Network update",
        "excerpt": "Short summary",
        "content": "Full article body",
        "imageUrl": "https://example.com/news.jpg",
        "isPublished": True,
    }
    payload.update(overrides)
    return payload


def test_create_news_appears_in_admin_listing(client):
    resp = client.post("/api/admin/news", json=_article())
    assert resp.status_code == 201, resp.text
    created = resp.json()
    assert created["id"]
    assert created["publishedAt"]

    rows = client.get("/api/admin/news").json()
    assert [row["id"] for row in rows] == [created["id"]]


def test_public_news_excludes_unpublished_and_sorts_newest_first(client):
    client.post("/api/admin/news", json=_article(title="Older", publishedAt="2026-01-10T09:00:00"))
    client.post("/api/admin/news", json=_article(title="Newer", publishedAt="2026-02-01T09:00:00"))
    client.post("/api/admin/news", json=_article(title="Draft", isPublished=False))

    public = client.get("/api/news")
    assert public.status_code == 200
    assert [row["title"] for row in public.json()] == ["Newer", "Older"]

    admin_titles = {row["title"] for row in client.get("/api/admin/news").json()}
    assert admin_titles == {"Older", "Newer", "Draft"}


def test_update_news_is_partial(client):
    created = client.post("/api/admin/news", json=_article()).json()

    resp = client.put(f"/api/admin/news/{created['id']}", json={"isPublished": False})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["isPublished"] is False
    assert body["title"] == "Network update"
    assert client.get("/api/news").json() == []


def test_delete_news(client):
    created = client.post("/api/admin/news", json=_article()).json()

    resp = client.delete(f"/api/admin/news/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert client.get("/api/admin/news").json() == []


def test_news_validation_and_not_found(client):
    missing_title = _article()
    missing_title.pop("title")
    assert client.post("/api/admin/news", json=missing_title).status_code == 400

    assert client.put("/api/admin/news/999", json={"title": "x"}).status_code == 404
    assert client.delete("/api/admin/news/999").status_code == 404
    assert client.put("/api/admin/news/not-a-number", json={"title": "x"}).status_code == 400


def test_update_news_clears_image_with_null(client):
    created = client.post("/api/admin/news", json=_article()).json()

    resp = client.put(f"/api/admin/news/{created['id']}", json={"imageUrl": None})
    assert resp.status_code == 200, resp.text
    assert resp.json()["imageUrl"] is None
    assert resp.json()["title"] == "Network update"


def test_update_news_rejects_null_for_required_fields(client):
    created = client.post("/api/admin/news", json=_article()).json()

    resp = client.put(f"/api/admin/news/{created['id']}", json={"title": None})
    assert resp.status_code == 400
    assert "title" in resp.json()["detail"]
    assert client.get("/api/news").json()[0]["title"] == "Network update"


def test_public_news_serves_rows_with_blank_text(client, db):
    db.add(NewsArticle(title="", excerpt="", content="", is_published=True))
    db.commit()

    resp = client.get("/api/news")
    assert resp.status_code == 200, resp.text
    assert resp.json()[0]["title"] == ""
