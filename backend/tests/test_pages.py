"""Server-rendered page tests."""

from voipfit.services import content_service


def test_home_page_renders_published_content(client, db):
    content_service.upsert_content(db, "hero", {"title": "Talk Anywhere", "subtitle": "Carrier grade"})
    content_service.upsert_content(db, "stats", {"countries": "150+"})
    content_service.upsert_content(
        db, "about", {"title": "About Us", "description": "Telecom since 2018", "values": "Trust"}
    )
    client.post(
        "/api/admin/services",
        json={"name": "Voice Service", "description": "Calls", "icon": "Phone", "color": "amber"},
    )
    client.post(
        "/api/admin/services",
        json={"name": "Retired Service", "description": "Old", "isActive": False},
    )
    client.post(
        "/api/admin/news",
        json={"title": "Draft Story", "excerpt": "e", "content": "c", "isPublished": False},
    )
    client.post(
        "/api/admin/news",
        json={"title": "Launch Story", "excerpt": "We launched", "content": "c"},
    )
    client.post("/api/admin/carousel", json={"imageUrl": "https://example.com/s.jpg", "title": "Slide One"})

    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    assert "Talk Anywhere" in html
    assert "Carrier grade" in html
    assert "Countries Served" in html
    assert "Voice Service" in html
    assert "Retired Service" not in html
    assert "Launch Story" in html
    assert "Draft Story" not in html
    assert "Slide One" in html
    assert "Trust" in html
    assert 'id="contact-form"' in html


def test_home_page_renders_without_content(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "No services available." in resp.text


def test_admin_panel_shell(client):
    resp = client.get("/admin")
    assert resp.status_code == 200
    assert "VoipFit Admin" in resp.text
    assert "admin.js" in resp.text
