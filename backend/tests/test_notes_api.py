"""Тесты /api/notes: категории и пункты только для владельца."""

import pytest


@pytest.fixture
def alice(client):
    response = client.post("/api/sessions/register", json={"username": "alice", "password": "pw123"})
    user_id = response.json()["payload"]["id"]
    client.post("/api/sessions/login", json={"username": "alice", "password": "pw123"})
    return user_id


class TestCategories:

    @pytest.mark.unit
    def test_create_category_and_item(self, client, alice):
        created = client.post(f"/api/notes/category/{alice}", json={"title": "  Compras "})
        assert created.status_code == 201
        category_id = created.json()["payload"]["id"]
        assert created.json()["payload"]["timestamp"]

        item = client.post(f"/api/notes/{category_id}", json={"text": "leche"})
        assert item.status_code == 201
        assert item.json()["payload"]["text"] == "leche"

        listing = client.get(f"/api/notes/{alice}").json()["payload"]
        assert len(listing) == 1
        assert listing[0]["title"] == "Compras"
        assert [i["text"] for i in listing[0]["items"]] == ["leche"]

    @pytest.mark.unit
    def test_empty_title_returns_400(self, client, alice):
        response = client.post(f"/api/notes/category/{alice}", json={"title": "   "})
        assert response.status_code == 400

    @pytest.mark.unit
    def test_empty_item_returns_400(self, client, alice):
        category_id = client.post(f"/api/notes/category/{alice}", json={"title": "A"}).json()["payload"]["id"]
        response = client.post(f"/api/notes/{category_id}", json={"text": ""})
        assert response.status_code == 400

    @pytest.mark.unit
    def test_unknown_category_returns_404(self, client, alice):
        response = client.post("/api/notes/does-not-exist", json={"text": "x"})
        assert response.status_code == 404


class TestOwnership:

    @pytest.mark.unit
    def test_anonymous_is_rejected(self, client):
        assert client.get("/api/notes/someone").status_code == 401
        assert client.post("/api/notes/category/someone", json={"title": "A"}).status_code == 401
        assert client.post("/api/notes/some-category", json={"text": "x"}).status_code == 401

    @pytest.mark.unit
    def test_foreign_notes_are_hidden(self, client, alice):
        category_id = client.post(f"/api/notes/category/{alice}", json={"title": "Mine"}).json()["payload"]["id"]

        client.get("/api/sessions/logout")
        client.post("/api/sessions/register", json={"username": "bob", "password": "pw"})
        client.post("/api/sessions/login", json={"username": "bob", "password": "pw"})

        assert client.get(f"/api/notes/{alice}").status_code == 403
        assert client.post(f"/api/notes/category/{alice}", json={"title": "X"}).status_code == 403
        assert client.post(f"/api/notes/{category_id}", json={"text": "x"}).status_code == 404
