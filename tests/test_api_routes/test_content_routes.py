"""
Tests for article, newsletter and contact routes.
"""


class TestArticles:
    """Test /api/articles endpoints."""

    def test_create_derives_slug(self, client):
        response = client.post("/api/articles", json={"title": "Cultural Inspirations: Mumbai", "content": "..."})

        assert response.status_code == 201
        assert response.json()["slug"] == "cultural-inspirations-mumbai"
        assert client.get("/api/articles/cultural-inspirations-mumbai").status_code == 200

    def test_duplicate_slug_conflicts(self, client):
        client.post("/api/articles", json={"title": "Summer Edit", "content": "..."})

        assert client.post("/api/articles", json={"title": "Summer Edit", "content": "..."}).status_code == 409

    def test_missing_article(self, client):
        assert client.get("/api/articles/no-such-article").status_code == 404

    def test_list_by_category(self, client):
        client.post("/api/articles", json={"title": "One", "content": "...", "category": "interviews"})
        client.post("/api/articles", json={"title": "Two", "content": "...", "category": "inspiration"})

        response = client.get("/api/articles", params={"category": "interviews"})

        assert [a["title"] for a in response.json()] == ["One"]

    def test_update_and_delete(self, client):
        article_id = client.post("/api/articles", json={"title": "Draft", "content": "v1"}).json()["id"]

        assert client.patch(f"/api/articles/{article_id}", json={"content": "v2"}).json()["content"] == "v2"
        assert client.delete(f"/api/articles/{article_id}").status_code == 204
        assert client.delete(f"/api/articles/{article_id}").status_code == 404
        assert client.patch(f"/api/articles/{article_id}", json={"content": "v3"}).status_code == 404

    def test_update_rejects_null_title(self, client):
        article_id = client.post("/api/articles", json={"title": "Draft", "content": "v1"}).json()["id"]

        assert client.patch(f"/api/articles/{article_id}", json={"title": None}).status_code == 422
        assert client.get("/api/articles/draft").json()["title"] == "Draft"


class TestInbox:
    """Test newsletter and contact endpoints."""

    def test_subscribe_twice(self, client):
        first = client.post("/api/subscribe", json={"email": "news@kharidify.in"})
        second = client.post("/api/subscribe", json={"email": "news@kharidify.in"})

        assert first.status_code == 201
        assert second.status_code == 200
        assert second.json()["message"] == "Email already subscribed"
        assert second.json()["subscriber"]["id"] == first.json()["subscriber"]["id"]

    def test_subscribe_invalid_email(self, client):
        assert client.post("/api/subscribe", json={"email": "nope"}).status_code == 422

    def test_contact(self, client):
        payload = {"name": "Meera", "email": "meera@kharidify.in", "subject": "Sizing", "message": "Hello"}

        response = client.post("/api/contact", json=payload)

        assert response.status_code == 201
        contacts = client.get("/api/contacts").json()
        assert [c["message"] for c in contacts] == ["Hello"]
