from fastapi.testclient import TestClient


class TestURLShortenerAPI:
    """Test the HTTP API on top of the shortener service"""

    def test_create_short_url(self, client: TestClient):
        """Test creating a short URL with a generated slug"""
        url_data = {"long_url": "https://www.google.com/"}

        response = client.post("/api/v1/urls/", json=url_data)
        assert response.status_code == 201

        data = response.json()
        assert len(data["slug"]) == 10
        assert data["long_url"] == "https://www.google.com/"
        assert data["short_url"].endswith(f"/{data['slug']}")

    def test_create_with_custom_slug(self, client: TestClient):
        response = client.post(
            "/api/v1/urls/",
            json={"long_url": "https://www.python.org", "slug": "py"}
        )
        assert response.status_code == 201
        assert response.json()["slug"] == "py"

    def test_duplicate_slug_conflict(self, client: TestClient):
        url_data = {"long_url": "https://www.python.org", "slug": "py"}
        assert client.post("/api/v1/urls/", json=url_data).status_code == 201

        response = client.post(
            "/api/v1/urls/",
            json={"long_url": "https://docs.python.org", "slug": "py"}
        )
        assert response.status_code == 409
        assert "py" in response.json()["detail"]

    def test_invalid_url(self, client: TestClient):
        """Test creating URL with invalid URL"""
        response = client.post("/api/v1/urls/", json={"long_url": "not-a-valid-url"})
        assert response.status_code == 422

        # Nothing was recorded
        assert client.get("/api/v1/events/").json() == []

    def test_slug_must_be_path_safe(self, client: TestClient):
        response = client.post(
            "/api/v1/urls/",
            json={"long_url": "https://www.python.org", "slug": "not/safe"}
        )
        assert response.status_code == 422

    def test_get_url_info(self, client: TestClient):
        """Test getting URL information"""
        create_response = client.post("/api/v1/urls/", json={"long_url": "https://www.google.com/"})
        slug = create_response.json()["slug"]

        response = client.get(f"/api/v1/urls/{slug}")
        assert response.status_code == 200

        data = response.json()
        assert data["slug"] == slug
        assert data["long_url"] == "https://www.google.com/"

        # Lookup is a query, not a redirect
        stats = client.get(f"/api/v1/urls/{slug}/stats").json()
        assert stats["redirects"] == 0

    def test_get_nonexistent_url(self, client: TestClient):
        """Test getting info for non-existent URL"""
        response = client.get("/api/v1/urls/nonexistent")
        assert response.status_code == 404

    def test_redirect_url(self, client: TestClient):
        """Test URL redirection"""
        create_response = client.post("/api/v1/urls/", json={"long_url": "https://www.github.com/"})
        slug = create_response.json()["slug"]

        response = client.get(f"/{slug}", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "https://www.github.com/"

    def test_padded_url_redirects_cleanly(self, client: TestClient):
        """Surrounding whitespace is trimmed before the link is stored"""
        create_response = client.post(
            "/api/v1/urls/",
            json={"long_url": "  https://www.python.org/\n"}
        )
        assert create_response.status_code == 201
        assert create_response.json()["long_url"] == "https://www.python.org/"

        slug = create_response.json()["slug"]
        response = client.get(f"/{slug}", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "https://www.python.org/"

    def test_redirect_nonexistent_url(self, client: TestClient):
        """Test redirecting non-existent URL"""
        response = client.get("/nonexistent", follow_redirects=False)
        assert response.status_code == 404

    def test_url_stats(self, client: TestClient):
        """Redirects are counted synchronously"""
        create_response = client.post("/api/v1/urls/", json={"long_url": "https://www.stackoverflow.com/"})
        slug = create_response.json()["slug"]

        for _ in range(3):
            client.get(f"/{slug}", follow_redirects=False)

        response = client.get(f"/api/v1/urls/{slug}/stats")
        assert response.status_code == 200
        assert response.json() == {
            "slug": slug,
            "long_url": "https://www.stackoverflow.com/",
            "redirects": 3,
        }

    def test_stats_nonexistent_url(self, client: TestClient):
        response = client.get("/api/v1/urls/unknown/stats")
        assert response.status_code == 404

    def test_events_endpoint(self, client: TestClient):
        slug = client.post("/api/v1/urls/", json={"long_url": "https://example.com/"}).json()["slug"]
        client.get(f"/{slug}", follow_redirects=False)

        events = client.get("/api/v1/events/").json()
        assert events == [
            {"kind": "link_created", "sequence": 1, "slug": slug, "url": "https://example.com/"},
            {"kind": "redirect_occurred", "sequence": 2, "slug": slug},
        ]

        later = client.get("/api/v1/events/", params={"after": 1}).json()
        assert [e["sequence"] for e in later] == [2]

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
