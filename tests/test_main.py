class TestApplication:

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"

    def test_process_time_header(self, client):
        response = client.get("/health")
        assert "x-process-time" in response.headers

    def test_cors_allows_frontend_origin(self, client):
        response = client.options(
            "/appointments",
            headers={
                "Origin": "https://neuro-desk-portal.vercel.app",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://neuro-desk-portal.vercel.app"
        assert response.headers["access-control-allow-credentials"] == "true"

    def test_cors_rejects_unknown_origin(self, client):
        response = client.options(
            "/appointments",
            headers={
                "Origin": "https://evil.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert "access-control-allow-origin" not in response.headers

    def test_unknown_route_message_envelope(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert "message" in response.json()
