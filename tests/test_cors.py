#!/usr/bin/env python3
"""
Pytest tests for CORS configuration
Tests that the FastAPI application properly handles CORS requests from localhost:3000
"""

from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


class TestCORSConfiguration:
    """Test CORS middleware configuration"""

    def setup_method(self):
        """Set up test fixtures"""
        self.client = TestClient(app)
        self.frontend_origin = "http://localhost:3000"

    def test_cors_preflight_request(self):
        """Test CORS preflight OPTIONS request"""
        response = self.client.options(
            "/",
            headers={
                "Origin": self.frontend_origin,
                "Access-Control-Request-Method": "GET",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        # Preflight requests should return 200
        assert response.status_code == 200

        # Check CORS headers are present
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert "access-control-allow-methods" in response.headers
        assert "access-control-allow-headers" in response.headers

    def test_cors_simple_get_request(self):
        """Test simple GET request with CORS headers"""
        response = self.client.get("/", headers={"Origin": self.frontend_origin})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert response.headers["access-control-allow-credentials"] == "true"
        assert response.json() == {"message": f"{settings.PROJECT_NAME} is running"}

    def test_cors_preflight_registration(self):
        """Test CORS preflight for the registration POST"""
        response = self.client.options(
            "/api/users",
            headers={
                "Origin": self.frontend_origin,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == self.frontend_origin
        assert "POST" in response.headers.get("access-control-allow-methods", "").upper()

    def test_cors_with_different_origin(self):
        """Test that requests from non-allowed origins are not granted access"""
        different_origin = "http://localhost:4000"

        response = self.client.get("/", headers={"Origin": different_origin})

        # Request should still succeed (CORS is a browser-level security)
        assert response.status_code == 200
        if "access-control-allow-origin" in response.headers:
            assert response.headers["access-control-allow-origin"] != different_origin
