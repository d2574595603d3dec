"""Tests for API documentation and route registration - no database required."""


class TestOpenAPISchema:

    def test_openapi_schema_available(self, client_no_db):
        """Test that OpenAPI schema is generated."""
        response = client_no_db.get("/openapi.json")
        assert response.status_code == 200
        schema = response.json()
        assert "openapi" in schema
        assert "paths" in schema
        assert "info" in schema

    def test_docs_endpoint_available(self, client_no_db):
        """Test that Swagger UI is accessible."""
        response = client_no_db.get("/docs")
        assert response.status_code == 200

    def test_api_routes_registered(self, client_no_db):
        """Test that expected API routes are in the schema."""
        paths = client_no_db.get("/openapi.json").json().get("paths", {})

        assert "/health" in paths
        assert "/api/health" in paths
        assert "/api/auth/register" in paths
        assert "/api/auth/login" in paths
        assert "/api/sites" in paths
        assert "/api/waste" in paths
        assert "/api/waste/{report_id}" in paths
        assert "/api/waste/{report_id}/status" in paths

    def test_admin_routes_declare_bearer_security(self, client_no_db):
        paths = client_no_db.get("/openapi.json").json()["paths"]

        assert "security" in paths["/api/waste"]["get"]
        assert "security" in paths["/api/waste/{report_id}/status"]["patch"]
        assert "security" not in paths["/api/waste"]["post"]

    def test_routers_mounted_under_api_prefix(self, client_no_db):
        from wte_backend.core.config import settings

        paths = client_no_db.get("/openapi.json").json()["paths"]
        api_paths = [p for p in paths if p != "/health"]
        assert api_paths
        assert all(p.startswith(f"{settings.API_V1_STR}/") for p in api_paths)
