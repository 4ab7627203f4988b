"""
Tests for Flask API endpoints.

Integration tests for the catalog, constants and health endpoints and
the JSON error handlers.
"""

import pytest


class TestServicesEndpoint:
    """Test GET /api/v1/services."""

    def test_list_services(self, client):
        resp = client.get("/api/v1/services")
        assert resp.status_code == 200
        data = resp.get_json()
        ids = [s["id"] for s in data]
        assert ids[0] == "mechanics"
        assert "electromagnetism" in ids
        assert "engineering" in ids

    def test_service_shape(self, client):
        data = client.get("/api/v1/services").get_json()
        for service in data:
            assert set(service) == {"id", "name", "description",
                                    "category", "formulas"}
            assert service["category"] in ("physics", "engineering")
            assert service["formulas"]


class TestConstantsEndpoint:
    """Test GET /api/v1/constants."""

    def test_constants_table(self, client):
        resp = client.get("/api/v1/constants")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["C"]["value"] == 299792458.0
        assert data["C"]["unit"] == "m s^-1"
        assert "G_EARTH" in data


class TestCatalogEndpoint:
    """Test GET /api/v1/<category>/formulas."""

    def test_physics_catalog(self, client):
        resp = client.get("/api/v1/physics/formulas")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["category"] == "physics"
        assert data["count"] == len(data["formulas"])
        slugs = [f["slug"] for f in data["formulas"]]
        assert "coulombs-law" in slugs
        assert "youngs-modulus" in slugs

    def test_engineering_catalog(self, client):
        data = client.get("/api/v1/engineering/formulas").get_json()
        slugs = {f["slug"] for f in data["formulas"]}
        assert {"youngs-modulus", "ideal-gas-law",
                "stefan-boltzmann-law"} <= slugs
        assert "lorentz-factor" not in slugs

    def test_search(self, client):
        data = client.get("/api/v1/physics/formulas?search=Coulomb").get_json()
        assert "coulombs-law" in [f["slug"] for f in data["formulas"]]
        for f in data["formulas"]:
            text = " ".join([f["slug"], f["equation"], f["description"]])
            assert "coulomb" in text.lower()

    def test_search_no_match(self, client):
        data = client.get("/api/v1/physics/formulas?search=zzzz").get_json()
        assert data["count"] == 0

    def test_kinds(self, client):
        data = client.get("/api/v1/physics/formulas").get_json()
        kinds = {f["slug"]: f["kind"] for f in data["formulas"]}
        assert kinds["snells-law"] == "check"
        assert kinds["weight"] == "value"

    def test_unknown_category(self, client):
        resp = client.get("/api/v1/chemistry/formulas")
        assert resp.status_code == 404
        assert "chemistry" in resp.get_json()["error"]


class TestFormulaEndpoint:
    """Test GET /api/v1/<category>/formulas/<slug>."""

    def test_formula_metadata(self, client):
        resp = client.get("/api/v1/physics/formulas/coulombs-law")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["endpoint"] == "/api/v1/physics/coulombs-law"
        assert data["category"] == "physics"
        names = [q["name"] for q in data["quantities"]]
        assert names == ["k", "q1", "q2", "r"]
        r = data["quantities"][3]
        assert r["rules"]["check_zero"] is True
        assert data["quantities"][0]["default"] == pytest.approx(8.9875e9,
                                                                 rel=1e-4)

    def test_check_lists_tolerance(self, client):
        data = client.get("/api/v1/physics/formulas/ideal-gas-law").get_json()
        tolerance = data["quantities"][-1]
        assert tolerance["name"] == "tolerance"
        assert tolerance["default"] == 1e-9

    def test_formula_not_found(self, client):
        resp = client.get("/api/v1/physics/formulas/perpetual-motion")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Formula not found"


class TestAppEndpoints:

    def test_root(self, client):
        data = client.get("/").get_json()
        assert data["services"] == "/api/v1/services"

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.get_json()["status"] == "healthy"

    def test_unknown_route_is_json_404(self, client):
        resp = client.post("/api/v1/physics/perpetual-motion", json={})
        assert resp.status_code == 404
        data = resp.get_json()
        assert data["url"] == "/api/v1/physics/perpetual-motion"
        assert data["error"] == "Can't find what you are looking for."

    def test_get_on_calculation_is_405(self, client):
        resp = client.get("/api/v1/physics/weight")
        assert resp.status_code == 405
        assert "GET" in resp.get_json()["error"]

    def test_cors_header(self, client):
        resp = client.get("/api/v1/services",
                          headers={"Origin": "http://example.com"})
        assert resp.headers.get("Access-Control-Allow-Origin") in (
            "*", "http://example.com")
