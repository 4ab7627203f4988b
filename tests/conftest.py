"""
Pytest fixtures for the physics formula API test suite.
"""

import pytest
from app import create_app


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app({"LOG_LEVEL": "WARNING"})
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def calc(client):
    """POST a body to /api/v1/physics/<slug> and return (status, json)."""
    def _calc(slug, body, category="physics"):
        resp = client.post("/api/v1/{}/{}".format(category, slug), json=body)
        return resp.status_code, resp.get_json()
    return _calc
