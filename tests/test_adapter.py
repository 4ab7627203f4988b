"""
Tests for the calculation request adapter.

Uses a bare Flask app so the adapter is exercised with arbitrary
callables, independent of the formula catalog.
"""

import logging
import pytest
from flask import Flask

from physics.adapter import handle_calculation_request
from physics.errors import DomainViolation
from physics.validation import validate_number


def _nan_check(body):
    validate_number(float("nan"), "x")


def _always_domain_error(body):
    raise DomainViolation("v cannot be negative.")


@pytest.fixture
def adapter_client():
    app = Flask(__name__)
    app.config["TESTING"] = True
    routes = {
        "/add": lambda body: body["a"] + body["b"],
        "/nan": _nan_check,
        "/domain": _always_domain_error,
        "/infinite": lambda body: float("inf"),
        "/flag": lambda body: body["a"] > 1,
    }
    for rule, fn in routes.items():
        app.add_url_rule(rule, rule.strip("/"),
                         handle_calculation_request(fn), methods=["POST"])
    return app.test_client()


class TestSuccess:

    def test_result_and_inputs(self, adapter_client):
        resp = adapter_client.post("/add", json={"a": 2, "b": 3})
        assert resp.status_code == 200
        assert resp.get_json() == {"result": 5, "inputs": {"a": 2, "b": 3}}

    def test_extra_fields_echoed(self, adapter_client):
        body = {"a": 1, "b": 1, "note": "extra", "digits": 2}
        resp = adapter_client.post("/add", json=body)
        assert resp.get_json()["inputs"] == body

    def test_boolean_result(self, adapter_client):
        resp = adapter_client.post("/flag", json={"a": 2})
        assert resp.status_code == 200
        assert resp.get_json()["result"] is True

    def test_non_finite_result_is_null(self, adapter_client):
        resp = adapter_client.post("/infinite", json={})
        assert resp.status_code == 200
        assert resp.get_json()["result"] is None

    def test_non_finite_inputs_echoed_as_null(self, adapter_client):
        body = ('{"a": 1, "b": 2, "note": NaN, '
                '"extra": {"limits": [Infinity, -1]}}')
        resp = adapter_client.post("/add", data=body,
                                   content_type="application/json")
        assert resp.status_code == 200
        assert resp.get_json()["inputs"] == {
            "a": 1, "b": 2, "note": None, "extra": {"limits": [None, -1]},
        }
        text = resp.get_data(as_text=True)
        assert "NaN" not in text
        assert "Infinity" not in text


class TestFailure:

    def test_validation_error(self, adapter_client):
        resp = adapter_client.post("/nan", json={})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "x must be a finite number."}

    def test_domain_error(self, adapter_client):
        resp = adapter_client.post("/domain", json={})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "v cannot be negative."

    def test_unexpected_exception_is_400(self, adapter_client):
        resp = adapter_client.post("/add", json={"a": 1})
        assert resp.status_code == 400
        assert "b" in resp.get_json()["error"]

    def test_no_json_body(self, adapter_client):
        resp = adapter_client.post("/add", data="a=1",
                                   content_type="text/plain")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Request body must be JSON"

    def test_malformed_json(self, adapter_client):
        resp = adapter_client.post("/add", data="{not json",
                                   content_type="application/json")
        assert resp.status_code == 400

    def test_body_must_be_object(self, adapter_client):
        resp = adapter_client.post("/add", json=[1, 2])
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Request body must be a JSON object"

    def test_failure_logged_with_path_and_inputs(self, adapter_client, caplog):
        caplog.set_level(logging.WARNING, logger="physics.adapter")
        adapter_client.post("/domain", json={"v": -1})
        messages = [r.getMessage() for r in caplog.records
                    if r.name == "physics.adapter"]
        assert any("/domain" in m and "'v': -1" in m for m in messages)
