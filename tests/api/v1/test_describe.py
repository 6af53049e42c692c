"""Tests for the describe and ordered_terms endpoints."""

import logging
import re

import pytest
from fastapi.testclient import TestClient

from app.common.config import config
from app.common.schemas import DescribeRequest, OrderedTermsRequest


def test_health(test_client: TestClient):  # noqa: D103
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == "Healthy"


def test_describe_success(test_client: TestClient):
    """Test a description with every field."""
    request = DescribeRequest(description="compact silty sand, some clay, wet")
    response = test_client.post("/api/V1/describe", content=request.model_dump_json())
    assert response.status_code == 200
    assert response.json() == {
        "original": "compact silty sand, some clay, wet",
        "primary": "sand",
        "secondary": "silt",
        "consistency": "compact",
        "moisture": "wet",
        "ordered": ["sand", "silt", "clay"],
    }


def test_describe_field_strategy(test_client: TestClient):  # noqa: D103
    response = test_client.post("/api/V1/describe", json={"description": "gravel, SAND", "strategy": "field"})
    assert response.status_code == 200
    assert response.json()["primary"] == "gravel"


def test_describe_empty_description(test_client: TestClient):
    """An empty description is not an error."""
    response = test_client.post("/api/V1/describe", json={"description": ""})
    assert response.status_code == 200
    assert response.json() == {
        "original": "",
        "primary": "",
        "secondary": "",
        "consistency": "",
        "moisture": "",
        "ordered": [],
    }


def test_describe_missing_description(test_client: TestClient):  # noqa: D103
    response = test_client.post("/api/V1/describe", json={})
    assert response.status_code == 400
    assert response.json() == {"detail": "description field - Field required"}


def test_describe_too_long(test_client: TestClient, max_description_length: int):  # noqa: D103
    response = test_client.post("/api/V1/describe", json={"description": "sand " * max_description_length})
    assert response.status_code == 400
    assert response.json() == {
        "detail": f"Description must not be longer than {max_description_length} characters."
    }


def test_describe_invalid_strategy(test_client: TestClient):  # noqa: D103
    response = test_client.post("/api/V1/describe", json={"description": "sand", "strategy": "bert"})
    assert response.status_code == 400
    assert response.json()["detail"].startswith("strategy field")


def test_ordered_terms(test_client: TestClient):  # noqa: D103
    request = OrderedTermsRequest(description="SAND and GRAVEL, silty")
    response = test_client.post("/api/V1/ordered_terms", content=request.model_dump_json())
    assert response.status_code == 200
    assert response.json() == {"ordered": ["sand", "gravel", "silt"]}


def test_openapi_has_no_422(test_client: TestClient):  # noqa: D103
    schema = test_client.get("/openapi.json").json()
    assert "422" not in schema["paths"]["/api/V1/describe"]["post"]["responses"]


@pytest.mark.parametrize("path", ["/api/V1/describe", "/api/V1/ordered_terms"])
def test_request_is_logged(test_client: TestClient, caplog: pytest.LogCaptureFixture, path: str):
    """Each request is logged with its method, path, duration and description."""
    with caplog.at_level(logging.INFO, logger=config.logger_name):
        response = test_client.post(path, json={"description": "sand and boulders"})
    assert response.status_code == 200

    messages = [record.getMessage() for record in caplog.records if record.name == config.logger_name]
    assert any(
        re.fullmatch(rf"POST: {path} \(\d+\.\d{{4}}s\): sand and boulders", message) for message in messages
    )
