"""
Pytest configuration and shared fixtures for WAQL Tool tests.
"""

import json
from unittest.mock import patch

import pytest
import requests

from waql_tool.config import Settings
from waql_tool.models import Table


def make_response(body, status_code: int = 200) -> requests.Response:
    """Build a real requests.Response carrying `body`."""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (bytes, str)):
        content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        content = json.dumps(body).encode("utf-8")
    response._content = content
    response.encoding = "utf-8"
    response.url = "http://127.0.0.1:8090/waapi"
    return response


@pytest.fixture
def settings():
    """Settings pointing at a test endpoint."""
    return Settings(
        waapi_url="http://waapi.test/waapi",
        connect_timeout=1.0,
        read_timeout=2.0,
    )


@pytest.fixture
def mock_post():
    """Patch requests.Session.post; set return_value or side_effect per test."""
    with patch("requests.Session.post") as post:
        yield post


@pytest.fixture
def sample_result():
    """Return a heterogeneous WAQL result."""
    return {
        "return": [
            {"a": 1, "b": "x"},
            {"b": "y", "c": True},
        ]
    }


@pytest.fixture
def sample_table():
    """Return the table normalized from sample_result."""
    return Table(
        columns=["a", "b", "c"],
        rows=[
            {"a": "1", "b": "x", "c": ""},
            {"a": "", "b": "y", "c": "true"},
        ],
    )
