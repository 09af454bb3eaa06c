# tests/integration/conftest.py
import json
import pytest


def pytest_collection_modifyitems(items):
    """Add 'integration' marker to all tests in this directory."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def reviews_body():
    return json.dumps({
        "data": [
            {"review": {
                "number": 101,
                "title": "Add month parser",
                "state": "Closed",
                "project": {"key": "BAZEL"},
                "createdAt": 1707134400000,
            }},
            {"review": {
                "number": 102,
                "title": "Drop old cache",
                "state": "Deleted",
                "project": {"key": "BAZEL"},
                "createdAt": 1707220800000,
            }},
        ]
    })
