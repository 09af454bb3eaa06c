# tests/conftest.py
from datetime import datetime, timezone
import pytest
from creative_report.config import Settings
from creative_report.models.review import ProjectRef, ReviewEntry, ReviewState


def make_review(
    number: int = 1,
    title: str = "Add parser",
    state: ReviewState = ReviewState.CLOSED,
    project: str = "BAZEL",
    created_at: datetime = datetime(2024, 2, 5, 12, 30, tzinfo=timezone.utc),
) -> ReviewEntry:
    return ReviewEntry(
        number=number,
        title=title,
        state=state,
        project=ProjectRef(key=project),
        created_at=created_at,
    )


@pytest.fixture
def review_factory():
    return make_review


@pytest.fixture
def settings():
    return Settings(
        space_domain="acme.jetbrains.space",
        space_project_id="2a3b4c",
        space_token="test-token",
        space_user_id="jdoe",
        user_name="Jane Doe",
        percent_creative=80,
        _env_file=None,
    )
