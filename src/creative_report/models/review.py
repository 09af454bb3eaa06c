# src/creative_report/models/review.py
from datetime import datetime, timedelta, timezone
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from creative_report.exceptions import ResponseDecodeError


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except OverflowError as e:
        raise ValueError(f"Invalid timestamp: {ms}") from e


class ReviewState(str, Enum):
    OPENED = "Opened"
    CLOSED = "Closed"
    DELETED = "Deleted"


class ProjectRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str  # project key used in URLs, e.g. "BAZEL"


class ReviewEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    number: StrictInt
    title: str
    state: ReviewState
    project: ProjectRef
    created_at: datetime = Field(alias="createdAt")

    @field_validator("created_at", mode="before")
    @classmethod
    def _decode_created_at(cls, value):
        if isinstance(value, datetime):
            return value
        # bool is an int subclass, floats would lose precision
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("createdAt must be an integer of epoch milliseconds")
        return parse_timestamp(value)


class ReviewWrapper(BaseModel):
    review: ReviewEntry


class ReviewsResponse(BaseModel):
    """Root of the code-reviews response: ``{"data": [{"review": {...}}]}``."""
    data: list[ReviewWrapper]

    @classmethod
    def parse(cls, text: str) -> "ReviewsResponse":
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ResponseDecodeError(f"Failed to decode code reviews: {e}", body=text) from e

    def reviews(self) -> list[ReviewEntry]:
        return [wrapper.review for wrapper in self.data]
