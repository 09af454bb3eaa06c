from .review import ProjectRef, ReviewEntry, ReviewState, ReviewsResponse, ReviewWrapper

__all__ = [
    "ProjectRef",
    "ReviewEntry",
    "ReviewState",
    "ReviewsResponse",
    "ReviewWrapper",
]
