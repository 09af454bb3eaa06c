from abc import ABC, abstractmethod
from datetime import date
from creative_report.models.review import ReviewEntry


class ReviewPlatform(ABC):
    @abstractmethod
    def fetch_reviews(
        self,
        project_id: str,
        author: str,
        start_date: date,
        end_date: date,
    ) -> list[ReviewEntry]:
        """Return the author's code reviews created within the date range."""
        pass
