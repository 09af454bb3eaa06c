import logging
from datetime import date
import httpx
from .base import ReviewPlatform
from creative_report.exceptions import FetchError, ResponseDecodeError
from creative_report.models.review import ReviewEntry, ReviewsResponse


logger = logging.getLogger(__name__)

REVIEW_FIELDS = "data(review(title,createdAt,state,number,project))"


class SpaceClient(ReviewPlatform):
    def __init__(self, domain: str, token: str, timeout: float = 30.0):
        self.domain = domain.strip("/")
        self.token = token
        self.timeout = timeout
        self.api_url = f"https://{self.domain}/api/http"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
        }

    def fetch_reviews(
        self,
        project_id: str,
        author: str,
        start_date: date,
        end_date: date,
    ) -> list[ReviewEntry]:
        """Fetch code reviews in a single request. Pagination is not followed."""
        url = f"{self.api_url}/projects/id:{project_id}/code-reviews"
        logger.info(f"Fetching code reviews of {author} in {project_id} from {start_date} to {end_date}")
        try:
            with httpx.Client() as client:
                response = client.get(
                    url,
                    params={
                        "state": "",
                        "author": author,
                        "from": start_date.isoformat(),
                        "to": end_date.isoformat(),
                        "$fields": REVIEW_FIELDS,
                    },
                    headers=self._headers(),
                    timeout=self.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Code review request failed with HTTP {e.response.status_code}: {url}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Code review request failed: {e}") from e

        # Keep the raw body so a malformed payload can be inspected
        body = response.text
        try:
            reviews = ReviewsResponse.parse(body).reviews()
        except ResponseDecodeError:
            logger.debug(f"Undecodable code review response: {body}")
            raise

        logger.info(f"Received {len(reviews)} code reviews")
        return reviews
