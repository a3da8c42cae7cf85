"""
Birdsy API Client
"""

import logging
from typing import Any, List

import requests

from .config import Config
from .models import DaySummary, Episode

logger = logging.getLogger(__name__)


class BirdsyError(Exception):
    """Base error for Birdsy API failures"""


class AuthenticationError(BirdsyError):
    """Credentials were rejected or no token came back"""


class CatalogError(BirdsyError):
    """The episode catalog could not be read"""


def _is_not_found(error: requests.RequestException) -> bool:
    response = getattr(error, "response", None)
    return response is not None and response.status_code == 404


class BirdsyClient:
    """Client to interact with the Birdsy API"""

    def __init__(self, config: Config):
        self.config = config
        self.url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self.token: str | None = None
        self.session = requests.Session()
        self.session.headers.update(
            {"Accept": "application/json", "Content-Type": "application/json"}
        )

    def _get(self, endpoint: str, params: dict | None = None) -> Any:
        """Perform a GET request to the API"""
        url = f"{self.url}/api/{endpoint}"
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict) -> Any:
        """Perform a POST request to the API"""
        url = f"{self.url}/api/{endpoint}"
        response = self.session.post(url, json=data, timeout=self.timeout)
        response.raise_for_status()
        if not response.content:
            return {}
        return response.json()

    def authenticate(self, email: str, password: str) -> str:
        """
        Exchange credentials for a session token

        The token is kept on the session for every later call and is
        never refreshed.

        Raises:
            AuthenticationError: if the request fails or carries no token
        """
        try:
            data = self._post(
                "v1/auth",
                {"email": email, "grant_type": "password", "password": password},
            )
            token = data["data"]["attributes"]["token"]
        except requests.RequestException as e:
            raise AuthenticationError(f"Authentication request failed: {e}") from e
        except (KeyError, TypeError) as e:
            raise AuthenticationError("No token in authentication response") from e

        if not token:
            raise AuthenticationError("Empty token in authentication response")

        self.token = token
        self.session.headers["authorization"] = token
        logger.info(f"Authenticated as {email}")
        return token

    def get_day_counts(self) -> List[DaySummary]:
        """Fetch the episode count of every recorded day, in server order"""
        try:
            data = self._get("v2/episodes/days")
            return [DaySummary.from_api(day) for day in data["meta"]["days"]]
        except (requests.RequestException, KeyError, TypeError, ValueError) as e:
            if self.config.fail_fast:
                raise CatalogError(f"Failed to get video counts: {e!r}") from e
            logger.error(f"Failed to get video counts: {e!r}")
            return []

    def get_count_for_date(self, date: str | None) -> int:
        """Look up the episode count for a single date (0 if unknown)"""
        for day in self.get_day_counts():
            if day.date == date:
                return day.count
        return 0

    def get_videos_for_date(self, date: str | None) -> List[Episode]:
        """
        Fetch every episode recorded on a date, page by page

        Pages are requested until the number of collected episodes reaches
        the day's count. A missing page or an empty page ends the listing
        early with what was collected so far. Any other failure retries the
        same page, up to ``page_retries`` times in a row.

        Raises:
            CatalogError: when a page keeps failing
        """
        total = self.get_count_for_date(date)
        episodes: List[Episode] = []
        page = 1
        failures = 0

        while len(episodes) < total:
            try:
                data = self._get("v2/episodes", params={"page": page, "date": date})
                items = data["data"]
            except requests.RequestException as e:
                if _is_not_found(e):
                    logger.warning(
                        f"Page {page} for {date} not found, "
                        f"keeping {len(episodes)} of {total} videos"
                    )
                    break
                failures += 1
                logger.error(f"Failed to get videos for {date} (page {page}): {e}")
                if self.config.fail_fast or failures > self.config.page_retries:
                    raise CatalogError(
                        f"Giving up on {date} after {failures} failed request(s) "
                        f"for page {page}"
                    ) from e
                continue
            except (KeyError, TypeError) as e:
                raise CatalogError(f"Unexpected episode listing for {date}") from e

            if not items:
                logger.warning(
                    f"Empty page {page} for {date}, "
                    f"keeping {len(episodes)} of {total} videos"
                )
                break

            try:
                episodes.extend([Episode.from_api(item) for item in items])
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise CatalogError(
                    f"Malformed episode on page {page} for {date}: {e!r}"
                ) from e
            page += 1
            failures = 0

        return episodes

    def delete_episode(self, episode_id: str | int) -> bool:
        """
        Delete one episode on the server

        Returns:
            True if successful, False otherwise
        """
        try:
            self._post("v2/episodes/group_actions/delete", {"ids": [episode_id]})
            logger.info(f"Deleted episode {episode_id}")
            return True
        except requests.RequestException as e:
            logger.error(f"Failed to delete video {episode_id}: {e}")
            return False
