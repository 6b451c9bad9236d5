"""Fetchers that retrieve Daum dictionary result pages."""

import logging
from abc import ABC, abstractmethod

import httpx

from daumdic.config import settings
from daumdic.errors import FetchError

logger = logging.getLogger(__name__)


class Fetcher(ABC):
    """Abstract base class for result page fetchers."""

    @abstractmethod
    def fetch(self, term: str) -> str:
        """
        Retrieve the result page for a term.

        Args:
            term: The search term, sent as the `q` query parameter

        Returns:
            Raw HTML text of the result page

        Raises:
            FetchError: On transport failure or an HTTP error status
        """
        ...  # pragma: no cover

    @abstractmethod
    async def fetch_async(self, term: str) -> str:
        """Async variant of `fetch`."""
        ...  # pragma: no cover


class HttpFetcher(Fetcher):
    """Fetch result pages from dic.daum.net over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.base_url = base_url or settings.dictionary_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.user_agent = user_agent or settings.user_agent

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}

    def fetch(self, term: str) -> str:
        logger.debug(f"Fetching '{term}' from {self.base_url}")
        try:
            with httpx.Client(
                timeout=self.timeout, headers=self.headers, follow_redirects=True
            ) as client:
                response = client.get(self.base_url, params={"q": term})
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._wrap_error(term, e) from e

        return response.text

    async def fetch_async(self, term: str) -> str:
        logger.debug(f"Fetching '{term}' from {self.base_url} (async)")
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, headers=self.headers, follow_redirects=True
            ) as client:
                response = await client.get(self.base_url, params={"q": term})
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._wrap_error(term, e) from e

        return response.text

    def _wrap_error(self, term: str, error: httpx.HTTPError) -> FetchError:
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            logger.error(f"Daum dictionary returned HTTP {status_code} for '{term}'")
            return FetchError(term, f"HTTP {status_code}", status_code=status_code)
        if isinstance(error, httpx.TimeoutException):
            logger.warning(f"Request for '{term}' timed out after {self.timeout}s")
            return FetchError(term, f"timed out after {self.timeout}s")
        if isinstance(error, httpx.ConnectError):
            logger.error(f"Cannot connect to {self.base_url}: {error}")
            return FetchError(term, f"cannot connect to {self.base_url}")
        logger.error(f"Request for '{term}' failed: {error}")
        return FetchError(term, str(error))
