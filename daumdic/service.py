"""Dictionary service combining a fetcher with the result page parser."""

import logging

from daumdic.errors import EmptyWordError, RelativeResultFoundError, WordNotFoundError
from daumdic.fetcher import Fetcher, HttpFetcher
from daumdic.models import Search, Word
from daumdic.parser import parse

logger = logging.getLogger(__name__)


class DictionaryService:
    """
    Facade for dictionary searches.

    Validates the term, fetches the result page and parses it. Fetch errors
    propagate unchanged; nothing is retried or cached.
    """

    def __init__(self, fetcher: Fetcher | None = None) -> None:
        """
        Initialize the dictionary service.

        Args:
            fetcher: Result page fetcher. Defaults to HttpFetcher()
        """
        self.fetcher = fetcher or HttpFetcher()

    def search(self, term: str) -> Search:
        """
        Search for a term.

        Raises:
            EmptyWordError: If term is empty (no request is made)
            FetchError: If the page could not be retrieved
            ParsingFailedError: If the page has no usable markup
        """
        if not term:
            raise EmptyWordError()

        html = self.fetcher.fetch(term)
        return self._parse(term, html)

    async def search_async(self, term: str) -> Search:
        """Async variant of `search`."""
        if not term:
            raise EmptyWordError()

        html = await self.fetcher.fetch_async(term)
        return self._parse(term, html)

    def lookup(self, term: str) -> Word:
        """
        Return the best matching word for a term.

        Raises:
            RelativeResultFoundError: If nothing matched but alternatives exist
            WordNotFoundError: If nothing matched and there are no alternatives
        """
        return best_word(term, self.search(term))

    async def lookup_async(self, term: str) -> Word:
        """Async variant of `lookup`."""
        return best_word(term, await self.search_async(term))

    def _parse(self, term: str, html: str) -> Search:
        result = parse(html)
        if result.is_empty:
            logger.info(f"No entries or suggestions for '{term}'")
        else:
            logger.info(
                f"Found {len(result.words)} words and "
                f"{len(result.alternatives)} alternatives for '{term}'"
            )
        return result


def best_word(term: str, result: Search) -> Word:
    """Project a search result onto its first word."""
    if result.first is not None:
        return result.first
    if result.alternatives:
        raise RelativeResultFoundError(result.alternatives)
    raise WordNotFoundError(term)


_default_service: DictionaryService | None = None


def get_service() -> DictionaryService:
    """Get the shared default service, creating it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = DictionaryService()
    return _default_service


def search(term: str) -> Search:
    """Search Daum dictionary for a term."""
    return get_service().search(term)


async def search_async(term: str) -> Search:
    """Search Daum dictionary for a term without blocking the event loop."""
    return await get_service().search_async(term)


def lookup(term: str) -> Word:
    """Return the best matching word for a term."""
    return get_service().lookup(term)
