"""Find words (Korean, English, Japanese, Chinese, ...) in Daum dictionary.

    >>> import daumdic
    >>> word = daumdic.search("독수리").words[0]
    >>> word.lang
    <Lang.KOREAN: 'korean'>
"""

from daumdic.errors import (
    DaumdicError,
    EmptyWordError,
    FetchError,
    ParsingFailedError,
    RelativeResultFoundError,
    WordNotFoundError,
)
from daumdic.fetcher import Fetcher, HttpFetcher
from daumdic.models import Lang, Other, Search, Word
from daumdic.parser import classify_lang, parse
from daumdic.service import DictionaryService, lookup, search, search_async

__version__ = "0.1.0"

__all__ = [
    "DaumdicError",
    "DictionaryService",
    "EmptyWordError",
    "FetchError",
    "Fetcher",
    "HttpFetcher",
    "Lang",
    "Other",
    "ParsingFailedError",
    "RelativeResultFoundError",
    "Search",
    "Word",
    "WordNotFoundError",
    "classify_lang",
    "lookup",
    "parse",
    "search",
    "search_async",
]
