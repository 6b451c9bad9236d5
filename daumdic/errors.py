"""Errors raised by daumdic.

All errors derive from `DaumdicError`, so callers of `search` can catch a
single type. Missing fields inside a single entry are never errors; the
parser drops or leaves them empty instead.
"""


class DaumdicError(Exception):
    """Base class for every error raised by a dictionary search."""


class EmptyWordError(DaumdicError):
    """An empty search term was given. Raised before any request is made."""

    def __init__(self) -> None:
        super().__init__("Empty word was given")


class FetchError(DaumdicError):
    """The result page could not be retrieved."""

    def __init__(self, term: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Failed to fetch '{term}': {message}")
        self.term = term
        self.status_code = status_code


class ParsingFailedError(DaumdicError):
    """The result page has no usable document structure at all."""

    def __init__(self, message: str = "Parsing failed") -> None:
        super().__init__(message)


class WordNotFoundError(DaumdicError):
    """No entry and no suggestion was found for the term."""

    def __init__(self, term: str) -> None:
        super().__init__(f"Word not found: '{term}'")
        self.term = term


class RelativeResultFoundError(DaumdicError):
    """No entry was found, but the dictionary suggested other spellings."""

    def __init__(self, alternatives: list[str]) -> None:
        super().__init__(f"Did you mean: {', '.join(alternatives)}")
        self.alternatives = list(alternatives)
