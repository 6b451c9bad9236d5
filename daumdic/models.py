"""Result types returned by the parser."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Lang(str, Enum):
    """Dictionary category of a word, taken from its card heading."""

    KOREAN = "korean"
    ENGLISH = "english"
    JAPANESE = "japanese"
    HANJA = "hanja"


@dataclass(frozen=True)
class Other:
    """Any other dictionary category, keeping the heading text as-is."""

    label: str  # e.g. "중국어사전"


@dataclass(frozen=True)
class Word:
    """One dictionary entry."""

    word: str
    lang: Lang | Other
    meaning: tuple[str, ...] = ()
    pronounce: str | None = None  # None when the page has no pronunciation markup

    def __str__(self) -> str:
        parts = []
        if isinstance(self.lang, Other):
            parts.append(f"({self.lang.label})")
        parts.append(self.word)
        if self.pronounce is not None:
            parts.append(self.pronounce)
        return "  ".join(parts) + "  " + ", ".join(self.meaning)

    @property
    def lang_label(self) -> str:
        """Human readable language name."""
        if isinstance(self.lang, Other):
            return self.lang.label
        return self.lang.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "meaning": list(self.meaning),
            "pronounce": self.pronounce,
            "lang": self.lang_label,
            "lang_known": not isinstance(self.lang, Other),
        }


@dataclass
class Search:
    """Parsed result page: matched entries and spelling suggestions."""

    words: list[Word] = field(default_factory=list)
    alternatives: list[str] = field(default_factory=list)

    @property
    def first(self) -> Word | None:
        """Best match, if any."""
        return self.words[0] if self.words else None

    @property
    def is_empty(self) -> bool:
        return not self.words and not self.alternatives

    def __str__(self) -> str:
        lines = [str(word) for word in self.words]
        if self.alternatives:
            lines.append(f"Did you mean: {', '.join(self.alternatives)}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": [word.to_dict() for word in self.words],
            "alternatives": list(self.alternatives),
        }
