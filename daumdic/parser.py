"""Parser for Daum dictionary result pages.

A result page groups entries into *cards*, one per dictionary category
(Korean, English, Hanja, ...). The card heading names the category and every
*item* inside the card is one entry:

    <div class="card_word">
      <h4 class="tit_word">영어사전</h4>
      <div class="search_box">
        <a class="txt_cleansch">resist</a>
        <span class="txt_pronounce">[rizíst]</span>
        <ul><li><span class="txt_search">저항하다</span></li></ul>
      </div>
    </div>

Spelling suggestions (`.link_speller`) can appear anywhere on the page.
"""

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

from daumdic.errors import ParsingFailedError
from daumdic.models import Lang, Other, Search, Word

logger = logging.getLogger(__name__)

CARD_SELECTOR = ".card_word"
ITEM_SELECTOR = ".search_box"
LANG_SELECTOR = ".tit_word"
MEANING_SELECTOR = ".txt_search"
ALTERNATIVE_SELECTOR = ".link_speller"

# Tried in order; the first one present in the item wins.
WORD_SELECTORS = (".txt_cleansch", ".txt_searchword", ".txt_hanjaword")
PRONOUNCE_SELECTORS = (".sub_read", ".txt_pronounce")

# "한자" shares its first syllable with "한국", so it is checked first.
LANG_PREFIXES: tuple[tuple[str, Lang], ...] = (
    ("한자", Lang.HANJA),
    ("한국", Lang.KOREAN),
    ("영", Lang.ENGLISH),
    ("일", Lang.JAPANESE),
)


def classify_lang(label: str) -> Lang | Other:
    """Map a card heading such as "영어사전" to its dictionary category."""
    stripped = label.strip()
    for prefix, lang in LANG_PREFIXES:
        if stripped.startswith(prefix):
            return lang
    return Other(label)


def element_text(element: Tag) -> str:
    """Concatenate all text nodes below `element` with no separator."""
    return "".join(element.strings)


def _select_first(element: Tag, selectors: tuple[str, ...]) -> Tag | None:
    for selector in selectors:
        match = element.select_one(selector)
        if match is not None:
            return match
    return None


def _owning_card(element: Tag) -> Tag | None:
    return element.find_parent(class_=CARD_SELECTOR.lstrip("."))


def iter_cards(soup: BeautifulSoup) -> Iterator[Tag]:
    """Yield word cards in document order."""
    yield from soup.select(CARD_SELECTOR)


def iter_items(card: Tag) -> Iterator[Tag]:
    """Yield the entries rendered inside a card, excluding those of nested cards."""
    for item in card.select(ITEM_SELECTOR):
        if _owning_card(item) is card:
            yield item


def card_lang(card: Tag) -> Lang | Other | None:
    """Classify a card by its heading, or None if it has no heading."""
    heading = next(
        (h for h in card.select(LANG_SELECTOR) if _owning_card(h) is card), None
    )
    if heading is None:
        return None
    return classify_lang(element_text(heading))


def extract_word(item: Tag, lang: Lang | Other) -> Word | None:
    """
    Build a Word from one item.

    Returns None when the item has no headword. Missing pronunciation or
    meanings leave those fields empty instead.
    """
    headword = _select_first(item, WORD_SELECTORS)
    if headword is None:
        return None
    word = element_text(headword)
    if not word.strip():
        return None

    pronounce_element = _select_first(item, PRONOUNCE_SELECTORS)
    pronounce = element_text(pronounce_element) if pronounce_element is not None else None

    meaning = tuple(element_text(element) for element in item.select(MEANING_SELECTOR))

    return Word(word=word, lang=lang, meaning=meaning, pronounce=pronounce)


def extract_words(soup: BeautifulSoup) -> list[Word]:
    words: list[Word] = []
    for card in iter_cards(soup):
        lang = card_lang(card)
        if lang is None:
            logger.debug("Skipping card without a language heading")
            continue

        for item in iter_items(card):
            word = extract_word(item, lang)
            if word is None:
                logger.debug("Skipping item without a headword")
                continue
            words.append(word)
    return words


def extract_alternatives(soup: BeautifulSoup) -> list[str]:
    return [element_text(element) for element in soup.select(ALTERNATIVE_SELECTOR)]


def parse_document(soup: BeautifulSoup) -> Search:
    """Extract words and alternatives from an already parsed page."""
    return Search(words=extract_words(soup), alternatives=extract_alternatives(soup))


def parse(html: str) -> Search:
    """
    Parse a Daum dictionary result page.

    Args:
        html: Raw HTML of the result page

    Returns:
        Search with words in document order and any spelling suggestions.
        Both lists are empty when the page matched nothing.

    Raises:
        ParsingFailedError: If the text contains no markup at all
    """
    soup = BeautifulSoup(html, "html.parser")
    if soup.find() is None:
        raise ParsingFailedError("Document contains no HTML elements")

    result = parse_document(soup)
    logger.debug(
        f"Parsed {len(result.words)} words and {len(result.alternatives)} alternatives"
    )
    return result
