"""Tests for result types."""

import dataclasses

import pytest

from daumdic.models import Lang, Other, Search, Word


class TestWordStr:
    """Tests for Word.__str__."""

    def test_known_lang_with_pronunciation(self):
        """Should render word, pronunciation and meanings."""
        word = Word(
            word="resist",
            lang=Lang.ENGLISH,
            meaning=("저항하다", "반대하다"),
            pronounce="[rizíst]",
        )
        assert str(word) == "resist  [rizíst]  저항하다, 반대하다"

    def test_without_pronunciation(self):
        """Should omit the pronunciation column when absent."""
        word = Word(word="あと", lang=Lang.JAPANESE, meaning=("뒤",))
        assert str(word) == "あと  뒤"

    def test_other_lang_shows_label(self):
        """Should prefix words of other categories with their label."""
        word = Word(
            word="加油站",
            lang=Other("중국어사전"),
            meaning=("주유소",),
            pronounce="[jiāyóuzhàn]",
        )
        assert str(word) == "(중국어사전)  加油站  [jiāyóuzhàn]  주유소"


class TestWord:
    """Tests for Word behaviour."""

    def test_is_immutable(self):
        """Should not allow reassigning fields."""
        word = Word(word="zoo", lang=Lang.ENGLISH)
        with pytest.raises(dataclasses.FrozenInstanceError):
            word.word = "zoos"  # type: ignore[misc]

    def test_defaults(self):
        """Should default to no meanings and no pronunciation."""
        word = Word(word="zoo", lang=Lang.ENGLISH)
        assert word.meaning == ()
        assert word.pronounce is None

    def test_lang_label(self):
        """Should name known and other categories."""
        assert Word(word="a", lang=Lang.HANJA).lang_label == "hanja"
        assert Word(word="a", lang=Other("중국어사전")).lang_label == "중국어사전"

    def test_to_dict(self):
        """Should serialize to plain JSON types."""
        word = Word(word="독수리", lang=Lang.KOREAN, meaning=("큰 새",), pronounce="[-쑤-]")
        assert word.to_dict() == {
            "word": "독수리",
            "meaning": ["큰 새"],
            "pronounce": "[-쑤-]",
            "lang": "korean",
            "lang_known": True,
        }

    def test_other_equality(self):
        """Should compare other categories by label."""
        assert Other("중국어사전") == Other("중국어사전")
        assert Other("중국어사전") != Other("베트남어사전")
        assert Other("korean") != Lang.KOREAN


class TestSearch:
    """Tests for Search."""

    def test_first(self):
        """Should return the first word or None."""
        zoo = Word(word="zoo", lang=Lang.ENGLISH)
        assert Search(words=[zoo]).first is zoo
        assert Search().first is None

    def test_is_empty(self):
        """Should be empty only without words and alternatives."""
        assert Search().is_empty
        assert not Search(alternatives=["resist"]).is_empty
        assert not Search(words=[Word(word="zoo", lang=Lang.ENGLISH)]).is_empty

    def test_str_with_alternatives(self):
        """Should list words then suggestions."""
        result = Search(
            words=[Word(word="zoo", lang=Lang.ENGLISH, meaning=("동물원",))],
            alternatives=["zoom", "zoos"],
        )
        assert str(result) == "zoo  동물원\nDid you mean: zoom, zoos"

    def test_to_dict(self):
        """Should serialize words and alternatives."""
        result = Search(words=[Word(word="zoo", lang=Lang.ENGLISH)], alternatives=["zoom"])
        data = result.to_dict()
        assert data["alternatives"] == ["zoom"]
        assert data["words"][0]["word"] == "zoo"
        assert data["words"][0]["pronounce"] is None
