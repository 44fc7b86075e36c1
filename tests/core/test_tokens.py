# tests/core/test_tokens.py
import pytest
from pydantic import ValidationError

from tagscan.exceptions import TokenKindError
from tagscan.tokens import TagClose, TagComment, TagOpen, TagText, from_tag_text, is_tag_text, map_text


def test_tokens_are_values():
    """Test dat tokens met gelijke velden gelijk en hashbaar zijn."""
    assert TagOpen(name="em") == TagOpen(name="em")
    assert TagOpen(name="em") != TagClose(name="em")
    assert len({TagText(text="a"), TagText(text="a")}) == 1


def test_tokens_are_immutable():
    token = TagText(text="a")
    with pytest.raises(ValidationError):
        token.text = "b"


def test_attrs_given_as_lists_are_stored_as_tuples():
    token = TagOpen(name="a", attrs=[["href", "/"]])
    assert token.attrs == (("href", "/"),)


def test_is_tag_text():
    assert is_tag_text(TagText(text="x"))
    assert not is_tag_text(TagComment(text="x"))


def test_from_tag_text():
    assert from_tag_text(TagText(text="x")) == "x"
    with pytest.raises(TokenKindError):
        from_tag_text(TagOpen(name="p"))


def test_map_text_only_touches_text():
    """Test dat map_text alleen teksttokens aanpast."""
    assert map_text(str.upper, TagText(text="abc")) == TagText(text="ABC")
    assert map_text(str.upper, TagOpen(name="p")) == TagOpen(name="p")
