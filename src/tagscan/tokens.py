# src/tagscan/tokens.py
from __future__ import annotations

from typing import Callable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .exceptions import TokenKindError

Attribute = Tuple[str, Optional[str]]


class TokenBase(BaseModel):
    """Common base for all markup tokens. Tokens are immutable values."""
    model_config = ConfigDict(frozen=True)


class TagOpen(TokenBase):
    """An opening tag, e.g. <a href="/">. A value of None marks a bare attribute."""
    kind: Literal["open"] = "open"
    name: str
    attrs: Tuple[Attribute, ...] = ()

    def attr(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Returns the value of the first attribute named `key`."""
        for name, value in self.attrs:
            if name == key:
                return value
        return default


class TagClose(TokenBase):
    kind: Literal["close"] = "close"
    name: str


class TagText(TokenBase):
    """A run of character data, with character references already decoded."""
    kind: Literal["text"] = "text"
    text: str


class TagComment(TokenBase):
    kind: Literal["comment"] = "comment"
    text: str


class TagDeclaration(TokenBase):
    """A markup declaration such as <!DOCTYPE html>, without the delimiters."""
    kind: Literal["declaration"] = "declaration"
    text: str


class TagProcessing(TokenBase):
    """A processing instruction, e.g. <?xml version="1.0"?>, without '<?' and '>'."""
    kind: Literal["processing"] = "processing"
    text: str


class TagCData(TokenBase):
    """A marked section such as <![CDATA[...]]>, without '<![' and ']>'."""
    kind: Literal["cdata"] = "cdata"
    text: str


Token = Union[TagOpen, TagClose, TagText, TagComment, TagDeclaration, TagProcessing, TagCData]


def is_tag_text(token: Token) -> bool:
    return isinstance(token, TagText)


def from_tag_text(token: Token) -> str:
    """Returns the text of a text token."""
    if not isinstance(token, TagText):
        raise TokenKindError(f"Expected a text token, got {type(token).__name__}")
    return token.text


def map_text(f: Callable[[str], str], token: Token) -> Token:
    """Applies f to the text of a text token; any other token is returned as-is."""
    if isinstance(token, TagText):
        return TagText(text=f(token.text))
    return token
