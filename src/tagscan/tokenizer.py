# src/tagscan/tokenizer.py
from __future__ import annotations

import logging
from html.parser import HTMLParser
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction

from .tokens import (
    TagCData,
    TagClose,
    TagComment,
    TagDeclaration,
    TagOpen,
    TagProcessing,
    TagText,
    Token,
)

logger = logging.getLogger(__name__)


class _TokenParser(HTMLParser):
    """
    Streaming SAX parser that records every parser event as a token.
    Nothing is repaired or re-nested: the stream reflects the source order,
    including stray and unbalanced tags.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.tokens: List[Token] = []

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        self.tokens.append(TagOpen(name=tag, attrs=tuple(attrs)))

    def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        # <br/> is an open immediately followed by its close
        self.handle_starttag(tag, attrs)
        self.handle_endtag(tag)

    def handle_endtag(self, tag: str) -> None:
        self.tokens.append(TagClose(name=tag))

    def handle_data(self, data: str) -> None:
        if not data:
            return
        # Merge with a preceding text run so text is never split mid-way
        if self.tokens and isinstance(self.tokens[-1], TagText):
            self.tokens[-1] = TagText(text=self.tokens[-1].text + data)
        else:
            self.tokens.append(TagText(text=data))

    def handle_comment(self, data: str) -> None:
        self.tokens.append(TagComment(text=data))

    def handle_decl(self, decl: str) -> None:
        self.tokens.append(TagDeclaration(text=decl))

    def handle_pi(self, data: str) -> None:
        self.tokens.append(TagProcessing(text=data))

    def unknown_decl(self, data: str) -> None:
        # HTMLParser cuts a CDATA section at "]]>", dropping its closing bracket
        if data.startswith("CDATA["):
            data += "]"
        self.tokens.append(TagCData(text=data))


def parse_tags(markup: str) -> List[Token]:
    """
    Tokenizes HTML-like markup into a flat list of tokens.

    Args:
        markup (str): The raw markup text. None or empty input yields no tokens.

    Returns:
        List[Token]: Tokens in source order.
    """
    parser = _TokenParser()
    parser.feed(markup or "")
    parser.close()
    logger.debug("Tokenized %d characters into %d tokens.", len(markup or ""), len(parser.tokens))
    return parser.tokens


def _attr_value(value) -> Optional[str]:
    """Multi-valued attributes (e.g. class) are stored by bs4 as lists."""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def tokens_from_soup(node: Tag) -> List[Token]:
    """
    Flattens an already parsed BeautifulSoup tree into a token list.

    Every element yields an open and a close token, since bs4 has balanced
    the tree already. The BeautifulSoup document object itself emits no tags,
    only its contents.
    """
    tokens: List[Token] = []
    _flatten(node, tokens)
    return tokens


def _flatten(node, out: List[Token]) -> None:
    if isinstance(node, Tag):
        is_document = isinstance(node, BeautifulSoup)
        if not is_document:
            attrs = tuple((key, _attr_value(value)) for key, value in node.attrs.items())
            out.append(TagOpen(name=node.name, attrs=attrs))
        for child in node.children:
            _flatten(child, out)
        if not is_document:
            out.append(TagClose(name=node.name))
        return

    # Subclasses first: all of these are NavigableStrings too
    if isinstance(node, Comment):
        out.append(TagComment(text=str(node)))
    elif isinstance(node, CData):
        out.append(TagCData(text=f"CDATA[{node}]"))
    elif isinstance(node, ProcessingInstruction):
        out.append(TagProcessing(text=str(node)))
    elif isinstance(node, Doctype):
        out.append(TagDeclaration(text=f"DOCTYPE {node}"))
    elif isinstance(node, Declaration):
        out.append(TagDeclaration(text=str(node)))
    elif isinstance(node, NavigableString):
        text = str(node)
        if not text:
            return
        if out and isinstance(out[-1], TagText):
            out[-1] = TagText(text=out[-1].text + text)
        else:
            out.append(TagText(text=text))
