# src/tagscan/extract.py
from __future__ import annotations

from typing import Callable, List, Tuple, TypeVar

from .classes import TagProperties
from .classifier import classify_tags
from .tokenizer import parse_tags
from .tokens import TagText
from .transforms import Predicate, filter_tags

T = TypeVar("T")


def get_text_in_tag(predicate: Predicate, markup: str) -> str:
    """
    Returns the text of all text nodes that satisfy the predicate, separated
    by single spaces.

    Example:
        get_text_in_tag(is_code, "<p>a <code>b</code> c <code>d</code></p>") == "b d"
    """
    texts = [token.text for token in filter_tags(predicate, parse_tags(markup)) if isinstance(token, TagText)]
    return " ".join(texts)


def map_text_with(derive: Callable[[TagProperties], T], markup: str) -> List[Tuple[str, T]]:
    """Returns the text of every text node, paired with a value derived from its classification."""
    return [
        (token.text, derive(props))
        for token, props in classify_tags(parse_tags(markup))
        if isinstance(token, TagText)
    ]
