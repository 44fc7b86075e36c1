# src/tagscan/transforms.py
from __future__ import annotations

from typing import Callable, Iterable, List, Sequence

from .classes import TagProperties
from .classifier import classify_tags
from .exceptions import TransformLengthError
from .tokens import Token

Predicate = Callable[[TagProperties], bool]


def filter_tags(predicate: Predicate, tokens: Sequence[Token]) -> List[Token]:
    """Discards tokens for which the predicate returns false."""
    return [token for token, props in classify_tags(tokens) if predicate(props)]


def apply_tags_where(
        predicate: Predicate,
        transform: Callable[[List[Token]], Sequence[Token]],
        tokens: Sequence[Token],
) -> List[Token]:
    """
    Runs `transform` over the whole token list once, then takes the transformed
    token wherever the predicate holds and the original token elsewhere.

    Args:
        predicate: Selects which positions receive the transformed token.
        transform: Must return exactly one token per input token, index for index.
        tokens: The token list.

    Raises:
        TransformLengthError: If the transform changed the number of tokens.
    """
    tokens = list(tokens)
    mapped = list(transform(list(tokens)))
    if len(mapped) != len(tokens):
        raise TransformLengthError(expected=len(tokens), actual=len(mapped))

    return [
        new if predicate(props) else orig
        for (orig, props), new in zip(classify_tags(tokens), mapped)
    ]


def map_tags_where(predicate: Predicate, f: Callable[[Token], Token], tokens: Sequence[Token]) -> List[Token]:
    """Applies f to all tokens for which the predicate holds."""
    return apply_tags_where(predicate, lambda ts: [f(t) for t in ts], tokens)


def concat_map_tags_where(
        predicate: Predicate,
        f: Callable[[Token], Iterable[Token]],
        tokens: Sequence[Token],
) -> List[Token]:
    """
    Replaces each token for which the predicate holds by the tokens f returns
    for it (possibly none). Other tokens are kept as they are.
    """
    out: List[Token] = []
    for token, props in classify_tags(tokens):
        if predicate(props):
            out.extend(f(token))
        else:
            out.append(token)
    return out
