# src/tagscan/classifier.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from .classes import TagClass, TagProperties, get_properties, tag_class_from_name
from .tokens import TagClose, TagOpen, Token
from .utils.config_manager import config_manager

logger = logging.getLogger(__name__)

# Open classified tags, outermost first: (tag name, class)
TagStack = List[Tuple[str, TagClass]]


class MismatchedClose(BaseModel):
    """A classified close tag that did not match the innermost open classified tag."""
    model_config = ConfigDict(frozen=True)

    index: int
    name: str
    open_name: Optional[str] = None


def _step(stack: TagStack, token: Token) -> bool:
    """
    Applies one token to the stack in place.
    Returns False only for a close tag that did not match the innermost entry.
    """
    if isinstance(token, TagOpen):
        classification = tag_class_from_name(token.name)
        if classification is not None:
            stack.append((token.name, classification))
    elif isinstance(token, TagClose):
        if stack and stack[-1][0] == token.name:
            stack.pop()
        else:
            return False
    return True


def update_tag_stack(stack: TagStack, token: Token) -> TagStack:
    """
    Returns the stack that results from applying one token.

    Unclassified tags are never pushed. A close tag only pops when it matches
    the innermost entry; any other close leaves the stack as it is.
    """
    updated = list(stack)
    _step(updated, token)
    return updated


class TagClassifier:
    """
    Scans a token list once, left to right, tracking the open classified tags.

    In strict mode, close tags of classified elements that do not match the
    innermost open classified tag are collected in `mismatches` and logged as
    warnings. The classification itself is the same in both modes.
    """

    def __init__(self, strict: Optional[bool] = None):
        if strict is None:
            strict = bool(config_manager.get_nested("classifier.strict", False))
        self.strict = strict
        self.mismatches: List[MismatchedClose] = []

    def stacks(self, tokens: Sequence[Token]) -> List[List[TagClass]]:
        """
        Returns len(tokens) + 1 snapshots of the class stack: the empty stack,
        then the stack after each token.
        """
        self.mismatches = []
        stack: TagStack = []
        snapshots: List[List[TagClass]] = [[]]

        for index, token in enumerate(tokens):
            matched = _step(stack, token)
            if not matched and self.strict and tag_class_from_name(token.name) is not None:
                self._report(index, token.name, stack)
            snapshots.append([cls for _, cls in stack])

        return snapshots

    def classify(self, tokens: Sequence[Token]) -> List[Tuple[Token, TagProperties]]:
        """
        Pairs every token with the properties of the stack in front of it,
        so an open tag is not yet inside itself, while its close tag still is.
        """
        snapshots = self.stacks(tokens)
        classified = [(token, get_properties(classes)) for token, classes in zip(tokens, snapshots)]
        logger.debug(
            "Classified %d tokens (%d mismatched closes).", len(classified), len(self.mismatches)
        )
        return classified

    def _report(self, index: int, name: str, stack: TagStack) -> None:
        open_name = stack[-1][0] if stack else None
        self.mismatches.append(MismatchedClose(index=index, name=name, open_name=open_name))
        logger.warning(
            "Ignoring </%s> at token %d: innermost open classified tag is %s.",
            name, index, f"<{open_name}>" if open_name else "none"
        )


def tag_stacks(tokens: Sequence[Token]) -> List[List[TagClass]]:
    """Snapshots of the class stack, one before each token plus the final one."""
    return TagClassifier(strict=False).stacks(tokens)


def classify_tags(tokens: Sequence[Token], strict: bool = False) -> List[Tuple[Token, TagProperties]]:
    """Given a list of tokens, classifies them as "inside code", "inside em", etc."""
    return TagClassifier(strict=strict).classify(tokens)
