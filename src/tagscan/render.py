# src/tagscan/render.py
from __future__ import annotations

import logging
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import TokenKindError
from .tokens import (
    Attribute,
    TagCData,
    TagClose,
    TagComment,
    TagDeclaration,
    TagOpen,
    TagProcessing,
    TagText,
    Token,
)
from .utils.config_manager import config_manager

logger = logging.getLogger(__name__)

DEFAULT_RAW_TAGS: FrozenSet[str] = frozenset({"script", "style"})

_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def escape_html(text: str) -> str:
    """
    Escapes &, < and >. Quotes are left alone: escaping them is only needed
    inside quoted attribute values that contain quotes, and elsewhere it bloats
    the output and can break inline stylesheets.

    parse_tags decodes character references in attribute values, so a source
    value such as "&quot;x&quot;" renders with bare quotes. Pass an escape
    function that also handles quotes when such values can occur.
    """
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def _never_minimize(name: str) -> bool:
    return False


class RenderOptions(BaseModel):
    """
    Rendering policy, passed explicitly to render_tags.

    Attributes:
        escape: Escape function for text and attribute values.
        minimize: Returns True for tag names whose empty elements may be written as <name/>.
        raw_tags: Elements whose text content is written verbatim.
    """
    model_config = ConfigDict(frozen=True)

    escape: Callable[[str], str] = escape_html
    minimize: Callable[[str], bool] = _never_minimize
    raw_tags: FrozenSet[str] = Field(default_factory=lambda: DEFAULT_RAW_TAGS)

    @classmethod
    def from_config(cls) -> "RenderOptions":
        """Builds options with the raw tags listed under 'render.raw_tags'."""
        raw_tags = config_manager.get_nested("render.raw_tags")
        if not raw_tags:
            return cls()
        return cls(raw_tags=frozenset(name.lower() for name in raw_tags))


DEFAULT_RENDER_OPTIONS = RenderOptions()


def _render_attrs(attrs: Iterable[Attribute], escape: Callable[[str], str]) -> str:
    parts = []
    for name, value in attrs:
        if value is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


def render_tags(tokens: Sequence[Token], options: Optional[RenderOptions] = None) -> str:
    """
    Renders tokens back to markup.

    Text is escaped with `options.escape`, except inside the raw tags, whose
    content is written as-is. Closing tags are never omitted, and empty
    elements are only collapsed to <name/> when `options.minimize` allows it.

    Raises:
        TokenKindError: If the sequence contains something that is not a token.
    """
    tokens = list(tokens)
    options = options or DEFAULT_RENDER_OPTIONS
    escape = options.escape
    out: List[str] = []
    raw_until: Optional[str] = None
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if isinstance(token, TagOpen):
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None
            if isinstance(nxt, TagClose) and nxt.name == token.name and options.minimize(token.name):
                out.append(f"<{token.name}{_render_attrs(token.attrs, escape)}/>")
                i += 2
                continue
            out.append(f"<{token.name}{_render_attrs(token.attrs, escape)}>")
            if raw_until is None and token.name in options.raw_tags:
                raw_until = token.name
        elif isinstance(token, TagClose):
            out.append(f"</{token.name}>")
            if token.name == raw_until:
                raw_until = None
        elif isinstance(token, TagText):
            out.append(token.text if raw_until is not None else escape(token.text))
        elif isinstance(token, TagComment):
            out.append(f"<!--{token.text}-->")
        elif isinstance(token, TagDeclaration):
            out.append(f"<!{token.text}>")
        elif isinstance(token, TagProcessing):
            out.append(f"<?{token.text}>")
        elif isinstance(token, TagCData):
            out.append(f"<![{token.text}]>")
        else:
            raise TokenKindError(f"Cannot render {type(token).__name__} at position {i}")

        i += 1

    if raw_until is not None:
        logger.debug("Input ended inside raw <%s> element.", raw_until)
    return "".join(out)
