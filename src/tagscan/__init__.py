"""
tagscan: classify the tokens of an HTML-like stream by the semantic tags that
enclose them, and filter, transform or extract content based on that.
"""
from .classes import (
    TAG_CLASS_NAMES,
    TagClass,
    TagProperties,
    get_properties,
    is_abbr,
    is_code,
    is_em,
    is_h1,
    is_h2,
    is_head,
    is_header,
    is_heading,
    is_math,
    is_pre,
    is_script,
    is_strong,
    is_style,
    is_subtitle,
    is_title,
    tag_class_from_name,
)
from .classifier import MismatchedClose, TagClassifier, classify_tags, tag_stacks, update_tag_stack
from .exceptions import TagScanError, TokenKindError, TransformLengthError
from .extract import get_text_in_tag, map_text_with
from .render import DEFAULT_RENDER_OPTIONS, RenderOptions, escape_html, render_tags
from .tokenizer import parse_tags, tokens_from_soup
from .tokens import (
    TagCData,
    TagClose,
    TagComment,
    TagDeclaration,
    TagOpen,
    TagProcessing,
    TagText,
    Token,
    from_tag_text,
    is_tag_text,
    map_text,
)
from .transforms import apply_tags_where, concat_map_tags_where, filter_tags, map_tags_where

__version__ = "1.0.0"
