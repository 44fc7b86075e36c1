# src/tagscan/classes.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict


class TagClass(str, Enum):
    """Semantic categories of enclosing tags that drive classification."""
    ABBR = "abbr"
    CODE = "code"
    EM = "em"
    H1 = "h1"
    H2 = "h2"
    HEAD = "head"
    HEADER = "header"
    MATH = "math"
    PRE = "pre"
    SCRIPT = "script"
    STYLE = "style"
    STRONG = "strong"


# Public contract: changing this table changes every classification result.
TAG_CLASS_NAMES: Dict[str, TagClass] = {
    "abbr": TagClass.ABBR,
    "code": TagClass.CODE,
    "em": TagClass.EM,
    "h1": TagClass.H1,
    "h2": TagClass.H2,
    "head": TagClass.HEAD,
    "header": TagClass.HEADER,
    "math": TagClass.MATH,
    "pre": TagClass.PRE,
    "script": TagClass.SCRIPT,
    "style": TagClass.STYLE,
    "strong": TagClass.STRONG,
}


def tag_class_from_name(name: str) -> Optional[TagClass]:
    """Returns the class for a tag name, or None for unclassified tags."""
    return TAG_CLASS_NAMES.get(name)


class TagProperties(BaseModel):
    """
    Classification of a single token: one flag per TagClass, true when a tag
    of that class encloses the token.
    """
    model_config = ConfigDict(frozen=True)

    is_abbr: bool = False
    is_code: bool = False
    is_em: bool = False
    is_h1: bool = False
    is_h2: bool = False
    is_head: bool = False
    is_header: bool = False
    is_math: bool = False
    is_pre: bool = False
    is_script: bool = False
    is_style: bool = False
    is_strong: bool = False

    @property
    def is_heading(self) -> bool:
        return self.is_h1 or self.is_h2

    @property
    def is_title(self) -> bool:
        """An h1 inside a <header>."""
        return self.is_header and self.is_h1

    @property
    def is_subtitle(self) -> bool:
        """An h2 inside a <header>."""
        return self.is_header and self.is_h2


def get_properties(classes: Iterable[TagClass]) -> TagProperties:
    """Builds the flag record for a stack of classes. Only presence matters."""
    present = set(classes)
    return TagProperties(**{f"is_{cls.value}": cls in present for cls in TagClass})


# --- Predicates, usable directly with the transform and extract functions ---

def is_abbr(props: TagProperties) -> bool:
    return props.is_abbr


def is_code(props: TagProperties) -> bool:
    return props.is_code


def is_em(props: TagProperties) -> bool:
    return props.is_em


def is_h1(props: TagProperties) -> bool:
    return props.is_h1


def is_h2(props: TagProperties) -> bool:
    return props.is_h2


def is_head(props: TagProperties) -> bool:
    return props.is_head


def is_header(props: TagProperties) -> bool:
    return props.is_header


def is_math(props: TagProperties) -> bool:
    return props.is_math


def is_pre(props: TagProperties) -> bool:
    return props.is_pre


def is_script(props: TagProperties) -> bool:
    return props.is_script


def is_style(props: TagProperties) -> bool:
    return props.is_style


def is_strong(props: TagProperties) -> bool:
    return props.is_strong


def is_heading(props: TagProperties) -> bool:
    return props.is_heading


def is_title(props: TagProperties) -> bool:
    return props.is_title


def is_subtitle(props: TagProperties) -> bool:
    return props.is_subtitle
