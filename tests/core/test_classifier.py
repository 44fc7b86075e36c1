# tests/core/test_classifier.py
import logging

import pytest

from tagscan.classes import TagClass
from tagscan.classifier import MismatchedClose, TagClassifier, classify_tags, tag_stacks, update_tag_stack
from tagscan.tokenizer import parse_tags
from tagscan.tokens import TagClose, TagComment, TagOpen, TagText
from tagscan.utils.config_manager import config_manager


@pytest.fixture
def restore_config():
    yield config_manager
    config_manager.reset()


# --- update_tag_stack ---

def test_open_classified_tag_is_pushed():
    assert update_tag_stack([], TagOpen(name="em")) == [("em", TagClass.EM)]


def test_open_unclassified_tag_is_ignored():
    assert update_tag_stack([], TagOpen(name="span")) == []


def test_matching_close_pops():
    assert update_tag_stack([("em", TagClass.EM)], TagClose(name="em")) == []


def test_mismatched_close_is_a_noop():
    stack = [("em", TagClass.EM)]
    assert update_tag_stack(stack, TagClose(name="strong")) == stack
    assert update_tag_stack([], TagClose(name="em")) == []


def test_other_tokens_leave_stack_unchanged():
    stack = [("pre", TagClass.PRE)]
    assert update_tag_stack(stack, TagText(text="x")) == stack
    assert update_tag_stack(stack, TagComment(text="x")) == stack


def test_update_does_not_mutate_input():
    stack = []
    update_tag_stack(stack, TagOpen(name="em"))
    assert stack == []


# --- tag_stacks ---

def test_tag_stacks_has_one_snapshot_more_than_tokens():
    """Test dat er een lege beginstand plus één stand per token is."""
    tokens = [TagOpen(name="em"), TagOpen(name="code"), TagClose(name="code"), TagClose(name="em")]
    assert tag_stacks(tokens) == [
        [],
        [TagClass.EM],
        [TagClass.EM, TagClass.CODE],
        [TagClass.EM],
        [],
    ]


def test_tag_stacks_of_empty_sequence():
    assert tag_stacks([]) == [[]]


# --- classify_tags ---

def test_classify_keeps_length():
    tokens = parse_tags("<p>a <em>b <code>c</code></em></strong> d</p>")
    assert len(classify_tags(tokens)) == len(tokens)
    assert classify_tags([]) == []


def test_classification_uses_stack_before_the_token():
    """An open tag is not inside itself; its close tag still is."""
    tokens = [TagOpen(name="strong"), TagText(text="x"), TagClose(name="strong"), TagText(text="y")]
    flags = [props.is_strong for _, props in classify_tags(tokens)]
    assert flags == [False, True, True, False]


def test_mismatched_close_is_tolerated():
    tokens = [TagOpen(name="em"), TagClose(name="strong"), TagText(text="x")]
    classified = classify_tags(tokens)
    assert classified[2][0] == TagText(text="x")
    assert classified[2][1].is_em


def test_unclassified_tags_are_transparent():
    """Test dat niet-geclassificeerde tags de nesting niet beïnvloeden."""
    tokens = [TagOpen(name="em"), TagOpen(name="span"), TagClose(name="em"), TagText(text="x")]
    assert not classify_tags(tokens)[3][1].is_em


def test_nested_classes_are_all_visible():
    tokens = parse_tags("<header><h1><em>Title</em></h1></header>")
    _, props = next((t, p) for t, p in classify_tags(tokens) if isinstance(t, TagText))
    assert props.is_header and props.is_h1 and props.is_em
    assert props.is_title and not props.is_subtitle


# --- strict mode ---

def test_strict_mode_records_mismatched_closes(caplog):
    tokens = [TagOpen(name="em"), TagClose(name="strong"), TagText(text="x"), TagClose(name="p")]
    classifier = TagClassifier(strict=True)

    with caplog.at_level(logging.WARNING, logger="tagscan.classifier"):
        classified = classifier.classify(tokens)

    assert classifier.mismatches == [MismatchedClose(index=1, name="strong", open_name="em")]
    assert "Ignoring </strong>" in caplog.text
    # Classification is identical to tolerant mode
    assert classified == classify_tags(tokens)


def test_strict_mode_reports_close_on_empty_stack():
    classifier = TagClassifier(strict=True)
    classifier.classify([TagClose(name="code")])
    assert classifier.mismatches == [MismatchedClose(index=0, name="code", open_name=None)]


def test_tolerant_mode_records_nothing():
    classifier = TagClassifier(strict=False)
    classifier.classify([TagOpen(name="em"), TagClose(name="strong")])
    assert classifier.mismatches == []


def test_strict_default_comes_from_config(restore_config):
    """Test dat de standaardmodus uit settings.json komt."""
    assert TagClassifier().strict is False
    restore_config.set_nested("classifier.strict", "true")
    assert TagClassifier().strict is True
