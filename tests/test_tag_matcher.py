# 📦 tests/test_tag_matcher.py

import pytest
from catalog.tag_matcher import (
    matches,
    match_exact,
    match_label_contains_tag,
    match_tag_contains_label,
    match_word_overlap,
)

# ---------------------- Literal cases ----------------------

def test_fruit_matches_multi_word_label():
    assert matches("fruit", ["Fruit bearing trees"]) is True

def test_avenue_does_not_match_shrubs():
    assert matches("avenue", ["Shrubs and ground covers"]) is False

def test_empty_labels_never_match():
    assert matches("aromatic", []) is False

def test_palm_matches_plural_label():
    assert matches("palm", ["Palms and specimen plants"]) is True

# ---------------------- Heuristics ----------------------

def test_exact_match_is_case_and_whitespace_insensitive():
    assert matches("  Creeper ", ["creeper"]) is True

def test_tag_contains_label():
    assert matches("fruit bearing", ["Fruit"]) is True

def test_word_overlap_fires_for_long_words():
    # neither whole-string containment holds, the shared word "biodiversity" does
    assert match_label_contains_tag("biodiversity plantation", ["urban biodiversity"]) is False
    assert match_tag_contains_label("biodiversity plantation", ["urban biodiversity"]) is False
    assert matches("biodiversity plantation", ["Urban biodiversity"]) is True

def test_short_words_are_ignored():
    assert matches("andes", ["and"]) is True  # whole label "and" is inside the tag
    assert match_word_overlap("andes", ["fig and"]) is False

def test_word_overlap_requires_four_letters():
    assert match_word_overlap("figure", ["fig"]) is False
    assert matches("figure", ["fig"]) is True  # whole label is inside the tag
    assert match_word_overlap("tree", ["old trees"]) is True

def test_unrelated_labels():
    assert matches("creeper", ["Avenue Trees", "Campus walk"]) is False

# ---------------------- Edge cases ----------------------

@pytest.mark.parametrize("labels", [[""], ["   "], [None]])
def test_blank_labels_are_skipped(labels):
    assert matches("palm", labels) is False

@pytest.mark.parametrize("tag", ["", "   ", None])
def test_blank_tag_never_matches(tag):
    assert matches(tag, ["Palms", ""]) is False

def test_any_label_can_match():
    assert matches("palm", ["Campus walk", "", "Palm grove"]) is True

def test_helpers_expect_normalized_input():
    assert match_exact("oak", ["oak"]) is True
    assert match_label_contains_tag("oak", ["red oak"]) is True
    assert match_tag_contains_label("red oak", ["oak"]) is True
