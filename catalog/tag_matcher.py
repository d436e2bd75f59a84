# 📦 catalog/tag_matcher.py
# ─────────────────────────────
# Layered fuzzy matching of blog post labels against category tags

from typing import Iterable, List

import structlog

log = structlog.get_logger()

MIN_WORD_LENGTH = 4  # words of 3 chars or less ("and", "the") are ignored


def match_exact(tag, labels):
    """Label equals the tag."""
    return any(label == tag for label in labels)


def match_label_contains_tag(tag, labels):
    """Tag appears inside a label ("palm" in "palms and specimen plants")."""
    return any(tag in label for label in labels)


def match_tag_contains_label(tag, labels):
    """Label appears inside the tag ("fruit" in "fruit bearing")."""
    return any(label in tag for label in labels)


def match_word_overlap(tag, labels):
    """A long enough word of a label overlaps the tag in either direction."""
    for label in labels:
        for word in label.split():
            if len(word) < MIN_WORD_LENGTH:
                continue
            if word in tag or tag in word:
                return True
    return False


HEURISTICS = (
    ("exact", match_exact),
    ("label_contains_tag", match_label_contains_tag),
    ("tag_contains_label", match_tag_contains_label),
    ("word_overlap", match_word_overlap),
)


def matches(tag: str, labels: Iterable[str]) -> bool:
    """Decide whether a post with these labels belongs to the category tag.

    Heuristics run in order and stop at the first hit. Comparison is
    case-insensitive on trimmed strings. Empty labels are skipped and an
    empty tag never matches.
    """
    norm_tag = _normalize(tag)
    norm_labels = _normalize_labels(labels)
    if not norm_tag or not norm_labels:
        return False

    for name, heuristic in HEURISTICS:
        if heuristic(norm_tag, norm_labels):
            log.debug("Tag matched", tag=norm_tag, labels=norm_labels, heuristic=name)
            return True
    return False


# ─────────────────────────────
# Internal helpers

def _normalize(value) -> str:
    return (value or "").strip().lower()


def _normalize_labels(labels) -> List[str]:
    normalized = (_normalize(label) for label in (labels or ()))
    return [label for label in normalized if label]
