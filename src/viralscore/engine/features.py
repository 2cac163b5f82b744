"""Feature extraction: raw post text to a FeatureSet."""

from __future__ import annotations

from viralscore.engine.models import FeatureSet
from viralscore.engine.patterns import (
    CAPS_RUN_LENGTH,
    EDGE_WHITESPACE_PATTERN,
    EMOJI_RANGES,
    ENGAGEMENT_BAIT_PHRASES,
    HASHTAG_PATTERN,
    HOOK_OPENERS,
    LINE_BREAK_PATTERN,
    LINK_PATTERN,
    LIST_BULLETS,
    MAX_CAPS_RUNS,
    MENTION_PATTERN,
    NUMBERED_ITEM_PATTERN,
    THREAD_EMOJI,
    THREAD_KEYWORD,
    THREAD_NUMBERING_PATTERN,
    WHITESPACE_PATTERN,
)


def extract(text: str, has_media: bool = False) -> FeatureSet:
    """Derive scoring signals from a post.

    Never raises: empty, very long and non-BMP text all produce a FeatureSet.

    Args:
        text: Raw post text.
        has_media: Whether the caller has media attached to the post.

    Returns:
        Immutable FeatureSet for this post.
    """
    lower = text.lower()
    hashtag_count = len(HASHTAG_PATTERN.findall(text))

    return FeatureSet(
        word_count=count_words(text),
        char_count=len(text),
        has_question="?" in text,
        hashtag_count=hashtag_count,
        has_hashtags=hashtag_count > 0,
        has_links=LINK_PATTERN.search(text) is not None,
        has_mention=MENTION_PATTERN.search(text) is not None,
        has_emoji=has_emoji(text),
        has_media=bool(has_media),
        is_thread=is_thread(text, lower),
        has_list_format=has_list_format(text),
        has_hook=trim(lower).startswith(HOOK_OPENERS),
        engagement_bait_detected=any(phrase in lower for phrase in ENGAGEMENT_BAIT_PHRASES),
        excessive_caps_detected=count_caps_runs(text) > MAX_CAPS_RUNS,
    )


def trim(text: str) -> str:
    """Strip leading and trailing whitespace, byte order marks included."""
    return EDGE_WHITESPACE_PATTERN.sub("", text)


def count_words(text: str) -> int:
    return sum(1 for word in WHITESPACE_PATTERN.split(text) if word)


def has_emoji(text: str) -> bool:
    """Return True if any code point falls in one of the emoji ranges."""
    for ch in text:
        cp = ord(ch)
        for low, high in EMOJI_RANGES:
            if low <= cp <= high:
                return True
    return False


def is_thread(text: str, lower: str | None = None) -> bool:
    """Return True for thread emoji, the word "thread" or a ``1/N`` marker."""
    if lower is None:
        lower = text.lower()
    return (
        THREAD_EMOJI in text
        or THREAD_KEYWORD in lower
        or THREAD_NUMBERING_PATTERN.search(text) is not None
    )


def has_list_format(text: str) -> bool:
    """Return True if any line starts with ``N.``, ``-`` or a bullet."""
    for line in LINE_BREAK_PATTERN.split(text):
        if line.startswith(LIST_BULLETS) or NUMBERED_ITEM_PATTERN.match(line):
            return True
    return False


def count_caps_runs(text: str) -> int:
    """Count maximal runs of CAPS_RUN_LENGTH or more ASCII uppercase letters."""
    runs = 0
    length = 0
    for ch in text:
        if "A" <= ch <= "Z":
            length += 1
            continue
        if length >= CAPS_RUN_LENGTH:
            runs += 1
        length = 0
    if length >= CAPS_RUN_LENGTH:
        runs += 1
    return runs
