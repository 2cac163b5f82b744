"""Pattern tables used by the feature extractor.

Phrase tables are matched case-insensitively against lowercased text.
Regular expressions carry explicit ``re.ASCII`` flags where ``\\w`` / ``\\d``
must mean the ASCII classes only.
"""

import re

# Opening phrases that count as a hook when the trimmed post starts with them.
HOOK_OPENERS: tuple[str, ...] = (
    "here's",
    "this is",
    "the",
    "i just",
    "breaking",
    "unpopular opinion",
    "hot take",
    "thread",
    "psa",
    "reminder",
)

# Engagement bait (negative signal), matched anywhere in the post.
ENGAGEMENT_BAIT_PHRASES: tuple[str, ...] = (
    "retweet if",
    "like if",
    "rt if",
    "follow for",
    "like and retweet",
    "smash that",
    "don't scroll",
)

# Inclusive code point ranges treated as emoji.
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F300, 0x1F9FF),  # pictographs, emoticons, transport, supplemental symbols
    (0x2600, 0x26FF),  # miscellaneous symbols
)

THREAD_EMOJI = "\U0001F9F5"
THREAD_KEYWORD = "thread"
LIST_BULLETS: tuple[str, ...] = ("-", "•")

# Runs of uppercase letters at least this long count as "shouting".
CAPS_RUN_LENGTH = 4
# More than this many shouting runs is excessive.
MAX_CAPS_RUNS = 2

HASHTAG_PATTERN = re.compile(r"#\w+", re.ASCII)
MENTION_PATTERN = re.compile(r"@\w+", re.ASCII)
LINK_PATTERN = re.compile(r"https?://\S+")
THREAD_NUMBERING_PATTERN = re.compile(r"1/\d+", re.ASCII)
NUMBERED_ITEM_PATTERN = re.compile(r"\d+\.", re.ASCII)
LINE_BREAK_PATTERN = re.compile(r"\r\n|[\n\r\u2028\u2029]")

# Whitespace for word splitting and trimming. A byte order mark counts as whitespace.
WHITESPACE_PATTERN = re.compile(r"[\s\ufeff]+")
EDGE_WHITESPACE_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
