"""Scoring rules and the rule evaluator.

Rules are plain data held in ``RULES``, evaluated in table order. Each rule is
independent: it looks only at the FeatureSet, never at another rule's outcome.

Two shapes:
- BinaryRule: one condition; fires a factor when met, and may leave a
  suggestion behind when a positive signal is missing.
- TieredRule: an if/elif chain over one numeric feature. The first matching
  tier fires; when no tier matches the rule contributes nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from viralscore.engine.models import Evaluation, Factor, FeatureSet, RuleOutcome

# Suggestions (a desirable signal is missing)
SUGGEST_QUESTION = "Add a question to encourage replies - replies are weighted heavily"
SUGGEST_HOOK = 'Start with a hook (e.g., "Here\'s why...", "Unpopular opinion:")'
SUGGEST_EXPAND = "Longer posts increase dwell time - consider expanding"
SUGGEST_MEDIA = "Add an image or video - media increases dwell time and engagement"
SUGGEST_LINK_IN_REPLY = "Consider posting link in reply - external links can reduce reach"

# Warnings (an undesirable signal is present)
WARN_ENGAGEMENT_BAIT = 'Avoid "retweet if" / "like if" - triggers blocks and mutes'
WARN_EXCESSIVE_CAPS = "Too many ALL CAPS words can seem spammy"
WARN_TOO_MANY_HASHTAGS = "More than 3 hashtags looks spammy - reduce them"


@dataclass(frozen=True, slots=True)
class BinaryRule:
    """Fixed-impact rule over a single boolean condition."""

    name: str
    condition: Callable[[FeatureSet], bool]
    label: str
    impact: int
    suggestion_when_met: str | None = None
    warning_when_met: str | None = None
    suggestion_when_missing: str | None = None

    def apply(self, features: FeatureSet) -> RuleOutcome:
        if self.condition(features):
            return RuleOutcome(
                factor=Factor(label=self.label, impact=self.impact, positive=self.impact > 0),
                suggestion=self.suggestion_when_met,
                warning=self.warning_when_met,
            )
        return RuleOutcome(suggestion=self.suggestion_when_missing)


@dataclass(frozen=True, slots=True)
class Tier:
    """One bucket of a TieredRule."""

    matches: Callable[[int], bool]
    label: str
    impact: int
    suggestion: str | None = None
    warning: str | None = None


@dataclass(frozen=True, slots=True)
class TieredRule:
    """Mutually exclusive tiers over one numeric feature; first match wins."""

    name: str
    value: Callable[[FeatureSet], int]
    tiers: tuple[Tier, ...]

    def apply(self, features: FeatureSet) -> RuleOutcome:
        value = self.value(features)
        for tier in self.tiers:
            if tier.matches(value):
                return RuleOutcome(
                    factor=Factor(label=tier.label, impact=tier.impact, positive=tier.impact > 0),
                    suggestion=tier.suggestion,
                    warning=tier.warning,
                )
        # No tier matched (e.g. 10-19 words, exactly 3 hashtags): no factor, no advice
        return RuleOutcome()


Rule = BinaryRule | TieredRule


RULES: tuple[Rule, ...] = (
    # Reply-worthy content
    BinaryRule(
        name="question",
        condition=lambda f: f.has_question,
        label="Contains question",
        impact=20,
        suggestion_when_missing=SUGGEST_QUESTION,
    ),
    BinaryRule(
        name="hook",
        condition=lambda f: f.has_hook,
        label="Strong opening hook",
        impact=10,
        suggestion_when_missing=SUGGEST_HOOK,
    ),
    # Dwell time
    TieredRule(
        name="length",
        value=lambda f: f.word_count,
        tiers=(
            Tier(lambda n: 20 <= n <= 50, "Good length for dwell time", 15),
            Tier(lambda n: n < 10, "Short post", 5, suggestion=SUGGEST_EXPAND),
            Tier(lambda n: n > 50, "Long-form content", 12),
        ),
    ),
    BinaryRule(
        name="media",
        condition=lambda f: f.has_media,
        label="Has media attached",
        impact=15,
        suggestion_when_missing=SUGGEST_MEDIA,
    ),
    BinaryRule(
        name="thread",
        condition=lambda f: f.is_thread,
        label="Thread format",
        impact=10,
    ),
    # Shareability
    BinaryRule(
        name="list_format",
        condition=lambda f: f.has_list_format,
        label="List/structured format",
        impact=10,
    ),
    BinaryRule(
        name="emoji",
        condition=lambda f: f.has_emoji,
        label="Uses emoji",
        impact=5,
    ),
    # Negative signals
    BinaryRule(
        name="engagement_bait",
        condition=lambda f: f.engagement_bait_detected,
        label="Engagement bait detected",
        impact=-25,
        warning_when_met=WARN_ENGAGEMENT_BAIT,
    ),
    BinaryRule(
        name="excessive_caps",
        condition=lambda f: f.excessive_caps_detected,
        label="Excessive caps",
        impact=-10,
        warning_when_met=WARN_EXCESSIVE_CAPS,
    ),
    TieredRule(
        name="hashtags",
        value=lambda f: f.hashtag_count,
        tiers=(
            Tier(lambda n: n > 3, "Too many hashtags", -10, warning=WARN_TOO_MANY_HASHTAGS),
            Tier(lambda n: 1 <= n <= 2, "Good hashtag usage", 5),
        ),
    ),
    BinaryRule(
        name="links",
        condition=lambda f: f.has_links,
        label="Contains external link",
        impact=-5,
        suggestion_when_met=SUGGEST_LINK_IN_REPLY,
    ),
)


def evaluate(features: FeatureSet, rules: tuple[Rule, ...] = RULES) -> Evaluation:
    """Apply every rule in order and collect factors, suggestions and warnings.

    Output order follows the rule table; factors are never re-sorted.
    """
    factors: list[Factor] = []
    suggestions: list[str] = []
    warnings: list[str] = []

    for rule in rules:
        outcome = rule.apply(features)
        if outcome.factor is not None:
            factors.append(outcome.factor)
        if outcome.suggestion is not None:
            suggestions.append(outcome.suggestion)
        if outcome.warning is not None:
            warnings.append(outcome.warning)

    return Evaluation(
        factors=tuple(factors),
        suggestions=tuple(suggestions),
        warnings=tuple(warnings),
    )
