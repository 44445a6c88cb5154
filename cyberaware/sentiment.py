"""
Keyword-based sentiment detection.

Each sentiment family is a word-bounded alternation of synonyms. Rules are
checked in declared order and the first match wins, so an input such as
"worried and confused" resolves to the family listed first.
"""

import logging
from typing import Optional

from .models import SentimentFamily, SentimentRule


logger = logging.getLogger(__name__)


SENTIMENT_RULES: tuple[SentimentRule, ...] = (
    SentimentRule(
        family=SentimentFamily.WORRIED,
        synonyms=("worried", "concerned", "anxious", "nervous"),
        template="It's completely understandable to feel that way about {topic}. "
                 "Let me share some tips to help you feel more secure."
    ),
    SentimentRule(
        family=SentimentFamily.FRUSTRATED,
        synonyms=("frustrated", "angry", "annoyed"),
        template="I hear your frustration about {topic}. Cybersecurity can be "
                 "challenging, but we'll work through it together."
    ),
    SentimentRule(
        family=SentimentFamily.CONFUSED,
        synonyms=("confused", "unsure", "puzzled"),
        template="{topic} can be confusing at first. Let me break it down in "
                 "simpler terms to help you understand."
    ),
    SentimentRule(
        family=SentimentFamily.OVERWHELMED,
        synonyms=("overwhelmed", "stressed"),
        template="I understand feeling overwhelmed by {topic}. We'll take it one "
                 "step at a time. You're doing great by seeking information!"
    ),
    SentimentRule(
        family=SentimentFamily.EXCITED,
        synonyms=("excited", "interested", "enthusiastic"),
        template="That's great you're excited about {topic}! It's wonderful to see "
                 "someone taking an active interest in their cybersecurity."
    ),
    SentimentRule(
        family=SentimentFamily.SCARED,
        synonyms=("scared", "afraid", "fearful"),
        template="I understand being scared about {topic}. The digital world can "
                 "feel risky, but knowledge is your best protection."
    ),
)


class SentimentDetector:
    """Classifies text against an ordered list of sentiment rules."""

    def __init__(self, rules: Optional[tuple[SentimentRule, ...]] = None):
        self.rules = rules if rules is not None else SENTIMENT_RULES

    def detect(self, text: str) -> Optional[SentimentFamily]:
        """
        Detect the sentiment family of a line of text.

        Args:
            text: Raw or normalized user input

        Returns:
            The family of the first matching rule, or None
        """
        for rule in self.rules:
            if rule.matches(text):
                logger.debug("Sentiment %s detected", rule.family.value)
                return rule.family
        return None

    def rule_for(self, family: SentimentFamily) -> Optional[SentimentRule]:
        """Get the rule for a sentiment family."""
        for rule in self.rules:
            if rule.family == family:
                return rule
        return None

    def lead_in(self, family: Optional[SentimentFamily], topic: str) -> Optional[str]:
        """Render the sentiment-aware introduction for a topic."""
        if family is None:
            return None
        rule = self.rule_for(family)
        if rule is None:
            return None
        return rule.render(topic)


def detect_sentiment(text: str) -> Optional[SentimentFamily]:
    """Detect sentiment with the default rules."""
    return SentimentDetector().detect(text)
