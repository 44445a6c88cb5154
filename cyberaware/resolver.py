"""
Intent resolution for the CyberAware chat.

Turns one line of user text into exactly one Action. The rules run in a fixed
order and the first one that matches wins:

1. Empty-input guard
2. Lowercase normalization
3. Sentiment detection (always runs, overwrites the previous value)
4. Menu selection
5. Keyword topic match
6. Continuation of the last topic
7. Expressed interest
8. Confusion about the last topic
9. Fallback

The resolver only writes ConversationState.current_sentiment. Every other side
effect is applied by the caller (see chat.ChatSession).
"""

import logging
import random
import re
from typing import Optional

from .errors import EmptyInputError
from .models import (
    Action,
    ActionKind,
    ConversationState,
    MenuActionKind,
    SentimentFamily
)
from .sentiment import SentimentDetector
from .topics import TopicCatalog, create_catalog


logger = logging.getLogger(__name__)


FALLBACK_RESPONSES: tuple[str, ...] = (
    "I'm not sure I understand. Can you try rephrasing?",
    "I didn't catch that. Could you ask about cybersecurity topics like passwords, scams, or privacy?",
    "Let's focus on cybersecurity. Try asking about online safety topics.",
    "I specialize in cybersecurity. Ask me about staying safe online!",
)

SENTIMENT_NUDGES: dict[SentimentFamily, str] = {
    SentimentFamily.WORRIED: " You might want to ask about protecting yourself from online threats.",
    SentimentFamily.CONFUSED: " Try asking about basic cybersecurity principles.",
}

CONTINUATION_WORDS: tuple[str, ...] = ("more", "explain", "details")
INTEREST_PHRASES: tuple[str, ...] = ("interested in", "care about")
CONFUSION_PHRASES: tuple[str, ...] = ("don't understand", "confused", "not clear")

_INTEGER = re.compile(r'^[+-]?[0-9]+$')


def is_affirmative(answer: Optional[str]) -> bool:
    """Check if a follow-up answer means yes (anything starting with "y")."""
    if answer is None:
        return False
    return answer.strip().lower().startswith("y")


class IntentResolver:
    """
    Rule-based intent resolver.

    Args:
        catalog: Topic catalog providing topic keys and menu options
        detector: Sentiment detector
        rng: Random source used to pick fallback responses
    """

    def __init__(
        self,
        catalog: Optional[TopicCatalog] = None,
        detector: Optional[SentimentDetector] = None,
        rng: Optional[random.Random] = None
    ):
        self.catalog = catalog or create_catalog()
        self.detector = detector or SentimentDetector()
        self.rng = rng or random.Random()

    def resolve(self, raw_input: str, state: ConversationState) -> Action:
        """
        Resolve one line of input into an action.

        Args:
            raw_input: The user's line of text
            state: Conversation state; only current_sentiment is updated

        Returns:
            The action for the first rule that matches

        Raises:
            EmptyInputError: If the input is empty or whitespace-only
        """
        if raw_input is None or not raw_input.strip():
            raise EmptyInputError()

        text = raw_input.strip().lower()
        state.current_sentiment = self.detector.detect(text)

        for rule in (
            self._match_menu,
            self._match_topic,
            self._match_continuation,
            self._match_interest,
            self._match_confusion
        ):
            action = rule(text, state)
            if action is not None:
                logger.debug("Resolved %r as %s", text, action.kind.value)
                return action

        logger.debug("No rule matched %r, using fallback", text)
        return self._fallback(state)

    def _match_menu(self, text: str, state: ConversationState) -> Optional[Action]:
        """Whole input is an integer naming a menu option."""
        if not _INTEGER.match(text):
            return None
        option = self.catalog.menu_option(int(text))
        if option is None:
            return None
        return Action(
            kind=ActionKind.MENU_OPTION,
            menu_option=option.number,
            topic=option.topic if option.kind == MenuActionKind.TOPIC else None,
            sentiment=state.current_sentiment
        )

    def _match_topic(self, text: str, state: ConversationState) -> Optional[Action]:
        """Input mentions a topic key."""
        key = self.catalog.find_in(text)
        if key is None:
            return None
        return Action(
            kind=ActionKind.SHOW_TOPIC,
            topic=key,
            sentiment=state.current_sentiment,
            lead_in=self.detector.lead_in(state.current_sentiment, key)
        )

    def _match_continuation(self, text: str, state: ConversationState) -> Optional[Action]:
        """User asks for more detail after accepting a follow-up."""
        if not state.pending_follow_up:
            return None
        if not any(word in text for word in CONTINUATION_WORDS):
            return None
        return Action(
            kind=ActionKind.CONTINUATION,
            topic=state.last_topic,
            extended=True,
            sentiment=state.current_sentiment
        )

    def _match_interest(self, text: str, state: ConversationState) -> Optional[Action]:
        """User says they are interested in, or care about, a topic."""
        if not any(phrase in text for phrase in INTEREST_PHRASES):
            return None
        key = self.catalog.find_in(text)
        if key is None:
            return None
        return Action(
            kind=ActionKind.EXPRESS_INTEREST,
            topic=key,
            sentiment=state.current_sentiment
        )

    def _match_confusion(self, text: str, state: ConversationState) -> Optional[Action]:
        """User is confused about the topic just discussed."""
        if not any(phrase in text for phrase in CONFUSION_PHRASES):
            return None
        if not state.has_last_topic:
            return None
        return Action(
            kind=ActionKind.CONFUSION,
            topic=state.last_topic,
            extended=True,
            sentiment=state.current_sentiment
        )

    def _fallback(self, state: ConversationState) -> Action:
        """Pick a canned response, nudged by the current sentiment."""
        message = self.rng.choice(FALLBACK_RESPONSES)
        nudge = SENTIMENT_NUDGES.get(state.current_sentiment)
        if nudge:
            message += nudge
        return Action(
            kind=ActionKind.FALLBACK,
            sentiment=state.current_sentiment,
            message=message
        )


def create_resolver(seed: Optional[int] = None) -> IntentResolver:
    """Create an intent resolver, optionally with a seeded random source."""
    return IntentResolver(rng=random.Random(seed))
