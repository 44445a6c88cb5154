"""
Tests for intent resolution.

Tests cover:
- Empty-input guard
- Sentiment recomputation
- Rule order (menu, topic, continuation, interest, confusion, fallback)
- Fallback selection and sentiment nudges
"""

import random

import pytest

from cyberaware.errors import EmptyInputError
from cyberaware.models import ActionKind, ConversationState, SentimentFamily
from cyberaware.resolver import (
    FALLBACK_RESPONSES, SENTIMENT_NUDGES, IntentResolver, create_resolver, is_affirmative
)


# ============================================================================
# GUARD AND NORMALIZATION TESTS
# ============================================================================

class TestEmptyInput:
    """Tests for the empty-input guard."""

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_input_rejected(self, resolver, state, text):
        """Test blank input raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            resolver.resolve(text, state)

    def test_blank_input_leaves_sentiment(self, resolver, state):
        """Test the guard runs before sentiment detection."""
        state.current_sentiment = SentimentFamily.SCARED

        with pytest.raises(EmptyInputError):
            resolver.resolve(" ", state)

        assert state.current_sentiment == SentimentFamily.SCARED


class TestSentimentRecompute:
    """Tests for per-line sentiment detection."""

    def test_sentiment_overwritten_every_line(self, resolver, state):
        """Test sentiment is recomputed even when no rule needs it."""
        resolver.resolve("I'm so worried", state)
        assert state.current_sentiment == SentimentFamily.WORRIED

        resolver.resolve("3", state)
        assert state.current_sentiment is None

    def test_sentiment_not_accumulated(self, resolver, state):
        """Test only the latest line counts."""
        resolver.resolve("I'm angry", state)
        resolver.resolve("I'm scared", state)

        assert state.current_sentiment == SentimentFamily.SCARED

    def test_uppercase_input(self, resolver, state):
        """Test input is matched case-insensitively."""
        action = resolver.resolve("TELL ME ABOUT MALWARE", state)

        assert action.kind == ActionKind.SHOW_TOPIC
        assert action.topic == "malware"


# ============================================================================
# MENU SELECTION TESTS
# ============================================================================

class TestMenuSelection:
    """Tests for numbered menu selection."""

    def test_topic_option(self, resolver, state):
        """Test "3" selects the password topic."""
        action = resolver.resolve("3", state)

        assert action.kind == ActionKind.MENU_OPTION
        assert action.menu_option == 3
        assert action.topic == "password"
        assert action.shows_topic

    def test_statement_option(self, resolver, state):
        """Test statement options carry no topic."""
        action = resolver.resolve("2", state)

        assert action.kind == ActionKind.MENU_OPTION
        assert action.menu_option == 2
        assert action.topic is None

    def test_exit_option(self, resolver, state):
        """Test option 9."""
        action = resolver.resolve("9", state)

        assert action.kind == ActionKind.MENU_OPTION
        assert action.menu_option == 9

    def test_signed_integer(self, resolver, state):
        """Test a leading plus sign still parses."""
        assert resolver.resolve("+4", state).topic == "phishing"

    @pytest.mark.parametrize("text", ["0", "10", "-3", "99999999999999999999"])
    def test_out_of_range_falls_through(self, resolver, state, text):
        """Test numbers without a menu option fall through."""
        assert resolver.resolve(text, state).kind == ActionKind.FALLBACK

    @pytest.mark.parametrize("text", ["3.0", "1_0", "٣", "three"])
    def test_non_integer_falls_through(self, resolver, state, text):
        """Test malformed numbers are not menu selections."""
        assert resolver.resolve(text, state).kind == ActionKind.FALLBACK

    def test_menu_beats_continuation(self, resolver, state):
        """Test menu selection runs before continuation."""
        state.pending_follow_up = True
        state.last_topic = "scam"

        assert resolver.resolve("5", state).kind == ActionKind.MENU_OPTION

    def test_number_with_text_is_not_menu(self, resolver, state):
        """Test the whole input must be the number."""
        action = resolver.resolve("3 password", state)

        assert action.kind == ActionKind.SHOW_TOPIC
        assert action.topic == "password"


# ============================================================================
# KEYWORD TOPIC TESTS
# ============================================================================

class TestKeywordTopic:
    """Tests for keyword topic matching."""

    def test_topic_without_sentiment(self, resolver, state):
        """Test a plain topic question has no lead-in."""
        action = resolver.resolve("tell me about phishing", state)

        assert action.kind == ActionKind.SHOW_TOPIC
        assert action.topic == "phishing"
        assert action.sentiment is None
        assert action.lead_in is None

    def test_topic_with_sentiment(self, resolver, state):
        """Test the sentiment lead-in names the topic."""
        action = resolver.resolve("I'm worried about password safety", state)

        assert state.current_sentiment == SentimentFamily.WORRIED
        assert action.kind == ActionKind.SHOW_TOPIC
        assert action.topic == "password"
        assert action.sentiment == SentimentFamily.WORRIED
        assert action.lead_in == (
            "It's completely understandable to feel that way about password. "
            "Let me share some tips to help you feel more secure."
        )

    def test_multi_word_topic_with_sentiment(self, resolver, state):
        """Test lead-ins for multi-word topics."""
        action = resolver.resolve("I'm scared of social media", state)

        assert action.topic == "social media"
        assert action.lead_in.startswith("I understand being scared about social media.")

    def test_declared_order_tie_break(self, resolver, state):
        """Test the first declared topic wins."""
        assert resolver.resolve("is this phishing or a scam?", state).topic == "scam"
        assert resolver.resolve("malware and password", state).topic == "password"

    def test_topic_beats_continuation(self, resolver, state):
        """Test a topic keyword runs before continuation."""
        state.pending_follow_up = True
        state.last_topic = "scam"

        action = resolver.resolve("explain more about malware", state)

        assert action.kind == ActionKind.SHOW_TOPIC
        assert action.topic == "malware"

    def test_resolver_does_not_apply_side_effects(self, resolver, state):
        """Test showing a topic is left to the caller."""
        resolver.resolve("privacy please", state)

        assert state.last_topic == ""
        assert state.favorite_topic == ""


# ============================================================================
# CONTINUATION TESTS
# ============================================================================

class TestContinuation:
    """Tests for continuation requests."""

    def test_continuation(self, resolver, state):
        """Test asking for more after accepting a follow-up."""
        state.pending_follow_up = True
        state.last_topic = "phishing"

        action = resolver.resolve("can you explain more", state)

        assert action.kind == ActionKind.CONTINUATION
        assert action.topic == "phishing"
        assert action.extended is True

    @pytest.mark.parametrize("text", ["more please", "explain", "give me the details"])
    def test_continuation_words(self, resolver, state, text):
        """Test each continuation word."""
        state.pending_follow_up = True
        state.last_topic = "scam"

        assert resolver.resolve(text, state).kind == ActionKind.CONTINUATION

    def test_no_continuation_without_pending(self, resolver, state):
        """Test continuation needs a pending follow-up."""
        state.last_topic = "phishing"

        assert resolver.resolve("tell me more", state).kind == ActionKind.FALLBACK


# ============================================================================
# INTEREST TESTS
# ============================================================================

class TestExpressedInterest:
    """Tests for expressed interest."""

    def test_interest_rule_picks_first_topic(self, resolver, state):
        """Test the interest rule picks the first declared topic."""
        action = resolver._match_interest("i'm interested in privacy and malware", state)

        assert action.kind == ActionKind.EXPRESS_INTEREST
        assert action.topic == "privacy"

    def test_care_about(self, resolver, state):
        """Test "care about" phrasing."""
        action = resolver._match_interest("i really care about malware", state)

        assert action.topic == "malware"

    def test_interest_without_topic(self, resolver, state):
        """Test the rule does not fire without a topic."""
        assert resolver._match_interest("i care about staying safe", state) is None

    def test_topic_rule_runs_first(self, resolver, state):
        """Test interest in a topic is handled by the topic rule."""
        action = resolver.resolve("I'm interested in privacy and malware", state)

        assert action.kind == ActionKind.SHOW_TOPIC
        assert action.topic == "privacy"
        assert action.sentiment == SentimentFamily.EXCITED

    def test_interest_without_topic_falls_back(self, resolver, state):
        """Test full resolution of interest without a topic."""
        assert resolver.resolve("I care about staying safe", state).kind == ActionKind.FALLBACK


# ============================================================================
# CONFUSION TESTS
# ============================================================================

class TestConfusion:
    """Tests for confusion about the last topic."""

    @pytest.mark.parametrize("text", ["I don't understand", "I'm confused", "that's not clear"])
    def test_confusion(self, resolver, state, text):
        """Test each confusion phrase."""
        state.last_topic = "malware"

        action = resolver.resolve(text, state)

        assert action.kind == ActionKind.CONFUSION
        assert action.topic == "malware"
        assert action.extended is True

    def test_no_confusion_without_last_topic(self, resolver, state):
        """Test confusion needs a topic to re-explain."""
        action = resolver.resolve("I'm confused", state)

        assert action.kind == ActionKind.FALLBACK
        assert action.message.endswith(SENTIMENT_NUDGES[SentimentFamily.CONFUSED])


# ============================================================================
# FALLBACK TESTS
# ============================================================================

class TestFallback:
    """Tests for the fallback response."""

    def test_fallback_message(self, resolver, state):
        """Test the fallback uses a canned response."""
        action = resolver.resolve("hello there", state)

        assert action.kind == ActionKind.FALLBACK
        assert action.message in FALLBACK_RESPONSES

    def test_fallback_is_deterministic_with_seed(self, state):
        """Test an injected random source fixes the choice."""
        first = IntentResolver(rng=random.Random(7))
        second = IntentResolver(rng=random.Random(7))

        messages_a = [first.resolve("hello", state).message for _ in range(5)]
        messages_b = [second.resolve("hello", state).message for _ in range(5)]

        assert messages_a == messages_b

    def test_fallback_uses_rng(self, state):
        """Test the choice comes from the injected random source."""
        rng = random.Random()
        rng.choice = lambda seq: seq[2]
        resolver = IntentResolver(rng=rng)

        assert resolver.resolve("hello", state).message == FALLBACK_RESPONSES[2]

    def test_worried_nudge(self, resolver, state):
        """Test worried users get a protection nudge."""
        action = resolver.resolve("I'm nervous", state)

        assert action.message.endswith(
            " You might want to ask about protecting yourself from online threats."
        )

    def test_other_sentiments_have_no_nudge(self, resolver, state):
        """Test only worried and confused add a nudge."""
        action = resolver.resolve("I'm so angry", state)

        assert action.message in FALLBACK_RESPONSES

    def test_fallback_does_not_touch_state(self, resolver):
        """Test repeated fallbacks never change the dialogue state."""
        state = ConversationState(
            name="Bob",
            favorite_topic="scam",
            last_topic="malware",
            pending_follow_up=True
        )

        for _ in range(5):
            assert resolver.resolve("what's the weather", state).kind == ActionKind.FALLBACK

        assert state.favorite_topic == "scam"
        assert state.last_topic == "malware"
        assert state.pending_follow_up is True


# ============================================================================
# HELPER TESTS
# ============================================================================

class TestIsAffirmative:
    """Tests for follow-up answer parsing."""

    @pytest.mark.parametrize("answer", ["yes", "Y", "yeah", "  yes please", "YES"])
    def test_affirmative(self, answer):
        assert is_affirmative(answer)

    @pytest.mark.parametrize("answer", ["no", "", "okay", "sure", None, "n"])
    def test_not_affirmative(self, answer):
        assert not is_affirmative(answer)


class TestCreateResolver:
    """Tests for the resolver factory."""

    def test_seeded_resolvers_agree(self, state):
        """Test equal seeds give equal fallback choices."""
        a = create_resolver(seed=3)
        b = create_resolver(seed=3)

        assert [a.resolve("x", state).message for _ in range(4)] == \
            [b.resolve("x", state).message for _ in range(4)]

    def test_default_catalog(self):
        """Test the factory loads the default catalog."""
        assert "password" in create_resolver().catalog
