"""
Core data structures for CyberAware using Pydantic.

This module defines all the data models used throughout the application:
- Topic: A cybersecurity subject with short-form and extended-form advice
- SentimentRule: An emotion-keyword family and its empathetic response
- MenuOption: A numbered entry of the question menu
- ConversationState: The per-session user profile
- Action: The outcome of resolving one line of user input
"""

import re
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class SentimentFamily(str, Enum):
    """Groups of synonymous emotion words."""
    WORRIED = "worried"
    FRUSTRATED = "frustrated"
    CONFUSED = "confused"
    OVERWHELMED = "overwhelmed"
    EXCITED = "excited"
    SCARED = "scared"


class ActionKind(str, Enum):
    """Kinds of action the intent resolver can produce."""
    MENU_OPTION = "menu_option"
    SHOW_TOPIC = "show_topic"
    CONTINUATION = "continuation"
    EXPRESS_INTEREST = "express_interest"
    CONFUSION = "confusion"
    FALLBACK = "fallback"


class MenuActionKind(str, Enum):
    """What selecting a menu option does."""
    STATEMENT = "statement"
    TOPIC = "topic"
    EXIT = "exit"


class Topic(BaseModel):
    """A cybersecurity topic from the catalog."""
    model_config = ConfigDict(frozen=True)

    key: str
    display_name: str
    title: str
    tips: tuple[str, ...]
    extended_title: str
    extended_tips: tuple[str, ...] = ()


class SentimentRule(BaseModel):
    """An emotion-keyword family and the response template used for it."""
    model_config = ConfigDict(frozen=True)

    family: SentimentFamily
    synonyms: tuple[str, ...]
    template: str  # one {topic} slot

    @property
    def pattern(self) -> re.Pattern:
        """Word-bounded, case-insensitive alternation of the synonyms."""
        alternation = "|".join(re.escape(word) for word in self.synonyms)
        return re.compile(rf"\b({alternation})\b", re.IGNORECASE)

    def matches(self, text: str) -> bool:
        """Check if any synonym appears in the text as a whole word."""
        return self.pattern.search(text) is not None

    def render(self, topic: str) -> str:
        """Substitute the topic into the response template."""
        return self.template.format(topic=topic)


class MenuOption(BaseModel):
    """A numbered entry of the question menu."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1)
    label: str
    kind: MenuActionKind
    statement: Optional[str] = None
    topic: Optional[str] = None


class ConversationState(BaseModel):
    """Per-session user profile and dialogue state."""
    model_config = ConfigDict(validate_assignment=True)

    name: str = "User"
    favorite_topic: str = ""
    last_topic: str = ""
    pending_follow_up: bool = False
    current_sentiment: Optional[SentimentFamily] = None

    @property
    def has_last_topic(self) -> bool:
        """Check if a topic has been shown during this session."""
        return bool(self.last_topic)


class Action(BaseModel):
    """Result of resolving a single line of user input."""
    model_config = ConfigDict(frozen=True)

    kind: ActionKind
    menu_option: Optional[int] = None
    topic: Optional[str] = None
    extended: bool = False
    sentiment: Optional[SentimentFamily] = None
    lead_in: Optional[str] = None  # sentiment-aware introduction
    message: Optional[str] = None  # canned fallback text

    @property
    def shows_topic(self) -> bool:
        """Check if carrying out this action displays the short form of a topic."""
        if self.kind == ActionKind.SHOW_TOPIC:
            return True
        return self.kind == ActionKind.MENU_OPTION and self.topic is not None
