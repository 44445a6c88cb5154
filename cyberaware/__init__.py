"""
CyberAware - Cybersecurity Awareness Chat Bot

A rule-based assistant that answers cybersecurity questions through a fixed set
of topics.

Features:
- Numbered question menu
- Free-text keyword matching of topics
- Keyword-based sentiment detection with empathetic lead-ins
- Conversation memory (favorite topic, last topic, follow-up offers)
- Rich terminal interface
"""

__version__ = "1.0.0"
__author__ = "CyberAware Team"

# Core modules
from .models import (
    Action,
    ActionKind,
    ConversationState,
    MenuActionKind,
    MenuOption,
    SentimentFamily,
    SentimentRule,
    Topic
)
from .errors import (
    CyberAwareError,
    EmptyInputError,
    StartupError,
    UnknownTopicError
)
from .sentiment import SentimentDetector, detect_sentiment, SENTIMENT_RULES
from .topics import TopicCatalog, create_catalog, TOPICS, MENU_OPTIONS
from .resolver import IntentResolver, create_resolver, is_affirmative
from .config import BotConfig, load_config, configure_logging
from .chat import (
    ChatSession,
    ChatResponse,
    create_chat_session,
    run_interactive_session
)

__all__ = [
    # Models
    'Action',
    'ActionKind',
    'ConversationState',
    'MenuActionKind',
    'MenuOption',
    'SentimentFamily',
    'SentimentRule',
    'Topic',

    # Errors
    'CyberAwareError',
    'EmptyInputError',
    'StartupError',
    'UnknownTopicError',

    # Engine
    'SentimentDetector',
    'detect_sentiment',
    'SENTIMENT_RULES',
    'TopicCatalog',
    'create_catalog',
    'TOPICS',
    'MENU_OPTIONS',
    'IntentResolver',
    'create_resolver',
    'is_affirmative',

    # Configuration
    'BotConfig',
    'load_config',
    'configure_logging',

    # Chat Interface
    'ChatSession',
    'ChatResponse',
    'create_chat_session',
    'run_interactive_session'
]
