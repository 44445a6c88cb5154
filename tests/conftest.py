"""
Pytest Configuration and Fixtures for CyberAware Tests.

This module provides shared fixtures and utilities for unit and integration
tests.
"""

import io
import logging
import random
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest
from rich.console import Console

# Add cyberaware to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cyberaware.chat import ChatSession
from cyberaware.config import BotConfig
from cyberaware.models import ConversationState
from cyberaware.resolver import IntentResolver
from cyberaware.sentiment import SentimentDetector
from cyberaware.topics import create_catalog


# ============================================================================
# HELPERS
# ============================================================================

def scripted_input(lines: Iterable[str]) -> Callable[[str], str]:
    """Build an input function that replays lines, then raises EOFError."""
    remaining = iter(lines)

    def _input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return _input


@pytest.fixture
def scripted():
    """Factory for scripted input functions."""
    return scripted_input


# ============================================================================
# ENGINE FIXTURES
# ============================================================================

@pytest.fixture
def catalog():
    """Default topic catalog."""
    return create_catalog()


@pytest.fixture
def detector():
    """Default sentiment detector."""
    return SentimentDetector()


@pytest.fixture
def resolver(catalog, detector):
    """Intent resolver with a seeded random source."""
    return IntentResolver(catalog=catalog, detector=detector, rng=random.Random(42))


@pytest.fixture
def state():
    """Fresh conversation state."""
    return ConversationState(name="Alice")


@pytest.fixture
def session(resolver, state):
    """Chat session around the seeded resolver."""
    return ChatSession(resolver=resolver, state=state)


# ============================================================================
# PRESENTATION FIXTURES
# ============================================================================

@pytest.fixture
def console():
    """Console writing plain text to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)


@pytest.fixture
def bot_config():
    """Deterministic configuration without a banner."""
    return BotConfig(seed=42, show_banner=False)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CyberAware settings from the environment and skip .env loading."""
    for name in BotConfig.model_fields:
        monkeypatch.delenv(f"CYBERAWARE_{name.upper()}", raising=False)
    monkeypatch.setattr("cyberaware.config.load_dotenv", lambda *a, **kw: False)
    return monkeypatch


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
