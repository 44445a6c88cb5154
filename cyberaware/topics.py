"""
Topic catalog and question menu.

Topics are kept in declared order. Keyword matching walks them front to back,
so the order decides which topic wins when an input mentions several.

Every shipped topic carries its own extended tips. GENERIC_EXTENDED_TITLE is
only used for a topic added without any, e.g. in a custom catalog.
"""

from typing import Iterable, Optional

from .errors import UnknownTopicError
from .models import MenuActionKind, MenuOption, Topic


TOPICS: tuple[Topic, ...] = (
    Topic(
        key="password",
        display_name="password",
        title="🔐 Password Security Tips:",
        tips=(
            "Use at least 12 characters with mixed types (upper/lower case, numbers, symbols)",
            "Never reuse passwords across different sites",
            "Consider using a password manager like Bitwarden or LastPass",
            "Enable two-factor authentication where available",
        ),
        extended_title="💡 Advanced Password Tips:",
        extended_tips=(
            "Use passphrases (e.g., 'PurpleTiger$JumpsOver42Clouds!')",
            "Check if your passwords have been compromised: haveibeenpwned.com",
        ),
    ),
    Topic(
        key="scam",
        display_name="scam",
        title="🚨 Scam Alert Information:",
        tips=(
            "Common scam types: Phishing, Tech Support, Romance, Investment scams",
            "Red flags: Urgency, threats, requests for payment in gift cards/crypto",
            "Verify contacts through official channels before responding",
        ),
        extended_title="🔍 Deep Dive: Current Scam Trends",
        extended_tips=(
            "AI voice cloning scams targeting family members",
            "Fake job offers requesting upfront payments",
        ),
    ),
    Topic(
        key="privacy",
        display_name="privacy",
        title="🛡️ Privacy Protection Guidelines:",
        tips=(
            "Review privacy settings on all social media accounts monthly",
            "Use encrypted messaging apps like Signal for sensitive communications",
            "Be cautious about sharing location data and personal routines",
        ),
        extended_title="🌐 Comprehensive Privacy Measures:",
        extended_tips=(
            "Use privacy-focused browsers like Firefox with strict tracking protection",
            "Consider alternative search engines like DuckDuckGo",
        ),
    ),
    Topic(
        key="malware",
        display_name="malware",
        title="⚠️ Malware Protection Advice:",
        tips=(
            "Keep all software updated, especially your operating system",
            "Only download apps from official app stores/developer websites",
            "Be extremely cautious with email attachments from unknown senders",
        ),
        extended_title="🛠️ Advanced Malware Protection:",
        extended_tips=(
            "Use sandbox environments for testing unknown files",
            "Consider using a separate device for sensitive transactions",
        ),
    ),
    Topic(
        key="phishing",
        display_name="phishing",
        title="🎣 Phishing Protection:",
        tips=(
            "Never click links in unsolicited emails or messages",
            "Check sender email addresses carefully",
            "Look for poor grammar and urgent requests",
        ),
        extended_title="🔎 Spotting Advanced Phishing:",
        extended_tips=(
            "Hover over links to preview the real destination before clicking",
            "Report suspicious messages to your email provider or IT team",
        ),
    ),
    Topic(
        key="browsing",
        display_name="safe browsing",
        title="🌐 Safe Browsing Practices:",
        tips=(
            "Always check for HTTPS and padlock icon in address bar",
            "Use a VPN on public Wi-Fi networks",
            "Install browser security extensions",
        ),
        extended_title="🧭 Hardening Your Browser:",
        extended_tips=(
            "Keep the browser and its extensions updated, and remove ones you no longer use",
            "Block third-party cookies and disable automatic downloads",
        ),
    ),
    Topic(
        key="social media",
        display_name="social media",
        title="📱 Social Media Security:",
        tips=(
            "Adjust privacy settings to limit visibility",
            "Be selective about friend/follower requests",
            "Think before you post - the internet never forgets",
        ),
        extended_title="🔒 Locking Down Your Accounts:",
        extended_tips=(
            "Turn on login alerts so you know when a new device signs in",
            "Review which third-party apps have access to your accounts",
        ),
    ),
)


MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption(
        number=1,
        label="How are you?",
        kind=MenuActionKind.STATEMENT,
        statement="I'm great, thank you! How can I assist you today?"
    ),
    MenuOption(
        number=2,
        label="What's your purpose?",
        kind=MenuActionKind.STATEMENT,
        statement="I help you stay safe online by providing cybersecurity tips!"
    ),
    MenuOption(number=3, label="Tell me about password safety",
               kind=MenuActionKind.TOPIC, topic="password"),
    MenuOption(number=4, label="What should I know about phishing?",
               kind=MenuActionKind.TOPIC, topic="phishing"),
    MenuOption(number=5, label="How can I protect against malware?",
               kind=MenuActionKind.TOPIC, topic="malware"),
    MenuOption(number=6, label="What are safe browsing practices?",
               kind=MenuActionKind.TOPIC, topic="browsing"),
    MenuOption(number=7, label="How can I improve my online privacy?",
               kind=MenuActionKind.TOPIC, topic="privacy"),
    MenuOption(number=8, label="What's important for social media security?",
               kind=MenuActionKind.TOPIC, topic="social media"),
    MenuOption(number=9, label="Exit", kind=MenuActionKind.EXIT),
)


FAREWELL = "Goodbye! Stay safe online."
GENERIC_EXTENDED_TITLE = "Here's more detailed information:"


class TopicCatalog:
    """Ordered collection of topics and menu options."""

    def __init__(
        self,
        topics: Iterable[Topic] = TOPICS,
        menu_options: Iterable[MenuOption] = MENU_OPTIONS
    ):
        self.topics: tuple[Topic, ...] = tuple(topics)
        self.menu_options: tuple[MenuOption, ...] = tuple(menu_options)

    def keys(self) -> list[str]:
        """Topic keys in declared order."""
        return [t.key for t in self.topics]

    def get(self, key: str) -> Topic:
        """Look up a topic by key."""
        for topic in self.topics:
            if topic.key == key.lower():
                return topic
        raise UnknownTopicError(key)

    def __contains__(self, key: str) -> bool:
        return any(t.key == key for t in self.topics)

    def find_in(self, text: str) -> Optional[str]:
        """Return the first topic key that appears in the text as a substring."""
        for topic in self.topics:
            if topic.key in text:
                return topic.key
        return None

    def menu_option(self, number: int) -> Optional[MenuOption]:
        """Look up a menu option by its number."""
        for option in self.menu_options:
            if option.number == number:
                return option
        return None

    def render_basic(self, key: str) -> str:
        """Render the short-form advice for a topic."""
        topic = self.get(key)
        lines = [topic.title]
        lines.extend(f"- {tip}" for tip in topic.tips)
        return "\n".join(lines)

    def render_extended(self, key: str) -> str:
        """Render the extended-form advice for a topic."""
        topic = self.get(key)
        if not topic.extended_tips:
            return GENERIC_EXTENDED_TITLE
        lines = [topic.extended_title]
        lines.extend(f"- {tip}" for tip in topic.extended_tips)
        return "\n".join(lines)

    def follow_up_question(self, key: str) -> str:
        """The yes/no question asked after a topic is shown."""
        topic = self.get(key)
        return f"Would you like more details about {topic.display_name} protection? (yes/no)"


def create_catalog() -> TopicCatalog:
    """Create the default topic catalog."""
    return TopicCatalog()
