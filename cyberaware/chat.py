"""
Interactive chat session for CyberAware.

ChatSession is the caller of the intent resolver: it applies each action's side
effects to the conversation state, renders the reply text and runs the yes/no
follow-up that is offered after every topic.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from .config import BotConfig, load_config
from .errors import CyberAwareError, EmptyInputError, StartupError, UnknownTopicError
from .models import Action, ActionKind, ConversationState, MenuActionKind
from .resolver import IntentResolver, create_resolver, is_affirmative
from .topics import FAREWELL, TopicCatalog


logger = logging.getLogger(__name__)


PRIVACY_TOPIC = "privacy"
DONE_WITH_TOPIC = "I'll assume you're done with this topic for now."
MENU_PROMPT = "\nEnter your question or the number of your choice: "


@dataclass
class ChatResponse:
    """Response from one chat turn."""
    message: str
    action: Optional[Action] = None
    follow_up_question: Optional[str] = None
    end_session: bool = False
    style: Optional[str] = None


class ChatSession:
    """
    One conversation with one user.

    Owns the ConversationState for its lifetime. After a topic is shown the
    session waits for a yes/no answer; the next line goes to answer_follow_up
    instead of the resolver.
    """

    def __init__(
        self,
        resolver: Optional[IntentResolver] = None,
        state: Optional[ConversationState] = None,
        default_name: str = "User"
    ):
        self.resolver = resolver or create_resolver()
        self.catalog: TopicCatalog = self.resolver.catalog
        self.state = state or ConversationState(name=default_name)
        self.default_name = default_name
        self.awaiting_follow_up: Optional[str] = None

    def greet(self, name: Optional[str]) -> str:
        """Set the user's name and return the greeting."""
        name = (name or "").strip()
        self.state.name = name or self.default_name
        return f"Hello, {self.state.name}! I'm here to help you stay safe online."

    def process(self, line: str) -> ChatResponse:
        """
        Handle one line of user input.

        If a follow-up question is pending the line is treated as its answer.
        On any error the state is restored to what it was before the turn and
        the error is re-raised.
        """
        if self.awaiting_follow_up is not None:
            return self.answer_follow_up(line)

        snapshot = self.state.model_copy()
        try:
            action = self.resolver.resolve(line, self.state)
            return self.execute(action)
        except Exception:
            self._restore(snapshot)
            self.awaiting_follow_up = None
            raise

    def execute(self, action: Action) -> ChatResponse:
        """Apply an action's side effects and render its reply."""
        if action.kind == ActionKind.MENU_OPTION:
            return self._execute_menu_option(action)

        if action.kind == ActionKind.SHOW_TOPIC:
            return self._show_topic(action.topic, action, lead_in=action.lead_in)

        if action.kind == ActionKind.CONTINUATION:
            self.state.pending_follow_up = False
            return ChatResponse(
                message=self._extended(action.topic),
                action=action,
                style="yellow"
            )

        if action.kind == ActionKind.EXPRESS_INTEREST:
            if action.topic not in self.catalog:
                raise UnknownTopicError(action.topic)
            self.state.favorite_topic = action.topic
            return ChatResponse(
                message=f"Great, {self.state.name}! I'll remember you're interested in {action.topic}.\n"
                        "It's a crucial part of staying safe online.",
                action=action
            )

        if action.kind == ActionKind.CONFUSION:
            return ChatResponse(
                message=f"Let me try explaining {action.topic} differently...\n\n"
                        f"{self._extended(action.topic)}",
                action=action,
                style="yellow"
            )

        return ChatResponse(message=action.message or "", action=action)

    def answer_follow_up(self, answer: Optional[str]) -> ChatResponse:
        """
        Handle the answer to "would you like more details?".

        Args:
            answer: The user's answer, or None if it could not be read

        Returns:
            The extended topic info for a yes, an empty message otherwise
        """
        topic = self.awaiting_follow_up
        if topic is None:
            raise CyberAwareError("No follow-up question is pending")
        self.awaiting_follow_up = None

        if answer is None:
            return ChatResponse(message=DONE_WITH_TOPIC)

        if is_affirmative(answer):
            self.state.pending_follow_up = True
            return ChatResponse(message=self._extended(topic), style="yellow")

        return ChatResponse(message="")

    def menu_text(self) -> str:
        """Render the numbered question menu."""
        lines = [
            "You can either:",
            "1. Type your question (e.g., 'tell me about phishing')",
            "2. Choose a number from the menu below:",
            ""
        ]
        lines.extend(f"{o.number}. {o.label}" for o in self.catalog.menu_options)
        return "\n".join(lines)

    def favorite_hint(self) -> Optional[str]:
        """Suggestion shown under the menu once a favorite topic is known."""
        if not self.state.favorite_topic:
            return None
        return (
            f"{self.state.name}, since you're interested in {self.state.favorite_topic}, "
            "you might want to ask about related topics!"
        )

    def _execute_menu_option(self, action: Action) -> ChatResponse:
        option = self.catalog.menu_option(action.menu_option)
        if option is None:
            raise CyberAwareError(f"Unknown menu option: {action.menu_option}")

        if action.shows_topic:
            return self._show_topic(action.topic, action)
        if option.kind == MenuActionKind.EXIT:
            return ChatResponse(message=FAREWELL, action=action, end_session=True, style="bold green")
        return ChatResponse(message=option.statement or "", action=action)

    def _show_topic(self, key: str, action: Action, lead_in: Optional[str] = None) -> ChatResponse:
        """Show the short form of a topic and offer the follow-up."""
        self.state.last_topic = key
        if key == PRIVACY_TOPIC:
            self.state.favorite_topic = PRIVACY_TOPIC

        message = self.catalog.render_basic(key)
        if lead_in:
            message = f"{lead_in}\n\n{message}"

        self.awaiting_follow_up = key
        return ChatResponse(
            message=message,
            action=action,
            follow_up_question=self.catalog.follow_up_question(key)
        )

    def _extended(self, key: str) -> str:
        return (
            f"{self.catalog.render_extended(key)}\n\n"
            f"{self.state.name}, would you like me to explain any part of this in more detail?"
        )

    def _restore(self, snapshot: ConversationState) -> None:
        for field_name in ConversationState.model_fields:
            setattr(self.state, field_name, getattr(snapshot, field_name))


def create_chat_session(config: Optional[BotConfig] = None) -> ChatSession:
    """Create a chat session from configuration."""
    config = config or load_config()
    return ChatSession(
        resolver=create_resolver(config.seed),
        default_name=config.default_name
    )


def print_response(console: Console, response: ChatResponse) -> None:
    """Print a chat response."""
    if not response.message:
        return
    console.print()
    console.print(escape(response.message), style=response.style)


def print_turn_error(console: Console, error: Exception) -> None:
    """Report a recoverable error; the loop re-prompts afterwards."""
    console.print("\nSomething went wrong, but we can continue:", style="yellow")
    console.print(escape(str(error)), style="yellow")
    console.print("Please try your question again.", style="yellow")


def start_session(
    config: BotConfig,
    console: Console,
    input_func: Callable[[str], str]
) -> ChatSession:
    """
    Create the session and greet the user.

    Raises:
        StartupError: If the session cannot be initialized
    """
    try:
        session = create_chat_session(config)
        console.print("Welcome to the Cybersecurity Awareness Bot!", style="bold blue")
        try:
            name = input_func("What's your name? ")
        except EOFError:
            name = None
        console.print(escape(session.greet(name)), style="blue")
        console.rule(style="dim")
        return session
    except StartupError:
        raise
    except Exception as e:
        raise StartupError(f"Failed to start session: {e}") from e


def run_interactive_session(
    config: Optional[BotConfig] = None,
    console: Optional[Console] = None,
    input_func: Optional[Callable[[str], str]] = None
) -> ChatSession:
    """
    Run an interactive chat session until the user exits.

    Usage:
        from cyberaware.chat import run_interactive_session
        run_interactive_session()

    Returns:
        The finished session

    Raises:
        StartupError: If the session cannot be started
    """
    config = config or load_config()
    console = console or Console()
    input_func = input_func or console.input

    session = start_session(config, console, input_func)

    while True:
        try:
            console.print()
            console.print(session.menu_text())
            hint = session.favorite_hint()
            if hint:
                console.print()
                console.print(escape(hint), style="yellow")

            user_input = input_func(MENU_PROMPT)
            response = session.process(user_input.strip())
            print_response(console, response)

            if response.end_session:
                break

            if response.follow_up_question:
                console.print()
                console.print(response.follow_up_question)
                try:
                    answer = input_func("> ")
                except EOFError:
                    answer = None
                print_response(console, session.answer_follow_up(answer))

        except (KeyboardInterrupt, EOFError):
            console.print()
            console.print(FAREWELL, style="bold green")
            break
        except EmptyInputError as e:
            logger.debug("Blank line ignored")
            print_turn_error(console, e)
        except Exception as e:
            logger.warning("Turn failed: %s", e)
            print_turn_error(console, e)

    return session
