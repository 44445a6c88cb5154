"""
CyberAware CLI - Cybersecurity Awareness Chat Bot

Main entry point for the CyberAware chat bot.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .chat import run_interactive_session, ChatSession
from .config import configure_logging, load_config
from .errors import StartupError
from .topics import create_catalog


console = Console()
logger = logging.getLogger(__name__)


def print_banner():
    """Print the CyberAware banner."""
    banner = r"""
    ╔═══════════════════════════════════════════════════════════════╗
    ║                                                               ║
    ║     ██████╗██╗   ██╗██████╗ ███████╗██████╗                   ║
    ║    ██╔════╝╚██╗ ██╔╝██╔══██╗██╔════╝██╔══██╗                  ║
    ║    ██║      ╚████╔╝ ██████╔╝█████╗  ██████╔╝                  ║
    ║    ██║       ╚██╔╝  ██╔══██╗██╔══╝  ██╔══██╗                  ║
    ║    ╚██████╗   ██║   ██████╔╝███████╗██║  ██║                  ║
    ║     ╚═════╝   ╚═╝   ╚═════╝ ╚══════╝╚═╝  ╚═╝                  ║
    ║                                                               ║
    ║             Cybersecurity Awareness Chat Bot                  ║
    ╚═══════════════════════════════════════════════════════════════╝
    """
    console.print(banner, style="bold blue")


def print_critical_error(error: Exception):
    """Report an error that ends the application."""
    console.print("\nA critical error occurred:", style="bold red")
    console.print(str(error), style="red", markup=False)
    console.print("The application will now close.", style="red")


@click.group()
@click.version_option(version=__version__)
def cli():
    """CyberAware - Cybersecurity Awareness Chat Bot."""
    pass


@cli.command()
@click.option(
    '--name', '-n',
    default=None,
    help='Placeholder name used when the user does not give one'
)
@click.option(
    '--seed',
    type=int,
    default=None,
    help='Seed for the fallback response choice'
)
@click.option(
    '--no-banner',
    is_flag=True,
    help='Do not print the banner'
)
@click.option(
    '--log-file',
    default=None,
    help='Also write log records to this file'
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Enable debug logging'
)
def chat(
    name: Optional[str],
    seed: Optional[int],
    no_banner: bool,
    log_file: Optional[str],
    verbose: bool
):
    """
    Start an interactive chat session.

    Example:
        cyberaware chat --seed 42
    """
    try:
        config = load_config(
            default_name=name,
            seed=seed,
            log_file=log_file,
            log_level="DEBUG" if verbose else None,
            show_banner=False if no_banner else None
        )
        configure_logging(config.log_level, config.log_file)

        if config.show_banner:
            print_banner()

        run_interactive_session(config=config, console=console)

    except StartupError as e:
        logger.critical("Startup failed: %s %s", e.message, e.details or "")
        print_critical_error(e)
        sys.exit(1)
    except Exception as e:
        logger.critical("Unexpected failure: %s", e)
        print_critical_error(e)
        sys.exit(1)

    sys.exit(0)


@cli.command()
def topics():
    """List the available topics."""
    catalog = create_catalog()

    table = Table(title="Available Topics")
    table.add_column("Keyword", style="cyan")
    table.add_column("Title", style="white")
    table.add_column("Tips", style="yellow")

    for topic in catalog.topics:
        table.add_row(
            topic.key,
            topic.title,
            str(len(topic.tips) + len(topic.extended_tips))
        )

    console.print(table)


@cli.command()
def menu():
    """Show the numbered question menu."""
    console.print(ChatSession().menu_text())


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
