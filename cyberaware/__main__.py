"""
Entry point for running CyberAware as a module.

Usage: python -m cyberaware [COMMAND] [OPTIONS]

Examples:
    python -m cyberaware chat
    python -m cyberaware chat --seed 42 --no-banner
    python -m cyberaware topics
"""

from .main import main

if __name__ == '__main__':
    main()
