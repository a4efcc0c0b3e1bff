"""ANSI colors for the CLI summary and error lines."""

import os
import sys


class ConsoleColors:
    """Wraps console text in ANSI codes when stdout is a color-capable terminal.

    ``--no-color`` and the ``NO_COLOR`` environment variable turn coloring off
    for the rest of the process via :meth:`configure`.
    """

    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    # Windows consoles only understand ANSI codes under a TERM-aware shell
    _enabled = sys.stdout.isatty() and (os.name != "nt" or bool(os.environ.get("TERM")))

    @classmethod
    def configure(cls, no_color: bool = False) -> None:
        if no_color or os.environ.get("NO_COLOR"):
            cls._enabled = False

    @classmethod
    def _paint(cls, code: str, text: str) -> str:
        return f"{code}{text}{cls.RESET}" if cls._enabled else text

    @classmethod
    def success(cls, text: str) -> str:
        return cls._paint(cls.GREEN, text)

    @classmethod
    def error(cls, text: str) -> str:
        return cls._paint(cls.RED, text)

    @classmethod
    def warning(cls, text: str) -> str:
        return cls._paint(cls.YELLOW, text)

    @classmethod
    def bold(cls, text: str) -> str:
        return cls._paint(cls.BOLD, text)

    @classmethod
    def status(cls, success: bool, text: str) -> str:
        """Green for a successful input file, red for a failed one."""
        return cls.success(text) if success else cls.error(text)
