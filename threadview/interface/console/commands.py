"""Console command parsing."""

from dataclasses import dataclass
from typing import Optional

from threadview.interface.error import CommandError

# name -> (argument hint, description)
COMMANDS: dict[str, tuple[str, str]] = {
    "page": ("N", "show root page N"),
    "root": ("", "back to root page 1"),
    "open": ("ID", "show comment ID with all of its replies"),
    "reply": ("ID", "reply to comment ID with the next 'new'"),
    "target": ("", "show which comment the next 'new' replies to"),
    "new": ("TEXT", "post a comment"),
    "delete": ("ID", "delete comment ID and its replies"),
    "search": ("[TEXT]", "filter root comments (no text clears the filter)"),
    "reload": ("", "reload the current view"),
    "help": ("", "show this help"),
    "quit": ("", "exit"),
}

NUMERIC_COMMANDS = {"page", "open", "reply", "delete"}

ALIASES = {"exit": "quit", "q": "quit", "?": "help"}


@dataclass(frozen=True)
class Command:
    """One parsed console line."""

    name: str
    argument: str = ""
    number: Optional[int] = None


def parse_command(line: str) -> Optional[Command]:
    """Parse a console line.

    Args:
        line: Raw input line

    Returns:
        Parsed command, or None for a blank line

    Raises:
        CommandError: If the command is unknown or its argument is invalid
    """
    stripped = line.strip()
    if not stripped:
        return None

    head, _, rest = stripped.partition(" ")
    name = ALIASES.get(head.lower(), head.lower())
    if name not in COMMANDS:
        raise CommandError(f"Unknown command: {head}")

    argument = rest.strip()
    if name not in NUMERIC_COMMANDS:
        return Command(name=name, argument=argument)

    try:
        number = int(argument)
    except ValueError:
        hint = COMMANDS[name][0]
        raise CommandError(f"Usage: {name} {hint}") from None
    return Command(name=name, argument=argument, number=number)


def help_text() -> str:
    """Usage summary for all commands."""
    width = max(len(f"{name} {hint}".strip()) for name, (hint, _) in COMMANDS.items())
    return "\n".join(
        f"  {f'{name} {hint}'.strip():<{width}}  {description}"
        for name, (hint, description) in COMMANDS.items()
    )
