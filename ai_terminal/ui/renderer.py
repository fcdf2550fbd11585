"""Turns history entries into rich renderables."""

from rich.console import Console
from rich.text import Text

from ai_terminal.models.filesystem import NodeType
from ai_terminal.models.session import HistoryEntry

LISTING_SEPARATOR = "    "

WELCOME_MESSAGE = (
    "Welcome to AI Terminal!\n"
    "This is a simulated Linux environment with AI capabilities.\n"
    "Type [green]'help'[/green] to see a list of available commands.\n"
)


def render_listing(entries: list[dict]) -> Text:
    text = Text()
    for index, entry in enumerate(entries):
        if index:
            text.append(LISTING_SEPARATOR)
        style = "bold blue" if entry["type"] == NodeType.DIRECTORY.value else None
        text.append(entry["name"], style=style)
    return text


def render_matches(matches: list[dict]) -> Text:
    text = Text()
    for index, match in enumerate(matches):
        if index:
            text.append("\n")
        line = Text(match["line"])
        for start, end in match["spans"]:
            line.stylize("bold black on yellow", start, end)
        text.append_text(line)
    return text


def render_entry(entry: HistoryEntry, command: str) -> Text | None:
    """The output part of an entry; None when there is nothing to print."""
    if entry.error is not None:
        return Text(entry.error, style="red")
    if not entry.output:
        return None
    if command == "ls" and isinstance(entry.data, list):
        return render_listing(entry.data)
    if command == "grep" and isinstance(entry.data, list):
        return render_matches(entry.data)
    if command == "help":
        return Text(entry.output, style="bright_white")
    return Text(entry.output)


def print_entry(console: Console, entry: HistoryEntry) -> None:
    tokens = entry.command.split()
    renderable = render_entry(entry, tokens[0] if tokens else "")
    if renderable is not None:
        console.print(renderable, highlight=False)
