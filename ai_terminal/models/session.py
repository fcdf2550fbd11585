from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field

from ai_terminal.models.editor import EditorState
from ai_terminal.models.filesystem import DirectoryNode, default_filesystem

HOME_SEGMENTS = ["home", "user"]


def format_path(segments: list[str]) -> str:
    return "/" + "/".join(segments)


def display_path(segments: list[str], home: list[str] = HOME_SEGMENTS) -> str:
    """The path as shown in the prompt, with the home prefix folded to `~`."""
    if segments[: len(home)] == home:
        rest = segments[len(home):]
        return "~" + ("/" + "/".join(rest) if rest else "")
    return format_path(segments)


class HistoryEntry(BaseModel):
    """One submitted command line and what it printed."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    command: str
    path: str
    output: str = ""
    error: str | None = None
    error_code: int | None = 0
    data: Any = None
    pending: bool = False

    @property
    def text(self) -> str:
        return self.error if self.error is not None else self.output


class ShellSession(BaseModel):
    """Stores the filesystem tree and shell state for a single session."""

    tree: DirectoryNode = Field(default_factory=default_filesystem)
    cwd: list[str] = Field(default_factory=lambda: list(HOME_SEGMENTS))
    home: list[str] = Field(default_factory=lambda: list(HOME_SEGMENTS))
    history: list[HistoryEntry] = Field(default_factory=list)
    editor: EditorState | None = None
    busy: bool = False

    @property
    def prompt_path(self) -> str:
        return display_path(self.cwd, self.home)

    def find_entry(self, entry_id: str) -> HistoryEntry | None:
        for entry in self.history:
            if entry.id == entry_id:
                return entry
        return None
