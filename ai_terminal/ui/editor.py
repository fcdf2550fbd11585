"""Full-screen editor overlay used by the `edit` command."""

import logging
from dataclasses import dataclass

from prompt_toolkit import Application
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea

logger = logging.getLogger(__name__)

SOFT_TAB = "  "

EDITOR_STYLE = Style.from_dict(
    {
        "frame.border": "#888888",
        "frame.label": "bold #ffffff",
        "toolbar": "bg:#222222 #aaaaaa",
        "toolbar.key": "bg:#222222 bold #44cc44",
    }
)


@dataclass
class EditorOutcome:
    saved: bool
    content: str


def insert_soft_tab(text: str, start: int, end: int | None = None) -> tuple[str, int]:
    """
    Insert two spaces at the cursor, replacing the selection [start, end).

    Returns:
        The new text and the cursor position after the inserted spaces.
    """
    end = start if end is None else end
    start, end = min(start, end), max(start, end)
    return text[:start] + SOFT_TAB + text[end:], start + len(SOFT_TAB)


def build_editor_application(file_path: str, content: str) -> Application:
    """
    Build the overlay for `file_path`.

    Ctrl-S saves and exits, Esc or Ctrl-Q discards and exits. The application
    result is an EditorOutcome.
    """
    text_area = TextArea(text=content, multiline=True, scrollbar=True, line_numbers=True)
    toolbar = Window(
        FormattedTextControl(
            [
                ("class:toolbar.key", " Ctrl-S "),
                ("class:toolbar", "Save & Exit   "),
                ("class:toolbar.key", " Esc / Ctrl-Q "),
                ("class:toolbar", "Discard & Exit "),
            ]
        ),
        height=1,
        style="class:toolbar",
    )

    kb = KeyBindings()

    @kb.add("tab")
    def _(event):
        buffer = event.current_buffer
        if buffer.selection_state is not None:
            start, end = buffer.document.selection_range()
        else:
            start = end = buffer.cursor_position
        text, cursor = insert_soft_tab(buffer.text, start, end)
        buffer.exit_selection()
        buffer.document = Document(text, cursor)

    @kb.add("c-s")
    def _(event):
        event.app.exit(result=EditorOutcome(saved=True, content=text_area.text))

    @kb.add("escape", eager=True)
    @kb.add("c-q")
    def _(event):
        event.app.exit(result=EditorOutcome(saved=False, content=content))

    layout = Layout(HSplit([Frame(text_area, title=f"Editing: {file_path}"), toolbar]), focused_element=text_area)
    return Application(layout=layout, key_bindings=kb, style=EDITOR_STYLE, full_screen=True, mouse_support=True)


async def run_editor(file_path: str, content: str) -> EditorOutcome:
    logger.debug(f"Opening editor for {file_path}")
    outcome = await build_editor_application(file_path, content).run_async()
    return outcome if outcome is not None else EditorOutcome(saved=False, content=content)
