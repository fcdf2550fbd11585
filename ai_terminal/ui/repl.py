"""Interactive terminal: reads command lines and prints their history entries."""

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.status import Status

from ai_terminal.interpreter import CommandInterpreter
from ai_terminal.models.session import HistoryEntry, ShellSession
from ai_terminal.ui.editor import run_editor
from ai_terminal.ui.renderer import WELCOME_MESSAGE, print_entry

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "logout"}


class TerminalApp:
    """One interactive shell session bound to a console."""

    def __init__(
        self,
        interpreter: CommandInterpreter,
        session: ShellSession,
        user: str = "user",
        host: str = "react-os",
        console: Console | None = None,
    ) -> None:
        self.interpreter = interpreter
        self.session = session
        self.user = user
        self.host = host
        self.console = console or Console()
        self._status: Status | None = None
        self.prompt_session: PromptSession = PromptSession(
            history=InMemoryHistory(),
            completer=WordCompleter(interpreter.commands + sorted(EXIT_COMMANDS), sentence=True),
        )

    def _prompt(self) -> HTML:
        return HTML(
            f"<ansigreen>{self.user}@{self.host}:</ansigreen>"
            f"<ansiblue>{self.session.prompt_path}</ansiblue>$ "
        )

    def _on_update(self, entry: HistoryEntry) -> None:
        if entry.pending:
            self._status = self.console.status(f"[yellow]{entry.output}[/yellow]")
            self._status.start()
        elif self._status is not None:
            self._status.stop()
            self._status = None

    async def run_command(self, line: str) -> HistoryEntry:
        try:
            entry = await self.interpreter.submit(self.session, line, on_update=self._on_update)
        finally:
            if self._status is not None:
                self._status.stop()
                self._status = None

        if line.split()[:1] == ["clear"]:
            self.console.clear()
            return entry
        print_entry(self.console, entry)

        if self.session.editor is not None:
            await self._edit()
        return entry

    async def _edit(self) -> None:
        editor = self.session.editor
        outcome = await run_editor(editor.file_path, editor.buffer)
        if outcome.saved:
            result = await self.interpreter.save_editor(self.session, outcome.content)
            if result.error:
                self.console.print(f"[red]{result.error}[/red]", highlight=False)
        else:
            await self.interpreter.discard_editor(self.session)

    async def run(self) -> None:
        self.console.print(WELCOME_MESSAGE, highlight=False)
        while True:
            try:
                line = await self.prompt_session.prompt_async(self._prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            if line.strip() in EXIT_COMMANDS:
                break
            await self.run_command(line)
        logger.info("Terminal session ended")
