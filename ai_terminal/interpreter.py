"""
Command interpreter: turns submitted lines into history entries.

The interpreter owns every change to a ShellSession. Tools only return
results; the interpreter installs the tree, working directory and editor
state those results carry, in one step, after the handler has finished.
"""

import logging
from typing import Callable, Iterable

from ai_terminal.models.filesystem import is_directory
from ai_terminal.models.session import HistoryEntry, ShellSession, format_path
from ai_terminal.tools.base import CommandSpec, Tool, ToolExecResult
from ai_terminal.tools.edit_tool import TextEditorTool

logger = logging.getLogger(__name__)

EntryListener = Callable[[HistoryEntry], None]

BUSY_MESSAGE = "shell: another command is still running"


class CommandInterpreter:
    """Dispatches command lines to the tools that handle them."""

    def __init__(self, tools: Iterable[Tool], editor_tool: TextEditorTool | None = None) -> None:
        self._tools: list[Tool] = list(tools)
        self._registry: dict[str, Tool] = {}
        for tool in self._tools:
            for name in tool.get_command_names():
                if name in self._registry:
                    raise ValueError(f"command '{name}' is registered by both {self._registry[name].get_name()} and {tool.get_name()}")
                self._registry[name] = tool
        self._editor_tool = editor_tool or next(
            (tool for tool in self._tools if isinstance(tool, TextEditorTool)), TextEditorTool()
        )

    @property
    def commands(self) -> list[str]:
        return list(self._registry)

    def get_command_specs(self) -> list[CommandSpec]:
        specs: list[CommandSpec] = []
        for tool in self._tools:
            specs.extend(tool.get_commands())
        return specs

    async def submit(
        self, session: ShellSession, line: str, on_update: EntryListener | None = None
    ) -> HistoryEntry:
        """
        Run one command line in `session`.

        The history entry is appended before the handler runs and updated in
        place afterwards. Slow commands show a placeholder first; `on_update`
        is called whenever the entry changes.
        """
        entry = HistoryEntry(command=line, path=session.prompt_path)
        if session.busy:
            logger.warning(f"Refusing '{line}' while another command is running")
            entry.error, entry.error_code = BUSY_MESSAGE, -1
            return entry

        session.history.append(entry)
        tokens = line.split()
        if not tokens:
            return entry

        command, args = tokens[0], tokens[1:]
        tool = self._registry.get(command)
        if tool is None:
            logger.debug(f"Unknown command: {command}")
            entry.error, entry.error_code = f"command not found: {command}", 127
            return entry

        def show_placeholder(placeholder: str) -> None:
            entry.output, entry.pending = placeholder, True
            if on_update is not None:
                on_update(entry)

        session.busy = True
        try:
            result = await tool.execute(
                {
                    "command": command,
                    "args": args,
                    "line": line,
                    "_session": session,
                    "_command_specs": self.get_command_specs(),
                    "_on_pending": show_placeholder,
                }
            )
        finally:
            session.busy = False

        return self._complete(session, entry.id, result, on_update) or entry.model_copy(
            update=self._result_fields(result)
        )

    async def save_editor(self, session: ShellSession, content: str) -> ToolExecResult:
        """Commit the open editor's buffer, then close the editor."""
        result = await self._editor_tool.execute({"command": "save", "content": content, "_session": session})
        self._install(session, result)
        session.editor = None
        return result

    async def discard_editor(self, session: ShellSession) -> ToolExecResult:
        result = await self._editor_tool.execute({"command": "discard", "_session": session})
        session.editor = None
        return result

    def _result_fields(self, result: ToolExecResult) -> dict:
        return {
            "output": result.output or "",
            "error": result.error,
            "error_code": result.error_code,
            "data": result.data,
            "pending": False,
        }

    def _complete(
        self, session: ShellSession, entry_id: str, result: ToolExecResult, on_update: EntryListener | None
    ) -> HistoryEntry | None:
        """
        Install the result's state and fill in the history entry with `entry_id`.

        Returns None when the entry is gone, e.g. after `clear` ran while an
        oracle call was in flight; the late result is then dropped.
        """
        notice = self._install(session, result)
        if result.clear_history:
            session.history.clear()
            return None

        entry = session.find_entry(entry_id)
        if entry is None:
            logger.info(f"History entry {entry_id} no longer exists, discarding result")
            return None

        for key, value in self._result_fields(result).items():
            setattr(entry, key, value)
        if notice:
            entry.output = f"{entry.output}\n{notice}" if entry.output else notice
        if on_update is not None:
            on_update(entry)
        return entry

    def _install(self, session: ShellSession, result: ToolExecResult) -> str | None:
        """
        Swap in the tree, cwd and editor a successful result carries.

        Returns a notice when the working directory had to be reset because
        the new tree no longer contains it.
        """
        if result.error is not None:
            return None
        if result.tree is not None:
            session.tree = result.tree
        if result.cwd is not None:
            session.cwd = list(result.cwd)
        if result.editor is not None:
            session.editor = result.editor

        if is_directory(session.tree, session.cwd):
            return None
        stale = format_path(session.cwd)
        session.cwd = list(session.home) if is_directory(session.tree, session.home) else []
        logger.warning(f"Working directory {stale} was removed, moved to {format_path(session.cwd)}")
        return f"shell: working directory {stale} no longer exists, returning to {format_path(session.cwd)}"
