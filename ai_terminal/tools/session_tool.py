import logging
from datetime import datetime
from typing_extensions import override

from ai_terminal.models.session import ShellSession

from .base import CommandSpec, ToolCallArguments, ToolExecResult
from .base_file_tool import BaseFileTool
from .utils.formatting_utils import format_help, format_history

logger = logging.getLogger(__name__)


class SessionTool(BaseFileTool):
    """Commands that never touch the tree: `help`, `clear`, `whoami`, `date`, `history`."""

    def __init__(self, user: str = "user") -> None:
        self._user = user

    @override
    def get_name(self) -> str:
        return "session"

    @override
    def get_description(self) -> str:
        return "Static and session-derived output."

    @override
    def get_commands(self) -> list[CommandSpec]:
        return [
            CommandSpec("history", "history", "Show previously entered commands"),
            CommandSpec("clear", "clear", "Clear the terminal screen"),
            CommandSpec("help", "help", "Display this help message"),
            CommandSpec("whoami", "whoami", "Display current user"),
            CommandSpec("date", "date", "Display current date"),
        ]

    @override
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        match command:
            case "help":
                specs = arguments.get("_command_specs") or self.get_commands()
                return ToolExecResult(output=format_help(specs), data=[spec.name for spec in specs])
            case "clear":
                return ToolExecResult(output="", clear_history=True)
            case "whoami":
                return ToolExecResult(output=self._user)
            case "date":
                return ToolExecResult(output=datetime.now().astimezone().strftime("%a %b %d %Y %H:%M:%S %Z"))
            case "history":
                # the entry for this `history` call is already in the log
                commands = [entry.command for entry in session.history if entry.command.strip()]
                return ToolExecResult(output=format_history(commands))
            case _:
                return ToolExecResult(error=f"command not found: {command}", error_code=-1)
