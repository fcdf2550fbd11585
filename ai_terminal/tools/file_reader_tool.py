import logging
from dataclasses import asdict
from typing_extensions import override

from ai_terminal.models.session import ShellSession

from .base import CommandSpec, InvalidUsage, ToolCallArguments, ToolExecResult
from .base_file_tool import BaseFileTool
from .utils.constants import DEFAULT_LINE_COUNT
from .utils.file_utils import take_lines
from .utils.formatting_utils import format_search_results
from .utils.search_utils import search_content

logger = logging.getLogger(__name__)


class FileReaderTool(BaseFileTool):
    """Read-only commands over file content: `cat`, `head`, `tail` and `grep`."""

    @override
    def get_name(self) -> str:
        return "file_reader"

    @override
    def get_description(self) -> str:
        return "Print whole files, their first or last lines, or the lines matching a pattern."

    @override
    def get_commands(self) -> list[CommandSpec]:
        return [
            CommandSpec("cat", "cat [file]", "Display file content"),
            CommandSpec("head", "head [-n N] [file]", "Display the first lines of a file"),
            CommandSpec("tail", "tail [-n N] [file]", "Display the last lines of a file"),
            CommandSpec("grep", "grep [pattern] [file]", "Search a file for matching lines"),
        ]

    @override
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        args = self._get_args(arguments)
        match command:
            case "cat":
                path = self._require_operand(command, args)
                return ToolExecResult(output=self.read_file(command, session, path))
            case "head" | "tail":
                return self._head_tail_handler(command, session, args)
            case "grep":
                return self._grep_handler(session, args)
            case _:
                return ToolExecResult(error=f"command not found: {command}", error_code=-1)

    def _parse_line_count(self, command: str, args: list[str]) -> tuple[int, list[str]]:
        """Split `-n N` / `-N` off the arguments."""
        count = DEFAULT_LINE_COUNT
        rest: list[str] = []
        index = 0
        while index < len(args):
            arg = args[index]
            if arg == "-n":
                if index + 1 >= len(args):
                    raise InvalidUsage(f"{command}: option requires an argument -- 'n'")
                value = args[index + 1]
                index += 2
            elif arg.startswith("-n") and len(arg) > 2:
                value = arg[2:]
                index += 1
            elif arg.startswith("-") and arg[1:].isdecimal():
                value = arg[1:]
                index += 1
            else:
                rest.append(arg)
                index += 1
                continue

            if not value.isdecimal():
                raise InvalidUsage(f"{command}: invalid number of lines: '{value}'")
            count = int(value)
        return count, rest

    def _head_tail_handler(self, command: str, session: ShellSession, args: list[str]) -> ToolExecResult:
        count, rest = self._parse_line_count(command, args)
        path = self._require_operand(command, rest)
        content = self.read_file(command, session, path)
        return ToolExecResult(output=take_lines(content, count, from_end=command == "tail"))

    def _grep_handler(self, session: ShellSession, args: list[str]) -> ToolExecResult:
        if len(args) < 2:
            raise InvalidUsage("usage: grep PATTERN FILE")
        pattern, path = args[0], args[1]
        content = self.read_file("grep", session, path)

        results = search_content(content, pattern)
        logger.debug(f"grep '{pattern}' in {path}: {len(results)} matching lines")
        return ToolExecResult(
            output=format_search_results(results),
            data=[asdict(result) for result in results],
        )
