import logging
from typing_extensions import override

from ai_terminal.models.filesystem import DirectoryNode
from ai_terminal.models.session import ShellSession, format_path

from .base import CommandSpec, PathNotFound, ToolCallArguments, ToolExecResult
from .base_file_tool import BaseFileTool
from .utils.formatting_utils import format_listing, listing_entries

logger = logging.getLogger(__name__)


class FileSystemTool(BaseFileTool):
    """
    Tool for navigating the filesystem: `ls`, `cd` and `pwd`.
    `cd` is the only command in the shell that changes the working directory.
    """

    @override
    def get_name(self) -> str:
        return "file_system"

    @override
    def get_description(self) -> str:
        return "Navigation commands: list directories, change and print the working directory."

    @override
    def get_commands(self) -> list[CommandSpec]:
        return [
            CommandSpec("ls", "ls [path]", "List directory contents"),
            CommandSpec("cd", "cd [dir]", "Change directory"),
            CommandSpec("pwd", "pwd", "Print the working directory"),
        ]

    @override
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        args = self._get_args(arguments)
        match command:
            case "pwd":
                return self._pwd_handler(session)
            case "cd":
                return self._cd_handler(session, args)
            case "ls":
                return self._ls_handler(session, args)
            case _:
                return ToolExecResult(error=f"command not found: {command}", error_code=-1)

    def _pwd_handler(self, session: ShellSession) -> ToolExecResult:
        return ToolExecResult(output=format_path(session.cwd))

    def _cd_handler(self, session: ShellSession, args: list[str]) -> ToolExecResult:
        path = args[0] if args else format_path(session.home)
        resolution = self._resolve(session, path)
        if not isinstance(resolution.node, DirectoryNode):
            raise PathNotFound(f"cd: {path}: No such file or directory")

        logger.debug(f"CWD is now {resolution.path}")
        return ToolExecResult(output="", cwd=list(resolution.segments))

    def _ls_handler(self, session: ShellSession, args: list[str]) -> ToolExecResult:
        path = args[0] if args else "."
        resolution = self._resolve(session, path)
        if resolution.node is None:
            raise PathNotFound(f"ls: cannot access '{path}': No such file or directory")

        entries = listing_entries(resolution.node)
        return ToolExecResult(output=format_listing(entries), data=entries)
