# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Base class for command tools that work on the session's filesystem."""

import logging
from abc import ABC, abstractmethod
from typing_extensions import override

from ai_terminal.models.filesystem import DirectoryNode, FileNode, put_node
from ai_terminal.models.session import ShellSession
from ai_terminal.tools.base import (
    IsADirectory,
    MissingOperand,
    PathNotFound,
    Tool,
    ToolCallArguments,
    ToolError,
    ToolExecResult,
)
from ai_terminal.utils.path_utils import PathResolution, resolve_path

logger = logging.getLogger(__name__)


class BaseFileTool(Tool, ABC):
    """Base class for command tools with common session and path handling."""

    def _validate_session(self, arguments: ToolCallArguments) -> ShellSession:
        """
        Validate and extract the ShellSession from arguments.

        Raises:
            ToolError: If the session is missing or of the wrong type
        """
        session = arguments.get("_session")
        if not isinstance(session, ShellSession):
            logger.error("ShellSession not found in arguments")
            raise ToolError("ShellSession not found in arguments. This is an internal error.")
        return session

    def _get_args(self, arguments: ToolCallArguments) -> list[str]:
        args = arguments.get("args") or []
        return [str(arg) for arg in args]

    def _resolve(self, session: ShellSession, path_str: str) -> PathResolution:
        resolution = resolve_path(session.tree, session.cwd, path_str)
        logger.debug(f"Resolved '{path_str}' to {resolution.path} (exists={resolution.exists})")
        return resolution

    def _require_operand(self, command: str, args: list[str], message: str = "missing file operand") -> str:
        if not args:
            raise MissingOperand(f"{command}: {message}")
        return args[0]

    def _resolve_file(self, command: str, session: ShellSession, path_str: str) -> tuple[PathResolution, FileNode]:
        """
        Resolve a path that must name an existing file.

        Raises:
            IsADirectory: If the path is a directory
            PathNotFound: If nothing exists at the path
        """
        resolution = self._resolve(session, path_str)
        if resolution.is_dir:
            raise IsADirectory(f"{command}: {path_str}: Is a directory")
        if not isinstance(resolution.node, FileNode):
            raise PathNotFound(f"{command}: {path_str}: No such file or directory")
        return resolution, resolution.node

    def read_file(self, command: str, session: ShellSession, path_str: str) -> str:
        _, node = self._resolve_file(command, session, path_str)
        return node.content

    def write_file(self, tree: DirectoryNode, resolution: PathResolution, content: str) -> DirectoryNode:
        """
        Return a new tree with `content` stored as a file at the resolved path.

        The resolution must have a valid parent; an existing file is
        overwritten, keeping its place in the listing order.
        """
        logger.debug(f"Writing file: {resolution.path}, content length: {len(content)}")
        return put_node(tree, resolution.segments, FileNode(name=resolution.name, content=content))

    @abstractmethod
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        """
        Execute the specific command for this tool.

        Args:
            command: The command name (first token of the line)
            arguments: The tool call arguments
            session: The session the command runs in

        Returns:
            The result of the command
        """
        pass

    @override
    async def _execute_command(self, command: str, arguments: ToolCallArguments) -> ToolExecResult:
        session = self._validate_session(arguments)
        return await self._execute_operation(command, arguments, session)
