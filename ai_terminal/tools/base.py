# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Base classes shared by every command tool."""

import errno
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ai_terminal.models.editor import EditorState
from ai_terminal.models.filesystem import DirectoryNode

logger = logging.getLogger(__name__)

ToolCallArguments = dict[str, Any]


class ToolError(Exception):
    """Base class for errors a command handler reports to the user."""

    error_code: int = -1

    def __init__(self, message: str):
        super().__init__(message)
        self.message: str = message


class PathNotFound(ToolError):
    error_code = errno.ENOENT


class NotADirectory(ToolError):
    error_code = errno.ENOTDIR


class IsADirectory(ToolError):
    error_code = errno.EISDIR


class AlreadyExists(ToolError):
    error_code = errno.EEXIST


class MissingOperand(ToolError):
    error_code = errno.EINVAL


class InvalidUsage(ToolError):
    error_code = errno.EINVAL


class OracleUnavailable(ToolError):
    error_code = errno.EHOSTUNREACH


@dataclass
class CommandSpec:
    """A single command a tool answers to, as listed by `help`."""

    name: str
    synopsis: str
    description: str


@dataclass
class ToolExecResult:
    """Result of a command handler.

    Besides the text shown to the user, a result may carry state for the
    interpreter to install: a new tree snapshot, a new working directory,
    an editor session to open, or a request to clear the history.
    """

    output: str | None = None
    error: str | None = None
    error_code: int | None = 0
    data: Any = None
    tree: DirectoryNode | None = None
    cwd: list[str] | None = None
    editor: EditorState | None = None
    clear_history: bool = False


class Tool(ABC):
    """A group of related shell commands sharing one handler class."""

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_commands(self) -> list[CommandSpec]:
        """Commands dispatched to this tool, in the order `help` lists them."""
        pass

    def get_command_names(self) -> list[str]:
        return [spec.name for spec in self.get_commands()]

    def get_placeholder(self, command: str) -> str | None:
        """Text shown while a slow command is still running, if any."""
        return None

    def _report_pending(self, command: str, arguments: ToolCallArguments) -> None:
        """Show the placeholder through the caller's `_on_pending` hook, once the arguments are valid."""
        placeholder = self.get_placeholder(command)
        on_pending = arguments.get("_on_pending")
        if placeholder is not None and on_pending is not None:
            on_pending(placeholder)

    @abstractmethod
    async def _execute_command(self, command: str, arguments: ToolCallArguments) -> ToolExecResult:
        pass

    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        """
        Execute a command with common error handling.

        Errors raised by handlers never leave this method; they are turned
        into an error result carrying the message shown to the user.
        """
        command = str(arguments.get("command", ""))
        try:
            return await self._execute_command(command, arguments)
        except ToolError as e:
            logger.debug(f"{self.get_name()}: {command} failed: {e}")
            return ToolExecResult(error=e.message, error_code=e.error_code)
        except Exception as e:
            logger.error(f"Unexpected error in {self.get_name()} running {command}: {e}", exc_info=True)
            return ToolExecResult(error=f"{command}: unexpected error: {e}", error_code=-1)
