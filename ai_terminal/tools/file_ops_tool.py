# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

import logging
from typing_extensions import override

from ai_terminal.models.filesystem import (
    DirectoryNode,
    FileNode,
    is_within,
    put_node,
    remove_node,
)
from ai_terminal.models.session import ShellSession
from ai_terminal.utils.path_utils import resolve_path

from .base import (
    AlreadyExists,
    CommandSpec,
    InvalidUsage,
    IsADirectory,
    MissingOperand,
    NotADirectory,
    PathNotFound,
    ToolCallArguments,
    ToolExecResult,
)
from .base_file_tool import BaseFileTool
from .utils.constants import RECURSIVE_FLAGS, REDIRECT_OPERATOR
from .utils.file_utils import strip_quotes

logger = logging.getLogger(__name__)


class FileOpsTool(BaseFileTool):
    """
    Commands that change the tree: `mkdir`, `touch`, `echo`, `rm`, `mv` and `cp`.

    Handlers never modify the session. They return a new tree snapshot in the
    result and the interpreter installs it; a failed command returns no tree.
    """

    @override
    def get_name(self) -> str:
        return "file_ops"

    @override
    def get_description(self) -> str:
        return "Create, write, remove, move and copy files and directories."

    @override
    def get_commands(self) -> list[CommandSpec]:
        return [
            CommandSpec("mkdir", "mkdir [dir]", "Create a directory"),
            CommandSpec("touch", "touch [file]", "Create an empty file"),
            CommandSpec("echo", "echo [text] > [file]", "Write text to a file"),
            CommandSpec("rm", "rm [-r] [path]", "Remove a file or directory"),
            CommandSpec("mv", "mv [src] [dest]", "Move or rename a file or directory"),
            CommandSpec("cp", "cp [src] [dest]", "Copy a file or directory"),
        ]

    @override
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        args = self._get_args(arguments)
        match command:
            case "mkdir" | "touch":
                return self._create_handler(command, session, args)
            case "echo":
                return self._echo_handler(session, str(arguments.get("line", "")))
            case "rm":
                return self._rm_handler(session, args)
            case "mv" | "cp":
                return self._transfer_handler(command, session, args)
            case _:
                return ToolExecResult(error=f"command not found: {command}", error_code=-1)

    def _create_handler(self, command: str, session: ShellSession, args: list[str]) -> ToolExecResult:
        target = self._require_operand(command, args, "missing operand")
        kind = "directory" if command == "mkdir" else "file"

        resolution = self._resolve(session, target)
        if resolution.exists:
            raise AlreadyExists(f"{command}: cannot create {kind} '{target}': File exists")
        if resolution.parent is None:
            raise PathNotFound(f"{command}: cannot create {kind} '{target}': No such file or directory")

        node = DirectoryNode(name=resolution.name) if command == "mkdir" else FileNode(name=resolution.name)
        logger.debug(f"{command}: creating {kind} at {resolution.path}")
        return ToolExecResult(output="", tree=put_node(session.tree, resolution.segments, node))

    def _echo_handler(self, session: ShellSession, line: str) -> ToolExecResult:
        body = line.strip()
        body = body[len("echo"):] if body.startswith("echo") else body

        redirect = body.rfind(REDIRECT_OPERATOR)
        if redirect == -1:
            return ToolExecResult(output=strip_quotes(body.strip()))

        text = strip_quotes(body[:redirect].strip())
        target = body[redirect + 1:].strip()
        if not target:
            raise MissingOperand("echo: missing output file")

        resolution = self._resolve(session, target)
        if resolution.is_dir:
            raise IsADirectory(f"echo: {target}: Is a directory")
        if resolution.parent is None:
            raise PathNotFound(f"echo: cannot write to '{target}': Invalid path")

        return ToolExecResult(output="", tree=self.write_file(session.tree, resolution, text))

    def _rm_handler(self, session: ShellSession, args: list[str]) -> ToolExecResult:
        recursive = any(arg in RECURSIVE_FLAGS for arg in args)
        operands = [arg for arg in args if arg not in RECURSIVE_FLAGS]
        if not operands:
            raise MissingOperand("rm: missing operand")

        tree = session.tree
        for target in operands:
            resolution = resolve_path(tree, session.cwd, target)
            if resolution.node is None:
                raise PathNotFound(f"rm: cannot remove '{target}': No such file or directory")
            if not resolution.segments:
                raise InvalidUsage("rm: it is dangerous to operate recursively on '/'")
            if isinstance(resolution.node, DirectoryNode) and not resolution.node.is_empty() and not recursive:
                raise IsADirectory(f"rm: cannot remove '{target}': Is a directory")

            logger.debug(f"rm: removing {resolution.path}")
            tree = remove_node(tree, resolution.segments)
        return ToolExecResult(output="", tree=tree)

    def _transfer_handler(self, command: str, session: ShellSession, args: list[str]) -> ToolExecResult:
        operands = [arg for arg in args if arg not in RECURSIVE_FLAGS]
        if not operands:
            raise MissingOperand(f"{command}: missing file operand")
        if len(operands) < 2:
            raise MissingOperand(f"{command}: missing destination file operand after '{operands[0]}'")
        if len(operands) > 2:
            raise InvalidUsage(f"{command}: extra operand '{operands[2]}'")
        source_str, dest_str = operands

        source = self._resolve(session, source_str)
        if source.node is None:
            raise PathNotFound(f"{command}: cannot stat '{source_str}': No such file or directory")
        if not source.segments:
            raise InvalidUsage(f"{command}: cannot {'move' if command == 'mv' else 'copy'} '/'")

        dest = self._resolve(session, dest_str)
        if isinstance(dest.node, DirectoryNode):
            dest_segments = dest.segments + (source.name,)
            existing = dest.node.children.get(source.name)
        elif dest.parent is not None:
            dest_segments = dest.segments
            existing = dest.node
        else:
            verb = "move" if command == "mv" else "copy"
            raise PathNotFound(f"{command}: cannot {verb} '{source_str}' to '{dest_str}': No such file or directory")

        if dest_segments == source.segments:
            raise InvalidUsage(f"{command}: '{source_str}' and '{dest_str}' are the same file")
        if isinstance(source.node, DirectoryNode) and is_within(dest_segments, source.segments):
            raise InvalidUsage(
                f"{command}: cannot {'move' if command == 'mv' else 'copy'} '{source_str}' "
                f"to a subdirectory of itself, '{dest_str}'"
            )
        if isinstance(existing, DirectoryNode):
            raise IsADirectory(f"{command}: cannot overwrite directory '{dest_str}' with '{source_str}'")
        if existing is not None and isinstance(source.node, DirectoryNode):
            raise NotADirectory(f"{command}: cannot overwrite non-directory '{dest_str}' with directory '{source_str}'")

        tree = session.tree
        if command == "mv":
            tree = remove_node(tree, source.segments)
        logger.debug(f"{command}: {source.path} -> /{'/'.join(dest_segments)}")
        node = source.node if command == "mv" else source.node.model_copy(deep=True)
        return ToolExecResult(output="", tree=put_node(tree, dest_segments, node))

