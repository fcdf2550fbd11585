# Copyright (c) 2023 Anthropic
# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates.
# SPDX-License-Identifier: MIT
#
# This file has been modified by ByteDance Ltd. and/or its affiliates. on 13 June 2025
#
# Original file was released under MIT License, with the full license text
# available at https://github.com/anthropics/anthropic-quickstarts/blob/main/LICENSE
#
# This modified file is released under the same license.

import logging
from typing_extensions import override

from ai_terminal.models.editor import EditorState
from ai_terminal.models.filesystem import DirectoryNode, FileNode, put_node
from ai_terminal.models.session import ShellSession

from .base import CommandSpec, InvalidUsage, IsADirectory, PathNotFound, ToolCallArguments, ToolExecResult
from .base_file_tool import BaseFileTool

# Настройка логирования
logger = logging.getLogger(__name__)


class TextEditorTool(BaseFileTool):
    """
    The `edit` command and the save/discard hand-off from the editor overlay.

    `edit` creates the file if needed and returns an EditorState for the
    interpreter to open. The overlay later hands the whole buffer back through
    `save`, or nothing through `discard`.
    """

    @override
    def get_name(self) -> str:
        return "text_editor"

    @override
    def get_description(self) -> str:
        return """Open a file in the full-screen editor.
* The file is created empty if it does not exist
* Save & Exit replaces the file content with the buffer; Discard & Exit leaves it untouched
* Tab inserts two spaces at the cursor
"""

    @override
    def get_commands(self) -> list[CommandSpec]:
        return [CommandSpec("edit", "edit [file]", "Open a file in the editor")]

    @override
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        match command:
            case "edit":
                return self._edit_handler(session, self._get_args(arguments))
            case "save":
                return self._save_handler(session, arguments)
            case "discard":
                return self._discard_handler(session)
            case _:
                logger.error(f"Unrecognized command: {command}")
                return ToolExecResult(error=f"command not found: {command}", error_code=-1)

    def _edit_handler(self, session: ShellSession, args: list[str]) -> ToolExecResult:
        target = self._require_operand("edit", args, "missing operand")
        resolution = self._resolve(session, target)

        if isinstance(resolution.node, DirectoryNode):
            raise IsADirectory(f"edit: {target}: Is a directory")
        if resolution.parent is None and resolution.node is None:
            raise PathNotFound(f"edit: cannot create file '{target}': No such file or directory")

        tree = None
        content = ""
        if isinstance(resolution.node, FileNode):
            content = resolution.node.content
        else:
            logger.debug(f"edit: creating empty file at {resolution.path}")
            tree = put_node(session.tree, resolution.segments, FileNode(name=resolution.name))

        editor = EditorState(file_path=resolution.path, buffer=content)
        return ToolExecResult(output="", tree=tree, editor=editor)

    def _save_handler(self, session: ShellSession, arguments: ToolCallArguments) -> ToolExecResult:
        """
        Commit the editor buffer into the file it was opened for.

        A file removed while it was being edited is recreated as long as its
        directory still exists. Otherwise the save fails and the tree is left
        as it is.
        """
        editor = session.editor
        if editor is None:
            raise InvalidUsage("edit: no file is open in the editor")

        content = arguments.get("content")
        if not isinstance(content, str):
            return ToolExecResult(error="Parameter `content` is required and must be a string for save", error_code=-1)

        path = editor.file_path
        resolution = self._resolve(session, path)
        if resolution.is_dir:
            raise IsADirectory(f"edit: cannot save '{path}': Is a directory")
        if resolution.parent is None:
            raise PathNotFound(f"edit: cannot save '{path}': No such file or directory")
        if not resolution.exists:
            logger.warning(f"{path} was removed while open in the editor, recreating it")

        return ToolExecResult(output="", tree=self.write_file(session.tree, resolution, content))

    def _discard_handler(self, session: ShellSession) -> ToolExecResult:
        if session.editor is None:
            raise InvalidUsage("edit: no file is open in the editor")
        logger.debug(f"Discarding edits to {session.editor.file_path}")
        return ToolExecResult(output="")
