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

from ai_terminal.models.session import ShellSession
from ai_terminal.providers.base import Oracle

from .base import CommandSpec, MissingOperand, PathNotFound, ToolCallArguments, ToolExecResult
from .base_file_tool import BaseFileTool
from .utils.constants import ASK_PLACEHOLDER, EXECUTE_PLACEHOLDER, MANUAL_PLACEHOLDER

logger = logging.getLogger(__name__)


class OracleTool(BaseFileTool):
    """
    Commands answered by the oracle instead of the shell: `python`, `askai` and `man`.
    """

    def __init__(self, oracle: Oracle) -> None:
        self._oracle = oracle

    @override
    def get_name(self) -> str:
        return "oracle"

    @override
    def get_description(self) -> str:
        return """Hand text to the AI oracle and print what it returns.
* `python` sends a file's content and shows the simulated program output
* `askai` sends a free-form question
* `man` asks for a manual page
* Nothing is really executed; failures to reach the AI are printed, not raised
"""

    @override
    def get_commands(self) -> list[CommandSpec]:
        return [
            CommandSpec("python", "python [file]", "'Execute' a Python file using AI"),
            CommandSpec("askai", "askai [question]", "Ask the AI a question"),
            CommandSpec("man", "man [command]", "Show the manual page of a command"),
        ]

    @override
    def get_placeholder(self, command: str) -> str | None:
        return {
            "python": EXECUTE_PLACEHOLDER,
            "askai": ASK_PLACEHOLDER,
            "man": MANUAL_PLACEHOLDER,
        }.get(command)

    @override
    async def _execute_operation(
        self, command: str, arguments: ToolCallArguments, session: ShellSession
    ) -> ToolExecResult:
        args = self._get_args(arguments)
        match command:
            case "python":
                path = self._require_operand(command, args)
                resolution = self._resolve(session, path)
                if not resolution.is_file:
                    raise PathNotFound(f"python: can't open file '{path}': [Errno 2] No such file or directory")
                logger.info(f"Executing {resolution.path} with {self._oracle.model_name}")
                self._report_pending(command, arguments)
                return ToolExecResult(output=await self._oracle.execute(resolution.node.content))
            case "askai":
                question = " ".join(args)
                if not question:
                    raise MissingOperand("askai: please provide a question.")
                logger.info(f"Asking {self._oracle.model_name}: {question}")
                self._report_pending(command, arguments)
                return ToolExecResult(output=await self._oracle.ask(question))
            case "man":
                name = self._require_operand(command, args, "what manual page do you want?")
                logger.info(f"Requesting manual page for {name}")
                self._report_pending(command, arguments)
                return ToolExecResult(output=await self._oracle.manual(name))
            case _:
                return ToolExecResult(error=f"command not found: {command}", error_code=-1)
