#!/usr/bin/env python3
"""
Unit тесты для oracle_tool.py
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ai_terminal.models.session import ShellSession
from ai_terminal.providers.base import Oracle
from ai_terminal.tools.oracle_tool import OracleTool
from ai_terminal.tools.utils.constants import ASK_PLACEHOLDER, EXECUTE_PLACEHOLDER, MANUAL_PLACEHOLDER


class TestOracleTool:
    """Тесты для OracleTool"""

    @pytest.fixture
    def mock_oracle(self):
        """Создает mock оракула"""
        oracle = MagicMock(spec=Oracle)
        oracle.model_name = "test-model"
        oracle.execute = AsyncMock(return_value="The factorial of 5 is 120")
        oracle.ask = AsyncMock(return_value="42")
        oracle.manual = AsyncMock(return_value="LS(1)")
        return oracle

    @pytest.fixture
    def oracle_tool(self, mock_oracle):
        return OracleTool(mock_oracle)

    @pytest.fixture
    def session(self):
        return ShellSession()

    @pytest.mark.asyncio
    async def test_python_sends_file_content(self, oracle_tool, mock_oracle, session):
        """python передает оракулу содержимое файла"""
        result = await oracle_tool.execute({"command": "python", "args": ["example.py"], "_session": session})
        assert result.output == "The factorial of 5 is 120"
        sent = mock_oracle.execute.await_args.args[0]
        assert "def factorial(n):" in sent

    @pytest.mark.asyncio
    async def test_python_missing_file(self, oracle_tool, mock_oracle, session):
        result = await oracle_tool.execute({"command": "python", "args": ["nope.py"], "_session": session})
        assert result.error == "python: can't open file 'nope.py': [Errno 2] No such file or directory"
        mock_oracle.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_python_directory(self, oracle_tool, session):
        result = await oracle_tool.execute({"command": "python", "args": ["/home"], "_session": session})
        assert result.error == "python: can't open file '/home': [Errno 2] No such file or directory"

    @pytest.mark.asyncio
    async def test_askai_joins_question(self, oracle_tool, mock_oracle, session):
        result = await oracle_tool.execute(
            {"command": "askai", "args": ["what", "is", "this?"], "_session": session}
        )
        assert result.output == "42"
        mock_oracle.ask.assert_awaited_once_with("what is this?")

    @pytest.mark.asyncio
    async def test_askai_without_question(self, oracle_tool, mock_oracle, session):
        result = await oracle_tool.execute({"command": "askai", "args": [], "_session": session})
        assert result.error == "askai: please provide a question."
        mock_oracle.ask.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_man(self, oracle_tool, mock_oracle, session):
        result = await oracle_tool.execute({"command": "man", "args": ["ls"], "_session": session})
        assert result.output == "LS(1)"
        mock_oracle.manual.assert_awaited_once_with("ls")

    @pytest.mark.asyncio
    async def test_man_without_operand(self, oracle_tool, session):
        result = await oracle_tool.execute({"command": "man", "args": [], "_session": session})
        assert result.error == "man: what manual page do you want?"

    def test_placeholders(self, oracle_tool):
        """Каждая команда оракула показывает свой текст ожидания"""
        assert oracle_tool.get_placeholder("python") == EXECUTE_PLACEHOLDER
        assert oracle_tool.get_placeholder("askai") == ASK_PLACEHOLDER
        assert oracle_tool.get_placeholder("man") == MANUAL_PLACEHOLDER
        assert oracle_tool.get_placeholder("ls") is None

    @pytest.mark.asyncio
    async def test_pending_reported_only_after_validation(self, oracle_tool, session):
        """Заглушка показывается только когда файл найден"""
        shown = []
        arguments = {"command": "python", "_session": session, "_on_pending": shown.append}
        await oracle_tool.execute({**arguments, "args": ["nope.py"]})
        assert shown == []
        await oracle_tool.execute({**arguments, "args": ["example.py"]})
        assert shown == [EXECUTE_PLACEHOLDER]
