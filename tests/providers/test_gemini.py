#!/usr/bin/env python3
"""
Unit тесты для providers/gemini.py
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ai_terminal.providers.gemini import NOT_CONFIGURED_MESSAGE, GeminiOracle


class TestGeminiOracle:
    """Тесты для GeminiOracle"""

    @pytest.fixture
    def mock_client(self):
        """Создает mock клиента google-genai"""
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text="  120\n"))
        return client

    @pytest.fixture
    def oracle(self, mock_client):
        oracle = GeminiOracle(api_key="test-key", model="test-model")
        with patch.object(GeminiOracle, "_get_client", return_value=mock_client):
            yield oracle

    @pytest.mark.asyncio
    async def test_without_key_returns_message(self):
        """Без ключа оракул не обращается к сервису"""
        oracle = GeminiOracle(api_key=None)
        with patch.object(GeminiOracle, "_get_client") as get_client:
            assert await oracle.ask("hi") == NOT_CONFIGURED_MESSAGE
            assert await oracle.execute("print(1)") == NOT_CONFIGURED_MESSAGE
            get_client.assert_not_called()
        assert not oracle.is_configured

    @pytest.mark.asyncio
    async def test_execute_uses_interpreter_prompt(self, oracle, mock_client):
        """execute оборачивает код в промпт и отключает размышления"""
        assert await oracle.execute("print(factorial(5))") == "120"
        kwargs = mock_client.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == "test-model"
        assert "print(factorial(5))" in kwargs["contents"]
        assert kwargs["config"].temperature == 0.1
        assert kwargs["config"].thinking_config.thinking_budget == 0

    @pytest.mark.asyncio
    async def test_ask_sends_question_verbatim(self, oracle, mock_client):
        assert await oracle.ask("why?") == "  120\n"
        kwargs = mock_client.aio.models.generate_content.await_args.kwargs
        assert kwargs["contents"] == "why?"
        assert kwargs["config"].temperature == 0.7

    @pytest.mark.asyncio
    async def test_manual_prompt_names_command(self, oracle, mock_client):
        await oracle.manual("grep")
        assert "grep" in mock_client.aio.models.generate_content.await_args.kwargs["contents"]

    @pytest.mark.asyncio
    async def test_failure_becomes_message(self, oracle, mock_client):
        """Ошибка сервиса возвращается строкой, а не исключением"""
        mock_client.aio.models.generate_content.side_effect = RuntimeError("quota exceeded")
        result = await oracle.ask("hi")
        assert result == "An error occurred while communicating with the AI: quota exceeded"

    @pytest.mark.asyncio
    async def test_empty_response_text(self, oracle, mock_client):
        mock_client.aio.models.generate_content.return_value = MagicMock(text=None)
        assert await oracle.manual("ls") == ""

    def test_model_name(self, oracle):
        assert oracle.model_name == "test-model"
