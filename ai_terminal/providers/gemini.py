"""
Gemini Oracle Provider

Implements the Oracle interface on top of the `google-genai` SDK.

Example:
    >>> oracle = GeminiOracle(api_key="...", model="gemini-2.5-flash")
    >>> await oracle.execute('print(2 + 2)')
    "4"
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ai_terminal.prompts import get_all_prompts
from ai_terminal.providers.base import Oracle
from ai_terminal.tools.base import OracleUnavailable

if TYPE_CHECKING:
    from google.genai import Client

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Error: API_KEY is not configured. AI features are disabled."
UNAVAILABLE_MESSAGE = "An error occurred while communicating with the AI: {error}"


class GeminiOracle(Oracle):
    """
    Gemini oracle implementation.

    Args:
        api_key: Gemini API key. Without one every call returns the
            "not configured" message instead of reaching the service.
        model: Model to use (default: "gemini-2.5-flash")
        execute_temperature: Sampling temperature for `python`.
        ask_temperature: Sampling temperature for `askai` and `man`.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.5-flash",
        execute_temperature: float = 0.1,
        ask_temperature: float = 0.7,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._execute_temperature = execute_temperature
        self._ask_temperature = ask_temperature
        self._prompts = get_all_prompts()
        # Lazy initialization - create client on first use
        self._client: Client | None = None

    @property
    def model_name(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> Client:
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def _generate(self, contents: str, temperature: float, disable_thinking: bool = False) -> str:
        """
        Send one prompt and return the response text.

        Raises:
            OracleUnavailable: If the key is missing or the call fails for any reason
        """
        if not self.is_configured:
            raise OracleUnavailable(NOT_CONFIGURED_MESSAGE)

        from google.genai import types

        config_kwargs: dict[str, Any] = {"temperature": temperature}
        if disable_thinking:
            config_kwargs["thinking_config"] = types.ThinkingConfig(thinking_budget=0)

        try:
            response = await self._get_client().aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=types.GenerateContentConfig(**config_kwargs),
            )
        except Exception as e:
            logger.error(f"Error calling Gemini model {self._model}: {e}", exc_info=True)
            raise OracleUnavailable(UNAVAILABLE_MESSAGE.format(error=e)) from e

        return response.text or ""

    async def execute(self, code: str) -> str:
        prompt = self._prompts["python-interpreter"].format(code=code)
        try:
            return (await self._generate(prompt, self._execute_temperature, disable_thinking=True)).strip()
        except OracleUnavailable as e:
            return e.message

    async def ask(self, question: str) -> str:
        try:
            return await self._generate(question, self._ask_temperature)
        except OracleUnavailable as e:
            return e.message

    async def manual(self, command: str) -> str:
        prompt = self._prompts["manual-page"].format(command=command)
        try:
            return (await self._generate(prompt, self._ask_temperature)).strip()
        except OracleUnavailable as e:
            return e.message
