"""Service configuration definition."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class ServiceConfig(BaseSettings):
    """
    Defines the configuration for the terminal and its MCP server, loaded from
    environment variables or a .env file.
    """

    # Gemini API key used by the oracle. API_KEY is accepted as well.
    GEMINI_API_KEY: str | None = Field(default=None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
    # Model answering `python`, `askai` and `man`.
    ORACLE_MODEL: str = "gemini-2.5-flash"
    # Low temperature keeps simulated program output close to deterministic.
    ORACLE_EXECUTE_TEMPERATURE: float = 0.1
    ORACLE_ASK_TEMPERATURE: float = 0.7

    # Shown by `whoami` and in the prompt (user@host).
    SHELL_USER: str = "user"
    SHELL_HOSTNAME: str = "react-os"

    # MCP Server transport mechanism (e.g., "stdio", "sse", "streamable-http")
    MCP_TRANSPORT: str = "stdio"
    # Host for the MCP server to bind to when not using stdio.
    MCP_HOST: str = "127.0.0.1"
    # Port for the MCP server to listen on.
    MCP_PORT: int = 8660

    LOG_LEVEL: str = "WARNING"
    # The interactive terminal logs here instead of stderr when set.
    LOG_FILE: str | None = None

    class Config:
        """Pydantic configuration settings."""

        # We do not specify env_file here.
        # Environment loading is handled explicitly in main.py via load_dotenv
        # to ensure the correct .env file is used.
        extra = "ignore"
