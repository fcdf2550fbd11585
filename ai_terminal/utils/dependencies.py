"""
Configuration and dependency management for the AI terminal.
"""

import logging
from functools import lru_cache

from ai_terminal.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


# --- Providers ---
# Each collaborator is created once per process and shared by all sessions.

from ..interpreter import CommandInterpreter
from ..providers.base import Oracle
from ..providers.gemini import GeminiOracle
from ..tools.edit_tool import TextEditorTool
from ..tools.file_ops_tool import FileOpsTool
from ..tools.file_reader_tool import FileReaderTool
from ..tools.file_system_tool import FileSystemTool
from ..tools.oracle_tool import OracleTool
from ..tools.session_tool import SessionTool
from .session_manager import SessionManager


@lru_cache
def get_oracle_provider() -> Oracle:
    """Returns a cached instance of the GeminiOracle."""
    config = get_base_config()
    if not config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY environment variable not set. AI features will not work.")
    logger.info(f"Initializing GeminiOracle singleton with model {config.ORACLE_MODEL}.")
    return GeminiOracle(
        api_key=config.GEMINI_API_KEY,
        model=config.ORACLE_MODEL,
        execute_temperature=config.ORACLE_EXECUTE_TEMPERATURE,
        ask_temperature=config.ORACLE_ASK_TEMPERATURE,
    )


@lru_cache
def get_editor_tool_provider() -> TextEditorTool:
    """Returns a cached instance of the TextEditorTool."""
    logger.info("Initializing TextEditorTool singleton.")
    return TextEditorTool()


@lru_cache
def get_interpreter() -> CommandInterpreter:
    """Returns the interpreter wired with every command tool."""
    config = get_base_config()
    editor_tool = get_editor_tool_provider()
    tools = [
        FileSystemTool(),
        FileReaderTool(),
        FileOpsTool(),
        editor_tool,
        OracleTool(get_oracle_provider()),
        SessionTool(user=config.SHELL_USER),
    ]
    logger.info("Initializing CommandInterpreter singleton.")
    return CommandInterpreter(tools, editor_tool=editor_tool)


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns a singleton instance of the SessionManager."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager()
