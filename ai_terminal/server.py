"""
MCP server definition for the AI terminal.

Exposes the same interpreter the interactive terminal uses, so an agent can
drive a session command by command.
"""

import logging
from typing import Any

from mcp.server.fastmcp import Context, FastMCP

from ai_terminal.models.session import HistoryEntry, ShellSession, format_path
from ai_terminal.utils.config import ServiceConfig
from ai_terminal.utils.dependencies import get_base_config, get_interpreter, get_session_manager


# Get a module-level logger
logger = logging.getLogger(__name__)


def build_server(config: ServiceConfig) -> FastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured FastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return FastMCP(
        "ai-terminal",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )

# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


def _entry_payload(entry: HistoryEntry, session: ShellSession) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "command": entry.command,
        "cwd": format_path(session.cwd),
        "exit_code": entry.error_code or 0,
    }
    if entry.error is not None:
        payload.update(status="error", error=entry.error)
    else:
        payload.update(status="success", result=entry.output)
    if session.editor is not None:
        payload["editor"] = {"file_path": session.editor.file_path, "content": session.editor.buffer}
    return payload


# --- Tool Definitions ---

@mcp_app.tool()
async def run_command(
    context: Context,
    command: str,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Runs one command line in the simulated shell.

    Args:
        command: The command line, e.g. 'ls /home/user' or 'echo hi > notes.txt'.
        session_id: The shell session to run in. Sessions keep their own files and CWD.

    Returns:
        A dictionary with the command's output or error, the CWD afterwards and,
        after `edit`, the file opened in the editor.
    """
    logger.info(f"Executing command: {command}")
    try:
        session = get_session_manager().get_session(session_id)
        entry = await get_interpreter().submit(session, command)
        return _entry_payload(entry, session)
    except Exception as e:
        logger.error(f"Error executing command: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool()
async def save_file(
    context: Context,
    content: str,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Saves the file opened with `edit` and closes the editor.

    Args:
        content: The complete new content of the file.
        session_id: The shell session whose editor to save.

    Returns:
        A dictionary containing the status of the save.
    """
    try:
        session = get_session_manager().get_session(session_id)
        path = session.editor.file_path if session.editor else None
        logger.info(f"Saving editor buffer to {path}")
        result = await get_interpreter().save_editor(session, content)
        if result.error:
            return {"status": "error", "error": result.error, "exit_code": result.error_code}
        return {"status": "success", "result": f"Saved {path}", "exit_code": 0}
    except Exception as e:
        logger.error(f"Error saving file: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool()
async def discard_edit(
    context: Context,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Closes the editor without changing the file.

    Args:
        session_id: The shell session whose editor to close.
    """
    try:
        session = get_session_manager().get_session(session_id)
        result = await get_interpreter().discard_editor(session)
        if result.error:
            return {"status": "error", "error": result.error, "exit_code": result.error_code}
        return {"status": "success", "result": "Edits discarded", "exit_code": 0}
    except Exception as e:
        logger.error(f"Error discarding edit: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool()
async def reset_session(
    context: Context,
    session_id: str = "default",
) -> dict[str, Any]:
    """
    Starts the session over: initial files, home directory, empty history.

    Args:
        session_id: The shell session to reset.
    """
    logger.info(f"Resetting session {session_id}")
    session = get_session_manager().new_session(session_id)
    return {"status": "success", "cwd": format_path(session.cwd), "exit_code": 0}
