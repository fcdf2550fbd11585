"""
The main entry points for the AI terminal.

This script handles environment loading, logging configuration, and runs
either the interactive terminal or the MCP server.
"""

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv


def setup_environment(log_file: str | None = None) -> bool:
    """
    Loads environment variables and configures application-wide logging.
    It's expected that the correct .env file is loaded by the process runner (e.g., uv).
    """
    load_dotenv()  # Load environment variables from .env file.

    # Configure logging using a basic, straightforward setup.
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    log_file = log_file or os.environ.get("LOG_FILE")
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        filename=log_file,
    )
    logging.info("Environment and logging configured.")
    return True


def run_shell() -> None:
    """
    Sets up the environment and runs the interactive terminal.
    """
    if not setup_environment():
        logging.critical("Initial environment setup failed. Exiting.")
        sys.exit(1)

    # Import terminal components after setup to ensure environment is loaded first.
    from .ui.repl import TerminalApp
    from .utils.dependencies import get_base_config, get_interpreter, get_session_manager

    config = get_base_config()
    app = TerminalApp(
        get_interpreter(),
        get_session_manager().get_session(),
        user=config.SHELL_USER,
        host=config.SHELL_HOSTNAME,
    )
    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        pass


def run_server() -> None:
    """
    Sets up the environment and runs the MCP server.
    """
    if not setup_environment():
        logging.critical("Initial environment setup failed. Exiting.")
        sys.exit(1)

    # Import server components after setup to ensure environment is loaded first.
    from .server import mcp_app, server_config

    logger = logging.getLogger(__name__)
    logger.info("--- AI Terminal MCP Server ---")
    logger.info("Starting server with transport: %s", server_config.MCP_TRANSPORT)
    if server_config.MCP_TRANSPORT != "stdio":
        logger.info(
            "Server will listen on: %s:%s",
            server_config.MCP_HOST,
            server_config.MCP_PORT,
        )

    # Run the application with the transport defined in the configuration.
    mcp_app.run(transport=server_config.MCP_TRANSPORT)


if __name__ == "__main__":
    run_shell()
