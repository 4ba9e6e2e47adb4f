import asyncio
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version

import click
from dotenv import load_dotenv

from mcp_confluence.utils.env import is_env_truthy
from mcp_confluence.utils.logging import setup_logging

try:
    __version__ = version("mcp-confluence")
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if is_env_truthy("MCP_VERBOSE"):
    logging_level = logging.DEBUG

# Set up logging to STDOUT if MCP_LOGGING_STDOUT is set to true
logging_stream = sys.stdout if is_env_truthy("MCP_LOGGING_STDOUT") else sys.stderr

# Set up logging using the utility function
logger = setup_logging(logging_level, logging_stream)


@click.version_option(__version__, prog_name="mcp-confluence")
@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--confluence-url",
    help="Confluence site URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--confluence-username", help="Confluence username/email")
@click.option("--confluence-token", help="Confluence API token")
@click.option(
    "--allowed-spaces",
    help="Comma-separated list of Confluence space keys the tools may access",
)
@click.option("--log-file", help="Path of the JSON-lines request audit log")
@click.option(
    "--debug",
    is_flag=True,
    help="Write diagnostic details (including tracebacks) to the log stream",
)
def main(
    verbose: int,
    env_file: str | None,
    confluence_url: str | None,
    confluence_username: str | None,
    confluence_token: str | None,
    allowed_spaces: str | None,
    log_file: str | None,
    debug: bool,
) -> None:
    """MCP Confluence Server - allowlist-restricted Confluence tools for MCP

    Exposes search, read, create, update, delete and move operations on
    Confluence pages, limited to the spaces listed in ALLOWED_SPACES.
    """
    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return (
            ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT_MAP
            and ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT
        )

    if env_file:
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Set env vars for downstream config
    if click_ctx and was_option_provided(click_ctx, "confluence_url"):
        os.environ["CONFLUENCE_BASE_URL"] = confluence_url
    if click_ctx and was_option_provided(click_ctx, "confluence_username"):
        os.environ["CONFLUENCE_USERNAME"] = confluence_username
    if click_ctx and was_option_provided(click_ctx, "confluence_token"):
        os.environ["CONFLUENCE_API_TOKEN"] = confluence_token
    if click_ctx and was_option_provided(click_ctx, "allowed_spaces"):
        os.environ["ALLOWED_SPACES"] = allowed_spaces
    if click_ctx and was_option_provided(click_ctx, "log_file"):
        os.environ["CONFLUENCE_LOG_FILE"] = log_file
    if click_ctx and was_option_provided(click_ctx, "debug"):
        os.environ["DEBUG"] = str(debug).lower()

    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2 or is_env_truthy("DEBUG"):  # -vv or debug mode
        current_logging_level = logging.DEBUG
    else:
        # Default to DEBUG if MCP_VERY_VERBOSE is set, else INFO if MCP_VERBOSE is set, else WARNING
        if is_env_truthy("MCP_VERY_VERBOSE", "false"):
            current_logging_level = logging.DEBUG
        elif is_env_truthy("MCP_VERBOSE", "false"):
            current_logging_level = logging.INFO
        else:
            current_logging_level = logging.WARNING

    # Set up logging to STDOUT if MCP_LOGGING_STDOUT is set to true
    logging_stream = sys.stdout if is_env_truthy("MCP_LOGGING_STDOUT") else sys.stderr

    global logger
    logger = setup_logging(current_logging_level, logging_stream)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    from mcp_confluence.confluence.config import ConfluenceConfig
    from mcp_confluence.exceptions import ConfigurationError

    # Fail fast before the transport starts
    try:
        ConfluenceConfig.from_env()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    from mcp_confluence.servers import main_mcp

    logger.info("Starting server with STDIO transport.")

    try:
        logger.debug("Starting asyncio event loop...")
        asyncio.run(main_mcp.run_async(transport="stdio"))
    except (KeyboardInterrupt, SystemExit) as e:
        logger.info(f"Server shutdown initiated: {type(e).__name__}")
    except Exception as e:
        logger.error(f"Server encountered an error: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
