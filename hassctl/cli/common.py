"""
Shared Command Helpers.

Client construction and failure reporting used by every command.
"""

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from hassctl.client import get_hass_client
from hassctl.core.exceptions import ApplicationError, ConfigurationError
from hassctl.core.logging import get_logger, log_with_source
from hassctl.services.home_assistant import HomeAssistantService

logger = get_logger(__name__)
console = Console()


def open_service() -> HomeAssistantService:
    """
    Build the service for the current command.

    Resolves the connection config first; on failure prints the
    remediation message and exits before any request is made.
    """
    try:
        client = get_hass_client()
    except ConfigurationError as e:
        log_with_source(logger, "config", "warning", "Configuration failed", code=e.code)
        console.print("Failed to create client:\n", markup=False, highlight=False)
        console.print(e.message, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from e
    return HomeAssistantService(client)


def fail(message: str, error: ApplicationError | None = None) -> NoReturn:
    """Report a failed command and exit with status 1."""
    if error is not None:
        log_with_source(logger, "cli", "error", message, code=error.code, error=str(error))
        # A full sentence stays on its own line; a heading takes the detail after a colon.
        separator = "\n" if message.endswith(".") else ": "
        console.print(f"[red]{escape(message)}[/red]{separator}{escape(str(error))}", soft_wrap=True)
    else:
        console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)
