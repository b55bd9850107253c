"""
Service Commands.

List the services Home Assistant exposes, grouped by domain.
"""

import typer
from rich.console import Console

from hassctl.cli.common import fail, open_service
from hassctl.cli.render import format_service_domain, print_lines
from hassctl.core.exceptions import TransportError

app = typer.Typer(help="Service commands", no_args_is_help=True)
console = Console()


@app.command("list")
def list_services() -> None:
    """
    List all services grouped by domain.

    Examples:
        hassctl service list
    """
    with open_service() as service:
        try:
            groups = service.fetch_services()
        except TransportError as e:
            fail("Failed to fetch service list", e)

    for group in groups:
        print_lines(console, format_service_domain(group))
