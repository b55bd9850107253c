"""
Entity Commands.

List entities and show a single entity with its attributes.
"""

import typer
from rich.console import Console

from hassctl.cli.common import fail, open_service
from hassctl.cli.render import format_state, print_lines
from hassctl.core.exceptions import TransportError

app = typer.Typer(help="Entity commands", no_args_is_help=True)
console = Console()


@app.command("list")
def list_entities() -> None:
    """
    List all entities with their current state.

    Examples:
        hassctl entity list
    """
    with open_service() as service:
        try:
            states = service.fetch_states()
        except TransportError as e:
            fail("Failed to fetch entity list", e)

    for state in states:
        print_lines(console, format_state(state))


@app.command()
def show(
    entity_id: str = typer.Argument(..., help="Entity to show, e.g. light.kitchen"),
) -> None:
    """
    Show one entity and all of its attributes.

    Examples:
        hassctl entity show light.kitchen
    """
    with open_service() as service:
        try:
            state = service.fetch_state(entity_id)
        except TransportError as e:
            fail(f"Failed to fetch entity {entity_id}", e)

    print_lines(console, format_state(state, with_attributes=True))
