"""
hassctl CLI.

Command-line client for the Home Assistant REST API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    hassctl --help                          # Show help

    # Entities
    hassctl entity list                     # List entities and states
    hassctl entity show light.kitchen       # Show one entity with attributes

    # Services
    hassctl service list                    # List services by domain

    # Scenes
    hassctl scene list                      # List scenes with attributes
    hassctl scene show scene.movie_night    # Show one scene
    hassctl scene enable scene.movie_night  # Turn a scene on

    # Interactive
    hassctl call                            # Pick domain, service, entity

Environment:
    HASSCTL_ACCESS_TOKEN  Long-lived access token (or set it in .env)
    HASSCTL_HOST          Home Assistant host name
    HASSCTL_PORT          Port, defaults to 8123

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

import typer
from rich.console import Console

from hassctl.cli.commands import call, entity_app, scene_app, service_app
from hassctl.core.logging import setup_logging

app = typer.Typer(
    name="hassctl",
    help="Home Assistant CLI - list entities and services, enable scenes, call services.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console(stderr=True)

app.add_typer(entity_app, name="entity")
app.add_typer(service_app, name="service")
app.add_typer(scene_app, name="scene")
app.command(name="call")(call)


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Home Assistant CLI.

    Connection settings come from HASSCTL_ACCESS_TOKEN, HASSCTL_HOST
    and HASSCTL_PORT.
    """
    if debug:
        setup_logging(level="DEBUG")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
