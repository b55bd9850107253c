"""
Scene Commands.

List scenes, show one scene, and turn a scene on.
"""

import typer
from rich.console import Console

from hassctl.cli.common import fail, open_service
from hassctl.cli.render import format_scene, print_lines
from hassctl.core.exceptions import TransportError
from hassctl.services.home_assistant import SCENE_DOMAIN

app = typer.Typer(help="Scene commands", no_args_is_help=True)
console = Console()


@app.command("list")
def list_scenes() -> None:
    """
    List all scenes with their attributes.

    Examples:
        hassctl scene list
    """
    with open_service() as service:
        try:
            scenes = service.fetch_scenes()
        except TransportError as e:
            fail("Failed to fetch scene list", e)

    print_lines(console, [f"{len(scenes)} scenes found:"])
    for scene in scenes:
        print_lines(console, format_scene(scene))


@app.command()
def show(
    entity_id: str = typer.Argument(..., help="Scene to show, e.g. scene.movie_night"),
) -> None:
    """
    Show one scene and its attributes.

    Examples:
        hassctl scene show scene.movie_night
    """
    with open_service() as service:
        try:
            state = service.fetch_state(entity_id)
        except TransportError as e:
            fail(f"Failed to fetch scene {entity_id}", e)

    if state.domain != SCENE_DOMAIN:
        fail(f"{entity_id} is not a scene.")
    print_lines(console, format_scene(state))


@app.command()
def enable(
    entity_id: str = typer.Argument(..., help="Scene to turn on, e.g. scene.movie_night"),
) -> None:
    """
    Turn a scene on.

    Examples:
        hassctl scene enable scene.movie_night
    """
    with open_service() as service:
        try:
            service.enable_scene(entity_id)
        except TransportError as e:
            fail("Failed to enable scene.", e)

    console.print("[green]Scene enabled.[/green]")
