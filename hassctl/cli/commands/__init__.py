"""
CLI Commands.

Organized by resource: entities, services, scenes, plus the interactive
service call.
"""

from hassctl.cli.commands.interactive import call
from hassctl.cli.commands.entity import app as entity_app
from hassctl.cli.commands.scene import app as scene_app
from hassctl.cli.commands.service import app as service_app

__all__ = [
    "call",
    "entity_app",
    "scene_app",
    "service_app",
]
