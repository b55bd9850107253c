"""
Output Rendering.

Plain-text formatting of states and services. Functions return lines so
commands decide where they go and tests can check them directly.
"""

import json
from typing import Any

from rich.console import Console

from hassctl.schemas import EntityState, ServiceDomain


def format_value(value: Any) -> str:
    """Render an attribute value as JSON."""
    return json.dumps(value, ensure_ascii=False, default=str)


def format_state_line(state: EntityState) -> str:
    name = state.friendly_name()
    if name is not None:
        return f"{state.entity_id} - {name} ({state.state})"
    return f"{state.entity_id} ({state.state})"


def format_state(state: EntityState, with_attributes: bool = False) -> list[str]:
    lines = [format_state_line(state)]
    if with_attributes:
        lines.extend(f"  - {key}: {format_value(value)}" for key, value in state.attributes.items())
    return lines


def format_service_domain(group: ServiceDomain) -> list[str]:
    lines = ["", f"Domain: {group.domain}"]
    for service_id, service in group.services.items():
        if service.description:
            lines.append(f"  - '{service_id}' - {service.name}: {service.description}")
        else:
            lines.append(f"  - '{service_id}' - {service.name}")
    return lines


def format_scene(state: EntityState) -> list[str]:
    name = state.friendly_name()
    if name is not None:
        header = f"Scene: {name} ({state.entity_id}). State: {state.state}"
    else:
        header = f"Scene: {state.entity_id}. State: {state.state}"
    lines = [header, " - Attributes:"]
    lines.extend(f"   {key}: {format_value(value)}" for key, value in state.attributes.items())
    lines.append("")
    return lines


def print_lines(console: Console, lines: list[str]) -> None:
    """Print lines verbatim: no markup, no highlighting, no wrapping."""
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
