"""
hassctl.

Command-line client for the Home Assistant REST API.

- core/: Configuration, logging, exceptions
- schemas/: Typed records for states and services
- services/: Operations composed from REST calls
- cli/: Typer commands, Rich output, interactive selector
"""
