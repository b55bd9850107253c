"""
CLI Module.

Command-line client built with Typer for the Home Assistant REST API.

Architecture:
- CLI is a thin presentation layer over hassctl.services
- Requests go through hassctl.client (httpx)
- Output is rendered with Rich

Usage:
    hassctl --help
    hassctl entity list
    hassctl scene enable scene.movie_night
    hassctl call  # Interactive mode
"""
