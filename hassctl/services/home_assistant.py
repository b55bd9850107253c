"""
Home Assistant Service.

Operations composed from REST calls. Each method performs its requests
once; nothing is retried or cached. TransportError propagates to the caller.

Usage:
    service = HomeAssistantService(client)
    for scene in service.fetch_scenes():
        ...
"""

from collections.abc import Sequence
from typing import Any

from hassctl.client import HomeAssistantClient
from hassctl.core.logging import get_logger
from hassctl.schemas import EntityState, ServiceCallData, ServiceDomain

SCENE_DOMAIN = "scene"


def filter_by_domains(states: Sequence[EntityState], domains: Sequence[str]) -> list[EntityState]:
    """Keep states whose identifier belongs to one of the domains."""
    return [state for state in states if any(state.matches_domain(d) for d in domains)]


class HomeAssistantService:
    """Read and invoke Home Assistant entities and services."""

    def __init__(self, client: HomeAssistantClient) -> None:
        self.client = client
        self._logger = get_logger(self.__class__.__module__)

    def __enter__(self) -> "HomeAssistantService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.client.close()

    def fetch_states(self) -> list[EntityState]:
        return self.client.get("/api/states", list[EntityState])

    def fetch_state(self, entity_id: str) -> EntityState:
        return self.client.get(f"/api/states/{entity_id}", EntityState)

    def fetch_services(self) -> list[ServiceDomain]:
        return self.client.get("/api/services", list[ServiceDomain])

    def fetch_states_by_domain(self, domains: Sequence[str]) -> list[EntityState]:
        """Fetch all states and keep those in the given domains."""
        states = filter_by_domains(self.fetch_states(), domains)
        self._logger.debug("Filtered states by domain", domains=list(domains), count=len(states))
        return states

    def fetch_scenes(self) -> list[EntityState]:
        return self.fetch_states_by_domain([SCENE_DOMAIN])

    def call_service(self, domain: str, service: str, entity_id: str) -> list[EntityState]:
        """
        Invoke a service on one entity.

        Only entity_id is sent; other fields the service declares are left
        to their server-side defaults.

        Returns:
            The states the server reports as changed.
        """
        self._logger.info("Calling service", domain=domain, service=service, entity_id=entity_id)
        return self.client.post(
            f"/api/services/{domain}/{service}",
            ServiceCallData(entity_id=entity_id),
            list[EntityState],
        )

    def enable_scene(self, entity_id: str) -> list[EntityState]:
        return self.call_service(SCENE_DOMAIN, "turn_on", entity_id)
