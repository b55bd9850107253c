"""
Interactive Service Call.

Walks the user through domain → service → entity and calls the service
on the chosen entity. The steps run once, in order, and stop at the
first failure.
"""

from rich.console import Console

from hassctl.cli.common import fail, open_service
from hassctl.cli.selector import Selector, fuzzy_select
from hassctl.core.exceptions import SelectionError, TransportError
from hassctl.services.home_assistant import HomeAssistantService

console = Console()


def run_call(service: HomeAssistantService, select: Selector) -> tuple[str, str, str]:
    """
    Run the interactive call flow.

    Args:
        service: Home Assistant service layer.
        select: Picker returning the index of the chosen option.

    Returns:
        (domain, service_id, entity_id) that was called.

    Raises:
        TransportError: If any request fails.
        SelectionError: If a prompt is cancelled or has nothing to offer.
    """
    groups = service.fetch_services()
    group = groups[select("Domain", [g.domain for g in groups])]

    service_ids = list(group.services)
    service_id = service_ids[select("Service", service_ids)]

    # Services without an entity target accept any entity.
    target_domains = group.services[service_id].target_entity_domains()
    if target_domains:
        entities = service.fetch_states_by_domain(target_domains)
    else:
        entities = service.fetch_states()

    entity_ids = [entity.entity_id for entity in entities]
    entity_id = entity_ids[select("Entity", entity_ids)]

    service.call_service(group.domain, service_id, entity_id)
    return group.domain, service_id, entity_id


def call() -> None:
    """
    Call a service interactively.

    Prompts for a domain, a service in that domain, and a target entity,
    then calls the service on that entity.

    Examples:
        hassctl call
    """
    with open_service() as service:
        try:
            run_call(service, fuzzy_select)
        except TransportError as e:
            fail("Service call failed", e)
        except SelectionError as e:
            fail("Service call aborted", e)

    console.print("[green]Service called successfully[/green]")
