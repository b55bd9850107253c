"""
Unit Tests for HomeAssistantService.

The service runs against a real HomeAssistantClient served by an
httpx.MockTransport with canned routes.
"""

import httpx
import pytest

from hassctl.core.exceptions import TransportError
from hassctl.schemas import EntityState
from hassctl.services.home_assistant import HomeAssistantService, filter_by_domains


@pytest.fixture
def build_service(make_client, routes_handler):
    def factory(routes):
        handler = routes_handler(routes)
        return HomeAssistantService(make_client(handler)), handler

    return factory


class TestFilterByDomains:
    """Tests for filter_by_domains."""

    @pytest.fixture
    def states(self, states_payload):
        return [EntityState.model_validate(s) for s in states_payload]

    def test_keeps_matching_domains(self, states):
        result = filter_by_domains(states, ["light", "switch"])
        assert [s.entity_id for s in result] == ["light.kitchen", "switch.fan"]

    def test_separator_aware(self, states):
        result = filter_by_domains(states, ["light"])
        assert "lighting.strip" not in [s.entity_id for s in result]

    def test_no_domains_keeps_nothing(self, states):
        assert filter_by_domains(states, []) == []


class TestFetch:
    """Tests for the read operations."""

    def test_fetch_states(self, build_service, states_payload):
        service, handler = build_service({("GET", "/api/states"): states_payload})
        states = service.fetch_states()
        assert len(states) == 5
        assert handler.requests[0].url.path == "/api/states"

    def test_fetch_state(self, build_service, state_record):
        service, handler = build_service(
            {("GET", "/api/states/light.kitchen"): state_record("light.kitchen", "off")}
        )
        state = service.fetch_state("light.kitchen")
        assert state.state == "off"

    def test_fetch_state_not_found(self, build_service):
        service, _ = build_service({})
        with pytest.raises(TransportError) as exc_info:
            service.fetch_state("light.missing")
        assert exc_info.value.status_code == 404

    def test_fetch_services(self, build_service, services_payload):
        service, _ = build_service({("GET", "/api/services"): services_payload})
        groups = service.fetch_services()
        assert [g.domain for g in groups] == ["light", "homeassistant"]

    def test_fetch_scenes(self, build_service, state_record):
        payload = [state_record("scene.a"), state_record("light.b"), state_record("scene.c")]
        service, _ = build_service({("GET", "/api/states"): payload})
        scenes = service.fetch_scenes()
        assert [s.entity_id for s in scenes] == ["scene.a", "scene.c"]

    def test_fetch_states_by_domain(self, build_service, states_payload):
        service, _ = build_service({("GET", "/api/states"): states_payload})
        result = service.fetch_states_by_domain(["light"])
        assert [s.entity_id for s in result] == ["light.kitchen"]


class TestCallService:
    """Tests for call_service and enable_scene."""

    def test_call_service_posts_entity_id(self, build_service):
        service, handler = build_service({("POST", "/api/services/light/toggle"): []})
        assert service.call_service("light", "toggle", "light.kitchen") == []
        assert handler.requests[0].method == "POST"
        assert handler.bodies() == [{"entity_id": "light.kitchen"}]

    @pytest.mark.parametrize(
        ("domain", "name", "entity_id"),
        [
            ("light", "turn_on", "light.kitchen"),
            ("homeassistant", "update_entity", "sensor.temperature"),
            ("scene", "turn_on", "scene.movie_night"),
        ],
    )
    def test_body_is_only_entity_id(self, build_service, domain, name, entity_id):
        service, handler = build_service({("POST", f"/api/services/{domain}/{name}"): []})
        service.call_service(domain, name, entity_id)
        assert handler.bodies() == [{"entity_id": entity_id}]

    def test_enable_scene(self, build_service, state_record):
        service, handler = build_service(
            {("POST", "/api/services/scene/turn_on"): [state_record("scene.a", "scening")]}
        )
        changed = service.enable_scene("scene.a")
        assert changed[0].entity_id == "scene.a"
        assert handler.requests[0].url.path == "/api/services/scene/turn_on"

    def test_call_service_failure(self, build_service):
        service, _ = build_service(
            {("POST", "/api/services/light/toggle"): httpx.Response(500, text="boom")}
        )
        with pytest.raises(TransportError) as exc_info:
            service.call_service("light", "toggle", "light.kitchen")
        assert exc_info.value.status_code == 500

    def test_context_manager_closes_client(self, build_service):
        service, _ = build_service({("GET", "/api/states"): []})
        with service:
            service.fetch_states()
        assert service.client._client is None
