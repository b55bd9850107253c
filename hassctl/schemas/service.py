"""
Service Schemas.

Records for GET /api/services and the POST body sent when calling a service.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ServiceField(_Record):
    """Metadata for one field a service accepts."""

    name: str | None = None
    description: str | None = None
    default: Any = None


class ServiceTargetEntity(_Record):
    """Entity filter in a service target."""

    domain: list[str] | None = None
    supported_features: list[int] | None = None


class ServiceTarget(_Record):
    entity: list[ServiceTargetEntity] | None = None


class Service(_Record):
    """
    A service in a domain.

    The service identifier is not part of the record; it is the key under
    which the service appears in ServiceDomain.services.
    """

    name: str = ""
    description: str | None = None
    fields: dict[str, ServiceField] = Field(default_factory=dict)
    target: ServiceTarget | None = None

    def target_entity_domains(self) -> list[str] | None:
        """
        Flatten the target entity domains into one ordered list.

        Returns:
            None when the service declares no entity target, meaning any
            entity is acceptable. Otherwise the domains in declaration order.
        """
        if self.target is None or self.target.entity is None:
            return None
        return [
            domain
            for entity in self.target.entity
            if entity.domain is not None
            for domain in entity.domain
        ]


class ServiceDomain(_Record):
    """All services of one domain, as returned in one API record."""

    domain: str
    services: dict[str, Service] = Field(default_factory=dict)


class ServiceCallData(BaseModel):
    """Body of POST /api/services/{domain}/{service}."""

    entity_id: str
