"""
Home Assistant Schemas.

Pydantic records for the REST API payloads consumed by hassctl.
"""

from hassctl.schemas.service import (
    Service,
    ServiceCallData,
    ServiceDomain,
    ServiceField,
    ServiceTarget,
    ServiceTargetEntity,
)
from hassctl.schemas.state import DOMAIN_SEPARATOR, EntityState

__all__ = [
    "DOMAIN_SEPARATOR",
    "EntityState",
    "Service",
    "ServiceCallData",
    "ServiceDomain",
    "ServiceField",
    "ServiceTarget",
    "ServiceTargetEntity",
]
