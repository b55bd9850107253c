"""
Entity State Schema.

Snapshot of one entity as returned by GET /api/states.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DOMAIN_SEPARATOR = "."


class EntityState(BaseModel):
    """Immutable state record for a single entity."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    entity_id: str = Field(..., description="Identifier in domain.object_id form")
    state: str
    last_changed: str
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("entity_id")
    @classmethod
    def _single_separator(cls, value: str) -> str:
        if value.count(DOMAIN_SEPARATOR) != 1:
            raise ValueError(f"entity_id must be domain.object_id, got {value!r}")
        return value

    @property
    def domain(self) -> str:
        return self.entity_id.split(DOMAIN_SEPARATOR, 1)[0]

    def friendly_name(self) -> str | None:
        """Return the friendly_name attribute when it is a string."""
        name = self.attributes.get("friendly_name")
        return name if isinstance(name, str) else None

    def display_name(self) -> str:
        """Return friendly_name when it is a string, even an empty one."""
        name = self.friendly_name()
        return name if name is not None else self.entity_id

    def matches_domain(self, domain: str) -> bool:
        """True if the identifier is `domain` followed by the separator."""
        return self.entity_id.startswith(domain + DOMAIN_SEPARATOR)
