"""Resource configuration for the JSON:API serializer."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from jsonapi_serializer.utils.values import freeze


class ResourceConfig(BaseModel):
    """Describe how one resource type and its relationships are serialized.

    ``relationships`` maps input field names to the config of the related
    resource type, which makes the config a tree mirroring the input data.
    Instances are frozen and can be shared between serializers and threads.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    id_key: str = "id"
    allow: frozenset[str] = frozenset()
    deny: frozenset[str] = frozenset()
    relationships: Mapping[str, ResourceConfig] = Field(default_factory=dict, validate_default=True)
    top_level_links: Any = Field(default=None, validate_default=True)
    top_level_meta: Any = Field(default_factory=dict, validate_default=True)
    key: str | None = None
    links_for: Callable[[Mapping[str, Any]], Any] | None = None

    @field_validator("relationships", mode="after")
    @classmethod
    def _freeze_relationships(
        cls, value: Mapping[str, ResourceConfig]
    ) -> Mapping[str, ResourceConfig]:
        return MappingProxyType(dict(value))

    @field_validator("top_level_links", mode="after")
    @classmethod
    def _default_links(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and "type" in info.data:
            value = {"self": f"/{info.data['type']}"}
        return freeze(value)

    @field_validator("top_level_meta", mode="after")
    @classmethod
    def _freeze_meta(cls, value: Any) -> Any:
        return freeze(value)

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> ResourceConfig:
        # Every field is frozen, so copies may share their values.
        return self.__copy__()

    def relationship(self, name: str) -> ResourceConfig | None:
        """Return the config for relationship ``name``, if declared."""
        return self.relationships.get(name)


ResourceConfig.model_rebuild()
