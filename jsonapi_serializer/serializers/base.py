"""JSON:API serializer driven by a ResourceConfig tree."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from jsonapi_serializer.config import ResourceConfig
from jsonapi_serializer.core.document import JSONAPIDocumentBuilder
from jsonapi_serializer.core.errors import InvalidShapeError, MissingIdError
from jsonapi_serializer.utils.values import as_object, is_array, is_string, shallow_copy

logger = logging.getLogger(__name__)


class JSONAPISerializer:
    """Serialize JSON objects into JSON:API resource objects and documents.

    The serializer walks each input object together with its config. Fields
    named by ``config.relationships`` become linkage objects on the resource
    and the related objects themselves are flattened into ``included``.
    Everything else, minus the id key and any denied or non-allowed keys,
    becomes an attribute.
    """

    document_builder_class: type = JSONAPIDocumentBuilder

    def __init__(self, config: ResourceConfig) -> None:
        self.config = config

    def get_document_builder(self) -> JSONAPIDocumentBuilder:
        """Instantiate the document builder."""
        return self.document_builder_class()

    def serialize(self, data: Any, meta: Any = None) -> dict[str, Any]:
        """Serialize one object or an array of objects into a document."""
        if is_array(data):
            return self.serialize_many(data, meta=meta)
        return self.serialize_one(data, meta=meta)

    def serialize_one(self, instance: Any, meta: Any = None) -> dict[str, Any]:
        """Return a document whose ``data`` is a single resource object.

        ``meta`` replaces the config's ``top_level_meta`` when given.
        """
        logger.debug("Serializing one %r resource", self.config.type)
        node = self._require_object(instance, self.config)
        resource = self.to_resource(node)
        included = self.included_for(node)
        logger.debug("Serialized %r with %d included", self.config.type, len(included))
        return self.get_document_builder().build_single(
            resource,
            included=included,
            links=self.config.top_level_links,
            meta=self._top_level_meta(meta),
        )

    def serialize_many(self, instances: Iterable[Any], meta: Any = None) -> dict[str, Any]:
        """Return a document whose ``data`` is an array, in input order."""
        nodes = [self._require_object(instance, self.config) for instance in instances]
        logger.debug("Serializing %d %r resources", len(nodes), self.config.type)
        resources = self.to_many(nodes)
        included: list[dict[str, Any]] = []
        for node in nodes:
            self._collect_included(node, self.config, included)
        logger.debug("Serialized %r with %d included", self.config.type, len(included))
        return self.get_document_builder().build_collection(
            resources,
            included=included,
            links=self.config.top_level_links,
            meta=self._top_level_meta(meta),
        )

    def to_resource(self, instance: Any, config: ResourceConfig | None = None) -> dict[str, Any]:
        """Serialize an object into a JSON:API resource object.

        Keys are sorted into one slot each, in this order of precedence:
        the id key, denied keys (dropped), relationships, the allow-list
        (non-listed keys dropped) and finally plain attributes.
        """
        if config is None:
            config = self.config
        node = self._require_object(instance, config)
        resource_id = self._get_id(node, config)

        attributes: dict[str, Any] = {}
        relationships: dict[str, Any] = {}
        for key, value in node.items():
            if key == config.id_key or key in config.deny:
                continue
            relation_config = config.relationship(key)
            if relation_config is not None:
                linkage = self._linkage(value, relation_config)
                if linkage is not None:
                    relationships[relation_config.key or key] = {"data": linkage}
                continue
            if config.allow and key not in config.allow:
                continue
            attributes[key] = shallow_copy(value)

        resource: dict[str, Any] = {
            "id": resource_id,
            "type": config.type,
            "attributes": attributes,
            "relationships": relationships,
        }
        if config.links_for is not None:
            resource["links"] = config.links_for(node)
        return resource

    def to_many(
        self, instances: Iterable[Any], config: ResourceConfig | None = None
    ) -> list[dict[str, Any]]:
        """Serialize a collection of objects."""
        return [self.to_resource(instance, config) for instance in instances]

    def included_for(
        self, instance: Any, config: ResourceConfig | None = None
    ) -> list[dict[str, Any]]:
        """Return the related resource objects reachable from ``instance``.

        Resources are listed depth first, each parent before its children.
        Nothing is deduplicated.
        """
        included: list[dict[str, Any]] = []
        self._collect_included(instance, self.config if config is None else config, included)
        return included

    def _collect_included(
        self, instance: Any, config: ResourceConfig, included: list[dict[str, Any]]
    ) -> None:
        node = self._require_object(instance, config)
        for key, value in node.items():
            relation_config = config.relationship(key)
            if relation_config is None or key in config.deny:
                continue
            related = as_object(value)
            if related is not None:
                included.append(self.to_resource(related, relation_config))
                self._collect_included(related, relation_config, included)
            elif is_array(value):
                # Each element is re-entered wrapped under the same key, so it is
                # resolved through this config's relationship on the next pass.
                for item in value:
                    self._collect_included({key: item}, config, included)

    def _linkage(self, value: Any, config: ResourceConfig) -> Any:
        """Return the relationship ``data`` for ``value``, or None to skip it."""
        related = as_object(value)
        if related is not None:
            return self._identifier(related, config)
        if is_array(value):
            return [self._identifier(self._require_object(item, config), config) for item in value]
        if is_string(value):
            return self._identifier({config.id_key: value}, config)
        return None

    def _identifier(self, node: Mapping[str, Any], config: ResourceConfig) -> dict[str, Any]:
        return {"id": self._get_id(node, config), "type": config.type}

    def _get_id(self, node: Mapping[str, Any], config: ResourceConfig) -> Any:
        if config.id_key not in node:
            logger.debug("No %r key in %r object", config.id_key, config.type)
            raise MissingIdError(config.id_key, node, config)
        return node[config.id_key]

    def _require_object(self, value: Any, config: ResourceConfig) -> Mapping[str, Any]:
        node = as_object(value)
        if node is None:
            logger.debug("Expected an object for %r, got %s", config.type, type(value).__name__)
            raise InvalidShapeError(value, config)
        return node

    def _top_level_meta(self, meta: Any) -> Any:
        return self.config.top_level_meta if meta is None else meta
