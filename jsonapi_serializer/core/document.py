"""JSON:API envelope construction."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from jsonapi_serializer.utils.values import thaw

JSONAPI_VERSION = "1.0"


class JSONAPIDocumentBuilder:
    """Assemble JSON:API v1.0 top-level documents from resource objects."""

    def build_single(
        self,
        resource: Mapping[str, Any],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Any = None,
        meta: Any = None,
    ) -> dict[str, Any]:
        """Return a document whose primary data is a single resource object."""
        return self._build(dict(resource), included=included, links=links, meta=meta)

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Any = None,
        meta: Any = None,
    ) -> dict[str, Any]:
        """Return a document whose primary data is an array of resource objects."""
        data = [dict(item) for item in resources]
        return self._build(data, included=included, links=links, meta=meta)

    def _build(
        self,
        data: Any,
        *,
        included: Iterable[Mapping[str, Any]] | None,
        links: Any,
        meta: Any,
    ) -> dict[str, Any]:
        # links and meta usually come from a frozen config; callers get mutable copies.
        document: dict[str, Any] = {
            "data": data,
            "meta": thaw(meta),
            "links": thaw(links),
            "jsonapi": {"version": JSONAPI_VERSION},
        }
        included = [dict(item) for item in included or ()]
        if included:
            document["included"] = included
        return document
