"""JSON:API rendering of proxy records for the Ember client."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Protocol, Union

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class Resource(Protocol):
    resource_type: str

    @property
    def resource_id(self) -> str: ...

    def attributes(self) -> Dict[str, str]: ...


def resource_object(record: Resource) -> Dict[str, Any]:
    return {
        "type": record.resource_type,
        "id": record.resource_id,
        "attributes": record.attributes(),
    }


def to_document(payload: Union[Resource, Iterable[Resource]]) -> Dict[str, Any]:
    """Wrap one record or a collection in a top-level ``data`` document."""

    if hasattr(payload, "resource_type"):
        return {"data": resource_object(payload)}  # type: ignore[arg-type]
    return {"data": [resource_object(record) for record in payload]}  # type: ignore[union-attr]
