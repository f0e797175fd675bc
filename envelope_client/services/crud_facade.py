"""CRUD Facade: name-addressed create/list/update/remove on top of the pipeline.

Invariants:
    - A falsy resource name raises ResourceNameError before any request is made
    - Empty inputs short-circuit to {} without network activity
    - Err results and TransportError degrade to {} ({"list": []} for list()),
      logged, never raised
    - list() results always carry a list under "list"
    - one()/by_id()/get_param()/get_dict() return a row or {}, never None

Design Decisions:
    - Degrading instead of raising keeps screen code free of try/except;
      callers needing the failure detail use RequestPipeline directly
"""

import logging
from typing import Any, Mapping

import httpx

from envelope_client.config import ClientConfig
from envelope_client.core.errors import ErrorContext, ResourceNameError, TransportError
from envelope_client.core.query import (
    first_item,
    id_query,
    is_empty,
    lookup_condition,
    lookup_query,
    normalize_list_result,
    serialize_list_query,
)
from envelope_client.core.result import Result
from envelope_client.core.urls import model_url
from envelope_client.services.request_pipeline import RequestPipeline

logger = logging.getLogger(__name__)

PARAM_RESOURCE = "param"
DICT_RESOURCE = "dict"


class CrudFacade:
    """Resource-level convenience calls: create, remove, update, list, one, by_id."""

    def __init__(self, config: ClientConfig, pipeline: RequestPipeline):
        self.config = config
        self.pipeline = pipeline

    def _url(self, name: str | None) -> str:
        if not name:
            raise ResourceNameError(name, ErrorContext(resource=name))
        return model_url(name)

    def _degrade(self, result: Result, name: str, fallback: Any) -> Any:
        if result.ok:
            return result.data
        logger.warning(
            f"{name}: request failed ({result.reason.value})",
            extra={"resource": name, "reason": result.reason.value},
        )
        return fallback

    def _transport_failed(self, name: str, error: TransportError) -> None:
        logger.error(
            f"{name}: {error.message}",
            extra={"resource": name, "error_code": error.code},
        )

    async def create(self, name: str, data: Any) -> Any:
        url = self._url(name)
        if is_empty(data):
            return {}
        scalar = not isinstance(data, list)
        rows = [data] if scalar else data
        try:
            result = await self.pipeline.post(url, rows)
        except TransportError as e:
            self._transport_failed(name, e)
            return {}
        created = self._degrade(result, name, {})
        if not result.ok or not scalar:
            return created
        if isinstance(created, list) and created:
            return created[0]
        return created

    async def remove(
        self, name: str, cond: Mapping[str, Any] | None,
        multi: bool = False, unsoft: bool = False,
    ) -> Any:
        url = self._url(name)
        if is_empty(cond):
            return {}
        try:
            result = await self.pipeline.delete(
                url, {"cond": cond, "multi": multi, "unsoft": unsoft},
            )
        except TransportError as e:
            self._transport_failed(name, e)
            return {}
        return self._degrade(result, name, {})

    async def update(
        self, name: str, cond: Mapping[str, Any] | None,
        doc: Mapping[str, Any] | None, multi: bool = False,
    ) -> Any:
        url = self._url(name)
        if is_empty(cond) or is_empty(doc):
            return {}
        try:
            result = await self.pipeline.put(
                url, {"cond": cond, "doc": doc, "multi": multi},
            )
        except TransportError as e:
            self._transport_failed(name, e)
            return {}
        return self._degrade(result, name, {})

    async def list(self, name: str, query: Mapping[str, Any] | None = None) -> dict[str, Any]:
        url = self._url(name)
        params = serialize_list_query(query)
        if params:
            url = f"{url}?{httpx.QueryParams(params)}"
        try:
            result = await self.pipeline.get(url)
        except TransportError as e:
            self._transport_failed(name, e)
            return {"list": []}
        return normalize_list_result(self._degrade(result, name, {}))

    async def one(self, name: str, query: Mapping[str, Any] | None = None) -> Any:
        return first_item(await self.list(name, query))

    async def by_id(
        self, name: str, id_value: Any, query: Mapping[str, Any] | None = None,
    ) -> Any:
        return first_item(await self.list(name, id_query(self.config.id_key, id_value, query)))

    async def _lookup(self, resource: str, code_or_object: Any) -> Any:
        cond = lookup_condition(code_or_object)
        if not cond:
            logger.error(
                f"{resource}: lookup condition can not be empty",
                extra={"resource": resource},
            )
            return {}
        return first_item(await self.list(resource, lookup_query(cond)))

    async def get_param(self, code_or_object: Any) -> Any:
        """Latest `param` row matching a code or condition mapping."""
        return await self._lookup(PARAM_RESOURCE, code_or_object)

    async def get_dict(self, code_or_object: Any) -> Any:
        """Latest `dict` row matching a code or condition mapping."""
        return await self._lookup(DICT_RESOURCE, code_or_object)
