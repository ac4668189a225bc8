"""SwaggerMetadata — per-request metadata over an owned RouteTable.

The facade owns exactly one RouteTable at a time. Reloading builds a
complete replacement first and then swaps the reference in a single
assignment, so a request that already picked up the old table finishes
against it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from swaggermeta._config import DEFAULT_OPTIONS, MatchOptions
from swaggermeta._resolver import ResolvedParameter, resolve_parameters
from swaggermeta._route_table import RouteMatch, RouteTable

if TYPE_CHECKING:
    from swaggermeta._config import Operation
    from swaggermeta._types import SwaggerRequest

logger = logging.getLogger("swaggermeta")


@dataclass(frozen=True, slots=True)
class RequestMetadata:
    """What the description says about one request.

    - path: the matched path item as declared, or None
    - operation: the matched Operation, or None
    - params: parameter name -> ResolvedParameter
    - description: the whole description mapping (shared, never mutated)
    """

    path: Mapping[str, Any] | None
    operation: Operation | None
    params: Mapping[str, ResolvedParameter] = field(
        default_factory=lambda: MappingProxyType({})
    )
    description: Mapping[str, Any] | None = None


def metadata_for(table: RouteTable, request: SwaggerRequest) -> RequestMetadata:
    """Match *request* against *table* and resolve its parameters.

    Always returns a record. Parameters are only resolved when an
    operation matched; otherwise ``params`` is empty.

    Raises:
        ConfigurationError: If a declared parameter needs a query or body
            the request does not carry.
    """
    return _build_metadata(table, table.match(request.path, request.method), request)


def _build_metadata(
    table: RouteTable, result: RouteMatch, request: SwaggerRequest
) -> RequestMetadata:
    description = table.description.raw
    if result.route is None or result.operation is None:
        return RequestMetadata(
            path=result.route.path_item if result.route is not None else None,
            operation=None,
            description=description,
        )

    params = resolve_parameters(result.route, result.operation, result.captures, request)
    return RequestMetadata(
        path=result.route.path_item,
        operation=result.operation,
        params=params,
        description=description,
    )


class SwaggerMetadata:
    """Owns the active RouteTable and answers per-request lookups.

    Usage::

        meta = SwaggerMetadata(description)
        record = meta.describe(HttpRequest.from_raw("GET", "/v1/pets/42"))
        if record is not None:
            pet_id = record.params["petId"].value
    """

    __slots__ = ("_options", "_table")

    def __init__(
        self,
        description: Mapping[str, Any],
        options: MatchOptions = DEFAULT_OPTIONS,
    ) -> None:
        self._options = options
        self._table = RouteTable.build(description, options)

    @property
    def table(self) -> RouteTable:
        """The route table currently in service."""
        return self._table

    @property
    def options(self) -> MatchOptions:
        return self._options

    def match(self, request: SwaggerRequest) -> RouteMatch:
        """Match *request* without resolving parameters."""
        return self._table.match(request.path, request.method)

    def describe(self, request: SwaggerRequest) -> RequestMetadata | None:
        """Build the metadata record for *request*.

        Returns None when no operation matches, which tells the caller to
        pass the request through untouched.

        Raises:
            ConfigurationError: If required query or body data is absent.
        """
        table = self._table
        result = table.match(request.path, request.method)
        if not result.matched:
            return None
        return _build_metadata(table, result, request)

    def reload(self, description: Mapping[str, Any]) -> RouteTable:
        """Replace the active table with one built from *description*.

        The old table stays in service if building the new one fails.

        Raises:
            DescriptionError: If *description* is malformed.
            TemplateError: If any template in *description* is uncompilable.
        """
        table = RouteTable.build(description, self._options)
        self._table = table
        logger.debug("Reloaded description: %d routes", len(table))
        return table
