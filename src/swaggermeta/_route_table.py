"""RouteTable — compiled path templates with first-declared-wins matching.

Built once per description, immutable afterwards:
- Entries are kept in an explicit tuple in declaration order
- match() walks the tuple and stops at the first pattern that matches
- A matching path with an undeclared method is a result, not an error

INV: first-match-wins. Later entries are never consulted once one matches,
even when several templates overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from swaggermeta._config import (
    DEFAULT_OPTIONS,
    Description,
    MatchOptions,
    Operation,
    ParameterDeclaration,
    parse_description,
)
from swaggermeta._template import CompiledPattern, compile_path_template

logger = logging.getLogger("swaggermeta.routing")


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One declared path: its compiled pattern, shared declarations, operations."""

    template: str
    pattern: CompiledPattern
    parameters: tuple[ParameterDeclaration, ...]
    operations: Mapping[str, Operation]
    path_item: Mapping[str, Any]

    @property
    def slots(self) -> tuple[str, ...]:
        """Capture slot names, in template order."""
        return self.pattern.slots

    def operation(self, method: str) -> Operation | None:
        """Return the operation for *method* (case-insensitive), if declared."""
        return self.operations.get(method.lower())


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of matching one request against a RouteTable.

    - No route: ``route`` and ``operation`` are None, ``captures`` is empty
    - Route but undeclared method: ``operation`` is None
    """

    route: RouteEntry | None = None
    operation: Operation | None = None
    captures: tuple[str, ...] = ()

    @property
    def matched(self) -> bool:
        """True when both a route and an operation were found."""
        return self.route is not None and self.operation is not None

    def path_params(self) -> dict[str, str]:
        """Captured values keyed by slot name."""
        if self.route is None:
            return {}
        return dict(zip(self.route.slots, self.captures, strict=True))


NO_MATCH = RouteMatch()


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Immutable, ordered table of compiled routes.

    Usage::

        table = RouteTable.build({"basePath": "/v1", "paths": {...}})
        result = table.match("/v1/pets/42", "GET")
    """

    entries: tuple[RouteEntry, ...]
    description: Description
    options: MatchOptions = DEFAULT_OPTIONS

    @classmethod
    def build(
        cls,
        description: Description | Mapping[str, Any],
        options: MatchOptions = DEFAULT_OPTIONS,
    ) -> RouteTable:
        """Compile every declared path, in declaration order.

        Raises:
            DescriptionError: If *description* is a malformed mapping.
            TemplateError: If any path template cannot be compiled. No
                table is produced in that case.
        """
        if not isinstance(description, Description):
            description = parse_description(description)

        entries = tuple(
            RouteEntry(
                template=item.template,
                pattern=compile_path_template(description.base_path, item.template, options),
                parameters=item.parameters,
                operations=item.operations,
                path_item=item.raw,
            )
            for item in description.paths
        )
        logger.debug(
            "Built route table with %d routes (basePath=%r)",
            len(entries),
            description.base_path,
        )
        return cls(entries=entries, description=description, options=options)

    def match(self, request_path: str, request_method: str) -> RouteMatch:
        """Find the first route whose pattern matches *request_path*.

        *request_path* must already be stripped of query string and fragment.
        """
        for entry in self.entries:
            captures = entry.pattern.match(request_path)
            if captures is None:
                continue
            operation = entry.operation(request_method)
            if operation is None:
                logger.debug(
                    "No %s operation declared for %s", request_method.upper(), entry.template
                )
            return RouteMatch(route=entry, operation=operation, captures=captures)

        logger.debug("No route matches %r", request_path)
        return NO_MATCH

    def templates(self) -> list[str]:
        """Return the declared templates in match order."""
        return [entry.template for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.entries)
