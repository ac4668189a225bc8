"""Parameter resolution — declarations + request data → raw values.

Declarations come from two scopes: the path item (shared by every
operation) and the operation itself. They are merged by name with
first-write-wins, shared scope first, so a path-level declaration is never
overridden by an operation-level one of the same name.

Values are extracted as-is. No coercion and no schema validation happen
here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from swaggermeta._errors import ConfigurationError
from swaggermeta._types import ParameterLocation

if TYPE_CHECKING:
    from swaggermeta._config import Operation, ParameterDeclaration
    from swaggermeta._route_table import RouteEntry
    from swaggermeta._types import SwaggerRequest

# Marks a value the request does not carry, as opposed to an explicit null.
_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class ResolvedParameter:
    """A declared parameter and the value found for it.

    ``schema`` is the declaration as written in the description; ``value``
    is None when the request carried nothing and no default applied. An
    explicit null in the request is kept as None and never replaced by the
    default.
    """

    schema: Mapping[str, Any]
    value: Any


def merge_declarations(
    shared: tuple[ParameterDeclaration, ...],
    own: tuple[ParameterDeclaration, ...],
) -> dict[str, ParameterDeclaration]:
    """Merge two declaration scopes by name, first write wins.

    Within one scope the first declaration of a name also wins.
    """
    merged: dict[str, ParameterDeclaration] = {}
    for declaration in (*shared, *own):
        merged.setdefault(declaration.name, declaration)
    return merged


def resolve_parameters(
    route: RouteEntry,
    operation: Operation,
    captures: tuple[str, ...],
    request: SwaggerRequest,
) -> Mapping[str, ResolvedParameter]:
    """Resolve every declared parameter of *operation* on *route*.

    Raises:
        ConfigurationError: If a query declaration meets a request with no
            parsed query, or a body/formData declaration meets a request with
            no parsed body. Nothing is returned for the request then.
    """
    params: dict[str, ResolvedParameter] = {}
    for name, declaration in merge_declarations(route.parameters, operation.parameters).items():
        value = _extract(declaration, route.slots, captures, request)
        if value is _MISSING:
            value = declaration.default if declaration.has_default else None
        params[name] = ResolvedParameter(schema=declaration.raw, value=value)
    return MappingProxyType(params)


def _extract(
    declaration: ParameterDeclaration,
    slots: tuple[str, ...],
    captures: tuple[str, ...],
    request: SwaggerRequest,
) -> Any:
    """Pull the raw value for one declaration out of the request.

    Returns _MISSING when the request has no value at all. When a template
    repeats a slot name, the last capture wins.
    """
    name = declaration.name
    match declaration.location:
        case ParameterLocation.PATH:
            value = _MISSING
            for slot, captured in zip(slots, captures, strict=False):
                if slot == name:
                    value = captured
            return value
        case ParameterLocation.HEADER:
            header = request.header(name)
            return _MISSING if header is None else header
        case ParameterLocation.BODY | ParameterLocation.FORM_DATA:
            body = request.body
            if body is None:
                raise ConfigurationError(name, declaration.location, "body")
            if not isinstance(body, Mapping):
                return _MISSING
            return body.get(name, _MISSING)
        case ParameterLocation.QUERY:
            query = request.query
            if query is None:
                raise ConfigurationError(name, declaration.location, "query")
            return query.get(name, _MISSING)
        case _:  # pragma: no cover
            msg = f"unknown parameter location: {declaration.location!r}"
            raise ValueError(msg)
