"""Description and option types for route table construction.

The description arrives as an already-loaded mapping (JSON/YAML shape of a
Swagger 2.0 document). Loading path:
  dict → parse_description() → Description → RouteTable.build() → RouteTable

Relationship to runtime types:

| Config type           | Runtime type     |
|-----------------------|------------------|
| Description           | RouteTable       |
| PathItem              | RouteEntry       |
| Operation             | Operation        |
| ParameterDeclaration  | ResolvedParameter|

Only the shape this library reads is checked here. Full structural
validation of the document is somebody else's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from swaggermeta._errors import DescriptionError
from swaggermeta._types import HTTP_METHODS, ParameterLocation

MAX_TEMPLATE_LENGTH = 8192

# ═══════════════════════════════════════════════════════════════════════════════
# Options
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """How compiled path patterns match request paths.

    - case_sensitive: literal path text must match case exactly
    - strict: a trailing ``/`` on the request path is not tolerated
    - max_template_length: longer templates are rejected at compile time
    """

    case_sensitive: bool = False
    strict: bool = False
    max_template_length: int = MAX_TEMPLATE_LENGTH


DEFAULT_OPTIONS = MatchOptions()

# ═══════════════════════════════════════════════════════════════════════════════
# Description types (frozen, built once per document)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ParameterDeclaration:
    """One declared request input.

    ``location`` is normalized when the declaration is loaded, so an absent
    or unknown ``in`` is already QUERY by the time anything resolves it.
    ``raw`` is the declaration exactly as it appears in the document.
    """

    name: str
    location: ParameterLocation
    raw: Mapping[str, Any] = field(compare=False)
    has_default: bool = False
    default: Any = None


@dataclass(frozen=True, slots=True)
class Operation:
    """The definition of one HTTP method on one path.

    Everything besides ``parameters`` is passed through opaquely in ``raw``.
    """

    method: str
    parameters: tuple[ParameterDeclaration, ...]
    raw: Mapping[str, Any] = field(compare=False)


@dataclass(frozen=True, slots=True)
class PathItem:
    """One entry of ``paths``: a template, shared declarations, operations."""

    template: str
    parameters: tuple[ParameterDeclaration, ...]
    operations: Mapping[str, Operation]
    raw: Mapping[str, Any] = field(compare=False)


@dataclass(frozen=True, slots=True)
class Description:
    """A loaded API description.

    ``paths`` preserves the document's declaration order, which is the
    order routes are tried in.
    """

    base_path: str
    paths: tuple[PathItem, ...]
    raw: Mapping[str, Any] = field(compare=False)


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (mapping → description types)
# ═══════════════════════════════════════════════════════════════════════════════


def parse_description(data: Any) -> Description:
    """Parse a loaded API description mapping.

    Raises:
        DescriptionError: If the description is absent or malformed.
    """
    if data is None:
        msg = "description is required"
        raise DescriptionError(msg)
    if not isinstance(data, Mapping):
        msg = f"description must be a mapping, got {type(data).__name__}"
        raise DescriptionError(msg)

    base_path = data.get("basePath")
    if base_path is None:
        base_path = ""
    elif not isinstance(base_path, str):
        msg = f"'basePath' must be a string, got {type(base_path).__name__}"
        raise DescriptionError(msg)

    raw_paths = data.get("paths")
    if raw_paths is None:
        raw_paths = {}
    elif not isinstance(raw_paths, Mapping):
        msg = f"'paths' must be a mapping, got {type(raw_paths).__name__}"
        raise DescriptionError(msg)

    paths = tuple(
        _parse_path_item(template, item) for template, item in raw_paths.items()
    )
    return Description(base_path=base_path, paths=paths, raw=data)


def _parse_path_item(template: Any, data: Any) -> PathItem:
    if not isinstance(template, str):
        msg = f"path template must be a string, got {type(template).__name__}"
        raise DescriptionError(msg)
    if not isinstance(data, Mapping):
        msg = f"paths[{template!r}] must be a mapping, got {type(data).__name__}"
        raise DescriptionError(msg)

    parameters = _parse_parameters(data.get("parameters"), f"paths[{template!r}]")

    operations: dict[str, Operation] = {}
    for method in HTTP_METHODS:
        raw_operation = data.get(method)
        if raw_operation is None:
            continue
        where = f"paths[{template!r}].{method}"
        if not isinstance(raw_operation, Mapping):
            msg = f"{where} must be a mapping, got {type(raw_operation).__name__}"
            raise DescriptionError(msg)
        operations[method] = Operation(
            method=method,
            parameters=_parse_parameters(raw_operation.get("parameters"), where),
            raw=raw_operation,
        )

    return PathItem(
        template=template,
        parameters=parameters,
        operations=MappingProxyType(operations),
        raw=data,
    )


def _parse_parameters(data: Any, where: str) -> tuple[ParameterDeclaration, ...]:
    if data is None:
        return ()
    if not isinstance(data, list | tuple):
        msg = f"{where}.parameters must be a list, got {type(data).__name__}"
        raise DescriptionError(msg)
    return tuple(
        _parse_parameter(p, f"{where}.parameters[{i}]") for i, p in enumerate(data)
    )


def _parse_parameter(data: Any, where: str) -> ParameterDeclaration:
    if not isinstance(data, Mapping):
        msg = f"{where} must be a mapping, got {type(data).__name__}"
        raise DescriptionError(msg)

    name = data.get("name")
    if not isinstance(name, str):
        msg = f"{where} missing required string field 'name'"
        raise DescriptionError(msg)

    has_default = False
    default = None
    schema = data.get("schema")
    if isinstance(schema, Mapping) and "default" in schema:
        has_default = True
        default = schema["default"]

    return ParameterDeclaration(
        name=name,
        location=ParameterLocation.normalize(data.get("in")),
        raw=data,
        has_default=has_default,
        default=default,
    )
