"""Core protocols, enums, and type aliases for swaggermeta.

- ParameterLocation is the closed set of places a parameter value comes from
- SwaggerRequest is the request-side port the resolver reads from
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

# Operation keys of a path item, in the order Swagger 2.0 lists them.
HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch")


class ParameterLocation(StrEnum):
    """Where a declared parameter's value lives in the request."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    FORM_DATA = "formData"

    @classmethod
    def normalize(cls, value: object) -> ParameterLocation:
        """Map a raw ``in`` value to a location. Absent or unknown -> QUERY."""
        try:
            return cls(value)
        except ValueError:
            return cls.QUERY


@runtime_checkable
class SwaggerRequest(Protocol):
    """A request whose path, query, headers, and body are already parsed.

    ``query`` and ``body`` are None when the hosting pipeline never parsed
    them. That is different from an empty mapping, which means "parsed,
    nothing there".
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def query(self) -> Mapping[str, Any] | None: ...

    @property
    def body(self) -> Any: ...

    def header(self, name: str) -> Any: ...
