"""HttpRequest — Simple HTTP request context for metadata resolution.

Holds method, path (without query string or fragment), headers
(case-insensitive), and the parsed query and body, if any.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import unquote_plus


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context for metadata resolution.

    ``query`` and ``body`` stay None until something parses them. The
    resolver refuses to read a None query or body rather than treating it
    as empty.

    Headers are stored with lowercased keys for case-insensitive lookup.
    """

    method: str = "GET"
    path: str = "/"
    headers: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] | None = None
    body: Any = None

    # Computed field: headers keyed by lowercased name
    _lower_headers: dict[str, Any] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_lower_headers",
            {k.lower(): v for k, v in self.headers.items()},
        )

    @classmethod
    def from_raw(
        cls,
        method: str,
        raw_path: str,
        headers: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> HttpRequest:
        """Build a request from a path as it appears on the wire.

        The fragment is dropped, the query string is split off and parsed.
        """
        path = raw_path.split("#", 1)[0]
        query_string = ""
        if "?" in path:
            path, query_string = path.split("?", 1)
        return cls(
            method=method,
            path=path or "/",
            headers=dict(headers or {}),
            query=parse_query_string(query_string),
            body=body,
        )

    def header(self, name: str) -> Any:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())


def parse_query_string(query_string: str) -> dict[str, str]:
    """Parse ``a=1&b=2`` into a dict.

    Bare keys map to ``""``. The first occurrence of a repeated key wins.
    """
    params: dict[str, str] = {}
    for part in query_string.split("&"):
        if not part:
            continue
        if "=" in part:
            k, v = part.split("=", 1)
        else:
            k, v = part, ""
        params.setdefault(unquote_plus(k), unquote_plus(v))
    return params
