"""swaggermeta.http — HTTP request context.

Provides HttpRequest, a concrete SwaggerRequest with raw-path splitting,
query-string parsing, and case-insensitive header lookup.
"""

from swaggermeta.http._request import HttpRequest, parse_query_string

__all__ = [
    "HttpRequest",
    "parse_query_string",
]
