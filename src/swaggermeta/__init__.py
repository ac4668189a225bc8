"""swaggermeta — Swagger 2.0 request metadata: route matching and parameter resolution.

All public types are exported from this module for flat imports:

    from swaggermeta import RouteTable, SwaggerMetadata, resolve_parameters
"""

__version__ = "0.1.0"

# Description and option types — see swaggermeta._config for details
from swaggermeta._config import (
    DEFAULT_OPTIONS,
    MAX_TEMPLATE_LENGTH,
    Description,
    MatchOptions,
    Operation,
    ParameterDeclaration,
    PathItem,
    parse_description,
)

# Errors
from swaggermeta._errors import (
    ConfigurationError,
    DescriptionError,
    SwaggerMetadataError,
    TemplateError,
)

# Per-request metadata
from swaggermeta._metadata import RequestMetadata, SwaggerMetadata, metadata_for

# Parameter resolution
from swaggermeta._resolver import (
    ResolvedParameter,
    merge_declarations,
    resolve_parameters,
)

# Route table and matching
from swaggermeta._route_table import NO_MATCH, RouteEntry, RouteMatch, RouteTable

# Template compilation
from swaggermeta._template import CompiledPattern, compile_path_template, join_base_path
from swaggermeta._types import HTTP_METHODS, ParameterLocation, SwaggerRequest

__all__ = [
    # Protocols and enums
    "SwaggerRequest",
    "ParameterLocation",
    "HTTP_METHODS",
    # Description types
    "Description",
    "PathItem",
    "Operation",
    "ParameterDeclaration",
    "parse_description",
    # Options
    "MatchOptions",
    "DEFAULT_OPTIONS",
    "MAX_TEMPLATE_LENGTH",
    # Templates
    "CompiledPattern",
    "compile_path_template",
    "join_base_path",
    # Routing
    "RouteEntry",
    "RouteMatch",
    "RouteTable",
    "NO_MATCH",
    # Resolution
    "ResolvedParameter",
    "merge_declarations",
    "resolve_parameters",
    # Metadata
    "RequestMetadata",
    "SwaggerMetadata",
    "metadata_for",
    # Errors
    "SwaggerMetadataError",
    "DescriptionError",
    "TemplateError",
    "ConfigurationError",
]
