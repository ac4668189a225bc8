"""Error types raised by swaggermeta.

An unmatched path or method is never an error; it shows up as an empty
RouteMatch instead.
"""

from __future__ import annotations


class SwaggerMetadataError(Exception):
    """Base class for all swaggermeta errors."""


class DescriptionError(SwaggerMetadataError):
    """The API description is missing or has the wrong shape."""


class TemplateError(SwaggerMetadataError):
    """A path template cannot be compiled into a matchable pattern."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"invalid path template {template!r}: {reason}")


class ConfigurationError(SwaggerMetadataError):
    """A parameter needs request data the hosting pipeline never parsed."""

    def __init__(self, parameter: str, location: str, attribute: str) -> None:
        self.parameter = parameter
        self.location = location
        self.attribute = attribute
        super().__init__(
            f"Server configuration error: request.{attribute} is not defined "
            f"but is required (parameter {parameter!r} in {location})"
        )
