"""Path template compilation — ``{name}`` templates to RE2 patterns.

A template is joined with the description's base path, every ``{name}``
placeholder becomes one capture group, and all other text is matched
literally.

Patterns are compiled with ``google-re2`` for guaranteed linear-time
matching, the same engine the string matchers use.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import re2

from swaggermeta._config import DEFAULT_OPTIONS, MatchOptions
from swaggermeta._errors import TemplateError

# A slot matches one segment: at least one character, never a '/'.
SLOT_PATTERN = r"([^/]+?)"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A compiled path template.

    ``slots[i]`` names capture group ``i + 1``. The two are built together
    so their counts always agree. A name may repeat; each occurrence keeps
    its own group.
    """

    path: str
    slots: tuple[str, ...]
    regex: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.regex)
        except re2.error as e:
            raise TemplateError(self.path, str(e)) from e
        object.__setattr__(self, "_compiled", compiled)

    def match(self, request_path: str) -> tuple[str, ...] | None:
        """Return the captured values if *request_path* matches, else None."""
        m = self._compiled.search(request_path)
        if m is None:
            return None
        return tuple(m.groups())


def join_base_path(base_path: str, template: str) -> str:
    """Prefix *template* with *base_path* the way Express-style routers do.

    The base path defaults to ``/`` and always ends up with exactly one
    leading and one joining ``/``::

        join_base_path("/v1", "/pets/{id}")  -> "/v1/pets/{id}"
        join_base_path("", "/pets")          -> "/pets"
        join_base_path("api", "pets")        -> "/api/pets"
    """
    base = base_path.split("?", 1)[0].split("#", 1)[0] or "/"
    if not base.startswith("/"):
        base = "/" + base
    if not base.endswith("/"):
        base += "/"
    if template.startswith("/"):
        template = template[1:]
    return base + template


def compile_path_template(
    base_path: str,
    template: str,
    options: MatchOptions = DEFAULT_OPTIONS,
) -> CompiledPattern:
    """Compile a path template into a CompiledPattern.

    Raises:
        TemplateError: If the template has malformed placeholders, the
            joined base path and template are too long, or RE2 refuses the
            resulting pattern.
    """
    path = join_base_path(base_path, template)
    if len(path) > options.max_template_length:
        reason = f"length {len(path)} exceeds maximum {options.max_template_length}"
        raise TemplateError(template, reason)

    match_path = path
    if not options.strict and path.endswith("/"):
        # Non-strict patterns add their own optional trailing slash.
        match_path = path[:-1]
    parts, slots = _tokenize(match_path, template)

    body = "".join(parts)
    if not options.strict:
        body += "/?"

    flags = "" if options.case_sensitive else "(?i)"
    return CompiledPattern(path=path, slots=tuple(slots), regex=f"{flags}^{body}$")


def _tokenize(path: str, template: str) -> tuple[list[str], list[str]]:
    """Split *path* into escaped literal chunks and slot patterns."""
    parts: list[str] = []
    slots: list[str] = []
    literal_start = 0
    pos = 0

    while pos < len(path):
        char = path[pos]
        if char == "}":
            raise TemplateError(template, f"unbalanced '}}' at offset {pos}")
        if char != "{":
            pos += 1
            continue

        close = path.find("}", pos + 1)
        if close == -1:
            raise TemplateError(template, f"unbalanced '{{' at offset {pos}")
        name = path[pos + 1 : close]
        if "{" in name:
            raise TemplateError(template, "nested placeholders are not supported")
        if not name:
            raise TemplateError(template, "empty placeholder name")
        if "/" in name:
            raise TemplateError(template, f"placeholder {name!r} contains '/'")

        if literal_start < pos:
            parts.append(re2.escape(path[literal_start:pos]))
        parts.append(SLOT_PATTERN)
        slots.append(name)
        pos = close + 1
        literal_start = pos

    if literal_start < len(path):
        parts.append(re2.escape(path[literal_start:]))
    return parts, slots
