"""Conformance fixture loader for swaggermeta.

Loads YAML fixtures from tests/fixtures/ and converts each case into a
description, an HttpRequest, and the expected outcome, for parametrized
testing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from swaggermeta.http import HttpRequest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single request case from a conformance fixture."""

    fixture_name: str
    case_name: str
    description: dict[str, Any]
    request: HttpRequest
    expect: dict[str, Any] | None
    expect_error: str | None

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


# ─── YAML → swaggermeta type conversion ─────────────────────────────────────


def parse_request(spec: dict[str, Any]) -> HttpRequest:
    """Build an HttpRequest from a fixture request spec.

    ``raw_path`` goes through HttpRequest.from_raw (query parsed);
    ``path`` builds the request directly, leaving query and body unparsed
    unless the spec supplies them.
    """
    method = spec.get("method", "GET")
    headers = spec.get("headers") or {}
    if "raw_path" in spec:
        return HttpRequest.from_raw(method, spec["raw_path"], headers, spec.get("body"))
    return HttpRequest(
        method=method,
        path=spec["path"],
        headers=headers,
        query=spec.get("query"),
        body=spec.get("body"),
    )


def _load_file(path: Path) -> list[FixtureCase]:
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc.get("cases", []):
                cases.append(
                    FixtureCase(
                        fixture_name=f"{path.stem}/{doc['name']}",
                        case_name=case["name"],
                        description=doc["description"],
                        request=parse_request(case["request"]),
                        expect=case.get("expect"),
                        expect_error=case.get("expect_error"),
                    )
                )
    return cases


def load_fixture_cases() -> list[FixtureCase]:
    """Load every case from every fixture file, in file order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def petstore() -> dict[str, Any]:
    """The /v1/pets/{petId} description used across unit tests."""
    return {
        "swagger": "2.0",
        "basePath": "/v1",
        "paths": {
            "/pets": {
                "get": {
                    "operationId": "listPets",
                    "parameters": [
                        {"name": "limit", "in": "query", "schema": {"default": "20"}},
                    ],
                },
                "post": {
                    "operationId": "createPet",
                    "parameters": [{"name": "pet", "in": "body"}],
                },
            },
            "/pets/{petId}": {
                "parameters": [{"name": "petId", "in": "path", "required": True}],
                "get": {"operationId": "getPet"},
            },
        },
    }
