"""Builder: assembles one clean OpenAPI document per subsection."""

import re

import click
from pydantic import BaseModel

from openapi_splitter.parser.openapi import HTTP_METHODS
from openapi_splitter.pipeline.classifier import ClassifiedEndpoint
from openapi_splitter.pipeline.sanitizer import clean_examples
from openapi_splitter.rules.ruleset import RuleSet

OPENAPI_VERSION = "3.0.1"
DOC_VERSION = "1.0.0"

SUMMARY_VERBS = {
    "get": "Get",
    "post": "Create",
    "put": "Update",
    "delete": "Delete",
    "patch": "Patch",
}

DEFAULT_RESPONSES = {
    "200": {"description": "Successful operation"},
    "400": {"description": "Bad Request"},
    "401": {"description": "Unauthorized"},
    "500": {"description": "Internal Server Error"},
}

_COPY_SUFFIX = re.compile(r"\s*\(COPY\)\s*$", re.IGNORECASE)
_REPEATED_SLASH = re.compile(r"(?<!:)//+")


class UnknownSubsectionError(KeyError):
    """Raised when building a subsection id the rule set does not define."""


class BuiltSpec(BaseModel):
    """A finished per-subsection OpenAPI document."""

    subsection_id: str
    filename: str  # {subsection_id}.yaml
    spec: dict
    endpoint_count: int


def normalize_path(path: str) -> str:
    """Clean up a path key copied out of a source spec.

    Forces a leading '/', then drops an embedded query string, one trailing
    '#', a ' (COPY)' suffix and stray whitespace, and collapses repeated
    slashes.
    """
    normalized = path.strip()
    if not normalized.startswith("/"):
        normalized = "/" + normalized

    q = normalized.find("?")
    if q != -1:
        normalized = normalized[:q]

    if normalized.endswith("#"):
        normalized = normalized[:-1]

    normalized = _COPY_SUFFIX.sub("", normalized)
    normalized = normalized.rstrip()

    return _REPEATED_SLASH.sub("/", normalized)


def is_placeholder_path(path: str, placeholder_token: str) -> bool:
    return placeholder_token in path or path == "/"


def generate_summary(path: str, method: str) -> str:
    verb = SUMMARY_VERBS.get(method, method.upper())
    segments = [s for s in path.split("/") if s and not s.startswith("{")]
    if segments:
        return f"{verb} {segments[-1]}"
    return f"{verb} {path}"


def generate_operation_id(path: str, method: str) -> str:
    segments = [
        re.sub(r"[^a-zA-Z0-9]", "_", s.replace("{", "").replace("}", ""))
        for s in path.split("/")
        if s
    ]
    return f"{method}_{'_'.join(segments)}"


def clean_operation(operation: dict, path: str, method: str) -> dict:
    """Return the output form of one operation, with examples redacted."""
    cleaned: dict = {"summary": operation.get("summary") or generate_summary(path, method)}

    description = operation.get("description")
    if description and description != f"Endpoint for {method.upper()} {path}":
        cleaned["description"] = description

    cleaned["operationId"] = operation.get("operationId") or generate_operation_id(path, method)

    parameters = operation.get("parameters")
    if isinstance(parameters, list):
        params = [p for p in parameters if isinstance(p, dict) and p.get("name") and p.get("in")]
        if params:
            cleaned["parameters"] = [clean_examples(p) for p in params]

    if operation.get("requestBody"):
        cleaned["requestBody"] = clean_examples(operation["requestBody"])

    if operation.get("responses"):
        cleaned["responses"] = clean_examples(operation["responses"])
    else:
        cleaned["responses"] = {code: dict(resp) for code, resp in DEFAULT_RESPONSES.items()}

    # an explicit empty list opts the operation out of the document-level auth
    if "security" in operation:
        cleaned["security"] = operation["security"]

    if isinstance(operation.get("tags"), list):
        cleaned["tags"] = operation["tags"]

    return cleaned


def count_endpoints(paths: dict) -> int:
    """Number of HTTP-verb entries across all path items."""
    return sum(1 for item in paths.values() for key in item if key in HTTP_METHODS)


class Builder:
    """Builds per-subsection OpenAPI documents from classified endpoints."""

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set

    def build_subsection(self, subsection_id: str, endpoints: list[ClassifiedEndpoint]) -> BuiltSpec:
        definition = self.rule_set.subsections.get(subsection_id)
        if definition is None:
            raise UnknownSubsectionError(subsection_id)

        paths: dict[str, dict] = {}
        for ep in endpoints:
            path = normalize_path(ep.path)
            if is_placeholder_path(path, self.rule_set.placeholder_path_token):
                continue
            # later endpoints win when two raw paths normalize to the same key
            paths.setdefault(path, {})[ep.method] = clean_operation(ep.operation, path, ep.method)

        spec = {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": definition.title,
                "description": definition.description,
                "version": DOC_VERSION,
            },
            "servers": [
                {
                    "url": "https://{host}" + definition.server_base,
                    "variables": {
                        "host": {
                            "default": self.rule_set.server_host,
                            "description": "API host",
                        },
                    },
                },
            ],
            "paths": paths,
            "components": {
                "securitySchemes": {
                    "basicAuth": {"type": "http", "scheme": "basic"},
                    "bearerAuth": {"type": "http", "scheme": "bearer"},
                    "oauthToken": {
                        "type": "apiKey",
                        "in": "header",
                        "name": self.rule_set.api_key_header,
                    },
                },
            },
            "security": [{"basicAuth": []}],
        }

        return BuiltSpec(
            subsection_id=subsection_id,
            filename=f"{subsection_id}.yaml",
            spec=spec,
            endpoint_count=count_endpoints(paths),
        )

    def build_all(self, grouped: dict[str, list[ClassifiedEndpoint]]) -> list[BuiltSpec]:
        """Build every non-empty subsection, sorted by subsection id.

        Unknown ids and documents that end up with no endpoints are skipped
        with a warning; the rest of the batch still builds.
        """
        results = []
        for subsection_id, endpoints in grouped.items():
            if not endpoints:
                continue
            try:
                built = self.build_subsection(subsection_id, endpoints)
            except UnknownSubsectionError:
                click.echo(f"Warning: skipping unknown subsection '{subsection_id}'", err=True)
                continue
            if built.endpoint_count == 0:
                click.echo(f"Warning: skipping '{subsection_id}', no endpoints left after cleanup", err=True)
                continue
            results.append(built)

        results.sort(key=lambda b: b.subsection_id)
        return results
