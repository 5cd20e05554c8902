"""OpenAPI document parser.

Turns raw YAML/JSON text into a ParsedSpec holding one EndpointDef per
path + method. Files that are not usable specs are skipped, never raised.
"""

import copy
import json
import re
from urllib.parse import urlparse

import click
import yaml

from openapi_splitter.rules.ruleset import RuleSet, default_rule_set

from .base import EndpointDef, ParsedSpec, SourceFile
from .detect import detect_format

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options", "trace")

DEFAULT_OPENAPI_VERSION = "3.0.1"

_TEMPLATE_VAR = re.compile(r"\{[^}]+\}")


def parse_spec_file(content: str, filename: str, rule_set: RuleSet | None = None) -> ParsedSpec | None:
    """Parse one file into a ParsedSpec, or None if it is not a usable spec."""
    rule_set = rule_set or default_rule_set()

    try:
        if detect_format(filename) == "json":
            doc = json.loads(content)
        else:
            doc = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        click.echo(f"Warning: failed to parse {filename}: {e}", err=True)
        return None

    if not isinstance(doc, dict):
        return None

    paths = doc.get("paths")
    if not isinstance(paths, dict):
        return None

    info = doc.get("info") if isinstance(doc.get("info"), dict) else {}
    base_path = extract_server_base_path(doc)

    endpoints = []
    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        path = str(path)

        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue

            endpoints.append(
                EndpointDef(
                    path=path,
                    method=method,
                    operation=copy.deepcopy(operation),
                    source_file=filename,
                    full_path=_full_path(path, base_path, rule_set),
                )
            )

    components = doc.get("components")
    security = doc.get("security")
    return ParsedSpec(
        raw=doc,
        openapi_version=str(doc.get("openapi") or doc.get("swagger") or DEFAULT_OPENAPI_VERSION),
        title=str(info.get("title") or filename),
        server_base_path=base_path,
        endpoints=endpoints,
        source_file=filename,
        components=components if isinstance(components, dict) else {},
        security=security if isinstance(security, list) else [],
    )


def parse_all_files(files: list[SourceFile], rule_set: RuleSet | None = None) -> list[ParsedSpec]:
    """Parse every file in order, dropping the ones that fail."""
    rule_set = rule_set or default_rule_set()
    specs = []
    for f in files:
        spec = parse_spec_file(f.content, f.filename, rule_set)
        if spec is not None:
            specs.append(spec)
    return specs


def extract_server_base_path(doc: dict) -> str:
    """Return the path part of the first server URL, e.g. https://{host}/v2 -> /v2."""
    servers = doc.get("servers")
    if not isinstance(servers, list) or not servers:
        return ""
    first = servers[0]
    url = str(first.get("url") or "") if isinstance(first, dict) else ""

    # {host} and friends are opaque labels here, only the path matters
    cleaned = _TEMPLATE_VAR.sub("placeholder", url)
    if "://" in cleaned:
        try:
            path = urlparse(cleaned).path
        except ValueError:
            match = re.match(r"https?://[^/]+(/.*)", url)
            if not match:
                return ""
            path = _TEMPLATE_VAR.sub("", match.group(1))
        return "" if path in ("", "/") else path

    return url if url.startswith("/") else ""


def _full_path(path: str, base_path: str, rule_set: RuleSet) -> str:
    full_path = path
    if (
        base_path
        and base_path != "/"
        and not path.startswith(base_path)
        and not rule_set.namespace_regex().match(path)
    ):
        full_path = base_path + path
    if not full_path.startswith("/"):
        full_path = "/" + full_path
    return full_path
