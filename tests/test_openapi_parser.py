import json
from pathlib import Path

from openapi_splitter.parser.base import SourceFile
from openapi_splitter.parser.detect import detect_format, is_spec_file
from openapi_splitter.parser.openapi import extract_server_base_path, parse_all_files, parse_spec_file

FIXTURES = Path(__file__).parent / "fixtures"


def _load(name: str):
    return parse_spec_file((FIXTURES / name).read_text(encoding="utf-8"), name)


class TestDetectFormat:
    def test_json_by_extension(self):
        assert detect_format("v1.json") == "json"

    def test_everything_else_is_yaml(self):
        assert detect_format("v2.yaml") == "yaml"
        assert detect_format("v2.yml") == "yaml"
        assert detect_format("README") == "yaml"

    def test_is_spec_file(self):
        assert is_spec_file("a.JSON")
        assert is_spec_file("b.yml")
        assert not is_spec_file("notes.md")


class TestServerBasePath:
    def test_templated_host(self):
        assert extract_server_base_path({"servers": [{"url": "https://{host}/v2"}]}) == "/v2"

    def test_host_only_gives_empty(self):
        assert extract_server_base_path({"servers": [{"url": "https://{host}/"}]}) == ""
        assert extract_server_base_path({"servers": [{"url": "https://api.example.com"}]}) == ""

    def test_bare_path(self):
        assert extract_server_base_path({"servers": [{"url": "/v1.1"}]}) == "/v1.1"

    def test_relative_non_path(self):
        assert extract_server_base_path({"servers": [{"url": "v1"}]}) == ""

    def test_no_servers(self):
        assert extract_server_base_path({}) == ""
        assert extract_server_base_path({"servers": []}) == ""

    def test_only_first_server_used(self):
        doc = {"servers": [{"url": "https://a.example.com/v3"}, {"url": "https://b.example.com/v1"}]}
        assert extract_server_base_path(doc) == "/v3"


class TestParseSpecFile:
    def test_parse_json_spec(self):
        spec = _load("v1.json")
        assert spec is not None
        assert spec.title == "Customer API v1"
        assert spec.openapi_version == "3.0.1"
        assert spec.server_base_path == "/v1"
        assert [(e.method, e.path) for e in spec.endpoints] == [
            ("get", "/customers/{id}"),
            ("post", "/customers"),
        ]

    def test_full_path_gets_base_prefix(self):
        spec = _load("v1.json")
        assert spec.endpoints[0].full_path == "/v1/customers/{id}"
        assert spec.endpoints[0].source_file == "v1.json"

    def test_no_servers_keeps_raw_path(self):
        spec = _load("custom.json")
        assert spec.server_base_path == ""
        assert spec.endpoints[0].full_path == "/customers/{id}"

    def test_yaml_spec(self):
        spec = _load("v2.yaml")
        assert spec.title == "Core API v2"
        assert len(spec.endpoints) == 4
        paths = [e.full_path for e in spec.endpoints]
        assert "/v2/points/transfer (COPY)" in paths

    def test_path_already_carrying_base_is_not_doubled(self):
        doc = {"servers": [{"url": "/v2"}], "paths": {"/v2/customers": {"get": {"summary": "s"}}}}
        spec = parse_spec_file(json.dumps(doc), "a.json")
        assert spec.endpoints[0].full_path == "/v2/customers"

    def test_path_with_known_namespace_is_not_prefixed(self):
        doc = {
            "servers": [{"url": "https://{host}/v2"}],
            "paths": {
                "/v1/badges/list": {"get": {"summary": "s"}},
                "/auth/v1/token/generate": {"post": {"summary": "s"}},
                "/mobile/v2/marvel/rewards": {"get": {"summary": "s"}},
            },
        }
        spec = parse_spec_file(json.dumps(doc), "a.json")
        assert [e.full_path for e in spec.endpoints] == [
            "/v1/badges/list",
            "/auth/v1/token/generate",
            "/mobile/v2/marvel/rewards",
        ]

    def test_dotted_version_is_not_a_namespace(self):
        doc = {"servers": [{"url": "/v2"}], "paths": {"/v1.1/customer/get": {"get": {"summary": "s"}}}}
        spec = parse_spec_file(json.dumps(doc), "a.json")
        assert spec.endpoints[0].full_path == "/v2/v1.1/customer/get"

    def test_full_path_always_starts_with_slash(self):
        doc = {"paths": {"customers": {"get": {"summary": "s"}}}}
        spec = parse_spec_file(json.dumps(doc), "a.json")
        assert spec.endpoints[0].path == "customers"
        assert spec.endpoints[0].full_path == "/customers"

    def test_only_lowercase_known_methods(self):
        doc = {
            "paths": {
                "/pets": {
                    "GET": {"summary": "upper"},
                    "trace": {"summary": "t"},
                    "x-extra": {"summary": "vendor"},
                    "parameters": [],
                }
            }
        }
        spec = parse_spec_file(json.dumps(doc), "a.json")
        assert [e.method for e in spec.endpoints] == ["trace"]

    def test_empty_operation_still_recorded(self):
        spec = parse_spec_file('{"paths": {"/customers": {"get": {}}}}', "a.json")
        assert len(spec.endpoints) == 1
        assert spec.endpoints[0].method == "get"
        assert spec.endpoints[0].operation == {}

    def test_operation_is_copied(self):
        doc = {"paths": {"/pets": {"get": {"summary": "s", "tags": ["a"]}}}}
        spec = parse_spec_file(json.dumps(doc), "a.json")
        spec.endpoints[0].operation["tags"].append("b")
        assert spec.raw["paths"]["/pets"]["get"]["tags"] == ["a"]

    def test_defaults_for_missing_version_and_title(self):
        spec = parse_spec_file('{"paths": {}}', "bare.json")
        assert spec.openapi_version == "3.0.1"
        assert spec.title == "bare.json"
        assert spec.endpoints == []

    def test_swagger_version_field(self):
        spec = parse_spec_file("swagger: '2.0'\npaths: {}\n", "old.yaml")
        assert spec.openapi_version == "2.0"


class TestInvalidSpecs:
    def test_malformed_yaml(self):
        assert _load("broken.yaml") is None

    def test_malformed_json(self):
        assert parse_spec_file("{not json", "bad.json") is None

    def test_missing_paths(self):
        assert _load("no_paths.json") is None

    def test_paths_not_a_mapping(self):
        assert parse_spec_file("paths: [a, b]\n", "list.yaml") is None

    def test_not_a_mapping(self):
        assert parse_spec_file("- just\n- a list\n", "list.yaml") is None
        assert parse_spec_file("", "empty.yaml") is None


class TestParseAllFiles:
    def test_failures_are_dropped_in_order(self):
        files = [
            SourceFile(filename=name, content=(FIXTURES / name).read_text(encoding="utf-8"))
            for name in ("v1.json", "broken.yaml", "custom.json", "no_paths.json")
        ]
        specs = parse_all_files(files)
        assert [s.source_file for s in specs] == ["v1.json", "custom.json"]
