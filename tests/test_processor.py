from pathlib import Path
from unittest.mock import MagicMock

from openapi_splitter.parser.base import SourceFile
from openapi_splitter.pipeline.processor import process_files
from openapi_splitter.registry import RegistryEntry

FIXTURES = Path(__file__).parent / "fixtures"

ALL_FIXTURES = ("v1.json", "custom.json", "v2.yaml", "broken.yaml", "no_paths.json")


def _files(*names):
    return [SourceFile(filename=n, content=(FIXTURES / n).read_text(encoding="utf-8")) for n in names]


class TestProcessFiles:
    def test_parsed_and_failed_files(self):
        result = process_files(_files(*ALL_FIXTURES))
        assert result.parsed_files == ["v1.json", "custom.json", "v2.yaml"]
        assert result.failed_files == ["broken.yaml", "no_paths.json"]

    def test_stats(self):
        stats = process_files(_files(*ALL_FIXTURES)).stats
        assert stats.classified == 5
        assert stats.unclassified == 1
        assert stats.total == 6
        assert stats.subsection_counts == {
            "customer-v2": 2,
            "transaction-v2": 1,
            "customer-v2-lookup": 1,
            "points-v2": 1,
        }

    def test_built_specs_sorted(self):
        result = process_files(_files(*ALL_FIXTURES))
        assert [s.filename for s in result.specs] == [
            "customer-v2.yaml",
            "customer-v2-lookup.yaml",
            "points-v2.yaml",
            "transaction-v2.yaml",
        ]

    def test_unclassified_paths_readable(self):
        result = process_files(_files(*ALL_FIXTURES))
        assert result.unclassified_paths == ["GET /v2/unknown-service/ping (from v2.yaml)"]

    def test_duplicate_resolved_by_priority(self):
        for order in (("v1.json", "custom.json"), ("custom.json", "v1.json")):
            result = process_files(_files(*order))
            customers = next(s for s in result.specs if s.subsection_id == "customer-v2")
            assert customers.spec["paths"]["/customers/{id}"]["get"]["summary"] == "Get customer by id"
            assert customers.endpoint_count == 2

    def test_examples_redacted(self):
        result = process_files(_files("v1.json"))
        customers = result.specs[0].spec["paths"]
        example = customers["/customers/{id}"]["get"]["responses"]["200"]["content"]["application/json"]["example"]
        assert example == {"email": "user@example.com", "token": "REDACTED"}
        body = customers["/customers"]["post"]["requestBody"]["content"]["application/json"]["example"]
        assert body == {"email": "user@example.com", "password": "REDACTED"}

    def test_copy_suffix_path_cleaned(self):
        result = process_files(_files("v2.yaml"))
        points = next(s for s in result.specs if s.subsection_id == "points-v2")
        assert list(points.spec["paths"]) == ["/points/transfer"]

    def test_no_valid_files(self):
        result = process_files(_files("broken.yaml", "no_paths.json"))
        assert result.specs == []
        assert result.stats.total == 0
        assert result.failed_files == ["broken.yaml", "no_paths.json"]

    def test_progress_reported(self):
        on_progress = MagicMock()
        process_files(_files("v1.json"), on_progress=on_progress)
        percents = [c.args[1] for c in on_progress.call_args_list]
        assert percents[0] == 0
        assert percents[-1] == 100
        assert percents == sorted(percents)

    def test_registry_cross_reference(self):
        registry = [
            RegistryEntry(category="Customer", title="Get customer"),
            RegistryEntry(category="Customer", title="Lookup customer"),
            RegistryEntry(category="Transactions", title="Add transaction"),
        ]
        result = process_files(_files(*ALL_FIXTURES), registry=registry)
        assert result.registry_updates == 2
        assert result.registry[0].spec_file == "customer-v2.yaml"
        assert result.registry[1].spec_file == "customer-v2-lookup.yaml"
        assert registry[0].status == "pending"

    def test_registry_does_not_change_output(self):
        registry = [RegistryEntry(category="Customer", title="Get customer")]
        with_registry = process_files(_files(*ALL_FIXTURES), registry=registry)
        without = process_files(_files(*ALL_FIXTURES))
        assert [s.spec for s in with_registry.specs] == [s.spec for s in without.specs]
        assert without.registry is None
