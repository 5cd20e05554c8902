from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from openapi_splitter.rules.patterns import CLASSIFICATION_RULES
from openapi_splitter.rules.ruleset import default_rule_set, load_rule_set
from openapi_splitter.rules.subsections import SUBSECTIONS

FIXTURES = Path(__file__).parent / "fixtures"


class TestBuiltInTables:
    def test_every_rule_targets_a_defined_subsection(self):
        assert {s for _, s in CLASSIFICATION_RULES} <= set(SUBSECTIONS)

    def test_default_rule_set_keeps_table_order(self):
        rs = default_rule_set()
        assert [(r.pattern, r.subsection) for r in rs.rules] == CLASSIFICATION_RULES
        assert len(rs.subsections) == len(SUBSECTIONS)

    def test_subsection_server_bases_are_paths(self):
        rs = default_rule_set()
        assert all(d.server_base.startswith("/") for d in rs.subsections.values())

    def test_specific_customer_rules_precede_general(self):
        order = [p for p, _ in CLASSIFICATION_RULES]
        assert order.index(r"/customers/labels") < order.index(r"/customers")
        assert order.index(r"/customers/lookup") < order.index(r"/customers")

    def test_namespace_regex(self):
        regex = default_rule_set().namespace_regex()
        assert regex.match("/v2/customers")
        assert regex.match("/api_gateway/v1/promotions")
        assert regex.match("/x/neo/data")
        assert not regex.match("/customers")
        assert not regex.match("/v1.1/customer/get")
        assert not regex.match("/xyz/neo")


class TestLoadRuleSet:
    def test_load_replaces_subsections_and_rules(self):
        rs = load_rule_set(FIXTURES / "rules.yaml")
        assert set(rs.subsections) == {"pets", "pet-photos"}
        assert [r.subsection for r in rs.rules] == ["pet-photos", "pets"]
        assert rs.priority_of("petstore.yaml") == 20

    def test_unset_keys_keep_defaults(self):
        rs = load_rule_set(FIXTURES / "rules.yaml")
        default = default_rule_set()
        assert rs.namespace_prefixes == default.namespace_prefixes
        assert rs.default_source_priority == default.default_source_priority
        assert rs.server_host == default.server_host

    def test_partial_override(self, tmp_path):
        f = tmp_path / "rules.yaml"
        f.write_text(yaml.safe_dump({"server_host": "us.api.example.com", "default_source_priority": 1}))
        rs = load_rule_set(f)
        assert rs.server_host == "us.api.example.com"
        assert rs.priority_of("anything.json") == 1
        assert len(rs.rules) == len(CLASSIFICATION_RULES)

    def test_rule_for_missing_subsection_fails(self, tmp_path):
        f = tmp_path / "rules.yaml"
        f.write_text(
            yaml.safe_dump(
                {
                    "subsections": {"pets": {"title": "P", "description": "d", "server_base": "/v1"}},
                    "rules": [{"pattern": "/owners", "subsection": "owners"}],
                }
            )
        )
        with pytest.raises(ValidationError):
            load_rule_set(f)

    def test_non_mapping_file_fails(self, tmp_path):
        f = tmp_path / "rules.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_rule_set(f)

    def test_bad_namespace_prefix_fails(self, tmp_path):
        f = tmp_path / "rules.yaml"
        f.write_text(yaml.safe_dump({"namespace_prefixes": ["v\\d", "("]}))
        with pytest.raises(ValidationError):
            load_rule_set(f)

    def test_custom_namespace_prefixes(self, tmp_path):
        f = tmp_path / "rules.yaml"
        f.write_text(yaml.safe_dump({"namespace_prefixes": ["gw"]}))
        rs = load_rule_set(f)
        regex = rs.namespace_regex()
        assert regex.match("/gw/pets")
        assert not regex.match("/v2/pets")
        assert rs.namespace_regex() is regex
