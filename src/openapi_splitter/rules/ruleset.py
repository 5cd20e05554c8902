"""Rule set: the configuration the classifier and builder run against.

A :class:`RuleSet` bundles the subsection table, the ordered classification
rules, source priorities and the path-prefix heuristic into one immutable
object. ``default_rule_set()`` builds it from the tables in
``subsections.py`` / ``patterns.py``; ``load_rule_set()`` reads a YAML file
whose top-level keys override those defaults.
"""

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator

from openapi_splitter.rules.patterns import (
    API_KEY_HEADER,
    CLASSIFICATION_RULES,
    DEFAULT_SERVER_HOST,
    DEFAULT_SOURCE_PRIORITY,
    NAMESPACE_PREFIXES,
    PLACEHOLDER_PATH_TOKEN,
    SOURCE_PRIORITY,
)
from openapi_splitter.rules.subsections import SUBSECTIONS


class SubsectionDef(BaseModel):
    """Static metadata for one output document."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    server_base: str  # e.g. /v2, appended to the server host


class ClassificationRule(BaseModel):
    """One (pattern, subsection) pair. The pattern is searched, not anchored."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    subsection: str

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    def matches(self, path: str) -> bool:
        return re.search(self.pattern, path) is not None


class RuleSet(BaseModel):
    """Immutable classification and build configuration."""

    model_config = ConfigDict(frozen=True)

    subsections: dict[str, SubsectionDef]
    rules: tuple[ClassificationRule, ...]
    source_priority: dict[str, int] = {}
    default_source_priority: int = DEFAULT_SOURCE_PRIORITY
    namespace_prefixes: tuple[str, ...] = tuple(NAMESPACE_PREFIXES)
    placeholder_path_token: str = PLACEHOLDER_PATH_TOKEN
    server_host: str = DEFAULT_SERVER_HOST
    api_key_header: str = API_KEY_HEADER

    _namespace_re: re.Pattern = PrivateAttr()

    @field_validator("namespace_prefixes")
    @classmethod
    def _prefixes_compile(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        try:
            re.compile(_namespace_pattern(value))
        except re.error as e:
            raise ValueError(f"invalid namespace prefix in {list(value)!r}: {e}") from e
        return value

    @model_validator(mode="after")
    def _rules_target_known_subsections(self) -> "RuleSet":
        unknown = sorted({r.subsection for r in self.rules} - set(self.subsections))
        if unknown:
            raise ValueError(f"rules reference undefined subsections: {', '.join(unknown)}")
        return self

    def model_post_init(self, __context) -> None:
        self._namespace_re = re.compile(_namespace_pattern(self.namespace_prefixes))

    def priority_of(self, source_file: str) -> int:
        return self.source_priority.get(source_file, self.default_source_priority)

    def namespace_regex(self) -> re.Pattern:
        """Regex matching a path that already starts with a known namespace segment."""
        return self._namespace_re


def _namespace_pattern(prefixes: tuple[str, ...]) -> str:
    return r"^/(?:" + "|".join(prefixes) + r")/"


def _default_data() -> dict:
    return {
        "subsections": SUBSECTIONS,
        "rules": [{"pattern": p, "subsection": s} for p, s in CLASSIFICATION_RULES],
        "source_priority": SOURCE_PRIORITY,
        "default_source_priority": DEFAULT_SOURCE_PRIORITY,
        "namespace_prefixes": NAMESPACE_PREFIXES,
    }


def default_rule_set() -> RuleSet:
    """Build the rule set from the built-in tables."""
    return RuleSet.model_validate(_default_data())


def load_rule_set(file_path: Path) -> RuleSet:
    """Load a rule set from YAML, falling back to the built-in tables per key.

    Any of ``subsections``, ``rules``, ``source_priority``,
    ``default_source_priority``, ``namespace_prefixes``,
    ``placeholder_path_token``, ``server_host`` and ``api_key_header`` may be
    given; a key that is present replaces the built-in value entirely.

    Raises:
        yaml.YAMLError: the file is not valid YAML.
        ValueError: the content does not describe a rule set (this includes
            ``pydantic.ValidationError``).
    """
    text = file_path.read_text(encoding="utf-8")
    overrides = yaml.safe_load(text) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"{file_path}: rule file must contain a mapping")

    data = _default_data()
    data.update(overrides)
    return RuleSet.model_validate(data)
