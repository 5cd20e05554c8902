"""Classifier: assigns endpoints to subsections using ordered pattern rules."""

from pydantic import BaseModel

from openapi_splitter.parser.base import EndpointDef, ParsedSpec
from openapi_splitter.rules.ruleset import RuleSet


class ClassifiedEndpoint(EndpointDef):
    """An endpoint together with the subsection it was assigned to."""

    subsection: str


class ClassificationStats(BaseModel):
    total: int
    classified: int
    unclassified: int
    subsection_counts: dict[str, int]


class ClassificationResult(BaseModel):
    """Endpoints grouped by subsection id, plus the ones no rule matched."""

    grouped: dict[str, list[ClassifiedEndpoint]]
    unclassified: list[EndpointDef]

    @property
    def stats(self) -> ClassificationStats:
        counts = {sub: len(eps) for sub, eps in self.grouped.items()}
        classified = sum(counts.values())
        return ClassificationStats(
            total=classified + len(self.unclassified),
            classified=classified,
            unclassified=len(self.unclassified),
            subsection_counts=counts,
        )


class Classifier:
    """Maps endpoints onto subsections and collapses cross-source duplicates.

    Rules are tried in table order and the first match wins. An endpoint whose
    full path matches nothing is retried with its raw path before it is
    declared unclassified. When the same (subsection, path, method) shows up
    in several sources, the one from the highest-priority source is kept;
    on a tie the first one seen stays.
    """

    def __init__(self, rule_set: RuleSet):
        self.rule_set = rule_set

    def classify_path(self, path: str) -> str | None:
        """Return the subsection of the first rule matching path, or None."""
        for rule in self.rule_set.rules:
            if rule.matches(path):
                return rule.subsection
        return None

    def classify_endpoint(self, endpoint: EndpointDef) -> str | None:
        """Classify by full path, falling back to the raw path."""
        return self.classify_path(endpoint.full_path) or self.classify_path(endpoint.path)

    def classify_all(self, specs: list[ParsedSpec]) -> ClassificationResult:
        grouped: dict[str, list[ClassifiedEndpoint]] = {}
        unclassified: list[EndpointDef] = []
        # (subsection, path, method) -> priority of the endpoint currently kept
        seen: dict[tuple[str, str, str], int] = {}

        for spec in specs:
            priority = self.rule_set.priority_of(spec.source_file)
            for ep in spec.endpoints:
                subsection = self.classify_endpoint(ep)
                if subsection is None:
                    unclassified.append(ep)
                    continue
                classified = ClassifiedEndpoint(**ep.model_dump(), subsection=subsection)
                self._add(classified, priority, seen, grouped)

        return ClassificationResult(grouped=grouped, unclassified=unclassified)

    def _add(
        self,
        ep: ClassifiedEndpoint,
        priority: int,
        seen: dict[tuple[str, str, str], int],
        grouped: dict[str, list[ClassifiedEndpoint]],
    ) -> None:
        key = (ep.subsection, ep.path, ep.method)
        if key not in seen:
            grouped.setdefault(ep.subsection, []).append(ep)
            seen[key] = priority
            return

        if priority <= seen[key]:
            return

        group = grouped[ep.subsection]
        for i, kept in enumerate(group):
            if kept.path == ep.path and kept.method == ep.method:
                group[i] = ep
                break
        seen[key] = priority
