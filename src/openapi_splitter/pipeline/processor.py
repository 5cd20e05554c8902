"""Pipeline: parse -> classify -> build -> (optional) registry cross-reference."""

from typing import Callable

from pydantic import BaseModel

from openapi_splitter.parser.base import SourceFile
from openapi_splitter.parser.openapi import parse_all_files
from openapi_splitter.pipeline.builder import Builder, BuiltSpec
from openapi_splitter.pipeline.classifier import ClassificationStats, Classifier
from openapi_splitter.registry import RegistryEntry, cross_reference
from openapi_splitter.rules.ruleset import RuleSet, default_rule_set

# (stage, percent, detail)
ProgressCallback = Callable[[str, int, str], None]


class ProcessingResult(BaseModel):
    specs: list[BuiltSpec]
    stats: ClassificationStats
    unclassified_paths: list[str]  # "GET /path (from file)" lines
    parsed_files: list[str]
    failed_files: list[str]
    registry: list[RegistryEntry] | None = None
    registry_updates: int = 0


def process_files(
    files: list[SourceFile],
    rule_set: RuleSet | None = None,
    registry: list[RegistryEntry] | None = None,
    on_progress: ProgressCallback | None = None,
) -> ProcessingResult:
    """Run the whole pipeline over uploaded files."""
    rule_set = rule_set or default_rule_set()

    def progress(stage: str, percent: int, detail: str = "") -> None:
        if on_progress is not None:
            on_progress(stage, percent, detail)

    progress("Parsing files", 0, f"Loading {len(files)} files...")
    specs = parse_all_files(files, rule_set)
    parsed_files = [s.source_file for s in specs]
    parsed_set = set(parsed_files)
    failed_files = [f.filename for f in files if f.filename not in parsed_set]
    progress("Parsing files", 20, f"Parsed {len(parsed_files)} specs, {len(failed_files)} failed")

    if not specs:
        return ProcessingResult(
            specs=[],
            stats=ClassificationStats(total=0, classified=0, unclassified=0, subsection_counts={}),
            unclassified_paths=[],
            parsed_files=[],
            failed_files=[f.filename for f in files],
            registry=registry,
        )

    progress("Classifying endpoints", 30, "Mapping endpoints to subsections...")
    classification = Classifier(rule_set).classify_all(specs)
    stats = classification.stats
    progress("Classifying endpoints", 50, f"{stats.classified} classified, {stats.unclassified} unclassified")

    progress("Building specs", 60, "Creating OpenAPI specifications...")
    built = Builder(rule_set).build_all(classification.grouped)
    progress("Building specs", 80, f"Built {len(built)} specification files")

    registry_updates = 0
    if registry is not None:
        progress("Updating registry", 82, "Cross-referencing built specs with the registry...")
        registry, registry_updates = cross_reference(registry, built)

    progress("Done", 100, f"{len(built)} specs ready")

    return ProcessingResult(
        specs=built,
        stats=stats,
        unclassified_paths=[ep.describe() for ep in classification.unclassified],
        parsed_files=parsed_files,
        failed_files=failed_files,
        registry=registry,
        registry_updates=registry_updates,
    )
