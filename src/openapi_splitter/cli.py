"""CLI entry point for openapi-splitter."""

from pathlib import Path

import click
import yaml

from openapi_splitter.parser.base import SourceFile
from openapi_splitter.parser.detect import is_spec_file
from openapi_splitter.parser.openapi import parse_all_files
from openapi_splitter.pipeline.classifier import Classifier
from openapi_splitter.pipeline.processor import process_files
from openapi_splitter.pipeline.validator import validate_output
from openapi_splitter.pipeline.writer import render_specs, write_files
from openapi_splitter.registry import dump_registry, extract_registry, load_registry
from openapi_splitter.rules.ruleset import RuleSet, default_rule_set, load_rule_set

REGISTRY_FILENAME = "endpoints-registry.json"

rules_option = click.option(
    "--rules",
    "rules_path",
    default=None,
    envvar="OPENAPI_SPLITTER_RULES",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML rule file overriding the built-in subsections and rules.",
)


def _load_rules(rules_path: Path | None) -> RuleSet:
    if rules_path is None:
        return default_rule_set()
    try:
        return load_rule_set(rules_path)
    except (yaml.YAMLError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="--rules")


def _read_inputs(inputs: tuple[Path, ...]) -> list[SourceFile]:
    """Read spec files; directories are scanned (non-recursively) for spec files."""
    paths: list[Path] = []
    for p in inputs:
        if p.is_dir():
            paths.extend(sorted(c for c in p.iterdir() if c.is_file() and is_spec_file(c.name)))
        else:
            paths.append(p)
    files = []
    for p in paths:
        try:
            content = p.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            click.echo(f"Warning: {p.name}: not valid UTF-8 ({e.reason})", err=True)
            content = ""
        # an empty file fails to parse and is reported with the other failures
        files.append(SourceFile(filename=p.name, content=content))
    return files


def _echo_progress(stage: str, percent: int, detail: str) -> None:
    click.echo(f"[{percent:3d}%] {stage}: {detail}")


@click.group()
def main():
    """OpenAPI Splitter — merge spec fragments and split them into per-subsection documents."""
    pass


@main.command()
@click.argument("inputs", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(file_okay=False, path_type=Path), help="Output directory for the split specs.")
@rules_option
@click.option("--registry", "registry_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Registry JSON to cross-reference against the built specs.")
@click.option("--show-unclassified", is_flag=True, help="List every endpoint no rule matched.")
def split(inputs: tuple[Path, ...], output: Path, rules_path: Path | None, registry_path: Path | None, show_unclassified: bool):
    """Full pipeline: parse specs -> classify endpoints -> write one YAML per subsection."""
    rule_set = _load_rules(rules_path)
    files = _read_inputs(inputs)
    registry = load_registry(registry_path) if registry_path else None

    result = process_files(files, rule_set=rule_set, registry=registry, on_progress=_echo_progress)

    for name in result.failed_files:
        click.echo(f"  Skipped {name} (not a valid OpenAPI spec)")

    rendered = render_specs(result.specs)
    errors = validate_output(result.specs, rendered)
    for fname, err in errors.items():
        click.echo(f"Warning: {fname}: {err}", err=True)

    for file_path in write_files(rendered, output):
        click.echo(f"  Created {file_path}")

    if result.registry is not None:
        registry_file = output / REGISTRY_FILENAME
        registry_file.write_text(dump_registry(result.registry), encoding="utf-8")
        click.echo(f"  Registry: {result.registry_updates} entries updated, saved to {registry_file}")

    stats = result.stats
    click.echo(
        f"Done! {len(result.specs)} specs, {stats.classified} endpoints classified, "
        f"{stats.unclassified} unclassified, {len(result.parsed_files)} source files parsed."
    )

    if show_unclassified and result.unclassified_paths:
        click.echo("Unclassified endpoints:")
        for line in result.unclassified_paths:
            click.echo(f"  {line}")


@main.command()
@click.argument("inputs", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@rules_option
def classify(inputs: tuple[Path, ...], rules_path: Path | None):
    """Show which subsection every endpoint lands in, without building anything."""
    rule_set = _load_rules(rules_path)
    files = _read_inputs(inputs)
    specs = parse_all_files(files, rule_set)
    click.echo(f"Parsed {len(specs)} of {len(files)} files.")

    result = Classifier(rule_set).classify_all(specs)
    for subsection, count in sorted(result.stats.subsection_counts.items()):
        click.echo(f"  {subsection}: {count}")

    if result.unclassified:
        click.echo(f"Unclassified ({len(result.unclassified)}):")
        for ep in result.unclassified:
            click.echo(f"  {ep.describe()}")

    stats = result.stats
    click.echo(f"Total {stats.total}: {stats.classified} classified, {stats.unclassified} unclassified.")


@main.command()
@click.argument("hierarchy_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output registry JSON file.")
def registry(hierarchy_path: Path, output: Path):
    """Extract an endpoint registry from a Markdown API hierarchy."""
    entries = extract_registry(hierarchy_path.read_text(encoding="utf-8"))
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_registry(entries), encoding="utf-8")
    click.echo(f"Extracted {len(entries)} endpoints to {output}")


@main.command()
@rules_option
def subsections(rules_path: Path | None):
    """List the configured subsections."""
    rule_set = _load_rules(rules_path)
    for subsection_id, definition in sorted(rule_set.subsections.items()):
        click.echo(f"{subsection_id}\t{definition.server_base}\t{definition.title}")
