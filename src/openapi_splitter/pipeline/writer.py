"""Serialize built documents to YAML and write them out."""

from pathlib import Path

import yaml

from openapi_splitter.pipeline.builder import BuiltSpec


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes repeated objects out in full instead of &id anchors."""

    def ignore_aliases(self, data):
        return True


def spec_to_yaml(spec: dict) -> str:
    """Dump a document keeping its own key order."""
    return yaml.dump(
        spec,
        Dumper=_NoAliasDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=120,
    )


def render_specs(specs: list[BuiltSpec]) -> dict[str, str]:
    """Return {filename: yaml_text} for every built document."""
    return {b.filename: spec_to_yaml(b.spec) for b in specs}


def write_files(files: dict[str, str], output_dir: Path) -> list[Path]:
    """Write {filename: text} into output_dir, returning the paths written."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, content in files.items():
        file_path = output_dir / filename
        file_path.write_text(content, encoding="utf-8")
        written.append(file_path)
    return written
