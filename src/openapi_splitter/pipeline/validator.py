"""Checks built documents and their YAML rendering before they are written."""

import yaml

from openapi_splitter.pipeline.builder import BuiltSpec, count_endpoints


def validate_yaml(files: dict[str, str]) -> dict[str, str]:
    """Check YAML files for format errors.

    Returns dict of {filename: error_message} for files with errors.
    """
    errors = {}
    for filename, content in files.items():
        if not filename.endswith((".yaml", ".yml")):
            continue
        try:
            doc = yaml.safe_load(content)
        except yaml.YAMLError as e:
            errors[filename] = f"YAMLError: {e}"
            continue
        if not isinstance(doc, dict):
            errors[filename] = "document is not a mapping"
    return errors


def validate_documents(specs: list[BuiltSpec]) -> dict[str, str]:
    """Check the structural promises every emitted document makes.

    Returns dict of {filename: error_message} for documents that break them.
    """
    errors = {}
    for built in specs:
        paths = built.spec.get("paths")
        if not isinstance(paths, dict):
            errors[built.filename] = "missing paths object"
            continue

        bad_keys = [p for p in paths if not p.startswith("/")]
        if bad_keys:
            errors[built.filename] = f"path keys must start with '/': {', '.join(bad_keys)}"
            continue

        actual = count_endpoints(paths)
        if built.endpoint_count <= 0:
            errors[built.filename] = "document has no endpoints"
        elif actual != built.endpoint_count:
            errors[built.filename] = f"endpoint_count {built.endpoint_count} != {actual} operations in paths"
    return errors


def validate_output(specs: list[BuiltSpec], files: dict[str, str]) -> dict[str, str]:
    """Run all validations on built documents and their rendered files.

    Returns dict of {filename: error_message} for all files with errors.
    """
    errors = {}
    errors.update(validate_documents(specs))
    errors.update(validate_yaml(files))
    return errors
