"""Pick the decoder for an uploaded spec file."""

from pathlib import PurePath

SPEC_SUFFIXES = (".yaml", ".yml", ".json")


def detect_format(filename: str) -> str:
    """Detect how a spec file should be decoded.

    Returns: 'json' for ``.json`` files, 'yaml' for everything else.
    """
    if filename.endswith(".json"):
        return "json"
    return "yaml"


def is_spec_file(filename: str) -> bool:
    """True if the filename carries one of the supported spec extensions."""
    return PurePath(filename).suffix.lower() in SPEC_SUFFIXES
