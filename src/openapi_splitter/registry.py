"""Endpoint registry: the list of documented API titles and their status.

The registry is advisory. It is built from a Markdown API hierarchy, stored
as JSON, and ticked off against the summaries of built documents. Nothing
here feeds back into classification or document content.
"""

import json
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from openapi_splitter.pipeline.builder import BuiltSpec

STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"

IGNORED_TITLES = {"overview", "introduction"}

_CATEGORY = re.compile(r"^##\s+(.+)$")
_SUBCATEGORY = re.compile(r"^\s*-\s+\*\*(.+)\*\*$")
_ENTRY = re.compile(r"^\s*-\s+([^*-].+)$")


class RegistryEntry(BaseModel):
    """One known API page in the hierarchy."""

    model_config = ConfigDict(populate_by_name=True)

    category: str
    subcategory: str | None = None
    title: str
    status: str = STATUS_PENDING
    spec_file: str | None = Field(default=None, alias="specFile")


def extract_registry(markdown: str) -> list[RegistryEntry]:
    """Parse a Markdown hierarchy into registry entries.

    ``## Heading`` lines open a category, ``- **Name**`` bullets open a
    subcategory, and any other bullet under a category is an entry.
    """
    entries = []
    category = ""
    subcategory = ""

    for line in markdown.splitlines():
        match = _CATEGORY.match(line)
        if match:
            category = match.group(1).strip()
            subcategory = ""
            continue

        match = _SUBCATEGORY.match(line)
        if match:
            subcategory = match.group(1).strip()
            continue

        match = _ENTRY.match(line)
        if match and category:
            title = match.group(1).strip()
            if title.lower() in IGNORED_TITLES:
                continue
            entries.append(
                RegistryEntry(category=category, subcategory=subcategory or None, title=title)
            )

    return entries


def load_registry(file_path: Path) -> list[RegistryEntry]:
    data = json.loads(file_path.read_text(encoding="utf-8"))
    return [RegistryEntry.model_validate(item) for item in data]


def dump_registry(entries: list[RegistryEntry]) -> str:
    return json.dumps([e.model_dump(by_alias=True) for e in entries], indent=2, ensure_ascii=False) + "\n"


def cross_reference(
    registry: list[RegistryEntry], specs: list[BuiltSpec]
) -> tuple[list[RegistryEntry], int]:
    """Mark registry entries whose title appears in a built operation summary.

    For each operation the first entry whose title is a case-insensitive
    substring of the summary is the match; it is set to completed with the
    document's filename unless it already was. Returns an updated copy of
    the registry and the number of entries changed.
    """
    entries = [e.model_copy() for e in registry]
    updates = 0

    for built in specs:
        for path_item in built.spec.get("paths", {}).values():
            for operation in path_item.values():
                if not isinstance(operation, dict):
                    continue
                summary = str(operation.get("summary") or "").lower()
                matched = next((e for e in entries if e.title and e.title.lower() in summary), None)
                if matched is not None and matched.status != STATUS_COMPLETED:
                    matched.status = STATUS_COMPLETED
                    matched.spec_file = built.filename
                    updates += 1

    return entries, updates
