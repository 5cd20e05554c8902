"""Data models for parsed OpenAPI sources.

The parser turns every uploaded file into these models so the classifier
and builder never touch raw YAML/JSON loading again.
"""

from pydantic import BaseModel


class SourceFile(BaseModel):
    """One uploaded input file."""

    filename: str
    content: str


class EndpointDef(BaseModel):
    """A single path + method pair taken from a source spec."""

    path: str  # path key as written in the source, e.g. /customers/{id}
    method: str  # get / post / put / delete / patch / head / options / trace
    operation: dict  # deep copy of the source operation object
    source_file: str
    full_path: str  # path with the server base applied, used for classification

    def describe(self) -> str:
        """Human-readable one-liner, e.g. 'GET /v2/customers (from v2.json)'."""
        return f"{self.method.upper()} {self.full_path} (from {self.source_file})"


class ParsedSpec(BaseModel):
    """One successfully parsed source document."""

    raw: dict
    openapi_version: str
    title: str
    server_base_path: str
    endpoints: list[EndpointDef]
    source_file: str
    components: dict = {}
    security: list = []
