"""
Schema and document loading, and collection of definitions across documents.

The plugin receives documents as `DocumentFile(location, document)` pairs. All
definitions from all documents are considered together: a fragment defined in
one file can be spread in another, and the same fragment reaching the plugin
through several documents is declared once.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    GraphQLError,
    GraphQLSchema,
    OperationDefinitionNode,
    build_client_schema,
    build_schema,
    concat_ast,
    parse,
    print_ast,
    validate,
)

from vue_apollo_codegen.errors import DocumentLoadError, DuplicateDefinitionError
from vue_apollo_codegen.gen_logging import get_logger

logger = get_logger(__name__)

DOCUMENT_EXTENSIONS = (".graphql", ".gql")


@dataclass(frozen=True)
class DocumentFile:
    """A parsed document and the location it was read from."""

    location: str
    document: DocumentNode


@dataclass
class CollectedDefinitions:
    """Named operations and fragments gathered from a document set."""

    operations: List[OperationDefinitionNode] = field(default_factory=list)
    fragments: List[FragmentDefinitionNode] = field(default_factory=list)
    # location of the document each collected operation came from
    operation_locations: List[str] = field(default_factory=list)

    @property
    def has_operations(self) -> bool:
        return bool(self.operations)


# ------------------------------------------------------------------------------
# Collection

def collect_definitions(documents: Sequence[DocumentFile]) -> CollectedDefinitions:
    """
    Gather named operations and fragments from every document.

    Anonymous operations are skipped (no name to derive identifiers from).
    A definition repeated with the same printed body is kept once; the same
    name with a different body raises DuplicateDefinitionError.
    """
    collected = CollectedDefinitions()
    seen_operations = {}
    seen_fragments = {}

    for document_file in documents:
        for definition in document_file.document.definitions:
            if isinstance(definition, FragmentDefinitionNode):
                if _is_new(definition, seen_fragments, "Fragment"):
                    collected.fragments.append(definition)
            elif isinstance(definition, OperationDefinitionNode):
                if definition.name is None:
                    logger.warning(
                        f"Skipping anonymous {definition.operation.value} "
                        f"in '{document_file.location or '<inline>'}'"
                    )
                    continue
                if _is_new(definition, seen_operations, "Operation"):
                    collected.operations.append(definition)
                    collected.operation_locations.append(document_file.location)

    logger.debug(
        f"Collected {len(collected.operations)} operation(s), "
        f"{len(collected.fragments)} fragment(s) from {len(documents)} document(s)"
    )
    return collected


def _is_new(definition, seen: dict, kind: str) -> bool:
    name = definition.name.value
    printed = print_ast(definition)
    previous = seen.get(name)
    if previous is None:
        seen[name] = printed
        return True
    if previous != printed:
        raise DuplicateDefinitionError(kind, name)
    logger.debug(f"{kind} '{name}' repeated, keeping the first definition")
    return False


# ------------------------------------------------------------------------------
# Loading

def parse_document(source: str, location: str = "") -> DocumentFile:
    try:
        return DocumentFile(location=location, document=parse(source))
    except GraphQLError as e:
        raise DocumentLoadError(location or "<inline>", e.message) from e


def iter_document_paths(paths: Iterable) -> List[Path]:
    """Expand directories into the GraphQL files they contain, keeping argument order."""
    result = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = sorted(
                p for p in path.rglob("*") if p.is_file() and p.suffix in DOCUMENT_EXTENSIONS
            )
            result.extend(found)
        else:
            result.append(path)
    return result


def load_documents(paths: Iterable) -> List[DocumentFile]:
    documents = []
    for path in iter_document_paths(paths):
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DocumentLoadError(path, f"cannot read file ({e.strerror or e})") from e
        documents.append(parse_document(source, str(path)))
    return documents


def load_schema(path) -> GraphQLSchema:
    """
    Build a schema from an introspection result (.json) or SDL.

    Introspection results are accepted as {"__schema": ...} or
    {"data": {"__schema": ...}}.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(path, f"cannot read schema ({e.strerror or e})") from e

    try:
        if path.suffix == ".json":
            data = json.loads(text)
            if "__schema" not in data and "__schema" in data.get("data", {}):
                data = data["data"]
            return build_client_schema(data)
        return build_schema(text)
    except (ValueError, TypeError, GraphQLError) as e:
        raise DocumentLoadError(path, f"invalid schema: {e}") from e


def validate_documents(schema: GraphQLSchema, documents: Sequence[DocumentFile]) -> List[GraphQLError]:
    """Validate all documents together, so cross-file fragment spreads resolve."""
    if not documents:
        return []
    return validate(schema, concat_ast([d.document for d in documents]))
