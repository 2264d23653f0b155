"""
Entry point of the vue-apollo code generation plugin.

    plugin(schema, documents, config) -> PluginOutput(prepend, content)

A pure transform: nothing is read from or written to disk and nothing is kept
between calls, so several invocations (one per document file, for example)
can run side by side.

Steps:
    1. resolve options (defaults applied)
    2. collect named operations and fragments across all documents
    3. order fragments by dependency
    4. emit imports, fragment constants, then one block per operation
"""

from typing import Any, Mapping, Optional, Sequence

from graphql import GraphQLSchema

from vue_apollo_codegen.config import resolve_config
from vue_apollo_codegen.documents import DocumentFile, collect_definitions
from vue_apollo_codegen.emitters import build_imports, render_fragments, render_operations
from vue_apollo_codegen.fragment_graph import FragmentGraph
from vue_apollo_codegen.gen_logging import get_logger
from vue_apollo_codegen.output import PluginOutput

logger = get_logger(__name__)


def plugin(
    schema: Optional[GraphQLSchema],
    documents: Sequence[DocumentFile],
    config: Optional[Mapping[str, Any]] = None,
    info: Optional[Mapping[str, Any]] = None,
) -> PluginOutput:
    """
    Generate Vue composition functions for the operations in `documents`.

    Args:
        schema: The GraphQL schema. Only the companion type plugins need it;
            it is accepted so every plugin shares one call signature.
        documents: Parsed documents with their locations.
        config: Raw option mapping (camelCase keys), see VueApolloPluginConfig.
        info: Host pipeline details such as {"outputFile": "graphql.ts"}.

    Returns:
        PluginOutput with the import block and the generated declarations.
    """
    options = resolve_config(config)
    output_file = (info or {}).get("outputFile") or "<stdout>"
    logger.debug(f"[PLUGIN] vue-apollo -> {output_file} (documentMode={options.document_mode.value})")

    collected = collect_definitions(documents)
    graph = FragmentGraph(collected.fragments)
    # cycles are rejected even when no fragment constant is emitted
    graph.ordered()

    prepend = build_imports(options, collected)
    blocks = render_fragments(graph, options) + render_operations(collected.operations, graph, options)
    content = "\n\n".join(block for block in blocks if block)

    logger.info(
        f"[GENERATED] {len(collected.operations)} operation(s), "
        f"{len(collected.fragments)} fragment(s) -> {output_file}"
    )
    return PluginOutput(prepend=prepend, content=content)
