"""Fragment document constants (`export const XFragmentDoc = ...`)."""

from typing import List

from graphql import print_ast

from vue_apollo_codegen.config import DocumentMode, VueApolloPluginConfig
from vue_apollo_codegen.document_node import dump_document_node
from vue_apollo_codegen.fragment_graph import FragmentGraph
from vue_apollo_codegen.gen_logging import get_logger
from vue_apollo_codegen.naming import fragment_variable_name
from vue_apollo_codegen.templates import render

logger = get_logger(__name__)


def render_document_constant(
    variable_name: str,
    definition,
    spreads: List[str],
    graph: FragmentGraph,
    config: VueApolloPluginConfig,
) -> str:
    """
    Render one document constant for an operation or fragment definition.

    graphQLTag mode interpolates the constants of the directly spread
    fragments; documentNode mode inlines every fragment the definition needs.
    """
    if config.document_mode is DocumentMode.DOCUMENT_NODE:
        own_name = getattr(definition, "name", None)
        needed = [
            fragment
            for fragment in graph.dependencies(spreads)
            if own_name is None or fragment.name.value != own_name.value
        ]
        return render(
            "document_constant.ts.jinja",
            document_mode=config.document_mode.value,
            variable_name=variable_name,
            document_json=dump_document_node([definition, *needed]),
        )

    return render(
        "document_constant.ts.jinja",
        document_mode=config.document_mode.value,
        variable_name=variable_name,
        pure_magic_comment=config.pure_magic_comment,
        source=print_ast(definition),
        includes=[fragment_variable_name(name, config) for name in spreads],
    )


def render_fragments(graph: FragmentGraph, config: VueApolloPluginConfig) -> List[str]:
    """Fragment constants in dependency order; none in external mode."""
    if config.document_mode is DocumentMode.EXTERNAL:
        logger.debug("External document mode, fragment constants are not emitted")
        return []

    rendered = []
    for fragment in graph.ordered():
        name = fragment.name.value
        variable_name = fragment_variable_name(name, config)
        rendered.append(
            render_document_constant(variable_name, fragment, graph.spreads(name), graph, config)
        )
        logger.debug(f"  [FRAGMENT] {variable_name}")
    return rendered
