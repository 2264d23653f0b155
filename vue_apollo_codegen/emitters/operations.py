"""Operation document constants and composition functions."""

from typing import List

from graphql import NonNullTypeNode, OperationDefinitionNode

from vue_apollo_codegen.config import VueApolloPluginConfig
from vue_apollo_codegen.emitters.fragments import render_document_constant
from vue_apollo_codegen.emitters.imports import OPERATIONS_NAMESPACE
from vue_apollo_codegen.fragment_graph import FragmentGraph, fragment_spreads
from vue_apollo_codegen.gen_logging import get_logger
from vue_apollo_codegen.naming import (
    composition_function_base,
    document_variable_name,
    operation_kind,
    result_type_name,
    variables_type_name,
)
from vue_apollo_codegen.templates import render

logger = get_logger(__name__)


def has_required_variables(node: OperationDefinitionNode) -> bool:
    """True when at least one variable is declared non-null."""
    return any(
        isinstance(definition.type, NonNullTypeNode)
        for definition in node.variable_definitions or ()
    )


def variable_names(node: OperationDefinitionNode) -> List[str]:
    return [d.variable.name.value for d in node.variable_definitions or ()]


def render_doc_block(operation_name: str, operation_type: str, node) -> str:
    return render(
        "doc_block.ts.jinja",
        operation_name=operation_name,
        operation_type=operation_type,
        variable_names=variable_names(node),
    )


def render_composition_function(
    node: OperationDefinitionNode, document_variable: str, config: VueApolloPluginConfig
) -> str:
    name = node.name.value
    kind = operation_kind(node)
    operation_name = composition_function_base(name, kind, config)

    doc_block = render_doc_block(operation_name, kind, node) if config.add_doc_blocks else ""

    return render(
        "composition_function.ts.jinja",
        operation_type=kind,
        operation_name=operation_name,
        result_type=result_type_name(name, kind, config),
        variables_type=variables_type_name(name, kind, config),
        variables_required=has_required_variables(node),
        document_variable=document_variable,
        doc_block=doc_block,
    )


def render_operation(
    node: OperationDefinitionNode, graph: FragmentGraph, config: VueApolloPluginConfig
) -> str:
    """
    Everything generated for one named operation: its document constant
    (unless documents are imported externally) followed by its composition
    function and result type alias.
    """
    variable_name = document_variable_name(node.name.value, config)
    parts = []

    if config.is_external:
        document_reference = f"{OPERATIONS_NAMESPACE}.{variable_name}"
    else:
        document_reference = variable_name
        parts.append(
            render_document_constant(variable_name, node, fragment_spreads(node), graph, config)
        )

    if config.with_composition_functions:
        parts.append(render_composition_function(node, document_reference, config))

    logger.debug(f"  [OPERATION] {node.operation.value} {node.name.value} -> {variable_name}")
    return "\n".join(parts)


def render_operations(
    operations: List[OperationDefinitionNode], graph: FragmentGraph, config: VueApolloPluginConfig
) -> List[str]:
    return [render_operation(node, graph, config) for node in operations]
