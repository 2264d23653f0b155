"""Import declarations for the `prepend` block."""

import posixpath
from typing import List

from vue_apollo_codegen.config import DocumentMode, VueApolloPluginConfig
from vue_apollo_codegen.documents import CollectedDefinitions
from vue_apollo_codegen.gen_logging import get_logger

logger = get_logger(__name__)

OPERATIONS_NAMESPACE = "Operations"

_EXTENSIONS_TO_REMOVE = (".ts", ".tsx", ".js", ".jsx")


def clear_extension(path: str) -> str:
    """Drop a TypeScript/JavaScript extension from a module path; keep anything else."""
    root, extension = posixpath.splitext(path)
    if extension in _EXTENSIONS_TO_REMOVE:
        return root
    return path


def parse_import(spec: str):
    """'graphql.macro#gql' -> ('graphql.macro', 'gql'); 'graphql-tag' -> ('graphql-tag', None)"""
    module, _, name = spec.partition("#")
    return module, (name or None)


def gql_import(config: VueApolloPluginConfig) -> str:
    module, name = parse_import(config.gql_import)
    if name is None:
        return f"import gql from '{module}';"
    binding = "gql" if name == "gql" else f"{name} as gql"
    return f"import {{ {binding} }} from '{module}';"


def external_documents_module(
    config: VueApolloPluginConfig, collected: CollectedDefinitions
) -> str:
    """Module path the `Operations` namespace import points at."""
    if not config.imports_near_operation_file:
        return clear_extension(config.import_document_node_externally_from)

    locations = list(dict.fromkeys(collected.operation_locations))
    if len(locations) > 1:
        logger.warning(
            f"{len(locations)} documents contribute operations in near-operation-file mode, "
            f"importing documents from '{locations[0]}'"
        )
    location = locations[0].replace("\\", "/")
    return f"./{clear_extension(posixpath.basename(location))}"


def build_imports(
    config: VueApolloPluginConfig,
    collected: CollectedDefinitions,
) -> List[str]:
    """
    Ordered, deduplicated import declarations.

    Document values come from one of three places: an external module
    (namespace import, only when there is an operation to bind), graphql-js
    DocumentNode literals (type import) or the gql tag.
    """
    imports: List[str] = []

    if config.document_mode is DocumentMode.EXTERNAL:
        if collected.has_operations:
            module = external_documents_module(config, collected)
            imports.append(f"import * as {OPERATIONS_NAMESPACE} from '{module}';")
        else:
            logger.debug("No operations collected, skipping the external documents import")
    elif config.document_mode is DocumentMode.DOCUMENT_NODE:
        imports.append("import { DocumentNode } from 'graphql';")
    else:
        imports.append(gql_import(config))

    if collected.has_operations and config.with_composition_functions:
        imports.append(
            f"import * as VueApolloComposable from '{config.vue_apollo_composable_import_from}';"
        )
        imports.append(
            f"import * as VueCompositionApi from '{config.vue_composition_api_import_from}';"
        )

    return list(dict.fromkeys(imports))
