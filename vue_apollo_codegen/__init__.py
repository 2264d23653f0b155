"""Vue Apollo composition function generator for GraphQL documents."""

from vue_apollo_codegen.config import DocumentMode, VueApolloPluginConfig, resolve_config
from vue_apollo_codegen.documents import DocumentFile, load_documents, load_schema, parse_document
from vue_apollo_codegen.output import PluginOutput, merge_outputs
from vue_apollo_codegen.plugin import plugin

__all__ = [
    "DocumentFile",
    "DocumentMode",
    "PluginOutput",
    "VueApolloPluginConfig",
    "load_documents",
    "load_schema",
    "merge_outputs",
    "parse_document",
    "plugin",
    "resolve_config",
]
