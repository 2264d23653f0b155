"""
Unit tests for the import emitter.
"""

from vue_apollo_codegen.config import resolve_config
from vue_apollo_codegen.documents import collect_definitions
from vue_apollo_codegen.emitters.imports import (
    build_imports,
    clear_extension,
    gql_import,
    parse_import,
)


class TestHelpers:
    """Test module path helpers."""

    def test_clear_extension(self):
        """Test stripping script extensions only."""
        assert clear_extension("path/to/documents.tsx") == "path/to/documents"
        assert clear_extension("path/to/documents.ts") == "path/to/documents"
        assert clear_extension("path/to/documents") == "path/to/documents"
        assert clear_extension("./document.graphql") == "./document.graphql"

    def test_parse_import(self):
        """Test splitting `module#name` import specs."""
        assert parse_import("graphql-tag") == ("graphql-tag", None)
        assert parse_import("graphql.macro#gql") == ("graphql.macro", "gql")

    def test_gql_import_variants(self):
        """Test default, named and aliased gql imports."""
        assert gql_import(resolve_config({})) == "import gql from 'graphql-tag';"
        assert gql_import(resolve_config({"gqlImport": "graphql.macro#gql"})) == "import { gql } from 'graphql.macro';"
        assert gql_import(resolve_config({"gqlImport": "@apollo/client#graphql"})) == (
            "import { graphql as gql } from '@apollo/client';"
        )


class TestBuildImports:
    """Test which imports precede the generated code."""

    def test_no_operations_no_composable_imports(self, make_docs):
        """Test fragments-only input without composable imports."""
        collected = collect_definitions(make_docs("fragment Item on Entry { id }"))
        assert build_imports(resolve_config({}), collected) == ["import gql from 'graphql-tag';"]

    def test_composition_functions_disabled(self, make_docs, basic_doc):
        """Test imports when composition functions are off."""
        collected = collect_definitions(make_docs(basic_doc))
        imports = build_imports(resolve_config({"withCompositionFunctions": False}), collected)
        assert imports == ["import gql from 'graphql-tag';"]

    def test_external_near_operation_file_uses_operation_document(self, make_docs, fragment_only_doc, basic_doc):
        """Test that the Operations import follows the document holding operations."""
        collected = collect_definitions(make_docs(
            ("path/to/fragments.graphql", fragment_only_doc),
            ("path/to/document.graphql", basic_doc),
        ))
        config = resolve_config({
            "documentMode": "external",
            "importDocumentNodeExternallyFrom": "near-operation-file",
        })
        assert build_imports(config, collected)[0] == "import * as Operations from './document.graphql';"
