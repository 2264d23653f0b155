"""
Integration tests for the vue-apollo-codegen command line.
"""

import shutil

import pytest
from click.testing import CliRunner

from vue_apollo_codegen.cli.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def documents_dir(fixtures_dir):
    return fixtures_dir / "documents"


class TestGenerate:
    """`generate` writes the merged output of the plugin."""

    def test_generate_to_file(self, runner, schema_path, documents_dir, temp_output_dir):
        """Test generating every fixture document into one file."""
        out = temp_output_dir / "generated" / "graphql.ts"
        result = runner.invoke(cli, ["generate", str(schema_path), str(documents_dir), "--out", str(out)])

        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert text.startswith("import gql from 'graphql-tag';\n")
        assert "export const RepositoryWithOwnerFragmentDoc = gql`" in text
        assert "export function useMyFeedQuery(" in text
        assert "export function useSubmitCommentMutation(" in text
        assert "export function useOnCommentAddedSubscription(variables?:" in text
        assert text.endswith("\n")

    def test_generate_to_stdout(self, runner, schema_path, documents_dir):
        """Test generated code written to stdout."""
        result = runner.invoke(cli, ["-q", "generate", str(schema_path), str(documents_dir / "feed.graphql")])

        assert result.exit_code == 0, result.output
        assert result.output.startswith("import gql from 'graphql-tag';")
        assert "export const MyFeedDocument = gql`" in result.output
        assert "useSubmitCommentMutation" not in result.output

    def test_generate_with_config_file(self, runner, schema_path, documents_dir, fixtures_dir, temp_output_dir):
        """Test options read from a codegen.yml."""
        out = temp_output_dir / "graphql.ts"
        result = runner.invoke(cli, [
            "generate", str(schema_path), str(documents_dir),
            "--config", str(fixtures_dir / "codegen.yml"),
            "--out", str(out),
        ])

        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert "import * as VueCompositionApi from 'vue';" in text
        assert "/**" not in text

    def test_set_overrides_config_file(self, runner, schema_path, documents_dir, fixtures_dir, temp_output_dir):
        """Test --set taking precedence over the config file."""
        out = temp_output_dir / "graphql.ts"
        result = runner.invoke(cli, [
            "generate", str(schema_path), str(documents_dir),
            "--config", str(fixtures_dir / "codegen.yml"),
            "--set", "addDocBlocks=true",
            "--set", "vueApolloComposableImportFrom=@vue/apollo-composable-next",
            "--out", str(out),
        ])

        assert result.exit_code == 0, result.output
        text = out.read_text(encoding="utf-8")
        assert "import * as VueApolloComposable from '@vue/apollo-composable-next';" in text
        assert " * __useMyFeedQuery__" in text

    def test_near_operation_file(self, runner, schema_path, documents_dir, temp_output_dir):
        """Test one output beside each document."""
        for document in documents_dir.iterdir():
            shutil.copy(document, temp_output_dir / document.name)

        result = runner.invoke(cli, [
            "generate", str(schema_path), str(temp_output_dir),
            "--near-operation-file",
            "--set", "documentMode=external",
            "--set", "importDocumentNodeExternallyFrom=near-operation-file",
        ])

        assert result.exit_code == 0, result.output
        feed = (temp_output_dir / "feed.generated.ts").read_text(encoding="utf-8")
        comments = (temp_output_dir / "comments.generated.ts").read_text(encoding="utf-8")
        assert "import * as Operations from './feed.graphql';" in feed
        assert "(Operations.MyFeedDocument, variables, baseOptions)" in feed
        assert "import * as Operations from './comments.graphql';" in comments
        assert "(Operations.SubmitCommentDocument, baseOptions)" in comments

    def test_custom_extension(self, runner, schema_path, documents_dir, temp_output_dir):
        """Test the extension of near-operation-file outputs."""
        shutil.copy(documents_dir / "feed.graphql", temp_output_dir / "feed.graphql")

        result = runner.invoke(cli, [
            "generate", str(schema_path), str(temp_output_dir / "feed.graphql"),
            "--near-operation-file", "--extension", ".vue-apollo.ts",
        ])

        assert result.exit_code == 0, result.output
        assert (temp_output_dir / "feed.vue-apollo.ts").exists()

    def test_invalid_config_file(self, runner, schema_path, documents_dir, temp_output_dir):
        """Test exit status 1 for a malformed config file."""
        config = temp_output_dir / "codegen.yml"
        config.write_text("- not\n- a mapping\n", encoding="utf-8")

        result = runner.invoke(cli, ["generate", str(schema_path), str(documents_dir), "--config", str(config)])

        assert result.exit_code == 1

    def test_invalid_option_value(self, runner, schema_path, documents_dir):
        """Test exit status 1 for an invalid option value."""
        result = runner.invoke(cli, ["generate", str(schema_path), str(documents_dir), "--set", "documentMode=bogus"])

        assert result.exit_code == 1

    def test_unparsable_document(self, runner, schema_path, temp_output_dir):
        """Test exit status 1 for a document with a syntax error."""
        broken = temp_output_dir / "broken.graphql"
        broken.write_text("query {", encoding="utf-8")

        result = runner.invoke(cli, ["generate", str(schema_path), str(broken)])

        assert result.exit_code == 1


class TestValidate:
    """`validate` checks documents against the schema."""

    def test_valid_documents(self, runner, schema_path, documents_dir):
        """Test validation of the fixture documents."""
        result = runner.invoke(cli, ["validate", str(schema_path), str(documents_dir)])

        assert result.exit_code == 0, result.output

    def test_unknown_field(self, runner, schema_path, temp_output_dir):
        """Test exit status 1 for a document the schema rejects."""
        document = temp_output_dir / "bad.graphql"
        document.write_text("query feed { feed { doesNotExist } }", encoding="utf-8")

        result = runner.invoke(cli, ["validate", str(schema_path), str(document)])

        assert result.exit_code == 1


class TestInspect:
    """`inspect` lists definitions with their generated names."""

    def test_inspect(self, runner, schema_path, documents_dir):
        """Test that every generated name is listed in full."""
        result = runner.invoke(cli, ["-q", "inspect", str(schema_path), str(documents_dir)])

        assert result.exit_code == 0, result.output
        assert "useMyFeedQuery" in result.output
        assert "useSubmitCommentMutation" in result.output
        assert "SubmitCommentDocument" in result.output
        assert "RepositoryWithOwnerFragmentDoc" in result.output
        assert "FeedWithRepository" in result.output
        assert "\u2026" not in result.output
