"""
Pytest configuration and shared fixtures for the vue-apollo codegen test suite.
"""

import re
import shutil
import tempfile
from pathlib import Path

import pytest
from graphql import parse

from vue_apollo_codegen.documents import DocumentFile, load_schema
from vue_apollo_codegen.plugin import plugin


@pytest.fixture(scope="session")
def fixtures_dir():
    """Return the directory holding the schema and document fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def schema_path(fixtures_dir):
    return fixtures_dir / "githunt.graphql"


@pytest.fixture(scope="session")
def schema(schema_path):
    """The GitHunt schema (cached for session)."""
    return load_schema(schema_path)


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated code output."""
    temp_dir = tempfile.mkdtemp(prefix="vue_apollo_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def make_docs():
    """Factory fixture: GraphQL sources (or (location, source) pairs) -> DocumentFile list."""
    def _make(*sources):
        docs = []
        for source in sources:
            location, text = source if isinstance(source, tuple) else ("", source)
            docs.append(DocumentFile(location=location, document=parse(text)))
        return docs
    return _make


@pytest.fixture
def run_plugin(schema, make_docs):
    """Factory fixture: run the plugin over GraphQL sources with the given options."""
    def _run(*sources, config=None, output_file="graphql.ts"):
        return plugin(schema, make_docs(*sources), config or {}, {"outputFile": output_file})
    return _run


@pytest.fixture
def similar():
    """Whitespace-insensitive containment check, for comparing generated code blocks."""
    def _similar(expected: str, actual: str) -> bool:
        return _squash(expected) in _squash(actual)
    return _similar


def _squash(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


# Test data fixtures for common scenarios

@pytest.fixture
def basic_doc():
    """Query named `test` without variables."""
    return """
    query test {
      feed {
        id
        commentCount
        repository {
          full_name
          html_url
          owner {
            avatar_url
          }
        }
      }
    }
    """


@pytest.fixture
def mutation_doc():
    return """
    mutation test($name: String) {
      submitRepository(repoFullName: $name) {
        id
      }
    }
    """


@pytest.fixture
def subscription_doc():
    return """
    subscription test($name: String) {
      commentAdded(repoFullName: $name) {
        id
      }
    }
    """


@pytest.fixture
def multiple_operation_doc():
    """One query, one mutation and one subscription in a single document."""
    return """
    query testOne {
      feed {
        id
        commentCount
      }
    }

    mutation testTwo($name: String) {
      submitRepository(repoFullName: $name) {
        id
      }
    }

    subscription testThree($name: String) {
      commentAdded(repoFullName: $name) {
        id
      }
    }
    """


@pytest.fixture
def fragment_only_doc():
    return """
    fragment feedFragment on Entry {
      id
      commentCount
    }
    """
