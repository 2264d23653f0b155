"""
Plugin configuration.

Options arrive as a flat mapping with camelCase keys (the same keys a
codegen.yml `config:` block uses). `resolve_config` turns that mapping into an
immutable `VueApolloPluginConfig` with every default applied. Unknown keys are
ignored; the only validation is pydantic's type coercion.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from vue_apollo_codegen.errors import ConfigError
from vue_apollo_codegen.gen_logging import get_logger

logger = get_logger(__name__)

NEAR_OPERATION_FILE = "near-operation-file"


class DocumentMode(str, Enum):
    """Where the generated code gets its document values from."""

    GRAPHQL_TAG = "graphQLTag"
    DOCUMENT_NODE = "documentNode"
    EXTERNAL = "external"


class NamingConvention(str, Enum):
    PASCAL_CASE = "pascalCase"
    CAMEL_CASE = "camelCase"
    KEEP = "keep"


class VueApolloPluginConfig(BaseModel):
    """Effective plugin options after defaults."""

    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    document_mode: DocumentMode = Field(DocumentMode.GRAPHQL_TAG, alias="documentMode")
    no_graphql_tag: bool = Field(False, alias="noGraphQLTag")
    import_document_node_externally_from: Optional[str] = Field(
        None, alias="importDocumentNodeExternallyFrom"
    )
    gql_import: str = Field("graphql-tag", alias="gqlImport")
    vue_apollo_composable_import_from: str = Field(
        "@vue/apollo-composable", alias="vueApolloComposableImportFrom"
    )
    vue_composition_api_import_from: str = Field(
        "@vue/composition-api", alias="vueCompositionApiImportFrom"
    )
    dedupe_operation_suffix: bool = Field(False, alias="dedupeOperationSuffix")
    omit_operation_suffix: bool = Field(False, alias="omitOperationSuffix")
    add_doc_blocks: bool = Field(True, alias="addDocBlocks")
    with_composition_functions: bool = Field(True, alias="withCompositionFunctions")
    document_variable_prefix: str = Field("", alias="documentVariablePrefix")
    document_variable_suffix: str = Field("Document", alias="documentVariableSuffix")
    fragment_variable_prefix: str = Field("", alias="fragmentVariablePrefix")
    fragment_variable_suffix: str = Field("FragmentDoc", alias="fragmentVariableSuffix")
    types_prefix: str = Field("", alias="typesPrefix")
    types_suffix: str = Field("", alias="typesSuffix")
    naming_convention: NamingConvention = Field(
        NamingConvention.PASCAL_CASE, alias="namingConvention"
    )
    transform_underscore: bool = Field(False, alias="transformUnderscore")
    pure_magic_comment: bool = Field(False, alias="pureMagicComment")

    @model_validator(mode="before")
    @classmethod
    def _apply_legacy_switches(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        no_tag = _pop_option(data, "noGraphQLTag", "no_graphql_tag")
        mode = _pop_option(data, "documentMode", "document_mode")
        mode_value = mode.value if isinstance(mode, DocumentMode) else mode

        if _is_truthy(no_tag) and mode_value != DocumentMode.EXTERNAL.value:
            mode_value = DocumentMode.DOCUMENT_NODE.value
        if mode_value is not None:
            data["documentMode"] = mode_value
        data["noGraphQLTag"] = no_tag if no_tag is not None else False

        if mode_value == DocumentMode.EXTERNAL.value:
            source = _pop_option(
                data, "importDocumentNodeExternallyFrom", "import_document_node_externally_from"
            )
            if not source:
                logger.warning(
                    "documentMode is 'external' but importDocumentNodeExternallyFrom is not set, "
                    f"falling back to '{NEAR_OPERATION_FILE}'"
                )
                source = NEAR_OPERATION_FILE
            data["importDocumentNodeExternallyFrom"] = source
        return data

    @property
    def is_external(self) -> bool:
        return self.document_mode is DocumentMode.EXTERNAL

    @property
    def imports_near_operation_file(self) -> bool:
        return self.import_document_node_externally_from == NEAR_OPERATION_FILE


def _pop_option(data: dict, alias: str, name: str):
    """Remove an option given under either spelling; the camelCase alias wins."""
    by_name = data.pop(name, None)
    by_alias = data.pop(alias, None)
    return by_alias if by_alias is not None else by_name


def _is_truthy(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def resolve_config(raw: Optional[Mapping[str, Any]] = None) -> VueApolloPluginConfig:
    """Apply defaults to a raw option mapping."""
    if isinstance(raw, VueApolloPluginConfig):
        return raw
    try:
        return VueApolloPluginConfig.model_validate(dict(raw or {}))
    except ValidationError as e:
        raise ConfigError(f"Invalid plugin configuration: {e}") from e


def load_config_file(path) -> dict:
    """
    Read plugin options from a YAML file.

    The root must be a mapping. If it carries a `config:` mapping (the
    codegen.yml layout), that inner mapping is returned.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file {path} is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the root")

    inner = data.get("config")
    if inner is None:
        return data
    if not isinstance(inner, dict):
        raise ConfigError(f"'config' in {path} must be a mapping")
    return inner


def parse_overrides(pairs) -> dict:
    """Turn CLI `key=value` pairs into an option mapping (values are parsed as YAML scalars)."""
    overrides = {}
    for pair in pairs or ():
        if "=" not in pair:
            raise ConfigError(f"Expected key=value, got '{pair}'")
        key, value = pair.split("=", 1)
        key = key.strip()
        if not key:
            raise ConfigError(f"Missing option name in '{pair}'")
        overrides[key] = _parse_scalar(value)
    return overrides


def _parse_scalar(value: str):
    if not value.strip():
        return ""
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        # module paths such as "@vue/apollo-composable" are not valid plain YAML scalars
        return value
    return value if isinstance(parsed, (dict, list)) else parsed
