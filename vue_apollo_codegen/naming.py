"""
Name derivation for generated declarations.

Every generated identifier is derived from a GraphQL definition name:

    query feed            -> FeedDocument, FeedQuery, FeedQueryVariables, useFeedQuery
    fragment MyFragment   -> MyFragmentFragmentDoc

The naming convention (pascalCase by default) is applied to the name with its
suffix attached, then the configured type prefix/suffix is wrapped around it
where a *type* is being named. Composition function names never carry the
type prefix.
"""

import re
from functools import partial

from vue_apollo_codegen.config import NamingConvention, VueApolloPluginConfig

_SPLIT_PATTERNS = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_STRIP_PATTERN = re.compile(r"[^A-Za-z0-9]+")

OPERATION_KINDS = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}


# ------------------------------------------------------------------------------
# Case conversion

def split_words(text: str) -> list:
    """Split an identifier on case boundaries and non-alphanumeric runs."""
    for pattern in _SPLIT_PATTERNS:
        text = pattern.sub(r"\1 \2", text)
    return [w for w in _STRIP_PATTERN.split(text) if w]


def _pascal_word(word: str, index: int) -> str:
    first, rest = word[0], word[1:].lower()
    if index > 0 and first.isdigit():
        return f"_{first}{rest}"
    return f"{first.upper()}{rest}"


def pascal_case(text: str) -> str:
    return "".join(_pascal_word(w, i) for i, w in enumerate(split_words(text)))


def camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    head = words[0].lower()
    return head + "".join(_pascal_word(w, i) for i, w in enumerate(words[1:], start=1))


def _convention(config: VueApolloPluginConfig):
    convention = config.naming_convention
    if convention is NamingConvention.KEEP:
        return lambda text: text
    func = camel_case if convention is NamingConvention.CAMEL_CASE else pascal_case
    if config.transform_underscore:
        return func
    return partial(_keep_underscores, func)


def _keep_underscores(func, text: str) -> str:
    return "_".join(func(part) for part in text.split("_") if part) or func(text)


def convert_name(
    name: str,
    config: VueApolloPluginConfig,
    *,
    suffix: str = "",
    use_types_prefix: bool = True,
    use_types_suffix: bool = True,
) -> str:
    """Apply the naming convention to `name + suffix`, then the types prefix/suffix."""
    converted = _convention(config)(f"{name}{suffix}")
    if use_types_prefix:
        converted = config.types_prefix + converted
    if use_types_suffix:
        converted = converted + config.types_suffix
    return converted


# ------------------------------------------------------------------------------
# Operation names

def operation_kind(node) -> str:
    """'Query', 'Mutation' or 'Subscription' for an OperationDefinitionNode."""
    return OPERATION_KINDS[node.operation.value]


def operation_suffix(name: str, kind: str, config: VueApolloPluginConfig) -> str:
    if config.omit_operation_suffix:
        return ""
    if config.dedupe_operation_suffix and name.lower().endswith(kind.lower()):
        return ""
    return kind


def composition_function_base(name: str, kind: str, config: VueApolloPluginConfig) -> str:
    """The part after `use` in `useFeedQuery`; also the prefix of the result type alias."""
    return convert_name(
        name, config, suffix=operation_suffix(name, kind, config), use_types_prefix=False
    )


def result_type_name(name: str, kind: str, config: VueApolloPluginConfig) -> str:
    return convert_name(name, config, suffix=operation_suffix(name, kind, config))


def variables_type_name(name: str, kind: str, config: VueApolloPluginConfig) -> str:
    return convert_name(name, config, suffix=operation_suffix(name, kind, config) + "Variables")


def document_variable_name(name: str, config: VueApolloPluginConfig) -> str:
    converted = convert_name(name, config, use_types_prefix=False, use_types_suffix=False)
    return f"{config.document_variable_prefix}{converted}{config.document_variable_suffix}"


def fragment_variable_name(name: str, config: VueApolloPluginConfig) -> str:
    converted = convert_name(name, config, use_types_prefix=False, use_types_suffix=False)
    return f"{config.fragment_variable_prefix}{converted}{config.fragment_variable_suffix}"
