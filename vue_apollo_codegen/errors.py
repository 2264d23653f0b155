"""Exceptions raised by the vue-apollo code generator."""


class CodegenError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(CodegenError):
    """Raised when plugin options or a config file cannot be interpreted."""


class DocumentLoadError(CodegenError):
    """Raised when a schema or document file cannot be read or parsed."""

    def __init__(self, location, message):
        self.location = str(location)
        super().__init__(f"{self.location}: {message}")


class DuplicateDefinitionError(CodegenError):
    """Raised when two different definitions share the same name."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' is defined more than once with different selections")


class FragmentCycleError(CodegenError):
    """Raised when fragment spreads form a cycle."""

    def __init__(self, cycle):
        self.cycle = list(cycle)
        path = " -> ".join(self.cycle + self.cycle[:1])
        super().__init__(f"Fragment spreads form a cycle: {path}")
