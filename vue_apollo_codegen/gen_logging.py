"""
Log output of the generator.

Every module logs through `get_logger(__name__)`, which places it under the
"vue_apollo.gen" logger. The CLI calls `configure_gen_logging` once per run;
library callers that never do get the standard logging defaults.

What each level carries:
    DEBUG    each fragment and operation as it is emitted, resolved options
    INFO     one `[GENERATED]` line per plugin run
    WARNING  anonymous operations skipped, external-mode fallbacks
"""

import logging
import sys

_LOGGER_NAME = "vue_apollo.gen"


def get_logger(name: str = None) -> logging.Logger:
    """Logger for a module, named after its last dotted component ("vue_apollo.gen.plugin")."""
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Send generator logs to stderr.

    Args:
        verbose: -v, log every emitted definition.
        quiet:   -q, log warnings and errors only. `verbose` wins when both are set.
    """
    level = _level(verbose, quiet)
    gen_logger = logging.getLogger(_LOGGER_NAME)
    gen_logger.setLevel(level)

    # a previous run may have bound a handler to a stream that is gone
    for existing in list(gen_logger.handlers):
        gen_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_GenFormatter())
    gen_logger.addHandler(handler)

    # stdout may carry generated TypeScript
    gen_logger.propagate = False


class _GenFormatter(logging.Formatter):
    """Bare messages; warnings and errors get a `[LEVEL]` tag."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"[{record.levelname}] {message}"
        return message
