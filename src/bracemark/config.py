"""ContextVar-based parse configuration for Bracemark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per parse call and read by the parser in that context.

Usage:
    # The top-level parse() sets config for the duration of the call
    from bracemark import parse, ParseConfig
    doc = parse(b"hello [b x", config=ParseConfig(skip_empty_text=True))

    # Direct parser usage
    from bracemark.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(flush_trailing_text=False)):
        parser = Parser(source)
        result = parser.parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded; it's per-call state,
    not configuration. It remains on the Parser instance.

    Attributes:
        flush_trailing_text: Emit a final Text node for a non-empty run
            after the last directive (or for directive-free input)
        skip_empty_text: Drop zero-length Text runs, such as the one
            before a directive at offset 0

    """

    flush_trailing_text: bool = True
    skip_empty_text: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "skip_empty_text": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.skip_empty_text
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "bracemark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(skip_empty_text=True)):
        ...     result = Parser(b"[a x").parse()
        >>> # Automatically reset to previous config

    """
    token = _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
