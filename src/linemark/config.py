"""ContextVar-based parse configuration for linemark.

Config is set once per ``Markdown`` instance (or per ``parse()`` call) and
read by the lexer and parser running in that context. ContextVars are
thread-local and task-local, so concurrent parses never see each other's
settings.

Usage:
    from linemark.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(compact=False)):
        blocks = Parser(source).parse()

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from linemark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        compact: Run the block compactor (merge paragraph lines, collapse
            blank-line markers). When False the raw per-line blocks are kept.
        indent_width: Number of leading spaces that count as one list
            nesting level. Each leading tab always counts as one level.
        text_transformer: Optional callback applied to every line outside
            a code fence before it is classified.

    """

    compact: bool = True
    indent_width: int = 4
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            raise ConfigError("indent_width", f"must be >= 1, got {self.indent_width}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Keys that are not ParseConfig fields are ignored.

        Example:
            >>> ParseConfig.from_dict({"compact": False, "theme": "dark"}).compact
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "linemark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the active ParseConfig for this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset the current context to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Temporarily use ``config``, restoring the previous one on exit.

    Example:
        >>> with parse_config_context(ParseConfig(indent_width=2)):
        ...     get_parse_config().indent_width
        2

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
