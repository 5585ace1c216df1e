"""
linemark: line-oriented lightweight markup parser.

Converts plain-text markup into a typed Document (headings, paragraphs,
flat list items, code fences, rules, blank-line markers) whose inline
content is a flat tuple of styled text fragments, and renders it to HTML.

Quick Start:
    >>> from linemark import parse, render
    >>> doc = parse("# Hello, *World*!")
    >>> print(render(doc))
    <h1>Hello, <em>World</em>!</h1>

    >>> # Or use the high-level Markdown class
    >>> from linemark import Markdown
    >>> md = Markdown(compact=False)
    >>> html = md("line one\\nline two")
"""

from collections.abc import Callable, Iterable

from linemark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from linemark.errors import ConfigError, FragmentError, LinemarkError, RenderError
from linemark.fragments import InlineText, Span
from linemark.lexer import Lexer
from linemark.location import SourceLocation
from linemark.nodes import (
    NEWLINE,
    Block,
    CodeBlock,
    Document,
    Heading,
    Image,
    LineBreak,
    Link,
    ListItem,
    ListKind,
    Paragraph,
    Rule,
    Style,
    StyledRun,
    TextFragment,
)
from linemark.parser import Parser
from linemark.parsing import compact_blocks
from linemark.parsing.inline import parse_inline
from linemark.renderers.html import HtmlRenderer
from linemark.serialization import from_dict, from_json, to_dict, to_json
from linemark.tokens import Token, TokenType

__version__ = "0.1.0"


def _build_document(source: str, source_file: str | None) -> Document:
    blocks = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    return Document(location=loc, children=tuple(blocks))


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse markup source into a typed Document.

    Never raises for any input text: malformed constructs degrade to
    paragraph text.

    Args:
        source: Markup source text
        source_file: Optional source file path recorded in locations
        config: Parse configuration; defaults to the one active in the
            current context

    Returns:
        Document root node

    Example:
        >>> doc = parse("# Hello **World**")
        >>> doc.children[0].level
        1
    """
    if config is None:
        return _build_document(source, source_file)

    with parse_config_context(config):
        return _build_document(source, source_file)


def render(doc: Document) -> str:
    """Render a Document to HTML.

    Example:
        >>> print(render(parse("---")))
        <hr>
    """
    return HtmlRenderer().render(doc)


class Markdown:
    """High-level processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>\\n'

        >>> # Access the document
        >>> doc = md.parse("## Heading")
        >>> doc.children[0].level
        2

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        compact: bool = True,
        indent_width: int = 4,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            compact: Merge paragraph lines and collapse blank-line markers
            indent_width: Spaces per list nesting level
            text_transformer: Optional callback applied to every line
                outside code fences before classification

        Raises:
            ConfigError: If indent_width is less than 1.
        """
        self._config = ParseConfig(
            compact=compact,
            indent_width=indent_width,
            text_transformer=text_transformer,
        )
        self._renderer = HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source into a Document using this processor's config."""
        with parse_config_context(self._config):
            return _build_document(source, source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple sources; config is set once for the whole batch.

        Example:
            >>> md = Markdown()
            >>> docs = md.parse_many(["# Doc 1", "# Doc 2", "# Doc 3"])
        """
        with parse_config_context(self._config):
            return [_build_document(source, source_file) for source in sources]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Markdown",
    # Block nodes
    "Block",
    "CodeBlock",
    "Document",
    "Heading",
    "LineBreak",
    "ListItem",
    "ListKind",
    "Paragraph",
    "Rule",
    # Inline fragments
    "TextFragment",
    "Image",
    "Link",
    "NEWLINE",
    "Style",
    "StyledRun",
    "InlineText",
    "Span",
    "parse_inline",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "LinemarkError",
    "ConfigError",
    "FragmentError",
    "RenderError",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Low-level
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "SourceLocation",
    "Token",
    "TokenType",
    "compact_blocks",
]
