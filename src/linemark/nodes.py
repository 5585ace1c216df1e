"""Typed document nodes for linemark.

Block nodes are frozen dataclasses with slots. Inline content is a flat
tuple of text fragments rather than a tree: styling is a flag set carried
by each run, so nested emphasis is simply a run whose flags overlap.

Node Hierarchy:
Document
└── Block
    ├── Heading        (level 1..5)
    ├── Paragraph
    ├── ListItem       (kind + depth; nesting is implied by depth)
    ├── CodeBlock
    ├── LineBreak
    └── Rule
TextFragment
    ├── StyledRun      (Style flags + text)
    ├── Link
    └── Image

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Literal, TypeAlias

from linemark.location import SourceLocation

# =============================================================================
# Inline fragments
# =============================================================================


class Style(Flag):
    """Inline style flags carried by a StyledRun.

    ``MODIFIER`` marks delimiter punctuation (``**``, ``` ` ```, ...) that
    was consumed from the source. Modifier runs stay in the fragment list so
    offsets remain valid but are never rendered.

    """

    NORMAL = 0
    STRONG = auto()
    EMPHASIS = auto()
    CODE = auto()
    STRIKETHROUGH = auto()
    MODIFIER = auto()


@dataclass(frozen=True, slots=True)
class StyledRun:
    """A run of text sharing one set of styles.

    Markdown: plain text, *em*, **strong**, `code`, ~~strike~~
    """

    style: Style
    text: str

    @property
    def is_modifier(self) -> bool:
        return Style.MODIFIER in self.style

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink.

    Markdown: [alt](target)
    HTML: <a href="target">alt</a>

    """

    alt: str
    target: str

    def __len__(self) -> int:
        return len(self.alt) + len(self.target)


@dataclass(frozen=True, slots=True)
class Image:
    """Image.

    Markdown: ![alt](source)
    HTML: <img src="source" alt="alt">

    """

    alt: str
    source: str

    def __len__(self) -> int:
        return len(self.alt) + len(self.source)


TextFragment: TypeAlias = StyledRun | Link | Image


def fragment_length(fragment: TextFragment) -> int:
    """Character weight of a fragment, used for offset bookkeeping.

    Links and images weigh their alt text plus their target; this is not
    a rendered width.
    """
    return len(fragment)


NEWLINE = StyledRun(Style.NORMAL, "\n")
"""Separator inserted between merged paragraph lines."""


# =============================================================================
# Block nodes
# =============================================================================


class ListKind(Enum):
    """Ordered (``1.``) or unordered (``-``, ``+``, ``*``) list item."""

    ORDERED = auto()
    UNORDERED = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for block nodes; every block knows where it came from."""

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: ## Heading  (levels deeper than 5 are clamped to 5)
    HTML: <h2>Heading</h2>

    """

    level: Literal[1, 2, 3, 4, 5]
    content: tuple[TextFragment, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph; consecutive lines are joined with NEWLINE runs."""

    content: tuple[TextFragment, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """One list line.

    There is no list container node: ``depth`` (tabs plus groups of
    spaces before the marker) tells the renderer how to nest.

    """

    kind: ListKind
    depth: int
    content: tuple[TextFragment, ...]
    ordinal: int | None = None


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block; ``code`` holds every inner line plus ``\\n``."""

    language: str
    code: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Explicit blank-line marker."""


@dataclass(frozen=True, slots=True)
class Rule(Node):
    """Thematic break.

    Markdown: ---, ***, _ _ _
    HTML: <hr>

    """


Block: TypeAlias = Heading | Paragraph | ListItem | CodeBlock | LineBreak | Rule


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the blocks of a document in source order."""

    children: tuple[Block, ...]
