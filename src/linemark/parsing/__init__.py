"""Parsing subsystem for the linemark parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Inline content (delimiter styles, links, escapes)
- `BlockParsingMixin`: One block node per line token

and the block compactor, `compact_blocks`.

Example:
    >>> from linemark.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from linemark.parsing.blocks import BlockParsingMixin
from linemark.parsing.compact import compact_blocks
from linemark.parsing.inline import InlineParsingMixin
from linemark.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
    "compact_blocks",
]
