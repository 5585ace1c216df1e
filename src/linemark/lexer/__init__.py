"""Line-classifying lexer for the linemark parser.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + navigation)
├── modes.py             # LexerMode enum, OpenFence state
├── classifiers/         # Block-type classification mixins
│   ├── heading.py       # ATX heading
│   ├── fence.py         # Fenced code
│   ├── thematic.py      # Thematic break
│   └── list.py          # List markers
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (main dispatch)
    └── fence.py         # Code fence mode

Usage:
    >>> from linemark.lexer import Lexer
    >>> for token in Lexer("# Hello\n\nWorld").tokenize():
    ...     print(token)
Token(ATX_HEADING, 'Hello', 1:1)
Token(BLANK_LINE, '', 2:1)
Token(PARAGRAPH_LINE, 'World', 3:1)
Token(EOF, '', 3:6)

"""

from linemark.lexer.core import Lexer
from linemark.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
