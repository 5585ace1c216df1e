"""Line classifiers for the linemark lexer.

Each classifier is a mixin deciding whether one line matches one block
pattern. Only the fence classifier touches lexer state (it opens the fence).
"""

from linemark.lexer.classifiers.fence import FenceClassifierMixin
from linemark.lexer.classifiers.heading import HeadingClassifierMixin
from linemark.lexer.classifiers.list import ListClassifierMixin
from linemark.lexer.classifiers.thematic import ThematicClassifierMixin, is_thematic_break

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "ThematicClassifierMixin",
    "is_thematic_break",
]
