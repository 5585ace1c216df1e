"""Inline parsing for linemark.

Modules:
- scanner: single-pass discovery of links, marker runs and escapes
- queues: per-marker, per-run-length FIFO offset queues
- resolver: greedy pairing and substitution onto an InlineText
- core: ``parse_inline`` and the parser mixin

"""

from linemark.parsing.inline.core import InlineParsingMixin, parse_inline
from linemark.parsing.inline.queues import DelimiterPair, DelimiterQueues
from linemark.parsing.inline.resolver import (
    STYLE_TABLE,
    apply_substitutions,
    resolve_delimiters,
)
from linemark.parsing.inline.scanner import ScanResult, scan_line, try_scan_link

__all__ = [
    "InlineParsingMixin",
    "parse_inline",
    "DelimiterPair",
    "DelimiterQueues",
    "STYLE_TABLE",
    "apply_substitutions",
    "resolve_delimiters",
    "ScanResult",
    "scan_line",
    "try_scan_link",
]
