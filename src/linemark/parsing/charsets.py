"""Character sets for O(1) classification.

All sets are frozensets (immutable, module-level, no per-call allocation).

Usage:
    from linemark.parsing.charsets import RULE_CHARS

    if char in RULE_CHARS:
        ...
"""

# Inline marker characters, in queue order. The index of a marker in this
# tuple is its row in DelimiterQueues.
MARKERS: tuple[str, ...] = ("*", "_", "`", "~")
MARKER_INDEX: dict[str, int] = {char: index for index, char in enumerate(MARKERS)}

# Delimiter width used for each run-length bucket (1, 2, 3 or more).
BUCKET_WIDTHS: tuple[int, ...] = (1, 2, 3)

ESCAPE_CHAR = "\\"

# Thematic break characters: ---, ***, ___
RULE_CHARS: frozenset[str] = frozenset("*-_")

# Unordered list markers, each followed by a space
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-+*")

HEADING_CHAR = "#"
MAX_HEADING_LEVEL = 5

FENCE = "```"

# Ordinals longer than this stay None instead of being converted
MAX_ORDINAL_DIGITS = 9
