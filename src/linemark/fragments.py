"""Span-addressed fragment model for inline content.

An ``InlineText`` starts life as one unstyled run holding a whole logical
line. The inline engine then addresses that line by absolute character
offsets (``Span``) computed once against the original text and splits
fragments in place:

- ``style()`` is length preserving. The delimiter characters it consumes
  stay in the list as ``MODIFIER`` runs, so every offset computed before the
  call is still valid after it.
- ``replace()`` and ``remove()`` drop the addressed characters. Offsets to
  the right of the mutation shift, so callers apply them right to left.

Every operation locates its target with a linear cumulative-length scan and
swaps that one list slot for the pieces it was split into. No operation
ever touches two fragments.

Example:
    >>> text = InlineText.from_line("a *b* c")
    >>> text.style(1, Span(2, 3), Style.EMPHASIS)
    True
    >>> [f.text for f in text]
    ['a ', '*', 'b', '*', ' c']

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from linemark.errors import FragmentError
from linemark.nodes import StyledRun, Style, TextFragment


@dataclass(frozen=True, slots=True)
class Span:
    """A ``(offset, length)`` window into the original, unstyled line.

    Offsets count characters (code points), never bytes.
    """

    offset: int
    length: int

    @classmethod
    def from_start_end(cls, start: int, end: int) -> Span:
        """Build a span covering ``[start, end)``."""
        return cls(start, end - start)

    @property
    def end(self) -> int:
        return self.offset + self.length


class InlineText:
    """Mutable, ordered sequence of text fragments for one logical line.

    Used only while a line is being parsed; ``freeze()`` hands the result to
    an immutable block node.
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: Iterable[TextFragment] = ()) -> None:
        self._fragments: list[TextFragment] = list(fragments)

    @classmethod
    def from_line(cls, line: str) -> InlineText:
        """Wrap a line as a single unstyled run (no fragments if empty)."""
        if not line:
            return cls()
        return cls((StyledRun(Style.NORMAL, line),))

    # =========================================================================
    # Mutation
    # =========================================================================

    def style(self, prefix_len: int, span: Span, style: Style) -> bool:
        """Apply ``style`` to the inside of ``span``.

        The first and last ``prefix_len`` characters of the span become
        ``MODIFIER`` runs; the characters between them keep their existing
        styles with ``style`` OR-ed in.

        Args:
            prefix_len: Width of each delimiter run (same on both sides)
            span: Absolute span, delimiters included
            style: Style flags to add to the enclosed text

        Returns:
            False (and nothing changes) if the span does not fit inside a
            single fragment.

        Raises:
            FragmentError: If the span starts inside a link or image.
        """
        located = self._locate(span)
        if located is None:
            return False
        index, local, run = located

        end = local + span.length
        inner_start = local + prefix_len
        inner_end = end - prefix_len
        if inner_start > inner_end:
            return False

        text = run.text
        self._splice(
            index,
            (
                StyledRun(run.style, text[:local]),
                StyledRun(Style.MODIFIER, text[local:inner_start]),
                StyledRun(run.style | style, text[inner_start:inner_end]),
                StyledRun(Style.MODIFIER, text[inner_end:end]),
                StyledRun(run.style, text[end:]),
            ),
        )
        return True

    def replace(self, span: Span, fragment: TextFragment) -> bool:
        """Swap the characters under ``span`` for ``fragment``.

        Not length preserving: the addressed characters are discarded.

        Raises:
            FragmentError: If the span starts inside a link or image.
        """
        located = self._locate(span)
        if located is None:
            return False
        index, local, run = located

        text = run.text
        left = StyledRun(run.style, text[:local])
        right = StyledRun(run.style, text[local + span.length :])
        parts: list[TextFragment] = []
        if left.text:
            parts.append(left)
        parts.append(fragment)
        if right.text:
            parts.append(right)
        self._fragments[index : index + 1] = parts
        return True

    def remove(self, span: Span) -> bool:
        """Drop the characters under ``span``.

        Raises:
            FragmentError: If the span starts inside a link or image.
        """
        located = self._locate(span)
        if located is None:
            return False
        index, local, run = located

        text = run.text
        self._splice(
            index,
            (
                StyledRun(run.style, text[:local]),
                StyledRun(run.style, text[local + span.length :]),
            ),
        )
        return True

    def append(self, fragment: TextFragment) -> None:
        self._fragments.append(fragment)

    def extend(self, fragments: Iterable[TextFragment]) -> None:
        self._fragments.extend(fragments)

    # =========================================================================
    # Internals
    # =========================================================================

    def _locate(self, span: Span) -> tuple[int, int, StyledRun] | None:
        """Find the run containing ``span.offset``.

        Returns (list index, offset local to the run, run), or None when no
        fragment contains the offset or the span overruns that fragment.
        """
        pos = 0
        for index, fragment in enumerate(self._fragments):
            size = len(fragment)
            if pos <= span.offset < pos + size:
                if not isinstance(fragment, StyledRun):
                    raise FragmentError(
                        f"cannot split fragment at offset {span.offset}", fragment
                    )
                if span.end > pos + size:
                    return None
                return index, span.offset - pos, fragment
            pos += size
        return None

    def _splice(self, index: int, parts: Iterable[StyledRun]) -> None:
        self._fragments[index : index + 1] = [p for p in parts if p.text]

    # =========================================================================
    # Read access
    # =========================================================================

    @property
    def fragments(self) -> tuple[TextFragment, ...]:
        return tuple(self._fragments)

    def freeze(self) -> tuple[TextFragment, ...]:
        """Snapshot the fragments for storage in a block node."""
        return tuple(self._fragments)

    def text(self) -> str:
        """Concatenate every styled run, modifiers included."""
        return "".join(f.text for f in self._fragments if isinstance(f, StyledRun))

    def __len__(self) -> int:
        return sum(len(f) for f in self._fragments)

    def __iter__(self) -> Iterator[TextFragment]:
        return iter(self._fragments)

    def __repr__(self) -> str:
        return f"InlineText({self._fragments!r})"
