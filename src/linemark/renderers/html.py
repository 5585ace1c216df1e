"""HTML renderer using StringBuilder pattern.

Renders a Document to HTML. List items are flat in the document (each
carries a depth), so the renderer synthesizes the ``<ul>``/``<ol>``
containers from a stack it keeps while walking the blocks.

Thread Safety:
All state is local to each render() call.
Multiple threads can safely share a single HtmlRenderer instance.

"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from urllib.parse import quote as url_quote

from linemark.errors import RenderError
from linemark.nodes import (
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
from linemark.stringbuilder import StringBuilder

# Innermost first
_STYLE_TAGS: tuple[tuple[Style, str], ...] = (
    (Style.STRONG, "strong"),
    (Style.EMPHASIS, "em"),
    (Style.CODE, "code"),
    (Style.STRIKETHROUGH, "s"),
)

_LIST_TAGS = {ListKind.ORDERED: "ol", ListKind.UNORDERED: "ul"}


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def _encode_url(url: str) -> str:
    """Decode HTML entities, then percent-encode spaces, backslashes and non-ASCII.

    Returns URL safe for an attribute (still needs html_escape for quotes).
    """
    decoded = html.unescape(url)
    return url_quote(decoded, safe="/:?#[]@!$&'()*+,;=-_.~%")


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Attributes:
        open_lists: Kinds of the list containers currently open, outermost
            first. Its length is the depth of the last item plus one.

    """

    open_lists: list[ListKind] = field(default_factory=list)


class HtmlRenderer:
    """Render a Document to HTML.

    Usage:
        >>> from linemark import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>\\n'

    Thread Safety:
        Each render() call creates an independent RenderContext.

    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document to HTML string.

        Raises:
            RenderError: If the document holds a node that is not a block.
        """
        ctx = RenderContext()
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb, ctx)
        self._close_lists(0, sb, ctx)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render a block node."""
        if not isinstance(block, ListItem):
            self._close_lists(0, sb, ctx)

        match block:
            case Heading():
                sb.append(f"<h{block.level}>")
                self._render_inlines(block.content, sb)
                sb.append(f"</h{block.level}>\n")
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.content, sb)
                sb.append("</p>\n")
            case CodeBlock():
                self._render_code_block(block, sb)
            case ListItem():
                self._render_list_item(block, sb, ctx)
            case LineBreak():
                sb.append("<br>\n")
            case Rule():
                sb.append("<hr>\n")
            case _:
                raise RenderError(f"Cannot render node of type {type(block).__name__}")

    def _render_code_block(self, code: CodeBlock, sb: StringBuilder) -> None:
        lang_class = f' class="{html_escape(code.language)}"' if code.language else ""
        sb.append(f"<pre><code{lang_class}>")
        sb.append(html_escape(code.code))
        sb.append("</code></pre>\n")

    def _render_list_item(self, item: ListItem, sb: StringBuilder, ctx: RenderContext) -> None:
        """Render one item, opening or closing containers to reach its depth."""
        target = item.depth + 1
        self._close_lists(target, sb, ctx)

        if len(ctx.open_lists) == target and ctx.open_lists[-1] is not item.kind:
            self._close_lists(target - 1, sb, ctx)

        while len(ctx.open_lists) < target:
            ctx.open_lists.append(item.kind)
            tag = _LIST_TAGS[item.kind]
            if (
                len(ctx.open_lists) == target
                and item.kind is ListKind.ORDERED
                and item.ordinal is not None
                and item.ordinal != 1
            ):
                sb.append(f'<{tag} start="{item.ordinal}">\n')
            else:
                sb.append(f"<{tag}>\n")

        sb.append("<li>")
        self._render_inlines(item.content, sb)
        sb.append("</li>\n")

    def _close_lists(self, keep: int, sb: StringBuilder, ctx: RenderContext) -> None:
        """Close open list containers until at most ``keep`` remain."""
        while len(ctx.open_lists) > keep:
            kind = ctx.open_lists.pop()
            sb.append(f"</{_LIST_TAGS[kind]}>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, fragments: tuple[TextFragment, ...], sb: StringBuilder) -> None:
        for fragment in fragments:
            self._render_inline(fragment, sb)

    def _render_inline(self, fragment: TextFragment, sb: StringBuilder) -> None:
        """Render a text fragment."""
        match fragment:
            case StyledRun():
                if fragment.is_modifier:
                    return
                text = html_escape(fragment.text).replace("\n", "<br>")
                for style, tag in _STYLE_TAGS:
                    if style in fragment.style:
                        text = f"<{tag}>{text}</{tag}>"
                sb.append(text)
            case Link():
                href = html_escape(_encode_url(fragment.target))
                sb.append(f'<a href="{href}">{html_escape(fragment.alt)}</a>')
            case Image():
                src = html_escape(_encode_url(fragment.source))
                sb.append(f'<img src="{src}" alt="{html_escape(fragment.alt)}">')
            case _:
                raise RenderError(f"Cannot render fragment of type {type(fragment).__name__}")
