"""linemark renderers.

Available Renderers:
- HtmlRenderer: Renders a Document to HTML using StringBuilder pattern

Thread Safety:
Renderers keep all state local to each render() call.

"""

from linemark.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
