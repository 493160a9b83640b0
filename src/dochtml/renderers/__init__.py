"""dochtml renderers.

Renderers convert individual declarations, doc prose, and example bodies
into markup. The document template calls them as hooks.

Available Renderers:
- HtmlRenderer: Plain HTML, no highlighting or hotlinking

Thread Safety:
Renderers hold no per-render state and are safe for concurrent use.

"""

from dochtml.renderers.html import HtmlRenderer
from dochtml.renderers.protocol import DeclHTML, Renderer

__all__ = ["DeclHTML", "HtmlRenderer", "Renderer"]
