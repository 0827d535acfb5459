"""
Template filters rendering markdown: field help text and free text in views.
"""
import logging
import mistune
from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

# escape=True keeps raw HTML in help text from reaching the page
markdown = mistune.create_markdown(
    escape=True,
    plugins=['strikethrough', 'url']
)


def _unwrap_paragraph(html):
    """Drop the ``<p>`` around a single paragraph so it fits inline elements."""
    stripped = html.strip()
    if stripped.startswith('<p>') and stripped.endswith('</p>') and stripped.count('<p>') == 1:
        return stripped[3:-4]
    return html


def render_markdown(text, inline=False):
    """
    Convert markdown text to HTML.

    Args:
        text: Markdown text to convert
        inline: Render a single paragraph without its ``<p>`` wrapper

    Returns:
        Safe HTML markup
    """
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    try:
        html = markdown(text)
    except Exception as e:
        logger.warning(f"Markdown rendering failed: {type(e).__name__}: {e}")
        return Markup(escape(text)) if inline else Markup(f'<p>{escape(text)}</p>')

    return Markup(_unwrap_paragraph(html) if inline else html)


def register_markdown_filters(app):
    """Register markdown-related template filters."""

    @app.template_filter('markdown')
    def markdown_filter(text):
        return render_markdown(text)

    @app.template_filter('markdown_inline')
    def markdown_inline_filter(text):
        return render_markdown(text, inline=True)
