from .markdown_filters import register_markdown_filters, render_markdown

__all__ = ['register_markdown_filters', 'render_markdown']
