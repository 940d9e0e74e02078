"""
Renderers

Public API:
- render_markdown
"""

from .markdown import render_markdown

__all__ = ["render_markdown"]
