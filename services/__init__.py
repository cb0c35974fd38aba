"""
Services Package - Business Logic Layer

This package contains service classes that encapsulate content handling,
keeping route handlers thin and focused on HTTP concerns.
"""

from .article_repository import ArticleRepository, ArticleNotFoundError, ArticleParseError
from .markdown_renderer import MarkdownRenderer

__all__ = ['ArticleRepository', 'ArticleNotFoundError', 'ArticleParseError', 'MarkdownRenderer']
