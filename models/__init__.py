"""
Models package for the Command Center.

Provides the data model for Markdown articles.
"""
from .article import Article, DATE_FORMAT, DEFAULT_ARTICLE_DATE, DEFAULT_ARTICLE_TYPE

__all__ = [
    'Article',
    'DATE_FORMAT',
    'DEFAULT_ARTICLE_DATE',
    'DEFAULT_ARTICLE_TYPE'
]
