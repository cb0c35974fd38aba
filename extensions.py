"""
Extensions module to avoid circular imports.
Should contain all Flask extension instances.
"""
from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Initialize extensions; default limits come from RATELIMIT_DEFAULT
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
)


def get_article_repository():
    """Return the ArticleRepository bound to the current application."""
    return current_app.extensions['article_repository']
