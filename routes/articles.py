"""
Article Routes Blueprint

Handles the article archive and single rendered articles.
"""

from flask import Blueprint, render_template, abort, current_app

from extensions import get_article_repository
from services import ArticleNotFoundError

articles_bp = Blueprint('articles', __name__, url_prefix='/articles')


@articles_bp.route("/")
def article_list():
    """Every article, newest first."""
    articles = get_article_repository().list_articles_sorted()
    current_app.logger.info(f"Archive accessed - {len(articles)} articles")
    return render_template("article_list.html", articles=articles)


@articles_bp.route("/<article_id>")
def article(article_id):
    """Display a single rendered article."""
    try:
        article_data = get_article_repository().get_article_content(article_id)
    except ArticleNotFoundError:
        current_app.logger.warning(f"Article not found: {article_id}")
        abort(404)

    current_app.logger.info(f"Article accessed: {article_id}")

    return render_template("article.html", article=article_data)
