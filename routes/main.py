"""
Main Routes Blueprint

Handles the homepage and the per-type section pages.
"""

from flask import Blueprint, render_template, current_app

from extensions import get_article_repository

main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def home():
    """Homepage with the featured article, the next two, and type groups."""
    repository = get_article_repository()
    word_count = current_app.config['PREVIEW_WORD_COUNT']

    sorted_articles = repository.list_articles_sorted()
    grouped_articles = repository.group_articles_by_type()

    featured_article = None
    if sorted_articles:
        featured_article = repository.enrich_article(
            sorted_articles[0],
            word_count=word_count,
            fallback=current_app.config['FEATURED_PREVIEW_FALLBACK']
        )

    next_articles = [
        repository.enrich_article(
            article,
            word_count=word_count,
            fallback=current_app.config['PREVIEW_FALLBACK']
        )
        for article in sorted_articles[1:3]
    ]

    return render_template(
        "index.html",
        article_count=len(sorted_articles),
        featured_article=featured_article,
        next_articles=next_articles,
        grouped_articles=grouped_articles
    )


def _render_section(section):
    """Render the article list for one configured section."""
    repository = get_article_repository()
    article_type = current_app.config['ARTICLE_SECTIONS'][section]

    articles = [
        repository.enrich_article(
            article,
            word_count=current_app.config['PREVIEW_WORD_COUNT'],
            fallback=current_app.config['PREVIEW_FALLBACK']
        )
        for article in repository.list_articles_by_type(article_type)
    ]
    current_app.logger.info(f"Section '{section}' accessed - {len(articles)} articles")

    return render_template(
        "section.html",
        section=section,
        article_type=article_type,
        articles=articles
    )


@main_bp.route("/tutorials")
def tutorials():
    """Tutorial articles."""
    return _render_section('tutorials')


@main_bp.route("/misc")
def misc():
    """Everything that isn't a tutorial."""
    return _render_section('misc')
