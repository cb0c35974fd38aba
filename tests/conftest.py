"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the article repository and the Flask
application using the application factory pattern with clean, isolated
test instances backed by a temporary articles directory.
"""

import pytest
from pathlib import Path


SAMPLE_ARTICLES = {
    'tower-defender-part-1.md': (
        "---\n"
        "title: Tower Defender Part 1\n"
        "date: 06-15-2024\n"
        "categories:\n"
        "  - TUTORIAL\n"
        "  - THREEJS\n"
        "article_type: TUTORIALS\n"
        "---\n"
        "\n"
        "# The Grid\n"
        "\n"
        "We start by laying out a **build grid** for the towers.\n"
    ),
    'jam-recap.md': (
        "---\n"
        "title: Jam Recap\n"
        "date: 03-02-2024\n"
        "category: GAME_JAM\n"
        "article_type: MISC\n"
        "---\n"
        "\n"
        "Forty-eight hours, one pixel art tank, and far too much coffee.\n"
    ),
    'untitled-notes.md': (
        "---\n"
        "categories: []\n"
        "---\n"
        "\n"
        "Notes without any metadata at all.\n"
    ),
}


def write_article(directory: Path, filename: str, text: str) -> Path:
    """Write one article file into the given directory."""
    path = directory / filename
    path.write_text(text, encoding='utf-8')
    return path


@pytest.fixture
def articles_dir(tmp_path):
    """Temporary articles directory populated with sample articles."""
    directory = tmp_path / 'articles'
    directory.mkdir()
    for filename, text in SAMPLE_ARTICLES.items():
        write_article(directory, filename, text)
    return directory


@pytest.fixture
def empty_articles_dir(tmp_path):
    """Temporary articles directory with no content."""
    directory = tmp_path / 'empty'
    directory.mkdir()
    return directory


@pytest.fixture
def repository(articles_dir):
    """ArticleRepository over the sample articles."""
    from services import ArticleRepository
    return ArticleRepository(articles_dir)


@pytest.fixture
def test_config(articles_dir):
    """Testing configuration pointed at the temporary articles directory."""
    from config import TestingConfig

    class ArticlesTestingConfig(TestingConfig):
        ARTICLES_DIR = articles_dir

    return ArticlesTestingConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern to create a clean instance
    for each test function.
    """
    from app import create_app
    app = create_app(test_config)

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    # Clean up
    ctx.pop()


@pytest.fixture
def client(app):
    """
    Flask test client for making HTTP requests.

    Provides a test client that can make requests to the application
    without running a live server.
    """
    return app.test_client()


@pytest.fixture
def sample_article():
    """Sample Article model for testing."""
    from models import Article
    return Article(
        id='test-article',
        title='Test Article',
        date='01-15-2024',
        categories=['DEVLOG'],
        article_type='MISC'
    )
