"""
Application configuration with environment-specific settings.

Usage:
    from config import get_config
    app.config.from_object(get_config())
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory of the application
BASE_DIR = Path(__file__).parent.resolve()


class Config:
    """Base configuration with common settings."""

    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-insecure-key')

    # Path configuration
    ARTICLES_DIR = Path(os.environ.get('ARTICLES_DIR', BASE_DIR / 'articles'))
    ARTICLE_EXTENSION = '.md'
    STATIC_DIR = BASE_DIR / 'static'
    TEMPLATES_DIR = BASE_DIR / 'templates'

    # Preview settings
    PREVIEW_WORD_COUNT = 20
    PREVIEW_FALLBACK = "Preview unavailable..."
    FEATURED_PREVIEW_FALLBACK = "Mission briefing unavailable..."

    # Section page slug -> article_type shown on it
    ARTICLE_SECTIONS = {
        'tutorials': 'TUTORIALS',
        'misc': 'MISC',
    }

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = "200 per day;50 per hour"

    # Application settings
    JSON_SORT_KEYS = False


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    TESTING = False

    # Development-specific settings
    EXPLAIN_TEMPLATE_LOADING = False
    SEND_FILE_MAX_AGE_DEFAULT = 0  # Disable caching for development


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False
    TESTING = False

    # Production-specific settings
    PREFERRED_URL_SCHEME = 'https'

    # Must come from the environment; checked by create_app
    SECRET_KEY = os.environ.get('SECRET_KEY')


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG = True
    TESTING = True
    SECRET_KEY = 'test-secret-key-for-pytest'
    RATELIMIT_ENABLED = False


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env_name=None):
    """
    Get configuration class for specified environment.

    Args:
        env_name (str): Environment name (development/production/testing)
                       If None, uses FLASK_ENV environment variable

    Returns:
        Config class for the specified environment
    """
    if env_name is None:
        env_name = os.environ.get('FLASK_ENV', 'development')

    return config.get(env_name, config['default'])
