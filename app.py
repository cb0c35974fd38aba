"""
Command Center - Game dev tutorials, jam write-ups and other transmissions
"""
from flask import Flask, render_template, request
import os
from config import get_config
from extensions import limiter
from services import ArticleRepository


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "script-src 'self' 'unsafe-inline'; "
        "style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; "
        "font-src 'self'; "
        "connect-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def page_not_found(e):
    """Custom 404 error page."""
    return render_template("404.html"), 404


def create_app(config_class=None):
    """
    Application factory.

    Args:
        config_class: Config class to load; defaults to the one selected by FLASK_ENV

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    if not app.config.get('SECRET_KEY'):
        raise ValueError(
            "SECRET_KEY environment variable is required!\n"
            "Generate one with: python -c 'import secrets; print(secrets.token_hex(32))'"
        )

    from utils.logger import setup_logger
    setup_logger(app)

    limiter.init_app(app)
    app.after_request(set_security_headers)

    # Content store
    app.extensions['article_repository'] = ArticleRepository(
        app.config['ARTICLES_DIR'],
        extension=app.config['ARTICLE_EXTENSION']
    )

    from routes import main_bp, articles_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(articles_bp)

    app.register_error_handler(404, page_not_found)

    app.logger.info(f"Serving articles from {app.config['ARTICLES_DIR']}")

    return app


if __name__ == "__main__":
    app = create_app()

    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    # Display startup information
    print("=" * 60)
    print("Command Center Starting")
    print(f"Environment: {env_name}")
    print(f"Debug Mode: {debug_mode}")
    print(f"Articles: {app.config['ARTICLES_DIR']}")
    print("=" * 60)

    if debug_mode and env_name == 'production':
        print("\nWARNING: Debug mode enabled in production!")
        print("This is a security risk. Set FLASK_DEBUG=false\n")

    # Get host and port from environment or use defaults
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)
