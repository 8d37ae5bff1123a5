"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern with one blueprint per area of the site

This module initializes the Flask application with its extensions,
configuration and middleware. All route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, g
from config import get_config
from extensions import db

from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    # Fix PostgreSQL URL if needed
    db_url = app.config.get('SQLALCHEMY_DATABASE_URI')
    if db_url and db_url.startswith("postgres://"):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_url.replace(
            "postgres://", "postgresql://", 1)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register Jinja filters
    from utils.helpers import format_month_year, render_markdown
    app.jinja_env.filters['month_year'] = format_month_year
    app.jinja_env.filters['markdown'] = render_markdown

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio is running'}, 200

    app.logger.info(f"✓ Application created ({conf.__name__})")
    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except Exception as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(portfolio_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.before_request
    def before_request():
        """Decide once per request whether the first-visit overlay plays"""
        from utils.ui_helpers import consume_page_transition
        g.show_page_transition = consume_page_transition()

    @app.context_processor
    def inject_global_vars():
        """Site profile, theme and navigation for all templates"""
        from utils.ui_helpers import get_current_theme, get_nav_links

        current_theme = get_current_theme()
        on_home = request.endpoint == 'pages.index'

        site = {
            'owner': app.config['SITE_OWNER'],
            'short_name': app.config['SITE_SHORT_NAME'],
            'role': app.config['SITE_ROLE'],
            'tagline': app.config['SITE_TAGLINE'],
            'url': app.config['SITE_URL'],
            'description': app.config['SITE_DESCRIPTION'],
            'profile_image': app.config['PROFILE_IMAGE'],
            'og_image': app.config['OG_IMAGE'],
            'email': app.config['CONTACT_EMAIL'],
            'linkedin': app.config['LINKEDIN_URL'],
            'github': app.config['GITHUB_URL'],
        }

        default_meta = {
            'title': site['owner'],
            'description': site['description'],
        }

        return {
            'site': site,
            'default_meta': default_meta,
            'current_theme': current_theme,
            'is_dark': current_theme == 'dark',
            'nav_links': get_nav_links(on_home),
            'on_home': on_home,
            'current_year': datetime.now().year,
            'show_page_transition': g.get('show_page_transition', False),
            'page_transition_ms': app.config['PAGE_TRANSITION_MS'],
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src * data: blob:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        response.headers['Accept-CH'] = 'Sec-CH-Prefers-Color-Scheme'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
