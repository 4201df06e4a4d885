"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its extensions,
configuration and middleware. All route handling is delegated to blueprints.
"""

import os
from datetime import datetime
from flask import Flask, render_template, request, jsonify, json
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db
from utils.errors import AppError, TransientError
from utils.ui_helpers import NAV_SECTIONS, get_theme, get_page_specific_class

# Import all blueprints
from blueprints.api import api_bp
from blueprints.pages import pages_bp

ERROR_TEMPLATES = {
    400: '400.html',
    404: '404.html',
    503: '503.html',
}


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional,
            defaults to FLASK_ENV)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        try:
            db.session.execute(text('SELECT 1'))
            database = 'ok'
        except SQLAlchemyError as e:
            db.session.rollback()
            app.logger.error(f"Health check database error: {str(e)}")
            database = 'unavailable'
        status = 200 if database == 'ok' else 503
        return {'status': 'ok' if status == 200 else 'degraded', 'database': database}, status

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    # Create tables if they don't exist
    with app.app_context():
        try:
            import models  # noqa: F401  registers the tables
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)
    app.register_blueprint(pages_bp)


def _wants_json():
    return request.path.startswith('/api/')


def _error_page(status_code):
    default = '400.html' if 400 <= status_code < 500 else '500.html'
    template = ERROR_TEMPLATES.get(status_code, default)
    return render_template(template, status_code=status_code), status_code


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(AppError)
    def app_error(e):
        if _wants_json():
            return jsonify(e.to_dict()), e.status_code
        return _error_page(e.status_code)

    @app.errorhandler(SQLAlchemyError)
    def database_error(e):
        db.session.rollback()
        app.logger.error(f"Database error on {request.method} {request.path}: {str(e)}")
        return app_error(TransientError('The service is temporarily unavailable. Please try again.'))

    @app.errorhandler(HTTPException)
    def http_error(e):
        if _wants_json():
            # Keep werkzeug's headers (e.g. Allow on 405), swap in a JSON body
            response = e.get_response()
            response.data = json.dumps({
                'error': (e.name or 'error').lower().replace(' ', '_'),
                'message': e.description,
                'fields': [],
                'retryable': False
            })
            response.content_type = 'application/json'
            return response
        return _error_page(e.code)

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if _wants_json():
            return jsonify({
                'error': 'internal_error',
                'message': 'Something went wrong. Please try again later.',
                'fields': [],
                'retryable': True
            }), 500
        return _error_page(500)


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Page-scoped view state: sections, theme and body class"""
        blueprint = request.blueprint
        endpoint = request.endpoint.split('.')[-1] if request.endpoint else None
        return {
            'nav_sections': NAV_SECTIONS,
            'current_theme': get_theme(request.args.get('theme')),
            'current_year': datetime.now().year,
            'page_class': get_page_specific_class(blueprint, endpoint)
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "img-src 'self' data: https:; "
            "style-src 'self' 'unsafe-inline'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
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
